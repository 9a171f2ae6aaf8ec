"""src/wireform/codecs/ndjson.py

Newline-delimited JSON encoding for bulk payloads.
"""

from typing import Any, Callable, Iterator, Sequence

__all__ = ["is_array", "iter_lines", "dumps"]


def is_array(items: Any) -> bool:
    """Whether ``items`` is an ordered sequence of documents."""
    return isinstance(items, (list, tuple))


def iter_lines(items: Sequence[Any], encode: Callable[[Any], str]) -> Iterator[str]:
    """
    Yield one newline-terminated line per document.

    Strings are taken as already-encoded JSON and pass through unchanged;
    everything else goes through ``encode``.
    """
    for item in items:
        if isinstance(item, str):
            yield item + "\n"
        else:
            yield encode(item) + "\n"


def dumps(items: Sequence[Any], encode: Callable[[Any], str]) -> str:
    """Encode a sequence of documents as NDJSON."""
    return "".join(iter_lines(items, encode))
