"""src/wireform/codecs/guard.py

Prototype-poisoning guard for parsed JSON.

JavaScript consumers of a parsed document can be tricked into mutating shared
prototypes through a ``__proto__`` key or a ``constructor`` -> ``prototype``
path. The guard rejects such documents while they are parsed, at any depth.
"""

from typing import Any, Dict, List, Optional, Tuple

from wireform.codecs.jsonlib import PairsHook

__all__ = [
    "PROTO_KEY",
    "CONSTRUCTOR_KEY",
    "PROTOTYPE_KEY",
    "PoisonedKeyError",
    "build_pairs_hook",
]

PROTO_KEY = "__proto__"
CONSTRUCTOR_KEY = "constructor"
PROTOTYPE_KEY = "prototype"


class PoisonedKeyError(ValueError):
    """A parsed object carries a forbidden prototype property."""

    def __init__(self, key: str) -> None:
        super().__init__(f"Object contains forbidden prototype property: {key!r}")
        self.key = key


def build_pairs_hook(proto: bool, constructor: bool) -> Optional[PairsHook]:
    """
    Build an ``object_pairs_hook`` rejecting the selected poisoning vectors.

    Args:
        proto: Reject objects holding a ``__proto__`` key.
        constructor: Reject objects whose ``constructor`` key maps to an
            object holding a ``prototype`` key.

    Returns:
        The hook, or None when neither vector is guarded.
    """
    if not (proto or constructor):
        return None

    def _check_pairs(pairs: List[Tuple[str, Any]]) -> Dict[str, Any]:
        # Every pair is checked, so duplicate keys cannot hide a sentinel
        for key, value in pairs:
            if proto and key == PROTO_KEY:
                raise PoisonedKeyError(key)
            if (
                constructor
                and key == CONSTRUCTOR_KEY
                and isinstance(value, dict)
                and PROTOTYPE_KEY in value
            ):
                raise PoisonedKeyError(f"{CONSTRUCTOR_KEY}.{PROTOTYPE_KEY}")
        return dict(pairs)

    return _check_pairs
