"""src/wireform/codecs/jsonlib.py

JSON encoding and decoding for Wireform.

Text produced here is compact (no whitespace after separators), keeps
non-ASCII characters unescaped and never contains ``NaN`` or ``Infinity``.
Surrogate code points, which have no UTF-8 form, are written as ``\\uXXXX``
escapes so the text can always be sent as UTF-8.
"""

import datetime
import decimal
import json
import re
import uuid
from typing import Any, Callable, Dict, List, Optional, Tuple, Union

__all__ = ["PairsHook", "WireEncoder", "dumps", "loads"]

PairsHook = Callable[[List[Tuple[str, Any]]], Dict[str, Any]]

_SURROGATE = re.compile("[\ud800-\udfff]")


class WireEncoder(json.JSONEncoder):
    """JSON encoder aware of the scalar types API payloads commonly carry."""

    def default(self, o: Any) -> Any:
        if isinstance(o, (datetime.datetime, datetime.date, datetime.time)):
            return o.isoformat()
        if isinstance(o, uuid.UUID):
            return str(o)
        if isinstance(o, decimal.Decimal):
            return float(o)
        if isinstance(o, (set, frozenset)):
            return list(o)
        return super().default(o)


def dumps(value: Any) -> str:
    """
    Encode a value as JSON text.

    Raises:
        ValueError: On circular references or non-finite floats.
        TypeError: When the value holds an object with no JSON form.
    """
    text = json.dumps(
        value,
        cls=WireEncoder,
        separators=(",", ":"),
        ensure_ascii=False,
        allow_nan=False,
        check_circular=True,
    )
    # Surrogates only occur inside string literals
    return _SURROGATE.sub(lambda match: f"\\u{ord(match.group()):04x}", text)


def _reject_constant(name: str) -> Any:
    raise ValueError(f"Unexpected token {name} in JSON")


def loads(
    text: Union[str, bytes, bytearray],
    object_pairs_hook: Optional[PairsHook] = None,
) -> Any:
    """
    Parse JSON text.

    Args:
        text: JSON document; bytes are decoded by the parser (UTF-8/16/32).
        object_pairs_hook: Called with the key/value pairs of every object,
            innermost first. Its return value replaces the object.

    Raises:
        ValueError: On syntax errors, including ``NaN``/``Infinity`` literals,
            and on anything raised by ``object_pairs_hook``.
    """
    return json.loads(
        text,
        parse_constant=_reject_constant,
        object_pairs_hook=object_pairs_hook,
    )
