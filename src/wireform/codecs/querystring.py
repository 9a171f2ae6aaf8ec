"""src/wireform/codecs/querystring.py

Query-string encoding for Wireform.

Escaping follows Node's ``querystring.escape`` table so that a mapping and
the string already encoded from it produce identical bytes: UTF-8 percent
encoding with ``A-Z a-z 0-9 - _ . ~ ! * ' ( )`` left as-is and space encoded
as ``%20``.
"""

import datetime
import decimal
import math
import urllib.parse
from typing import Any, Mapping

__all__ = ["SAFE_CHARS", "escape", "format_number", "format_value", "encode"]

# urllib.parse.quote always keeps letters, digits and "_.-~"
SAFE_CHARS = "!*'()"


def escape(text: str) -> str:
    """
    Percent-encode a key or value.

    Undecodable bytes carried as surrogate escapes are written back as the
    original raw bytes.
    """
    return urllib.parse.quote(text, safe=SAFE_CHARS, errors="surrogateescape")


def format_number(value: float) -> str:
    """
    Render a finite float the way JavaScript's ``String(number)`` does.

    Plain notation is used while the decimal point sits within 21 digits
    and no more than 6 zeros follow it; otherwise ``1e-7``/``1.5e+21``.
    """
    if value == 0:
        return "0"
    sign, digits, exponent = decimal.Decimal(repr(value)).normalize().as_tuple()
    text = "".join(str(digit) for digit in digits)
    size = len(text)
    point = int(exponent) + size

    if size <= point <= 21:
        rendered = text + "0" * (point - size)
    elif 0 < point <= 21:
        rendered = f"{text[:point]}.{text[point:]}"
    elif -6 < point <= 0:
        rendered = "0." + "0" * -point + text
    else:
        power = point - 1
        mantissa = text if size == 1 else f"{text[0]}.{text[1:]}"
        rendered = f"{mantissa}e{'+' if power > 0 else '-'}{abs(power)}"

    return "-" + rendered if sign else rendered


def _format_scalar(value: Any) -> str:
    # pylint: disable=too-many-return-statements
    if value is None:
        return ""
    if isinstance(value, str):
        return value
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, int):
        return str(value)
    if isinstance(value, float):
        if not math.isfinite(value):
            return ""
        return format_number(value)
    if isinstance(value, (bytes, bytearray)):
        return bytes(value).decode("utf-8", errors="surrogateescape")
    if isinstance(value, (datetime.date, datetime.time)):
        return value.isoformat()
    if isinstance(value, (list, tuple)):
        return format_value(value)
    return ""


def format_value(value: Any) -> str:
    """
    Render a parameter value as unescaped text.

    Lists and tuples are comma-joined into a single value, nested ones
    flattened into the same list; unsupported objects render as an empty
    string.
    """
    if isinstance(value, (list, tuple)):
        return ",".join(_format_scalar(item) for item in value)
    return _format_scalar(value)


def encode(params: Mapping[Any, Any]) -> str:
    """
    Encode a parameter mapping as ``key=value`` pairs joined by ``&``.

    Keys whose value is None are left out entirely.
    """
    pairs = []
    for key, value in params.items():
        if value is None:
            continue
        pairs.append(f"{escape(str(key))}={escape(format_value(value))}")
    return "&".join(pairs)
