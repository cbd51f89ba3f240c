"""Number parsing helpers and JSON type names."""

from __future__ import annotations

import math
import re
from enum import IntEnum
from typing import Union

INT64_MAX = (1 << 63) - 1
INT64_MIN = -(1 << 63)

_C_SPACE = " \t\n\v\f\r"

_INT_RE = re.compile(r"[+-]?[0-9]+")

_DOUBLE_RE = re.compile(
    r"""
    (?P<sign>[+-]?)
    (?:
        (?P<hex>0[xX](?:[0-9a-fA-F]+\.?[0-9a-fA-F]*|\.[0-9a-fA-F]+)(?:[pP][+-]?[0-9]+)?)
      | (?P<inf>[iI][nN][fF](?:[iI][nN][iI][tT][yY])?)
      | (?P<nan>[nN][aA][nN](?:\([0-9A-Za-z_]*\))?)
      | (?P<dec>(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?)
    )
    """,
    re.VERBOSE,
)


class JsonType(IntEnum):
    """The kinds of JSON value."""

    NULL = 0
    BOOLEAN = 1
    DOUBLE = 2
    INT = 3
    OBJECT = 4
    ARRAY = 5
    STRING = 6


_TYPE_NAMES = {
    JsonType.NULL: "null",
    JsonType.BOOLEAN: "boolean",
    JsonType.DOUBLE: "double",
    JsonType.INT: "int",
    JsonType.OBJECT: "object",
    JsonType.ARRAY: "array",
    JsonType.STRING: "string",
}


def _as_text(text: Union[str, bytes]) -> str:
    return text.decode("utf-8", "replace") if isinstance(text, bytes) else text


def parse_int64(text: Union[str, bytes]) -> int:
    """Parse a leading decimal integer, clamped to the signed 64-bit range.

    Leading whitespace is skipped and trailing characters are ignored.
    Raises ValueError if no integer is found.
    """
    s = _as_text(text).lstrip(_C_SPACE)
    match = _INT_RE.match(s)
    if match is None:
        raise ValueError(f"no integer found in {text!r}")
    value = int(match.group())
    return max(INT64_MIN, min(INT64_MAX, value))


def parse_double(text: Union[str, bytes]) -> float:
    """Parse a leading floating-point number.

    Accepts decimal and hexadecimal forms, ``inf``/``infinity`` and
    ``nan``, ignoring leading whitespace and trailing characters.
    Raises ValueError if no number is found.
    """
    s = _as_text(text).lstrip(_C_SPACE)
    match = _DOUBLE_RE.match(s)
    if match is None:
        raise ValueError(f"no number found in {text!r}")
    negative = match.group("sign") == "-"
    if match.group("hex") is not None:
        value = float.fromhex(match.group("hex"))
    elif match.group("inf") is not None:
        value = math.inf
    elif match.group("nan") is not None:
        value = math.nan
    else:
        value = float(match.group("dec"))
    return -value if negative else value


def type_to_name(json_type: Union[JsonType, int]) -> str:
    """Return the name of a JSON type, such as "int" or "object".

    Raises ValueError if ``json_type`` is not a known type.
    """
    try:
        kind = JsonType(json_type)
    except ValueError:
        raise ValueError(
            f"type {json_type!r} is out of range [0,{len(_TYPE_NAMES)}]"
        ) from None
    return _TYPE_NAMES[kind]