import re
import struct
from collections.abc import Callable
from datetime import datetime, timedelta, timezone
from functools import partial
from typing import Any

from argvmap.annotations import is_string_list
from argvmap.exceptions import InvalidSyntaxError, OutOfRangeError
from argvmap.types import Bits

_TRUE = frozenset({"1", "t", "T", "TRUE", "true", "True"})
_FALSE = frozenset({"0", "f", "F", "FALSE", "false", "False"})

_INT_RE = re.compile(r"[+-]?[0-9]+")
_UINT_RE = re.compile(r"[0-9]+")
_FLOAT_RE = re.compile(r"[+-]?([0-9]+\.?[0-9]*|\.[0-9]+)([eE][+-]?[0-9]+)?")
_FLOAT_SPECIAL_RE = re.compile(r"[+-]?(inf|infinity|nan)", re.IGNORECASE)
_RFC3339_RE = re.compile(
    r"(?P<year>\d{4})-(?P<month>\d{2})-(?P<day>\d{2})[Tt]"
    r"(?P<hour>\d{2}):(?P<minute>\d{2}):(?P<second>\d{2})(?:\.(?P<fraction>\d+))?"
    r"(?P<tz>[Zz]|(?P<tz_sign>[+-])(?P<tz_hour>\d{2}):(?P<tz_minute>\d{2}))"
)

DEFAULT_INT_BITS = 64
DEFAULT_FLOAT_BITS = 64


def _exceeds_digits(s: str, size: int) -> bool:
    """More decimal digits than ``size`` bits can hold; checked before :class:`int` sees the string."""
    return len(s.lstrip("+-").lstrip("0")) > size // 3 + 1


def parse_bool(s: str) -> bool:
    if s in _TRUE:
        return True
    elif s in _FALSE:
        return False
    raise InvalidSyntaxError("parse_bool", s)


def parse_int(s: str, size: int = DEFAULT_INT_BITS) -> int:
    """Parse a base-10 signed integer that must fit in ``size`` bits."""
    if not _INT_RE.fullmatch(s):
        raise InvalidSyntaxError("parse_int", s)
    if _exceeds_digits(s, size):
        raise OutOfRangeError("parse_int", s)
    value = int(s)
    limit = 1 << (size - 1)
    if not -limit <= value < limit:
        raise OutOfRangeError("parse_int", s)
    return value


def parse_uint(s: str, size: int = DEFAULT_INT_BITS) -> int:
    """Parse a base-10 unsigned integer that must fit in ``size`` bits.

    Signs are not accepted, not even ``+``.
    """
    if not _UINT_RE.fullmatch(s):
        raise InvalidSyntaxError("parse_uint", s)
    if _exceeds_digits(s, size):
        raise OutOfRangeError("parse_uint", s)
    value = int(s)
    if value >= 1 << size:
        raise OutOfRangeError("parse_uint", s)
    return value


def parse_float(s: str, size: int = DEFAULT_FLOAT_BITS) -> float:
    """Parse a base-10 float, rounded to ``size``-bit precision."""
    if _FLOAT_SPECIAL_RE.fullmatch(s):
        return float(s)
    if not _FLOAT_RE.fullmatch(s):
        raise InvalidSyntaxError("parse_float", s)

    value = float(s)
    if value in (float("inf"), float("-inf")):
        raise OutOfRangeError("parse_float", s)
    if size == 32:
        try:
            value = struct.unpack("f", struct.pack("f", value))[0]
        except OverflowError:
            raise OutOfRangeError("parse_float", s) from None
    return value


def parse_rfc3339(s: str) -> datetime:
    """Parse an RFC-3339 timestamp into a timezone-aware :class:`~datetime.datetime`.

    Fractional seconds beyond microsecond resolution are truncated.
    """
    match = _RFC3339_RE.fullmatch(s)
    if not match:
        raise InvalidSyntaxError("parse_rfc3339", s)

    if match["tz"] in ("Z", "z"):
        tz = timezone.utc
    else:
        hours, minutes = int(match["tz_hour"]), int(match["tz_minute"])
        if hours > 23 or minutes > 59:
            raise OutOfRangeError("parse_rfc3339", s)
        offset = timedelta(hours=hours, minutes=minutes)
        tz = timezone(-offset if match["tz_sign"] == "-" else offset)

    fraction = (match["fraction"] or "")[:6].ljust(6, "0")
    try:
        return datetime(
            int(match["year"]),
            int(match["month"]),
            int(match["day"]),
            int(match["hour"]),
            int(match["minute"]),
            int(match["second"]),
            int(fraction),
            tzinfo=tz,
        )
    except ValueError:
        raise OutOfRangeError("parse_rfc3339", s) from None


def parse_string_list(s: str) -> list[str]:
    """Split a comma-separated value, stripping whitespace from each element.

    An empty string yields an empty list.
    """
    if not s:
        return []
    return [x.strip() for x in s.split(",")]


def _identity(s: str) -> str:
    return s


# Types whose conversion does not depend on a bit-width.
_converters: dict[Any, Callable[[str], Any]] = {
    datetime: parse_rfc3339,
    bool: parse_bool,
    str: _identity,
}


def get_converter(hint: Any, bits: Bits | None = None) -> Callable[[str], Any] | None:
    """Built-in conversion function for a resolved field type.

    Returns :obj:`None` if the type has no built-in conversion.
    """
    if hint is int:
        if bits is None:
            return partial(parse_int, size=DEFAULT_INT_BITS)
        return partial(parse_int if bits.signed else parse_uint, size=bits.size)
    elif hint is float:
        return partial(parse_float, size=bits.size if bits else DEFAULT_FLOAT_BITS)
    elif is_string_list(hint):
        return parse_string_list
    try:
        return _converters.get(hint)
    except TypeError:
        # Unhashable hint.
        return None
