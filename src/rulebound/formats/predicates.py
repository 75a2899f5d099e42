"""String format predicates: ``is_email``, ``is_url``, ``is_uuid``, ..."""

from __future__ import annotations

import ipaddress
import json
import re

from pydantic import AnyUrl, TypeAdapter
from pydantic import ValidationError as PydanticValidationError
from pydantic.networks import validate_email

_URL_ADAPTER: TypeAdapter[AnyUrl] = TypeAdapter(AnyUrl)

_ALPHA = re.compile(r"^[a-zA-Z]+$")
_DIGIT = re.compile(r"^[0-9]+$")
_ALPHANUMERIC = re.compile(r"^[a-zA-Z0-9]+$")
_INT = re.compile(r"^[-+]?(?:0|[1-9][0-9]*)$")
_FLOAT = re.compile(r"^[-+]?(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][-+]?[0-9]+)?$")
_HEXADECIMAL = re.compile(r"^[0-9a-fA-F]+$")
_HEX_COLOR = re.compile(r"^#?(?:[0-9a-fA-F]{3}|[0-9a-fA-F]{6})$")
_UUID = re.compile(
    r"^[0-9a-fA-F]{8}-[0-9a-fA-F]{4}-[0-9a-fA-F]{4}-[0-9a-fA-F]{4}-[0-9a-fA-F]{12}$"
)
_BASE64 = re.compile(
    r"^(?:[A-Za-z0-9+/]{4})*"
    r"(?:[A-Za-z0-9+/]{2}==|[A-Za-z0-9+/]{3}=|[A-Za-z0-9+/]{4})$"
)
_SEMVER = re.compile(
    r"^v?(?:0|[1-9]\d*)\.(?:0|[1-9]\d*)\.(?:0|[1-9]\d*)"
    r"(?:-[0-9A-Za-z-]+(?:\.[0-9A-Za-z-]+)*)?"
    r"(?:\+[0-9A-Za-z-]+(?:\.[0-9A-Za-z-]+)*)?$"
)


def is_email(value: str) -> bool:
    try:
        validate_email(value)
    except ValueError:
        return False
    return True


def is_url(value: str) -> bool:
    """Absolute URL with a scheme, as accepted by pydantic's ``AnyUrl``."""
    try:
        _URL_ADAPTER.validate_python(value)
    except PydanticValidationError:
        return False
    return True


def is_uuid(value: str) -> bool:
    return bool(_UUID.fullmatch(value))


def is_ip(value: str) -> bool:
    try:
        ipaddress.ip_address(value)
    except ValueError:
        return False
    return True


def is_ipv4(value: str) -> bool:
    try:
        ipaddress.IPv4Address(value)
    except ValueError:
        return False
    return True


def is_ipv6(value: str) -> bool:
    try:
        ipaddress.IPv6Address(value)
    except ValueError:
        return False
    return True


def is_alpha(value: str) -> bool:
    """English letters only."""
    return bool(_ALPHA.fullmatch(value))


def is_digit(value: str) -> bool:
    """ASCII digits only."""
    return bool(_DIGIT.fullmatch(value))


def is_alphanumeric(value: str) -> bool:
    return bool(_ALPHANUMERIC.fullmatch(value))


def is_utf_letter(value: str) -> bool:
    return value.isalpha()


def is_utf_digit(value: str) -> bool:
    return value.isdecimal()


def is_int(value: str) -> bool:
    return bool(_INT.fullmatch(value))


def is_float(value: str) -> bool:
    return bool(_FLOAT.fullmatch(value))


def is_lower_case(value: str) -> bool:
    return value == value.lower()


def is_upper_case(value: str) -> bool:
    return value == value.upper()


def is_hexadecimal(value: str) -> bool:
    return bool(_HEXADECIMAL.fullmatch(value))


def is_hex_color(value: str) -> bool:
    return bool(_HEX_COLOR.fullmatch(value))


def is_json(value: str) -> bool:
    try:
        json.loads(value)
    except ValueError:
        return False
    return True


def is_ascii(value: str) -> bool:
    return value.isascii()


def is_printable_ascii(value: str) -> bool:
    return all(" " <= ch <= "~" for ch in value)


def is_base64(value: str) -> bool:
    return bool(_BASE64.fullmatch(value))


def is_semver(value: str) -> bool:
    return bool(_SEMVER.fullmatch(value))


def is_port(value: str) -> bool:
    if not _DIGIT.fullmatch(value):
        return False
    return 0 < int(value) < 65536


def is_latitude(value: str) -> bool:
    return _in_float_range(value, 90.0)


def is_longitude(value: str) -> bool:
    return _in_float_range(value, 180.0)


def _in_float_range(value: str, limit: float) -> bool:
    if not is_float(value):
        return False
    return -limit <= float(value) <= limit
