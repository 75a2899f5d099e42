"""Ready-made string rules built on :mod:`rulebound.formats.predicates`."""

from __future__ import annotations

from ..errors import new_error
from ..rules.string import StringRule, new_string_rule_with_error
from . import predicates as p

ERR_EMAIL = new_error("validation_is_email", "must be a valid email address")
ERR_URL = new_error("validation_is_url", "must be a valid URL")
ERR_UUID = new_error("validation_is_uuid", "must be a valid UUID")
ERR_IP = new_error("validation_is_ip", "must be a valid IP address")
ERR_IPV4 = new_error("validation_is_ipv4", "must be a valid IPv4 address")
ERR_IPV6 = new_error("validation_is_ipv6", "must be a valid IPv6 address")
ERR_ALPHA = new_error("validation_is_alpha", "must contain English letters only")
ERR_DIGIT = new_error("validation_is_digit", "must contain digits only")
ERR_ALPHANUMERIC = new_error(
    "validation_is_alphanumeric", "must contain English letters and digits only"
)
ERR_UTF_LETTER = new_error(
    "validation_is_utf_letter", "must contain unicode letter characters only"
)
ERR_UTF_DIGIT = new_error(
    "validation_is_utf_digit", "must contain unicode decimal digits only"
)
ERR_INT = new_error("validation_is_int", "must be an integer number")
ERR_FLOAT = new_error("validation_is_float", "must be a floating point number")
ERR_LOWER_CASE = new_error("validation_is_lower_case", "must be in lower case")
ERR_UPPER_CASE = new_error("validation_is_upper_case", "must be in upper case")
ERR_HEXADECIMAL = new_error(
    "validation_is_hexadecimal", "must be a valid hexadecimal number"
)
ERR_HEX_COLOR = new_error(
    "validation_is_hex_color", "must be a valid hexadecimal color code"
)
ERR_JSON = new_error("validation_is_json", "must be in valid JSON format")
ERR_ASCII = new_error("validation_is_ascii", "must contain ASCII characters only")
ERR_PRINTABLE_ASCII = new_error(
    "validation_is_printable_ascii", "must contain printable ASCII characters only"
)
ERR_BASE64 = new_error("validation_is_base64", "must be encoded in Base64")
ERR_SEMVER = new_error("validation_is_semver", "must be a valid semantic version")
ERR_PORT = new_error("validation_is_port", "must be a valid port number")
ERR_LATITUDE = new_error("validation_is_latitude", "must be a valid latitude")
ERR_LONGITUDE = new_error("validation_is_longitude", "must be a valid longitude")

EMAIL: StringRule = new_string_rule_with_error(p.is_email, ERR_EMAIL)
URL: StringRule = new_string_rule_with_error(p.is_url, ERR_URL)
UUID: StringRule = new_string_rule_with_error(p.is_uuid, ERR_UUID)
IP: StringRule = new_string_rule_with_error(p.is_ip, ERR_IP)
IPV4: StringRule = new_string_rule_with_error(p.is_ipv4, ERR_IPV4)
IPV6: StringRule = new_string_rule_with_error(p.is_ipv6, ERR_IPV6)
ALPHA: StringRule = new_string_rule_with_error(p.is_alpha, ERR_ALPHA)
DIGIT: StringRule = new_string_rule_with_error(p.is_digit, ERR_DIGIT)
ALPHANUMERIC: StringRule = new_string_rule_with_error(
    p.is_alphanumeric, ERR_ALPHANUMERIC
)
UTF_LETTER: StringRule = new_string_rule_with_error(p.is_utf_letter, ERR_UTF_LETTER)
UTF_DIGIT: StringRule = new_string_rule_with_error(p.is_utf_digit, ERR_UTF_DIGIT)
INT: StringRule = new_string_rule_with_error(p.is_int, ERR_INT)
FLOAT: StringRule = new_string_rule_with_error(p.is_float, ERR_FLOAT)
LOWER_CASE: StringRule = new_string_rule_with_error(p.is_lower_case, ERR_LOWER_CASE)
UPPER_CASE: StringRule = new_string_rule_with_error(p.is_upper_case, ERR_UPPER_CASE)
HEXADECIMAL: StringRule = new_string_rule_with_error(
    p.is_hexadecimal, ERR_HEXADECIMAL
)
HEX_COLOR: StringRule = new_string_rule_with_error(p.is_hex_color, ERR_HEX_COLOR)
JSON: StringRule = new_string_rule_with_error(p.is_json, ERR_JSON)
ASCII: StringRule = new_string_rule_with_error(p.is_ascii, ERR_ASCII)
PRINTABLE_ASCII: StringRule = new_string_rule_with_error(
    p.is_printable_ascii, ERR_PRINTABLE_ASCII
)
BASE64: StringRule = new_string_rule_with_error(p.is_base64, ERR_BASE64)
SEMVER: StringRule = new_string_rule_with_error(p.is_semver, ERR_SEMVER)
PORT: StringRule = new_string_rule_with_error(p.is_port, ERR_PORT)
LATITUDE: StringRule = new_string_rule_with_error(p.is_latitude, ERR_LATITUDE)
LONGITUDE: StringRule = new_string_rule_with_error(p.is_longitude, ERR_LONGITUDE)
