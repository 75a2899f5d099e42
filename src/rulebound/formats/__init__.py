"""
Common string formats.

Usage::

    from rulebound import REQUIRED, validate
    from rulebound.formats import EMAIL, URL

    validate("someone@example.com", REQUIRED, EMAIL)

Each rule treats an empty string as valid and fails values that are
neither ``str`` nor ``bytes``. The predicates in
:mod:`rulebound.formats.predicates` can be reused with
:func:`~rulebound.rules.string.new_string_rule`.
"""

from __future__ import annotations

from .rules import (
    ALPHA,
    ALPHANUMERIC,
    ASCII,
    BASE64,
    DIGIT,
    EMAIL,
    FLOAT,
    HEX_COLOR,
    HEXADECIMAL,
    INT,
    IP,
    IPV4,
    IPV6,
    JSON,
    LATITUDE,
    LONGITUDE,
    LOWER_CASE,
    PORT,
    PRINTABLE_ASCII,
    SEMVER,
    UPPER_CASE,
    URL,
    UTF_DIGIT,
    UTF_LETTER,
    UUID,
)

__all__ = [
    "ALPHA",
    "ALPHANUMERIC",
    "ASCII",
    "BASE64",
    "DIGIT",
    "EMAIL",
    "FLOAT",
    "HEXADECIMAL",
    "HEX_COLOR",
    "INT",
    "IP",
    "IPV4",
    "IPV6",
    "JSON",
    "LATITUDE",
    "LONGITUDE",
    "LOWER_CASE",
    "PORT",
    "PRINTABLE_ASCII",
    "SEMVER",
    "UPPER_CASE",
    "URL",
    "UTF_DIGIT",
    "UTF_LETTER",
    "UUID",
]
