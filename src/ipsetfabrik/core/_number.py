# Copyright (C) 2026 Linuxfabrik <info@linuxfabrik.ch>
#
# This program is free software; you can redistribute it and/or modify
# it under the terms of the GNU General Public License as published by
# the Free Software Foundation; either version 2 of the License, or
# (at your option) any later version.
#
# On Debian systems, the complete text of the GNU General Public License
# version 2 can be found in /usr/share/common-licenses/GPL-2.
#
# SPDX-License-Identifier: GPL-2.0-or-later

"""Bounded number parsing with automatic base detection.

``0x12`` is hexadecimal, ``012`` is octal, anything else decimal.
Surrounding whitespace and a leading ``+`` are accepted, any other
trailing characters are not.
"""

from __future__ import annotations

import re

from ._errors import NotANumber, OutOfRange
from .options import PARSER_DEFAULTS

_NUMBER_RE = re.compile(
    r'\s*\+?(?:0[xX](?P<hex>[0-9a-fA-F]+)|0(?P<oct>[0-7]+)|(?P<dec>0|[1-9][0-9]*))\s*',
)

U8_MAX = 0xFF
U16_MAX = 0xFFFF
U32_MAX = 0xFFFFFFFF


def string_to_number(text: str, minimum: int = 0, maximum: int | None = None) -> int:
    """Parse *text* as an unsigned integer within ``[minimum, maximum]``.

    A *maximum* of ``None`` means the natural maximum of the parser.
    """
    m = _NUMBER_RE.fullmatch(text)
    if m is None:
        raise NotANumber(f"'{text}' is invalid as number")
    if m['hex'] is not None:
        number = int(m['hex'], 16)
    elif m['oct'] is not None:
        number = int(m['oct'], 8)
    else:
        number = int(m['dec'], 10)

    upper = PARSER_DEFAULTS.number_max if maximum is None else maximum
    if not minimum <= number <= upper:
        raise OutOfRange(text, minimum, upper)
    return number


def string_to_u8(text: str) -> int:
    return string_to_number(text, 0, U8_MAX)


def string_to_u16(text: str) -> int:
    return string_to_number(text, 0, U16_MAX)


def string_to_u32(text: str) -> int:
    return string_to_number(text, 0, U32_MAX)


def string_to_cidr(text: str, minimum: int, maximum: int) -> int:
    """Parse a prefix length and re-check it against family bounds."""
    cidr = string_to_u8(text)
    if not minimum <= cidr <= maximum:
        raise OutOfRange(text, minimum, maximum)
    return cidr
