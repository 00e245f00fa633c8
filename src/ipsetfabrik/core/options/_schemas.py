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

"""Typed parser settings with shared defaults.

The dataclass below is the single source of truth for:

1. The separator characters recognised inside a token
2. Length and numeric limits
3. Family-dependent CIDR and netmask bounds

A session carries one instance; ``PARSER_DEFAULTS`` is what a session
gets unless the caller passes its own.
"""

from dataclasses import dataclass

from ipsetfabrik.core.options._keys import Family


@dataclass(frozen=True)
class ParserDefaults:
    """Default values for the argument parsers."""

    # Separators (single characters; a string lists alternatives)
    cidr_separator: str = '/'
    range_separator: str = '-'
    elem_separator: str = ','
    name_separator: str = ','
    proto_separator: str = ':'

    # Set and type names must be strictly shorter than this
    max_name_len: int = 32

    # Family assumed by address parsers when none is given yet
    default_family: Family = Family.INET

    # Upper bound reported by the unbounded numeric parser
    number_max: int = 2**64 - 1

    # CIDR prefix lengths (inclusive)
    cidr_max_inet: int = 32
    cidr_max_inet6: int = 128

    # Netmask option bounds (inclusive)
    netmask_inet: tuple[int, int] = (1, 31)
    netmask_inet6: tuple[int, int] = (4, 124)

    def cidr_max(self, family: Family) -> int:
        return self.cidr_max_inet6 if family == Family.INET6 else self.cidr_max_inet

    def netmask_bounds(self, family: Family) -> tuple[int, int]:
        return self.netmask_inet6 if family == Family.INET6 else self.netmask_inet


PARSER_DEFAULTS = ParserDefaults()
