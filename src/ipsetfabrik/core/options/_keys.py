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

"""Canonical option kind definitions.

This module provides the closed set of keys used by the attribute store
of a parse session. Using enums ensures:

1. Typos are caught at import time (AttributeError)
2. Keys can be used directly as dict keys (StrEnum inherits from str)
3. A single source of truth for option kind names shared by the parsers,
   the set type registry and the renderer

Example:
    from ipsetfabrik.core.options import Opt

    session.data.set(Opt.PORT, 80)
    port = session.data.get(Opt.PORT)
"""

from enum import IntEnum, StrEnum


class Opt(StrEnum):
    """Option kinds: one attribute slot each in the session data."""

    # Set and type identification
    SETNAME = 'setname'
    TYPENAME = 'typename'
    TYPE = 'type'
    FAMILY = 'family'

    # Addresses
    IP = 'ip'
    IP_TO = 'ip_to'
    CIDR = 'cidr'
    IP2 = 'ip2'
    CIDR2 = 'cidr2'
    ETHER = 'ether'

    # Ports and protocols
    PORT = 'port'
    PORT_TO = 'port_to'
    PROTO = 'proto'

    # Element extensions
    TIMEOUT = 'timeout'
    NETMASK = 'netmask'

    # list:set members
    NAME = 'name'
    NAMEREF = 'nameref'
    BEFORE = 'before'

    # rename/swap target
    SETNAME2 = 'setname2'

    # Create-time tuning
    HASHSIZE = 'hashsize'
    MAXELEM = 'maxelem'
    PROBES = 'probes'
    RESIZE = 'resize'
    GC = 'gc'
    SIZE = 'size'


# Companion slots written next to a primary address option.
CIDR_OPTION = {
    Opt.IP: Opt.CIDR,
    Opt.IP2: Opt.CIDR2,
}


class Family(IntEnum):
    """Address family; values follow the socket module's AF_* constants."""

    UNSPEC = 0
    INET = 2
    INET6 = 10

    @property
    def label(self) -> str:
        return {
            Family.UNSPEC: 'unspec',
            Family.INET: 'inet',
            Family.INET6: 'inet6',
        }[self]

    @property
    def ip_label(self) -> str:
        return 'IPv6' if self == Family.INET6 else 'IPv4'


class OutputMode(StrEnum):
    """Listing modes selectable with the output option."""

    PLAIN = 'plain'
    XML = 'xml'
    SAVE = 'save'
