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

"""Argument parsers turning option values into session attributes.

Every parser has the signature ``parser(session, opt, text) -> None``.
On success it writes the documented option kinds into
``session.data``; on failure it raises a ``ParseError`` subclass.
"""

from ._address import (
    parse_ip,
    parse_ip4_single6,
    parse_ipnet,
    parse_iprange,
    parse_iptimeout,
    parse_net,
    parse_netrange,
    parse_range,
    parse_single_ip,
)
from ._elem import call_parser, parse_elem
from ._option import (
    parse_ether,
    parse_family,
    parse_flag,
    parse_ignored,
    parse_netmask,
    parse_output,
    parse_typename,
    parse_uint8,
    parse_uint32,
)
from ._port import (
    first_success,
    parse_icmp,
    parse_icmpv6,
    parse_port,
    parse_proto,
    parse_proto_port,
    parse_single_tcp_port,
    parse_tcp_port,
    parse_tcpudp_port,
)
from ._setname import (
    MIXED_NAMEREF,
    parse_after,
    parse_before,
    parse_name_compat,
    parse_setname,
)

# Parsers that can be bound to an element position or used as a compat
# parser by name in the set type definitions.
PARSERS = {
    'parse_ether': parse_ether,
    'parse_icmp': parse_icmp,
    'parse_icmpv6': parse_icmpv6,
    'parse_ip': parse_ip,
    'parse_ip4_single6': parse_ip4_single6,
    'parse_ipnet': parse_ipnet,
    'parse_iprange': parse_iprange,
    'parse_iptimeout': parse_iptimeout,
    'parse_name_compat': parse_name_compat,
    'parse_net': parse_net,
    'parse_netrange': parse_netrange,
    'parse_proto_port': parse_proto_port,
    'parse_range': parse_range,
    'parse_setname': parse_setname,
    'parse_single_ip': parse_single_ip,
    'parse_single_tcp_port': parse_single_tcp_port,
    'parse_tcp_port': parse_tcp_port,
    'parse_uint8': parse_uint8,
    'parse_uint32': parse_uint32,
}

__all__ = [
    'MIXED_NAMEREF',
    'PARSERS',
    'call_parser',
    'first_success',
    'parse_after',
    'parse_before',
    'parse_elem',
    'parse_ether',
    'parse_family',
    'parse_flag',
    'parse_icmp',
    'parse_icmpv6',
    'parse_ignored',
    'parse_ip',
    'parse_ip4_single6',
    'parse_ipnet',
    'parse_iprange',
    'parse_iptimeout',
    'parse_name_compat',
    'parse_net',
    'parse_netmask',
    'parse_netrange',
    'parse_output',
    'parse_port',
    'parse_proto',
    'parse_proto_port',
    'parse_range',
    'parse_setname',
    'parse_single_ip',
    'parse_single_tcp_port',
    'parse_tcp_port',
    'parse_tcpudp_port',
    'parse_typename',
    'parse_uint8',
    'parse_uint32',
]
