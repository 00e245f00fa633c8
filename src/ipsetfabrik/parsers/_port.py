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

"""Ports, protocols and ICMP/ICMPv6 type/code values."""

from __future__ import annotations

import logging
import socket
from collections.abc import Callable, Iterable
from typing import TYPE_CHECKING

from ipsetfabrik.core import (
    InvalidSyntax,
    ParseError,
    ProtocolFamilyMismatch,
    split_separator,
    string_to_u8,
    string_to_u16,
)
from ipsetfabrik.core.options import Family, Opt

if TYPE_CHECKING:
    from ipsetfabrik.core import Session

logger = logging.getLogger(__name__)

IPPROTO_ICMP = socket.IPPROTO_ICMP
IPPROTO_TCP = socket.IPPROTO_TCP
IPPROTO_UDP = socket.IPPROTO_UDP
IPPROTO_ICMPV6 = 58


def first_success(attempts: Iterable[Callable[[], int]]) -> int:
    """Return the result of the first attempt that does not fail.

    Failures of earlier attempts are discarded. If every attempt fails,
    the failure of the last one is raised.
    """
    errors: list[ParseError] = []
    for attempt in attempts:
        try:
            return attempt()
        except ParseError as e:
            errors.append(e)
    if not errors:
        raise ValueError('no parse attempts given')
    if len(errors) > 1:
        raise errors[-1] from errors[0]
    raise errors[0]


def _parse_portname(session: Session, text: str, proto: str) -> int:
    port = session.resolver.service_port(text, proto)
    if port is None:
        raise InvalidSyntax(f"cannot parse '{text}' as a {proto} port")
    return port


def parse_port(session: Session, opt: Opt, text: str, proto: str = 'TCP') -> None:
    """Parse a single port number or service name of *proto*."""
    port = first_success(
        [
            lambda: string_to_u16(text),
            lambda: _parse_portname(session, text, proto),
        ],
    )
    session.data.set(opt, port)


def parse_tcpudp_port(session: Session, opt: Opt, text: str, proto: str) -> None:
    """Parse a port name or number, or a dash separated range of them."""
    parts = split_separator(text, session.defaults.range_separator)
    if parts is None:
        parse_port(session, opt, text, proto)
        return
    # port-port
    start, end = parts
    parse_port(session, opt, start, proto)
    parse_port(session, Opt.PORT_TO, end, proto)


def parse_tcp_port(session: Session, opt: Opt, text: str) -> None:
    parse_tcpudp_port(session, opt, text, 'TCP')


def parse_single_tcp_port(session: Session, opt: Opt, text: str) -> None:
    parse_port(session, opt, text, 'TCP')


def parse_proto(session: Session, opt: Opt, text: str) -> None:
    """Parse a protocol name and store its number."""
    proto = session.resolver.protocol_number(text)
    if proto is None:
        raise InvalidSyntax(f"cannot parse '{text}' as a protocol name")
    if proto == 0:
        raise InvalidSyntax(f"Unsupported protocol '{text}'")
    session.data.set(opt, proto)


def _parse_icmp_typecode(session: Session, opt: Opt, text: str, label: str) -> None:
    parts = split_separator(text, session.defaults.cidr_separator)
    if parts is None:
        raise InvalidSyntax(f'cannot parse {text} as an {label} type/code')
    icmp_type, icmp_code = (string_to_u8(part) for part in parts)
    session.data.set(opt, (icmp_type << 8) | icmp_code)


def parse_icmp(session: Session, opt: Opt, text: str) -> None:
    """Parse an ICMP name or a ``type/code`` pair."""
    typecode = session.icmp.lookup_icmp(text)
    if typecode is None:
        _parse_icmp_typecode(session, opt, text, 'ICMP')
        return
    session.data.set(opt, typecode)


def parse_icmpv6(session: Session, opt: Opt, text: str) -> None:
    """Parse an ICMPv6 name or a ``type/code`` pair."""
    typecode = session.icmp.lookup_icmpv6(text)
    if typecode is None:
        _parse_icmp_typecode(session, opt, text, 'ICMPv6')
        return
    session.data.set(opt, typecode)


def parse_proto_port(session: Session, opt: Opt, text: str) -> None:
    """Parse an optional protocol and a port, separated by a colon.

    Without a protocol TCP is assumed. TCP and UDP take port names,
    numbers and ranges, ICMP and ICMPv6 take type/code values, any other
    protocol only the pseudo port ``0``.
    """
    data = session.data
    parts = split_separator(text, session.defaults.proto_separator)
    if parts is None:
        data.set(Opt.PROTO, IPPROTO_TCP)
        parse_tcpudp_port(session, opt, text, 'TCP')
        return

    # proto:port
    proto_name, port = parts
    parse_proto(session, Opt.PROTO, proto_name)
    proto = data.get(Opt.PROTO)
    family = data.family
    logger.debug('Protocol %s (%d), port %s', proto_name, proto, port)

    if proto in (IPPROTO_TCP, IPPROTO_UDP):
        parse_tcpudp_port(session, opt, port, proto_name)
    elif proto == IPPROTO_ICMP:
        if family != Family.INET:
            raise ProtocolFamilyMismatch('Protocol ICMP can be used with family INET only')
        parse_icmp(session, opt, port)
    elif proto == IPPROTO_ICMPV6:
        if family != Family.INET6:
            raise ProtocolFamilyMismatch(
                'Protocol ICMPv6 can be used with family INET6 only',
            )
        parse_icmpv6(session, opt, port)
    else:
        if port != '0':
            raise InvalidSyntax(
                f'Protocol {proto_name} can be used with pseudo port value 0 only.',
            )
        data.set(opt)
