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

"""IPv4/IPv6 addresses, networks and ranges.

Hostnames are resolved, but only the first address returned by the
resolver is used. If the family is not set yet in the session, the
default family (IPv4) is assumed and stored.

The variants differ only in which shapes they accept:

================  =======  =========  ===========
parser            address  IP/cidr    IP-IP
================  =======  =========  ===========
parse_ip          yes      yes        yes
parse_single_ip   yes      /32, /128  no
parse_net         no       yes        no
parse_range       no       no         yes
parse_netrange    no       yes        yes
parse_iprange     yes      no         yes
parse_ipnet       yes      yes        no
================  =======  =========  ===========
"""

from __future__ import annotations

import enum
import ipaddress
import logging
from typing import TYPE_CHECKING

from ipsetfabrik.core import (
    AddressFamilyMismatch,
    InvalidSyntax,
    MissingSeparator,
    ResolutionError,
    find_separator,
    split_separator,
    string_to_cidr,
    string_to_u32,
)
from ipsetfabrik.core.options import CIDR_OPTION, Family, Opt

if TYPE_CHECKING:
    from ipsetfabrik.core import Session

logger = logging.getLogger(__name__)


class AddrType(enum.Enum):
    ANY = 'any'
    PLAIN = 'plain'
    NET = 'net'
    RANGE = 'range'


def session_family(session: Session) -> Family:
    """Return the session family, storing the default if unspecified."""
    family = session.data.family
    if family == Family.UNSPEC:
        family = session.defaults.default_family
        session.data.set_family(family)
    return family


def _cidr_separator(session: Session, text: str) -> int | None:
    return find_separator(text, session.defaults.cidr_separator)


def _range_separator(session: Session, text: str) -> int | None:
    return find_separator(text, session.defaults.range_separator)


def _is_host_cidr(session: Session, text: str, family: Family) -> bool:
    pos = _cidr_separator(session, text)
    return pos is not None and text[pos + 1 :] == str(session.defaults.cidr_max(family))


def _resolve(session: Session, opt: Opt, host: str, family: Family) -> None:
    """Store the address of *host* under *opt*."""
    try:
        literal = ipaddress.ip_address(host)
    except ValueError:
        literal = None

    if literal is not None:
        wanted = 6 if family == Family.INET6 else 4
        if literal.version != wanted:
            msg = (
                f'{host} is an IPv{literal.version} address, '
                f'but the family is {family.label}'
            )
            raise AddressFamilyMismatch(msg)
        session.data.set(opt, literal.packed)
        return

    addresses = session.resolver.addresses(host, family)
    if not addresses:
        msg = f'cannot parse {host}: {family.ip_label} address could not be resolved'
        raise ResolutionError(msg)
    if len(addresses) > 1:
        session.warning(
            f'{host} resolves to multiple addresses: '
            'using only the first one returned by the resolver',
        )
    session.data.set(opt, addresses[0])


def _parse_ipaddr(session: Session, opt: Opt, text: str, family: Family) -> None:
    cidr_pos = _cidr_separator(session, text)
    if cidr_pos is not None:
        # IP/mask
        host, mask = text[:cidr_pos], text[cidr_pos + 1 :]
        cidr = string_to_cidr(mask, 0, session.defaults.cidr_max(family))
        _resolve(session, opt, host, family)
        session.data.set(CIDR_OPTION.get(opt, Opt.CIDR2), cidr)
        return

    parts = split_separator(text, session.defaults.range_separator)
    if parts is None:
        _resolve(session, opt, text, family)
        return

    # IP-IP
    start, end = parts
    logger.debug('Range %s - %s', start, end)
    _resolve(session, opt, start, family)
    _resolve(session, Opt.IP_TO, end, family)


def _parse_ip(session: Session, opt: Opt, text: str, addrtype: AddrType) -> None:
    family = session_family(session)
    has_cidr = _cidr_separator(session, text) is not None
    has_range = _range_separator(session, text) is not None

    if addrtype == AddrType.PLAIN:
        if has_range or (has_cidr and not _is_host_cidr(session, text, family)):
            raise InvalidSyntax(f'plain IP address must be supplied: {text}')
        if has_cidr:
            text = text[: _cidr_separator(session, text)]
    elif addrtype == AddrType.NET:
        if not has_cidr or has_range:
            raise InvalidSyntax(f'IP/netblock must be supplied: {text}')
    elif addrtype == AddrType.RANGE:
        if not has_range or has_cidr:
            raise InvalidSyntax(f'IP-IP range must be supplied: {text}')

    _parse_ipaddr(session, opt, text, family)


def parse_ip(session: Session, opt: Opt, text: str) -> None:
    """Parse an address, address range or netblock."""
    _parse_ip(session, opt, text, AddrType.ANY)


def parse_single_ip(session: Session, opt: Opt, text: str) -> None:
    """Parse a single address; a host netmask (/32, /128) is accepted."""
    _parse_ip(session, opt, text, AddrType.PLAIN)


def parse_net(session: Session, opt: Opt, text: str) -> None:
    """Parse an address/cidr pattern."""
    _parse_ip(session, opt, text, AddrType.NET)


def parse_range(session: Session, opt: Opt, text: str) -> None:
    """Parse an address range; start and end always go to ip and ip_to."""
    _parse_ip(session, Opt.IP, text, AddrType.RANGE)


def parse_netrange(session: Session, opt: Opt, text: str) -> None:
    """Parse an address/cidr pattern or an address range."""
    has_cidr = _cidr_separator(session, text) is not None
    has_range = _range_separator(session, text) is not None
    if has_cidr == has_range:
        raise InvalidSyntax(f'IP/cidr or IP-IP range must be specified: {text}')
    _parse_ip(session, opt, text, AddrType.ANY)


def parse_iprange(session: Session, opt: Opt, text: str) -> None:
    """Parse an address or an address range."""
    if _cidr_separator(session, text) is not None:
        raise InvalidSyntax(f'IP address or IP-IP range must be specified: {text}')
    _parse_ip(session, opt, text, AddrType.ANY)


def parse_ipnet(session: Session, opt: Opt, text: str) -> None:
    """Parse an address or an address/cidr pattern."""
    if _range_separator(session, text) is not None:
        raise InvalidSyntax(f'IP address or IP/cidr must be specified: {text}')
    _parse_ip(session, opt, text, AddrType.ANY)


def parse_ip4_single6(session: Session, opt: Opt, text: str) -> None:
    """Parse an IPv4 address, range or netblock, or a single IPv6 address."""
    if session_family(session) == Family.INET:
        parse_ip(session, opt, text)
    else:
        parse_single_ip(session, opt, text)


def parse_iptimeout(session: Session, opt: Opt, text: str) -> None:
    """Parse the legacy ``address,timeout`` element form."""
    if session.data.test_flag(Opt.TIMEOUT):
        raise InvalidSyntax('mixed syntax, timeout already specified')

    parts = split_separator(text, session.defaults.elem_separator)
    if parts is None:
        raise MissingSeparator(f'Missing separator from {text}')
    address, timeout = parts
    _parse_ip(session, opt, address, AddrType.ANY)
    session.data.set(Opt.TIMEOUT, string_to_u32(timeout))
