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

"""Fixed-format option values: numbers, flags and vocabularies."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from ipsetfabrik.core import (
    DuplicateOption,
    InvalidSyntax,
    NameTooLong,
    NotANumber,
    NotAnEtherAddress,
    OutOfRange,
    UnknownName,
    string_to_cidr,
    string_to_u8,
    string_to_u32,
)
from ipsetfabrik.core.options import Family, Opt, OutputMode

from ._address import session_family

if TYPE_CHECKING:
    from ipsetfabrik.core import Session

logger = logging.getLogger(__name__)

ETH_ALEN = 6

FAMILY_NAMES = {
    'inet': Family.INET,
    'ipv4': Family.INET,
    '-4': Family.INET,
    'inet6': Family.INET6,
    'ipv6': Family.INET6,
    '-6': Family.INET6,
    'any': Family.UNSPEC,
    'unspec': Family.UNSPEC,
}

_HEX_DIGITS = frozenset('0123456789abcdefABCDEF')


def parse_ether(session: Session, opt: Opt, text: str) -> None:
    """Parse a colon separated Ethernet address (six two-digit octets)."""
    octets = text.split(':')
    if (
        len(text) != ETH_ALEN * 3 - 1
        or len(octets) != ETH_ALEN
        or any(len(o) != 2 or not _HEX_DIGITS.issuperset(o) for o in octets)
    ):
        raise NotAnEtherAddress(f"cannot parse '{text}' as ethernet address")
    session.data.set(opt, bytes(int(o, 16) for o in octets))


def parse_uint32(session: Session, opt: Opt, text: str) -> None:
    session.data.set(opt, string_to_u32(text))


def parse_uint8(session: Session, opt: Opt, text: str) -> None:
    session.data.set(opt, string_to_u8(text))


def parse_netmask(session: Session, opt: Opt, text: str) -> None:
    """Parse a CIDR netmask value; the bounds depend on the family.

    Every failure is reported with the bounds of the family.
    """
    minimum, maximum = session.defaults.netmask_bounds(session_family(session))
    try:
        cidr = string_to_cidr(text, minimum, maximum)
    except (NotANumber, OutOfRange) as e:
        raise OutOfRange(
            text,
            minimum,
            maximum,
            'Syntax error: netmask is out of the inclusive range '
            f'of {minimum}-{maximum}',
        ) from e
    session.data.set(opt, cidr)


def parse_family(session: Session, opt: Opt, text: str) -> None:
    if session.data.test_flag(Opt.FAMILY):
        raise DuplicateOption(
            Opt.FAMILY,
            'Syntax error: protocol family may not be specified multiple times',
        )
    family = FAMILY_NAMES.get(text)
    if family is None:
        raise UnknownName(f'unknown INET family {text}')
    session.data.set(opt, family)


def parse_flag(session: Session, opt: Opt, text: str) -> None:
    """Set the presence-only flag *opt*; *text* is not looked at."""
    session.data.set(opt)


def parse_typename(session: Session, opt: Opt, text: str) -> None:
    """Look up a set type by (possibly legacy) name and store it."""
    limit = session.defaults.max_name_len - 1
    if len(text) > limit:
        raise NameTooLong(f"typename '{text}' is longer than {limit} characters")

    descriptor = session.registry.get(text)
    if descriptor is None:
        raise UnknownName(f"typename '{text}' is unknown")

    family = session.data.family
    if not descriptor.supports(family):
        raise InvalidSyntax(
            f'settype {descriptor.name} does not support family {family.label}',
        )
    logger.debug('Type %s resolved to %s', text, descriptor.name)
    session.data.set(Opt.TYPENAME, descriptor.name)
    session.data.set(Opt.TYPE, descriptor)


def parse_output(session: Session, opt: Opt | None, text: str) -> None:
    try:
        session.output_mode = OutputMode(text)
    except ValueError:
        raise UnknownName(f"unknown output mode '{text}'") from None


def parse_ignored(session: Session, opt: Opt, text: str) -> None:
    """Accept a deprecated option, warning once per option kind."""
    if not session.data.ignored(opt):
        session.warning(f'Option {text} is ignored. Please upgrade your syntax.')
