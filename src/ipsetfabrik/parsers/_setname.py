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

"""Set names and list:set member references."""

from __future__ import annotations

from typing import TYPE_CHECKING

from ipsetfabrik.core import BadNameRefSyntax, NameTooLong, split_separator
from ipsetfabrik.core.options import Opt

if TYPE_CHECKING:
    from ipsetfabrik.core import Session

MIXED_NAMEREF = 'mixed syntax, before|after option already used'


def check_setname(session: Session, text: str, what: str = 'setname') -> None:
    limit = session.defaults.max_name_len - 1
    if len(text) > limit:
        raise NameTooLong(f"{what} '{text}' is longer than {limit} characters")


def parse_setname(session: Session, opt: Opt, text: str) -> None:
    check_setname(session, text)
    session.data.set(opt, text)


def parse_before(session: Session, opt: Opt, text: str) -> None:
    """Parse *text* as the set name a new list:set member goes before."""
    if session.data.test_flag(Opt.NAMEREF):
        session.warning(MIXED_NAMEREF)
        return
    check_setname(session, text)
    session.data.set(Opt.BEFORE)
    session.data.set(opt, text)


def parse_after(session: Session, opt: Opt, text: str) -> None:
    """Parse *text* as the set name a new list:set member goes after."""
    if session.data.test_flag(Opt.NAMEREF):
        session.warning(MIXED_NAMEREF)
        return
    check_setname(session, text)
    session.data.set(opt, text)


def parse_name_compat(session: Session, opt: Opt, text: str) -> None:
    """Parse a set name or the ``setname,before|after,setname`` element.

    A before/after reference given when one is already set is not
    applied; a warning is recorded instead.
    """
    data = session.data
    mixed = data.test_flag(Opt.NAMEREF)
    if mixed:
        session.warning(MIXED_NAMEREF)

    sep = session.defaults.name_separator
    name, ref, before = text, None, False
    parts = split_separator(text, sep)
    if parts is not None:
        # setname,before|after,setname
        name, rest = parts
        ref_parts = split_separator(rest, sep)
        if ref_parts is None or ref_parts[0] not in ('before', 'after'):
            raise BadNameRefSyntax(
                f'you must specify elements as setname{sep}[before|after]{sep}setname',
            )
        marker, ref = ref_parts
        before = marker == 'before'

    check_setname(session, name)
    data.set(opt, name)
    if ref is None or mixed:
        return

    check_setname(session, ref)
    data.set(Opt.NAMEREF, ref)
    if before:
        data.set(Opt.BEFORE)
