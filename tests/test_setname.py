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

"""Unit tests for set names and list:set member references."""

import dataclasses

import pytest

from ipsetfabrik.core import BadNameRefSyntax, NameTooLong, Session
from ipsetfabrik.core.options import PARSER_DEFAULTS, Opt
from ipsetfabrik.parsers import (
    MIXED_NAMEREF,
    parse_after,
    parse_before,
    parse_name_compat,
    parse_setname,
)

from .conftest import FakeResolver


class TestSetname:
    def test_name(self, session):
        parse_setname(session, Opt.SETNAME, 'blocklist')
        assert session.data.get(Opt.SETNAME) == 'blocklist'

    def test_longest_name(self, session):
        parse_setname(session, Opt.SETNAME, 'a' * 31)
        assert session.data.get(Opt.SETNAME) == 'a' * 31

    def test_too_long(self, session):
        with pytest.raises(NameTooLong, match='longer than 31 characters'):
            parse_setname(session, Opt.SETNAME, 'a' * 32)
        assert not session.data.test_flag(Opt.SETNAME)


class TestBeforeAfter:
    def test_before(self, session):
        parse_before(session, Opt.NAMEREF, 'other')
        assert session.data.get(Opt.NAMEREF) == 'other'
        assert session.data.test_flag(Opt.BEFORE)

    def test_after(self, session):
        parse_after(session, Opt.NAMEREF, 'other')
        assert session.data.get(Opt.NAMEREF) == 'other'
        assert not session.data.test_flag(Opt.BEFORE)

    def test_second_reference_warns(self, session):
        parse_before(session, Opt.NAMEREF, 'first')
        parse_after(session, Opt.NAMEREF, 'second')
        assert session.data.get(Opt.NAMEREF) == 'first'
        assert session.report.get_warnings() == [MIXED_NAMEREF]


class TestNameCompat:
    def test_plain_name(self, session):
        parse_name_compat(session, Opt.NAME, 'member')
        assert session.data.get(Opt.NAME) == 'member'
        assert not session.data.test_flag(Opt.NAMEREF)

    def test_before(self, session):
        parse_name_compat(session, Opt.NAME, 'member,before,other')
        assert session.data.get(Opt.NAME) == 'member'
        assert session.data.get(Opt.NAMEREF) == 'other'
        assert session.data.test_flag(Opt.BEFORE)

    def test_after(self, session):
        parse_name_compat(session, Opt.NAME, 'member,after,other')
        assert session.data.get(Opt.NAMEREF) == 'other'
        assert not session.data.test_flag(Opt.BEFORE)

    @pytest.mark.parametrize('text', ['member,sideways,other', 'member,before'])
    def test_bad_reference(self, session, text):
        with pytest.raises(BadNameRefSyntax, match=r'setname,\[before\|after\],setname'):
            parse_name_compat(session, Opt.NAME, text)

    def test_mixed_with_option(self, session):
        parse_after(session, Opt.NAMEREF, 'first')
        parse_name_compat(session, Opt.NAME, 'member,before,other')
        assert session.data.get(Opt.NAME) == 'member'
        assert session.data.get(Opt.NAMEREF) == 'first'
        assert not session.data.test_flag(Opt.BEFORE)
        assert session.report.get_warnings() == [MIXED_NAMEREF]

    def test_reference_too_long(self, session):
        with pytest.raises(NameTooLong):
            parse_name_compat(session, Opt.NAME, 'member,after,' + 'x' * 32)

    def test_name_separator_setting(self):
        defaults = dataclasses.replace(PARSER_DEFAULTS, name_separator=';')
        session = Session(resolver=FakeResolver(), defaults=defaults)
        parse_name_compat(session, Opt.NAME, 'member;before;other')
        assert session.data.get(Opt.NAME) == 'member'
        assert session.data.get(Opt.NAMEREF) == 'other'
        assert session.data.test_flag(Opt.BEFORE)

    def test_name_separator_in_message(self):
        defaults = dataclasses.replace(PARSER_DEFAULTS, name_separator=';')
        session = Session(resolver=FakeResolver(), defaults=defaults)
        with pytest.raises(BadNameRefSyntax, match=r'setname;\[before\|after\];setname'):
            parse_name_compat(session, Opt.NAME, 'member;sideways;other')
