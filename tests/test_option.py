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

"""Unit tests for the fixed-format option parsers."""

import pytest

from ipsetfabrik.core import (
    DuplicateOption,
    InvalidSyntax,
    NameTooLong,
    NotAnEtherAddress,
    OutOfRange,
    ReportStatus,
    UnknownName,
)
from ipsetfabrik.core.options import Family, Opt, OutputMode
from ipsetfabrik.parsers import (
    call_parser,
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


class TestEther:
    def test_address(self, session):
        parse_ether(session, Opt.ETHER, '00:11:22:aa:BB:cc')
        assert session.data.get(Opt.ETHER) == bytes([0x00, 0x11, 0x22, 0xAA, 0xBB, 0xCC])

    @pytest.mark.parametrize(
        'text',
        [
            '',
            '00:11:22:33:44',
            '00:11:22:33:44:55:66',
            '0:11:22:33:44:555',
            '00-11-22-33-44-55',
            'zz:11:22:33:44:55',
        ],
    )
    def test_rejects(self, session, text):
        with pytest.raises(NotAnEtherAddress, match='as ethernet address'):
            parse_ether(session, Opt.ETHER, text)


class TestNumbers:
    def test_uint32(self, session):
        parse_uint32(session, Opt.TIMEOUT, '600')
        assert session.data.get(Opt.TIMEOUT) == 600

    def test_uint8(self, session):
        parse_uint8(session, Opt.PROBES, '4')
        assert session.data.get(Opt.PROBES) == 4

    def test_uint8_bounds(self, session):
        with pytest.raises(OutOfRange):
            parse_uint8(session, Opt.PROBES, '256')


class TestNetmask:
    def test_ipv4(self, session):
        parse_netmask(session, Opt.NETMASK, '24')
        assert session.data.get(Opt.NETMASK) == 24
        assert session.data.family == Family.INET

    @pytest.mark.parametrize('text', ['0', '32', '300', 'abc'])
    def test_ipv4_bounds(self, session, text):
        with pytest.raises(
            OutOfRange,
            match='netmask is out of the inclusive range of 1-31',
        ) as e:
            parse_netmask(session, Opt.NETMASK, text)
        assert (e.value.minimum, e.value.maximum) == (1, 31)
        assert not session.data.test_flag(Opt.NETMASK)

    def test_ipv6(self, session6):
        parse_netmask(session6, Opt.NETMASK, '64')
        assert session6.data.get(Opt.NETMASK) == 64

    @pytest.mark.parametrize('text', ['3', '125'])
    def test_ipv6_bounds(self, session6, text):
        with pytest.raises(OutOfRange, match='inclusive range of 4-124'):
            parse_netmask(session6, Opt.NETMASK, text)


class TestFamily:
    @pytest.mark.parametrize(
        ('text', 'expected'),
        [
            ('inet', Family.INET),
            ('ipv4', Family.INET),
            ('-4', Family.INET),
            ('inet6', Family.INET6),
            ('ipv6', Family.INET6),
            ('-6', Family.INET6),
            ('any', Family.UNSPEC),
        ],
    )
    def test_names(self, session, text, expected):
        parse_family(session, Opt.FAMILY, text)
        assert session.data.family == expected

    def test_unknown(self, session):
        with pytest.raises(UnknownName, match='unknown INET family inet5'):
            parse_family(session, Opt.FAMILY, 'inet5')

    def test_repeated(self, session):
        parse_family(session, Opt.FAMILY, 'inet')
        with pytest.raises(DuplicateOption, match='may not be specified multiple times'):
            parse_family(session, Opt.FAMILY, 'inet6')
        assert session.data.family == Family.INET


class TestFlag:
    def test_flag(self, session):
        parse_flag(session, Opt.RESIZE, 'ignored text')
        assert session.data.test_flag(Opt.RESIZE)
        assert session.data.get(Opt.RESIZE) is True


class TestTypename:
    def test_canonical(self, session):
        parse_typename(session, Opt.TYPENAME, 'hash:ip,port')
        assert session.data.get(Opt.TYPENAME) == 'hash:ip,port'
        assert session.data.get(Opt.TYPE).dimension == 2

    def test_legacy_alias(self, session):
        parse_typename(session, Opt.TYPENAME, 'iphash')
        assert session.data.get(Opt.TYPENAME) == 'hash:ip'

    def test_unknown(self, session):
        with pytest.raises(UnknownName, match="typename 'hash:bogus' is unknown"):
            parse_typename(session, Opt.TYPENAME, 'hash:bogus')

    def test_too_long(self, session):
        with pytest.raises(NameTooLong):
            parse_typename(session, Opt.TYPENAME, 'x' * 32)

    def test_family_not_supported(self, session6):
        with pytest.raises(InvalidSyntax, match='does not support family inet6'):
            parse_typename(session6, Opt.TYPENAME, 'bitmap:ip')

    def test_family_less_type(self, session6):
        parse_typename(session6, Opt.TYPENAME, 'bitmap:port')
        assert session6.data.get(Opt.TYPENAME) == 'bitmap:port'


class TestOutput:
    @pytest.mark.parametrize('mode', list(OutputMode))
    def test_modes(self, session, mode):
        parse_output(session, None, mode.value)
        assert session.output_mode == mode

    def test_unknown(self, session):
        with pytest.raises(UnknownName, match="unknown output mode 'json'"):
            parse_output(session, None, 'json')
        assert session.output_mode == OutputMode.PLAIN


class TestIgnored:
    def test_warns_once(self, session):
        parse_ignored(session, Opt.HASHSIZE, '-hashsize')
        parse_ignored(session, Opt.HASHSIZE, '-hashsize')
        assert session.report.get_warnings() == [
            'Option -hashsize is ignored. Please upgrade your syntax.',
        ]

    def test_per_option(self, session):
        parse_ignored(session, Opt.HASHSIZE, '-hashsize')
        parse_ignored(session, Opt.PROBES, '-probes')
        assert len(session.report.get_warnings()) == 2


class TestCallParser:
    def test_stores_value(self, session):
        call_parser(session, parse_uint32, '-timeout', Opt.TIMEOUT, '30')
        assert session.data.get(Opt.TIMEOUT) == 30
        assert session.report.status == ReportStatus.SUCCESS

    def test_duplicate_option(self, session):
        call_parser(session, parse_uint32, '-timeout', Opt.TIMEOUT, '30')
        with pytest.raises(DuplicateOption, match='-timeout already specified'):
            call_parser(session, parse_uint32, '-timeout', Opt.TIMEOUT, '60')
        assert session.data.get(Opt.TIMEOUT) == 30
        assert session.report.get_errors() == ['Syntax error: -timeout already specified']

    def test_failure_is_recorded(self, session):
        with pytest.raises(OutOfRange):
            call_parser(session, parse_uint8, '-probes', Opt.PROBES, '300')
        assert session.report.status == ReportStatus.ERROR
        assert session.report.get_errors() == ["Syntax error: '300' is out of range 0-255"]

    def test_ignored_gets_option_string(self, session):
        call_parser(session, parse_ignored, '-gc', Opt.GC, '10')
        call_parser(session, parse_ignored, '-gc', Opt.GC, '20')
        assert session.report.get_warnings() == [
            'Option -gc is ignored. Please upgrade your syntax.',
        ]
