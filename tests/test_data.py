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

"""Unit tests for the session attribute store and the report."""

import pytest

from ipsetfabrik.core import (
    AddressFamilyMismatch,
    DuplicateOption,
    Report,
    ReportStatus,
    SessionData,
)
from ipsetfabrik.core.options import Family, Opt


class TestSessionData:
    def test_empty(self):
        data = SessionData()
        assert len(data) == 0
        assert not data.test_flag(Opt.IP)
        assert data.get(Opt.IP) is None
        assert data.family == Family.UNSPEC

    def test_set_raises_flag(self):
        data = SessionData()
        data.set(Opt.PORT, 80)
        assert data.test_flag(Opt.PORT)
        assert Opt.PORT in data
        assert data.get(Opt.PORT) == 80
        assert data.flags == frozenset({Opt.PORT})

    def test_presence_marker(self):
        data = SessionData()
        data.set(Opt.PORT)
        assert data.get(Opt.PORT) is True

    def test_duplicate_keeps_first_value(self):
        data = SessionData()
        data.set(Opt.PORT, 80)
        with pytest.raises(DuplicateOption, match='port already specified'):
            data.set(Opt.PORT, 443)
        assert data.get(Opt.PORT) == 80

    def test_overwrite(self):
        data = SessionData()
        data.set(Opt.PORT, 80)
        data.set(Opt.PORT, 443, overwrite=True)
        assert data.get(Opt.PORT) == 443

    def test_items_in_insertion_order(self):
        data = SessionData()
        data.set(Opt.IP, b'\xc0\x00\x02\x01')
        data.set(Opt.PORT, 80)
        assert [k for k, _ in data.items()] == [Opt.IP, Opt.PORT]

    def test_ignored_reports_once(self):
        data = SessionData()
        assert data.ignored(Opt.HASHSIZE) is False
        assert data.ignored(Opt.HASHSIZE) is True
        assert data.ignored(Opt.PROBES) is False


class TestFamily:
    def test_unspecified_is_overwritten(self):
        data = SessionData()
        data.set_family(Family.INET6)
        assert data.family == Family.INET6
        assert data.test_flag(Opt.FAMILY)

    def test_same_family_is_confirmed(self):
        data = SessionData()
        data.set_family(Family.INET)
        data.set_family(Family.INET)
        assert data.family == Family.INET

    def test_family_is_sticky(self):
        data = SessionData()
        data.set_family(Family.INET)
        with pytest.raises(AddressFamilyMismatch):
            data.set_family(Family.INET6)
        assert data.family == Family.INET


class TestReport:
    def test_initial_status(self):
        report = Report()
        assert report.status == ReportStatus.SUCCESS
        assert report.get_errors() == []
        assert report.get_warnings() == []

    def test_warning(self):
        report = Report()
        report.warning('something odd')
        assert report.status == ReportStatus.WARNING
        assert report.get_warnings() == ['something odd']

    def test_error_wins_over_warning(self):
        report = Report()
        report.error('broken')
        report.warning('something odd')
        assert report.status == ReportStatus.ERROR
        assert report.get_errors() == ['broken']
