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

"""Parse session: state and collaborators of one command invocation."""

from __future__ import annotations

from typing import TYPE_CHECKING

from ._data import SessionData
from ._icmp import IcmpTables, load_icmp_tables
from ._report import Report
from ._resolver import Resolver
from .options import PARSER_DEFAULTS, OutputMode, ParserDefaults

if TYPE_CHECKING:
    from ipsetfabrik.settypes import TypeRegistry


class Session:
    """Owns the attribute store and diagnostics of a single command.

    The registry, ICMP tables, resolver and parser settings are shared,
    read-only collaborators. When not given, the packaged defaults are
    used.
    """

    def __init__(
        self,
        registry: TypeRegistry | None = None,
        icmp: IcmpTables | None = None,
        resolver: Resolver | None = None,
        defaults: ParserDefaults = PARSER_DEFAULTS,
    ) -> None:
        if registry is None:
            from ipsetfabrik.settypes import load_registry

            registry = load_registry()
        self.registry = registry
        self.icmp = icmp if icmp is not None else load_icmp_tables()
        self.resolver = resolver if resolver is not None else Resolver()
        self.defaults = defaults
        self.data = SessionData()
        self.report = Report()
        self.output_mode: OutputMode = OutputMode.PLAIN

    def warning(self, msg: str) -> None:
        self.report.warning(msg)

    def error(self, msg: str) -> None:
        self.report.error(msg)
