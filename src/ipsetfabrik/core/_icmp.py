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

"""ICMP/ICMPv6 name tables, loaded from the package resources."""

from __future__ import annotations

import functools
import logging
import pathlib
from types import MappingProxyType

import yaml

from ._util import get_package_resources_dir
logger = logging.getLogger(__name__)


def _pack_table(entries: dict) -> MappingProxyType:
    table = {}
    for name, (icmp_type, icmp_code) in entries.items():
        table[str(name).lower()] = (int(icmp_type) << 8) | int(icmp_code)
    return MappingProxyType(table)


class IcmpTables:
    """Read-only ICMP and ICMPv6 name -> packed type/code lookup."""

    def __init__(self, icmp: dict, icmpv6: dict) -> None:
        self._icmp = _pack_table(icmp)
        self._icmpv6 = _pack_table(icmpv6)

    @classmethod
    def from_file(cls, path) -> IcmpTables:
        path = pathlib.Path(path)
        logger.debug('Loading ICMP tables from %s', path)
        with pathlib.Path.open(path, encoding='utf-8') as f:
            data = yaml.safe_load(f) or {}
        return cls(data.get('icmp', {}), data.get('icmpv6', {}))

    def lookup_icmp(self, name: str) -> int | None:
        return self._icmp.get(name.lower())

    def lookup_icmpv6(self, name: str) -> int | None:
        return self._icmpv6.get(name.lower())


@functools.cache
def load_icmp_tables() -> IcmpTables:
    """Return the packaged ICMP tables, loaded once per process."""
    return IcmpTables.from_file(get_package_resources_dir() / 'icmp.yml')
