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

"""Attribute store of a parse session.

Values are kept per option kind together with a set of "already set"
flags. A flag is raised by every successful ``set()`` and is never
cleared: the store lives for exactly one command.

Value types by option kind:

- addresses (``ip``, ``ip_to``, ``ip2``): ``bytes`` of length 4 or 16
- ``ether``: ``bytes`` of length 6
- names: ``str``
- numbers (ports, ICMP type/code, CIDR, timeout, ...): ``int``
- ``type``: the resolved set type descriptor
- presence-only flags: ``True``
"""

from __future__ import annotations

import logging
from collections.abc import Iterator

from ._errors import AddressFamilyMismatch, DuplicateOption
from .options import Family, Opt

logger = logging.getLogger(__name__)


class SessionData:
    """Typed key/value map plus set-bits for one command."""

    def __init__(self) -> None:
        self._values: dict[Opt, object] = {}
        self._flags: set[Opt] = set()
        self._ignored: set[Opt] = set()

    def set(self, opt: Opt, value: object = True, *, overwrite: bool = False) -> None:
        """Store *value* under *opt* and raise its flag.

        Raises DuplicateOption if the flag is already raised and
        *overwrite* is false; the stored value is left untouched then.
        """
        if opt in self._flags and not overwrite:
            raise DuplicateOption(opt)
        self._values[opt] = value
        self._flags.add(opt)

    def get(self, opt: Opt, default=None):
        return self._values.get(opt, default)

    def test_flag(self, opt: Opt) -> bool:
        return opt in self._flags

    @property
    def flags(self) -> frozenset[Opt]:
        return frozenset(self._flags)

    @property
    def family(self) -> Family:
        return Family(self._values.get(Opt.FAMILY, Family.UNSPEC))

    def set_family(self, family: Family) -> None:
        """Derive the family from an address-bearing parse.

        Overwrites an unspecified family; once IPv4 or IPv6 is in place
        it can only be confirmed, not changed.
        """
        current = self.family
        if current == family:
            if not self.test_flag(Opt.FAMILY):
                self.set(Opt.FAMILY, family)
            return
        if current != Family.UNSPEC:
            raise AddressFamilyMismatch(
                f'family {family.label} conflicts with already used family {current.label}',
            )
        logger.debug('Family set to %s', family.label)
        self.set(Opt.FAMILY, family, overwrite=True)

    def ignored(self, opt: Opt) -> bool:
        """Return whether *opt* was already reported as ignored, and mark it."""
        if opt in self._ignored:
            return True
        self._ignored.add(opt)
        return False

    def items(self) -> Iterator[tuple[Opt, object]]:
        return iter(list(self._values.items()))

    def __contains__(self, opt: object) -> bool:
        return opt in self._flags

    def __len__(self) -> int:
        return len(self._values)
