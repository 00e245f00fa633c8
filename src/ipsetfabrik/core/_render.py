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

"""Jinja2 rendering of a parsed session in one of the output modes.

Templates are looked up in ``~/ipsetfabrik/templates/`` for user
overrides first, then in the package's ``resources/templates/``
directory.
"""

from __future__ import annotations

import ipaddress
from pathlib import Path
from typing import TYPE_CHECKING

import jinja2

from ._util import get_package_resources_dir
from .options import Family, Opt, OutputMode

if TYPE_CHECKING:
    from ._session import Session


def format_value(opt: Opt, value: object) -> str:
    """Return the textual form of a stored attribute."""
    if opt == Opt.FAMILY:
        return Family(value).label
    if opt == Opt.ETHER:
        return ':'.join(f'{b:02X}' for b in value)
    if isinstance(value, bytes):
        return str(ipaddress.ip_address(value))
    if opt == Opt.TYPE:
        return value.name
    if value is True:
        return ''
    return str(value)


class SessionRenderer:
    """Render the attribute store of a session with the template of a mode."""

    def __init__(self, mode: OutputMode = OutputMode.PLAIN) -> None:
        search_paths: list[str] = []

        # User override directory (checked first)
        user_dir = Path.home() / 'ipsetfabrik' / 'templates'
        if user_dir.is_dir():
            search_paths.append(str(user_dir))

        # Package resources directory (fallback)
        search_paths.append(str(get_package_resources_dir() / 'templates'))

        self._env = jinja2.Environment(
            loader=jinja2.FileSystemLoader(search_paths),
            undefined=jinja2.StrictUndefined,
            trim_blocks=True,
            lstrip_blocks=True,
            keep_trailing_newline=True,
            autoescape=mode == OutputMode.XML,
        )
        self._template = self._env.get_template(f'{OutputMode(mode)}.j2')

    def render(self, session: Session) -> str:
        entries = [
            {'key': str(opt), 'value': format_value(opt, value)}
            for opt, value in session.data.items()
        ]
        return self._template.render(
            {
                'entries': entries,
                'warnings': session.report.get_warnings(),
            },
        )
