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

"""Option kinds, families and parser settings.

This module provides:

- **Enum keys**: the closed set of option kinds of the attribute store
- **Dataclass schema**: separators and limits used by all parsers
- **Migration helpers**: legacy set type name compatibility

Usage in a parser::

    from ipsetfabrik.core.options import Opt

    session.data.set(Opt.TIMEOUT, value)
"""

from ipsetfabrik.core.options._keys import (
    CIDR_OPTION,
    Family,
    Opt,
    OutputMode,
)
from ipsetfabrik.core.options._migration import (
    CANONICAL_TYPENAMES,
    LEGACY_TYPENAME_MAP,
    resolve_typename,
)
from ipsetfabrik.core.options._schemas import (
    PARSER_DEFAULTS,
    ParserDefaults,
)

__all__ = [
    'CANONICAL_TYPENAMES',
    'CIDR_OPTION',
    'LEGACY_TYPENAME_MAP',
    'PARSER_DEFAULTS',
    'Family',
    'Opt',
    'OutputMode',
    'ParserDefaults',
    'resolve_typename',
]
