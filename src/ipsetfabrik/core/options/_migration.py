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

"""Legacy set type names for backward compatibility.

Older ipset releases named the set types without the ``method:datatype``
scheme. When such a name is given on the command line it is mapped to its
canonical equivalent before the type registry is consulted.
"""

# Map legacy type names to canonical type names.
# Format: {'legacy_name': 'canonical_name'}
LEGACY_TYPENAME_MAP: dict[str, str] = {
    'ipmap': 'bitmap:ip',
    'macipmap': 'bitmap:ip,mac',
    'portmap': 'bitmap:port',
    'iphash': 'hash:ip',
    'nethash': 'hash:net',
    'ipporthash': 'hash:ip,port',
    'ipportiphash': 'hash:ip,port,ip',
    'ipportnethash': 'hash:ip,port,net',
    'setlist': 'list:set',
}

CANONICAL_TYPENAMES = frozenset(LEGACY_TYPENAME_MAP.values())


def resolve_typename(name: str) -> str | None:
    """Get the canonical type name for a possibly-legacy name.

    Args:
        name: The type name as given by the user.

    Returns:
        The canonical name, or ``None`` if the name is not known at all.
    """
    if name in CANONICAL_TYPENAMES:
        return name
    return LEGACY_TYPENAME_MAP.get(name)
