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

"""Separator lookup inside a single token.

A separator character at the very first or very last position of the
token belongs to the token itself (think of a leading ``-`` or a
trailing ``:``) and is never reported as a separator.
"""

from __future__ import annotations


def find_separator(text: str, separators: str) -> int | None:
    """Return the index of the first interior separator, or None.

    The characters of *separators* are tried one after the other; the
    first character with an interior occurrence wins.
    """
    last = len(text) - 1
    for sep in separators:
        pos = text.find(sep, 1)
        if 0 < pos < last:
            return pos
    return None


def split_separator(text: str, separators: str) -> tuple[str, str] | None:
    """Split *text* at its first interior separator.

    Returns ``(head, tail)`` without the separator, or None. The input
    string is not modified.
    """
    pos = find_separator(text, separators)
    if pos is None:
        return None
    return text[:pos], text[pos + 1 :]
