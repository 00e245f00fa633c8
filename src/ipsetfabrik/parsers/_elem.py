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

"""Parser entry points: single options and multi-part set elements."""

from __future__ import annotations

import logging
from collections.abc import Callable
from typing import TYPE_CHECKING

from ipsetfabrik.core import (
    DuplicateOption,
    InternalError,
    MissingElement,
    ParseError,
    TooManyElements,
    UnsupportedElementSyntax,
    find_separator,
    split_separator,
)
from ipsetfabrik.core.options import Opt

from ._option import parse_ignored

if TYPE_CHECKING:
    from ipsetfabrik.core import Session

logger = logging.getLogger(__name__)


def call_parser(
    session: Session,
    parser: Callable,
    optstr: str,
    opt: Opt,
    text: str,
) -> None:
    """Run *parser* for the option *optstr* and record a failure in the report.

    An option given twice is rejected before the parser runs. Ignored
    options get the option string itself, so the warning can name it.
    """
    try:
        if session.data.test_flag(opt):
            raise DuplicateOption(opt, f'Syntax error: {optstr} already specified')
        parser(session, opt, optstr if parser is parse_ignored else text)
    except ParseError as e:
        session.error(str(e))
        raise


def parse_elem(session: Session, text: str, optional: bool = False) -> None:
    """Parse a (multi-part) element according to the set type of the session.

    The element is split at the element separator into at most as many
    parts as the type has dimensions, and each part is handed to the
    parser bound to its position, in order. With *optional*, trailing
    parts may be left out.
    """
    descriptor = session.data.get(Opt.TYPE)
    if descriptor is None:
        raise InternalError('set type is unknown!')

    sep = session.defaults.elem_separator
    fields = [text]

    parts = split_separator(text, sep)
    if descriptor.dimension > 1:
        if parts is not None:
            # elem,elem
            fields = list(parts)
        elif not optional:
            raise MissingElement(f'Second element is missing from {text}.')
    elif parts is not None:
        if descriptor.compat_parser is not None:
            logger.debug('Parse %s with the compat parser of %s', text, descriptor.name)
            descriptor.compat_parser(session, descriptor.elems[0].opt, text)
            return
        raise UnsupportedElementSyntax(
            f'Elem separator in {text}, but settype {descriptor.name} supports none.',
        )

    if len(fields) == 2:
        parts = split_separator(fields[1], sep)
        if descriptor.dimension > 2:
            if parts is not None:
                # elem,elem,elem
                fields = [fields[0], *parts]
            elif not optional:
                raise MissingElement(f'Third element is missing from {text}.')
        elif parts is not None:
            raise TooManyElements(
                f'Two elem separators in {text}, but settype {descriptor.name} supports one.',
            )

    if len(fields) == 3 and find_separator(fields[2], sep) is not None:
        raise TooManyElements(
            f'Three elem separators in {text}, but settype {descriptor.name} supports two.',
        )

    for dim, field in enumerate(fields):
        if dim >= len(descriptor.elems) or descriptor.elems[dim].parser is None:
            raise InternalError(f'missing parser function for {descriptor.name}')
        elem = descriptor.elems[dim]
        logger.debug('Parse elem part %d: %s', dim + 1, field)
        elem.parser(session, elem.opt, field)
