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

"""Exception hierarchy of the argument parsers.

Every failure a parser can report derives from ``ParseError``. Callers
that only need to know *that* a token was rejected catch ``ParseError``;
callers that react to a specific class catch the subclass. Nothing in
the parsers retries: the first failure is raised and the command is
expected to abort.
"""

from __future__ import annotations

SYNTAX_PREFIX = 'Syntax error: '


class ParseError(ValueError):
    """Base class for all parse failures."""


class InvalidSyntax(ParseError):
    """Malformed token: separators, field count, vocabulary or digits."""

    def __init__(self, msg: str) -> None:
        super().__init__(f'{SYNTAX_PREFIX}{msg}')


class NotANumber(InvalidSyntax):
    pass


class NotAnEtherAddress(InvalidSyntax):
    pass


class BadNameRefSyntax(InvalidSyntax):
    pass


class MissingSeparator(InvalidSyntax):
    pass


class MissingElement(InvalidSyntax):
    pass


class TooManyElements(InvalidSyntax):
    pass


class UnsupportedElementSyntax(InvalidSyntax):
    pass


class ProtocolFamilyMismatch(InvalidSyntax):
    pass


class AddressFamilyMismatch(InvalidSyntax):
    pass


class UnknownName(InvalidSyntax):
    """A fixed-vocabulary value (family, output mode, type, ...) is unknown."""


class NameTooLong(InvalidSyntax):
    pass


class OutOfRange(ParseError):
    """A number or CIDR length lies outside the bounds of its context."""

    def __init__(
        self,
        text: str,
        minimum: int,
        maximum: int,
        msg: str | None = None,
    ) -> None:
        self.text = text
        self.minimum = minimum
        self.maximum = maximum
        super().__init__(
            msg or f"{SYNTAX_PREFIX}'{text}' is out of range {minimum}-{maximum}",
        )


class DuplicateOption(ParseError):
    """The option kind was already assigned in this command."""

    def __init__(self, opt, msg: str | None = None) -> None:
        self.opt = opt
        super().__init__(msg or f'{SYNTAX_PREFIX}{opt} already specified')


class ResolutionError(ParseError):
    """A hostname did not resolve to a usable address."""

    def __init__(self, msg: str) -> None:
        super().__init__(f'{SYNTAX_PREFIX}{msg}')


class InternalError(ParseError):
    """Inconsistent parser setup, e.g. no set type in the session."""

    def __init__(self, msg: str) -> None:
        super().__init__(f'Internal error: {msg}')
