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

from ._data import SessionData
from ._errors import (
    AddressFamilyMismatch,
    BadNameRefSyntax,
    DuplicateOption,
    InternalError,
    InvalidSyntax,
    MissingElement,
    MissingSeparator,
    NameTooLong,
    NotAnEtherAddress,
    NotANumber,
    OutOfRange,
    ParseError,
    ProtocolFamilyMismatch,
    ResolutionError,
    TooManyElements,
    UnknownName,
    UnsupportedElementSyntax,
)
from ._icmp import IcmpTables, load_icmp_tables
from ._number import (
    string_to_cidr,
    string_to_number,
    string_to_u8,
    string_to_u16,
    string_to_u32,
)
from ._render import SessionRenderer
from ._report import Report, ReportStatus
from ._resolver import Resolver
from ._separator import find_separator, split_separator
from ._session import Session
from ._util import get_package_resources_dir

__all__ = [
    'AddressFamilyMismatch',
    'BadNameRefSyntax',
    'DuplicateOption',
    'IcmpTables',
    'InternalError',
    'InvalidSyntax',
    'MissingElement',
    'MissingSeparator',
    'NameTooLong',
    'NotANumber',
    'NotAnEtherAddress',
    'OutOfRange',
    'ParseError',
    'ProtocolFamilyMismatch',
    'Report',
    'ReportStatus',
    'ResolutionError',
    'Resolver',
    'Session',
    'SessionData',
    'SessionRenderer',
    'TooManyElements',
    'UnknownName',
    'UnsupportedElementSyntax',
    'find_separator',
    'get_package_resources_dir',
    'load_icmp_tables',
    'split_separator',
    'string_to_cidr',
    'string_to_number',
    'string_to_u16',
    'string_to_u32',
    'string_to_u8',
]
