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

"""Set type descriptors and the registry mapping type names to them."""

from __future__ import annotations

import dataclasses
import functools
import logging
import pathlib
from collections.abc import Callable, Iterable, Iterator
from types import MappingProxyType

import yaml

from ipsetfabrik.core import get_package_resources_dir
from ipsetfabrik.core.options import Family, Opt, resolve_typename
from ipsetfabrik.parsers import PARSERS

logger = logging.getLogger(__name__)

MAX_DIMENSION = 3

FAMILY_SUPPORT = {
    'inet': frozenset({Family.INET}),
    'inet46': frozenset({Family.INET, Family.INET6}),
    'unspec': None,
}


@dataclasses.dataclass(frozen=True)
class ElementSpec:
    """Option kind and parser of one element position."""

    opt: Opt
    parser: Callable | None


@dataclasses.dataclass(frozen=True)
class TypeDescriptor:
    """Static description of a set type as seen by the element parser."""

    name: str
    elems: tuple[ElementSpec, ...]
    compat_parser: Callable | None = None
    families: frozenset[Family] | None = None

    @property
    def dimension(self) -> int:
        return len(self.elems)

    def supports(self, family: Family) -> bool:
        """True if sets of this type can be created for *family*."""
        if self.families is None or family == Family.UNSPEC:
            return True
        return family in self.families


class TypeRegistry:
    """Read-only mapping of canonical type names to descriptors."""

    def __init__(self, descriptors: Iterable[TypeDescriptor]) -> None:
        types = {}
        for descriptor in descriptors:
            if not 1 <= descriptor.dimension <= MAX_DIMENSION:
                raise ValueError(
                    f'Type {descriptor.name}: dimension must be 1-{MAX_DIMENSION}, '
                    f'got {descriptor.dimension}',
                )
            types[descriptor.name] = descriptor
        self._types = MappingProxyType(types)

    @classmethod
    def from_file(cls, path, parsers: dict[str, Callable] = PARSERS) -> TypeRegistry:
        path = pathlib.Path(path)
        logger.debug('Loading set types from %s', path)
        with pathlib.Path.open(path, encoding='utf-8') as f:
            data = yaml.safe_load(f) or {}
        return cls(_descriptor(entry, parsers) for entry in data.get('types', []))

    def get(self, name: str) -> TypeDescriptor | None:
        """Return the descriptor for a canonical or legacy type name."""
        if name in self._types:
            return self._types[name]
        canonical = resolve_typename(name)
        if canonical is None:
            return None
        return self._types.get(canonical)

    def names(self) -> list[str]:
        return sorted(self._types)

    def __contains__(self, name: object) -> bool:
        return name in self._types

    def __iter__(self) -> Iterator[TypeDescriptor]:
        return iter(self._types.values())

    def __len__(self) -> int:
        return len(self._types)


def _lookup_parser(parsers: dict[str, Callable], type_name: str, parser_name):
    if parser_name is None:
        return None
    try:
        return parsers[parser_name]
    except KeyError:
        raise ValueError(f'Type {type_name}: unknown parser {parser_name}') from None


def _descriptor(entry: dict, parsers: dict[str, Callable]) -> TypeDescriptor:
    name = entry['name']
    family = entry.get('family', 'unspec')
    if family not in FAMILY_SUPPORT:
        raise ValueError(f'Type {name}: unknown family {family}')
    elems = tuple(
        ElementSpec(
            opt=Opt(elem['opt']),
            parser=_lookup_parser(parsers, name, elem.get('parser')),
        )
        for elem in entry.get('elems', [])
    )
    return TypeDescriptor(
        name=name,
        elems=elems,
        compat_parser=_lookup_parser(parsers, name, entry.get('compat')),
        families=FAMILY_SUPPORT[family],
    )


@functools.cache
def load_registry() -> TypeRegistry:
    """Return the packaged set type registry, loaded once per process."""
    return TypeRegistry.from_file(get_package_resources_dir() / 'settypes.yml')
