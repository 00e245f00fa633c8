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

"""Shared pytest fixtures for the parser tests."""

import ipaddress

import pytest

from ipsetfabrik.core import ResolutionError, Resolver, Session
from ipsetfabrik.core.options import Family, Opt

HOSTS = {
    'gw.example.test': ['192.0.2.1'],
    'multi.example.test': ['198.51.100.7', '198.51.100.8'],
    'v6.example.test': ['2001:db8::1'],
}

SERVICES = {
    ('http', 'tcp'): 80,
    ('https', 'tcp'): 443,
    ('domain', 'udp'): 53,
    ('domain', 'tcp'): 53,
}

PROTOCOLS = {
    'ip': 0,
    'icmp': 1,
    'tcp': 6,
    'udp': 17,
    'gre': 47,
    'ipv6-icmp': 58,
}


class FakeResolver(Resolver):
    """Resolver answering from the static tables above."""

    def __init__(self):
        self.calls = []

    def addresses(self, host, family):
        self.calls.append((host, family))
        wanted = 6 if family == Family.INET6 else 4
        if host not in HOSTS:
            raise ResolutionError(
                f"cannot resolve '{host}' to an {family.ip_label} address",
            )
        return [
            ipaddress.ip_address(a).packed
            for a in HOSTS[host]
            if ipaddress.ip_address(a).version == wanted
        ]

    def service_port(self, name, proto):
        return SERVICES.get((name, proto.lower()))

    def protocol_number(self, name):
        if name.lower() == 'icmpv6':
            name = 'ipv6-icmp'
        return PROTOCOLS.get(name)


def packed(address: str) -> bytes:
    return ipaddress.ip_address(address).packed


@pytest.fixture()
def resolver():
    return FakeResolver()


@pytest.fixture()
def session(resolver):
    """A fresh session using the fake resolver and the packaged tables."""
    return Session(resolver=resolver)


@pytest.fixture()
def session6(session):
    """A session with the IPv6 family already chosen."""
    session.data.set(Opt.FAMILY, Family.INET6)
    return session
