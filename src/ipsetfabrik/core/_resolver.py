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

"""Name lookups: hostnames, services and protocols.

All lookups go through the system databases via the socket module. A
session holds one ``Resolver``; tests replace it with a fake that
answers from a dict.
"""

from __future__ import annotations

import logging
import socket

from ._errors import ResolutionError
from .options import Family

logger = logging.getLogger(__name__)


class Resolver:
    """Thin wrapper around the libc resolver functions."""

    def addresses(self, host: str, family: Family) -> list[bytes]:
        """Resolve *host* to packed addresses of *family*, in resolver order."""
        logger.debug('Resolving %s as %s', host, family.ip_label)
        try:
            infos = socket.getaddrinfo(
                host,
                None,
                family=int(family),
                type=socket.SOCK_RAW,
                flags=socket.AI_CANONNAME,
            )
        except (socket.gaierror, UnicodeError) as e:
            msg = f"cannot resolve '{host}' to an {family.ip_label} address: {e}"
            raise ResolutionError(msg) from e

        result = []
        for af, _type, _proto, _canonname, sockaddr in infos:
            if af != int(family):
                continue
            result.append(socket.inet_pton(af, sockaddr[0].split('%', 1)[0]))
        return result

    def service_port(self, name: str, proto: str) -> int | None:
        """Return the port number of service *name* for *proto*, or None."""
        try:
            return socket.getservbyname(name, proto.lower())
        except OSError:
            return None

    def protocol_number(self, name: str) -> int | None:
        """Return the IP protocol number of *name*, or None."""
        if name.lower() == 'icmpv6':
            name = 'ipv6-icmp'
        try:
            return socket.getprotobyname(name)
        except OSError:
            return None
