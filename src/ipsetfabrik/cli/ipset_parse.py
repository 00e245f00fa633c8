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

"""CLI entry point for checking set elements against a set type."""

import argparse
import logging
import sys

import ipsetfabrik
from ipsetfabrik.core import ParseError, Session, SessionRenderer
from ipsetfabrik.core.options import Opt, OutputMode
from ipsetfabrik.parsers import (
    call_parser,
    parse_elem,
    parse_family,
    parse_output,
    parse_setname,
    parse_typename,
    parse_uint32,
)

__author__ = 'Linuxfabrik GmbH, Zurich/Switzerland'

DESCRIPTION = """Parses set elements the way ipset would for the given set type and prints
the resulting attributes. Every element is parsed in a session of its own."""

DEFAULT_OUTPUT = OutputMode.PLAIN.value


def parse_args(argv=None):
    parser = argparse.ArgumentParser(
        prog='ipsetfabrik-parse',
        description=DESCRIPTION,
    )

    parser.add_argument(
        'elements',
        nargs='+',
        metavar='ELEMENT',
        help='set element, e.g. 192.0.2.1,tcp:80',
    )

    parser.add_argument(
        '-t',
        '--type',
        required=True,
        dest='TYPE',
        help='set type name, e.g. hash:ip,port (legacy names are accepted)',
    )

    parser.add_argument(
        '-f',
        '--family',
        default='',
        dest='FAMILY',
        help='address family: inet, inet6 or any. Default: inet for address types',
    )

    parser.add_argument(
        '-n',
        '--name',
        default='',
        dest='SETNAME',
        help='name of the set the elements belong to',
    )

    parser.add_argument(
        '-o',
        '--output',
        default=DEFAULT_OUTPUT,
        dest='OUTPUT',
        help='output mode: plain, xml or save. Default: %(default)s',
    )

    parser.add_argument(
        '--timeout',
        default='',
        dest='TIMEOUT',
        help='timeout value in seconds for the elements',
    )

    parser.add_argument(
        '--optional',
        action='store_true',
        dest='OPTIONAL',
        help='allow elements with trailing parts left out',
    )

    parser.add_argument(
        '-v',
        '--verbose',
        action='count',
        default=0,
        dest='VERBOSE',
        help='verbose output (repeat for higher verbosity)',
    )

    parser.add_argument(
        '-V',
        '--version',
        action='version',
        version=f'%(prog)s: v{ipsetfabrik.__version__} by {__author__}',
    )

    return parser.parse_args(argv)


def parse_element(args, element: str) -> Session:
    """Run the option and element parsers of one command."""
    session = Session()
    parse_output(session, None, args.OUTPUT)
    if args.FAMILY:
        call_parser(session, parse_family, '-family', Opt.FAMILY, args.FAMILY)
    call_parser(session, parse_typename, 'typename', Opt.TYPENAME, args.TYPE)
    if args.SETNAME:
        call_parser(session, parse_setname, 'setname', Opt.SETNAME, args.SETNAME)
    if args.TIMEOUT:
        call_parser(session, parse_uint32, '-timeout', Opt.TIMEOUT, args.TIMEOUT)
    try:
        parse_elem(session, element, optional=args.OPTIONAL)
    except ParseError as e:
        session.error(str(e))
        raise
    return session


def main(argv=None):
    args = parse_args(argv)

    logging.basicConfig(
        level=max(logging.DEBUG, logging.WARNING - 10 * args.VERBOSE),
        format='%(levelname)s %(name)s: %(message)s',
    )

    for element in args.elements:
        try:
            session = parse_element(args, element)
        except ParseError as e:
            print(f"Error: element '{element}': {e}", file=sys.stderr)
            return 1

        for warning in session.report.get_warnings():
            print(f'Warning: {warning}', file=sys.stderr)
        print(SessionRenderer(session.output_mode).render(session), end='')

    return 0


if __name__ == '__main__':
    sys.exit(main())
