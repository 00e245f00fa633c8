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

"""Report: error/warning tracking for a parse session."""

from __future__ import annotations

import logging
from enum import IntEnum

logger = logging.getLogger(__name__)


class ReportStatus(IntEnum):
    """Session exit status codes."""

    SUCCESS = 0
    WARNING = 1
    ERROR = 2


class Report:
    """Collects the diagnostics produced while parsing one command."""

    def __init__(self) -> None:
        self._status: ReportStatus = ReportStatus.SUCCESS
        self._errors: list[str] = []
        self._warnings: list[str] = []

    @property
    def status(self) -> ReportStatus:
        return self._status

    def error(self, msg: str) -> None:
        """Record the message of a fatal failure."""
        self._errors.append(str(msg))
        self._status = ReportStatus.ERROR

    def warning(self, msg: str) -> None:
        """Record a non-fatal diagnostic."""
        logger.debug('Warning: %s', msg)
        self._warnings.append(str(msg))
        if self._status == ReportStatus.SUCCESS:
            self._status = ReportStatus.WARNING

    def get_errors(self) -> list[str]:
        return list(self._errors)

    def get_warnings(self) -> list[str]:
        return list(self._warnings)
