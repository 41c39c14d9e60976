"""Shared helpers for Rally Pairing."""

# Rally Pairing
# Copyright (C) 2026  Rally Pairing developers
#
# This program is free software: you can redistribute it and/or modify
# it under the terms of the GNU General Public License as published by
# the Free Software Foundation, either version 3 of the License, or
# (at your option) any later version.
#
# This program is distributed in the hope that it will be useful,
# but WITHOUT ANY WARRANTY; without even the implied warranty of
# MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.  See the
# GNU General Public License for more details.
#
# You should have received a copy of the GNU General Public License
# along with this program.  If not, see <http://www.gnu.org/licenses/>.

import logging
import os

from rallypairing.constants import DEFAULT_LOG_LEVEL, LOG_LEVEL_ENV_VAR

PACKAGE_LOGGER_NAME = "rallypairing"
LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def _configured_level() -> int:
    level_name = os.environ.get(LOG_LEVEL_ENV_VAR, DEFAULT_LOG_LEVEL).strip().upper()
    level = logging.getLevelName(level_name)
    # getLevelName returns a string for unknown names
    return level if isinstance(level, int) else logging.WARNING


def setup_logger(name: str) -> logging.Logger:
    """Return a logger for ``name`` under the package logger.

    The package logger gets a single stream handler the first time this is
    called; its level is read from ``RALLYPAIRING_LOG_LEVEL``.

    Args:
        name: Usually ``__name__`` of the calling module

    Returns:
        The configured logger
    """
    package_logger = logging.getLogger(PACKAGE_LOGGER_NAME)
    if not package_logger.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        package_logger.addHandler(handler)
        package_logger.setLevel(_configured_level())
    return logging.getLogger(name)


__all__ = ["setup_logger"]
