"""Exceptions for use in Rally Pairing"""

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


# ========== Base Application Exception ==========


class RallyPairingException(Exception):
    """Base exception for all Rally Pairing errors.

    All custom exceptions in the application should inherit from this class.
    This enables catching all application-specific errors with a single except clause.
    """

    pass


# ========== Pairing Exceptions ==========


class PairingException(RallyPairingException):
    """Base exception for pairing-related errors."""

    pass


class InvalidPairingException(PairingException):
    """Raised when a group or pool does not fit the requested courts."""

    pass


# ========== Session Exceptions ==========


class SessionException(RallyPairingException):
    """Base exception for schedule session errors."""

    pass


class RoundNotFoundException(SessionException):
    """Raised when a requested round does not exist."""

    pass


# ========== Validation Exceptions ==========


class ValidationException(RallyPairingException):
    """Base exception for validation errors."""

    pass


class ParticipantCountValidationException(ValidationException):
    """Raised when the participant count is missing or not positive."""

    pass


class CourtListValidationException(ValidationException):
    """Raised when the court list is empty or contains invalid labels."""

    pass


class GameCountValidationException(ValidationException):
    """Raised when the game count is missing or not positive."""

    pass


class ModeValidationException(ValidationException):
    """Raised when an unknown pairing mode is requested."""

    pass


# ========== Configuration Exceptions ==========


class ConfigurationException(RallyPairingException):
    """Base exception for configuration errors."""

    pass


class InvalidConfigurationException(ConfigurationException):
    """Raised when configuration data is invalid."""

    pass
