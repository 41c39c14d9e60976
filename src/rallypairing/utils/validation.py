"""Input validation for schedule generation requests.

Each check comes in two flavours: ``validate_*`` returns a
:class:`ValidationResult` so callers can surface the message, and
``validate_*_strict`` raises the matching exception.
"""

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

import re
from typing import Any, List, Optional, Sequence

from rallypairing.constants import (
    ERROR_INVALID_COURT_LIST,
    ERROR_MISSING_COURT_LIST,
    ERROR_MISSING_GAME_COUNT,
    ERROR_MISSING_PARTICIPANT_COUNT,
    ERROR_UNKNOWN_MODE,
    MAX_COURT_NUMBER,
    MIN_COURT_NUMBER,
    PAIRING_MODES,
)
from rallypairing.exceptions import (
    CourtListValidationException,
    GameCountValidationException,
    ModeValidationException,
    ParticipantCountValidationException,
)


class ValidationResult:
    """Result of a validation check.

    Attributes:
        is_valid: Whether the validation passed
        error_message: Human-readable error message if invalid
        sanitized_value: Cleaned/normalized value if valid
    """

    def __init__(
        self,
        is_valid: bool,
        error_message: Optional[str] = None,
        sanitized_value: Any = None,
    ):
        self.is_valid = is_valid
        self.error_message = error_message
        self.sanitized_value = sanitized_value

    def __bool__(self) -> bool:
        """Allow using result in boolean context: if result: ..."""
        return self.is_valid

    def __repr__(self) -> str:
        if self.is_valid:
            return f"ValidationResult(VALID, {self.sanitized_value!r})"
        return f"ValidationResult(INVALID, {self.error_message!r})"


def _is_int(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


# ========== Count Validation ==========


def validate_participant_count(count: Any) -> ValidationResult:
    """Validate the number of participants (must be a positive integer)."""
    if not _is_int(count) or count <= 0:
        return ValidationResult(
            is_valid=False, error_message=ERROR_MISSING_PARTICIPANT_COUNT
        )
    return ValidationResult(is_valid=True, sanitized_value=count)


def validate_game_count(count: Any) -> ValidationResult:
    """Validate the number of games (rounds) to generate."""
    if not _is_int(count) or count <= 0:
        return ValidationResult(is_valid=False, error_message=ERROR_MISSING_GAME_COUNT)
    return ValidationResult(is_valid=True, sanitized_value=count)


def validate_participant_count_strict(count: Any) -> int:
    """Validate participant count and raise exception if invalid.

    Raises:
        ParticipantCountValidationException: If the count is invalid
    """
    result = validate_participant_count(count)
    if not result.is_valid:
        raise ParticipantCountValidationException(result.error_message)
    return result.sanitized_value


def validate_game_count_strict(count: Any) -> int:
    """Validate game count and raise exception if invalid.

    Raises:
        GameCountValidationException: If the count is invalid
    """
    result = validate_game_count(count)
    if not result.is_valid:
        raise GameCountValidationException(result.error_message)
    return result.sanitized_value


# ========== Court Validation ==========


def validate_court_numbers(court_numbers: Optional[Sequence[Any]]) -> ValidationResult:
    """Validate an already parsed list of court labels.

    The list must be non-empty and hold distinct positive integers. Order is
    preserved, since it decides which courts are filled first.

    Returns:
        ValidationResult whose sanitized value is the court list
    """
    if not court_numbers:
        return ValidationResult(is_valid=False, error_message=ERROR_MISSING_COURT_LIST)

    courts = list(court_numbers)
    if not all(_is_int(court) and court > 0 for court in courts):
        return ValidationResult(is_valid=False, error_message=ERROR_INVALID_COURT_LIST)
    if len(set(courts)) != len(courts):
        return ValidationResult(is_valid=False, error_message=ERROR_INVALID_COURT_LIST)

    return ValidationResult(is_valid=True, sanitized_value=courts)


def validate_court_numbers_strict(court_numbers: Optional[Sequence[Any]]) -> List[int]:
    """Validate court labels and raise exception if invalid.

    Raises:
        CourtListValidationException: If the list is empty or malformed
    """
    result = validate_court_numbers(court_numbers)
    if not result.is_valid:
        raise CourtListValidationException(result.error_message)
    return result.sanitized_value


# ========== Mode Validation ==========


def validate_mode(mode: Any) -> ValidationResult:
    """Validate a pairing mode key."""
    if mode not in PAIRING_MODES:
        return ValidationResult(is_valid=False, error_message=ERROR_UNKNOWN_MODE)
    return ValidationResult(is_valid=True, sanitized_value=mode)


def validate_mode_strict(mode: Any) -> str:
    """Validate a pairing mode and raise exception if unknown.

    Raises:
        ModeValidationException: If the mode is not supported
    """
    result = validate_mode(mode)
    if not result.is_valid:
        raise ModeValidationException(result.error_message)
    return result.sanitized_value


# ========== Request Validation ==========


def validate_generation_request(
    mode: Any, participant_count: Any, court_numbers: Any, game_count: Any
) -> ValidationResult:
    """Validate every field of a generation request.

    Checks run in a fixed order (participants, courts, games, mode) and the
    first failure is reported.

    Returns:
        ValidationResult; valid results carry no sanitized value
    """
    for result in (
        validate_participant_count(participant_count),
        validate_court_numbers(court_numbers),
        validate_game_count(game_count),
        validate_mode(mode),
    ):
        if not result.is_valid:
            return result
    return ValidationResult(is_valid=True)


# ========== Court List Parsing ==========


def parse_court_list(
    text: Optional[str],
    min_court: int = MIN_COURT_NUMBER,
    max_court: int = MAX_COURT_NUMBER,
) -> List[int]:
    """Parse free text such as ``"2,3,5 6 7-8"`` into court labels.

    Any run of characters other than digits and ``-`` separates tokens.
    Ranges may be written in either order. Labels outside
    ``[min_court, max_court]`` and unparseable tokens are dropped.

    Args:
        text: Raw user input
        min_court: Smallest accepted label
        max_court: Largest accepted label

    Returns:
        Sorted list of distinct court labels (possibly empty)

    Examples:
        >>> parse_court_list("2,3,5,6,7,8")
        [2, 3, 5, 6, 7, 8]
        >>> parse_court_list("1-3,6")
        [1, 2, 3, 6]
    """
    cleaned = (text or "").strip()
    if not cleaned:
        return []

    courts = set()
    for token in re.split(r"[^0-9\-]+", cleaned):
        token = token.strip()
        if not token:
            continue
        if "-" in token:
            bounds = token.split("-")
            if len(bounds) != 2 or not bounds[0].isdigit() or not bounds[1].isdigit():
                continue
            low, high = sorted((int(bounds[0]), int(bounds[1])))
            courts.update(
                court for court in range(low, high + 1) if min_court <= court <= max_court
            )
        elif token.isdigit():
            court = int(token)
            if min_court <= court <= max_court:
                courts.add(court)

    return sorted(courts)


def resolve_court_numbers(
    court_list_text: Optional[str] = None, court_count: Optional[int] = None
) -> List[int]:
    """Pick the courts for a session.

    An explicit court list wins; otherwise ``court_count`` courts numbered
    from 1 are used, capped to the accepted label range.

    Returns:
        Ordered court labels, empty when neither input yields a court
    """
    courts = parse_court_list(court_list_text)
    if courts:
        return courts
    if not _is_int(court_count) or court_count < MIN_COURT_NUMBER:
        return []
    return list(range(MIN_COURT_NUMBER, min(court_count, MAX_COURT_NUMBER) + 1))
