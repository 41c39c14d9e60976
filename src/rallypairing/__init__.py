"""Rally Pairing: fair court rotation for couples and round-robin play."""

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

from rallypairing.analysis import SessionStatistics, analyze, format_schedule
from rallypairing.constants import MODE_COUPLES, MODE_ROUND_ROBIN
from rallypairing.controllers.session import (
    GenerationResult,
    RoundManager,
    ScheduleSession,
    generate,
)
from rallypairing.models.schedule import (
    CourtAssignment,
    GenerationRequest,
    PairingLedger,
    RoundData,
    ScheduleConfig,
)
from rallypairing.pairing import best_partner_split, form_groups, select_byes

__version__ = "0.1.0"

__all__ = [
    "MODE_COUPLES",
    "MODE_ROUND_ROBIN",
    "CourtAssignment",
    "GenerationRequest",
    "GenerationResult",
    "PairingLedger",
    "RoundData",
    "RoundManager",
    "ScheduleConfig",
    "ScheduleSession",
    "SessionStatistics",
    "analyze",
    "best_partner_split",
    "form_groups",
    "format_schedule",
    "generate",
    "select_byes",
]
