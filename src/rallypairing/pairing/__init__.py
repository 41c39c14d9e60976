"""Bye allocation, court group search and round-robin partner selection."""

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

from rallypairing.pairing.byes import select_byes
from rallypairing.pairing.groups import (
    GroupSearchResult,
    form_groups,
    score_groups,
    search_groups,
)
from rallypairing.pairing.round_robin import best_partner_split, partner_split_score

__all__ = [
    "GroupSearchResult",
    "best_partner_split",
    "form_groups",
    "partner_split_score",
    "score_groups",
    "search_groups",
    "select_byes",
]
