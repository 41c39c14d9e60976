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

# --- Constants ---

# Pairing modes
MODE_COUPLES = "couples"
MODE_ROUND_ROBIN = "round_robin"
PAIRING_MODES = (MODE_COUPLES, MODE_ROUND_ROBIN)
DEFAULT_MODE = MODE_COUPLES

# Participants placed on one court
UNITS_PER_GROUP = {
    MODE_COUPLES: 2,  # one matchup: couple vs couple
    MODE_ROUND_ROBIN: 4,  # two partner pairs
}

# Group formation search budgets (attempts per round)
COUPLES_SEARCH_ATTEMPTS = 400
ROUND_ROBIN_SEARCH_ATTEMPTS = 1000

# Penalty per previous grouping of a pair
REPEAT_WEIGHT = 10

# Court labels accepted by the court list parser
MIN_COURT_NUMBER = 1
MAX_COURT_NUMBER = 40

# Display labels
PARTICIPANT_LABELS = {
    MODE_COUPLES: "Couple",
    MODE_ROUND_ROBIN: "Player",
}
MODE_NAMES = {
    MODE_COUPLES: "Couples",
    MODE_ROUND_ROBIN: "Round Robin",
}

# Validation messages returned by generate()
ERROR_MISSING_PARTICIPANT_COUNT = "Enter how many participants are playing."
ERROR_MISSING_COURT_LIST = "Enter at least one court number."
ERROR_INVALID_COURT_LIST = "Court numbers must be distinct positive integers."
ERROR_MISSING_GAME_COUNT = "Enter how many games to generate."
ERROR_UNKNOWN_MODE = "Pairing mode must be one of: couples, round_robin."

# Environment variable controlling log verbosity
LOG_LEVEL_ENV_VAR = "RALLYPAIRING_LOG_LEVEL"
DEFAULT_LOG_LEVEL = "WARNING"
