"""
Application configuration and prize calculation constants.
"""

import os


# Comma-separated list of allowed frontend origins
CORS_ORIGINS = os.getenv("CORS_ORIGINS", "http://localhost:5173,http://localhost:3000").split(",")

LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()

# Label appended to amounts in the rendered summary lines
CURRENCY_LABEL = os.getenv("CURRENCY_LABEL", "kr.")

DEFAULT_ENTRY_FEE = float(os.getenv("DEFAULT_ENTRY_FEE", "50"))
DEFAULT_IS_FRIDAY_EVENT = True
DEFAULT_ORGANIZER_COMPENSATION = True
DEFAULT_UNDEFEATED_BONUS = False

# Organizer compensation: entry fee + this flat fee leave the pool,
# only the flat fee is reported as the organizer's cut
ORGANIZER_FLAT_FEE = 50

# Share of a Friday pool reserved for the bigger tournament
FRIDAY_CONTRIBUTION_RATE = 0.10

# Undefeated bonus share, keyed by number of prized players (4 or more use 0.35)
BONUS_RATIOS = {
    1: 1.0,
    2: 0.6,
    3: 0.4,
}
DEFAULT_BONUS_RATIO = 0.35

# Proportions of the non-first remainder used to suggest 3rd-4th and 5th-8th shares
THIRD_RATIO = 0.176
FIFTH_RATIO = 0.088
DEFAULT_FIRST_PLACE_PERCENT = 32
