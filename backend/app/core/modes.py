"""
Payout mode enum and display labels.
"""

from enum import Enum


class PayoutModeKind(str, Enum):
    """Supported prize distribution strategies."""
    EQUAL_SPLIT = "equal_split"
    FIXED_TIERS = "fixed_tiers"


# Human readable names shown next to each strategy
MODE_LABELS = {
    PayoutModeKind.EQUAL_SPLIT: "Equal split (optional X-0 bonus)",
    PayoutModeKind.FIXED_TIERS: "Fixed percentage tiers (top 8)",
}

# Tier labels for the fixed percentage strategy: (attribute, label, players in tier)
FIXED_TIER_LAYOUT = (
    ("first", "1st place", 1),
    ("second", "2nd place", 1),
    ("third", "3rd-4th place", 2),
    ("fifth", "5th-8th place", 4),
)

UNDEFEATED_TIER_LABEL = "X-0 prize"
DEFAULT_TIER_LABEL = "Default prize"
