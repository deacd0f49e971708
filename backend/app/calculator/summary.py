"""
Text rendering of a prize breakdown, one line per payout.
"""

import math
from typing import List

from .models import PrizeBreakdown
from ..core.config import CURRENCY_LABEL


def format_amount(amount: float, currency: str = CURRENCY_LABEL) -> str:
    """Floor to whole currency units, e.g. 162.5 -> '162 kr.'"""
    return f"{math.floor(amount)} {currency}"


def format_breakdown_lines(breakdown: PrizeBreakdown, currency: str = CURRENCY_LABEL) -> List[str]:
    """
    Render the breakdown as display lines.

    Single-player tiers are shown as a plain prize, shared tiers also state
    how many players receive the amount.
    """
    lines = []
    for tier in breakdown.tier_amounts:
        amount = format_amount(tier.amount_per_player, currency)
        if tier.player_count == 1:
            lines.append(f"{tier.label}: {amount}")
        else:
            lines.append(f"{tier.label}: {amount} to {tier.player_count} players.")

    if breakdown.organizer_cut is not None:
        lines.append(f"Tournament organizer compensation: {format_amount(breakdown.organizer_cut, currency)}")
    if breakdown.friday_contribution is not None:
        lines.append(f"Prize money towards bigger tournament: {format_amount(breakdown.friday_contribution, currency)}")

    return lines
