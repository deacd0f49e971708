"""
Distribution strategies for splitting the net pool into prize tiers.

Two strategies are supported:
- Equal split: every prized player gets the same amount, optionally after an
  undefeated (X-0) player has taken a bonus share sized by the prized player count.
- Fixed percentage tiers: the top 8 are paid fixed percentages of the pool,
  grouped as 1st, 2nd, 3rd-4th and 5th-8th.
"""

import logging
from typing import List, Tuple

from .errors import ValidationError
from .validation import require_finite, require_count
from .models import TierAmount, FixedPercentageTiers, DegenerateInputWarning
from ..core.config import BONUS_RATIOS, DEFAULT_BONUS_RATIO, THIRD_RATIO, FIFTH_RATIO
from ..core.modes import FIXED_TIER_LAYOUT, UNDEFEATED_TIER_LABEL, DEFAULT_TIER_LABEL


logger = logging.getLogger("app.calculator.distribution")


def bonus_ratio(prized_player_count: int) -> float:
    """Share of the net pool that goes to the undefeated player."""
    return BONUS_RATIOS.get(prized_player_count, DEFAULT_BONUS_RATIO)


def distribute_equal_split(
    net_pool: float,
    prized_player_count: int,
    undefeated_bonus: bool
) -> Tuple[List[TierAmount], List[DegenerateInputWarning]]:
    """
    Split the net pool equally, optionally paying an X-0 bonus first.

    The bonus ratio is looked up by the prized player count including the
    undefeated player. With a single prized player the bonus is the whole pool
    and no remaining tier is produced.

    Args:
        net_pool: Pool left after deductions
        prized_player_count: Players in prizes, undefeated player included
        undefeated_bonus: Whether one of them went undefeated

    Returns:
        Tuple of (tiers in payout order, warnings for degenerate input)
    """
    require_count(prized_player_count, "prized_player_count", "Players in prizes")

    if not undefeated_bonus:
        return [TierAmount(DEFAULT_TIER_LABEL, net_pool / prized_player_count, prized_player_count)], []

    ratio = bonus_ratio(prized_player_count)
    tiers = [TierAmount(UNDEFEATED_TIER_LABEL, net_pool * ratio, 1)]
    warnings: List[DegenerateInputWarning] = []

    remaining_players = prized_player_count - 1
    if remaining_players == 0:
        logger.warning("Undefeated bonus requested with a single prized player; whole pool goes to the winner")
        warnings.append(DegenerateInputWarning(
            code="single_prized_player_bonus",
            message="Only one player is in prizes, so the undefeated player receives the entire pool."
        ))
        return tiers, warnings

    tiers.append(TierAmount(
        DEFAULT_TIER_LABEL,
        net_pool * (1 - ratio) / remaining_players,
        remaining_players
    ))
    return tiers, warnings


def validate_tiers(tiers: FixedPercentageTiers) -> None:
    """Raise ValidationError unless the tier percentages cover exactly 100% of the pool."""
    for name, _, _ in FIXED_TIER_LAYOUT:
        if require_finite(getattr(tiers, name), name, f"Percentage for {name}") < 0:
            raise ValidationError(f"Percentage for {name} cannot be negative", field=name)

    # Compare with a tolerance so fractional percentages are accepted
    if abs(tiers.weighted_total - 100) > 1e-9:
        raise ValidationError(
            f"Tier percentages must account for 100% of the pool "
            f"(first + second + 2*third + 4*fifth = {tiers.weighted_total:g})",
            field="payout_mode"
        )


def distribute_fixed_tiers(net_pool: float, tiers: FixedPercentageTiers) -> List[TierAmount]:
    """
    Pay the top 8 fixed percentages of the net pool.

    Raises:
        ValidationError: If the weighted percentages don't sum to 100
    """
    validate_tiers(tiers)

    return [
        TierAmount(label, net_pool * getattr(tiers, name) / 100, count)
        for name, label, count in FIXED_TIER_LAYOUT
    ]


def rebalance_from_first_place(first: float) -> FixedPercentageTiers:
    """
    Suggest the remaining tier percentages from a first place percentage.

    3rd-4th and 5th-8th get fixed proportions of the non-first remainder,
    rounded to whole percents. Second place absorbs the rounding so the
    weighted total stays exactly 100.

    Raises:
        ValidationError: If first is outside 0..100 or the rounding would
            leave second place with a negative share
    """
    first = require_finite(first, "first", "First place percentage")
    if first < 0 or first > 100:
        raise ValidationError("First place percentage must be between 0 and 100", field="first")

    remainder = 100 - first
    third = round(remainder * THIRD_RATIO)
    fifth = round(remainder * FIFTH_RATIO)
    second = 100 - first - 2 * third - 4 * fifth
    if second < 0:
        raise ValidationError(
            f"First place at {first:g}% leaves too little for the rounded lower tiers",
            field="first"
        )

    return FixedPercentageTiers(first=first, second=second, third=third, fifth=fifth)
