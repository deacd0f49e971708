"""
Prize breakdown engine.

Runs the full calculation: pool derivation, distribution for the selected
payout mode, and assembly of the final breakdown.
"""

import logging
import math
from typing import List, Optional

from .errors import ValidationError
from .models import (
    TournamentInput,
    EqualSplit,
    FixedPercentageTiers,
    PrizeBreakdown,
    TierAmount,
    DegenerateInputWarning
)
from .pool import derive_net_pool
from .distribution import distribute_equal_split, distribute_fixed_tiers, validate_tiers
from .validation import require_finite, require_count


logger = logging.getLogger("app.calculator.engine")


def validate_input(tournament: TournamentInput) -> None:
    """
    Check the preconditions of a calculation.

    Raises:
        ValidationError: On the first violated precondition
    """
    require_count(tournament.total_players, "total_players", "Total players")
    entry_fee = require_finite(tournament.entry_fee, "entry_fee", "Entry fee")
    if entry_fee < 1:
        raise ValidationError("Entry fee must be at least 1", field="entry_fee")

    # The pool must stay representable through every deduction
    if not math.isfinite(float(tournament.total_players) * entry_fee):
        raise ValidationError("Prize pool is too large to calculate", field="entry_fee")

    mode = tournament.payout_mode
    if isinstance(mode, EqualSplit):
        require_count(mode.prized_player_count, "prized_player_count", "Players in prizes")
    elif isinstance(mode, FixedPercentageTiers):
        validate_tiers(mode)
    else:
        raise ValidationError(f"Unsupported payout mode: {type(mode).__name__}", field="payout_mode")


def compute_breakdown(tournament: TournamentInput) -> PrizeBreakdown:
    """
    Compute the prize breakdown for a tournament.

    Identical input always yields an identical breakdown; no state is kept
    between calls.

    Args:
        tournament: Validated tournament input

    Returns:
        PrizeBreakdown with per-tier amounts and side deductions

    Raises:
        ValidationError: If the input violates a precondition
    """
    validate_input(tournament)

    pool = derive_net_pool(
        tournament.total_players,
        tournament.entry_fee,
        tournament.organizer_compensation,
        tournament.is_friday_event
    )
    warnings: List[DegenerateInputWarning] = list(pool.warnings)

    mode = tournament.payout_mode
    if isinstance(mode, EqualSplit):
        tiers, split_warnings = distribute_equal_split(
            pool.net_pool, mode.prized_player_count, mode.undefeated_bonus
        )
        warnings.extend(split_warnings)
    else:
        tiers = distribute_fixed_tiers(pool.net_pool, mode)

    breakdown = assemble_breakdown(tiers, pool.gross_pool, pool.net_pool, pool.organizer_deduction,
                                   pool.organizer_cut, pool.friday_contribution, warnings)

    logger.debug(
        "Computed breakdown: gross=%s net=%s tiers=%d warnings=%d",
        breakdown.gross_pool, breakdown.net_pool, len(breakdown.tier_amounts), len(breakdown.warnings)
    )
    return breakdown


def assemble_breakdown(
    tiers: List[TierAmount],
    gross_pool: float,
    net_pool: float,
    organizer_deduction: float,
    organizer_cut: Optional[float],
    friday_contribution: Optional[float],
    warnings: List[DegenerateInputWarning]
) -> PrizeBreakdown:
    """Merge tiers and side deductions, dropping lines that don't apply."""
    return PrizeBreakdown(
        tier_amounts=tuple(t for t in tiers if t.player_count > 0),
        gross_pool=gross_pool,
        net_pool=net_pool,
        organizer_deduction=organizer_deduction,
        organizer_cut=organizer_cut if organizer_cut else None,
        friday_contribution=friday_contribution if friday_contribution else None,
        warnings=tuple(warnings)
    )
