"""
Prize pool derivation.

Deductions are applied in a fixed order, each one to the pool left by the
previous step:
1. Organizer compensation (entry fee + flat fee leaves the pool)
2. Friday contribution (10% of what remains goes to a bigger tournament)
"""

import logging
from typing import List

from .models import NetPool, DegenerateInputWarning
from ..core.config import ORGANIZER_FLAT_FEE, FRIDAY_CONTRIBUTION_RATE


logger = logging.getLogger("app.calculator.pool")


def derive_net_pool(
    total_players: int,
    entry_fee: float,
    organizer_compensation: bool,
    is_friday_event: bool
) -> NetPool:
    """
    Compute the distributable pool after organizer and Friday deductions.

    The reported organizer cut is the flat fee only, while the amount removed
    from the pool is entry_fee + flat fee (the organizer's own entry is refunded).
    That full amount is returned as organizer_deduction.

    Args:
        total_players: Players in the tournament, organizer included
        entry_fee: Entry fee per player
        organizer_compensation: Whether the organizer cut is deducted
        is_friday_event: Whether the Friday contribution is reserved

    Returns:
        NetPool with the gross pool, net pool and side deductions
    """
    gross_pool = total_players * entry_fee
    pool = gross_pool
    warnings: List[DegenerateInputWarning] = []

    organizer_deduction = 0.0
    organizer_cut = None
    if organizer_compensation:
        organizer_deduction = entry_fee + ORGANIZER_FLAT_FEE
        organizer_cut = float(ORGANIZER_FLAT_FEE)
        pool -= organizer_deduction

    if pool < 0:
        logger.warning(
            "Organizer deduction of %s exceeds gross pool of %s; clamping pool to zero",
            organizer_deduction, gross_pool
        )
        warnings.append(DegenerateInputWarning(
            code="negative_net_pool",
            message=(
                f"Organizer deduction ({organizer_deduction:g}) exceeds the gross pool "
                f"({gross_pool:g}); nothing is left to distribute."
            )
        ))
        # Only what was actually collected can be deducted
        organizer_deduction = gross_pool
        pool = 0.0

    friday_contribution = None
    if is_friday_event:
        friday_contribution = pool * FRIDAY_CONTRIBUTION_RATE
        pool = pool - friday_contribution

    return NetPool(
        gross_pool=gross_pool,
        net_pool=pool,
        organizer_deduction=organizer_deduction,
        organizer_cut=organizer_cut,
        friday_contribution=friday_contribution,
        warnings=tuple(warnings)
    )
