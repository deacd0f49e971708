"""
Tournament Prize Calculator

Computes prize money distributions from entry fees and payout rules.
"""

from .models import (
    TournamentInput,
    EqualSplit,
    FixedPercentageTiers,
    PayoutMode,
    NetPool,
    TierAmount,
    PrizeBreakdown,
    DegenerateInputWarning
)
from .errors import ValidationError
from .pool import derive_net_pool
from .distribution import (
    bonus_ratio,
    distribute_equal_split,
    distribute_fixed_tiers,
    rebalance_from_first_place,
    validate_tiers
)
from .engine import compute_breakdown, validate_input
from .summary import format_breakdown_lines

__all__ = [
    # Models
    "TournamentInput",
    "EqualSplit",
    "FixedPercentageTiers",
    "PayoutMode",
    "NetPool",
    "TierAmount",
    "PrizeBreakdown",
    "DegenerateInputWarning",
    # Errors
    "ValidationError",
    # Pool
    "derive_net_pool",
    # Distribution
    "bonus_ratio",
    "distribute_equal_split",
    "distribute_fixed_tiers",
    "rebalance_from_first_place",
    "validate_tiers",
    # Engine
    "compute_breakdown",
    "validate_input",
    # Summary
    "format_breakdown_lines",
]
