"""
Data models for the prize calculator.
"""

import math
from dataclasses import dataclass, field
from typing import Optional, Tuple, Union


@dataclass(frozen=True)
class EqualSplit:
    """Split the pool equally among prized players, optionally carving out an X-0 bonus first."""

    prized_player_count: int
    undefeated_bonus: bool = False


@dataclass(frozen=True)
class FixedPercentageTiers:
    """
    Percent of the net pool paid to each player in the top 8.

    Ranks are grouped as {1}, {2}, {3-4} and {5-8}, so the weighted
    sum first + second + 2*third + 4*fifth must be exactly 100.
    """

    first: float
    second: float
    third: float
    fifth: float

    @property
    def weighted_total(self) -> float:
        return self.first + self.second + 2 * self.third + 4 * self.fifth


PayoutMode = Union[EqualSplit, FixedPercentageTiers]


@dataclass(frozen=True)
class TournamentInput:
    """Validated inputs for a single prize calculation."""

    total_players: int
    entry_fee: float
    payout_mode: PayoutMode
    is_friday_event: bool = True
    organizer_compensation: bool = True


@dataclass(frozen=True)
class DegenerateInputWarning:
    """An input combination that was resolved by policy rather than plain arithmetic."""

    code: str
    message: str

    def to_dict(self) -> dict:
        return {"code": self.code, "message": self.message}


@dataclass(frozen=True)
class NetPool:
    """Result of applying organizer and Friday deductions to the gross pool."""

    gross_pool: float
    net_pool: float
    organizer_deduction: float = 0.0
    organizer_cut: Optional[float] = None
    friday_contribution: Optional[float] = None
    warnings: Tuple[DegenerateInputWarning, ...] = ()


@dataclass(frozen=True)
class TierAmount:
    """A group of equally paid finishers."""

    label: str
    amount_per_player: float
    player_count: int

    @property
    def display_amount(self) -> int:
        """Per-player amount floored to whole currency units."""
        return math.floor(self.amount_per_player)

    @property
    def total(self) -> float:
        return self.amount_per_player * self.player_count

    def to_dict(self) -> dict:
        return {
            "label": self.label,
            "amount_per_player": self.amount_per_player,
            "display_amount": self.display_amount,
            "player_count": self.player_count,
            "total": self.total
        }


@dataclass(frozen=True)
class PrizeBreakdown:
    """Full prize distribution for one tournament."""

    tier_amounts: Tuple[TierAmount, ...]
    gross_pool: float
    net_pool: float
    organizer_deduction: float = 0.0
    organizer_cut: Optional[float] = None
    friday_contribution: Optional[float] = None
    warnings: Tuple[DegenerateInputWarning, ...] = field(default_factory=tuple)

    @property
    def total_paid_out(self) -> float:
        return sum(tier.total for tier in self.tier_amounts)

    @property
    def accounted_total(self) -> float:
        """Prizes plus everything deducted before distribution."""
        return self.total_paid_out + self.organizer_deduction + (self.friday_contribution or 0.0)

    def to_dict(self) -> dict:
        """Convert to dictionary for JSON serialization."""
        return {
            "tier_amounts": [tier.to_dict() for tier in self.tier_amounts],
            "gross_pool": self.gross_pool,
            "net_pool": self.net_pool,
            "organizer_deduction": self.organizer_deduction,
            "organizer_cut": self.organizer_cut,
            "friday_contribution": self.friday_contribution,
            "warnings": [w.to_dict() for w in self.warnings]
        }
