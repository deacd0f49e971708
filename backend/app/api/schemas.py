"""
Pydantic schemas for API request/response validation.
"""

from typing import Annotated, Optional, List, Dict, Literal, Union
from pydantic import BaseModel, Field

from ..core.config import (
    DEFAULT_ENTRY_FEE,
    DEFAULT_IS_FRIDAY_EVENT,
    DEFAULT_ORGANIZER_COMPENSATION,
    DEFAULT_UNDEFEATED_BONUS
)


# ============== Payout Mode Schemas ==============

class EqualSplitSchema(BaseModel):
    """Equal split among prized players."""
    mode: Literal["equal_split"] = "equal_split"
    prized_player_count: int = Field(..., ge=1)
    undefeated_bonus: bool = DEFAULT_UNDEFEATED_BONUS


class FixedTiersSchema(BaseModel):
    """Fixed percentages for 1st, 2nd, 3rd-4th and 5th-8th place."""
    mode: Literal["fixed_tiers"] = "fixed_tiers"
    first: float = Field(..., ge=0, le=100, allow_inf_nan=False)
    second: float = Field(..., ge=0, le=100, allow_inf_nan=False)
    third: float = Field(..., ge=0, le=100, allow_inf_nan=False)
    fifth: float = Field(..., ge=0, le=100, allow_inf_nan=False)


PayoutModeSchema = Annotated[Union[EqualSplitSchema, FixedTiersSchema], Field(discriminator="mode")]


# ============== Calculation Schemas ==============

class CalculationRequest(BaseModel):
    """Prize calculation request."""
    total_players: int = Field(..., ge=1)  # Includes the tournament organizer
    entry_fee: float = Field(default=DEFAULT_ENTRY_FEE, ge=1, allow_inf_nan=False)
    is_friday_event: bool = DEFAULT_IS_FRIDAY_EVENT
    organizer_compensation: bool = DEFAULT_ORGANIZER_COMPENSATION
    payout_mode: PayoutModeSchema


class TierResult(BaseModel):
    """A group of equally paid finishers."""
    label: str
    amount_per_player: float
    display_amount: int
    player_count: int
    total: float


class WarningResult(BaseModel):
    """An input combination resolved by policy."""
    code: str
    message: str


class CalculationResponse(BaseModel):
    """Full prize breakdown response."""
    tier_amounts: List[TierResult]
    gross_pool: float
    net_pool: float
    organizer_deduction: float
    organizer_cut: Optional[float] = None
    friday_contribution: Optional[float] = None
    warnings: List[WarningResult] = []
    lines: List[str]


# ============== Rebalance Schemas ==============

class RebalanceRequest(BaseModel):
    """Derive tier percentages from a first place percentage."""
    first: float = Field(..., ge=0, le=100, allow_inf_nan=False)


class RebalanceResponse(BaseModel):
    """Suggested tier percentages."""
    first: float
    second: float
    third: float
    fifth: float


class DefaultsResponse(BaseModel):
    """Default form values for a new calculation."""
    entry_fee: float
    is_friday_event: bool
    organizer_compensation: bool
    undefeated_bonus: bool
    currency: str
    bonus_ratios: Dict[str, float]
    fixed_tiers: RebalanceResponse
    modes: Dict[str, str]


# ============== Error Schemas ==============

class ErrorResponse(BaseModel):
    """API error response."""
    detail: str
    field: Optional[str] = None
    code: Optional[str] = None
