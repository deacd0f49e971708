"""
Prize calculation API routes.
"""

import logging
from fastapi import APIRouter, HTTPException
from fastapi.responses import JSONResponse

from ..schemas import (
    CalculationRequest,
    CalculationResponse,
    EqualSplitSchema,
    TierResult,
    WarningResult,
    RebalanceRequest,
    RebalanceResponse,
    DefaultsResponse,
    ErrorResponse
)
from ...calculator import (
    TournamentInput,
    EqualSplit,
    FixedPercentageTiers,
    PayoutMode,
    ValidationError,
    compute_breakdown,
    rebalance_from_first_place,
    format_breakdown_lines
)
from ...core.config import (
    BONUS_RATIOS,
    DEFAULT_BONUS_RATIO,
    CURRENCY_LABEL,
    DEFAULT_ENTRY_FEE,
    DEFAULT_IS_FRIDAY_EVENT,
    DEFAULT_ORGANIZER_COMPENSATION,
    DEFAULT_UNDEFEATED_BONUS,
    DEFAULT_FIRST_PLACE_PERCENT
)
from ...core.modes import MODE_LABELS


logger = logging.getLogger("app.api.calculations")

UNPROCESSABLE_STATUS = 422

router = APIRouter(prefix="/calculations", tags=["calculations"])


def to_tournament_input(request: CalculationRequest) -> TournamentInput:
    """Convert a validated request into calculator input."""
    mode = request.payout_mode
    payout_mode: PayoutMode
    if isinstance(mode, EqualSplitSchema):
        payout_mode = EqualSplit(
            prized_player_count=mode.prized_player_count,
            undefeated_bonus=mode.undefeated_bonus
        )
    else:
        payout_mode = FixedPercentageTiers(
            first=mode.first,
            second=mode.second,
            third=mode.third,
            fifth=mode.fifth
        )

    return TournamentInput(
        total_players=request.total_players,
        entry_fee=request.entry_fee,
        payout_mode=payout_mode,
        is_friday_event=request.is_friday_event,
        organizer_compensation=request.organizer_compensation
    )


def validation_error_response(error: ValidationError) -> JSONResponse:
    return JSONResponse(
        status_code=UNPROCESSABLE_STATUS,
        content=ErrorResponse(**error.to_dict()).model_dump()
    )


@router.post(
    "/breakdown",
    response_model=CalculationResponse,
    responses={UNPROCESSABLE_STATUS: {"model": ErrorResponse}}
)
async def calculate_breakdown(request: CalculationRequest):
    """
    Calculate the prize breakdown for a tournament.

    Returns per-tier amounts, side deductions and ready-to-display lines
    floored to whole currency units.
    """
    try:
        breakdown = compute_breakdown(to_tournament_input(request))
    except ValidationError as e:
        logger.info(f"Rejected calculation request: {e.message}")
        return validation_error_response(e)

    return CalculationResponse(
        tier_amounts=[TierResult(**tier.to_dict()) for tier in breakdown.tier_amounts],
        gross_pool=breakdown.gross_pool,
        net_pool=breakdown.net_pool,
        organizer_deduction=breakdown.organizer_deduction,
        organizer_cut=breakdown.organizer_cut,
        friday_contribution=breakdown.friday_contribution,
        warnings=[WarningResult(**w.to_dict()) for w in breakdown.warnings],
        lines=format_breakdown_lines(breakdown, CURRENCY_LABEL)
    )


@router.post("/rebalance", response_model=RebalanceResponse)
async def rebalance_tiers(request: RebalanceRequest) -> RebalanceResponse:
    """Suggest 2nd, 3rd-4th and 5th-8th percentages for a given first place percentage."""
    try:
        tiers = rebalance_from_first_place(request.first)
    except ValidationError as e:
        raise HTTPException(
            status_code=UNPROCESSABLE_STATUS,
            detail=e.message
        )

    return RebalanceResponse(first=tiers.first, second=tiers.second, third=tiers.third, fifth=tiers.fifth)


@router.get("/defaults", response_model=DefaultsResponse)
async def get_defaults() -> DefaultsResponse:
    """Default values for a new calculation form."""
    tiers = rebalance_from_first_place(DEFAULT_FIRST_PLACE_PERCENT)

    bonus_ratios = {str(count): ratio for count, ratio in BONUS_RATIOS.items()}
    bonus_ratios[f"{max(BONUS_RATIOS) + 1}+"] = DEFAULT_BONUS_RATIO

    return DefaultsResponse(
        entry_fee=DEFAULT_ENTRY_FEE,
        is_friday_event=DEFAULT_IS_FRIDAY_EVENT,
        organizer_compensation=DEFAULT_ORGANIZER_COMPENSATION,
        undefeated_bonus=DEFAULT_UNDEFEATED_BONUS,
        currency=CURRENCY_LABEL,
        bonus_ratios=bonus_ratios,
        fixed_tiers=RebalanceResponse(first=tiers.first, second=tiers.second, third=tiers.third, fifth=tiers.fifth),
        modes={kind.value: label for kind, label in MODE_LABELS.items()}
    )
