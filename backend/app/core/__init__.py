"""
Core configuration and enums.
"""

from .modes import PayoutModeKind, MODE_LABELS, FIXED_TIER_LAYOUT

__all__ = [
    "PayoutModeKind",
    "MODE_LABELS",
    "FIXED_TIER_LAYOUT",
]
