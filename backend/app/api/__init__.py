"""
API module.
"""

from .routes import calculations_router

__all__ = [
    "calculations_router",
]
