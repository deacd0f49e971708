"""
API route modules.
"""

from .calculations_routes import router as calculations_router

__all__ = ["calculations_router"]
