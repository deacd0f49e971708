"""
Exceptions raised by the prize calculator.
"""

from typing import Optional


class ValidationError(Exception):
    """Raised when calculator input violates a precondition."""

    def __init__(self, message: str, field: Optional[str] = None):
        super().__init__(message)
        self.message = message
        self.field = field

    def to_dict(self) -> dict:
        return {"detail": self.message, "field": self.field, "code": "validation_error"}
