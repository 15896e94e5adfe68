from typing import Any


class TripRequestValidationError(ValueError):
    """Raised when an estimate request is missing fields or has unusable numbers."""

    def __init__(self, message: str, fields: list[str], received: Any = None):
        super().__init__(message)
        self.message = message
        self.fields = fields
        self.received = received


class BudgetEstimationError(RuntimeError):
    """Raised when computing an estimate fails unexpectedly."""
