"""
supermarket/errors.py
---------------------
Error kinds raised by the pricing core.

Each kind maps to a distinct HTTP outcome in the blueprints, so callers
never have to string-match messages:

    ValidationError  → 400
    NotFoundError    → 404
    ConflictError    → 409
"""


class PricingError(Exception):
    """Base class for all pricing/checkout errors."""
    status_code = 400

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class ValidationError(PricingError):
    """Malformed input to a constructor or operation."""
    status_code = 400


class NotFoundError(PricingError):
    """Referenced cart or item code does not exist."""
    status_code = 404


class ConflictError(PricingError):
    """A rule for this item code already exists."""
    status_code = 409
