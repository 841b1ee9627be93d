"""
Core module for application infrastructure.
"""
from contestpro.core.exceptions import (
    ContestProError,
    AuthMissingError,
    AuthInvalidError,
    ForbiddenError,
    NotFoundError,
    InvalidIdError,
    InvalidQueryError,
    WinnerAlreadyDeclaredError,
    PaymentGatewayError,
    register_exception_handlers
)

__all__ = [
    "ContestProError",
    "AuthMissingError",
    "AuthInvalidError",
    "ForbiddenError",
    "NotFoundError",
    "InvalidIdError",
    "InvalidQueryError",
    "WinnerAlreadyDeclaredError",
    "PaymentGatewayError",
    "register_exception_handlers"
]
