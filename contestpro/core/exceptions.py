"""
Application errors
Typed errors raised by services and auth dependencies, rendered to JSON by
the handlers registered in contestpro.main
"""
from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from contestpro.utils.response import error_response


class ContestProError(Exception):
    """Base error carrying the HTTP status and the client-facing message"""

    status_code: int = 400
    message: str = "Bad request"
    # Key the message is reported under in the response body
    field: str = "message"

    def __init__(self, message: str = None):
        if message is not None:
            self.message = message
        super().__init__(self.message)


class AuthMissingError(ContestProError):
    """No Authorization header on the request"""
    status_code = 401
    message = "Forbidden access"


class AuthInvalidError(ContestProError):
    """Bearer token missing from the header or failing verification"""
    status_code = 401
    message = "Unauthorized access"


class ForbiddenError(ContestProError):
    """Valid token, insufficient rights"""
    status_code = 403
    message = "forbidden access"


class NotFoundError(ContestProError):
    status_code = 404
    message = "Not found"


class InvalidIdError(ContestProError):
    status_code = 400
    message = "Invalid id"


class InvalidQueryError(ContestProError):
    """No recognised combination of query parameters"""
    status_code = 400
    message = "Please provide a valid query"
    field = "error"


class WinnerAlreadyDeclaredError(ContestProError):
    status_code = 400
    message = "A winner has already been declared for this contest"


class PaymentGatewayError(ContestProError):
    """The payment provider rejected the call or could not be reached"""
    status_code = 502
    message = "Payment gateway error"


def register_exception_handlers(app: FastAPI) -> None:
    """Render ContestProError subclasses as JSON responses"""

    @app.exception_handler(ContestProError)
    async def _contestpro_error_handler(request: Request, exc: ContestProError) -> JSONResponse:
        return error_response(
            message=exc.message,
            status_code=exc.status_code,
            field=exc.field
        )
