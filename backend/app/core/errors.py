from fastapi import HTTPException, Request
from fastapi.responses import JSONResponse

from ..models.errors import ErrorResponse


class ConfigurationError(RuntimeError):
    """Required configuration is missing or invalid. Raised at startup, never recovered."""


class ClientInputError(HTTPException):
    """Bad or missing request input, reported back to the caller with its status code."""

    def __init__(self, status_code: int, status_message: str):
        super().__init__(status_code=status_code, detail=status_message)
        self.status_message = status_message


async def client_input_error_handler(request: Request, exc: ClientInputError) -> JSONResponse:
    body = ErrorResponse(
        statusCode=exc.status_code,
        statusMessage=exc.status_message,
        message=exc.status_message,
    )
    return JSONResponse(status_code=exc.status_code, content=body.model_dump())
