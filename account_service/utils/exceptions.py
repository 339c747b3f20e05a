import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from account_service.services.errors import (
    AccountError,
    AccountNotFound,
    DuplicateAccount,
    InvalidCredentials,
    MissingCredentials,
    StorageUnavailable,
)
from account_service.utils.response import error_response

logger = logging.getLogger(__name__)

STATUS_CODES: dict[type[AccountError], int] = {
    MissingCredentials: 400,
    DuplicateAccount: 400,
    AccountNotFound: 400,
    InvalidCredentials: 400,
    StorageUnavailable: 500,
}


def status_code_for(exc: AccountError) -> int:
    for kind, status_code in STATUS_CODES.items():
        if isinstance(exc, kind):
            return status_code
    return 400


def register_exception_handlers(app: FastAPI) -> None:
    @app.exception_handler(AccountError)
    async def account_error_handler(request: Request, exc: AccountError) -> JSONResponse:
        return JSONResponse(
            status_code=status_code_for(exc),
            content=error_response(exc.message),
        )

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
        return JSONResponse(
            status_code=400,
            content=error_response("Invalid request body"),
        )

    @app.exception_handler(Exception)
    async def general_exception_handler(request: Request, exc: Exception) -> JSONResponse:
        logger.exception("Unhandled exception on %s %s", request.method, request.url.path)
        return JSONResponse(
            status_code=500,
            content=error_response("Something went wrong, please try again later!"),
        )
