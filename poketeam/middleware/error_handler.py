import logging
from fastapi import FastAPI, Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException
from starlette.middleware.base import BaseHTTPMiddleware
from poketeam.services.pokeapi_client import PokeApiClientError

logger = logging.getLogger(__name__)


def error_response(status_code: int, code: str, message, details=None, headers=None) -> JSONResponse:
    error = {"code": code, "message": message}
    if details is not None:
        error["details"] = details
    return JSONResponse(
        status_code=status_code,
        content={"success": False, "error": error},
        headers=headers,
    )


async def http_exception_handler(request: Request, exc: StarletteHTTPException):
    return error_response(
        exc.status_code,
        "HTTP_EXCEPTION",
        exc.detail,
        headers=getattr(exc, "headers", None),
    )

async def validation_exception_handler(request: Request, exc: RequestValidationError):
    return error_response(
        422,
        "VALIDATION_ERROR",
        "Request validation failed",
        details=jsonable_encoder(exc.errors()),
    )

def register_exception_handlers(app: FastAPI) -> None:
    """HTTPException and request validation never reach the middleware, so they get handlers"""
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(RequestValidationError, validation_exception_handler)


class ErrorHandlerMiddleware(BaseHTTPMiddleware):
    async def dispatch(self, request: Request, call_next):
        try:
            return await call_next(request)

        except PokeApiClientError as pe:
            return error_response(
                502,
                "UPSTREAM_ERROR",
                f"Could not load the Pokémon list: {pe}",
                details={"status": pe.status} if pe.status is not None else None,
            )

        except Exception:
            logger.exception("Unhandled error on %s %s", request.method, request.url.path)
            return error_response(500, "INTERNAL_ERROR", "An internal error occurred.")
