# app/shared/middleware/exception_middleware.py (async version)

"""
Middleware for centralized exception handling.

This module defines middleware that intercepts exceptions and formats
appropriate error responses for the client.
"""

import time
import logging
import traceback
from typing import Callable

from fastapi import Request, status
from fastapi.responses import JSONResponse
from starlette.middleware.base import BaseHTTPMiddleware

from app.domain.exceptions import DomainException
from app.adapters.configuration.config import settings

# Configure logger
logger = logging.getLogger(__name__)

# Mapping from the domain exception 'internal_code' to the HTTP status code
DOMAIN_STATUS_CODES = {
    "RESOURCE_NOT_FOUND": status.HTTP_404_NOT_FOUND,
    "RESOURCE_ALREADY_EXISTS": status.HTTP_409_CONFLICT,
    "INVALID_INPUT": status.HTTP_400_BAD_REQUEST,
    "DATABASE_OPERATION_ERROR": status.HTTP_500_INTERNAL_SERVER_ERROR,
}


def _client_host(request: Request) -> str:
    return request.client.host if request.client else 'N/A'


class AsyncExceptionMiddleware(BaseHTTPMiddleware):
    """
    Middleware for centralized exception handling.
    Captures specific exceptions and formats the response accordingly.
    """

    async def dispatch(self, request: Request, call_next: Callable):
        start_time = time.time()
        try:
            response = await call_next(request)
            process_time = time.time() - start_time
            response.headers["X-Process-Time"] = str(process_time)
            return response

        except DomainException as exc:
            status_code = DOMAIN_STATUS_CODES.get(exc.internal_code, status.HTTP_400_BAD_REQUEST)
            log = logger.error if status_code >= 500 else logger.warning
            log(
                f"Domain exception: {str(exc)} | Code: {exc.internal_code} | "
                f"Path: {request.url.path}"
            )

            detail = str(exc)
            if status_code >= 500 and settings.ENVIRONMENT == "production":
                detail = "Internal database error"

            return JSONResponse(
                status_code=status_code,
                content={
                    "detail": detail,
                    "code": exc.internal_code,
                    "errors": getattr(exc, "details", {})
                }
            )

        except Exception as exc:
            # Unhandled exceptions
            if settings.ENVIRONMENT == "production":
                error_message = "Internal server error"
                logger.exception(
                    f"Unhandled exception: Type={type(exc).__name__} | "
                    f"Path: {request.url.path} | "
                    f"Client: {_client_host(request)}"
                )
            else:
                error_message = str(exc)
                logger.exception(
                    f"Unhandled exception: {str(exc)} | "
                    f"Path: {request.url.path} | "
                    f"Client: {_client_host(request)}\n"
                    f"Traceback: {traceback.format_exc()}"
                )
            return JSONResponse(
                status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
                content={
                    "detail": error_message,
                    "code": "INTERNAL_SERVER_ERROR"
                }
            )
