#!/usr/bin/env python3
"""
Service-layer exceptions and the JSON error handlers registered on the app.

Every error body has the same shape:
    {"success": false, "error": <message>, "type": <exception name>}
"""

import logging
from fastapi import Request, HTTPException
from fastapi.responses import JSONResponse

logger = logging.getLogger(__name__)


class ServiceException(Exception):
    """Base exception for service layer errors."""
    status_code = 500


class MatchNotFoundException(ServiceException):
    """Raised when a stored match is not found."""
    status_code = 404


class ProfileNotFoundException(ServiceException):
    """Raised when the user has no profile to match."""
    status_code = 404


class MatchingDisabledException(ServiceException):
    """Raised when matching is disabled in config."""
    status_code = 409


def error_response(status_code: int, message, error_type: str) -> JSONResponse:
    return JSONResponse(
        status_code=status_code,
        content={"success": False, "error": message, "type": error_type}
    )


async def service_exception_handler(
    request: Request,
    exc: ServiceException
) -> JSONResponse:
    """Map a ServiceException to its status code."""
    if exc.status_code >= 500:
        logger.error(f"Service error in {request.url.path}: {exc}", exc_info=True)
    else:
        logger.warning(f"{exc.__class__.__name__} in {request.url.path}: {exc}")
    return error_response(exc.status_code, str(exc), exc.__class__.__name__)


async def http_exception_handler(
    request: Request,
    exc: HTTPException
) -> JSONResponse:
    """Handle FastAPI HTTP exceptions with consistent format."""
    return error_response(exc.status_code, exc.detail, "HTTPException")


async def general_exception_handler(
    request: Request,
    exc: Exception
) -> JSONResponse:
    """Handle unexpected exceptions."""
    logger.exception(f"Unexpected error in {request.url.path}")
    return error_response(500, "Internal server error", "InternalError")
