"""
Exception types and handlers that render every error in the API envelope:
{"success": false, "error": "...", ...}
"""
import logging
from typing import Any, Dict, List, Optional

from fastapi import FastAPI, Request, status
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from app.core.config import settings


logger = logging.getLogger(__name__)

# 请求参数来源前缀，不属于字段路径
_LOCATION_PREFIXES = {"body", "query", "path", "header", "cookie"}


class ApiError(Exception):
    """Raised by routes; rendered as {"success": false, "error": ...}"""

    def __init__(
        self,
        status_code: int,
        error: str,
        details: Optional[List[Dict[str, str]]] = None,
    ):
        super().__init__(error)
        self.status_code = status_code
        self.error = error
        self.details = details


class NotFoundError(ApiError):
    def __init__(self, error: str = "Resource not found"):
        super().__init__(status.HTTP_404_NOT_FOUND, error)


def error_body(error: str, **extra: Any) -> Dict[str, Any]:
    body = {"success": False, "error": error}
    body.update({k: v for k, v in extra.items() if v is not None})
    return body


def format_validation_errors(errors) -> List[Dict[str, str]]:
    """
    Convert pydantic error entries into [{"field": "name", "message": "..."}].
    """
    details = []
    for err in errors:
        loc = list(err.get("loc", ()))
        if loc and loc[0] in _LOCATION_PREFIXES:
            loc = loc[1:]
        details.append({
            "field": ".".join(str(part) for part in loc),
            "message": err.get("msg", "Invalid value"),
        })
    return details


async def api_error_handler(request: Request, exc: ApiError) -> JSONResponse:
    return JSONResponse(
        status_code=exc.status_code,
        content=error_body(exc.error, details=exc.details),
    )


async def validation_exception_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    details = format_validation_errors(exc.errors())
    logger.info("Validation failed on %s %s: %s", request.method, request.url.path, details)
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content=jsonable_encoder(error_body("Validation failed", details=details)),
    )


async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    if exc.status_code == status.HTTP_404_NOT_FOUND:
        content = error_body("Endpoint not found", path=request.url.path, method=request.method)
    else:
        content = error_body(str(exc.detail))
    return JSONResponse(status_code=exc.status_code, content=content, headers=getattr(exc, "headers", None))


async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.exception("Unhandled error on %s %s", request.method, request.url.path)
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content=error_body(
            "Internal server error",
            message=str(exc) if settings.is_development else "Something went wrong",
        ),
    )


def setup_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(ApiError, api_error_handler)
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(Exception, unhandled_exception_handler)
