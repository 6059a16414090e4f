"""
Ответы об ошибках в формате problem document (application/problem+json).
"""
from http import HTTPStatus
from typing import Optional
import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from app.core.exceptions import BadRequestAlertException, ResourceNotFoundError

logger = logging.getLogger(__name__)

PROBLEM_CONTENT_TYPE = "application/problem+json"


def problem_response(status: int, detail=None, headers: Optional[dict] = None, **extra) -> JSONResponse:
    content = {
        "type": "about:blank",
        "title": HTTPStatus(status).phrase,
        "status": status,
    }
    if detail is not None:
        content["detail"] = detail
    content.update(extra)
    return JSONResponse(status_code=status, content=content, headers=headers, media_type=PROBLEM_CONTENT_TYPE)


async def bad_request_alert_handler(request: Request, exc: BadRequestAlertException) -> JSONResponse:
    return problem_response(
        exc.status_code,
        exc.message,
        headers=exc.headers,
        entityName=exc.entity_name,
        errorKey=exc.error_key,
        message=f"error.{exc.error_key}",
    )


async def resource_not_found_handler(request: Request, exc: ResourceNotFoundError) -> JSONResponse:
    logger.debug(f"Not found for {request.method} {request.url.path}: {exc}")
    return problem_response(404, str(exc))


async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    return problem_response(exc.status_code, exc.detail, headers=getattr(exc, "headers", None))


async def validation_exception_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    field_errors = []
    for error in exc.errors():
        # loc: ("body", "name") / ("query", "size") / ("body",) для ошибок всей модели
        location = [str(part) for part in error.get("loc", ())]
        field = ".".join(location[1:]) or ".".join(location)
        field_errors.append({
            "field": field,
            "message": error.get("msg", ""),
        })
    logger.debug(f"Validation failed for {request.method} {request.url.path}: {field_errors}")
    return problem_response(400, "Method argument not valid", message="error.validation", fieldErrors=field_errors)


async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.exception(f"Unhandled error for {request.method} {request.url.path}: {exc}")
    return problem_response(500, "Unexpected error occurred")


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(BadRequestAlertException, bad_request_alert_handler)
    app.add_exception_handler(ResourceNotFoundError, resource_not_found_handler)
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    app.add_exception_handler(Exception, unhandled_exception_handler)
