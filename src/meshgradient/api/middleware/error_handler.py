"""
Error handling middleware for API

Converts exceptions raised while handling a request into the ErrorResponse
envelope:
- Validation errors (bad request format) -> 422
- Domain errors (unknown point, preset, kind) -> their own status
- Anything else -> 500
"""

import json
import uuid
from typing import Optional

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from meshgradient.api.schemas.error import ErrorDetail, ErrorResponse, ValidationErrorResponse
from meshgradient.engine.mesh_state import PointNotFoundError
from meshgradient.models.enums import AnimationKind, ExportFormat
from meshgradient.utils.logger import LogCategory, get_logger

log = get_logger().for_category(LogCategory.API)


class DomainError(Exception):
    """Base class for domain-specific errors"""
    def __init__(
        self,
        code: str,
        message: str,
        details: Optional[dict] = None,
        status_code: int = 400
    ):
        self.code = code
        self.message = message
        self.details = details or {}
        self.status_code = status_code
        super().__init__(message)


class PresetNotFoundError(DomainError):
    """Color preset doesn't exist"""
    def __init__(self, preset_name: str, valid_presets: list):
        super().__init__(
            code="PRESET_NOT_FOUND",
            message=f"Color preset '{preset_name}' not found",
            details={"preset": preset_name, "valid_presets": valid_presets},
            status_code=404
        )


class InvalidAnimationKindError(DomainError):
    """Animation kind name is not recognized"""
    def __init__(self, kind: str):
        super().__init__(
            code="INVALID_ANIMATION_KIND",
            message=f"Animation kind '{kind}' is not supported",
            details={"kind": kind, "valid_kinds": [k.value for k in AnimationKind]},
            status_code=422
        )


class InvalidExportFormatError(DomainError):
    """Export format is not supported"""
    def __init__(self, fmt: str):
        super().__init__(
            code="INVALID_EXPORT_FORMAT",
            message=f"Export format '{fmt}' is not supported",
            details={"format": fmt, "valid_formats": [f.value for f in ExportFormat]},
            status_code=422
        )


def _error_response(status_code: int, code: str, message: str, details: Optional[dict], request_id: str) -> JSONResponse:
    response = ErrorResponse(
        error=ErrorDetail(code=code, message=message, details=details),
        request_id=request_id
    )
    return JSONResponse(status_code=status_code, content=json.loads(response.model_dump_json()))


def register_exception_handlers(app: FastAPI) -> None:
    """Register all exception handlers with FastAPI app"""

    @app.exception_handler(RequestValidationError)
    async def validation_exception_handler(request: Request, exc: RequestValidationError):
        request_id = str(uuid.uuid4())
        errors = exc.errors()

        log.warn(f"Validation error ({request_id})", path=request.url.path, error_count=len(errors))

        validation_errors = [
            {
                "field": ".".join(str(x) for x in error["loc"][1:]),
                "message": error["msg"],
                "type": error["type"],
            }
            for error in errors
        ]

        response = ValidationErrorResponse(
            error=ErrorDetail(
                code="VALIDATION_ERROR",
                message="Request validation failed",
                details={"error_count": len(errors)},
            ),
            validation_errors=validation_errors,
            request_id=request_id
        )
        return JSONResponse(
            status_code=422,
            content=json.loads(response.model_dump_json())
        )

    @app.exception_handler(PointNotFoundError)
    async def point_not_found_handler(request: Request, exc: PointNotFoundError):
        request_id = str(uuid.uuid4())
        log.warn(f"Point not found ({request_id})", point=exc.point_id)
        return _error_response(404, "POINT_NOT_FOUND", str(exc), {"point_id": exc.point_id}, request_id)

    @app.exception_handler(DomainError)
    async def domain_exception_handler(request: Request, exc: DomainError):
        request_id = str(uuid.uuid4())
        log.warn(f"Domain error ({request_id}): {exc.code} - {exc.message}")
        return _error_response(exc.status_code, exc.code, exc.message, exc.details, request_id)

    @app.exception_handler(Exception)
    async def general_exception_handler(request: Request, exc: Exception):
        request_id = str(uuid.uuid4())
        log.error(
            f"Unexpected error ({request_id}): {type(exc).__name__}: {exc}",
            path=request.url.path,
        )
        return _error_response(
            status.HTTP_500_INTERNAL_SERVER_ERROR,
            "INTERNAL_SERVER_ERROR",
            "An unexpected error occurred. Please try again.",
            {"request_id": request_id},
            request_id,
        )
