"""
Centralized error handling and structured logging for the HTTP surface

Directory failures never reach these handlers: the sync controller turns
them into local-only results. What lands here is request validation,
explicit HTTP errors from routes, and anything unexpected.
"""

import json
import logging
import traceback
import uuid
from datetime import datetime
from typing import Any, Dict, Optional, Union
from contextvars import ContextVar

from fastapi import Request, HTTPException
from fastapi.responses import JSONResponse
from fastapi.exceptions import RequestValidationError
from starlette.middleware.base import BaseHTTPMiddleware

# Context variable for request tracing
request_id_var: ContextVar[str] = ContextVar('request_id', default='')

logger = logging.getLogger(__name__)

class ErrorHandlingConfig:
    """Centralized configuration for error handling behavior"""

    # User records carry personal data; keep it out of error logs
    SANITIZE_SENSITIVE_FIELDS = True
    SENSITIVE_FIELD_PATTERNS = [
        'password', 'token', 'secret', 'authorization', 'email', 'phone'
    ]

    LOG_REQUEST_BODIES = True
    MAX_BODY_LOG_SIZE = 2000

    INCLUDE_TRACE_ID = True
    INCLUDE_TIMESTAMP = True

    @classmethod
    def is_sensitive_field(cls, field_name: str) -> bool:
        field_lower = field_name.lower()
        return any(pattern in field_lower for pattern in cls.SENSITIVE_FIELD_PATTERNS)

    @classmethod
    def sanitize_data(cls, data: Union[Dict, str, Any]) -> Any:
        """Recursively redact sensitive fields and truncate long strings"""
        if not cls.SANITIZE_SENSITIVE_FIELDS:
            return data

        if isinstance(data, dict):
            return {
                key: "***REDACTED***" if cls.is_sensitive_field(str(key)) else cls.sanitize_data(value)
                for key, value in data.items()
            }
        elif isinstance(data, list):
            return [cls.sanitize_data(item) for item in data]
        elif isinstance(data, str) and len(data) > cls.MAX_BODY_LOG_SIZE:
            return data[:cls.MAX_BODY_LOG_SIZE] + "...[TRUNCATED]"
        else:
            return data

class StructuredLogger:
    """Structured error logging with request context"""

    @staticmethod
    def log_error(
        error_type: str,
        message: str,
        request: Optional[Request] = None,
        exception: Optional[Exception] = None,
        extra_context: Optional[Dict] = None,
        include_traceback: bool = True
    ) -> str:
        """Log a JSON error entry and return its trace id"""
        trace_id = request_id_var.get('') or str(uuid.uuid4())[:8]

        log_entry = {
            "timestamp": datetime.utcnow().isoformat(),
            "trace_id": trace_id,
            "error_type": error_type,
            "message": message,
            "level": "ERROR"
        }

        if request:
            log_entry["request"] = {
                "method": request.method,
                "path": request.url.path,
                "query_params": dict(request.query_params),
                "client_ip": request.client.host if request.client else None
            }

        if exception:
            log_entry["exception"] = {
                "type": type(exception).__name__,
                "details": str(exception)
            }
            if include_traceback:
                log_entry["exception"]["traceback"] = traceback.format_exc()

        if extra_context:
            log_entry["context"] = ErrorHandlingConfig.sanitize_data(extra_context)

        logger.error(json.dumps(log_entry, indent=2, default=str))
        return trace_id

def _captured_body(request: Request) -> Any:
    """Request body captured by the middleware, decoded as JSON when possible"""
    body = getattr(request.state, 'captured_body', None)
    if not body:
        return None
    try:
        return json.loads(body)
    except ValueError:
        return body.decode('utf-8', errors='replace')

def _error_content(error: str, message: str, trace_id: Optional[str], **extra) -> Dict[str, Any]:
    content = {"error": error, "message": message, **extra}
    if ErrorHandlingConfig.INCLUDE_TRACE_ID and trace_id:
        content["trace_id"] = trace_id
    if ErrorHandlingConfig.INCLUDE_TIMESTAMP:
        content["timestamp"] = datetime.utcnow().isoformat()
    return content

class RequestContextMiddleware(BaseHTTPMiddleware):
    """Assigns a trace id to every request and captures the body for error logs"""

    async def dispatch(self, request: Request, call_next):
        trace_id = str(uuid.uuid4())[:8]
        request_id_var.set(trace_id)

        body = None
        if ErrorHandlingConfig.LOG_REQUEST_BODIES:
            body = await request.body()
        request.state.captured_body = body
        request.state.trace_id = trace_id

        response = await call_next(request)
        response.headers["X-Trace-ID"] = trace_id
        return response

async def http_exception_handler(request: Request, exc: HTTPException) -> JSONResponse:
    """Handle HTTP exceptions raised by routes"""
    trace_id = None
    if exc.status_code >= 500:
        trace_id = StructuredLogger.log_error(
            f"http_{exc.status_code}",
            f"HTTP {exc.status_code}: {exc.detail}",
            request=request,
            exception=exc,
            extra_context={"request_body": _captured_body(request)}
        )
    else:
        logger.info(f"{request.method} {request.url.path} -> {exc.status_code}: {exc.detail}")

    return JSONResponse(
        status_code=exc.status_code,
        content=_error_content(f"HTTP {exc.status_code}", exc.detail, trace_id)
    )

async def validation_exception_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """Handle malformed request bodies and parameters (HTTP 422)"""
    details = [
        {
            "field": " -> ".join(str(loc) for loc in error.get("loc", [])),
            "message": error.get("msg", "Unknown validation error"),
            "type": error.get("type", "unknown")
        }
        for error in exc.errors()
    ]

    trace_id = StructuredLogger.log_error(
        "validation_error_422",
        f"Request validation failed: {len(details)} validation errors",
        request=request,
        extra_context={"validation_errors": details, "request_body": _captured_body(request)},
        include_traceback=False
    )

    return JSONResponse(
        status_code=422,
        content=_error_content(
            "Validation Error",
            "Request validation failed",
            trace_id,
            detail=details,
            error_count=len(details)
        )
    )

async def general_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Handle all other exceptions without exposing internals"""
    trace_id = StructuredLogger.log_error(
        "internal_server_error",
        f"Unhandled exception: {exc}",
        request=request,
        exception=exc,
        extra_context={"request_body": _captured_body(request)}
    )

    return JSONResponse(
        status_code=500,
        content=_error_content("Internal Server Error", "An unexpected error occurred", trace_id)
    )

def setup_error_handling(app):
    """Install request context middleware and exception handlers on the app"""
    app.add_middleware(RequestContextMiddleware)

    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    app.add_exception_handler(HTTPException, http_exception_handler)
    app.add_exception_handler(Exception, general_exception_handler)

    logger.info("Centralized error handling initialized")
