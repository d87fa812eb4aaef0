"""
Error handlers for the FastAPI application.

Every failure is rendered as ``{statusCode, message, error}`` plus an
error code, the request id and a timestamp.
"""

from fastapi import Request
from fastapi.responses import JSONResponse
from fastapi.exceptions import RequestValidationError
from starlette.exceptions import HTTPException as StarletteHTTPException
from http import HTTPStatus
import logging
import time
from datetime import datetime, timezone
from typing import Dict, Any, List, Optional, Union

from app.core.exceptions import DiscoveryServiceException, ErrorCode
from app.schemas.base import ErrorResponse

logger = logging.getLogger(__name__)


class ErrorHandler:
    """
    Maps exceptions to error responses, logs them with request context and
    counts them per error code.
    """

    def __init__(self):
        self.error_counts: Dict[str, int] = {}
        self.last_error_time: Dict[str, float] = {}

    async def handle_discovery_exception(
        self,
        request: Request,
        exc: DiscoveryServiceException
    ) -> JSONResponse:
        """
        Handle domain exceptions (invalid arguments, unknown places).

        Args:
            request: FastAPI request object
            exc: DiscoveryServiceException instance

        Returns:
            JSONResponse with the exception's status code
        """
        request_id = getattr(request.state, 'request_id', 'unknown')

        logger.warning(
            f"{type(exc).__name__} in request {request_id}: {exc.message}",
            extra={
                'request_id': request_id,
                'error_code': exc.error_code.value,
                'status_code': exc.status_code,
                'details': exc.details,
                'request_path': request.url.path,
            }
        )

        self.track_error(exc.error_code.value)

        return self._create_error_response(
            error_code=exc.error_code.value,
            message=exc.message,
            request_id=request_id,
            status_code=exc.status_code
        )

    async def handle_validation_error(
        self,
        request: Request,
        exc: RequestValidationError
    ) -> JSONResponse:
        """
        Handle missing or malformed request parameters as a 400.

        Args:
            request: FastAPI request object
            exc: Query or path parameter validation failure

        Returns:
            JSONResponse listing one message per offending field
        """
        request_id = getattr(request.state, 'request_id', 'unknown')

        messages: List[str] = []
        for error in exc.errors():
            field = '.'.join(str(loc) for loc in error['loc'] if loc not in ('query', 'path'))
            messages.append(f"{field}: {error['msg']}")

        logger.warning(
            f"Validation error in request {request_id}: {len(messages)} field errors",
            extra={
                'request_id': request_id,
                'validation_errors': messages,
                'request_path': request.url.path
            }
        )

        self.track_error(ErrorCode.VALIDATION_ERROR.value)

        return self._create_error_response(
            error_code=ErrorCode.VALIDATION_ERROR.value,
            message=messages,
            request_id=request_id,
            status_code=400
        )

    async def handle_http_exception(
        self,
        request: Request,
        exc: StarletteHTTPException
    ) -> JSONResponse:
        """
        Handle framework HTTP exceptions (unknown routes, bad methods).

        Args:
            request: FastAPI request object
            exc: Starlette HTTPException

        Returns:
            JSONResponse carrying the framework status code
        """
        request_id = getattr(request.state, 'request_id', 'unknown')

        error_code_map = {
            400: ErrorCode.VALIDATION_ERROR,
            404: ErrorCode.NOT_FOUND,
            429: ErrorCode.RATE_LIMIT_EXCEEDED,
            503: ErrorCode.SERVICE_UNAVAILABLE,
        }
        error_code = error_code_map.get(exc.status_code, ErrorCode.INTERNAL_SERVER_ERROR)

        logger.warning(
            f"HTTP exception in request {request_id}: {exc.status_code} - {exc.detail}",
            extra={
                'request_id': request_id,
                'status_code': exc.status_code,
                'request_path': request.url.path
            }
        )

        self.track_error(error_code.value)

        return self._create_error_response(
            error_code=error_code.value,
            message=str(exc.detail),
            request_id=request_id,
            status_code=exc.status_code,
            headers=getattr(exc, 'headers', None)
        )

    async def handle_generic_exception(
        self,
        request: Request,
        exc: Exception
    ) -> JSONResponse:
        """
        Last resort for anything unhandled; the client only sees a generic 500.

        Args:
            request: FastAPI request object
            exc: Exception instance

        Returns:
            500 JSONResponse without exception details
        """
        request_id = getattr(request.state, 'request_id', 'unknown')

        logger.error(
            f"Unhandled exception in request {request_id}: {type(exc).__name__}: {str(exc)}",
            exc_info=True,
            extra={
                'request_id': request_id,
                'exception_type': type(exc).__name__,
                'request_path': request.url.path,
                'request_method': request.method,
                'client_ip': request.client.host if request.client else 'unknown'
            }
        )

        self.track_error(ErrorCode.INTERNAL_SERVER_ERROR.value)

        return self._create_error_response(
            error_code=ErrorCode.INTERNAL_SERVER_ERROR.value,
            message="An internal server error occurred",
            request_id=request_id,
            status_code=500
        )

    def _create_error_response(
        self,
        error_code: str,
        message: Union[str, List[str]],
        request_id: str,
        status_code: int,
        headers: Optional[Dict[str, str]] = None
    ) -> JSONResponse:
        """
        Render the error body shared by every endpoint.

        Args:
            error_code: ErrorCode value
            message: Human-readable error message(s)
            request_id: Request identifier
            status_code: HTTP status to respond with
            headers: Extra response headers

        Returns:
            JSONResponse whose body validates as ErrorResponse
        """
        error_response = ErrorResponse(
            statusCode=status_code,
            message=message,
            error=self._status_phrase(status_code),
            error_code=error_code,
            request_id=request_id,
            timestamp=datetime.now(timezone.utc)
        )

        return JSONResponse(
            status_code=status_code,
            content=error_response.model_dump(mode="json"),
            headers=headers
        )

    @staticmethod
    def _status_phrase(status_code: int) -> str:
        try:
            return HTTPStatus(status_code).phrase
        except ValueError:
            return "Error"

    def track_error(self, error_code: str) -> None:
        """
        Count an occurrence of an error code.

        Args:
            error_code: ErrorCode value
        """
        self.error_counts[error_code] = self.error_counts.get(error_code, 0) + 1
        self.last_error_time[error_code] = time.time()

        if self.error_counts[error_code] % 10 == 0:
            logger.warning(
                f"Error {error_code} has now occurred {self.error_counts[error_code]} times"
            )

    def get_error_statistics(self) -> Dict[str, Any]:
        """
        Per-code error counts, reported by the detailed health check.

        Returns:
            Counts overall and for codes seen within the last hour
        """
        current_time = time.time()

        return {
            'error_counts': dict(self.error_counts),
            'recent_errors': {
                code: count for code, count in self.error_counts.items()
                if current_time - self.last_error_time.get(code, 0) < 3600
            },
            'total_errors': sum(self.error_counts.values())
        }


# Shared by the handlers and /health/detailed
error_handler = ErrorHandler()


def setup_error_handlers(app):
    """
    Register the exception handlers on an application.

    Args:
        app: FastAPI application instance
    """

    @app.exception_handler(DiscoveryServiceException)
    async def discovery_exception_handler(request: Request, exc: DiscoveryServiceException):
        return await error_handler.handle_discovery_exception(request, exc)

    @app.exception_handler(RequestValidationError)
    async def validation_exception_handler(request: Request, exc: RequestValidationError):
        return await error_handler.handle_validation_error(request, exc)

    @app.exception_handler(StarletteHTTPException)
    async def http_exception_handler(request: Request, exc: StarletteHTTPException):
        return await error_handler.handle_http_exception(request, exc)

    @app.exception_handler(Exception)
    async def generic_exception_handler(request: Request, exc: Exception):
        return await error_handler.handle_generic_exception(request, exc)
