"""
Rate limiting middleware.

Sliding-window request limit per client IP, applied to API routes only.
"""

from fastapi import Request
from fastapi.responses import JSONResponse
from starlette.middleware.base import BaseHTTPMiddleware
import asyncio
import time
import logging
from datetime import datetime, timezone
from typing import Dict, Iterable, Optional
from collections import defaultdict, deque

from app.core.error_handlers import error_handler
from app.core.exceptions import ErrorCode
from app.schemas.base import ErrorResponse

logger = logging.getLogger(__name__)

EXEMPT_PATHS = {"/", "/docs", "/redoc", "/openapi.json"}


class RateLimitMiddleware(BaseHTTPMiddleware):
    """
    Allows ``max_requests`` per ``window_seconds`` for each client; anything
    beyond gets a 429 with ``Retry-After``.
    """

    def __init__(
        self,
        app,
        max_requests: int = 100,
        window_seconds: int = 60,
        exempt_paths: Optional[Iterable[str]] = None,
        enabled: bool = True
    ):
        super().__init__(app)
        self.max_requests = max_requests
        self.window_seconds = window_seconds
        self.exempt_paths = set(EXEMPT_PATHS if exempt_paths is None else exempt_paths)
        self.enabled = enabled

        self.client_requests: Dict[str, deque] = defaultdict(deque)
        self.lock = asyncio.Lock()
        self._last_sweep = time.time()

    def _get_client_id(self, request: Request) -> str:
        client_ip = request.client.host if request.client else 'unknown'
        return f"ip:{client_ip}"

    def _expire(self, requests: deque, now: float) -> None:
        """Remove timestamps that fell out of the window."""
        window_start = now - self.window_seconds
        while requests and requests[0] <= window_start:
            requests.popleft()

    def _sweep_idle_clients(self, now: float) -> None:
        """Drop clients with no requests left in the window."""
        if now - self._last_sweep < self.window_seconds:
            return
        self._last_sweep = now
        for client_id in list(self.client_requests):
            self._expire(self.client_requests[client_id], now)
            if not self.client_requests[client_id]:
                del self.client_requests[client_id]

    def _rejection(self, request: Request, retry_after: int) -> JSONResponse:
        error_handler.track_error(ErrorCode.RATE_LIMIT_EXCEEDED.value)
        body = ErrorResponse(
            statusCode=429,
            message=f"Rate limit exceeded: {self.max_requests} requests per {self.window_seconds} seconds",
            error="Too Many Requests",
            error_code=ErrorCode.RATE_LIMIT_EXCEEDED.value,
            request_id=getattr(request.state, "request_id", None),
            timestamp=datetime.now(timezone.utc),
        )
        return JSONResponse(
            status_code=429,
            content=body.model_dump(mode="json"),
            headers={"Retry-After": str(retry_after)}
        )

    async def dispatch(self, request: Request, call_next):
        """
        Count the request against its client and reject it when over the limit.

        Args:
            request: FastAPI request object
            call_next: Next middleware in chain

        Returns:
            Response object
        """
        if not self.enabled or request.url.path in self.exempt_paths:
            return await call_next(request)

        client_id = self._get_client_id(request)
        now = time.time()

        async with self.lock:
            self._sweep_idle_clients(now)
            requests = self.client_requests[client_id]
            self._expire(requests, now)

            if len(requests) >= self.max_requests:
                retry_after = int(self.window_seconds - (now - requests[0])) + 1
                logger.warning(
                    f"Rate limit exceeded for client {client_id}: {len(requests)} requests in window",
                    extra={'client_id': client_id, 'retry_after_seconds': retry_after}
                )
                return self._rejection(request, retry_after)

            requests.append(now)
            remaining = self.max_requests - len(requests)

        response = await call_next(request)

        response.headers["X-RateLimit-Limit"] = str(self.max_requests)
        response.headers["X-RateLimit-Remaining"] = str(max(0, remaining))
        response.headers["X-RateLimit-Reset"] = str(int(now + self.window_seconds))

        return response
