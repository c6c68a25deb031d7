import logging
import time
import uuid
from typing import Dict, Optional

from fastapi import Request
from starlette.middleware.base import BaseHTTPMiddleware

from app.core.config import settings

logger = logging.getLogger("formapi.latency")
request_logger = logging.getLogger("formapi.request")

# Headroom on top of the simulated backend delay for /two
SUBMISSION_OVERHEAD_SECONDS = 0.5


def default_slo_thresholds() -> Dict[str, float]:
    """Max latency per path, in seconds."""
    return {
        f"{settings.API_PREFIX}/two": settings.submission_delay_seconds
        + SUBMISSION_OVERHEAD_SECONDS,
        "/health": 0.200,
    }


class LatencyMonitorMiddleware(BaseHTTPMiddleware):
    """
    Middleware to monitor request latency and check against defined SLOs.
    Logs warnings if SLO is breached.
    """

    def __init__(self, app, thresholds: Optional[Dict[str, float]] = None):
        super().__init__(app)
        self.thresholds = (
            thresholds if thresholds is not None else default_slo_thresholds()
        )

    async def dispatch(self, request: Request, call_next):
        start_time = time.perf_counter()

        response = await call_next(request)

        process_time = time.perf_counter() - start_time
        response.headers["X-Process-Time"] = str(process_time)

        self._check_slo(request.url.path, process_time)

        return response

    def _check_slo(self, path: str, duration: float) -> bool:
        budget = None
        for slo_path, limit in self.thresholds.items():
            if path == slo_path or (
                slo_path.endswith("/") and path.startswith(slo_path)
            ):
                budget = limit
                break

        if budget is not None and duration > budget:
            logger.warning(
                "SLO_BREACH | Endpoint: %s | Duration: %.4fs | Budget: %.3fs",
                path,
                duration,
                budget,
            )
            return True
        return False


class RequestIdMiddleware(BaseHTTPMiddleware):
    """
    Middleware to add X-Request-ID header for tracing.

    If the client sends X-Request-ID, it is preserved.
    Otherwise, a new UUID is generated.

    The request ID is:
    - Available in request.state.request_id for logging
    - Returned in response headers for client correlation
    """

    async def dispatch(self, request: Request, call_next):
        request_id = request.headers.get("X-Request-ID")
        if not request_id:
            request_id = str(uuid.uuid4())

        request.state.request_id = request_id

        request_logger.info(
            "REQUEST | id=%s | method=%s | path=%s",
            request_id,
            request.method,
            request.url.path,
        )

        response = await call_next(request)
        response.headers["X-Request-ID"] = request_id

        return response
