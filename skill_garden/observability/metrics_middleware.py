"""
FastAPI middleware for automatic Prometheus metrics collection.

Tracks request counts, latency and in-progress requests per endpoint.
"""

import logging
import time
from typing import Callable

from fastapi import Request, Response
from starlette.middleware.base import BaseHTTPMiddleware

from skill_garden.observability.metrics import (
    http_requests_total,
    http_request_duration_seconds,
    http_requests_in_progress,
)

logger = logging.getLogger(__name__)


class PrometheusMiddleware(BaseHTTPMiddleware):
    """Collect Prometheus metrics for HTTP requests"""

    async def dispatch(self, request: Request, call_next: Callable) -> Response:
        method = request.method
        path = normalize_path(request.url.path)

        http_requests_in_progress.labels(method=method, endpoint=path).inc()
        start_time = time.time()
        status_code = 500

        try:
            response = await call_next(request)
            status_code = response.status_code
        finally:
            http_requests_in_progress.labels(method=method, endpoint=path).dec()
            http_requests_total.labels(method=method, endpoint=path, status=status_code).inc()
            http_request_duration_seconds.labels(method=method, endpoint=path).observe(
                time.time() - start_time
            )

        return response


def normalize_path(path: str) -> str:
    """
    Collapse numeric ids so metrics cardinality stays bounded.

    /api/teams/12/join -> /api/teams/{id}/join
    """
    if path in ("/", "/health", "/metrics"):
        return path

    parts = [
        "{id}" if part.isdigit() else part
        for part in path.strip("/").split("/")
    ]
    return "/" + "/".join(parts)


def setup_metrics_middleware(app, enabled: bool = True) -> None:
    """Add Prometheus metrics middleware to the FastAPI application"""
    if not enabled:
        logger.info("Metrics collection is disabled (ENABLE_METRICS=false)")
        return

    app.add_middleware(PrometheusMiddleware)
    logger.info("Prometheus metrics middleware added to FastAPI")
