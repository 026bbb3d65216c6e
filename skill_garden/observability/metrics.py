"""
Prometheus metrics definitions for Skill Garden.

- HTTP/API metrics: Request counts, latency
- Progression metrics: Submissions, XP awarded, level ups

Metrics are exposed at the /metrics endpoint for Prometheus scraping.
"""

import logging
from prometheus_client import Counter, Gauge, Histogram

logger = logging.getLogger(__name__)

# =============================================================================
# HTTP/API Metrics
# =============================================================================

http_requests_total = Counter(
    "http_requests_total",
    "Total HTTP requests received",
    ["method", "endpoint", "status"],
)

http_request_duration_seconds = Histogram(
    "http_request_duration_seconds",
    "HTTP request latency in seconds",
    ["method", "endpoint"],
    buckets=[0.01, 0.05, 0.1, 0.5, 1.0, 2.0, 5.0, 10.0],
)

http_requests_in_progress = Gauge(
    "http_requests_in_progress",
    "Number of HTTP requests currently being processed",
    ["method", "endpoint"],
)

# =============================================================================
# Progression Metrics
# =============================================================================

challenge_submissions_total = Counter(
    "challenge_submissions_total",
    "Challenge submissions judged",
    ["result"],  # accepted/rejected
)

xp_awarded_total = Counter(
    "xp_awarded_total",
    "Total XP granted to users",
)

level_ups_total = Counter(
    "level_ups_total",
    "Number of level ups",
)
