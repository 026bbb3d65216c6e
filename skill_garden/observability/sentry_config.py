"""Sentry configuration and initialization for error tracking."""

import logging
import os

import sentry_sdk
from sentry_sdk.integrations.fastapi import FastApiIntegration
from sentry_sdk.integrations.logging import LoggingIntegration

from skill_garden.config import Settings

logger = logging.getLogger(__name__)


def init_sentry(settings: Settings) -> bool:
    """
    Initialize Sentry SDK for error tracking.

    Returns:
        True if Sentry was initialized
    """
    if not settings.enable_sentry:
        logger.info("Sentry is disabled (ENABLE_SENTRY=false)")
        return False

    if not settings.sentry_dsn:
        logger.warning("Sentry DSN not configured - error tracking disabled")
        return False

    # Short git SHA when the deploy provides one
    release = os.getenv("GIT_COMMIT_SHA")
    release = f"skill-garden@{release[:7]}" if release else "skill-garden@dev"

    sentry_sdk.init(
        dsn=settings.sentry_dsn,
        environment=settings.environment,
        release=release,
        integrations=[
            FastApiIntegration(transaction_style="endpoint"),
            LoggingIntegration(level=logging.INFO, event_level=logging.ERROR),
        ],
        traces_sample_rate=settings.sentry_traces_sample_rate,
        attach_stacktrace=True,
        send_default_pii=False,
    )

    logger.info(f"Sentry initialized: environment={settings.environment}, release={release}")
    return True
