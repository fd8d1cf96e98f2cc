"""Dependency injection for FastAPI endpoints."""

from __future__ import annotations

import logging
import os

from brushrate.services.submission import DEFAULT_TIMEOUT_SECONDS, EstimateSubmitter

logger = logging.getLogger(__name__)

INTAKE_URL_ENV = "BRUSHRATE_INTAKE_URL"
INTAKE_TIMEOUT_ENV = "BRUSHRATE_INTAKE_TIMEOUT"


def create_submitter() -> EstimateSubmitter:
    """Create an EstimateSubmitter from environment variables.

    Reads BRUSHRATE_INTAKE_URL and, optionally, BRUSHRATE_INTAKE_TIMEOUT
    (seconds). Raises ValueError if the URL is not set.
    """
    intake_url = os.environ.get(INTAKE_URL_ENV, "")
    if not intake_url:
        msg = (
            f"{INTAKE_URL_ENV} environment variable is not set. "
            "Set it to use the /api/submit endpoint."
        )
        raise ValueError(msg)

    raw_timeout = os.environ.get(INTAKE_TIMEOUT_ENV, "")
    timeout = float(raw_timeout) if raw_timeout else DEFAULT_TIMEOUT_SECONDS

    logger.info("Submitting estimate requests to %s", intake_url)
    return EstimateSubmitter(intake_url, timeout=timeout)
