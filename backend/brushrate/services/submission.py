"""Estimate submission — delivers a validated request to the intake endpoint.

The payload carries the client's original input plus contact fields, in
the camelCase shape the intake backend expects. The engine's computed
range is not part of the payload.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from datetime import UTC, datetime
from typing import TYPE_CHECKING, Any

import requests

from brushrate.exceptions import SubmissionError

if TYPE_CHECKING:
    from brushrate.services.validation import ValidatedRequest

logger = logging.getLogger(__name__)

DEFAULT_TIMEOUT_SECONDS = 30.0


@dataclass(frozen=True)
class SubmissionResult:
    """Outcome of a successful submission."""

    status_code: int
    body: dict[str, Any] = field(default_factory=dict)


def build_payload(
    validated: ValidatedRequest,
    submitted_at: datetime | None = None,
) -> dict[str, Any]:
    """Serialise the original request and contact fields for the intake API."""
    contact = validated.contact
    project = validated.project
    stamp = submitted_at or datetime.now(UTC)
    return {
        "clientName": contact.client_name,
        "email": contact.email,
        "phone": contact.phone or "",
        "address": contact.address,
        "projectType": project.project_type.value,
        "squareFootage": project.square_footage,
        "paintTier": project.paint_tier.value,
        "surfaces": sorted(s.value for s in project.surfaces),
        "difficultyLevel": project.difficulty_level.value,
        "additionalNotes": validated.additional_notes or "",
        "submittedAt": stamp.isoformat(),
    }


class EstimateSubmitter:
    """POSTs validated estimate requests to the configured intake endpoint.

    Args:
        intake_url: Absolute URL of the intake endpoint.
        timeout: Seconds to wait for the endpoint before giving up.
        session: Optional ``requests.Session`` (e.g. for connection reuse
            or tests). A module-level ``requests.post`` is used otherwise.
    """

    def __init__(
        self,
        intake_url: str,
        timeout: float = DEFAULT_TIMEOUT_SECONDS,
        session: requests.Session | None = None,
    ) -> None:
        if not intake_url:
            msg = "intake_url must not be empty"
            raise ValueError(msg)
        self._intake_url = intake_url
        self._timeout = timeout
        self._session = session

    @property
    def intake_url(self) -> str:
        return self._intake_url

    def submit(
        self,
        validated: ValidatedRequest,
        submitted_at: datetime | None = None,
    ) -> SubmissionResult:
        """Send one request.

        Raises
        ------
        SubmissionError
            On network failure or a non-2xx response. Both are recoverable:
            the caller should ask the client to retry or call directly.
        """
        payload = build_payload(validated, submitted_at)
        post = self._session.post if self._session is not None else requests.post

        try:
            response = post(
                self._intake_url,
                headers={"Content-Type": "application/json"},
                json=payload,
                timeout=self._timeout,
            )
        except requests.RequestException as exc:
            logger.warning("Network error submitting estimate request: %s", exc)
            msg = (
                "There was a network error submitting your form. Please check "
                "your internet connection and try again."
            )
            raise SubmissionError(msg) from exc

        if not 200 <= response.status_code < 300:
            logger.warning(
                "Intake endpoint rejected submission: %s %s",
                response.status_code,
                response.reason,
            )
            msg = (
                "There was an issue submitting your form. Please try again "
                "or contact us directly."
            )
            raise SubmissionError(msg, status_code=response.status_code)

        body: dict[str, Any] = {}
        if response.content:
            try:
                decoded = response.json()
            except ValueError:
                logger.warning("Intake endpoint returned a non-JSON body")
            else:
                if isinstance(decoded, dict):
                    body = decoded
                else:
                    body = {"data": decoded}

        logger.info(
            "Submitted %s estimate request (%s)",
            payload["projectType"],
            response.status_code,
        )
        return SubmissionResult(status_code=response.status_code, body=body)

