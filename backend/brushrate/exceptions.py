"""Custom exception hierarchy for brushrate."""

from __future__ import annotations


class BrushrateError(Exception):
    """Base exception for all brushrate errors."""


class IntakeValidationError(BrushrateError):
    """Raised when an estimate request is incomplete or malformed.

    ``errors`` maps each offending form field to a user-facing message.
    """

    def __init__(self, errors: dict[str, str]) -> None:
        self.errors = dict(errors)
        fields = ", ".join(sorted(self.errors))
        super().__init__(f"Invalid estimate request: {fields}")


class SubmissionError(BrushrateError):
    """Raised when an estimate request cannot be delivered to the intake endpoint."""

    def __init__(self, message: str, status_code: int | None = None) -> None:
        self.status_code = status_code
        super().__init__(message)
