"""Intake validation — turns raw form data into engine-ready input.

The pricing engine assumes a complete ProjectInput. This module is the
layer that guarantees it: missing selections and out-of-range square
footage are reported per field instead of reaching the engine. Contact
fields are checked here as well, although they never affect pricing.
"""

from __future__ import annotations

import logging
import math
import re
from dataclasses import dataclass

from brushrate.exceptions import IntakeValidationError
from brushrate.models.enums import (
    ALLOWED_SURFACES,
    DifficultyLevel,
    PaintTier,
    ProjectType,
    SurfaceId,
)
from brushrate.models.project import (
    MAX_SQUARE_FOOTAGE,
    MIN_SQUARE_FOOTAGE,
    ContactInfo,
    EstimateRequest,
    ProjectInput,
)

logger = logging.getLogger(__name__)

# Simplified RFC 5322
_EMAIL_RE = re.compile(
    r"^[a-zA-Z0-9.!#$%&'*+/=?^_`{|}~-]+@[a-zA-Z0-9]"
    r"(?:[a-zA-Z0-9-]{0,61}[a-zA-Z0-9])?"
    r"(?:\.[a-zA-Z0-9](?:[a-zA-Z0-9-]{0,61}[a-zA-Z0-9])?)*$"
)

# US numbers: optional +1, optional parentheses, '-', '.' or space separators
_PHONE_RE = re.compile(
    r"^(\+1[-.\s]?)?\(?([0-9]{3})\)?[-.\s]?([0-9]{3})[-.\s]?([0-9]{4})$"
)

NAME_MIN_LENGTH = 2
NAME_MAX_LENGTH = 100


@dataclass(frozen=True)
class ValidatedRequest:
    """A request that passed every intake check."""

    contact: ContactInfo
    project: ProjectInput
    additional_notes: str = ""


def is_valid_email(email: str) -> bool:
    return bool(_EMAIL_RE.match(email))


def is_valid_phone(phone: str) -> bool:
    """Phone is optional: an empty value is valid."""
    if not phone:
        return True
    return bool(_PHONE_RE.match(phone))


def contact_errors(request: EstimateRequest) -> dict[str, str]:
    """Check the contact block. Returns ``{field: message}``, empty if valid."""
    errors: dict[str, str] = {}

    name = request.client_name.strip()
    if not name:
        errors["client_name"] = "Name is required"
    elif len(name) < NAME_MIN_LENGTH:
        errors["client_name"] = "Name must be at least 2 characters"
    elif len(name) > NAME_MAX_LENGTH:
        errors["client_name"] = "Name cannot exceed 100 characters"

    email = request.email.strip()
    if not email:
        errors["email"] = "Email is required"
    elif not is_valid_email(email):
        errors["email"] = "Please enter a valid email address"

    if not request.address.strip():
        errors["address"] = "Address is required (street address, city, state, ZIP code)"

    phone = request.phone.strip()
    if phone and not is_valid_phone(phone):
        errors["phone"] = "Please enter a valid phone number (e.g., (555) 123-4567)"

    return errors


def is_client_info_complete(request: EstimateRequest) -> bool:
    """Whether the contact block is ready for the estimation fields to open."""
    return (
        len(request.client_name.strip()) >= NAME_MIN_LENGTH
        and is_valid_email(request.email.strip())
        and bool(request.address.strip())
    )


def _parse_square_footage(raw: int | str | None) -> float | None:
    """Read square footage the way a browser's parseInt would.

    Leading digits win ('1200 sqft' -> 1200, '1200.7' -> 1200). Returns None
    when no number can be read. A digit run too long for a float comes back
    as infinity so the range check rejects it.
    """
    if raw is None:
        return None
    if isinstance(raw, int):
        return raw
    match = re.match(r"^\s*([+-]?\d+(?:\.\d*)?)", raw)
    if match is None:
        return None
    value = float(match.group(1))
    if not math.isfinite(value):
        return value
    return math.trunc(value)


def project_errors(request: EstimateRequest) -> dict[str, str]:
    """Check the fields the pricing engine needs."""
    errors: dict[str, str] = {}

    project_type: ProjectType | None = None
    try:
        project_type = ProjectType(request.project_type.strip())
    except ValueError:
        errors["project_type"] = "Please select a project type"

    square_footage = _parse_square_footage(request.square_footage)
    if square_footage is None:
        errors["square_footage"] = "Please enter square footage"
    elif square_footage < MIN_SQUARE_FOOTAGE:
        errors["square_footage"] = "Square footage must be at least 100"
    elif square_footage > MAX_SQUARE_FOOTAGE:
        errors["square_footage"] = "Square footage cannot exceed 1,000,000"

    if request.paint_tier.strip() not in set(PaintTier):
        errors["paint_tier"] = "Please select a paint tier"

    difficulty = request.difficulty_level.strip()
    if difficulty and difficulty not in set(DifficultyLevel):
        errors["difficulty_level"] = "Please select a valid difficulty level"

    if project_type is not None:
        allowed = ALLOWED_SURFACES[project_type]
        invalid = [s for s in request.surfaces if s not in allowed]
        if invalid:
            errors["surfaces"] = (
                f"Not available for {project_type.value} projects: "
                f"{', '.join(invalid)}"
            )

    return errors


def _build_project_input(request: EstimateRequest) -> ProjectInput:
    square_footage = _parse_square_footage(request.square_footage)
    return ProjectInput(
        project_type=ProjectType(request.project_type.strip()),
        square_footage=square_footage,
        paint_tier=PaintTier(request.paint_tier.strip()),
        difficulty_level=(
            DifficultyLevel(request.difficulty_level.strip())
            if request.difficulty_level.strip()
            else DifficultyLevel.BASIC
        ),
        surfaces=frozenset(SurfaceId(s) for s in request.surfaces),
    )


def project_input_from_request(request: EstimateRequest) -> ProjectInput:
    """Validate only the pricing fields and build a ProjectInput.

    Raises:
        IntakeValidationError: If a required selection is missing or out
            of range.
    """
    errors = project_errors(request)
    if errors:
        raise IntakeValidationError(errors)
    return _build_project_input(request)


def validate_request(request: EstimateRequest) -> ValidatedRequest:
    """Validate a full intake form (contact and project fields).

    Raises:
        IntakeValidationError: Carrying every field-level problem found.
    """
    errors = {**contact_errors(request), **project_errors(request)}
    if errors:
        logger.info("Rejected estimate request: %s", ", ".join(sorted(errors)))
        raise IntakeValidationError(errors)

    contact = ContactInfo(
        client_name=request.client_name.strip(),
        email=request.email.strip(),
        phone=request.phone.strip(),
        address=request.address.strip(),
    )
    return ValidatedRequest(
        contact=contact,
        project=_build_project_input(request),
        additional_notes=request.additional_notes,
    )
