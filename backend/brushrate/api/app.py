"""FastAPI application — create_app factory with /api endpoints."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import TYPE_CHECKING, Any

from dotenv import load_dotenv
from fastapi import FastAPI, HTTPException
from fastapi.middleware.cors import CORSMiddleware

# Load .env from project root (backend/../.env or backend/.env)
_backend_dir = Path(__file__).resolve().parent.parent.parent
_project_root = _backend_dir.parent
load_dotenv(_project_root / ".env")
load_dotenv(_backend_dir / ".env")

from brushrate.data.catalog import difficulty_options, surface_options, tier_options
from brushrate.engine import ENGINE_VERSION
from brushrate.exceptions import IntakeValidationError, SubmissionError
from brushrate.formatting import format_multiplier, format_price_range
from brushrate.models.enums import ProjectType
from brushrate.models.project import EstimateRequest  # noqa: TCH001 (FastAPI resolves at runtime)
from brushrate.services.validation import project_input_from_request, validate_request

if TYPE_CHECKING:
    from brushrate.engine import PricingEngine
    from brushrate.models.estimate import PriceEstimate
    from brushrate.models.project import ProjectInput
    from brushrate.services.submission import EstimateSubmitter

logger = logging.getLogger(__name__)


def _estimate_body(project: ProjectInput, est: PriceEstimate) -> dict[str, Any]:
    return {
        "estimate": est.model_dump(mode="json"),
        "formatted": format_price_range(est),
        "summary_dict": est.to_summary_dict(),
        "project": project.model_dump(mode="json"),
    }


def create_app(
    *,
    engine: PricingEngine | None = None,
    submitter: EstimateSubmitter | None = None,
) -> FastAPI:
    """Create and configure the FastAPI application.

    Parameters
    ----------
    engine
        Optional pre-built pricing engine (e.g. with alternate tables in
        tests). If not provided, one is created via create_default_engine on
        first request.
    submitter
        Optional pre-built submitter for /api/submit. If not provided, one is
        created from environment variables on first request.
    """
    app = FastAPI(title="brushrate", version=ENGINE_VERSION)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["http://localhost:3000"],
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Store on app state so tests can inject mocks
    app.state.engine = engine
    app.state.submitter = submitter

    def _get_engine() -> PricingEngine:
        eng: PricingEngine | None = app.state.engine
        if eng is not None:
            return eng
        from brushrate.factory import create_default_engine

        eng = create_default_engine()
        app.state.engine = eng
        return eng

    def _get_submitter() -> EstimateSubmitter:
        sub: EstimateSubmitter | None = app.state.submitter
        if sub is not None:
            return sub
        # Lazy-create from environment
        from brushrate.api.deps import create_submitter

        sub = create_submitter()
        app.state.submitter = sub
        return sub

    # ------------------------------------------------------------------
    # GET /api/health
    # ------------------------------------------------------------------

    @app.get("/api/health")
    def health() -> dict[str, str]:
        return {
            "status": "ok",
            "version": ENGINE_VERSION,
            "pricing_data_version": _get_engine().config.version,
        }

    # ------------------------------------------------------------------
    # GET /api/options
    # ------------------------------------------------------------------

    @app.get("/api/options")
    def options() -> dict[str, Any]:
        labels = _get_engine().config.tier_labels
        return {
            "project_types": [pt.value for pt in ProjectType],
            "paint_tiers": [
                {
                    **t.model_dump(mode="json"),
                    "label": labels.get(t.tier, t.title),
                    "multiplier_label": format_multiplier(t.multiplier),
                }
                for t in tier_options()
            ],
            "difficulty_levels": [
                {
                    **d.model_dump(mode="json"),
                    "multiplier_label": format_multiplier(d.multiplier),
                }
                for d in difficulty_options()
            ],
        }

    @app.get("/api/options/{project_type}")
    def surfaces_for(project_type: str) -> dict[str, Any]:
        try:
            pt = ProjectType(project_type)
        except ValueError as exc:
            raise HTTPException(
                status_code=404,
                detail=f"Unknown project type: {project_type}",
            ) from exc
        return {
            "project_type": pt.value,
            "surfaces": [o.model_dump(mode="json") for o in surface_options(pt)],
        }

    # ------------------------------------------------------------------
    # POST /api/estimate
    # ------------------------------------------------------------------

    @app.post("/api/estimate")
    def estimate(request: EstimateRequest) -> dict[str, Any]:
        try:
            project = project_input_from_request(request)
        except IntakeValidationError as exc:
            raise HTTPException(
                status_code=422, detail={"errors": exc.errors}
            ) from exc

        est = _get_engine().estimate(project)
        return _estimate_body(project, est)

    # ------------------------------------------------------------------
    # POST /api/submit
    # ------------------------------------------------------------------

    @app.post("/api/submit")
    def submit(request: EstimateRequest) -> dict[str, Any]:
        try:
            validated = validate_request(request)
        except IntakeValidationError as exc:
            raise HTTPException(
                status_code=422, detail={"errors": exc.errors}
            ) from exc

        est = _get_engine().estimate(validated.project)

        try:
            sub = _get_submitter()
        except ValueError as exc:
            logger.error("Estimate submission is not configured: %s", exc)
            raise HTTPException(
                status_code=503,
                detail="Estimate submission is not configured.",
            ) from exc

        try:
            result = sub.submit(validated)
        except SubmissionError as exc:
            logger.exception("Submission to intake endpoint failed")
            raise HTTPException(status_code=502, detail=str(exc)) from exc

        return {
            **_estimate_body(validated.project, est),
            "submitted": True,
            "intake_status": result.status_code,
            "intake_response": result.body,
        }

    return app
