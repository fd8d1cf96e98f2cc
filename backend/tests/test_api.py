"""Tests for the FastAPI application — outbound submissions are mocked."""

from __future__ import annotations

from typing import Any
from unittest.mock import MagicMock

import pytest
from fastapi.testclient import TestClient

from brushrate.api.app import create_app
from brushrate.data.pricing_tables import MinimumPricingPolicy
from brushrate.data.seed import DEFAULT_PRICING_CONFIG
from brushrate.engine import PricingEngine
from brushrate.exceptions import SubmissionError
from brushrate.services.submission import EstimateSubmitter, SubmissionResult

# ---------------------------------------------------------------------------
# Fixtures / helpers
# ---------------------------------------------------------------------------


def _form(**overrides: Any) -> dict[str, Any]:
    """A complete intake form, as a browser would POST it."""
    body: dict[str, Any] = {
        "clientName": "Dana Whitfield",
        "email": "dana@example.com",
        "phone": "(970) 555-0142",
        "address": "412 Oak St, Fort Collins, CO 80521",
        "projectType": "exterior",
        "squareFootage": "2000",
        "paintTier": "premium",
        "surfaces": ["brick", "trim"],
        "difficultyLevel": "standard",
        "additionalNotes": "",
    }
    body.update(overrides)
    return body


def _mock_submitter(
    result: SubmissionResult | None = None,
    error: Exception | None = None,
) -> MagicMock:
    submitter = MagicMock(spec=EstimateSubmitter)
    if error is not None:
        submitter.submit.side_effect = error
    else:
        submitter.submit.return_value = result or SubmissionResult(
            status_code=201, body={"id": "req-42"}
        )
    return submitter


@pytest.fixture()
def client() -> TestClient:
    return TestClient(create_app())


# ---------------------------------------------------------------------------
# GET /api/health
# ---------------------------------------------------------------------------


class TestHealth:
    def test_health(self, client: TestClient) -> None:
        resp = client.get("/api/health")
        assert resp.status_code == 200
        data = resp.json()
        assert data["status"] == "ok"
        assert data["version"] == "0.1.0"
        assert data["pricing_data_version"] == "2025.1"


# ---------------------------------------------------------------------------
# GET /api/options
# ---------------------------------------------------------------------------


class TestOptions:
    def test_options(self, client: TestClient) -> None:
        data = client.get("/api/options").json()
        assert data["project_types"] == ["interior", "exterior", "both"]
        assert [t["tier"] for t in data["paint_tiers"]] == [
            "standard",
            "premium",
            "designer",
        ]
        assert data["paint_tiers"][2]["label"] == "Designer/Specialty Paint"
        assert data["difficulty_levels"][4]["level"] == "high_difficulty"
        assert data["paint_tiers"][1]["multiplier_label"] == "1.3x"
        assert data["difficulty_levels"][4]["multiplier_label"] == "2.5x"

    def test_surfaces_for_project_type(self, client: TestClient) -> None:
        resp = client.get("/api/options/interior")
        assert resp.status_code == 200
        data = resp.json()
        assert data["project_type"] == "interior"
        assert [s["surface_id"] for s in data["surfaces"]] == [
            "walls",
            "ceilings",
            "trim",
        ]

    def test_unknown_project_type_404(self, client: TestClient) -> None:
        resp = client.get("/api/options/garage")
        assert resp.status_code == 404
        assert "garage" in resp.json()["detail"]


# ---------------------------------------------------------------------------
# POST /api/estimate
# ---------------------------------------------------------------------------


class TestEstimate:
    def test_estimate(self, client: TestClient) -> None:
        resp = client.post("/api/estimate", json=_form())
        assert resp.status_code == 200
        data = resp.json()
        assert data["estimate"]["min_price"] == 8424
        assert data["estimate"]["max_price"] == 19656
        assert data["estimate"]["tier_label"] == "Premium Paint"
        assert data["formatted"] == "$8,424 - $19,656"
        assert data["summary_dict"]["range_formatted"] == "$8,424 - $19,656"
        assert data["project"]["square_footage"] == 2000

    def test_contact_fields_not_required(self, client: TestClient) -> None:
        resp = client.post(
            "/api/estimate",
            json={
                "projectType": "interior",
                "squareFootage": 1000,
                "paintTier": "standard",
                "surfaces": ["walls"],
            },
        )
        assert resp.status_code == 200
        assert resp.json()["formatted"] == "$3,000 - $6,000"

    def test_snake_case_body_accepted(self, client: TestClient) -> None:
        resp = client.post(
            "/api/estimate",
            json={
                "project_type": "both",
                "square_footage": 1500,
                "paint_tier": "designer",
                "difficulty_level": "moderate",
                "surfaces": ["walls", "stucco"],
            },
        )
        assert resp.status_code == 200
        est = resp.json()["estimate"]
        assert (est["min_price"], est["max_price"]) == (6750, 15750)

    def test_incomplete_request_422(self, client: TestClient) -> None:
        resp = client.post(
            "/api/estimate",
            json=_form(projectType="", squareFootage="80"),
        )
        assert resp.status_code == 422
        errors = resp.json()["detail"]["errors"]
        assert errors == {
            "project_type": "Please select a project type",
            "square_footage": "Square footage must be at least 100",
        }

    def test_oversized_square_footage_422(self, client: TestClient) -> None:
        resp = client.post("/api/estimate", json=_form(squareFootage="9" * 400))
        assert resp.status_code == 422
        assert resp.json()["detail"]["errors"] == {
            "square_footage": "Square footage cannot exceed 1,000,000",
        }

    def test_injected_engine_is_used(self) -> None:
        config = DEFAULT_PRICING_CONFIG.model_copy(
            update={
                "minimums": MinimumPricingPolicy(absolute_minimum=0, minimum_spread=0)
            }
        )
        client = TestClient(create_app(engine=PricingEngine(config)))
        resp = client.post(
            "/api/estimate",
            json=_form(
                projectType="interior",
                squareFootage=1000,
                surfaces=[],
                paintTier="standard",
                difficultyLevel="basic",
            ),
        )
        assert resp.json()["formatted"] == "$1,500 - $3,500"


# ---------------------------------------------------------------------------
# POST /api/submit
# ---------------------------------------------------------------------------


class TestSubmit:
    def test_submit_success(self) -> None:
        submitter = _mock_submitter()
        client = TestClient(create_app(submitter=submitter))

        resp = client.post("/api/submit", json=_form())

        assert resp.status_code == 200
        data = resp.json()
        assert data["submitted"] is True
        assert data["intake_status"] == 201
        assert data["intake_response"] == {"id": "req-42"}
        assert data["formatted"] == "$8,424 - $19,656"

        submitter.submit.assert_called_once()
        validated = submitter.submit.call_args.args[0]
        assert validated.contact.email == "dana@example.com"
        assert validated.project.square_footage == 2000

    def test_submit_validates_contact_fields(self) -> None:
        submitter = _mock_submitter()
        client = TestClient(create_app(submitter=submitter))

        resp = client.post("/api/submit", json=_form(email="not-an-email", clientName=""))

        assert resp.status_code == 422
        errors = resp.json()["detail"]["errors"]
        assert set(errors) == {"email", "client_name"}
        submitter.submit.assert_not_called()

    def test_submission_failure_502(self) -> None:
        submitter = _mock_submitter(
            error=SubmissionError("There was an issue submitting your form.", 500)
        )
        client = TestClient(create_app(submitter=submitter))

        resp = client.post("/api/submit", json=_form())

        assert resp.status_code == 502
        assert "issue submitting" in resp.json()["detail"]

    def test_submit_not_configured_503(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.delenv("BRUSHRATE_INTAKE_URL", raising=False)
        client = TestClient(create_app())

        resp = client.post("/api/submit", json=_form())

        assert resp.status_code == 503

    def test_submitter_created_from_env(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("BRUSHRATE_INTAKE_URL", "https://intake.example.com/api")
        app = create_app()
        client = TestClient(app)

        with monkeypatch.context() as m:
            m.setattr(
                EstimateSubmitter,
                "submit",
                lambda self, validated: SubmissionResult(status_code=200),
            )
            resp = client.post("/api/submit", json=_form())

        assert resp.status_code == 200
        assert app.state.submitter.intake_url == "https://intake.example.com/api"
