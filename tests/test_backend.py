"""Tests for the Flask REST API."""

from unittest.mock import AsyncMock, patch

import pytest

from backend.app import flask_app
from variantexplorer.errors import ErrorKind
from variantexplorer.models.annotations import AnnotationBundle
from variantexplorer.models.coordinates import GenomicCoordinates
from variantexplorer.models.result import ExplorationFailure, ExplorationResult
from variantexplorer.models.variant import RsId


@pytest.fixture
def client():
    flask_app.config["TESTING"] = True
    with flask_app.test_client() as client:
        yield client


@pytest.fixture
def exploration_result():
    return ExplorationResult(
        query="rs56116432",
        parsed=RsId(id="rs56116432"),
        coordinates=GenomicCoordinates(
            chromosome="9", start=133256042, end=133256042, assembly="GRCh38", provenance="rsid_direct"
        ),
        annotations=AnnotationBundle(genome="hg38", chromosome="chr9", start=133256042, end=133256042),
    )


class TestHealth:
    def test_health(self, client):
        response = client.get("/api/health")

        assert response.status_code == 200
        assert response.get_json()["status"] == "healthy"


class TestExplore:
    """POST /api/explore."""

    def test_success(self, client, exploration_result):
        with patch("backend.app._explore", new_callable=AsyncMock) as mock_explore:
            mock_explore.return_value = exploration_result
            response = client.post("/api/explore", json={"query": "rs56116432"})

        assert response.status_code == 200
        data = response.get_json()
        assert data["parsed"]["kind"] == "rsid"
        assert data["coordinates"]["start"] == 133256042
        mock_explore.assert_awaited_once_with("rs56116432")

    def test_resolution_failure_is_422(self, client):
        failure = ExplorationFailure(query="rs0", error=ErrorKind.NOT_FOUND, details="No GRCh38 mapping for rs0")

        with patch("backend.app._explore", new_callable=AsyncMock) as mock_explore:
            mock_explore.return_value = failure
            response = client.post("/api/explore", json={"query": "rs0"})

        assert response.status_code == 422
        assert response.get_json()["error"] == "not_found"

    def test_missing_body(self, client):
        response = client.post("/api/explore")
        assert response.status_code == 400

    def test_blank_query(self, client):
        response = client.post("/api/explore", json={"query": "  "})
        assert response.status_code == 400

    def test_unexpected_exception_is_500(self, client):
        with patch("backend.app._explore", new_callable=AsyncMock) as mock_explore:
            mock_explore.side_effect = RuntimeError("boom")
            response = client.post("/api/explore", json={"query": "rs56116432"})

        assert response.status_code == 500
        assert "boom" in response.get_json()["error"]

    def test_unknown_endpoint(self, client):
        response = client.get("/api/nothing")
        assert response.status_code == 404
