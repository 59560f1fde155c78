"""HTTP tests for the candidate and vote endpoints."""

from datetime import datetime, timezone
from typing import Any, Dict

from fastapi.testclient import TestClient

from voting_api.app.core.config import Settings
from voting_api.app.main import create_app


class TestCandidateEndpoints:
    """Tests for POST/GET /api/candidates."""

    def test_create_returns_201_with_generated_id(
        self, client: TestClient, candidate_payload: Dict[str, Any]
    ) -> None:
        response = client.post("/api/candidates", json=candidate_payload)
        assert response.status_code == 201
        data = response.json()
        assert data["id"]
        assert data["number"] == 42
        assert data["turma"] == 3

    def test_duplicate_number_returns_400_with_message(
        self, client: TestClient, candidate_payload: Dict[str, Any]
    ) -> None:
        client.post("/api/candidates", json=candidate_payload)
        response = client.post("/api/candidates", json={**candidate_payload, "name": "Bruno Costa"})
        assert response.status_code == 400
        assert response.json() == {"error": "candidate number already in use"}

    def test_invalid_fields_return_400_with_every_field(self, client: TestClient) -> None:
        response = client.post(
            "/api/candidates",
            json={"name": "Al", "email": "nope", "turma": 0, "proposal": "ok", "number": 5},
        )
        assert response.status_code == 400
        errors = response.json()["errors"]
        assert set(errors) == {"name", "email", "turma", "number"}

    def test_list_starts_empty(self, client: TestClient) -> None:
        response = client.get("/api/candidates")
        assert response.status_code == 200
        assert response.json() == []

    def test_boolean_turma_returns_400(self, client: TestClient, candidate_payload: Dict[str, Any]) -> None:
        response = client.post("/api/candidates", json={**candidate_payload, "turma": True})
        assert response.status_code == 400
        assert list(response.json()["errors"]) == ["turma"]

    def test_malformed_json_is_reported_on_body(self, client: TestClient) -> None:
        response = client.post(
            "/api/candidates",
            content=b"{\"name\": ",
            headers={"Content-Type": "application/json"},
        )
        assert response.status_code == 400
        assert list(response.json()["errors"]) == ["body"]


class TestVoteEndpoints:
    """Tests for POST/GET /api/votes."""

    def test_vote_for_unknown_candidate_returns_400(self, client: TestClient) -> None:
        response = client.post("/api/votes", json={"raaAluno": "RA123", "candidateNumber": 42})
        assert response.status_code == 400
        assert response.json() == {"error": "candidate not found for given number"}

    def test_missing_voter_returns_field_error(self, client: TestClient) -> None:
        response = client.post("/api/votes", json={"candidateNumber": 42})
        assert response.status_code == 400
        assert "raaAluno" in response.json()["errors"]

    def test_list_votes_out_of_range_returns_400(self, client: TestClient) -> None:
        response = client.get("/api/votes/5")
        assert response.status_code == 400
        assert "candidateNumber" in response.json()["errors"]

    def test_list_votes_non_integer_returns_400(self, client: TestClient) -> None:
        response = client.get("/api/votes/abc")
        assert response.status_code == 400

    def test_list_votes_for_number_without_votes_is_empty(self, client: TestClient) -> None:
        response = client.get("/api/votes/50")
        assert response.status_code == 200
        assert response.json() == []

    def test_list_all_votes(self, client: TestClient, candidate_payload: Dict[str, Any]) -> None:
        client.post("/api/candidates", json=candidate_payload)
        client.post("/api/candidates", json={**candidate_payload, "number": 17})
        client.post("/api/votes", json={"raaAluno": "RA1", "candidateNumber": 42})
        client.post("/api/votes", json={"raaAluno": "RA2", "candidateNumber": 17})
        response = client.get("/api/votes")
        assert response.status_code == 200
        assert [vote["candidateNumber"] for vote in response.json()] == [42, 17]


class TestElectionScenario:
    """End-to-end flow: register a candidate, vote, read the votes back."""

    def test_full_flow(self, client: TestClient, candidate_payload: Dict[str, Any]) -> None:
        created = client.post("/api/candidates", json=candidate_payload)
        assert created.status_code == 201
        candidate = created.json()
        assert candidate["id"]
        assert candidate["number"] == 42

        listed = client.get("/api/candidates")
        assert listed.status_code == 200
        assert listed.json() == [candidate]

        before = datetime.now(timezone.utc)
        voted = client.post("/api/votes", json={"raaAluno": "RA123", "candidateNumber": 42})
        assert voted.status_code == 201

        votes = client.get("/api/votes/42")
        assert votes.status_code == 200
        data = votes.json()
        assert len(data) == 1
        assert data[0]["candidateNumber"] == 42
        assert data[0]["raaAluno"] == "RA123"
        voted_at = datetime.fromisoformat(data[0]["votedAt"].replace("Z", "+00:00"))
        assert voted_at >= before


class TestApplication:
    """Tests for app-level wiring."""

    def test_health_reports_counts(self, client: TestClient, candidate_payload: Dict[str, Any]) -> None:
        client.post("/api/candidates", json=candidate_payload)
        response = client.get("/health")
        assert response.status_code == 200
        assert response.json() == {"status": "ok", "candidates": 1, "votes": 0}

    def test_apps_do_not_share_state(self, candidate_payload: Dict[str, Any]) -> None:
        first = TestClient(create_app(Settings()))
        second = TestClient(create_app(Settings()))
        first.post("/api/candidates", json=candidate_payload)
        assert second.get("/api/candidates").json() == []

    def test_docs_only_in_debug(self) -> None:
        assert TestClient(create_app(Settings(debug=False))).get("/docs").status_code == 404
        assert TestClient(create_app(Settings(debug=True))).get("/docs").status_code == 200

    def test_custom_prefix(self) -> None:
        client = TestClient(create_app(Settings(api_prefix="/v1")))
        assert client.get("/v1/candidates").status_code == 200
