"""
API Tests for the rule execution endpoints
"""

import importlib

import pytest
from fastapi.testclient import TestClient
from mangum import Mangum

from rules import RuleEngine
from eligibility import api
from eligibility.sample_rules import age_rule, rule_panics_on_then, rule_with_no_resolutions
from eligibility.service import EligibilityService


@pytest.fixture
def client():
    return TestClient(api.app)


def use_engine(monkeypatch, engine: RuleEngine) -> None:
    monkeypatch.setattr(api, "eligibility_service", EligibilityService(engine=engine))


class TestExecuteEndpoint:
    """Tests for POST /execute."""

    def test_health(self, client):
        response = client.get("/health")
        assert response.status_code == 200
        assert response.json()["status"] == "healthy"

    def test_execute_sets_both_flags(self, client):
        response = client.post("/execute", json={"age": 25, "state": "CA"})

        assert response.status_code == 200
        body = response.json()
        assert body["age_check"] is True
        assert body["state_check"] is True
        assert body["age"] == 25

    def test_execute_minor_without_state(self, client):
        response = client.post("/execute", json={"age": 10})

        assert response.status_code == 200
        body = response.json()
        assert body["age_check"] is False
        assert body["state_check"] is False

    def test_report_lists_fired_rules(self, client):
        response = client.post("/execute/report", json={"age": 25, "state": "CA"})

        assert response.status_code == 200
        body = response.json()
        assert body["cycles"] == 2
        assert body["fired"] == ["State is not empty", "Age > 18"]

    def test_invalid_input(self, client):
        response = client.post("/execute", json={"age": "not a number"})

        assert response.status_code == 400
        assert response.json()["detail"] == "Invalid input"

    def test_cycle_limit_is_server_error(self, client, monkeypatch):
        engine = RuleEngine(100)
        engine.add_rule(age_rule(), 100)
        engine.add_rule(rule_with_no_resolutions(), 101)
        use_engine(monkeypatch, engine)

        response = client.post("/execute", json={"age": 25, "state": "CA"})

        assert response.status_code == 500
        assert "max cycle of 100 reached" in response.json()["detail"]

    def test_rule_failure_is_server_error(self, client, monkeypatch):
        engine = RuleEngine(100)
        engine.add_rule(rule_panics_on_then(), 1)
        use_engine(monkeypatch, engine)

        response = client.post("/execute", json={"age": 25, "panics_on_then": True})

        assert response.status_code == 500
        assert "RulePanicsOnThen" in response.json()["detail"]


class TestServerlessEntry:
    """Tests for the Mangum entry point."""

    def test_handler_wraps_its_own_app(self):
        index = importlib.import_module("api.index")

        assert isinstance(index.handler, Mangum)
        assert index.app is not api.app
        assert index.app.root_path == "/api"
        assert api.app.root_path == ""

    def test_entry_app_serves_shared_routes(self):
        index = importlib.import_module("api.index")
        client = TestClient(index.app)

        response = client.post("/execute", json={"age": 25, "state": "CA"})

        assert response.status_code == 200
        assert response.json()["age_check"] is True


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
