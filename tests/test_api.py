"""Тесты HTTP API"""
from datetime import date

import api.main as api_main
from personality_calculator import InvalidNameError


class TestInfoEndpoints:

    def test_root(self, client):
        response = client.get("/")
        assert response.status_code == 200
        assert response.json()["docs"] == "/docs"

    def test_questions(self, client):
        response = client.get("/api/questions")
        data = response.json()

        assert response.status_code == 200
        assert data["success"] is True
        assert len(data["questions"]) == 8
        assert len(data["lifeFocusOptions"]) == 7
        assert len(data["challengeOptions"]) == 6


class TestAssessmentEndpoints:

    def test_create_assessment(self, client, sample_payload):
        response = client.post("/api/assessment", json=sample_payload)
        data = response.json()

        assert response.status_code == 200
        assert data["success"] is True
        assert data["assessment"]["id"] >= 1
        assert data["assessment"]["mbtiType"] == "INTJ"
        assert data["result"]["mbtiResult"]["type"] == "INTJ"
        assert data["result"]["sanmeiResult"]["fullType"] == "火命・陽"
        assert data["result"]["seiMeiResult"]["nameTotal"] == 22
        assert data["result"]["fourPillarsResult"]["heavenlyStem"] == "辛"

    def test_get_assessment(self, client, sample_payload):
        created = client.post("/api/assessment", json=sample_payload).json()
        assessment_id = created["assessment"]["id"]

        response = client.get(f"/api/assessment/{assessment_id}")
        assert response.status_code == 200
        assert response.json()["assessment"]["fullName"] == "山田 太郎"

    def test_get_missing_assessment(self, client):
        response = client.get("/api/assessment/999")
        assert response.status_code == 404
        assert response.json() == {"success": False, "message": "Assessment not found"}

    def test_unknown_route_uses_error_format(self, client):
        response = client.get("/api/unknown")
        assert response.status_code == 404
        assert response.json()["success"] is False

    def test_calculation_failure(self, client, sample_payload, monkeypatch):
        def fail(data):
            raise RuntimeError("boom")

        monkeypatch.setattr(api_main.calculator, "calculate", fail)
        response = client.post("/api/assessment", json=sample_payload)

        assert response.status_code == 500
        assert response.json() == {"success": False, "message": "Failed to process assessment"}

    def test_invalid_name(self, client, sample_payload, monkeypatch):
        def fail(data):
            raise InvalidNameError("surname")

        monkeypatch.setattr(api_main.calculator, "calculate", fail)
        response = client.post("/api/calculate", json=sample_payload)

        assert response.status_code == 400
        assert response.json() == {"success": False, "message": "surname must contain at least one character"}

    def test_missing_required_field(self, client, sample_payload):
        del sample_payload["fullName"]
        response = client.post("/api/assessment", json=sample_payload)
        data = response.json()

        assert response.status_code == 400
        assert data["success"] is False
        assert data["message"] == "Invalid assessment data"
        assert any(error["field"] == "fullName" for error in data["errors"])

    def test_future_birth_year(self, client, sample_payload):
        sample_payload["birthYear"] = date.today().year + 1
        response = client.post("/api/assessment", json=sample_payload)
        assert response.status_code == 400

    def test_calculate_does_not_store(self, client, sample_payload):
        response = client.post("/api/calculate", json=sample_payload)

        assert response.status_code == 200
        assert response.json()["result"]["typeNickname"] == "「建築家・戦略家」"
        assert client.get("/api/assessment/1").status_code == 404


class TestReportEndpoints:

    def _create(self, client, payload) -> int:
        return client.post("/api/assessment", json=payload).json()["assessment"]["id"]

    def test_text_report(self, client, sample_payload):
        assessment_id = self._create(client, sample_payload)
        response = client.get(f"/api/assessment/{assessment_id}/report")

        assert response.status_code == 200
        assert "性格診断レポート" in response.text
        assert "山田 太郎" in response.text

    def test_pdf_report(self, client, sample_payload):
        assessment_id = self._create(client, sample_payload)
        response = client.get(f"/api/assessment/{assessment_id}/pdf")

        assert response.status_code == 200
        assert response.headers["content-type"] == "application/pdf"
        assert response.content.startswith(b"%PDF")

    def test_chart(self, client, sample_payload):
        assessment_id = self._create(client, sample_payload)
        response = client.get(f"/api/assessment/{assessment_id}/chart")

        assert response.status_code == 200
        assert response.headers["content-type"] == "image/png"
        assert response.content.startswith(b"\x89PNG")

    def test_report_for_missing_assessment(self, client):
        assert client.get("/api/assessment/999/report").status_code == 404
        assert client.get("/api/assessment/999/pdf").status_code == 404
        assert client.get("/api/assessment/999/chart").status_code == 404
