from fastapi.testclient import TestClient

from app.core.sample_payloads import INVALID_REQUEST, SAMPLE_REQUEST, SAMPLE_REQUEST_CAMEL
from app.main import app

client = TestClient(app)


def test_health():
    resp = client.get("/health")
    assert resp.status_code == 200
    assert resp.json() == {"status": "ok"}


def test_percentages():
    assert client.get("/percentages").json() == {"percentages": [80, 50, 30, 20, 10]}


def test_calculate_sample():
    resp = client.post("/calculate", json=SAMPLE_REQUEST)
    assert resp.status_code == 200
    body = resp.json()
    assert [s["percent"] for s in body["scenarios"]] == [80, 50, 30, 20, 10]
    first = body["scenarios"][0]
    assert first["total_savings"] == 19200.0
    assert first["percentage_of_target"] == 192.0
    assert first["reaches_target"] is True
    assert body["inputs"] == {"target": 10000.0, "duration": 12, "income": 2000.0}
    card = body["cards"][0]
    assert card["title"] == "80% Savings"
    assert card["status_label"] == "Reaches Target"
    assert card["total_caption"] == "Total After 12 months"
    assert card["progress_width"] == 100.0
    assert card["daily_budget"].endswith("13.33")


def test_calculate_camel_case_payload():
    resp = client.post("/calculate", json=SAMPLE_REQUEST_CAMEL)
    assert resp.status_code == 200
    for scenario in resp.json()["scenarios"]:
        assert scenario["total_savings"] == 0.0
        assert scenario["reaches_target"] is False


def test_calculate_numbers_accepted_as_text():
    resp = client.post("/calculate", json={"target_savings": 10000, "duration_months": 12, "monthly_income": 2000})
    assert resp.status_code == 200


def test_calculate_invalid_input():
    resp = client.post("/calculate", json=INVALID_REQUEST)
    assert resp.status_code == 422
    detail = resp.json()["detail"]
    assert detail["fields"] == ["target_savings"]
    assert detail["message"] == "Please fill all fields correctly."


def test_calculate_empty_payload():
    resp = client.post("/calculate", json={})
    assert resp.status_code == 422
    assert len(resp.json()["detail"]["fields"]) == 3


def test_dark_flag_echoed():
    resp = client.post("/calculate", json={**SAMPLE_REQUEST, "dark": False})
    assert resp.json()["dark"] is False


def test_oversized_input_is_client_error():
    resp = client.post("/calculate", json={**SAMPLE_REQUEST, "monthly_income": "1e308"})
    assert resp.status_code == 422
    assert resp.json()["detail"]["fields"] == ["monthly_income"]


def test_subnormal_target_calculates():
    resp = client.post("/calculate", json={**SAMPLE_REQUEST, "target_savings": "1e-320"})
    assert resp.status_code == 200
    body = resp.json()
    assert all(s["percentage_of_target"] is None for s in body["scenarios"])
    assert all(c["progress_text"] == "n/a of target" for c in body["cards"])
