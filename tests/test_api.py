import pytest
from fastapi.testclient import TestClient

from mortgage_calc.docs.examples import example_request, example_rejected, example_response
from mortgage_calc.main import app

client = TestClient(app)


def test_loan_calc_base():
    r = client.post("/loan/calc", json=example_request)
    assert r.status_code == 200
    data = r.json()
    assert set(data) == set(example_response)
    assert data["result"]["credit_limit"] == 3000000
    assert data["result"]["monthly_installment"] == pytest.approx(19959.07, abs=0.01)
    assert data["display"]["min_monthly_income"] == "46,154 THB"
    assert data["display"]["monthly_installment"] == "19,959 THB"
    assert data["meta"]["request_id"] == r.headers["X-Request-ID"]


def test_api_version_header():
    r = client.post("/loan/calc", json=example_request)
    assert r.headers["X-Loan-Calc-Version"] == "v1.0"


def test_loan_calc_rejects_below_minimum():
    payload = {"price": "3000000", "annual_interest_rate_percent": "1.5", "term_years": "2"}
    r = client.post("/loan/calc", json=payload)
    assert r.status_code == 422
    assert r.json() == example_rejected


def test_loan_calc_empty_form():
    r = client.post("/loan/calc", json={})
    assert r.status_code == 422
    assert set(r.json()["detail"]) == {"price", "annual_interest_rate_percent", "term_years"}


def test_admit_endpoint():
    r = client.post("/loan/admit", json={"field": "price", "text": "1234567"})
    assert r.status_code == 200
    assert r.json()["formatted"] == "1,234,567"

    r = client.post("/loan/admit", json={"field": "price", "text": "0123"})
    assert r.json()["allowed"] is False


def test_admit_unknown_field():
    r = client.post("/loan/admit", json={"field": "deposit", "text": "1"})
    assert r.status_code == 400


def test_validate_endpoint():
    r = client.post("/loan/validate", json={"price": "100", "annual_interest_rate_percent": "7", "term_years": "2"})
    data = r.json()
    assert data["errors"] == {"term_years": "loan term must be at least 3 years"}
    assert data["submit_disabled"] is True


def test_form_flow():
    state = client.get("/loan/form/initial").json()
    assert state["submit_disabled"] is True

    for field, text in example_request.items():
        r = client.post("/loan/form/change", json={"state": state, "field": field, "text": text})
        assert r.status_code == 200
        state = r.json()
    assert state["submit_disabled"] is False

    state = client.post("/loan/form/submit", json=state).json()
    assert state["errors"] == {}
    assert state["result"]["min_monthly_income"] == pytest.approx(3000000 / 65)
    assert state["display"]["min_monthly_income"] == "46,154 THB"

    state = client.post("/loan/form/reset").json()
    assert state["values"] == {"price": "", "annual_interest_rate_percent": "", "term_years": ""}
    assert state["result"] == {"credit_limit": 0, "min_monthly_income": 0, "monthly_installment": 0}


def test_form_change_unknown_field():
    r = client.post("/loan/form/change", json={"field": "deposit", "text": "1"})
    assert r.status_code == 400


def test_config_endpoint():
    r = client.get("/loan/config")
    assert r.status_code == 200
    data = r.json()
    assert "income_heuristic" in data
    assert "version" in data


def test_health_endpoint():
    r = client.get("/health")
    assert r.status_code == 200
    assert r.json() == {"status": "ok"}


def test_root_serves_page():
    r = client.get("/")
    assert r.status_code == 200
    assert "loan-form" in r.text
