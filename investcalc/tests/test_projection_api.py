from __future__ import annotations

from math import isclose

from flask.testing import FlaskClient

from investcalc.app import create_app


def projection_payload() -> dict:
    return {
        "principal": "$10,000",
        "rate": 10,
        "time": 20,
        "contributionFrequency": "monthly",
        "additionalContributions": "$100",
        "contributionGrowthRate": 3.14,
    }


def test_projection_endpoint_returns_expected_report(client: FlaskClient):
    resp = client.post("/api/projection", json=projection_payload())

    assert resp.status_code == 200
    body = resp.get_json()
    rows = body["schedule"]
    assert [row["year"] for row in rows] == list(range(1, 21))

    assert body["summary"]["endBalance"] == rows[-1]["endBalance"]
    assert isclose(body["summary"]["startingAmount"], 10000.0, abs_tol=0.01)
    assert isclose(rows[0]["contribution"], 1200.0, abs_tol=0.01)
    assert body["series"]["years"] == list(range(0, 21))
    assert len(body["series"]["balance"]) == 21
    assert {item["name"] for item in body["breakdown"]} == {"Interest", "Principal", "Contributions"}


def test_empty_form_uses_page_defaults(client: FlaskClient):
    resp = client.post("/api/projection", json={})

    assert resp.status_code == 200
    body = resp.get_json()
    assert len(body["schedule"]) == 20
    assert body["summary"]["endBalance"] == 67275.0


def test_invalid_payload_returns_400(client: FlaskClient):
    resp = client.post("/api/projection", json={"time": "twenty"})

    assert resp.status_code == 400
    body = resp.get_json()
    assert "detail" in body
    assert body["detail"][0]["loc"] == ["time"]


def test_zero_years_returns_400(client: FlaskClient):
    resp = client.post("/api/projection", json={"time": 0})

    assert resp.status_code == 400
    assert resp.get_json() == {"error": ["years must be at least 1"]}


def test_non_object_body_returns_400(client: FlaskClient):
    resp = client.post("/api/projection", json=[1, 2, 3])

    assert resp.status_code == 400
    assert "error" in resp.get_json()


def test_preflight_returns_no_content(client: FlaskClient):
    resp = client.options(
        "/api/projection",
        headers={
            "Origin": "http://localhost:5173",
            "Access-Control-Request-Method": "POST",
        },
    )

    assert resp.status_code in (200, 204)
    assert resp.headers["Access-Control-Allow-Origin"] == "http://localhost:5173"


def test_frequencies_endpoint(client: FlaskClient):
    resp = client.get("/api/frequencies")

    assert resp.status_code == 200
    assert resp.get_json()[2] == {"name": "monthly", "periodsPerYear": 12}


def test_max_years_comes_from_config():
    app = create_app({"TESTING": True, "MAX_YEARS": 5})

    with app.test_client() as client:
        resp = client.post("/api/projection", json={"time": 6})

    assert resp.status_code == 400
    assert resp.get_json() == {"error": ["years must be at most 5"]}


def test_max_years_can_be_set_from_environment(monkeypatch):
    monkeypatch.setenv("INVESTCALC_MAX_YEARS", "3")
    app = create_app({"TESTING": True})

    assert app.config["MAX_YEARS"] == 3


def test_negative_principal_returns_400(client: FlaskClient):
    resp = client.post("/api/projection", json={"principal": -5000})

    assert resp.status_code == 400
    body = resp.get_json()
    assert body["detail"][0]["loc"] == ["principal"]


def test_very_large_principal_is_projected(client: FlaskClient):
    resp = client.post("/api/projection", json={"principal": 1e30, "rate": 1, "time": 1})

    assert resp.status_code == 200
    assert isclose(resp.get_json()["summary"]["endBalance"], 1.01e30, rel_tol=1e-12)
