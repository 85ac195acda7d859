"""Integration tests for the payroll compute endpoint."""
import pytest


def test_compute_standard(client):
    resp = client.post("/payroll/compute", json={
        "hours": [8, 10, 9.5], "pay_rate": 20, "tax_percent": 10,
    })
    assert resp.status_code == 200
    body = resp.json()
    assert body["overtime_policy"] == "standard"
    assert body["multiplier"] == 1.5
    assert body["threshold"] == 9.5
    assert len(body["rows"]) == 3
    assert body["rows"][1] == {"hours": 10.0, "regular_hours": 9.5, "overtime_hours": 0.5}
    assert body["totals"]["regular_pay"] == pytest.approx(585)
    assert body["totals"]["overtime_pay"] == pytest.approx(15)
    assert body["totals"]["net_total"] == pytest.approx(540)


def test_compute_extended(client):
    resp = client.post("/payroll/compute", json={
        "hours": [8, 10, 9.5], "pay_rate": 20, "tax_percent": 10, "overtime_policy": "extended",
    })
    body = resp.json()
    assert body["multiplier"] == 2.5
    assert body["totals"]["regular_pay"] == pytest.approx(585)
    assert body["totals"]["overtime_pay"] == pytest.approx(25)


def test_custom_threshold(client):
    resp = client.post("/payroll/compute", json={
        "hours": [10], "pay_rate": 10, "period_threshold_hours": 8,
    })
    body = resp.json()
    assert body["threshold"] == 8
    assert body["totals"]["total_overtime_hours"] == pytest.approx(2)


@pytest.mark.parametrize("payload", [
    {"hours": [8], "pay_rate": -1},
    {"hours": [8], "pay_rate": 10, "tax_percent": -5},
    {"hours": [-2], "pay_rate": 10},
    {"hours": [8], "pay_rate": 10, "overtime_policy": "triple"},
])
def test_out_of_domain_input_rejected(client, payload):
    assert client.post("/payroll/compute", json=payload).status_code == 422


@pytest.mark.parametrize("body", [
    '{"hours": [0], "pay_rate": Infinity}',
    '{"hours": [8], "pay_rate": 10, "tax_percent": Infinity}',
    '{"hours": [8], "pay_rate": 10, "period_threshold_hours": NaN}',
])
def test_non_finite_parameters_rejected(client, body):
    resp = client.post(
        "/payroll/compute", content=body, headers={"content-type": "application/json"},
    )
    assert resp.status_code == 422
