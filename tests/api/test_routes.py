from decimal import Decimal

import pytest
from fastapi.testclient import TestClient

from src.api.app import app


@pytest.fixture
def client() -> TestClient:
    return TestClient(app)


class TestHealth:
    def test_health(self, client):
        resp = client.get("/health")
        assert resp.status_code == 200
        assert resp.json() == {"status": "ok"}


class TestRegions:
    def test_list(self, client):
        resp = client.get("/api/v1/regions")
        assert resp.status_code == 200
        assert [r["code"] for r in resp.json()] == ["US", "ZA"]

    def test_defaults(self, client):
        resp = client.get("/api/v1/regions/za/defaults")
        assert resp.status_code == 200
        data = resp.json()
        assert data["region"]["code"] == "ZA"
        assert data["time_horizon_years"] == 20
        assert Decimal(data["buy"]["home_price"]) == Decimal("2500000")
        assert data["buy"]["insurance"]["kind"] == "rate"
        assert data["buy"]["closing_costs"] is None
        assert data["terminology"]["mortgage"] == "Bond"

    def test_defaults_include_typical_values(self, client):
        data = client.get("/api/v1/regions/za/defaults").json()
        assert Decimal(data["typical"]["interest_rate_pct"]) == Decimal("11.75")
        assert Decimal(data["typical"]["appreciation_rate_pct"]) == Decimal("5.5")
        assert "home_price" not in data["typical"]

        us = client.get("/api/v1/regions/US/defaults").json()
        assert Decimal(us["typical"]["property_tax_rate_pct"]) == Decimal("1.2")

    def test_unknown_region(self, client):
        resp = client.get("/api/v1/regions/XX/defaults")
        assert resp.status_code == 404


class TestValidate:
    def test_defaults_clean(self, client):
        resp = client.post("/api/v1/validate", json={"region": "US"})
        assert resp.status_code == 200
        assert resp.json() == {"issues": []}

    def test_warning(self, client):
        resp = client.post(
            "/api/v1/validate", json={"region": "ZA", "buy": {"interest_rate_pct": "16"}}
        )
        assert resp.status_code == 200
        issues = resp.json()["issues"]
        assert [(i["field"], i["severity"]) for i in issues] == [("interest_rate_pct", "warning")]

    def test_errors_still_200(self, client):
        resp = client.post("/api/v1/validate", json={"region": "ZA", "time_horizon_years": 0})
        assert resp.status_code == 200
        assert resp.json()["issues"][0]["severity"] == "error"


class TestCompare:
    def test_region_defaults(self, client):
        resp = client.post("/api/v1/compare", json={"region": "ZA"})
        assert resp.status_code == 200
        data = resp.json()
        assert len(data["buy_breakdown"]) == 21
        assert len(data["rent_breakdown"]) == 21
        assert Decimal(data["closing_costs"]) == Decimal("111475")
        assert Decimal(data["purchase_fees"]["transfer_duty"]) == Decimal("79275")
        assert data["better_choice"] in ("buy", "rent")
        assert data["currency_symbol"] == "R"

    def test_overrides(self, client):
        resp = client.post("/api/v1/compare", json={
            "region": "US",
            "buy": {
                "home_price": "500000",
                "closing_costs": {"kind": "flat", "amount": "9000"},
                "insurance": {"kind": "flat", "amount": "1800"},
            },
            "rent": {"monthly_rent": "2500"},
            "time_horizon_years": 10,
        })
        assert resp.status_code == 200
        data = resp.json()
        assert len(data["buy_breakdown"]) == 11
        assert Decimal(data["closing_costs"]) == Decimal("9000")
        assert data["purchase_fees"] is None
        assert Decimal(data["buy_breakdown"][1]["insurance"]) == Decimal("1800")

    def test_options(self, client):
        resp = client.post("/api/v1/compare", json={
            "region": "ZA",
            "options": {"include_closing_costs_in_renter_initial_investment": True},
        })
        data = resp.json()
        assert Decimal(data["rent_breakdown"][0]["net_worth"]) == Decimal("361475")
        assert data["options"]["include_closing_costs_in_renter_initial_investment"] is True
        assert data["options"]["model_buyer_side_investment"] is True

    def test_warnings_returned(self, client):
        resp = client.post(
            "/api/v1/compare", json={"region": "ZA", "investment_return_pct": "20"}
        )
        assert resp.status_code == 200
        assert [w["field"] for w in resp.json()["warnings"]] == ["investment_return_pct"]

    def test_invalid_inputs(self, client):
        resp = client.post("/api/v1/compare", json={"region": "ZA", "time_horizon_years": 0})
        assert resp.status_code == 422
        issues = resp.json()["detail"]["issues"]
        assert issues[0]["field"] == "time_horizon_years"

    def test_unknown_region(self, client):
        resp = client.post("/api/v1/compare", json={"region": "XX"})
        assert resp.status_code == 404


class TestFees:
    def test_south_africa(self, client):
        resp = client.post("/api/v1/fees", json={
            "region": "ZA", "property_value": "2000000", "loan_amount": "1600000",
        })
        assert resp.status_code == 200
        data = resp.json()
        assert Decimal(data["transfer_duty"]) == Decimal("41625")
        assert Decimal(data["bond_registration"]) == Decimal("16600")
        assert Decimal(data["deeds_office"]) == Decimal("11750")
        assert Decimal(data["total"]) == Decimal("69975")

    def test_united_states(self, client):
        resp = client.post("/api/v1/fees", json={"region": "US", "property_value": "400000"})
        assert Decimal(resp.json()["other"]) == Decimal("12000")

    def test_negative_rejected(self, client):
        resp = client.post("/api/v1/fees", json={"region": "ZA", "property_value": "-1"})
        assert resp.status_code == 422


class TestScenarios:
    def test_list_templates(self, client):
        resp = client.get("/api/v1/scenarios/templates")
        assert resp.status_code == 200
        data = resp.json()
        assert [t["id"] for t in data] == ["buy-vs-rent", "car-vs-invest", "contribution"]
        assert Decimal(data[1]["scenario_a"]["return_rate_pct"]) == Decimal("-15")

    def test_template_detail(self, client):
        resp = client.get("/api/v1/scenarios/templates/contribution")
        assert resp.status_code == 200
        assert resp.json()["scenario_b"]["label"] == "1000/month"

    def test_unknown_template(self, client):
        assert client.get("/api/v1/scenarios/templates/nope").status_code == 404
        resp = client.post("/api/v1/scenarios/compare", json={"template_id": "nope"})
        assert resp.status_code == 404

    def test_compare_template_in_region_currency(self, client):
        resp = client.post(
            "/api/v1/scenarios/compare",
            json={"template_id": "car-vs-invest", "region": "ZA", "name": "Car or shares"},
        )
        assert resp.status_code == 200
        data = resp.json()
        assert data["name"] == "Car or shares"
        assert data["currency_symbol"] == "R"
        assert len(data["scenario_a"]) == 20
        assert Decimal(data["difference"]) > 0
        assert "you'll have R" in data["summary"]

    def test_compare_explicit_plans(self, client):
        resp = client.post("/api/v1/scenarios/compare", json={
            "region": "US",
            "scenario_a": {"label": "Plan A", "monthly_amount": "100",
                           "return_rate_pct": "0", "time_horizon_years": 2},
            "scenario_b": {"label": "Plan B", "monthly_amount": "200",
                           "return_rate_pct": "0", "time_horizon_years": 2},
        })
        assert resp.status_code == 200
        data = resp.json()
        assert Decimal(data["difference"]) == Decimal("2400")
        assert data["summary"] == (
            'If you choose "Plan B" instead of "Plan A", you\'ll have $2,400 more after 2 years.'
        )

    def test_explicit_plan_overrides_template(self, client):
        resp = client.post("/api/v1/scenarios/compare", json={
            "template_id": "contribution",
            "scenario_b": {"label": "Nothing", "return_rate_pct": "7", "time_horizon_years": 30},
        })
        assert resp.status_code == 200
        assert Decimal(resp.json()["difference"]) < 0

    def test_missing_plans(self, client):
        resp = client.post("/api/v1/scenarios/compare", json={"scenario_a": None})
        assert resp.status_code == 422

    def test_invalid_plans_and_name(self, client):
        resp = client.post("/api/v1/scenarios/compare", json={
            "name": "x" * 101,
            "scenario_a": {"label": " ", "return_rate_pct": "7", "time_horizon_years": 10},
            "scenario_b": {"label": "B", "initial_amount": "-1",
                           "return_rate_pct": "7", "time_horizon_years": 10},
        })
        assert resp.status_code == 422
        fields = [i["field"] for i in resp.json()["detail"]["issues"]]
        assert fields == ["scenario_a.label", "scenario_b.initial_amount", "name"]
