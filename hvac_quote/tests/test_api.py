"""
Tests: HTTP routes.

Run with:
    pytest hvac_quote/tests/test_api.py -v
"""

import pytest
from fastapi.testclient import TestClient

from hvac_quote.api import app, routes
from hvac_quote.persistence.proposal_repository import ProposalRepository
from hvac_quote.pricebook import PriceBookStore


@pytest.fixture
def client(monkeypatch):
    """Client with a fresh price book and draft store per test."""
    monkeypatch.setattr(routes, "_store", PriceBookStore())
    monkeypatch.setattr(routes, "_proposals", ProposalRepository())
    return TestClient(app)


class TestHealth:
    def test_health(self, client):
        response = client.get("/health")
        assert response.status_code == 200
        assert response.json()["status"] == "ok"


class TestPriceBookRoutes:
    def test_get_price_book(self, client):
        body = client.get("/api/pricebook").json()
        assert len(body["hvac_systems"]) == 3
        assert body["settings"]["cash_markup"] == 20

    def test_update_margin(self, client):
        response = client.patch(
            "/api/pricebook/hvac_systems/1/margin",
            json={"margin_type": "fixed", "margin_amount": 3001},
        )
        assert response.status_code == 200
        assert response.json()["margin_amount"] == 3001

        totals = client.post("/api/quote", json={"tier": "good"}).json()
        # (9,999 + 3,001) × 1.2
        assert totals["equipment_price"] == pytest.approx(15600.00)

    def test_update_margin_unknown_section(self, client):
        response = client.patch(
            "/api/pricebook/widgets/1/margin",
            json={"margin_type": "fixed", "margin_amount": 10},
        )
        assert response.status_code == 404

    def test_update_margin_unknown_item(self, client):
        response = client.patch(
            "/api/pricebook/add_ons/99/margin",
            json={"margin_type": "fixed", "margin_amount": 10},
        )
        assert response.status_code == 404

    def test_replace_section(self, client):
        response = client.put(
            "/api/pricebook/incentives",
            json=[{"id": "9", "name": "City Rebate", "amount": 750}],
        )
        assert response.status_code == 200
        assert [i["id"] for i in response.json()["incentives"]] == ["9"]

    def test_replace_section_invalid_item(self, client):
        response = client.put("/api/pricebook/add_ons", json=[{"base_cost": -10}])
        assert response.status_code == 400

    def test_update_settings(self, client):
        response = client.patch("/api/pricebook/settings", json={"cash_markup": 0})
        assert response.status_code == 200
        totals = client.post("/api/quote", json={"tier": "better"}).json()
        assert totals["equipment_price"] == 14499

    def test_update_unknown_setting_rejected(self, client):
        response = client.patch("/api/pricebook/settings", json={"cash_markup_percent": 5})
        assert response.status_code == 400
        assert client.get("/api/pricebook").json()["settings"]["cash_markup"] == 20


class TestQuoteRoutes:
    def test_cash_quote(self, client):
        response = client.post("/api/quote", json={
            "tier": "better",
            "add_on_ids": ["1", "4"],
            "maintenance_plan_id": "2",
            "years": 5,
            "incentive_ids": ["2"],
        })
        assert response.status_code == 200
        body = response.json()
        assert body["grand_total"] == pytest.approx(21153.80)
        assert body["monthly_payment"] is None

    def test_lease_quote(self, client):
        body = client.post("/api/quote", json={
            "tier": "good",
            "payment_method": "lease",
            "financing_option_id": "8",
        }).json()
        # 12,499 × 0.01416
        assert body["monthly_payment"] == pytest.approx(176.99)
        assert body["lease"]["escalator_note"] == "Year 1, increases 1.99% annually"

    def test_pricing_error_is_recoverable(self, client):
        client.put("/api/pricebook/financing_options", json=[{
            "id": "x", "name": "8 Year Comfort Plan", "type": "lease",
            "term_months": 96, "provider": "Lightreach",
        }])
        response = client.post("/api/quote", json={
            "tier": "good", "payment_method": "lease", "financing_option_id": "x",
        })
        assert response.status_code == 422
        body = response.json()
        assert body["code"] == "UNSUPPORTED_FINANCING_TERM"
        assert body["display"] == "Price unavailable"

    def test_out_of_range_loan_is_recoverable(self, client):
        client.put("/api/pricebook/financing_options", json=[{
            "id": "long", "name": "Forever Loan", "type": "finance",
            "term_months": 1000000, "apr": 20,
        }])
        response = client.post("/api/quote", json={
            "tier": "good", "payment_method": "finance", "financing_option_id": "long",
        })
        assert response.status_code == 422
        assert response.json()["code"] == "UNSUPPORTED_FINANCING_TERM"

    def test_disabled_add_on_not_quoted(self, client):
        add_ons = client.get("/api/pricebook").json()["add_ons"]
        for addon in add_ons:
            addon["enabled"] = addon["id"] != "1"
        client.put("/api/pricebook/add_ons", json=add_ons)

        response = client.post("/api/quote", json={"add_on_ids": ["1"]})
        assert response.status_code == 422
        assert response.json()["code"] == "INVALID_CONFIGURATION"
        assert client.post("/api/quote", json={"add_on_ids": ["2"]}).status_code == 200

    def test_unknown_id(self, client):
        response = client.post("/api/quote", json={"add_on_ids": ["nope"]})
        assert response.status_code == 422
        assert response.json()["code"] == "INVALID_CONFIGURATION"

    def test_lease_options(self, client):
        response = client.get("/api/quote/lease-options", params={"system_price": 14998})
        assert response.status_code == 200
        options = response.json()
        assert len(options) == 6
        assert options[1]["monthly_payments"][0]["monthly_payment"] == pytest.approx(223.02)


class TestProposalRoutes:
    def test_save_and_reload_recomputes_totals(self, client):
        saved = client.put("/api/proposals/P-100", json={"tier": "best"}).json()
        assert saved["version"] == 1

        first = client.get("/api/proposals/P-100").json()
        assert first["totals"]["equipment_price"] == pytest.approx(22198.80)

        # Totals follow the price book, not a stored snapshot
        client.patch("/api/pricebook/settings", json={"cash_markup": 0})
        second = client.get("/api/proposals/P-100").json()
        assert second["totals"]["equipment_price"] == 18499

    def test_last_write_wins(self, client):
        client.put("/api/proposals/P-200", json={"tier": "good"})
        client.put("/api/proposals/P-200", json={"tier": "better"})
        body = client.get("/api/proposals/P-200").json()
        assert body["version"] == 2
        assert body["selection"]["tier"] == "better"

        old = client.get("/api/proposals/P-200", params={"version": 1}).json()
        assert old["selection"]["tier"] == "good"

    def test_unpriceable_draft_still_loads(self, client):
        client.put("/api/proposals/P-300", json={"add_on_ids": ["gone"]})
        body = client.get("/api/proposals/P-300").json()
        assert body["totals"] is None
        assert body["error"]["display"] == "Price unavailable"

    def test_missing_proposal(self, client):
        assert client.get("/api/proposals/none").status_code == 404
