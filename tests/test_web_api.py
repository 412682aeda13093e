"""
Tests for the Valuation HTTP API

Covering:
- Healthchecks
- City reference prices
- Valuation success and 422 failure bodies
- Caller-side defaults (city land price, configured policy and horizon)
- PDF memo download
"""

from pathlib import Path
import sys

import pytest
from fastapi.testclient import TestClient

# Add project root to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from utils.config import Config
from web.app import create_app


# =============================================================================
# Test Fixtures
# =============================================================================

def make_config(tmp_path, **overrides) -> Config:
    values = {
        "host": "127.0.0.1",
        "port": 8000,
        "debug": False,
        "log_level": "WARNING",
        "building_policy": "yield_backed",
        "projection_years": None,
        "reports_dir": str(tmp_path),
        "currency": "INR",
    }
    values.update(overrides)
    return Config(**values)


@pytest.fixture
def client(tmp_path):
    return TestClient(create_app(make_config(tmp_path)))


@pytest.fixture
def payload():
    """Calculator default inputs."""
    return {
        "monthly_rent": 20000,
        "land_unit_price": 5000,
        "built_up_area": 1000,
        "density_ratio": 1.5,
        "current_yield": 3,
        "building_age": 5,
        "land_inflation_rate": 8,
        "future_density_ratio": 2,
    }


# =============================================================================
# Test: Health
# =============================================================================

class TestHealth:

    def test_root(self, client):
        response = client.get("/")
        assert response.status_code == 200
        assert response.json() == {"status": "ok"}

    def test_health(self, client):
        assert client.get("/health").json() == {"status": "healthy"}

    def test_api_health_reports_policy(self, client):
        data = client.get("/api/health").json()

        assert data["status"] == "healthy"
        assert data["version"] == "1.0.0"
        assert data["building_policy"] == "yield_backed"


# =============================================================================
# Test: Cities
# =============================================================================

class TestCities:

    def test_list_cities(self, client):
        data = client.get("/api/cities").json()

        names = [entry["city"] for entry in data]
        assert names == ["Mumbai", "Delhi", "Bangalore", "Chennai"]

    def test_lookup_city(self, client):
        response = client.get("/api/cities/mumbai")

        assert response.status_code == 200
        assert response.json()["average_land_price"] == 15000

    def test_unknown_city(self, client):
        assert client.get("/api/cities/Atlantis").status_code == 404


# =============================================================================
# Test: Valuation
# =============================================================================

class TestValuation:

    def test_yield_backed_success(self, client, payload):
        response = client.post("/api/valuation", json=payload)

        assert response.status_code == 200
        data = response.json()
        assert data["success"] is True
        assert data["policy"] == "yield_backed"

        result = data["result"]
        assert result["land_area"] == 667
        assert result["land_value"] == 3_335_000
        assert result["building_value"] == 7_333_334
        assert result["total_value"] == 10_668_334
        assert result["listed_property_value"] is None

        projection = data["projection"]
        assert len(projection) == 11
        assert projection[0]["label"] == "Current"
        assert projection[-1]["label"] == "Year 10"
        assert projection[0]["rental_value"] == 240_000

    def test_cost_curve_policy(self, client, payload):
        payload.update(
            policy="cost_curve",
            construction_inflation_rate=6,
            new_construction_cost=4000,
        )

        data = client.post("/api/valuation", json=payload).json()

        assert data["policy"] == "cost_curve"
        assert data["result"]["building_value"] == 3_334_000
        assert data["result"]["listed_property_value"] == 8_000_000
        assert len(data["projection"]) == 41

    def test_horizon_override(self, client, payload):
        payload["years_to_project"] = 3

        data = client.post("/api/valuation", json=payload).json()

        assert len(data["projection"]) == 4

    def test_oversized_horizon(self, client, payload):
        payload["years_to_project"] = 300_000

        response = client.post("/api/valuation", json=payload)

        assert response.status_code == 422
        assert response.json()["parameter"] == "years_to_project"

    def test_configured_horizon(self, tmp_path, payload):
        client = TestClient(create_app(make_config(tmp_path, projection_years=5)))

        data = client.post("/api/valuation", json=payload).json()

        assert len(data["projection"]) == 6

    def test_configured_policy(self, tmp_path, payload):
        client = TestClient(create_app(make_config(tmp_path, building_policy="cost_curve")))

        response = client.post("/api/valuation", json=payload)

        # Cost-curve inputs absent
        assert response.status_code == 422
        assert response.json()["error"] == "invalid_parameter"

    def test_city_supplies_land_price(self, client, payload):
        del payload["land_unit_price"]
        payload["city"] = "Mumbai"

        data = client.post("/api/valuation", json=payload).json()

        assert data["result"]["land_value"] == 667 * 15000

    def test_explicit_land_price_wins_over_city(self, client, payload):
        payload["city"] = "Mumbai"

        data = client.post("/api/valuation", json=payload).json()

        assert data["result"]["land_value"] == 3_335_000

    def test_missing_land_price(self, client, payload):
        del payload["land_unit_price"]

        response = client.post("/api/valuation", json=payload)

        assert response.status_code == 422
        assert response.json()["parameter"] == "land_unit_price"

    def test_invalid_parameter_body(self, client, payload):
        payload["density_ratio"] = 0

        response = client.post("/api/valuation", json=payload)

        assert response.status_code == 422
        data = response.json()
        assert data == {
            "success": False,
            "error": "invalid_parameter",
            "parameter": "density_ratio",
            "message": data["message"],
        }

    def test_domain_error_body(self, client, payload):
        payload["building_age"] = 61

        response = client.post("/api/valuation", json=payload)

        assert response.status_code == 422
        assert response.json()["error"] == "domain_error"

    def test_unknown_policy(self, client, payload):
        payload["policy"] = "hedonic"

        response = client.post("/api/valuation", json=payload)

        assert response.status_code == 422
        assert response.json()["parameter"] == "policy"


# =============================================================================
# Test: Memo PDF
# =============================================================================

class TestReport:

    def test_report_pdf(self, client, payload):
        payload.update(reference_id="VAL-API-7", prepared_for="API Client")

        response = client.post("/api/valuation/report", json=payload)

        assert response.status_code == 200
        assert response.headers["content-type"] == "application/pdf"
        assert "valuation-VAL-API-7.pdf" in response.headers["content-disposition"]
        assert response.content.startswith(b"%PDF")

    def test_report_rejected(self, client, payload):
        payload.update(reference_id="VAL-API-8", current_yield=0)

        response = client.post("/api/valuation/report", json=payload)

        assert response.status_code == 422
        assert response.json()["parameter"] == "current_yield"
