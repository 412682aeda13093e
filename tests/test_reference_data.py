"""
Tests for city land price reference data.
"""

from pathlib import Path
import sys

import pytest

# Add project root to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from core.reference_data import (
    INDIAN_CITIES,
    CityLandPrice,
    CityLandPriceService,
    PriceRange,
    get_city_price_service,
)


@pytest.fixture
def service():
    return CityLandPriceService()


class TestCityLookup:
    """Case-insensitive lookup over the reference table."""

    def test_lists_all_cities_in_order(self, service):
        names = [entry.city for entry in service.list_cities()]

        assert names == ["Mumbai", "Delhi", "Bangalore", "Chennai"]

    def test_lookup_ignores_case_and_whitespace(self, service):
        entry = service.lookup("  mumbai ")

        assert entry is not None
        assert entry.state == "Maharashtra"
        assert entry.average_land_price == 15000
        assert entry.price_range == PriceRange(low=10000, high=20000)

    def test_unknown_city_returns_none(self, service):
        assert service.lookup("Atlantis") is None
        assert service.lookup("") is None

    @pytest.mark.parametrize("city,price", [
        ("Mumbai", 15000),
        ("Delhi", 12000),
        ("Bangalore", 8000),
        ("Chennai", 6000),
    ])
    def test_suggested_land_price(self, service, city, price):
        assert service.suggest_land_unit_price(city) == price

    def test_no_suggestion_for_unknown_city(self, service):
        assert service.suggest_land_unit_price("Atlantis") is None

    def test_average_within_range(self):
        for entry in INDIAN_CITIES:
            assert entry.price_range.low <= entry.average_land_price <= entry.price_range.high

    def test_custom_table(self):
        service = CityLandPriceService([
            CityLandPrice("Pune", "Maharashtra", 7000, PriceRange(low=4500, high=9500)),
        ])

        assert service.suggest_land_unit_price("PUNE") == 7000
        assert service.lookup("Mumbai") is None

    def test_to_dict(self, service):
        assert service.lookup("Chennai").to_dict() == {
            "city": "Chennai",
            "state": "Tamil Nadu",
            "average_land_price": 6000,
            "price_range": {"low": 4000, "high": 8000},
        }

    def test_singleton(self):
        assert get_city_price_service() is get_city_price_service()
