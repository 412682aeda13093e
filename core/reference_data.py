"""
City Land Price Reference Data

Average land prices per square foot (INR) for major Indian cities, used
by callers to suggest a land_unit_price before invoking the engine. The
valuation engine itself never reads this table.
"""

from dataclasses import dataclass
from typing import Dict, List, Optional


@dataclass(frozen=True)
class PriceRange:
    """Low/high land price band, per sq ft."""
    low: int
    high: int


@dataclass(frozen=True)
class CityLandPrice:
    """Reference land price for one city."""
    city: str
    state: str
    average_land_price: int  # INR per sq ft
    price_range: PriceRange

    def to_dict(self) -> dict:
        """Convert to dictionary for JSON output."""
        return {
            "city": self.city,
            "state": self.state,
            "average_land_price": self.average_land_price,
            "price_range": {
                "low": self.price_range.low,
                "high": self.price_range.high,
            },
        }


INDIAN_CITIES: List[CityLandPrice] = [
    CityLandPrice("Mumbai", "Maharashtra", 15000, PriceRange(low=10000, high=20000)),
    CityLandPrice("Delhi", "Delhi", 12000, PriceRange(low=8000, high=16000)),
    CityLandPrice("Bangalore", "Karnataka", 8000, PriceRange(low=5000, high=11000)),
    CityLandPrice("Chennai", "Tamil Nadu", 6000, PriceRange(low=4000, high=8000)),
]


class CityLandPriceService:
    """
    Lookup service over the city land price table.

    Lookups are case-insensitive and ignore surrounding whitespace.
    """

    def __init__(self, cities: Optional[List[CityLandPrice]] = None):
        """Initialize the service with a table (default: INDIAN_CITIES)."""
        table = INDIAN_CITIES if cities is None else cities
        self._by_name: Dict[str, CityLandPrice] = {
            entry.city.lower(): entry for entry in table
        }

    def list_cities(self) -> List[CityLandPrice]:
        """All cities, in table order."""
        return list(self._by_name.values())

    def lookup(self, city: str) -> Optional[CityLandPrice]:
        """Find a city's reference price, or None if it is not listed."""
        if not city:
            return None
        return self._by_name.get(city.strip().lower())

    def suggest_land_unit_price(self, city: str) -> Optional[int]:
        """Average land price to pre-populate for a city, if known."""
        entry = self.lookup(city)
        return entry.average_land_price if entry else None


# Singleton instance
_service: Optional[CityLandPriceService] = None


def get_city_price_service() -> CityLandPriceService:
    """Get the city land price service singleton."""
    global _service
    if _service is None:
        _service = CityLandPriceService()
    return _service
