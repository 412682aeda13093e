"""
Property Valuation - Core Business Logic

This module provides the land + building valuation pipeline:
1. Land Valuation (plot area from density ratio, priced per unit area)
2. Building Valuation (yield-backed or cost-curve policy)
3. Projection (land, building, total and rental value per year)

City land price reference data is exposed separately for callers that
want to suggest a land price; the engine never reads it.
"""

from .valuation_engine import (
    LIFESPAN,
    BuildingPolicy,
    ErrorKind,
    ValuationParameters,
    ValuationResult,
    ProjectionPoint,
    ValuationSuccess,
    ValuationFailure,
    ValuationOutcome,
    ValuationError,
    InvalidParameter,
    DomainError,
    DEPRECIATION_SEGMENTS,
    cost_per_area,
    PropertyValuationEngine,
    compute_valuation,
)

# Reference data (caller-side defaults)
from .reference_data import (
    CityLandPrice,
    PriceRange,
    CityLandPriceService,
    INDIAN_CITIES,
    get_city_price_service,
)

__all__ = [
    # Valuation Engine
    "LIFESPAN",
    "BuildingPolicy",
    "ErrorKind",
    "ValuationParameters",
    "ValuationResult",
    "ProjectionPoint",
    "ValuationSuccess",
    "ValuationFailure",
    "ValuationOutcome",
    "ValuationError",
    "InvalidParameter",
    "DomainError",
    "DEPRECIATION_SEGMENTS",
    "cost_per_area",
    "PropertyValuationEngine",
    "compute_valuation",
    # Reference data
    "CityLandPrice",
    "PriceRange",
    "CityLandPriceService",
    "INDIAN_CITIES",
    "get_city_price_service",
]
