"""
Valuation Engine

Values a property as land plus building and projects both components
over a multi-year horizon under assumed inflation and density change.
"""

from .models import (
    LIFESPAN,
    BuildingPolicy,
    ErrorKind,
    ValuationParameters,
    ValuationResult,
    ProjectionPoint,
    ValuationSuccess,
    ValuationFailure,
    ValuationOutcome,
)
from .errors import ValuationError, InvalidParameter, DomainError
from .building import (
    DEPRECIATION_SEGMENTS,
    cost_per_area,
    YieldBackedValuer,
    CostCurveValuer,
)
from .engine import PropertyValuationEngine, compute_valuation

__all__ = [
    # Models
    "LIFESPAN",
    "BuildingPolicy",
    "ErrorKind",
    "ValuationParameters",
    "ValuationResult",
    "ProjectionPoint",
    "ValuationSuccess",
    "ValuationFailure",
    "ValuationOutcome",
    # Errors
    "ValuationError",
    "InvalidParameter",
    "DomainError",
    # Building policies
    "DEPRECIATION_SEGMENTS",
    "cost_per_area",
    "YieldBackedValuer",
    "CostCurveValuer",
    # Engine
    "PropertyValuationEngine",
    "compute_valuation",
]

__version__ = "1.0"
