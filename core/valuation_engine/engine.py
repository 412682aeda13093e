"""
Valuation Engine

Pipeline order:
1. VALIDATE - Shared and policy-specific preconditions
2. LAND - Plot area and land value
3. BUILDING - Current building value under the active policy
4. PROJECT - Year-by-year land, building, total and rental values

Stateless: each call owns its intermediate values and returns fresh
objects, so identical parameters always give identical output.
"""

import logging
import math
from typing import List, Optional, Tuple

from .building import BuildingValuer, get_valuer
from .errors import ValuationError
from .land import value_land
from .models import (
    BuildingPolicy,
    ProjectionPoint,
    ValuationFailure,
    ValuationOutcome,
    ValuationParameters,
    ValuationResult,
    ValuationSuccess,
)
from .projection import project
from .validation import validate_horizon, validate_parameters


logger = logging.getLogger(__name__)


class PropertyValuationEngine:
    """
    Land + building valuation with a multi-year projection.

    valuate() raises on bad input; evaluate() returns a tagged outcome.
    """

    def __init__(
        self,
        policy: BuildingPolicy = BuildingPolicy.YIELD_BACKED,
        years_to_project: Optional[int] = None,
    ):
        """
        Initialize valuation engine.

        Args:
            policy: Building valuation policy
            years_to_project: Horizon override (default: the policy's own)
        """
        if years_to_project is None:
            years_to_project = policy.years_to_project
        validate_horizon(years_to_project)

        self._policy = policy
        self._years_to_project = years_to_project
        self._valuer: BuildingValuer = get_valuer(policy)

    @property
    def policy(self) -> BuildingPolicy:
        return self._policy

    @property
    def years_to_project(self) -> int:
        return self._years_to_project

    def valuate(
        self,
        params: ValuationParameters,
    ) -> Tuple[ValuationResult, List[ProjectionPoint]]:
        """
        Value the property and project it forward.

        Args:
            params: Complete parameter set

        Returns:
            Tuple of (current valuation, projection series)

        Raises:
            InvalidParameter: If an input is missing or out of range
            DomainError: If a building age leaves the depreciation curve
        """
        # Step 1: Validate everything before computing anything
        validate_parameters(params)
        self._valuer.check(params)

        # Step 2: Land
        land = value_land(
            built_up_area=params.built_up_area,
            density_ratio=params.density_ratio,
            land_unit_price=params.land_unit_price,
        )

        # Step 3: Building
        building = self._valuer.value_current(params)

        # Step 4: Projection
        projection = project(
            params=params,
            land=land,
            building=building,
            valuer=self._valuer,
            years_to_project=self._years_to_project,
        )

        total = land.land_value + building.building_value
        result = ValuationResult(
            policy=self._policy,
            land_area=land.land_area,
            land_value=land.land_value,
            building_value=building.building_value,
            land_value_per_area=math.ceil(land.land_value / params.built_up_area),
            building_value_per_area=math.ceil(
                building.building_value / params.built_up_area
            ),
            total_value_per_area=math.ceil(total / params.built_up_area),
            listed_property_value=building.listed_property_value,
        )

        logger.debug(
            "Valued property (%s): land=%s building=%s over %s years",
            self._policy.value,
            result.land_value,
            result.building_value,
            self._years_to_project,
        )
        return result, projection

    def evaluate(self, params: ValuationParameters) -> ValuationOutcome:
        """
        Value the property, reporting bad input as a ValuationFailure.

        Returns:
            ValuationSuccess: With the current valuation and full projection
            ValuationFailure: With the error kind, parameter and message
        """
        try:
            result, projection = self.valuate(params)
        except ValuationError as e:
            logger.warning(
                "Rejected valuation parameters (%s): %s",
                e.kind.value,
                e,
            )
            return ValuationFailure(
                kind=e.kind,
                parameter=e.parameter,
                message=e.message,
            )
        return ValuationSuccess(result=result, projection=projection)


# =============================================================================
# Convenience Function
# =============================================================================

def compute_valuation(
    params: ValuationParameters,
    policy: BuildingPolicy = BuildingPolicy.YIELD_BACKED,
    years_to_project: Optional[int] = None,
) -> ValuationOutcome:
    """
    Compute the current valuation and projection for one parameter set.

    This is the primary entry point for callers.

    Example:
        outcome = compute_valuation(params, BuildingPolicy.COST_CURVE)

        if isinstance(outcome, ValuationSuccess):
            print(outcome.result.total_value)
        else:
            print(outcome.kind, outcome.message)
    """
    try:
        engine = PropertyValuationEngine(policy, years_to_project)
    except ValuationError as e:
        return ValuationFailure(kind=e.kind, parameter=e.parameter, message=e.message)
    return engine.evaluate(params)
