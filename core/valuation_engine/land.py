"""
Land valuation stage.

Land area is backed out from the built-up area and the density ratio,
then priced at the market rate per unit area.
"""

import math

from .errors import InvalidParameter
from .models import LandValuation


def land_area(built_up_area: float, density_ratio: float) -> int:
    """Plot area implied by the built-up area and density ratio, rounded up."""
    if density_ratio <= 0:
        raise InvalidParameter("density_ratio", "must be greater than zero")
    return math.ceil(built_up_area / density_ratio)


def value_land(
    built_up_area: float,
    density_ratio: float,
    land_unit_price: float,
) -> LandValuation:
    """
    Value the plot underneath the building.

    Args:
        built_up_area: Total constructed area
        density_ratio: Current FSI (built-up area / plot area)
        land_unit_price: Market price per unit of land

    Returns:
        LandValuation with the plot area and its value
    """
    area = land_area(built_up_area, density_ratio)
    return LandValuation(
        land_area=area,
        land_value=math.ceil(area * land_unit_price),
    )


def density_bonus(
    density_ratio: float,
    future_density_ratio: float,
    area: int,
    land_unit_price: float,
    year: int,
) -> int:
    """
    Extra land value from an expected rise in permitted density.

    Scales linearly with year / 10 and is not capped. A future ratio at
    or below the current one contributes nothing.
    """
    increase = future_density_ratio - density_ratio
    if increase <= 0:
        return 0
    return math.ceil(increase * area * land_unit_price * (year / 10))
