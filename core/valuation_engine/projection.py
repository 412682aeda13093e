"""
Projection stage.

Rolls the current land and building values forward one year at a time.
Land compounds at the land inflation rate and gains a bonus for any
expected density increase; building value and rent follow the active
building policy.
"""

import math
from typing import List

from .building import BuildingValuer
from .land import density_bonus
from .models import (
    BuildingValuation,
    LandValuation,
    ProjectionPoint,
    ValuationParameters,
)


CURRENT_LABEL = "Current"


def year_label(year: int) -> str:
    return CURRENT_LABEL if year == 0 else f"Year {year}"


def project_land_value(
    params: ValuationParameters,
    land: LandValuation,
    year: int,
) -> int:
    """Land value `year` years out: compounded growth plus density bonus."""
    growth = math.ceil(
        land.land_value * (1 + params.land_inflation_rate / 100) ** year
    )
    bonus = density_bonus(
        density_ratio=params.density_ratio,
        future_density_ratio=params.future_density_ratio,
        area=land.land_area,
        land_unit_price=params.land_unit_price,
        year=year,
    )
    return growth + bonus


def project(
    params: ValuationParameters,
    land: LandValuation,
    building: BuildingValuation,
    valuer: BuildingValuer,
    years_to_project: int,
) -> List[ProjectionPoint]:
    """
    Build the projected series, current year first.

    Always returns years_to_project + 1 points in chronological order.
    """
    points = [
        ProjectionPoint(
            label=CURRENT_LABEL,
            land_value=land.land_value,
            building_value=building.building_value,
            rental_value=math.ceil(params.annual_rent),
        )
    ]

    for year in range(1, years_to_project + 1):
        points.append(ProjectionPoint(
            label=year_label(year),
            land_value=project_land_value(params, land, year),
            building_value=valuer.value_in_year(params, year),
            rental_value=valuer.rental_in_year(params, year),
        ))

    return points
