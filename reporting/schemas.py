"""
Schemas for Valuation Memo generation.

A memo bundles one parameter set with the presentation details the PDF
generator needs. Sample data mirrors the calculator's starting values.
"""

from dataclasses import dataclass, field
from datetime import datetime
from typing import Optional

from core.valuation_engine.models import BuildingPolicy, ValuationParameters


@dataclass
class ValuationMemo:
    """
    Everything needed to render one valuation memo.

    years_to_project overrides the policy's default horizon when set.
    """
    reference_id: str
    prepared_for: str
    property_label: str
    parameters: ValuationParameters
    policy: BuildingPolicy = BuildingPolicy.YIELD_BACKED
    city: str = ""
    years_to_project: Optional[int] = None
    currency: str = "INR"
    area_unit: str = "sq ft"
    generated_at: str = field(default_factory=lambda: datetime.now().isoformat())

    @property
    def report_date(self) -> str:
        return self.generated_at[:10]


def create_sample_parameters() -> ValuationParameters:
    """Starting values of the calculator form (yield-backed inputs)."""
    return ValuationParameters(
        monthly_rent=20000,
        land_unit_price=5000,
        built_up_area=1000,
        density_ratio=1.5,
        current_yield=3,
        building_age=5,
        land_inflation_rate=8,
        future_density_ratio=2,
    )


def create_sample_cost_curve_parameters() -> ValuationParameters:
    """Starting values with the cost-curve inputs filled in."""
    base = create_sample_parameters()
    return ValuationParameters(
        monthly_rent=base.monthly_rent,
        land_unit_price=base.land_unit_price,
        built_up_area=base.built_up_area,
        density_ratio=base.density_ratio,
        current_yield=base.current_yield,
        building_age=base.building_age,
        land_inflation_rate=base.land_inflation_rate,
        future_density_ratio=base.future_density_ratio,
        construction_inflation_rate=6,
        new_construction_cost=4000,
    )


def create_sample_memo(policy: BuildingPolicy = BuildingPolicy.YIELD_BACKED) -> ValuationMemo:
    """
    Create a sample memo for testing PDF generation.
    Uses the calculator's default inputs.
    """
    if policy is BuildingPolicy.COST_CURVE:
        parameters = create_sample_cost_curve_parameters()
    else:
        parameters = create_sample_parameters()

    return ValuationMemo(
        reference_id="VAL-SAMPLE-001",
        prepared_for="Sample Client",
        property_label="Sample 1,000 sq ft residence",
        parameters=parameters,
        policy=policy,
        city="Pune",
    )


def parameters_from_dict(data: dict) -> ValuationParameters:
    """
    Build ValuationParameters from a JSON-style dict.

    Raises:
        KeyError: If a required field is absent
    """
    return ValuationParameters(
        monthly_rent=data["monthly_rent"],
        land_unit_price=data["land_unit_price"],
        built_up_area=data["built_up_area"],
        density_ratio=data["density_ratio"],
        current_yield=data["current_yield"],
        building_age=data["building_age"],
        land_inflation_rate=data["land_inflation_rate"],
        future_density_ratio=data["future_density_ratio"],
        construction_inflation_rate=data.get("construction_inflation_rate"),
        new_construction_cost=data.get("new_construction_cost"),
    )


def memo_from_dict(data: dict) -> ValuationMemo:
    """
    Parse a JSON dictionary into a ValuationMemo.

    Raises:
        KeyError: If parameters or a required parameter is missing
        ValueError: If the memo or its parameters are not JSON objects,
            or the policy name is unknown
    """
    if not isinstance(data, dict):
        raise ValueError(f"Memo must be a JSON object, got {type(data).__name__}")
    if not isinstance(data.get("parameters", {}), dict):
        raise ValueError("Memo parameters must be a JSON object")

    policy_name = data.get("policy", BuildingPolicy.YIELD_BACKED.value)
    policy = BuildingPolicy.from_string(policy_name) if isinstance(policy_name, str) else None
    if policy is None:
        raise ValueError(f"Unknown building policy: {policy_name}")

    memo = ValuationMemo(
        reference_id=str(data.get("reference_id", "")),
        prepared_for=data.get("prepared_for", ""),
        property_label=data.get("property_label", ""),
        parameters=parameters_from_dict(data["parameters"]),
        policy=policy,
        city=data.get("city", ""),
        years_to_project=data.get("years_to_project"),
        currency=data.get("currency", "INR"),
        area_unit=data.get("area_unit", "sq ft"),
    )
    if data.get("generated_at"):
        memo.generated_at = data["generated_at"]
    return memo
