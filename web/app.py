"""
FastAPI application exposing the valuation engine over HTTP.

The calculator front end posts a complete parameter set on every change
and charts the returned projection; debouncing stays on the client.

Production deployment configuration via environment variables.
"""

import logging
import os
from typing import List, Optional, Tuple, Union

from fastapi import FastAPI, HTTPException
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse, Response
from pydantic import BaseModel

from core import (
    BuildingPolicy,
    ErrorKind,
    ValuationError,
    ValuationParameters,
    ValuationSuccess,
    compute_valuation,
    get_city_price_service,
)
from reporting.pdf_generator import ProjectionReportGenerator, report_filename
from reporting.schemas import ValuationMemo
from utils.config import Config


logger = logging.getLogger(__name__)

# =============================================================================
# Environment Configuration
# =============================================================================

IS_PRODUCTION = os.getenv("PRODUCTION", "").lower() == "true"

ALLOWED_ORIGINS = os.getenv("ALLOWED_ORIGINS", "").split(",") if os.getenv("ALLOWED_ORIGINS") else []
if not ALLOWED_ORIGINS and not IS_PRODUCTION:
    # Development fallback only
    ALLOWED_ORIGINS = ["http://localhost:3000", "http://127.0.0.1:3000"]

API_VERSION = "1.0.0"


# =============================================================================
# API Request Models
# =============================================================================

class ValuationRequest(BaseModel):
    """
    Parameter set for one valuation.

    land_unit_price may be omitted when city names a known city; the
    city's average land price is used instead.
    """
    monthly_rent: float
    land_unit_price: Optional[float] = None
    built_up_area: float
    density_ratio: float
    current_yield: float
    building_age: float
    land_inflation_rate: float
    future_density_ratio: float
    construction_inflation_rate: Optional[float] = None
    new_construction_cost: Optional[float] = None
    policy: Optional[str] = None  # yield_backed or cost_curve
    years_to_project: Optional[int] = None
    city: Optional[str] = None


class ReportRequest(ValuationRequest):
    """Valuation parameters plus memo details for PDF generation."""
    reference_id: str
    prepared_for: str = ""
    property_label: str = ""


def failure_response(kind: str, parameter: str, message: str) -> JSONResponse:
    """422 body shared by every rejected valuation."""
    return JSONResponse(
        status_code=422,
        content={
            "success": False,
            "error": kind,
            "parameter": parameter,
            "message": message,
        },
    )


def resolve_request(
    request: ValuationRequest,
    config: Config,
) -> Union[Tuple[ValuationParameters, BuildingPolicy, Optional[int]], JSONResponse]:
    """
    Turn a request into engine inputs, filling caller-side defaults.

    Returns:
        (parameters, policy, years_to_project), or a 422 response
    """
    policy_name = request.policy or config.building_policy
    policy = BuildingPolicy.from_string(policy_name)
    if policy is None:
        return failure_response(
            ErrorKind.INVALID_PARAMETER.value,
            "policy",
            f"unknown building policy {policy_name!r}",
        )

    land_unit_price = request.land_unit_price
    if land_unit_price is None and request.city:
        land_unit_price = get_city_price_service().suggest_land_unit_price(request.city)
    if land_unit_price is None:
        return failure_response(
            ErrorKind.INVALID_PARAMETER.value,
            "land_unit_price",
            "is required unless city names a listed city",
        )

    params = ValuationParameters(
        monthly_rent=request.monthly_rent,
        land_unit_price=land_unit_price,
        built_up_area=request.built_up_area,
        density_ratio=request.density_ratio,
        current_yield=request.current_yield,
        building_age=request.building_age,
        land_inflation_rate=request.land_inflation_rate,
        future_density_ratio=request.future_density_ratio,
        construction_inflation_rate=request.construction_inflation_rate,
        new_construction_cost=request.new_construction_cost,
    )

    years = request.years_to_project
    if years is None:
        years = config.projection_years
    return params, policy, years


def create_app(config: Optional[Config] = None) -> FastAPI:
    """Create and configure the FastAPI application."""
    config = config or Config.load()
    logging.basicConfig(level=getattr(logging, config.log_level, logging.INFO))

    app = FastAPI(
        title="Property Valuation Engine",
        description="Land and building valuation with multi-year projection",
        version=API_VERSION,
        docs_url=None if IS_PRODUCTION else "/docs",
        redoc_url=None if IS_PRODUCTION else "/redoc",
        openapi_url=None if IS_PRODUCTION else "/openapi.json",
        debug=config.debug and not IS_PRODUCTION,
    )

    # Healthchecks first: no dependencies, no IO
    @app.get("/", include_in_schema=False)
    def root():
        """Root healthcheck. No dependencies, no IO."""
        return {"status": "ok"}

    @app.get("/health", include_in_schema=False)
    def health():
        """Secondary health endpoint. No dependencies, no IO."""
        return {"status": "healthy"}

    if ALLOWED_ORIGINS:
        app.add_middleware(
            CORSMiddleware,
            allow_origins=ALLOWED_ORIGINS,
            allow_credentials=True,
            allow_methods=["GET", "POST"],
            allow_headers=["*"],
        )

    cities = get_city_price_service()
    report_generator = ProjectionReportGenerator(config.reports_dir)

    @app.get("/api/cities")
    async def list_cities() -> List[dict]:
        """Reference land prices used to pre-populate the land price input."""
        return [entry.to_dict() for entry in cities.list_cities()]

    @app.get("/api/cities/{city}")
    async def get_city(city: str) -> dict:
        """Reference land price for one city."""
        entry = cities.lookup(city)
        if entry is None:
            raise HTTPException(status_code=404, detail=f"Unknown city: {city}")
        return entry.to_dict()

    @app.post("/api/valuation")
    async def valuation(request: ValuationRequest):
        """
        Value a property and project it forward.

        Returns:
            - success: true with result and projection
            - success: false with error kind, parameter and message (422)
        """
        resolved = resolve_request(request, config)
        if isinstance(resolved, JSONResponse):
            return resolved
        params, policy, years = resolved

        outcome = compute_valuation(params, policy, years)
        if not isinstance(outcome, ValuationSuccess):
            return failure_response(outcome.kind.value, outcome.parameter, outcome.message)

        return JSONResponse({
            "success": True,
            "policy": policy.value,
            "result": outcome.result.to_dict(),
            "projection": [point.to_dict() for point in outcome.projection],
        })

    @app.post("/api/valuation/report")
    async def valuation_report(request: ReportRequest):
        """Render the valuation memo PDF for a parameter set."""
        resolved = resolve_request(request, config)
        if isinstance(resolved, JSONResponse):
            return resolved
        params, policy, years = resolved

        memo = ValuationMemo(
            reference_id=request.reference_id,
            prepared_for=request.prepared_for,
            property_label=request.property_label,
            parameters=params,
            policy=policy,
            city=request.city or "",
            years_to_project=years,
            currency=config.currency,
        )
        try:
            pdf_bytes = report_generator.generate_to_buffer(memo)
        except ValuationError as e:
            logger.warning("Valuation memo %s rejected: %s", request.reference_id, e)
            return failure_response(e.kind.value, e.parameter, e.message)

        filename = report_filename(request.reference_id)
        return Response(
            content=pdf_bytes,
            media_type="application/pdf",
            headers={"Content-Disposition": f'attachment; filename="{filename}"'},
        )

    @app.get("/api/health")
    async def api_health():
        """Health check endpoint."""
        return {
            "status": "healthy",
            "version": API_VERSION,
            "environment": "production" if IS_PRODUCTION else "development",
            "building_policy": config.building_policy,
        }

    return app


# Create app instance for uvicorn
app = create_app()
