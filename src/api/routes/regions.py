"""Supported jurisdictions and their default inputs."""

from fastapi import APIRouter

from src.api.deps import resolve_region
from src.api.schemas import (
    BuyInputsSchema,
    FlatCost,
    RateOfValueCost,
    RegionDefaultsResponse,
    RegionResponse,
    RentInputsSchema,
)
from src.models.inputs import Flat
from src.models.region import RegionalConfig
from src.regions.registry import available_regions, get_region

router = APIRouter(prefix="/api/v1/regions", tags=["regions"])


def _region_response(region: RegionalConfig) -> RegionResponse:
    return RegionResponse(
        code=region.code,
        name=region.name,
        currency_symbol=region.currency.symbol,
        currency_code=region.currency.code,
        locale=region.currency.locale,
    )


def _cost_schema(basis):
    if basis is None:
        return None
    if isinstance(basis, Flat):
        return FlatCost(amount=basis.amount)
    return RateOfValueCost(percent=basis.percent)


@router.get("", response_model=list[RegionResponse])
async def list_regions():
    return [_region_response(get_region(code)) for code in available_regions()]


@router.get("/{code}/defaults", response_model=RegionDefaultsResponse)
async def region_defaults(code: str):
    """Default inputs, terminology and help text for a region."""
    region = resolve_region(code)
    buy = region.defaults.buy
    rent = region.defaults.rent

    return RegionDefaultsResponse(
        region=_region_response(region),
        buy=BuyInputsSchema(
            home_price=buy.home_price,
            down_payment_pct=buy.down_payment_pct,
            interest_rate_pct=buy.interest_rate_pct,
            loan_term_years=buy.loan_term_years,
            property_tax_rate_pct=buy.property_tax_rate_pct,
            insurance=_cost_schema(buy.insurance),
            hoa_monthly=buy.hoa_monthly,
            maintenance_rate_pct=buy.maintenance_rate_pct,
            appreciation_rate_pct=buy.appreciation_rate_pct,
            closing_costs=_cost_schema(buy.closing_costs),
            selling_costs_pct=buy.selling_costs_pct,
        ),
        rent=RentInputsSchema(
            monthly_rent=rent.monthly_rent,
            rent_increase_rate_pct=rent.rent_increase_rate_pct,
            renters_insurance=rent.renters_insurance,
        ),
        investment_return_pct=region.defaults.investment_return_pct,
        time_horizon_years=region.defaults.time_horizon_years,
        typical=region.validation.typical_values(),
        terminology=region.terminology,
        help_text=region.help_text,
    )
