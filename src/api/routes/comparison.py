"""Buy vs rent routes: validate inputs, run the comparison, price purchase fees."""

import logging
from dataclasses import asdict, replace

from fastapi import APIRouter, HTTPException

from src.api.deps import default_options, resolve_region
from src.api.schemas import (
    BuyYearResponse,
    CompareRequest,
    CompareResponse,
    CostBasisSchema,
    FeesRequest,
    FlatCost,
    IssuesResponse,
    ModelingOptionsResponse,
    PurchaseFeesResponse,
    RentYearResponse,
    ValidationIssueResponse,
)
from src.engine.comparison import compare_buy_vs_rent
from src.engine.validation import has_errors, validate
from src.models.inputs import BuyVsRentInputs, CostBasis, Flat, RateOfValue
from src.models.region import RegionalConfig
from src.models.results import PurchaseFees, Severity, ValidationIssue

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/v1", tags=["comparison"])


def _cost_basis(schema: CostBasisSchema) -> CostBasis:
    if isinstance(schema, FlatCost):
        return Flat(schema.amount)
    return RateOfValue(schema.percent)


def _overrides(schema) -> dict:
    return schema.model_dump(exclude_none=True)


def build_inputs(req: CompareRequest, region: RegionalConfig) -> BuyVsRentInputs:
    """Request fields layered over the region's defaults and the configured options."""
    defaults = region.defaults

    buy_fields = _overrides(req.buy)
    if req.buy.insurance is not None:
        buy_fields["insurance"] = _cost_basis(req.buy.insurance)
    if req.buy.closing_costs is not None:
        buy_fields["closing_costs"] = _cost_basis(req.buy.closing_costs)

    top_level = {}
    if req.investment_return_pct is not None:
        top_level["investment_return_pct"] = req.investment_return_pct
    if req.time_horizon_years is not None:
        top_level["time_horizon_years"] = req.time_horizon_years

    return replace(
        defaults,
        buy=replace(defaults.buy, **buy_fields),
        rent=replace(defaults.rent, **_overrides(req.rent)),
        options=replace(default_options(), **_overrides(req.options)),
        **top_level,
    )


def issue_response(issue: ValidationIssue) -> ValidationIssueResponse:
    return ValidationIssueResponse(
        field=issue.field,
        message=issue.message,
        severity=issue.severity.value,
    )


def _fees_response(fees: PurchaseFees) -> PurchaseFeesResponse:
    return PurchaseFeesResponse(**asdict(fees), total=fees.total)


@router.post("/validate", response_model=IssuesResponse)
async def validate_inputs(req: CompareRequest):
    """Errors and warnings for a set of inputs. Always 200; the caller decides."""
    region = resolve_region(req.region)
    issues = validate(build_inputs(req, region), region)
    return IssuesResponse(issues=[issue_response(i) for i in issues])


@router.post("/compare", response_model=CompareResponse)
async def compare(req: CompareRequest):
    """Full year-by-year buy vs rent projection for one region."""
    region = resolve_region(req.region)
    inputs = build_inputs(req, region)

    issues = validate(inputs, region)
    if has_errors(issues):
        logger.info("Rejected %s comparison: %d validation issue(s)", region.code, len(issues))
        raise HTTPException(
            status_code=422,
            detail={"issues": [issue_response(i).model_dump() for i in issues]},
        )

    result = compare_buy_vs_rent(inputs, region)

    return CompareResponse(
        region=region.code,
        currency_symbol=region.currency.symbol,
        buy_breakdown=[BuyYearResponse(**asdict(row)) for row in result.buy_breakdown],
        rent_breakdown=[RentYearResponse(**asdict(row)) for row in result.rent_breakdown],
        break_even_year=result.break_even_year,
        final_buy_net_worth=result.final_buy_net_worth,
        final_rent_net_worth=result.final_rent_net_worth,
        difference=result.difference,
        better_choice=result.better_choice.value,
        summary=result.summary,
        closing_costs=result.closing_costs,
        purchase_fees=_fees_response(result.purchase_fees) if result.purchase_fees else None,
        options=ModelingOptionsResponse(**asdict(result.options)),
        warnings=[
            issue_response(i) for i in issues if i.severity is Severity.WARNING
        ],
    )


@router.post("/fees", response_model=PurchaseFeesResponse)
async def purchase_fees(req: FeesRequest):
    """One-time purchase fees under a region's fee model."""
    region = resolve_region(req.region)
    if req.property_value < 0 or req.loan_amount < 0:
        raise HTTPException(status_code=422, detail="Amounts cannot be negative")
    return _fees_response(region.fee_model.compute(req.property_value, req.loan_amount))
