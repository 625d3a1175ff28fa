"""Pydantic schemas for API request/response models."""

from decimal import Decimal
from typing import Annotated, Literal

from pydantic import BaseModel, ConfigDict, Field


# ---- Request schemas ----

class FlatCost(BaseModel):
    kind: Literal["flat"] = "flat"
    amount: Decimal = Field(..., description="Flat currency amount")


class RateOfValueCost(BaseModel):
    kind: Literal["rate"] = "rate"
    percent: Decimal = Field(..., description="Percent of home value, e.g. 0.5 for 0.5%")


CostBasisSchema = Annotated[FlatCost | RateOfValueCost, Field(discriminator="kind")]


class BuyInputsSchema(BaseModel):
    """Omitted fields fall back to the region's defaults."""
    home_price: Decimal | None = None
    down_payment_pct: Decimal | None = None
    interest_rate_pct: Decimal | None = None
    loan_term_years: int | None = None
    property_tax_rate_pct: Decimal | None = None
    insurance: CostBasisSchema | None = None
    hoa_monthly: Decimal | None = None
    maintenance_rate_pct: Decimal | None = None
    appreciation_rate_pct: Decimal | None = None
    closing_costs: CostBasisSchema | None = Field(
        None, description="Omit to use the region's purchase fee model"
    )
    selling_costs_pct: Decimal | None = None


class RentInputsSchema(BaseModel):
    monthly_rent: Decimal | None = None
    rent_increase_rate_pct: Decimal | None = None
    renters_insurance: Decimal | None = None


class ModelingOptionsSchema(BaseModel):
    model_config = ConfigDict(protected_namespaces=())

    include_closing_costs_in_renter_initial_investment: bool | None = None
    model_buyer_side_investment: bool | None = None


class CompareRequest(BaseModel):
    region: str | None = Field(None, description="ISO country code, e.g. ZA or US")
    buy: BuyInputsSchema = Field(default_factory=BuyInputsSchema)
    rent: RentInputsSchema = Field(default_factory=RentInputsSchema)
    investment_return_pct: Decimal | None = None
    time_horizon_years: int | None = None
    options: ModelingOptionsSchema = Field(default_factory=ModelingOptionsSchema)


class FeesRequest(BaseModel):
    region: str | None = None
    property_value: Decimal
    loan_amount: Decimal = Decimal("0")


class GrowthScenarioSchema(BaseModel):
    label: str
    initial_amount: Decimal = Decimal("0")
    monthly_amount: Decimal = Decimal("0")
    return_rate_pct: Decimal
    time_horizon_years: int


class ScenarioCompareRequest(BaseModel):
    """Two explicit plans, or a template id whose plans are used instead."""
    region: str | None = Field(None, description="Used for the currency symbol in the summary")
    name: str | None = Field(None, description="Optional label for the comparison")
    template_id: str | None = None
    scenario_a: GrowthScenarioSchema | None = None
    scenario_b: GrowthScenarioSchema | None = None


# ---- Response schemas ----

class ValidationIssueResponse(BaseModel):
    field: str
    message: str
    severity: str


class IssuesResponse(BaseModel):
    issues: list[ValidationIssueResponse]


class PurchaseFeesResponse(BaseModel):
    transfer_duty: Decimal
    bond_registration: Decimal
    deeds_office: Decimal
    other: Decimal
    total: Decimal


class BuyYearResponse(BaseModel):
    year: int
    home_value: Decimal
    mortgage_balance: Decimal
    equity: Decimal
    mortgage_payment: Decimal
    principal_paid: Decimal
    interest_paid: Decimal
    property_tax: Decimal
    insurance: Decimal
    hoa: Decimal
    maintenance: Decimal
    one_time_costs: Decimal
    total_cost: Decimal
    cumulative_cost: Decimal
    cumulative_cost_excluding_principal: Decimal
    monthly_contribution: Decimal
    investment_balance: Decimal
    net_worth: Decimal


class RentYearResponse(BaseModel):
    year: int
    monthly_rent: Decimal
    annual_rent: Decimal
    renters_insurance: Decimal
    total_cost: Decimal
    cumulative_cost: Decimal
    monthly_contribution: Decimal
    investment_balance: Decimal
    net_worth: Decimal


class ModelingOptionsResponse(BaseModel):
    model_config = ConfigDict(protected_namespaces=())

    include_closing_costs_in_renter_initial_investment: bool
    model_buyer_side_investment: bool


class CompareResponse(BaseModel):
    region: str
    currency_symbol: str
    buy_breakdown: list[BuyYearResponse]
    rent_breakdown: list[RentYearResponse]
    break_even_year: int | None
    final_buy_net_worth: Decimal
    final_rent_net_worth: Decimal
    difference: Decimal
    better_choice: str
    summary: str
    closing_costs: Decimal
    purchase_fees: PurchaseFeesResponse | None = None
    options: ModelingOptionsResponse
    warnings: list[ValidationIssueResponse] = []


class RegionResponse(BaseModel):
    code: str
    name: str
    currency_symbol: str
    currency_code: str
    locale: str


class RegionDefaultsResponse(BaseModel):
    region: RegionResponse
    buy: BuyInputsSchema
    rent: RentInputsSchema
    investment_return_pct: Decimal
    time_horizon_years: int
    terminology: dict[str, str]
    help_text: dict[str, str]
    typical: dict[str, Decimal] = Field(
        default_factory=dict, description="Typical market values, keyed by input field"
    )


class ScenarioTemplateResponse(BaseModel):
    id: str
    name: str
    description: str
    scenario_a: GrowthScenarioSchema
    scenario_b: GrowthScenarioSchema


class GrowthYearResponse(BaseModel):
    year: int
    total_value: Decimal
    total_contributed: Decimal
    total_growth: Decimal


class ScenarioCompareResponse(BaseModel):
    name: str | None
    currency_symbol: str
    scenario_a: list[GrowthYearResponse]
    scenario_b: list[GrowthYearResponse]
    difference: Decimal
    summary: str
