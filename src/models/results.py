from dataclasses import dataclass, field
from decimal import Decimal
from enum import Enum

from src.models.inputs import ModelingOptions


class Choice(Enum):
    BUY = "buy"
    RENT = "rent"


class Severity(Enum):
    ERROR = "error"
    WARNING = "warning"


@dataclass(frozen=True)
class ValidationIssue:
    field: str
    message: str
    severity: Severity = Severity.ERROR


@dataclass
class PurchaseFees:
    """One-time government/legal charges on purchase, whole currency units."""
    transfer_duty: Decimal = Decimal("0")
    bond_registration: Decimal = Decimal("0")
    deeds_office: Decimal = Decimal("0")
    other: Decimal = Decimal("0")  # Flat-percentage closing costs

    @property
    def total(self) -> Decimal:
        return self.transfer_duty + self.bond_registration + self.deeds_office + self.other


@dataclass
class BuyYearlyBreakdown:
    year: int

    # Asset
    home_value: Decimal = Decimal("0")
    mortgage_balance: Decimal = Decimal("0")
    equity: Decimal = Decimal("0")  # Value - balance

    # Debt service
    mortgage_payment: Decimal = Decimal("0")
    principal_paid: Decimal = Decimal("0")
    interest_paid: Decimal = Decimal("0")

    # Ownership costs
    property_tax: Decimal = Decimal("0")
    insurance: Decimal = Decimal("0")
    hoa: Decimal = Decimal("0")
    maintenance: Decimal = Decimal("0")
    one_time_costs: Decimal = Decimal("0")  # Down payment + closing costs (year 0)

    total_cost: Decimal = Decimal("0")
    cumulative_cost: Decimal = Decimal("0")  # All cash paid out
    cumulative_cost_excluding_principal: Decimal = Decimal("0")

    # Savings invested once ongoing costs drop below rent
    monthly_contribution: Decimal = Decimal("0")
    investment_balance: Decimal = Decimal("0")
    net_worth: Decimal = Decimal("0")  # Equity + investment balance


@dataclass
class RentYearlyBreakdown:
    year: int
    monthly_rent: Decimal = Decimal("0")
    annual_rent: Decimal = Decimal("0")
    renters_insurance: Decimal = Decimal("0")
    total_cost: Decimal = Decimal("0")
    cumulative_cost: Decimal = Decimal("0")

    monthly_contribution: Decimal = Decimal("0")
    investment_balance: Decimal = Decimal("0")
    net_worth: Decimal = Decimal("0")  # Investment balance


@dataclass
class BuyVsRentResults:
    buy_breakdown: list[BuyYearlyBreakdown] = field(default_factory=list)
    rent_breakdown: list[RentYearlyBreakdown] = field(default_factory=list)

    break_even_year: int | None = None
    final_buy_net_worth: Decimal = Decimal("0")
    final_rent_net_worth: Decimal = Decimal("0")
    difference: Decimal = Decimal("0")  # Rent - buy; positive favours renting
    better_choice: Choice = Choice.BUY
    summary: str = ""

    # What the run actually applied
    closing_costs: Decimal = Decimal("0")
    purchase_fees: PurchaseFees | None = None
    options: ModelingOptions = field(default_factory=ModelingOptions)


@dataclass
class GrowthYear:
    year: int
    total_value: Decimal = Decimal("0")
    total_contributed: Decimal = Decimal("0")
    total_growth: Decimal = Decimal("0")


@dataclass
class ScenarioComparison:
    scenario_a: list[GrowthYear] = field(default_factory=list)
    scenario_b: list[GrowthYear] = field(default_factory=list)
    difference: Decimal = Decimal("0")  # B - A
    summary: str = ""
