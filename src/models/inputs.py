from dataclasses import dataclass, field
from decimal import Decimal, ROUND_HALF_UP

TWO_PLACES = Decimal("0.01")


def _promote_ints(obj, *names: str) -> None:
    """Turn int amounts and rates into Decimal so arithmetic never drops to float."""
    for name in names:
        value = getattr(obj, name)
        if isinstance(value, int) and not isinstance(value, bool):
            object.__setattr__(obj, name, Decimal(value))


@dataclass(frozen=True)
class Flat:
    """A flat currency amount, independent of the home's value."""
    amount: Decimal

    def __post_init__(self) -> None:
        _promote_ints(self, "amount")

    def resolve(self, reference_value: Decimal) -> Decimal:
        return Decimal(self.amount).quantize(TWO_PLACES, ROUND_HALF_UP)


@dataclass(frozen=True)
class RateOfValue:
    """A percentage of a reference value (e.g. Decimal("0.5") for 0.5%)."""
    percent: Decimal

    def __post_init__(self) -> None:
        _promote_ints(self, "percent")

    def resolve(self, reference_value: Decimal) -> Decimal:
        return (Decimal(reference_value) * self.percent / 100).quantize(
            TWO_PLACES, ROUND_HALF_UP
        )


CostBasis = Flat | RateOfValue


@dataclass(frozen=True)
class BuyScenarioInputs:
    home_price: Decimal
    down_payment_pct: Decimal = Decimal("20")
    interest_rate_pct: Decimal = Decimal("6.75")  # Annual
    loan_term_years: int = 30

    # Ongoing ownership costs
    property_tax_rate_pct: Decimal = Decimal("0")  # % of current home value
    insurance: CostBasis = field(default_factory=lambda: RateOfValue(Decimal("0")))
    hoa_monthly: Decimal = Decimal("0")  # HOA / body corporate levy
    maintenance_rate_pct: Decimal = Decimal("1")  # % of current home value

    appreciation_rate_pct: Decimal = Decimal("3")

    # None = derive from the jurisdiction's purchase fee model
    closing_costs: CostBasis | None = None
    selling_costs_pct: Decimal = Decimal("6")  # Not used in net worth

    def __post_init__(self) -> None:
        _promote_ints(
            self, "home_price", "down_payment_pct", "interest_rate_pct",
            "property_tax_rate_pct", "hoa_monthly", "maintenance_rate_pct",
            "appreciation_rate_pct", "selling_costs_pct",
        )

    @property
    def down_payment(self) -> Decimal:
        return (self.home_price * self.down_payment_pct / 100).quantize(
            TWO_PLACES, ROUND_HALF_UP
        )

    @property
    def loan_amount(self) -> Decimal:
        return self.home_price - self.down_payment


@dataclass(frozen=True)
class RentScenarioInputs:
    monthly_rent: Decimal
    rent_increase_rate_pct: Decimal = Decimal("3")
    renters_insurance: Decimal = Decimal("0")  # Annual

    def __post_init__(self) -> None:
        _promote_ints(self, "monthly_rent", "rent_increase_rate_pct", "renters_insurance")


@dataclass(frozen=True)
class ModelingOptions:
    """Modeling choices where reasonable reference calculations disagree.

    include_closing_costs_in_renter_initial_investment: when True the renter
        starts with down payment + closing costs invested, otherwise only the
        down payment (closing costs are treated as sunk purchase costs).
    model_buyer_side_investment: when True the buyer invests the monthly
        difference in any year their ongoing costs fall below rent (typically
        after the mortgage is paid off).
    """
    include_closing_costs_in_renter_initial_investment: bool = False
    model_buyer_side_investment: bool = True


@dataclass(frozen=True)
class BuyVsRentInputs:
    buy: BuyScenarioInputs
    rent: RentScenarioInputs
    investment_return_pct: Decimal = Decimal("10")
    time_horizon_years: int = 30
    options: ModelingOptions = field(default_factory=ModelingOptions)

    def __post_init__(self) -> None:
        _promote_ints(self, "investment_return_pct")


@dataclass(frozen=True)
class GrowthScenario:
    """A simple savings plan: lump sum plus monthly contributions."""
    label: str
    initial_amount: Decimal
    monthly_amount: Decimal
    return_rate_pct: Decimal
    time_horizon_years: int

    def __post_init__(self) -> None:
        _promote_ints(self, "initial_amount", "monthly_amount", "return_rate_pct")
