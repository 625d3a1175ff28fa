"""Yearly cost breakdowns for owning and renting.

Pure functions: Decimal in, dataclass out. No I/O.
Year 0 is the moment of purchase; year 1 is the first full year.
"""

from dataclasses import dataclass, replace
from decimal import Decimal, ROUND_HALF_UP

from src.engine.amortization import (
    AmortizationSchedule,
    amortization_schedule,
    loan_year_totals,
)
from src.models.inputs import BuyScenarioInputs, RentScenarioInputs

TWO_PLACES = Decimal("0.01")
ZERO = Decimal("0")


@dataclass(frozen=True)
class BuyingCosts:
    down_payment: Decimal
    closing_costs: Decimal
    mortgage_payment: Decimal
    principal_paid: Decimal
    interest_paid: Decimal
    property_tax: Decimal
    insurance: Decimal
    hoa: Decimal
    maintenance: Decimal
    total_cost: Decimal
    total_cost_excluding_principal: Decimal

    @property
    def one_time_costs(self) -> Decimal:
        return self.down_payment + self.closing_costs


@dataclass(frozen=True)
class RentingCosts:
    monthly_rent: Decimal
    annual_rent: Decimal
    renters_insurance: Decimal
    total_cost: Decimal


def _cents(value: Decimal) -> Decimal:
    return Decimal(value).quantize(TWO_PLACES, ROUND_HALF_UP)


def _totals(costs: BuyingCosts) -> BuyingCosts:
    total = (
        costs.down_payment
        + costs.closing_costs
        + costs.mortgage_payment
        + costs.property_tax
        + costs.insurance
        + costs.hoa
        + costs.maintenance
    )
    # Principal turns into equity, so it is not a cost when comparing with rent
    return replace(
        costs,
        total_cost=total,
        total_cost_excluding_principal=total - costs.principal_paid,
    )


def compute_buying_costs(
    buy: BuyScenarioInputs,
    year: int,
    current_home_value: Decimal,
    closing_costs: Decimal = ZERO,
    schedule: AmortizationSchedule | None = None,
) -> BuyingCosts:
    """Itemized ownership costs for a given year.

    Year 0 carries only the down payment and closing costs. From year 1 the
    mortgage payment, principal and interest are summed from that loan year's
    months of the full schedule, so the final year carries the adjusted closing
    payment. Past the schedule the payment falls back to 12x the fixed monthly
    payment; the caller retires the mortgage once the term is over.

    Args:
        buy: Purchase inputs
        year: 0 = purchase, 1.. = years of ownership
        current_home_value: Appreciated value for this year
        closing_costs: Resolved one-time closing costs (applied at year 0)
        schedule: Precomputed amortization schedule for buy.loan_amount
    """
    if year == 0:
        return _totals(BuyingCosts(
            down_payment=buy.down_payment,
            closing_costs=_cents(closing_costs),
            mortgage_payment=ZERO,
            principal_paid=ZERO,
            interest_paid=ZERO,
            property_tax=ZERO,
            insurance=ZERO,
            hoa=ZERO,
            maintenance=ZERO,
            total_cost=ZERO,
            total_cost_excluding_principal=ZERO,
        ))

    if schedule is None:
        schedule = amortization_schedule(
            buy.loan_amount, buy.interest_rate_pct, buy.loan_term_years
        )
    loan_year = loan_year_totals(schedule, year)

    return _totals(BuyingCosts(
        down_payment=ZERO,
        closing_costs=ZERO,
        mortgage_payment=_cents(loan_year.payments or schedule.monthly_payment * 12),
        principal_paid=_cents(loan_year.principal),
        interest_paid=_cents(loan_year.interest),
        property_tax=_cents(current_home_value * buy.property_tax_rate_pct / 100),
        insurance=buy.insurance.resolve(current_home_value),
        hoa=_cents(buy.hoa_monthly * 12),
        maintenance=_cents(current_home_value * buy.maintenance_rate_pct / 100),
        total_cost=ZERO,
        total_cost_excluding_principal=ZERO,
    ))


def retire_mortgage(costs: BuyingCosts) -> BuyingCosts:
    """Same year's costs with the loan paid off: no payment, principal or interest."""
    return _totals(replace(
        costs,
        mortgage_payment=ZERO,
        principal_paid=ZERO,
        interest_paid=ZERO,
    ))


def compute_renting_costs(rent: RentScenarioInputs, year: int) -> RentingCosts:
    """Renting costs for a given year; rent compounds annually from the base."""
    growth = (1 + rent.rent_increase_rate_pct / 100) ** year
    monthly = _cents(rent.monthly_rent * growth)
    annual = _cents(monthly * 12)
    insurance = _cents(rent.renters_insurance)
    return RentingCosts(
        monthly_rent=monthly,
        annual_rent=annual,
        renters_insurance=insurance,
        total_cost=annual + insurance,
    )


def home_value(buy: BuyScenarioInputs, year: int) -> Decimal:
    """Estimated home value at the end of `year` based on appreciation."""
    growth = (1 + buy.appreciation_rate_pct / 100) ** year
    return _cents(buy.home_price * growth)
