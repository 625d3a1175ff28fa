"""Buy vs rent orchestrator: composes the engine sub-modules into a full comparison.

Pure computation. No I/O. Inputs + RegionalConfig in, BuyVsRentResults out.
"""

import logging
from decimal import Decimal, ROUND_HALF_UP

from src.engine.amortization import amortization_schedule
from src.engine.costs import (
    compute_buying_costs,
    compute_renting_costs,
    home_value,
    retire_mortgage,
)
from src.engine.fees import closing_costs as resolve_closing_costs
from src.engine.formatting import format_currency
from src.engine.investment import future_value
from src.engine.validation import has_errors, validate
from src.models.inputs import BuyVsRentInputs
from src.models.region import RegionalConfig
from src.models.results import (
    BuyVsRentResults,
    BuyYearlyBreakdown,
    Choice,
    RentYearlyBreakdown,
    Severity,
    ValidationIssue,
)

logger = logging.getLogger(__name__)

TWO_PLACES = Decimal("0.01")
ZERO = Decimal("0")


class InvalidInputError(ValueError):
    """Inputs failed hard validation; the comparison was not run."""

    def __init__(self, issues: list[ValidationIssue]):
        self.issues = [i for i in issues if i.severity is Severity.ERROR]
        detail = "; ".join(f"{i.field}: {i.message}" for i in self.issues)
        super().__init__(f"Invalid buy vs rent inputs: {detail}")


def _cents(value: Decimal) -> Decimal:
    return Decimal(value).quantize(TWO_PLACES, ROUND_HALF_UP)


def _sign(value: Decimal) -> int:
    return (value > 0) - (value < 0)


def find_break_even_year(
    buy_net_worths: list[Decimal],
    rent_net_worths: list[Decimal],
) -> int | None:
    """Last year at which the two net-worth series cross, or None.

    A year where both are exactly equal is a touch, not a side. When the
    leader changes, the crossing is dated to the first year of the touch
    (if the series met exactly) or to the year the lead flipped.
    """
    break_even: int | None = None
    leader = 0
    touch_year: int | None = None

    for year, (buy_nw, rent_nw) in enumerate(zip(buy_net_worths, rent_net_worths)):
        sign = _sign(buy_nw - rent_nw)
        if sign == 0:
            if touch_year is None:
                touch_year = year
            continue
        if leader != 0 and sign != leader:
            break_even = touch_year if touch_year is not None else year
        leader = sign
        touch_year = None

    return break_even


def _summary(
    better: Choice, difference: Decimal, horizon: int, region: RegionalConfig
) -> str:
    amount = format_currency(abs(difference), region.currency.symbol)
    if better is Choice.RENT:
        return (
            f"After {horizon} years, renting and investing the difference would leave "
            f"you {amount} better off than buying."
        )
    return f"After {horizon} years, buying would leave you {amount} better off than renting."


def compare_buy_vs_rent(inputs: BuyVsRentInputs, region: RegionalConfig) -> BuyVsRentResults:
    """Run the full year-by-year buy vs rent comparison.

    Year 0 is the moment of purchase; years 1..N are full years. Returns
    BuyVsRentResults with N+1 aligned rows per side, break-even year and summary.

    Raises InvalidInputError if the inputs fail hard validation for `region`.
    """
    issues = validate(inputs, region)
    if has_errors(issues):
        raise InvalidInputError(issues)

    buy = inputs.buy
    rent = inputs.rent
    options = inputs.options
    horizon = inputs.time_horizon_years

    closing, purchase_fees = resolve_closing_costs(buy, region.fee_model)
    schedule = amortization_schedule(buy.loan_amount, buy.interest_rate_pct, buy.loan_term_years)

    renter_initial = buy.down_payment
    if options.include_closing_costs_in_renter_initial_investment:
        renter_initial += closing

    # Year 0: purchase moment
    purchase = compute_buying_costs(buy, 0, buy.home_price, closing, schedule)
    buy_cumulative = purchase.total_cost
    buy_cumulative_excl_principal = purchase.total_cost_excluding_principal
    rent_cumulative = ZERO
    buyer_balance = ZERO
    renter_balance = _cents(renter_initial)

    buy_rows = [BuyYearlyBreakdown(
        year=0,
        home_value=buy.home_price,
        mortgage_balance=buy.loan_amount,
        equity=buy.down_payment,
        one_time_costs=purchase.one_time_costs,
        total_cost=purchase.total_cost,
        cumulative_cost=buy_cumulative,
        cumulative_cost_excluding_principal=buy_cumulative_excl_principal,
        investment_balance=buyer_balance,
        net_worth=buy.down_payment + buyer_balance,
    )]
    rent_rows = [RentYearlyBreakdown(
        year=0,
        monthly_rent=_cents(rent.monthly_rent),
        investment_balance=renter_balance,
        net_worth=renter_balance,
    )]

    for year in range(1, horizon + 1):
        current_value = home_value(buy, year)

        buy_costs = compute_buying_costs(buy, year, current_value, closing, schedule)
        if year > buy.loan_term_years:
            buy_costs = retire_mortgage(buy_costs)

        balance = schedule.balance_after(year * 12) if year <= buy.loan_term_years else ZERO
        equity = current_value - balance

        rent_costs = compute_renting_costs(rent, year)

        # Compare on a cost-excluding-principal basis; principal builds equity
        buy_monthly = buy_costs.total_cost_excluding_principal / 12
        rent_monthly = rent_costs.total_cost / 12
        renter_contribution = _cents(max(ZERO, buy_monthly - rent_monthly))
        buyer_contribution = ZERO
        if options.model_buyer_side_investment:
            buyer_contribution = _cents(max(ZERO, rent_monthly - buy_monthly))

        renter_balance = _cents(future_value(
            renter_balance, renter_contribution, inputs.investment_return_pct, 1
        ))
        buyer_balance = _cents(future_value(
            buyer_balance, buyer_contribution, inputs.investment_return_pct, 1
        ))

        buy_cumulative += buy_costs.total_cost
        buy_cumulative_excl_principal += buy_costs.total_cost_excluding_principal
        rent_cumulative += rent_costs.total_cost

        buy_rows.append(BuyYearlyBreakdown(
            year=year,
            home_value=current_value,
            mortgage_balance=balance,
            equity=equity,
            mortgage_payment=buy_costs.mortgage_payment,
            principal_paid=buy_costs.principal_paid,
            interest_paid=buy_costs.interest_paid,
            property_tax=buy_costs.property_tax,
            insurance=buy_costs.insurance,
            hoa=buy_costs.hoa,
            maintenance=buy_costs.maintenance,
            total_cost=buy_costs.total_cost,
            cumulative_cost=buy_cumulative,
            cumulative_cost_excluding_principal=buy_cumulative_excl_principal,
            monthly_contribution=buyer_contribution,
            investment_balance=buyer_balance,
            net_worth=equity + buyer_balance,
        ))
        rent_rows.append(RentYearlyBreakdown(
            year=year,
            monthly_rent=rent_costs.monthly_rent,
            annual_rent=rent_costs.annual_rent,
            renters_insurance=rent_costs.renters_insurance,
            total_cost=rent_costs.total_cost,
            cumulative_cost=rent_cumulative,
            monthly_contribution=renter_contribution,
            investment_balance=renter_balance,
            net_worth=renter_balance,
        ))

    break_even = find_break_even_year(
        [row.net_worth for row in buy_rows],
        [row.net_worth for row in rent_rows],
    )

    final_buy = buy_rows[-1].net_worth
    final_rent = rent_rows[-1].net_worth
    difference = final_rent - final_buy
    better = Choice.RENT if difference > 0 else Choice.BUY

    logger.debug(
        "Buy vs rent over %d years: buy=%s rent=%s break_even=%s",
        horizon, final_buy, final_rent, break_even,
    )

    return BuyVsRentResults(
        buy_breakdown=buy_rows,
        rent_breakdown=rent_rows,
        break_even_year=break_even,
        final_buy_net_worth=final_buy,
        final_rent_net_worth=final_rent,
        difference=difference,
        better_choice=better,
        summary=_summary(better, difference, horizon, region),
        closing_costs=closing,
        purchase_fees=purchase_fees,
        options=options,
    )
