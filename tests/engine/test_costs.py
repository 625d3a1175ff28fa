from decimal import Decimal

from src.engine.amortization import amortization_schedule, loan_year_totals, monthly_payment
from src.engine.costs import (
    compute_buying_costs,
    compute_renting_costs,
    home_value,
    retire_mortgage,
)
from src.models.inputs import BuyScenarioInputs, Flat, RateOfValue, RentScenarioInputs


def _buy(**overrides) -> BuyScenarioInputs:
    fields = dict(
        home_price=Decimal("400000"),
        down_payment_pct=Decimal("20"),
        interest_rate_pct=Decimal("7"),
        loan_term_years=30,
        property_tax_rate_pct=Decimal("1.2"),
        insurance=RateOfValue(Decimal("0.35")),
        hoa_monthly=Decimal("100"),
        maintenance_rate_pct=Decimal("1"),
        appreciation_rate_pct=Decimal("3.5"),
    )
    fields.update(overrides)
    return BuyScenarioInputs(**fields)


class TestPurchaseYear:
    def test_only_one_time_costs(self):
        costs = compute_buying_costs(_buy(), 0, Decimal("400000"), Decimal("12000"))
        assert costs.down_payment == Decimal("80000.00")
        assert costs.closing_costs == Decimal("12000.00")
        assert costs.mortgage_payment == Decimal("0")
        assert costs.property_tax == Decimal("0")
        assert costs.maintenance == Decimal("0")
        assert costs.total_cost == Decimal("92000.00")
        assert costs.one_time_costs == Decimal("92000.00")

    def test_excluding_principal_equals_total(self):
        costs = compute_buying_costs(_buy(), 0, Decimal("400000"), Decimal("12000"))
        assert costs.total_cost_excluding_principal == costs.total_cost


class TestOwnershipYear:
    def test_itemized_costs(self):
        costs = compute_buying_costs(_buy(), 1, Decimal("400000"))
        assert costs.property_tax == Decimal("4800.00")
        assert costs.insurance == Decimal("1400.00")
        assert costs.hoa == Decimal("1200.00")
        assert costs.maintenance == Decimal("4000.00")
        assert costs.down_payment == Decimal("0")
        assert costs.closing_costs == Decimal("0")

    def test_mortgage_is_twelve_payments(self):
        costs = compute_buying_costs(_buy(), 1, Decimal("400000"))
        pmt = monthly_payment(Decimal("320000.00"), Decimal("7"), 30)
        assert costs.mortgage_payment == pmt * 12

    def test_total_and_principal_split(self):
        costs = compute_buying_costs(_buy(), 3, Decimal("428000"))
        assert costs.total_cost == (
            costs.mortgage_payment + costs.property_tax + costs.insurance
            + costs.hoa + costs.maintenance
        )
        assert costs.total_cost_excluding_principal == costs.total_cost - costs.principal_paid

    def test_principal_grows_each_year(self):
        buy = _buy()
        schedule = amortization_schedule(buy.loan_amount, buy.interest_rate_pct, buy.loan_term_years)
        first = compute_buying_costs(buy, 1, Decimal("400000"), schedule=schedule)
        tenth = compute_buying_costs(buy, 10, Decimal("400000"), schedule=schedule)
        assert tenth.principal_paid > first.principal_paid
        assert tenth.interest_paid < first.interest_paid

    def test_flat_insurance(self):
        buy = _buy(insurance=Flat(Decimal("1800")))
        costs = compute_buying_costs(buy, 5, Decimal("475000"))
        assert costs.insurance == Decimal("1800.00")

    def test_rate_insurance_tracks_value(self):
        costs = compute_buying_costs(_buy(), 5, Decimal("500000"))
        assert costs.insurance == Decimal("1750.00")

    def test_past_term_keeps_payment(self):
        buy = _buy(loan_term_years=15)
        costs = compute_buying_costs(buy, 16, Decimal("600000"))
        assert costs.principal_paid == Decimal("0")
        assert costs.interest_paid == Decimal("0")
        assert costs.mortgage_payment > Decimal("0")

    def test_final_loan_year_uses_closing_payment(self):
        buy = _buy()
        schedule = amortization_schedule(buy.loan_amount, buy.interest_rate_pct, buy.loan_term_years)
        costs = compute_buying_costs(buy, 30, Decimal("1100000"), schedule=schedule)
        assert costs.mortgage_payment == loan_year_totals(schedule, 30).payments

    def test_int_amounts(self):
        buy = _buy(home_price=400000, hoa_monthly=150, insurance=Flat(1800), property_tax_rate_pct=1)
        costs = compute_buying_costs(buy, 1, Decimal("400000"), 12000)
        assert costs.hoa == Decimal("1800.00")
        assert costs.insurance == Decimal("1800.00")
        assert costs.property_tax == Decimal("4000.00")


class TestRetireMortgage:
    def test_only_ownership_costs_remain(self):
        costs = retire_mortgage(compute_buying_costs(_buy(), 31, Decimal("400000")))
        assert costs.mortgage_payment == Decimal("0")
        assert costs.total_cost == Decimal("11400.00")
        assert costs.total_cost_excluding_principal == Decimal("11400.00")


class TestRentingCosts:
    def test_base_year(self):
        costs = compute_renting_costs(RentScenarioInputs(Decimal("2000")), 0)
        assert costs.monthly_rent == Decimal("2000.00")

    def test_first_year_includes_increase(self):
        rent = RentScenarioInputs(Decimal("2000"), Decimal("3"), Decimal("200"))
        costs = compute_renting_costs(rent, 1)
        assert costs.monthly_rent == Decimal("2060.00")
        assert costs.annual_rent == Decimal("24720.00")
        assert costs.renters_insurance == Decimal("200.00")
        assert costs.total_cost == Decimal("24920.00")

    def test_compounds(self):
        rent = RentScenarioInputs(Decimal("2000"), Decimal("3"))
        costs = compute_renting_costs(rent, 2)
        assert costs.monthly_rent == Decimal("2121.80")
        assert costs.annual_rent == Decimal("25461.60")

    def test_no_increase(self):
        rent = RentScenarioInputs(Decimal("16500"), Decimal("0"))
        assert compute_renting_costs(rent, 10).monthly_rent == Decimal("16500.00")


class TestHomeValue:
    def test_appreciation(self):
        buy = _buy()
        assert home_value(buy, 0) == Decimal("400000.00")
        assert home_value(buy, 1) == Decimal("414000.00")
        assert home_value(buy, 2) == Decimal("428490.00")

    def test_depreciation(self):
        buy = _buy(appreciation_rate_pct=Decimal("-10"))
        assert home_value(buy, 1) == Decimal("360000.00")
