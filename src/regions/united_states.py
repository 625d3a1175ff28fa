"""United States: closing costs as a flat percentage of the purchase price."""

from decimal import Decimal

from src.engine.fees import PercentagePurchaseFees
from src.models.inputs import (
    BuyScenarioInputs,
    BuyVsRentInputs,
    RateOfValue,
    RentScenarioInputs,
)
from src.models.region import CurrencyFormat, FieldBounds, RegionalConfig, ValidationRules

CLOSING_COSTS_PCT = Decimal("3")

DEFAULTS = BuyVsRentInputs(
    buy=BuyScenarioInputs(
        home_price=Decimal("400000"),
        down_payment_pct=Decimal("20"),
        interest_rate_pct=Decimal("6.75"),
        loan_term_years=30,
        property_tax_rate_pct=Decimal("1.2"),
        insurance=RateOfValue(Decimal("0.35")),
        hoa_monthly=Decimal("0"),
        maintenance_rate_pct=Decimal("1"),
        appreciation_rate_pct=Decimal("3.5"),
        selling_costs_pct=Decimal("6"),
    ),
    rent=RentScenarioInputs(
        monthly_rent=Decimal("2000"),
        rent_increase_rate_pct=Decimal("3"),
        renters_insurance=Decimal("200"),
    ),
    investment_return_pct=Decimal("10"),
    time_horizon_years=30,
)

VALIDATION = ValidationRules(
    home_price=FieldBounds(Decimal("10000"), Decimal("50000000")),
    interest_rate_pct=FieldBounds(
        Decimal("0"), Decimal("20"), warn_high=Decimal("10"), typical=Decimal("6.75")
    ),
    property_tax_rate_pct=FieldBounds(Decimal("0"), Decimal("10"), typical=Decimal("1.2")),
    appreciation_rate_pct=FieldBounds(
        Decimal("-20"), Decimal("20"),
        warn_low=Decimal("-5"), warn_high=Decimal("10"), typical=Decimal("3.5"),
    ),
    investment_return_pct=FieldBounds(
        Decimal("-50"), Decimal("50"),
        warn_low=Decimal("0"), warn_high=Decimal("15"), typical=Decimal("10"),
    ),
)

UNITED_STATES = RegionalConfig(
    code="US",
    name="United States",
    currency=CurrencyFormat(symbol="$", code="USD", locale="en-US"),
    defaults=DEFAULTS,
    validation=VALIDATION,
    fee_model=PercentagePurchaseFees(CLOSING_COSTS_PCT),
    terminology={
        "property_tax": "Property Tax",
        "property_tax_rate": "Property Tax Rate (%)",
        "hoa_fees": "HOA Fees",
        "closing_costs": "Closing Costs",
        "selling_costs": "Realtor Fees & Costs",
        "selling_costs_pct": "Selling Costs (%)",
        "home_insurance": "Home Insurance",
        "renters_insurance": "Renters Insurance",
        "down_payment": "Down Payment",
        "mortgage": "Mortgage",
        "rent": "Rent",
    },
    help_text={
        "interest_rate_pct": (
            "30-year fixed rates are ~6.5-7.5% and vary with credit score and down payment."
        ),
        "property_tax_rate_pct": (
            "Property tax varies widely by state, from ~0.3% (HI) to ~2.5% (NJ)."
        ),
        "appreciation_rate_pct": "US home prices have appreciated ~3-4% a year on average.",
        "investment_return_pct": "The S&P 500 has returned ~10% a year including dividends.",
        "closing_costs": (
            "Typically 2-5% of the price: origination, appraisal, title insurance, inspections."
        ),
        "selling_costs_pct": "Realtor commission is typically 5-6%, split between agents.",
        "maintenance_rate_pct": "Budget about 1% of home value per year.",
    },
)
