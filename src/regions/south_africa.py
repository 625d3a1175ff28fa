"""South Africa: progressive transfer duty, bond registration and deeds office fees.

Defaults reflect 2024/25 metro conditions: prime ~11.75%, JSE ~12% long-run,
property appreciation ~5-6%.
"""

from decimal import Decimal

from src.engine.fees import FeeBracket, FeeSchedule, ProgressivePurchaseFees
from src.models.inputs import (
    BuyScenarioInputs,
    BuyVsRentInputs,
    RateOfValue,
    RentScenarioInputs,
)
from src.models.region import CurrencyFormat, FieldBounds, RegionalConfig, ValidationRules

TRANSFER_DUTY = FeeSchedule(
    name="Transfer duty",
    brackets=(
        FeeBracket(Decimal("1100000"), Decimal("0")),
        FeeBracket(Decimal("1512500"), Decimal("0.03")),
        FeeBracket(Decimal("2117500"), Decimal("0.06"), Decimal("12375")),
        FeeBracket(Decimal("2722500"), Decimal("0.08"), Decimal("48675")),
        FeeBracket(Decimal("12100000"), Decimal("0.11"), Decimal("97075")),
        FeeBracket(None, Decimal("0.13"), Decimal("1128600")),
    ),
)

# Attorney tariff approximation, charged on the bond (loan) amount
BOND_REGISTRATION = FeeSchedule(
    name="Bond registration",
    brackets=(
        FeeBracket(Decimal("600000"), Decimal("0.015")),
        FeeBracket(Decimal("1500000"), Decimal("0.008"), Decimal("9000")),
        FeeBracket(None, Decimal("0.004"), Decimal("16200")),
    ),
)

DEEDS_OFFICE = FeeSchedule(
    name="Deeds office",
    brackets=(
        FeeBracket(Decimal("600000"), Decimal("0.01")),
        FeeBracket(Decimal("1500000"), Decimal("0.005"), Decimal("6000")),
        FeeBracket(None, Decimal("0.0025"), Decimal("10500")),
    ),
)

DEFAULTS = BuyVsRentInputs(
    buy=BuyScenarioInputs(
        home_price=Decimal("2500000"),
        down_payment_pct=Decimal("10"),
        interest_rate_pct=Decimal("11.75"),
        loan_term_years=20,
        property_tax_rate_pct=Decimal("0.8"),
        insurance=RateOfValue(Decimal("0.5")),
        hoa_monthly=Decimal("0"),
        maintenance_rate_pct=Decimal("1"),
        appreciation_rate_pct=Decimal("5.5"),
        selling_costs_pct=Decimal("7.5"),
    ),
    rent=RentScenarioInputs(
        monthly_rent=Decimal("16500"),
        rent_increase_rate_pct=Decimal("6"),
        renters_insurance=Decimal("0"),
    ),
    investment_return_pct=Decimal("12"),
    time_horizon_years=20,
)

VALIDATION = ValidationRules(
    home_price=FieldBounds(Decimal("100000"), Decimal("100000000")),
    interest_rate_pct=FieldBounds(
        Decimal("5"), Decimal("20"), warn_high=Decimal("15"), typical=Decimal("11.75")
    ),
    property_tax_rate_pct=FieldBounds(Decimal("0"), Decimal("3"), typical=Decimal("0.8")),
    hoa_monthly=FieldBounds(Decimal("0"), Decimal("10000")),  # R120k/year in levies
    appreciation_rate_pct=FieldBounds(
        Decimal("-20"), Decimal("20"),
        warn_low=Decimal("0"), warn_high=Decimal("10"), typical=Decimal("5.5"),
    ),
    rent_increase_rate_pct=FieldBounds(
        Decimal("0"), Decimal("20"), warn_high=Decimal("10"), typical=Decimal("6")
    ),
    investment_return_pct=FieldBounds(
        Decimal("-50"), Decimal("50"),
        warn_low=Decimal("0"), warn_high=Decimal("15"), typical=Decimal("12"),
    ),
)

SOUTH_AFRICA = RegionalConfig(
    code="ZA",
    name="South Africa",
    currency=CurrencyFormat(symbol="R", code="ZAR", locale="en-ZA"),
    defaults=DEFAULTS,
    validation=VALIDATION,
    fee_model=ProgressivePurchaseFees(
        transfer_duty=TRANSFER_DUTY,
        bond_registration=BOND_REGISTRATION,
        deeds_office=DEEDS_OFFICE,
    ),
    terminology={
        "property_tax": "Municipal Rates",
        "property_tax_rate": "Municipal Rates (%)",
        "hoa_fees": "Levies (Body Corporate)",
        "closing_costs": "Transfer & Bond Fees",
        "selling_costs": "Estate Agent Commission",
        "selling_costs_pct": "Agent Commission (%)",
        "home_insurance": "Home Insurance",
        "renters_insurance": "Renters Insurance",
        "down_payment": "Deposit",
        "mortgage": "Bond",
        "rent": "Rent",
    },
    help_text={
        "interest_rate_pct": (
            "Prime lending rate is ~11.75%. Banks typically offer prime or prime + 0.5-2%."
        ),
        "property_tax_rate_pct": (
            "Municipal rates vary by municipality, typically 0.5-1.5% of the municipal "
            "valuation per year."
        ),
        "appreciation_rate_pct": (
            "Property appreciation has averaged 5-6% but varies significantly by province."
        ),
        "investment_return_pct": (
            "The JSE All Share Index has returned ~12% historically. Inflation runs ~5%."
        ),
        "closing_costs": (
            "Transfer duty is 0% up to R1.1M, then 3%, 6%, 8%, 11% and 13% in brackets. "
            "Bond registration and deeds office fees are added on top."
        ),
        "selling_costs_pct": "Estate agent commission is typically 7.5% (6.5% + VAT).",
        "maintenance_rate_pct": (
            "Budget about 1% of property value per year. Older homes usually need more."
        ),
    },
)
