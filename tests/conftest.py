"""Canonical test fixtures used across all engine tests.

Fixture: R2.5M South African home, 10% deposit, 11.75% over 20 years,
R16,500/month rent growing 6%, 12% investment return, 20-year horizon.
"""

import pytest
from decimal import Decimal

from src.models.inputs import (
    BuyScenarioInputs,
    BuyVsRentInputs,
    RateOfValue,
    RentScenarioInputs,
)
from src.models.region import RegionalConfig
from src.regions.south_africa import SOUTH_AFRICA
from src.regions.united_states import UNITED_STATES


@pytest.fixture
def za() -> RegionalConfig:
    return SOUTH_AFRICA


@pytest.fixture
def us() -> RegionalConfig:
    return UNITED_STATES


@pytest.fixture
def canonical_inputs() -> BuyVsRentInputs:
    """R2.5M purchase; closing costs from the transfer duty / bond / deeds tables."""
    return BuyVsRentInputs(
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


@pytest.fixture
def us_inputs() -> BuyVsRentInputs:
    """$400K purchase, 20% down, 6.75% over 30 years, $2,000 rent."""
    return BuyVsRentInputs(
        buy=BuyScenarioInputs(
            home_price=Decimal("400000"),
            down_payment_pct=Decimal("20"),
            interest_rate_pct=Decimal("6.75"),
            loan_term_years=30,
            property_tax_rate_pct=Decimal("1.2"),
            insurance=RateOfValue(Decimal("0.35")),
            maintenance_rate_pct=Decimal("1"),
            appreciation_rate_pct=Decimal("3.5"),
        ),
        rent=RentScenarioInputs(
            monthly_rent=Decimal("2000"),
            rent_increase_rate_pct=Decimal("3"),
            renters_insurance=Decimal("200"),
        ),
        investment_return_pct=Decimal("10"),
        time_horizon_years=30,
    )
