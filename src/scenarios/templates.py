"""Preset pairs of savings plans for the two-scenario growth comparison.

Amounts are illustrative and currency-neutral; the caller formats them
with the region's symbol.
"""

from dataclasses import dataclass
from decimal import Decimal

from src.models.inputs import GrowthScenario


class UnknownTemplateError(KeyError):
    def __init__(self, template_id: str):
        self.template_id = template_id
        super().__init__(f"Unknown template: {template_id!r}")


@dataclass(frozen=True)
class ScenarioTemplate:
    id: str
    name: str
    description: str
    scenario_a: GrowthScenario
    scenario_b: GrowthScenario


BUY_VS_RENT = ScenarioTemplate(
    id="buy-vs-rent",
    name="Buy vs Rent",
    description="Should you buy a home or rent and invest the difference?",
    # Down payment into the home, growing with appreciation
    scenario_a=GrowthScenario(
        label="Buy Home",
        initial_amount=Decimal("50000"),
        monthly_amount=Decimal("2000"),
        return_rate_pct=Decimal("3"),
        time_horizon_years=30,
    ),
    # Same down payment invested, plus the rent saving each month
    scenario_b=GrowthScenario(
        label="Rent & Invest",
        initial_amount=Decimal("50000"),
        monthly_amount=Decimal("500"),
        return_rate_pct=Decimal("7"),
        time_horizon_years=30,
    ),
)

CAR_VS_INVEST = ScenarioTemplate(
    id="car-vs-invest",
    name="Car vs Invest",
    description="Buy a car now or invest that money instead?",
    scenario_a=GrowthScenario(
        label="Buy Car",
        initial_amount=Decimal("30000"),
        monthly_amount=Decimal("0"),
        return_rate_pct=Decimal("-15"),  # Depreciation
        time_horizon_years=20,
    ),
    scenario_b=GrowthScenario(
        label="Invest Instead",
        initial_amount=Decimal("30000"),
        monthly_amount=Decimal("0"),
        return_rate_pct=Decimal("7"),
        time_horizon_years=20,
    ),
)

CONTRIBUTION = ScenarioTemplate(
    id="contribution",
    name="Contribution Impact",
    description="See how different monthly contributions affect your wealth",
    scenario_a=GrowthScenario(
        label="500/month",
        initial_amount=Decimal("0"),
        monthly_amount=Decimal("500"),
        return_rate_pct=Decimal("7"),
        time_horizon_years=30,
    ),
    scenario_b=GrowthScenario(
        label="1000/month",
        initial_amount=Decimal("0"),
        monthly_amount=Decimal("1000"),
        return_rate_pct=Decimal("7"),
        time_horizon_years=30,
    ),
)

TEMPLATES: dict[str, ScenarioTemplate] = {
    t.id: t for t in (BUY_VS_RENT, CAR_VS_INVEST, CONTRIBUTION)
}


def get_template(template_id: str) -> ScenarioTemplate:
    """Case-insensitive lookup by id, e.g. "car-vs-invest"."""
    try:
        return TEMPLATES[template_id.strip().lower()]
    except (KeyError, AttributeError):
        raise UnknownTemplateError(template_id) from None
