"""Compound growth of invested savings: lump sum plus monthly contributions.

Pure functions. No I/O.
"""

from decimal import Decimal, ROUND_HALF_UP

from src.engine.formatting import format_currency
from src.models.inputs import GrowthScenario
from src.models.results import GrowthYear, ScenarioComparison

TWO_PLACES = Decimal("0.01")
ZERO = Decimal("0")


def future_value(
    principal: Decimal,
    monthly_contribution: Decimal,
    annual_rate_pct: Decimal,
    years: int,
) -> Decimal:
    """Future value with monthly compounding and end-of-month contributions.

    FV = P(1+r)^n + PMT * [((1+r)^n - 1) / r], r = annual/12/100, n = years*12.
    Unrounded; callers round at the point they store the value.
    """
    r = annual_rate_pct / 12 / 100
    n = years * 12
    growth = (1 + r) ** n

    fv_principal = principal * growth
    if r == 0:
        fv_contributions = monthly_contribution * n
    else:
        fv_contributions = monthly_contribution * (growth - 1) / r
    return fv_principal + fv_contributions


def growth_breakdown(scenario: GrowthScenario) -> list[GrowthYear]:
    """Year-end value, contributions and growth for years 1..horizon."""
    breakdown: list[GrowthYear] = []
    for year in range(1, scenario.time_horizon_years + 1):
        value = future_value(
            scenario.initial_amount,
            scenario.monthly_amount,
            scenario.return_rate_pct,
            year,
        ).quantize(TWO_PLACES, ROUND_HALF_UP)
        contributed = (scenario.initial_amount + scenario.monthly_amount * 12 * year).quantize(
            TWO_PLACES, ROUND_HALF_UP
        )
        breakdown.append(GrowthYear(
            year=year,
            total_value=value,
            total_contributed=contributed,
            total_growth=value - contributed,
        ))
    return breakdown


def compare_scenarios(
    scenario_a: GrowthScenario,
    scenario_b: GrowthScenario,
    currency_symbol: str = "$",
) -> ScenarioComparison:
    """Compare two savings plans over the same horizon.

    difference = final value of B - final value of A.
    """
    breakdown_a = growth_breakdown(scenario_a)
    breakdown_b = growth_breakdown(scenario_b)

    final_a = breakdown_a[-1].total_value if breakdown_a else ZERO
    final_b = breakdown_b[-1].total_value if breakdown_b else ZERO
    difference = final_b - final_a

    better, worse = (scenario_b, scenario_a) if difference > 0 else (scenario_a, scenario_b)
    summary = (
        f'If you choose "{better.label}" instead of "{worse.label}", you\'ll have '
        f"{format_currency(abs(difference), currency_symbol)} more after "
        f"{scenario_a.time_horizon_years} years."
    )

    return ScenarioComparison(
        scenario_a=breakdown_a,
        scenario_b=breakdown_b,
        difference=difference,
        summary=summary,
    )
