"""Input validation against jurisdiction-specific bounds.

Pure functions: inputs + RegionalConfig in, list of issues out. Never raises.
Hard bounds produce ERROR issues, soft bounds produce WARNING issues.
"""

from decimal import Decimal

from src.engine.formatting import format_currency
from src.models.inputs import (
    BuyScenarioInputs,
    BuyVsRentInputs,
    Flat,
    GrowthScenario,
    RateOfValue,
    RentScenarioInputs,
)
from src.models.region import FieldBounds, RegionalConfig
from src.models.results import Severity, ValidationIssue

MAX_SCENARIO_NAME_LENGTH = 100


def _is_number(value) -> bool:
    if isinstance(value, bool):
        return False
    if isinstance(value, Decimal):
        return value.is_finite()
    return isinstance(value, int)


def _fmt(value: Decimal, kind: str, symbol: str) -> str:
    if kind == "money":
        return format_currency(value, symbol)
    if kind == "pct":
        return f"{value.normalize():f}%"
    unit = "year" if value == 1 else "years"
    return f"{value.normalize():f} {unit}"


def _check(
    issues: list[ValidationIssue],
    field: str,
    label: str,
    value,
    bounds: FieldBounds,
    kind: str = "pct",
    symbol: str = "$",
) -> None:
    """Append issues for one numeric field. `kind` is "pct", "money" or "years"."""
    if not _is_number(value):
        issues.append(ValidationIssue(field, f"{label} must be a finite decimal number"))
        return
    value = Decimal(value)

    if bounds.minimum is not None and value < bounds.minimum:
        issues.append(ValidationIssue(
            field, f"{label} cannot be less than {_fmt(bounds.minimum, kind, symbol)}"
        ))
        return
    if bounds.maximum is not None and value > bounds.maximum:
        issues.append(ValidationIssue(
            field, f"{label} cannot exceed {_fmt(bounds.maximum, kind, symbol)}"
        ))
        return

    low, high = bounds.warn_low, bounds.warn_high
    if (low is not None and value < low) or (high is not None and value > high):
        if low is not None and high is not None:
            hint = f"typically between {_fmt(low, kind, symbol)} and {_fmt(high, kind, symbol)}"
        elif high is not None:
            hint = f"unusually high above {_fmt(high, kind, symbol)}"
        else:
            hint = f"unusually low below {_fmt(low, kind, symbol)}"
        issues.append(ValidationIssue(
            field, f"Warning: {label} is {hint}", Severity.WARNING
        ))


def _check_whole_years(
    issues: list[ValidationIssue], field: str, label: str, value, bounds: FieldBounds
) -> None:
    if isinstance(value, bool) or not isinstance(value, int):
        issues.append(ValidationIssue(field, f"{label} must be a whole number of years"))
        return
    _check(issues, field, label, value, bounds, kind="years")


def validate_buy_inputs(buy: BuyScenarioInputs, region: RegionalConfig) -> list[ValidationIssue]:
    rules = region.validation
    symbol = region.currency.symbol
    issues: list[ValidationIssue] = []

    _check(issues, "home_price", "Home price", buy.home_price, rules.home_price, "money", symbol)
    if _is_number(buy.home_price) and buy.home_price <= 0 and not issues:
        issues.append(ValidationIssue("home_price", "Home price must be positive"))

    _check(
        issues, "down_payment_pct", region.term("down_payment", "Down payment") + " percentage",
        buy.down_payment_pct, rules.down_payment_pct,
    )
    _check(
        issues, "interest_rate_pct", "Interest rate",
        buy.interest_rate_pct, rules.interest_rate_pct,
    )
    _check_whole_years(
        issues, "loan_term_years", "Loan term", buy.loan_term_years, rules.loan_term_years
    )
    _check(
        issues, "property_tax_rate_pct", region.term("property_tax_rate", "Property tax rate"),
        buy.property_tax_rate_pct, rules.property_tax_rate_pct,
    )

    insurance_label = region.term("home_insurance", "Home insurance")
    if isinstance(buy.insurance, RateOfValue):
        _check(
            issues, "insurance", f"{insurance_label} rate",
            buy.insurance.percent, rules.insurance_rate_pct,
        )
    elif isinstance(buy.insurance, Flat):
        _check(
            issues, "insurance", insurance_label,
            buy.insurance.amount, rules.insurance_amount, "money", symbol,
        )
    else:
        issues.append(ValidationIssue("insurance", f"{insurance_label} must be a rate or an amount"))

    _check(
        issues, "hoa_monthly", region.term("hoa_fees", "HOA fees") + " (monthly)",
        buy.hoa_monthly, rules.hoa_monthly, "money", symbol,
    )
    _check(
        issues, "maintenance_rate_pct", "Maintenance rate",
        buy.maintenance_rate_pct, rules.maintenance_rate_pct,
    )
    _check(
        issues, "appreciation_rate_pct", "Appreciation rate",
        buy.appreciation_rate_pct, rules.appreciation_rate_pct,
    )

    closing_label = region.term("closing_costs", "Closing costs")
    if isinstance(buy.closing_costs, RateOfValue):
        _check(
            issues, "closing_costs", f"{closing_label} (% of price)",
            buy.closing_costs.percent, rules.closing_costs_pct,
        )
    elif isinstance(buy.closing_costs, Flat):
        amount = buy.closing_costs.amount
        if not _is_number(amount):
            issues.append(ValidationIssue("closing_costs", f"{closing_label} must be a finite decimal number"))
        elif amount < 0:
            issues.append(ValidationIssue("closing_costs", f"{closing_label} cannot be negative"))
        elif (
            _is_number(buy.home_price)
            and buy.home_price > 0
            and amount > buy.home_price * rules.closing_costs_flat_max_pct / 100
        ):
            issues.append(ValidationIssue(
                "closing_costs",
                f"{closing_label} cannot exceed "
                f"{_fmt(rules.closing_costs_flat_max_pct, 'pct', symbol)} of the home price",
            ))
    elif buy.closing_costs is not None:
        issues.append(ValidationIssue("closing_costs", f"{closing_label} must be a rate or an amount"))

    _check(
        issues, "selling_costs_pct", region.term("selling_costs_pct", "Selling costs (%)"),
        buy.selling_costs_pct, rules.selling_costs_pct,
    )
    return issues


def validate_rent_inputs(rent: RentScenarioInputs, region: RegionalConfig) -> list[ValidationIssue]:
    rules = region.validation
    symbol = region.currency.symbol
    issues: list[ValidationIssue] = []

    _check(
        issues, "monthly_rent", "Monthly rent",
        rent.monthly_rent, rules.monthly_rent, "money", symbol,
    )
    _check(
        issues, "rent_increase_rate_pct", "Rent increase rate",
        rent.rent_increase_rate_pct, rules.rent_increase_rate_pct,
    )
    _check(
        issues, "renters_insurance", region.term("renters_insurance", "Renters insurance"),
        rent.renters_insurance, rules.renters_insurance, "money", symbol,
    )
    return issues


def validate(inputs: BuyVsRentInputs, region: RegionalConfig) -> list[ValidationIssue]:
    """Validate a full buy-vs-rent input set: buy fields, rent fields, then the rest."""
    rules = region.validation
    issues = validate_buy_inputs(inputs.buy, region)
    issues.extend(validate_rent_inputs(inputs.rent, region))

    _check(
        issues, "investment_return_pct", "Investment return rate",
        inputs.investment_return_pct, rules.investment_return_pct,
    )
    _check_whole_years(
        issues, "time_horizon_years", "Time horizon",
        inputs.time_horizon_years, rules.time_horizon_years,
    )
    return issues


def validate_growth_scenario(scenario: GrowthScenario) -> list[ValidationIssue]:
    issues: list[ValidationIssue] = []
    if not scenario.label or not scenario.label.strip():
        issues.append(ValidationIssue("label", "Label is required"))
    _check(issues, "initial_amount", "Initial amount", scenario.initial_amount,
           FieldBounds(minimum=Decimal("0")), "money")
    _check(issues, "monthly_amount", "Monthly amount", scenario.monthly_amount,
           FieldBounds(minimum=Decimal("0")), "money")
    _check(issues, "return_rate_pct", "Return rate", scenario.return_rate_pct,
           FieldBounds(Decimal("-100"), Decimal("100")))
    _check_whole_years(issues, "time_horizon_years", "Time horizon", scenario.time_horizon_years,
                       FieldBounds(Decimal("1"), Decimal("50")))
    return issues


def validate_scenario_name(name: str) -> ValidationIssue | None:
    if not name or not name.strip():
        return ValidationIssue("name", "Scenario name is required")
    if len(name) > MAX_SCENARIO_NAME_LENGTH:
        return ValidationIssue(
            "name", f"Scenario name is too long (max {MAX_SCENARIO_NAME_LENGTH} characters)"
        )
    return None


def has_errors(issues: list[ValidationIssue]) -> bool:
    return any(issue.severity is Severity.ERROR for issue in issues)
