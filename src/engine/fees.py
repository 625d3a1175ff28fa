"""One-time purchase fees: progressive bracket schedules and flat-percentage closing costs.

Government charges are rounded to the nearest whole currency unit.
Pure functions. No I/O.
"""

from dataclasses import dataclass
from decimal import Decimal, ROUND_HALF_UP
from typing import Protocol

from src.models.inputs import BuyScenarioInputs
from src.models.results import PurchaseFees

WHOLE_UNITS = Decimal("1")
ZERO = Decimal("0")


@dataclass(frozen=True)
class FeeBracket:
    upper_bound: Decimal | None  # None = unbounded top bracket
    rate: Decimal  # Marginal rate as a fraction (0.03 = 3%)
    base_amount: Decimal = ZERO  # Fee accumulated below this bracket


@dataclass(frozen=True)
class FeeSchedule:
    name: str
    brackets: tuple[FeeBracket, ...]

    def __post_init__(self) -> None:
        if not self.brackets:
            raise ValueError(f"{self.name}: at least one bracket required")
        bounds = [b.upper_bound for b in self.brackets]
        if any(b is None for b in bounds[:-1]):
            raise ValueError(f"{self.name}: only the top bracket may be unbounded")
        finite = [b for b in bounds if b is not None]
        if finite != sorted(finite) or len(set(finite)) != len(finite):
            raise ValueError(f"{self.name}: bracket bounds must ascend")


def progressive_fee(value: Decimal, schedule: FeeSchedule) -> Decimal:
    """Fee for `value` under a progressive schedule.

    The bracket containing `value` (lower bound exclusive, upper inclusive)
    contributes base_amount + (value - lower_bound) * rate. A value exactly on
    a threshold is charged at the lower bracket.
    """
    if value <= 0:
        return ZERO

    lower = ZERO
    top = len(schedule.brackets) - 1
    for i, bracket in enumerate(schedule.brackets):
        # A bounded top bracket keeps charging its rate above the bound
        if i == top or value <= bracket.upper_bound:
            fee = bracket.base_amount + (value - lower) * bracket.rate
            return fee.quantize(WHOLE_UNITS, ROUND_HALF_UP)
        lower = bracket.upper_bound


class PurchaseFeeModel(Protocol):
    def compute(self, property_value: Decimal, loan_amount: Decimal) -> PurchaseFees: ...


@dataclass(frozen=True)
class ProgressivePurchaseFees:
    """Transfer duty and deeds-office fee on value, bond registration on the loan."""
    transfer_duty: FeeSchedule
    bond_registration: FeeSchedule
    deeds_office: FeeSchedule

    def compute(self, property_value: Decimal, loan_amount: Decimal) -> PurchaseFees:
        if property_value <= 0:
            return PurchaseFees()
        return PurchaseFees(
            transfer_duty=progressive_fee(property_value, self.transfer_duty),
            bond_registration=progressive_fee(loan_amount, self.bond_registration),
            deeds_office=progressive_fee(property_value, self.deeds_office),
        )


@dataclass(frozen=True)
class PercentagePurchaseFees:
    """Closing costs as a flat percentage of the purchase price."""
    percent: Decimal  # 3 = 3%

    def compute(self, property_value: Decimal, loan_amount: Decimal) -> PurchaseFees:
        if property_value <= 0:
            return PurchaseFees()
        amount = (property_value * self.percent / 100).quantize(WHOLE_UNITS, ROUND_HALF_UP)
        return PurchaseFees(other=amount)


def closing_costs(
    buy: BuyScenarioInputs,
    fee_model: PurchaseFeeModel,
) -> tuple[Decimal, PurchaseFees | None]:
    """Closing costs for a purchase.

    Explicit closing costs on the inputs win (a flat amount, or a percentage
    of the home price). Otherwise the jurisdiction's fee model is applied.

    Returns (closing_cost_amount, fee breakdown or None when overridden).
    """
    if buy.closing_costs is not None:
        return buy.closing_costs.resolve(buy.home_price), None
    fees = fee_model.compute(buy.home_price, buy.loan_amount)
    return fees.total, fees
