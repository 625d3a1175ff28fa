"""Fixed-rate mortgage amortization.

Pure functions: Decimal in, dataclass out. No I/O.
Rates are annual percentages (6.5 = 6.5%).
"""

from dataclasses import dataclass
from decimal import Decimal, ROUND_HALF_UP

TWO_PLACES = Decimal("0.01")
ZERO = Decimal("0")


class InvalidLoanTermError(ValueError):
    """Loan term yields no payment periods."""


@dataclass(frozen=True)
class AmortizationEntry:
    month: int
    payment: Decimal
    principal: Decimal
    interest: Decimal
    balance: Decimal  # Remaining after this payment


@dataclass(frozen=True)
class AmortizationSchedule:
    principal: Decimal
    payments: list[AmortizationEntry]
    monthly_payment: Decimal
    total_interest: Decimal
    total_principal: Decimal

    def balance_after(self, month: int) -> Decimal:
        """Remaining balance after `month` payments (0 once the loan is retired)."""
        if month <= 0:
            return self.principal
        if month >= len(self.payments):
            return ZERO
        return self.payments[month - 1].balance


@dataclass(frozen=True)
class LoanYear:
    principal: Decimal
    interest: Decimal
    payments: Decimal


def _term_months(years: int) -> int:
    months = years * 12
    if months <= 0:
        raise InvalidLoanTermError(f"Loan term must be at least 1 year, got {years}")
    return months


def monthly_payment(principal: Decimal, annual_rate_pct: Decimal, years: int) -> Decimal:
    """Fixed monthly payment (principal + interest), rounded to cents."""
    if principal == 0:
        return ZERO
    n = _term_months(years)
    r = annual_rate_pct / 100 / 12
    if r == 0:
        return (principal / n).quantize(TWO_PLACES, ROUND_HALF_UP)

    # M = P * [r(1+r)^n] / [(1+r)^n - 1]
    factor = (1 + r) ** n
    payment = principal * (r * factor) / (factor - 1)
    return payment.quantize(TWO_PLACES, ROUND_HALF_UP)


def amortization_schedule(
    principal: Decimal,
    annual_rate_pct: Decimal,
    years: int,
) -> AmortizationSchedule:
    """Full month-by-month schedule, one entry per month of the term.

    The running balance keeps full precision; each entry is rounded to cents
    on its own. The last payment absorbs the residue left by the rounded
    monthly payment so the loan closes at exactly zero.
    """
    n_periods = _term_months(years)
    pmt = monthly_payment(principal, annual_rate_pct, years)
    r = annual_rate_pct / 100 / 12

    payments: list[AmortizationEntry] = []
    balance = principal
    total_interest = ZERO
    total_principal = ZERO

    for month in range(1, n_periods + 1):
        interest = balance * r
        principal_paid = pmt - interest

        # Final payment adjustment
        if principal_paid > balance or month == n_periods:
            principal_paid = balance
            actual_payment = interest + principal_paid
        else:
            actual_payment = pmt

        balance = max(ZERO, balance - principal_paid)

        entry = AmortizationEntry(
            month=month,
            payment=actual_payment.quantize(TWO_PLACES, ROUND_HALF_UP),
            principal=principal_paid.quantize(TWO_PLACES, ROUND_HALF_UP),
            interest=interest.quantize(TWO_PLACES, ROUND_HALF_UP),
            balance=balance.quantize(TWO_PLACES, ROUND_HALF_UP),
        )
        total_interest += entry.interest
        total_principal += entry.principal
        payments.append(entry)

    return AmortizationSchedule(
        principal=principal,
        payments=payments,
        monthly_payment=pmt,
        total_interest=total_interest,
        total_principal=total_principal,
    )


def loan_year_totals(schedule: AmortizationSchedule, year: int) -> LoanYear:
    """Sum the 12 payments of loan year `year` (1-indexed).

    Only months inside the schedule are summed, so years past the term are zero.
    """
    start = max(0, (year - 1) * 12)
    end = min(year * 12, len(schedule.payments))
    months = schedule.payments[start:end] if year >= 1 else []
    return LoanYear(
        principal=sum((p.principal for p in months), ZERO),
        interest=sum((p.interest for p in months), ZERO),
        payments=sum((p.payment for p in months), ZERO),
    )
