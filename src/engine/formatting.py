"""Display formatting for currency amounts and percentages."""

from decimal import Decimal, ROUND_HALF_UP

MILLION = Decimal("1000000")
THOUSAND = Decimal("1000")


def format_currency(value: Decimal, symbol: str = "$", compact: bool = False) -> str:
    """Whole-unit currency string: R2,500,000, or R2.5M / R250k when compact."""
    value = Decimal(value)
    sign = "-" if value < 0 else ""
    magnitude = abs(value)

    if compact and magnitude >= MILLION:
        scaled = (magnitude / MILLION).quantize(Decimal("0.1"), ROUND_HALF_UP)
        return f"{sign}{symbol}{scaled}M"
    if compact and magnitude >= THOUSAND:
        scaled = (magnitude / THOUSAND).quantize(Decimal("1"), ROUND_HALF_UP)
        return f"{sign}{symbol}{scaled}k"

    whole = magnitude.quantize(Decimal("1"), ROUND_HALF_UP)
    return f"{sign}{symbol}{whole:,.0f}"


def format_percentage(value: Decimal, decimals: int = 1) -> str:
    quantum = Decimal(1).scaleb(-decimals)
    return f"{Decimal(value).quantize(quantum, ROUND_HALF_UP)}%"
