"""Jurisdiction configuration: currency, terminology, defaults, validation bounds, fees.

The engine never branches on a region code; everything jurisdiction-specific
is carried here and injected by the caller.
"""

from dataclasses import dataclass, field, fields
from decimal import Decimal

from src.engine.fees import PurchaseFeeModel
from src.models.inputs import BuyVsRentInputs


@dataclass(frozen=True)
class CurrencyFormat:
    symbol: str  # "R", "$"
    code: str  # ISO 4217
    locale: str = "en-US"


@dataclass(frozen=True)
class FieldBounds:
    """Hard bounds reject, soft bounds warn. None = unchecked."""
    minimum: Decimal | None = None
    maximum: Decimal | None = None
    warn_low: Decimal | None = None
    warn_high: Decimal | None = None
    typical: Decimal | None = None


@dataclass(frozen=True)
class ValidationRules:
    home_price: FieldBounds
    down_payment_pct: FieldBounds = FieldBounds(Decimal("0"), Decimal("100"))
    interest_rate_pct: FieldBounds = FieldBounds(Decimal("0"), Decimal("25"))
    loan_term_years: FieldBounds = FieldBounds(Decimal("1"), Decimal("50"))
    property_tax_rate_pct: FieldBounds = FieldBounds(Decimal("0"), Decimal("10"))
    insurance_rate_pct: FieldBounds = FieldBounds(Decimal("0"), Decimal("5"))
    insurance_amount: FieldBounds = FieldBounds(Decimal("0"), Decimal("50000"))  # Annual
    hoa_monthly: FieldBounds = FieldBounds(Decimal("0"), Decimal("5000"))
    maintenance_rate_pct: FieldBounds = FieldBounds(Decimal("0"), Decimal("10"))
    appreciation_rate_pct: FieldBounds = FieldBounds(
        Decimal("-20"), Decimal("20"), warn_low=Decimal("-5"), warn_high=Decimal("10")
    )
    closing_costs_pct: FieldBounds = FieldBounds(Decimal("0"), Decimal("10"))  # Of home price
    closing_costs_flat_max_pct: Decimal = Decimal("15")  # Flat amount cap, % of home price
    selling_costs_pct: FieldBounds = FieldBounds(Decimal("0"), Decimal("15"))
    monthly_rent: FieldBounds = FieldBounds(Decimal("100"), Decimal("100000"))
    rent_increase_rate_pct: FieldBounds = FieldBounds(
        Decimal("0"), Decimal("20"), warn_high=Decimal("10")
    )
    renters_insurance: FieldBounds = FieldBounds(Decimal("0"), Decimal("50000"))  # Annual
    investment_return_pct: FieldBounds = FieldBounds(
        Decimal("-50"), Decimal("50"), warn_low=Decimal("0"), warn_high=Decimal("15")
    )
    time_horizon_years: FieldBounds = FieldBounds(Decimal("1"), Decimal("50"))

    def typical_values(self) -> dict[str, Decimal]:
        """Typical market value per field, for fields that declare one."""
        values = {}
        for f in fields(self):
            bounds = getattr(self, f.name)
            if isinstance(bounds, FieldBounds) and bounds.typical is not None:
                values[f.name] = bounds.typical
        return values


@dataclass(frozen=True)
class RegionalConfig:
    code: str
    name: str
    currency: CurrencyFormat
    defaults: BuyVsRentInputs
    validation: ValidationRules
    fee_model: PurchaseFeeModel
    terminology: dict[str, str] = field(default_factory=dict)
    help_text: dict[str, str] = field(default_factory=dict)

    def term(self, key: str, fallback: str) -> str:
        return self.terminology.get(key, fallback)
