import pytest
from decimal import Decimal

from src.regions.registry import UnknownRegionError, available_regions, get_region


class TestRegistry:
    def test_available(self):
        assert available_regions() == ["US", "ZA"]

    def test_case_insensitive(self):
        assert get_region("za").code == "ZA"
        assert get_region(" us ").code == "US"

    def test_unknown(self):
        with pytest.raises(UnknownRegionError):
            get_region("GB")

    def test_unknown_is_key_error(self):
        with pytest.raises(KeyError):
            get_region("")


class TestRegionalConfig:
    def test_terminology_fallback(self, za, us):
        assert za.term("down_payment", "Down Payment") == "Deposit"
        assert us.term("down_payment", "Down Payment") == "Down Payment"
        assert za.term("unknown_key", "Fallback") == "Fallback"

    def test_currency(self, za, us):
        assert (za.currency.symbol, za.currency.code) == ("R", "ZAR")
        assert (us.currency.symbol, us.currency.code) == ("$", "USD")

    def test_defaults_leave_closing_costs_to_fee_model(self, za, us):
        assert za.defaults.buy.closing_costs is None
        assert us.defaults.buy.closing_costs is None

    def test_typical_values(self, za):
        typical = za.validation.typical_values()
        assert typical["interest_rate_pct"] == Decimal("11.75")
        assert typical["rent_increase_rate_pct"] == Decimal("6")
        assert "closing_costs_flat_max_pct" not in typical
        assert "home_price" not in typical
