"""Terminal buy vs rent report, computed locally from a region's defaults plus overrides.

Usage:
    python -m src.cli --region ZA
    python -m src.cli --region US --home-price 550000 --monthly-rent 2800 --horizon 15
"""

import argparse
import logging
import sys
from dataclasses import replace
from decimal import Decimal

from src.config import settings
from src.engine.comparison import compare_buy_vs_rent
from src.engine.formatting import format_currency
from src.engine.validation import has_errors, validate
from src.models.inputs import BuyVsRentInputs, Flat, ModelingOptions, RateOfValue
from src.models.region import RegionalConfig
from src.models.results import BuyVsRentResults, Severity
from src.regions.registry import UnknownRegionError, available_regions, get_region


# ── Helpers ──────────────────────────────────────────────────────────────────

def _money(v, region: RegionalConfig) -> str:
    return format_currency(v, region.currency.symbol)


def _header(title: str) -> None:
    print(f"\n{'=' * 72}")
    print(f"  {title}")
    print(f"{'=' * 72}")


# ── Report sections ──────────────────────────────────────────────────────────

def print_inputs(inputs: BuyVsRentInputs, region: RegionalConfig) -> None:
    buy, rent = inputs.buy, inputs.rent
    _header(f"Inputs ({region.name})")
    print(f"  Home Price:           {_money(buy.home_price, region)}")
    print(f"  {region.term('down_payment', 'Down Payment') + ':':<22}"
          f"{_money(buy.down_payment, region)} ({buy.down_payment_pct}%)")
    print(f"  {region.term('mortgage', 'Mortgage') + ':':<22}"
          f"{_money(buy.loan_amount, region)} at {buy.interest_rate_pct}% "
          f"over {buy.loan_term_years} years")
    print(f"  Appreciation:         {buy.appreciation_rate_pct}%")
    print(f"  Monthly Rent:         {_money(rent.monthly_rent, region)} "
          f"(+{rent.rent_increase_rate_pct}%/yr)")
    print(f"  Investment Return:    {inputs.investment_return_pct}%")
    print(f"  Time Horizon:         {inputs.time_horizon_years} years")


def print_purchase_fees(result: BuyVsRentResults, region: RegionalConfig) -> None:
    _header(region.term("closing_costs", "Closing Costs"))
    fees = result.purchase_fees
    if fees is not None and (fees.transfer_duty or fees.bond_registration or fees.deeds_office):
        print(f"  Transfer Duty:        {_money(fees.transfer_duty, region)}")
        print(f"  Bond Registration:    {_money(fees.bond_registration, region)}")
        print(f"  Deeds Office:         {_money(fees.deeds_office, region)}")
        if fees.other:
            print(f"  Other:                {_money(fees.other, region)}")
    print(f"  Total:                {_money(result.closing_costs, region)}")


def print_yearly_table(result: BuyVsRentResults, region: RegionalConfig) -> None:
    _header("Net Worth by Year")
    print(
        f"  {'Yr':>3}  {'Home Value':>14}  {'Equity':>14}  {'Buy NW':>14}  "
        f"{'Rent/mo':>10}  {'Rent NW':>14}"
    )
    print(f"  {'---':>3}  {'-' * 14}  {'-' * 14}  {'-' * 14}  {'-' * 10}  {'-' * 14}")
    for b, r in zip(result.buy_breakdown, result.rent_breakdown):
        print(
            f"  {b.year:>3}  {_money(b.home_value, region):>14}  "
            f"{_money(b.equity, region):>14}  {_money(b.net_worth, region):>14}  "
            f"{_money(r.monthly_rent, region):>10}  {_money(r.net_worth, region):>14}"
        )


def print_summary(result: BuyVsRentResults, region: RegionalConfig) -> None:
    _header("Summary")
    print(f"  Final Buy Net Worth:  {_money(result.final_buy_net_worth, region)}")
    print(f"  Final Rent Net Worth: {_money(result.final_rent_net_worth, region)}")
    if result.break_even_year is None:
        print("  Break-even:           none within the horizon")
    else:
        print(f"  Break-even:           year {result.break_even_year}")
    print()
    print(f"  {result.summary}")


# ── Main ─────────────────────────────────────────────────────────────────────

def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Compare buying a home with renting and investing")
    parser.add_argument(
        "--region",
        default=settings.default_region,
        help=f"Jurisdiction code, one of {', '.join(available_regions())} "
             f"(default: {settings.default_region})",
    )
    parser.add_argument("--home-price", type=Decimal)
    parser.add_argument("--down-payment-pct", type=Decimal)
    parser.add_argument("--interest-rate", type=Decimal, help="Annual rate in percent")
    parser.add_argument("--loan-term", type=int, help="Loan term in years")
    parser.add_argument("--property-tax-rate", type=Decimal)
    parser.add_argument("--insurance-rate", type=Decimal, help="Percent of home value per year")
    parser.add_argument("--insurance-amount", type=Decimal, help="Flat annual amount")
    parser.add_argument("--hoa-monthly", type=Decimal)
    parser.add_argument("--maintenance-rate", type=Decimal)
    parser.add_argument("--appreciation-rate", type=Decimal)
    parser.add_argument("--closing-costs", type=Decimal, help="Flat amount; default uses the region's fees")
    parser.add_argument("--monthly-rent", type=Decimal)
    parser.add_argument("--rent-increase-rate", type=Decimal)
    parser.add_argument("--renters-insurance", type=Decimal, help="Annual amount")
    parser.add_argument("--investment-return", type=Decimal)
    parser.add_argument("--horizon", type=int, help="Time horizon in years")
    parser.add_argument(
        "--closing-costs-to-renter",
        action=argparse.BooleanOptionalAction,
        default=settings.include_closing_costs_in_renter_initial_investment,
        help="Renter also invests the buyer's closing costs at year 0",
    )
    parser.add_argument(
        "--buyer-investing",
        action=argparse.BooleanOptionalAction,
        default=settings.model_buyer_side_investment,
        help="Invest the buyer's monthly savings once costs drop below rent",
    )
    parser.add_argument("--verbose", action="store_true")
    return parser


def build_inputs(args: argparse.Namespace, region: RegionalConfig) -> BuyVsRentInputs:
    """Region defaults with any CLI overrides applied."""
    buy_map = {
        "home_price": "home_price",
        "down_payment_pct": "down_payment_pct",
        "interest_rate": "interest_rate_pct",
        "loan_term": "loan_term_years",
        "property_tax_rate": "property_tax_rate_pct",
        "hoa_monthly": "hoa_monthly",
        "maintenance_rate": "maintenance_rate_pct",
        "appreciation_rate": "appreciation_rate_pct",
    }
    rent_map = {
        "monthly_rent": "monthly_rent",
        "rent_increase_rate": "rent_increase_rate_pct",
        "renters_insurance": "renters_insurance",
    }
    buy_fields = {
        field: getattr(args, name) for name, field in buy_map.items()
        if getattr(args, name) is not None
    }
    if args.insurance_amount is not None:
        buy_fields["insurance"] = Flat(args.insurance_amount)
    elif args.insurance_rate is not None:
        buy_fields["insurance"] = RateOfValue(args.insurance_rate)
    if args.closing_costs is not None:
        buy_fields["closing_costs"] = Flat(args.closing_costs)

    rent_fields = {
        field: getattr(args, name) for name, field in rent_map.items()
        if getattr(args, name) is not None
    }

    defaults = region.defaults
    inputs = replace(
        defaults,
        buy=replace(defaults.buy, **buy_fields),
        rent=replace(defaults.rent, **rent_fields),
        options=ModelingOptions(
            include_closing_costs_in_renter_initial_investment=args.closing_costs_to_renter,
            model_buyer_side_investment=args.buyer_investing,
        ),
    )
    if args.investment_return is not None:
        inputs = replace(inputs, investment_return_pct=args.investment_return)
    if args.horizon is not None:
        inputs = replace(inputs, time_horizon_years=args.horizon)
    return inputs


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(level=logging.DEBUG if args.verbose else settings.log_level.upper())

    try:
        region = get_region(args.region)
    except UnknownRegionError as e:
        print(f"Error: {e.args[0]}", file=sys.stderr)
        return 1

    inputs = build_inputs(args, region)
    issues = validate(inputs, region)
    if has_errors(issues):
        print("Error: invalid inputs", file=sys.stderr)
        for issue in issues:
            print(f"  [{issue.severity.value}] {issue.field}: {issue.message}", file=sys.stderr)
        return 1

    result = compare_buy_vs_rent(inputs, region)

    print_inputs(inputs, region)
    print_purchase_fees(result, region)
    print_yearly_table(result, region)
    print_summary(result, region)
    for issue in issues:
        if issue.severity is Severity.WARNING:
            print(f"  {issue.message}")
    print()
    return 0


if __name__ == "__main__":
    sys.exit(main())
