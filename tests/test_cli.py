from src.cli import build_inputs, build_parser, main
from src.config import settings
from src.regions.south_africa import SOUTH_AFRICA


class TestCli:
    def test_region_defaults_report(self, capsys):
        assert main(["--region", "ZA"]) == 0
        out = capsys.readouterr().out
        assert "Transfer Duty:" in out
        assert "R79,275" in out
        assert "After 20 years" in out

    def test_overrides(self, capsys):
        assert main(["--region", "us", "--home-price", "500000", "--horizon", "5"]) == 0
        out = capsys.readouterr().out
        assert "$500,000" in out
        assert "After 5 years" in out

    def test_invalid_inputs(self, capsys):
        assert main(["--region", "ZA", "--horizon", "0"]) == 1
        err = capsys.readouterr().err
        assert "time_horizon_years" in err

    def test_unknown_region(self, capsys):
        assert main(["--region", "XX"]) == 1
        assert "Unknown region" in capsys.readouterr().err


class TestModelingFlags:
    def test_defaults_follow_settings(self):
        args = build_parser().parse_args([])
        options = build_inputs(args, SOUTH_AFRICA).options
        assert options.include_closing_costs_in_renter_initial_investment is (
            settings.include_closing_costs_in_renter_initial_investment
        )
        assert options.model_buyer_side_investment is settings.model_buyer_side_investment

    def test_flags_turn_options_on(self, monkeypatch):
        monkeypatch.setattr(settings, "include_closing_costs_in_renter_initial_investment", False)
        monkeypatch.setattr(settings, "model_buyer_side_investment", False)
        args = build_parser().parse_args(["--closing-costs-to-renter", "--buyer-investing"])
        options = build_inputs(args, SOUTH_AFRICA).options
        assert options.include_closing_costs_in_renter_initial_investment is True
        assert options.model_buyer_side_investment is True

    def test_flags_turn_options_off(self, monkeypatch):
        monkeypatch.setattr(settings, "include_closing_costs_in_renter_initial_investment", True)
        monkeypatch.setattr(settings, "model_buyer_side_investment", True)
        args = build_parser().parse_args(["--no-closing-costs-to-renter", "--no-buyer-investing"])
        options = build_inputs(args, SOUTH_AFRICA).options
        assert options.include_closing_costs_in_renter_initial_investment is False
        assert options.model_buyer_side_investment is False
