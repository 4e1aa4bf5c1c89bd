"""End-to-end tests for the click CLI."""

import logging

import pytest
from click.testing import CliRunner

from scm.infrastructure.cli.main import cli

UUID = "550e8400-e29b-41d4-a716-446655440000"


@pytest.fixture
def runner(monkeypatch) -> CliRunner:
    monkeypatch.delenv("SCM_DEFAULT_CURRENCY", raising=False)
    monkeypatch.delenv("SCM_LOG_LEVEL", raising=False)
    # the CLI reconfigures the root logger; restore it after each test
    root = logging.getLogger()
    monkeypatch.setattr(root, "handlers", list(root.handlers))
    monkeypatch.setattr(root, "level", root.level)
    return CliRunner()


class TestSupplierCommands:

    def test_register(self, runner):
        result = runner.invoke(
            cli,
            [
                "supplier", "register",
                "--name", "Acme Corp",
                "--id", UUID,
                "--email", "orders@acme.com",
                "--last-order-total", "150",
                "--currency", "EUR",
            ],
        )
        assert result.exit_code == 0, result.output
        assert f"Supplier {UUID} registered" in result.output
        assert "orders@acme.com" in result.output
        assert "EUR 150.00" in result.output

    def test_register_rejects_bad_email(self, runner):
        result = runner.invoke(
            cli, ["supplier", "register", "--name", "Acme Corp", "--email", "bad-email"]
        )
        assert result.exit_code == 1
        assert "contactEmail must be a valid email address" in result.output

    def test_register_requires_name(self, runner):
        result = runner.invoke(cli, ["supplier", "register"])
        assert result.exit_code == 2


class TestMoneyCommands:

    def test_total(self, runner):
        result = runner.invoke(cli, ["money", "total", "100", "50"])
        assert result.exit_code == 0, result.output
        assert result.output.strip() == "USD 150.00"

    def test_total_times(self, runner):
        result = runner.invoke(cli, ["money", "total", "100", "--times", "2", "--currency", "GBP"])
        assert result.output.strip() == "GBP 200.00"

    def test_default_currency_from_environment(self, runner, monkeypatch):
        monkeypatch.setenv("SCM_DEFAULT_CURRENCY", "JPY")
        result = runner.invoke(cli, ["money", "total", "5"])
        assert result.output.strip() == "JPY 5.00"

    def test_huge_amount(self, runner):
        result = runner.invoke(cli, ["money", "total", "1e30", "--times", "100"])
        assert result.exit_code == 0, result.output
        assert result.output.strip() == "USD 1" + "0" * 32 + ".00"

    def test_amount_too_large(self, runner):
        result = runner.invoke(cli, ["money", "total", "1e1000"])
        assert result.exit_code == 1
        assert "Error: amount must have at most 1000 integer digits" in result.output

    def test_invalid_currency(self, runner):
        result = runner.invoke(cli, ["money", "total", "1", "--currency", "XXX"])
        assert result.exit_code == 1
        assert "Invalid currency code: XXX" in result.output


class TestIdentifierCommands:

    @pytest.mark.parametrize("kind", ["supplier", "product"])
    def test_generate_then_check(self, runner, kind):
        generated = runner.invoke(cli, ["id", "generate", kind]).output.strip()
        result = runner.invoke(cli, ["id", "check", kind, generated])
        assert result.exit_code == 0, result.output
        assert "is valid" in result.output

    def test_check_invalid(self, runner):
        result = runner.invoke(cli, ["id", "check", "product", "nope"])
        assert result.exit_code == 1
        assert "Invalid ProductId: nope" in result.output

    def test_unknown_kind(self, runner):
        result = runner.invoke(cli, ["id", "generate", "order"])
        assert result.exit_code == 2


class TestDateTimeCommands:

    def test_show(self, runner):
        result = runner.invoke(cli, ["datetime", "show", "2023-10-05T14:48:00.000Z"])
        assert result.exit_code == 0, result.output
        assert "ISO:   2023-10-05T14:48:00.000Z" in result.output
        assert "Human: October 5, 2023, 02:48 PM" in result.output

    def test_show_now(self, runner):
        result = runner.invoke(cli, ["datetime", "show"])
        assert result.exit_code == 0
        assert result.output.startswith("ISO:   ")

    def test_show_invalid(self, runner):
        result = runner.invoke(cli, ["datetime", "show", "not-a-date"])
        assert result.exit_code == 1
        assert "Invalid date format: not-a-date" in result.output


class TestVerboseFlag:

    def test_verbose_accepted(self, runner):
        result = runner.invoke(cli, ["--verbose", "money", "total", "1"])
        assert result.exit_code == 0
