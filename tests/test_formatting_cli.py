"""Agreement printout and command line checkout."""
import argparse
import os
import sys
from datetime import date
from decimal import Decimal

import pytest

# Add src to path for internal imports
src_path = os.path.join(os.path.dirname(os.path.dirname(os.path.abspath(__file__))), 'src')
if src_path not in sys.path:
    sys.path.insert(0, src_path)

from tool_rental.cli import main, parse_date
from tool_rental.config.settings import Settings
from tool_rental.engine import PricingEngine, ToolCatalog
from tool_rental.engine.formatting import format_agreement, format_date, format_money, print_agreement


@pytest.fixture(scope="module")
def engine():
    return PricingEngine(catalog=ToolCatalog.default())


def test_format_money():
    assert format_money(Decimal("2.99")) == "$2.99"
    assert format_money(Decimal("0")) == "$0.00"
    assert format_money(Decimal("1234.5")) == "$1,234.50"
    assert format_money(Decimal("-3.2")) == "-$3.20"
    assert format_money(Decimal("5"), symbol="€") == "€5.00"


def test_format_date():
    assert format_date(date(2020, 7, 3)) == "07/03/20"
    assert format_date(date(2015, 9, 9)) == "09/09/15"


def test_format_agreement(engine):
    agreement = engine.checkout("JAKR", 5, 20, date(2020, 7, 3))
    assert format_agreement(agreement) == [
        "Tool code: JAKR",
        "Tool type: Jackhammer",
        "Tool brand: Ridgid",
        "Rental days: 5",
        "Checkout date: 07/03/20",
        "Due date: 07/08/20",
        "Charge days: 2",
        "Daily rental charge: $2.99",
        "Pre-discount charge: $5.98",
        "Discount percent: 20%",
        "Discount amount: $1.20",
        "Final charge: $4.78",
    ]


def test_format_agreement_uses_settings(engine, tmp_path):
    settings = Settings(tool_catalog=tmp_path / "x.csv",
                        date_format="%Y-%m-%d", currency_symbol="USD ")
    lines = format_agreement(engine.checkout("LADW", 3, 10, date(2020, 7, 2)), settings)
    assert "Checkout date: 2020-07-02" in lines
    assert "Final charge: USD 3.58" in lines


def test_print_agreement(engine, capsys):
    print_agreement(engine.checkout("LADW", 3, 10, date(2020, 7, 2)))
    out = capsys.readouterr().out
    assert "Due date: 07/05/20" in out
    assert "Discount amount: $0.40" in out


# ---------------- CLI ----------------

@pytest.mark.parametrize("value", ["2020-07-02", "07/02/20", "07/02/2020"])
def test_parse_date_formats(value):
    assert parse_date(value) == date(2020, 7, 2)


def test_parse_date_rejects_garbage():
    with pytest.raises(argparse.ArgumentTypeError):
        parse_date("July 2nd")


def test_cli_checkout(capsys):
    assert main(["checkout", "LADW", "3", "10", "2020-07-02"]) == 0
    out = capsys.readouterr().out
    assert "Tool code: LADW" in out
    assert "Charge days: 2" in out
    assert "Final charge: $3.58" in out


def test_cli_checkout_with_trace(capsys):
    assert main(["checkout", "JAKD", "6", "0", "09/03/15", "--trace"]) == 0
    out = capsys.readouterr().out
    assert "Final charge: $8.97" in out
    assert "• Holidays: Holiday days excluded = 1" in out


def test_cli_invalid_tool(capsys):
    assert main(["checkout", "NOPE", "3", "10", "2020-07-02"]) == 1
    assert "ERROR: Invalid tool code: NOPE" in capsys.readouterr().err


def test_cli_invalid_discount(capsys):
    assert main(["checkout", "JAKR", "5", "101", "2015-09-03"]) == 1
    assert "Discount percent must be between 0 and 100" in capsys.readouterr().err


def test_cli_tools(capsys):
    assert main(["tools"]) == 0
    out = capsys.readouterr().out.splitlines()
    assert [line.split()[0] for line in out] == ["CHNS", "LADW", "JAKD", "JAKR"]


def test_cli_custom_catalog(tmp_path, capsys):
    path = tmp_path / "tools.csv"
    path.write_text(
        "code,type,brand,daily_charge,weekday_charge,weekend_charge,holiday_charge\n"
        "GENR,Generator,Honda,9.99,true,true,true\n",
        encoding="utf-8",
    )
    assert main(["--catalog", str(path), "checkout", "GENR", "2", "0", "2020-07-03"]) == 0
    assert "Final charge: $19.98" in capsys.readouterr().out


def test_cli_missing_catalog(tmp_path, capsys):
    assert main(["--catalog", str(tmp_path / "nope.csv"), "tools"]) == 1
    assert "ERROR: Tool catalog not found" in capsys.readouterr().err


def test_cli_due_date_past_calendar_end(capsys):
    assert main(["checkout", "JAKR", "5", "0", "9999-12-30"]) == 1
    assert "ERROR: Rental of 5 days from 9999-12-30 ends past 9999-12-31" in capsys.readouterr().err


def test_format_money_rounds_half_up():
    assert format_money(Decimal("1.485")) == "$1.49"
    assert format_money(Decimal("2.675")) == "$2.68"
    assert format_money(Decimal("-0.004")) == "$0.00"
