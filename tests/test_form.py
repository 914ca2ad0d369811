import logging

import pytest

import core.form as form
from core.form import (
    DEFAULT_AGE,
    INVALID_SALARY_MESSAGE,
    InvalidGrossSalary,
    build_input,
    format_result_message,
    parse_int,
    submit,
)
from core.schema import MaritalStatus, PayPeriods


@pytest.mark.parametrize(
    "text, expected",
    [
        ("18000", 18000),
        ("0", 0),
        ("-3", -3),
        ("+7", 7),
        ("2147483647", 2147483647),
        ("2147483648", None),
        ("-2147483649", None),
        ("", None),
        (None, None),
        (" 100", None),
        ("100 ", None),
        ("1.5", None),
        ("1_000", None),
        ("1,000", None),
        ("abc", None),
        ("-", None),
    ],
)
def test_parse_int(text, expected):
    assert parse_int(text) == expected


def test_enum_labels():
    assert PayPeriods.TWELVE.count == 12
    assert PayPeriods.FOURTEEN.label == "14 Pagas"
    assert [m.label for m in MaritalStatus] == ["Soltero/a", "Casado/a", "Divorciado/a", "Viudo/a"]


def test_build_input_applies_defaults():
    ci = build_input("18000", PayPeriods.TWELVE, "", "x", MaritalStatus.SINGLE, None)
    assert ci.gross_salary == 18000
    assert ci.pay_periods == 12
    assert ci.age == DEFAULT_AGE
    assert ci.dependents == 0
    assert ci.disability_grade == 0
    assert ci.marital_status == "Soltero/a"


def test_build_input_rejects_bad_salary():
    with pytest.raises(InvalidGrossSalary) as exc_info:
        build_input("18k", PayPeriods.TWELVE)
    assert exc_info.value.raw == "18k"


def test_format_result_message():
    assert format_result_message(1275.0) == "Salario neto por paga mensual: 1275.00€"
    assert format_result_message(1234.567) == "Salario neto por paga mensual: 1234.57€"


def test_submit_success():
    result = submit("25000", PayPeriods.FOURTEEN, "40", "2", MaritalStatus.MARRIED, "1")
    assert result.ok
    assert result.net_per_period == pytest.approx(1500.0)
    assert result.message == "Salario neto por paga mensual: 1500.00€"
    assert result.calc_input.marital_status == "Casado/a"


@pytest.mark.parametrize("raw", ["", "abc", "12.5", None])
def test_submit_invalid_salary_never_calls_calculator(monkeypatch, raw):
    def _boom(_):
        raise AssertionError("calculator must not be called")

    monkeypatch.setattr(form, "compute_for_input", _boom)
    result = submit(raw, PayPeriods.TWELVE, "30", "0", MaritalStatus.SINGLE, "0")
    assert not result.ok
    assert result.message == INVALID_SALARY_MESSAGE
    assert result.net_per_period is None
    assert result.calc_input is None


def test_submit_logs_rejected_salary(caplog):
    with caplog.at_level(logging.WARNING, logger="core.form"):
        submit("nope", PayPeriods.TWELVE)
    assert "Rejected gross salary" in caplog.text
