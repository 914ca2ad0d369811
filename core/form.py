# core/form.py
# Turns raw form values into a CalculationInput and the message shown on the result view.
from __future__ import annotations

import logging
import re
from typing import Optional

from .net_salary import compute_for_input
from .schema import CalculationInput, CalculationResult, MaritalStatus, PayPeriods

logger = logging.getLogger(__name__)

DEFAULT_AGE = 30
DEFAULT_DEPENDENTS = 0
DEFAULT_DISABILITY_GRADE = 0

INVALID_SALARY_MESSAGE = "Introduce un salario válido"

_INT_RE = re.compile(r"[+-]?[0-9]+")
_INT_MIN, _INT_MAX = -(2 ** 31), 2 ** 31 - 1


class InvalidGrossSalary(ValueError):
    """Gross salary field could not be read as an integer."""

    def __init__(self, raw: Optional[str]):
        super().__init__(f"invalid gross salary: {raw!r}")
        self.raw = raw


def parse_int(text: Optional[str]) -> Optional[int]:
    """
    Strict integer parse: optional sign and ASCII digits, nothing else.
    Whitespace, decimals, separators and values outside 32-bit range give None.
    """
    if text is None or not _INT_RE.fullmatch(text):
        return None
    value = int(text)
    if value < _INT_MIN or value > _INT_MAX:
        return None
    return value


def _int_or_default(text: Optional[str], default: int) -> int:
    value = parse_int(text)
    return default if value is None else value


def build_input(gross_salary_text: Optional[str], pay_periods: PayPeriods,
                age_text: Optional[str] = None, dependents_text: Optional[str] = None,
                marital_status: MaritalStatus = MaritalStatus.SINGLE,
                disability_text: Optional[str] = None) -> CalculationInput:
    gross = parse_int(gross_salary_text)
    if gross is None:
        raise InvalidGrossSalary(gross_salary_text)

    return CalculationInput(
        gross_salary=gross,
        pay_periods=pay_periods.count,
        age=_int_or_default(age_text, DEFAULT_AGE),
        dependents=_int_or_default(dependents_text, DEFAULT_DEPENDENTS),
        marital_status=marital_status.label,
        disability_grade=_int_or_default(disability_text, DEFAULT_DISABILITY_GRADE),
    )


def format_result_message(net: float) -> str:
    return f"Salario neto por paga mensual: {net:.2f}€"


def submit(gross_salary_text: Optional[str], pay_periods: PayPeriods,
           age_text: Optional[str] = None, dependents_text: Optional[str] = None,
           marital_status: MaritalStatus = MaritalStatus.SINGLE,
           disability_text: Optional[str] = None) -> CalculationResult:
    """
    Handle a "Calcular" press. An unreadable gross salary never reaches the
    calculator; it yields the fixed validation message instead.
    """
    try:
        calc_input = build_input(gross_salary_text, pay_periods, age_text,
                                 dependents_text, marital_status, disability_text)
    except InvalidGrossSalary as exc:
        logger.warning("Rejected gross salary input %r", exc.raw)
        return CalculationResult(message=INVALID_SALARY_MESSAGE, net_per_period=None, ok=False)

    logger.debug("Calculating net salary for %s", calc_input)
    net = compute_for_input(calc_input)
    return CalculationResult(message=format_result_message(net), net_per_period=net,
                             ok=True, calc_input=calc_input)
