# core/net_salary.py
from __future__ import annotations
import pandas as pd

from .schema import CalculationInput
from .withholding import (
    base_withholding_rate,
    dependent_discount,
    disability_discount,
)


def compute_net_salary_per_period(gross_salary: int, pay_periods: int, age: int,
                                  dependents: int, marital_status: str,
                                  disability_grade: int) -> float:
    """
    Net salary paid in each installment.

    Very simplified withholding: a base rate from the gross salary bracket,
    minus 1 point per dependent and 2 points if there is any disability grade.
    `age` and `marital_status` are accepted for the caller's convenience but do
    not change the result.
    """
    base_rate = base_withholding_rate(gross_salary)
    dependents_off = dependent_discount(dependents)
    disability_off = disability_discount(disability_grade)

    total_rate = base_rate - dependents_off - disability_off
    annual_net = gross_salary * (1 - total_rate / 100.0)
    return annual_net / pay_periods


def compute_for_input(calc_input: CalculationInput) -> float:
    return compute_net_salary_per_period(
        calc_input.gross_salary,
        calc_input.pay_periods,
        calc_input.age,
        calc_input.dependents,
        calc_input.marital_status,
        calc_input.disability_grade,
    )


def withholding_breakdown(calc_input: CalculationInput) -> pd.DataFrame:
    """
    One row per concept, from gross salary down to the net installment.
    """
    gross = calc_input.gross_salary
    base_rate = base_withholding_rate(gross)
    dependents_off = dependent_discount(calc_input.dependents)
    disability_off = disability_discount(calc_input.disability_grade)
    total_rate = base_rate - dependents_off - disability_off

    annual_withholding = gross * total_rate / 100.0
    net_per_period = compute_for_input(calc_input)
    annual_net = net_per_period * calc_input.pay_periods

    rows = [
        {"Concepto": "Salario bruto anual", "Valor": gross},
        {"Concepto": "Retención base (%)", "Valor": base_rate},
        {"Concepto": "Descuento por hijos (%)", "Valor": -dependents_off},
        {"Concepto": "Descuento por discapacidad (%)", "Valor": -disability_off},
        {"Concepto": "Retención total (%)", "Valor": total_rate},
        {"Concepto": "Retención anual", "Valor": annual_withholding},
        {"Concepto": "Salario neto anual", "Valor": annual_net},
        {"Concepto": "Número de pagas", "Valor": calc_input.pay_periods},
        {"Concepto": "Salario neto por paga", "Valor": net_per_period},
    ]
    df = pd.DataFrame(rows, columns=["Concepto", "Valor"])
    df["Valor"] = df["Valor"].astype(float).round(2)
    return df
