# core/schema.py
from dataclasses import dataclass
from enum import Enum
from typing import Optional


class PayPeriods(Enum):
    """Number of yearly installments the annual net salary is split into."""
    TWELVE = (12, "12 Pagas")
    FOURTEEN = (14, "14 Pagas")

    def __init__(self, count: int, label: str):
        self.count = count
        self.label = label


class MaritalStatus(Enum):
    SINGLE = "Soltero/a"
    MARRIED = "Casado/a"
    DIVORCED = "Divorciado/a"
    WIDOWED = "Viudo/a"

    @property
    def label(self) -> str:
        return self.value


@dataclass
class CalculationInput:
    gross_salary: int
    pay_periods: int
    age: int = 30
    dependents: int = 0
    marital_status: str = MaritalStatus.SINGLE.label
    disability_grade: int = 0


@dataclass
class CalculationResult:
    message: str
    net_per_period: Optional[float]
    ok: bool
    calc_input: Optional[CalculationInput] = None
