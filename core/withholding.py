# core/withholding.py
# Simplified withholding rate: bracket lookup on gross salary minus flat discounts.
# All rates are integer percentage points (e.g., 15 for 15%).

# (exclusive upper bound, base rate)
WITHHOLDING_BRACKETS = [
    (20_000, 15),
    (40_000, 20),
    (float("inf"), 25),
]

DISCOUNT_PER_DEPENDENT = 1
DISABILITY_DISCOUNT = 2


def base_withholding_rate(gross_salary: int) -> int:
    """
    Base rate for the first bracket whose upper bound is above gross_salary.
    """
    for top, rate in WITHHOLDING_BRACKETS:
        if gross_salary < top:
            return rate
    return WITHHOLDING_BRACKETS[-1][1]


def dependent_discount(dependents: int) -> int:
    return dependents * DISCOUNT_PER_DEPENDENT


def disability_discount(disability_grade: int) -> int:
    """
    Flat discount for any recognised disability grade, regardless of degree.
    """
    return DISABILITY_DISCOUNT if disability_grade > 0 else 0


def total_withholding_rate(gross_salary: int, dependents: int, disability_grade: int) -> int:
    """
    Base rate minus both discounts. Not clamped: zero or negative rates are
    returned as-is and end up increasing the net amount above gross.
    """
    return (
        base_withholding_rate(gross_salary)
        - dependent_discount(dependents)
        - disability_discount(disability_grade)
    )
