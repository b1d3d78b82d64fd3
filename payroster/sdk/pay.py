"""Per-period pay computation and text rendering for employee records.

SDK layer - pure logic, no I/O. Pay is computed on demand from the
record's current fields and never cached.
"""

import math
from decimal import ROUND_HALF_UP, Decimal, localcontext

PAY_PERIODS_PER_YEAR = 26


def compute_pay(employee) -> float:
    """Calculate one pay period's amount for any employee kind.

    - salaried: salary / 26
    - hourly: hours * rate
    - commissioned: salary / 26 + matched rate * units sold

    No range checks: zero and negative inputs follow the same formula.
    """
    kind = employee.kind
    if kind == "salaried":
        return employee.salary / PAY_PERIODS_PER_YEAR
    elif kind == "hourly":
        return employee.hours * employee.rate
    elif kind == "commissioned":
        base = employee.salary / PAY_PERIODS_PER_YEAR
        rate = employee.schedule.matched_rate(employee.units_sold)
        return base + (rate * employee.units_sold)
    raise ValueError(f"Unknown employee kind: {kind}")


def commission_amount(employee) -> float:
    """Commission portion of a commissioned employee's pay."""
    return compute_pay(employee) - employee.salary / PAY_PERIODS_PER_YEAR


def format_amount(value: float, places: int = 2, grouped: bool = True) -> str:
    """Format a money amount with fixed decimals.

    Rounds half-up from the shortest decimal form of the float, so
    0.125 renders as "0.13" and 52000.5 with no decimals as "52,001".
    Any magnitude formats in full. Non-finite values render as
    "Infinity", "-Infinity" or "NaN".
    """
    value = float(value)
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "-Infinity" if value < 0 else "Infinity"

    amount = Decimal(repr(value))
    quantum = Decimal(1).scaleb(-places)
    with localcontext() as ctx:
        # Room for every integer digit, the decimals and a rounding carry.
        ctx.prec = max(ctx.prec, amount.adjusted() + places + 2)
        rounded = amount.quantize(quantum, rounding=ROUND_HALF_UP)
        if grouped:
            return f"{rounded:,.{places}f}"
        return f"{rounded:.{places}f}"


def display_name(employee) -> str:
    """Name as "last, first"."""
    return f"{employee.last_name}, {employee.first_name}"


def _id_suffix(employee) -> str:
    # Employee number renders in octal in every format.
    return f"Id:{employee.employee_number:o} - {employee.first_name}, {employee.last_name}"


def describe(employee) -> str:
    """One-line description of an employee.

    Formats:
        Salaried, Base: $52,000; Id:<octal> - <first>, <last>
        Hourly: $25.00; Id:<octal> - <first>, <last>
        Commission: $123.00 Base: $48,000; Id:<octal> - <first>, <last>
    """
    kind = employee.kind
    if kind == "salaried":
        return f"Salaried, Base: ${format_amount(employee.salary, 0)}; {_id_suffix(employee)}"
    elif kind == "hourly":
        return f"Hourly: ${format_amount(employee.rate, 2, grouped=False)}; {_id_suffix(employee)}"
    elif kind == "commissioned":
        return (
            f"Commission: ${format_amount(commission_amount(employee), 2)} "
            f"Base: ${format_amount(employee.salary, 0)}; {_id_suffix(employee)}"
        )
    raise ValueError(f"Unknown employee kind: {kind}")
