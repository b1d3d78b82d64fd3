"""Employee construction and employee number allocation.

Numbers come from an explicit EmployeeNumberAllocator owned by whatever
builds the records (usually a Roster). One allocator hands out 0, 1, 2, ...
in creation order with no gaps or repeats.

Usage:
    from payroster.sdk.employees import EmployeeNumberAllocator, new_hourly

    allocator = EmployeeNumberAllocator()
    emp = new_hourly(allocator, "Jane", "Smith", 25.0)
    set_hours(emp, 40)
"""

import threading
from typing import Sequence, Tuple, Union

from .schemas import (
    CommissionEmployee,
    CommissionSchedule,
    HourlyEmployee,
    SalariedEmployee,
)


class EmployeeNumberAllocator:
    """Monotonic source of employee numbers.

    Never resets or goes backwards. The increment is lock-guarded so a
    shared allocator stays gapless if it is ever used from several threads.
    """

    def __init__(self, start: int = 0):
        self._next = start
        self._lock = threading.Lock()

    def next(self) -> int:
        """Return the next employee number and advance the counter."""
        with self._lock:
            number = self._next
            self._next += 1
        return number

    def peek(self) -> int:
        """Return the number the next call to next() will hand out."""
        return self._next


ScheduleSpec = Union[CommissionSchedule, Tuple[Sequence[float], Sequence[float]]]


def _coerce_schedule(schedule: ScheduleSpec) -> CommissionSchedule:
    if isinstance(schedule, CommissionSchedule):
        return schedule
    thresholds, rates = schedule
    return CommissionSchedule(thresholds=list(thresholds), rates=list(rates))


def new_salaried(
    allocator: EmployeeNumberAllocator,
    first_name: str,
    last_name: str,
    salary: float,
) -> SalariedEmployee:
    """Create a salaried employee with a freshly allocated number."""
    return SalariedEmployee(
        employee_number=allocator.next(),
        first_name=first_name,
        last_name=last_name,
        salary=salary,
    )


def new_hourly(
    allocator: EmployeeNumberAllocator,
    first_name: str,
    last_name: str,
    rate: float,
) -> HourlyEmployee:
    """Create an hourly employee with zero hours and a freshly allocated number."""
    return HourlyEmployee(
        employee_number=allocator.next(),
        first_name=first_name,
        last_name=last_name,
        rate=rate,
    )


def new_commissioned(
    allocator: EmployeeNumberAllocator,
    first_name: str,
    last_name: str,
    salary: float,
    schedule: ScheduleSpec,
) -> CommissionEmployee:
    """Create a commissioned employee with zero units sold.

    Args:
        allocator: Source of the employee number
        first_name: First name
        last_name: Last name
        salary: Annual base salary
        schedule: CommissionSchedule, or a (thresholds, rates) pair

    Returns:
        CommissionEmployee owning its own copy of the schedule

    Raises:
        pydantic.ValidationError: If thresholds and rates differ in length
    """
    # Validate the schedule before consuming a number.
    owned = _coerce_schedule(schedule).model_copy(deep=True)
    return CommissionEmployee(
        employee_number=allocator.next(),
        first_name=first_name,
        last_name=last_name,
        salary=salary,
        schedule=owned,
    )


def set_hours(employee, hours: float) -> None:
    """Record hours worked this period on an hourly employee.

    Raises:
        ValueError: If the employee is not hourly
    """
    if employee.kind != "hourly":
        raise ValueError(
            f"Employee {employee.employee_number} is {employee.kind}, not hourly"
        )
    employee.hours = hours


def set_units_sold(employee, units_sold: int) -> None:
    """Record units sold this period on a commissioned employee.

    Raises:
        ValueError: If the employee is not commissioned
    """
    if employee.kind != "commissioned":
        raise ValueError(
            f"Employee {employee.employee_number} is {employee.kind}, not commissioned"
        )
    employee.units_sold = units_sold
