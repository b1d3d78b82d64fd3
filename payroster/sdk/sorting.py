"""In-place ordering of an employee list.

SDK layer - pure logic. Both sorts mutate the caller's list; no copies
are made.

- quicksort(): by employee number, or by last name then first name
- sort_by_pay_descending(): selection sort on computed pay, with report lines
"""

import logging
from typing import Callable, List, MutableSequence, Optional

from .pay import compute_pay, display_name, format_amount

logger = logging.getLogger(__name__)


def precedes(employee, pivot, by_number: bool) -> bool:
    """True if employee belongs strictly before pivot in the active order.

    By name: last name first, first name breaks ties. Names compare
    case-sensitively by code point.
    """
    if by_number:
        return employee.employee_number < pivot.employee_number

    if employee.last_name < pivot.last_name:
        return True
    elif employee.last_name == pivot.last_name:
        return employee.first_name < pivot.first_name
    return False


def _swap(employees: MutableSequence, i: int, j: int) -> None:
    employees[i], employees[j] = employees[j], employees[i]


def _partition(employees: MutableSequence, low: int, high: int, by_number: bool) -> int:
    """Partition employees[low..high] around the last element.

    Returns the pivot's final index.
    """
    pivot = employees[high]
    i = low - 1

    for j in range(low, high):
        if precedes(employees[j], pivot, by_number):
            i += 1
            _swap(employees, i, j)

    _swap(employees, i + 1, high)
    return i + 1


def quicksort(employees: MutableSequence, by_number: bool) -> int:
    """Sort employees in place with a last-element-pivot quicksort.

    Sorted or reverse-sorted input is the O(n^2) worst case for this
    pivot choice. The smaller side is sorted by recursion and the larger
    side by looping, which keeps the stack shallow on such input without
    changing the order of work.

    Args:
        employees: Mutable list of employee records
        by_number: True for employee number order, False for name order

    Returns:
        Number of element comparisons made
    """
    comparisons = _quicksort(employees, 0, len(employees) - 1, by_number)
    logger.debug(
        f"quicksort by {'number' if by_number else 'name'}: "
        f"{len(employees)} employees, {comparisons} comparisons"
    )
    return comparisons


def _quicksort(employees: MutableSequence, low: int, high: int, by_number: bool) -> int:
    comparisons = 0
    while low < high:
        comparisons += high - low
        pivot_index = _partition(employees, low, high, by_number)

        if pivot_index - low < high - pivot_index:
            comparisons += _quicksort(employees, low, pivot_index - 1, by_number)
            low = pivot_index + 1
        else:
            comparisons += _quicksort(employees, pivot_index + 1, high, by_number)
            high = pivot_index - 1
    return comparisons


def format_pay_line(employee) -> str:
    """Report line: "last, first" left in 20 columns, "$amount" right in 10."""
    amount = "$" + format_amount(compute_pay(employee), 2)
    return f"{display_name(employee):<20} {amount:>10}"


def sort_by_pay_descending(
    employees: MutableSequence,
    emit: Optional[Callable[[str], None]] = None,
) -> List[str]:
    """Selection sort by computed pay, highest first, then report.

    Pay is recomputed on every comparison. Only a strictly greater pay
    replaces the current candidate, so among equal pays the one met first
    in the current arrangement is chosen.

    Args:
        employees: Mutable list of employee records
        emit: Optional callback receiving each report line in order

    Returns:
        Report lines in final sorted order
    """
    size = len(employees)

    for i in range(size - 1):
        max_index = i
        for j in range(i + 1, size):
            if compute_pay(employees[j]) > compute_pay(employees[max_index]):
                max_index = j
        _swap(employees, i, max_index)

    lines = [format_pay_line(employee) for employee in employees]
    if emit is not None:
        for line in lines:
            emit(line)
    return lines
