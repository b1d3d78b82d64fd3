"""Lookups over a pre-sorted employee list.

Both functions rely on the caller having sorted the list first (see
payroster.sdk.sorting). Neither checks that precondition: an unsorted
list gives an incomplete or wrong answer, never an exception.
"""

import logging
from typing import List, Optional, Sequence

logger = logging.getLogger(__name__)


def find_all_by_last_name(employees: Sequence, last_name: str) -> List:
    """Find every employee with the given last name, ignoring case.

    Expects employees sorted ascending by last name. Scans from the front
    and stops at the first last name that sorts after the target.

    Args:
        employees: Employees sorted by last name
        last_name: Last name to match, case-insensitive

    Returns:
        Matching employees in list order, or an empty list
    """
    target = last_name.lower()
    matches = []

    for index, employee in enumerate(employees):
        candidate = employee.last_name.lower()
        if candidate == target:
            matches.append(employee)
        elif candidate > target:
            logger.debug(f"last name scan for '{target}' stopped at index {index} ('{candidate}')")
            break

    return matches


def find_by_employee_number(employees: Sequence, employee_number: int) -> Optional[object]:
    """Binary search for one employee by number.

    Expects employees sorted ascending by employee number.

    Returns:
        The matching employee, or None if absent
    """
    low = 0
    high = len(employees) - 1

    while low <= high:
        mid = low + (high - low) // 2
        mid_number = employees[mid].employee_number

        if mid_number == employee_number:
            return employees[mid]
        elif mid_number < employee_number:
            low = mid + 1
        else:
            high = mid - 1

    return None
