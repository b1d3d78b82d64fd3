"""Roster - an in-memory employee collection with its own number allocator.

Wraps the sort and search functions the way a payroll front end uses
them: sort by the key a lookup needs, then look up.

Roster files are YAML:

    employees:
      - type: salaried
        first_name: Nathan
        last_name: Diamond
        salary: 122000
      - type: hourly
        first_name: Jessica
        last_name: Mason
        rate: 17.5
      - type: commissioned
        first_name: Eric
        last_name: Wilson
        salary: 65000
        schedule: [[10, 0.5], [100, 1.2], [200, 2.0], [400, 3.0]]

Employees are numbered in file order starting at 0. Rosters are read
only; nothing is written back.
"""

import logging
import os
from pathlib import Path
from typing import Callable, Dict, List, Optional

import yaml
from pydantic import ValidationError

from .employees import (
    EmployeeNumberAllocator,
    ScheduleSpec,
    new_commissioned,
    new_hourly,
    new_salaried,
    set_hours,
    set_units_sold,
)
from .schemas import CommissionSchedule, Employee, RosterFile
from .search import find_all_by_last_name, find_by_employee_number
from .sorting import quicksort, sort_by_pay_descending

# Configure logging based on LOG_LEVEL environment variable
_log_level = os.environ.get("LOG_LEVEL", "INFO").upper()
logging.basicConfig(
    level=getattr(logging, _log_level, logging.INFO),
    format="%(asctime)s.%(msecs)03d %(levelname)s: %(message)s",
    datefmt="%H:%M:%S"
)
logger = logging.getLogger(__name__)

SAMPLE_ROSTER_PATH = Path(__file__).parent.parent / "data" / "sample_roster.yaml"


class RosterFileError(Exception):
    """Raised when a roster file can't be read or fails validation."""
    pass


class EmployeeNotFoundError(Exception):
    """Raised when a payroll entry names an unknown employee number."""
    pass


class Roster:
    """Employees plus the allocator that numbers them."""

    def __init__(self, allocator: Optional[EmployeeNumberAllocator] = None):
        self.allocator = allocator or EmployeeNumberAllocator()
        self.employees: List[Employee] = []

    def __len__(self) -> int:
        return len(self.employees)

    def __iter__(self):
        return iter(self.employees)

    def add_salaried(self, first_name: str, last_name: str, salary: float):
        employee = new_salaried(self.allocator, first_name, last_name, salary)
        self.employees.append(employee)
        return employee

    def add_hourly(self, first_name: str, last_name: str, rate: float):
        employee = new_hourly(self.allocator, first_name, last_name, rate)
        self.employees.append(employee)
        return employee

    def add_commissioned(
        self,
        first_name: str,
        last_name: str,
        salary: float,
        schedule: ScheduleSpec,
    ):
        employee = new_commissioned(self.allocator, first_name, last_name, salary, schedule)
        self.employees.append(employee)
        return employee

    def sort(self, by_number: bool) -> int:
        """Quicksort the roster in place. Returns the comparison count."""
        return quicksort(self.employees, by_number)

    def find_by_last_name(self, last_name: str) -> List:
        """Sort by name, then collect every case-insensitive last name match."""
        self.sort(by_number=False)
        return find_all_by_last_name(self.employees, last_name)

    def get(self, employee_number: int):
        """Sort by number, then binary search. Returns None if absent."""
        self.sort(by_number=True)
        return find_by_employee_number(self.employees, employee_number)

    def _require(self, employee_number: int):
        employee = self.get(employee_number)
        if employee is None:
            raise EmployeeNotFoundError(f"No employee found with ID {employee_number}")
        return employee

    def record_hours(self, employee_number: int, hours: float) -> None:
        """Enter this period's hours for an hourly employee.

        Raises:
            EmployeeNotFoundError: If no employee has that number
            ValueError: If the employee is not hourly
        """
        set_hours(self._require(employee_number), hours)

    def record_units(self, employee_number: int, units_sold: int) -> None:
        """Enter this period's units sold for a commissioned employee.

        Raises:
            EmployeeNotFoundError: If no employee has that number
            ValueError: If the employee is not commissioned
        """
        set_units_sold(self._require(employee_number), units_sold)

    def run_payroll(
        self,
        hours: Optional[Dict[int, float]] = None,
        units: Optional[Dict[int, int]] = None,
        emit: Optional[Callable[[str], None]] = None,
    ) -> List[str]:
        """Apply payroll entries, then order by pay (highest first).

        Args:
            hours: Hours worked by employee number (hourly employees)
            units: Units sold by employee number (commissioned employees)
            emit: Optional callback receiving each report line

        Returns:
            Report lines in descending pay order
        """
        for number, value in (hours or {}).items():
            self.record_hours(number, value)
        for number, value in (units or {}).items():
            self.record_units(number, value)

        logger.debug(
            f"payroll run: {len(self.employees)} employees, "
            f"{len(hours or {})} hours entries, {len(units or {})} units entries"
        )
        return sort_by_pay_descending(self.employees, emit=emit)


def roster_from_file_data(data: dict) -> Roster:
    """Build a roster from parsed roster YAML.

    Raises:
        pydantic.ValidationError: If data doesn't conform to schema
    """
    document = RosterFile.model_validate(data)
    roster = Roster()

    for entry in document.employees:
        if entry.type == "salaried":
            roster.add_salaried(entry.first_name, entry.last_name, entry.salary)
        elif entry.type == "hourly":
            employee = roster.add_hourly(entry.first_name, entry.last_name, entry.rate)
            set_hours(employee, entry.hours)
        elif entry.type == "commissioned":
            schedule = CommissionSchedule.from_rows(entry.schedule)
            employee = roster.add_commissioned(
                entry.first_name, entry.last_name, entry.salary, schedule
            )
            set_units_sold(employee, entry.units_sold)

    return roster


def load_roster(path: Path) -> Roster:
    """Load a roster YAML file.

    Args:
        path: Path to roster file

    Returns:
        Roster with employees numbered in file order

    Raises:
        RosterFileError: If the file is missing, not valid YAML, or fails
            schema validation
    """
    path = Path(path)
    if not path.exists():
        raise RosterFileError(f"Roster file not found: {path}")

    try:
        with open(path, "r") as f:
            data = yaml.safe_load(f) or {}
    except yaml.YAMLError as e:
        raise RosterFileError(f"Invalid YAML in {path}: {e}")

    if not isinstance(data, dict):
        raise RosterFileError(f"Roster must be a YAML dictionary, got {type(data).__name__}")

    try:
        roster = roster_from_file_data(data)
    except ValidationError as e:
        raise RosterFileError(f"Roster validation failed for {path}: {e}")

    logger.debug(f"loaded {len(roster)} employees from {path}")
    return roster


def sample_roster() -> Roster:
    """The bundled 52-employee sample roster."""
    return load_roster(SAMPLE_ROSTER_PATH)
