"""Pay Roster SDK - employee pay records, ordering and lookup."""

from .config import (
    get_config_dir,
    get_settings_path,
    load_settings,
    save_settings,
    get_setting,
    set_setting,
    get_roster_path,
    RosterNotFoundError,
)

from .schemas import (
    CommissionSchedule,
    SalariedEmployee,
    HourlyEmployee,
    CommissionEmployee,
    Employee,
    EMPLOYEE_KINDS,
    RosterFile,
)

from .employees import (
    EmployeeNumberAllocator,
    new_salaried,
    new_hourly,
    new_commissioned,
    set_hours,
    set_units_sold,
)

from .pay import (
    PAY_PERIODS_PER_YEAR,
    compute_pay,
    commission_amount,
    format_amount,
    display_name,
    describe,
)

from .sorting import (
    precedes,
    quicksort,
    sort_by_pay_descending,
    format_pay_line,
)

from .search import (
    find_all_by_last_name,
    find_by_employee_number,
)

from .roster import (
    Roster,
    RosterFileError,
    EmployeeNotFoundError,
    load_roster,
    sample_roster,
)

__all__ = [
    # Config
    "get_config_dir",
    "get_settings_path",
    "load_settings",
    "save_settings",
    "get_setting",
    "set_setting",
    "get_roster_path",
    "RosterNotFoundError",
    # Schemas
    "CommissionSchedule",
    "SalariedEmployee",
    "HourlyEmployee",
    "CommissionEmployee",
    "Employee",
    "EMPLOYEE_KINDS",
    "RosterFile",
    # Construction
    "EmployeeNumberAllocator",
    "new_salaried",
    "new_hourly",
    "new_commissioned",
    "set_hours",
    "set_units_sold",
    # Pay
    "PAY_PERIODS_PER_YEAR",
    "compute_pay",
    "commission_amount",
    "format_amount",
    "display_name",
    "describe",
    # Ordering
    "precedes",
    "quicksort",
    "sort_by_pay_descending",
    "format_pay_line",
    # Lookup
    "find_all_by_last_name",
    "find_by_employee_number",
    # Roster
    "Roster",
    "RosterFileError",
    "EmployeeNotFoundError",
    "load_roster",
    "sample_roster",
]
