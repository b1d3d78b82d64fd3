"""Pydantic schemas for pay-roster records.

All schemas use extra='forbid' to reject unknown fields, ensuring
typos in roster files cause clear errors rather than silent ignoring.

Employee records form a closed tagged union on ``kind``. Pay rules are
dispatched on that tag in ``payroster.sdk.pay`` rather than through
per-class methods.
"""

from typing import Annotated, List, Literal, Sequence, Tuple, Union

from pydantic import BaseModel, ConfigDict, Field, model_validator


# =============================================================================
# Commission schedule
# =============================================================================


class CommissionSchedule(BaseModel):
    """Step function from units sold to a per-unit commission rate.

    Thresholds are expected in ascending order. That ordering is a
    precondition of ``matched_rate`` and is not checked here.
    """

    model_config = ConfigDict(extra="forbid")

    thresholds: List[float] = Field(
        default_factory=list,
        description="Unit thresholds, ascending",
    )
    rates: List[float] = Field(
        default_factory=list,
        description="Per-unit rate paired with each threshold",
    )

    @model_validator(mode="after")
    def check_parallel(self) -> "CommissionSchedule":
        """Thresholds and rates must pair up one to one."""
        if len(self.thresholds) != len(self.rates):
            raise ValueError(
                f"schedule has {len(self.thresholds)} thresholds "
                f"but {len(self.rates)} rates"
            )
        return self

    @classmethod
    def from_rows(cls, rows: Sequence[Sequence[float]]) -> "CommissionSchedule":
        """Build a schedule from (threshold, rate) rows."""
        thresholds = []
        rates = []
        for row in rows:
            if len(row) != 2:
                raise ValueError(f"schedule row must be [threshold, rate], got: {list(row)}")
            thresholds.append(row[0])
            rates.append(row[1])
        return cls(thresholds=thresholds, rates=rates)

    def rows(self) -> List[Tuple[float, float]]:
        """Return the schedule as (threshold, rate) rows."""
        return list(zip(self.thresholds, self.rates))

    def matched_rate(self, units_sold: float) -> float:
        """Rate of the last threshold <= units_sold, or 0 if none qualifies.

        Stops at the first threshold above units_sold since no later
        threshold can match in an ascending schedule.
        """
        rate = 0.0
        for threshold, threshold_rate in zip(self.thresholds, self.rates):
            if threshold <= units_sold:
                rate = threshold_rate
            else:
                break
        return rate


# =============================================================================
# Employee records
# =============================================================================


class _EmployeeFields(BaseModel):
    """Identity and name fields shared by every record kind.

    The employee number and names are fixed at construction.
    """

    model_config = ConfigDict(extra="forbid")

    employee_number: int = Field(..., frozen=True, description="Creation-ordered identity")
    first_name: str = Field(..., frozen=True)
    last_name: str = Field(..., frozen=True)


class SalariedEmployee(_EmployeeFields):
    """Paid a fixed salary spread over 26 pay periods."""

    kind: Literal["salaried"] = Field(default="salaried", frozen=True)
    salary: float = Field(..., description="Annual salary")


class HourlyEmployee(_EmployeeFields):
    """Paid hours worked in the current period times an hourly rate."""

    kind: Literal["hourly"] = Field(default="hourly", frozen=True)
    rate: float = Field(..., description="Hourly rate")
    hours: float = Field(default=0.0, description="Hours worked this period")


class CommissionEmployee(_EmployeeFields):
    """Salaried base plus a per-unit commission from a schedule."""

    kind: Literal["commissioned"] = Field(default="commissioned", frozen=True)
    salary: float = Field(..., description="Annual base salary")
    schedule: CommissionSchedule = Field(default_factory=CommissionSchedule)
    units_sold: int = Field(default=0, description="Units sold this period")


Employee = Annotated[
    Union[SalariedEmployee, HourlyEmployee, CommissionEmployee],
    Field(discriminator="kind"),
]

EMPLOYEE_KINDS = ("salaried", "hourly", "commissioned")


# =============================================================================
# Roster file entries - no employee number, assigned on load
# =============================================================================


class SalariedEntry(BaseModel):
    """Salaried employee as written in a roster file."""

    model_config = ConfigDict(extra="forbid")

    type: Literal["salaried"]
    first_name: str
    last_name: str
    salary: float


class HourlyEntry(BaseModel):
    """Hourly employee as written in a roster file."""

    model_config = ConfigDict(extra="forbid")

    type: Literal["hourly"]
    first_name: str
    last_name: str
    rate: float
    hours: float = 0.0


class CommissionedEntry(BaseModel):
    """Commissioned employee as written in a roster file.

    ``schedule`` is a list of [threshold, rate] rows.
    """

    model_config = ConfigDict(extra="forbid")

    type: Literal["commissioned"]
    first_name: str
    last_name: str
    salary: float
    schedule: List[Tuple[float, float]] = Field(default_factory=list)
    units_sold: int = 0


RosterEntry = Annotated[
    Union[SalariedEntry, HourlyEntry, CommissionedEntry],
    Field(discriminator="type"),
]


class RosterFile(BaseModel):
    """Top-level roster YAML document."""

    model_config = ConfigDict(extra="forbid")

    employees: List[RosterEntry] = Field(default_factory=list)
