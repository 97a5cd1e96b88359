"""Domain models and business rules for scheduling."""

from shiftplanner.domain.errors import (
    DuplicateEmployeeError,
    EmployeeNotFoundError,
    EmptyRosterError,
    IncompletePreferencesError,
    InvalidEmployeeError,
    EmptyScheduleError,
    RosterFormatError,
    SchedulingError,
)
from shiftplanner.domain.models import (
    DAYS,
    MAX_RANK,
    MIN_RANK,
    SHIFTS,
    Day,
    Employee,
    ScheduleGrid,
    ScheduleResult,
    Shift,
    WorkdayCounter,
)
from shiftplanner.domain.policies import DefaultStaffingPolicy, StaffingPolicy
from shiftplanner.domain.roster import EmployeeRoster

__all__ = [
    # Models
    "DAYS",
    "SHIFTS",
    "MIN_RANK",
    "MAX_RANK",
    "Day",
    "Shift",
    "Employee",
    "ScheduleGrid",
    "ScheduleResult",
    "WorkdayCounter",
    # Roster
    "EmployeeRoster",
    # Policies
    "StaffingPolicy",
    "DefaultStaffingPolicy",
    # Errors
    "SchedulingError",
    "EmptyRosterError",
    "IncompletePreferencesError",
    "InvalidEmployeeError",
    "DuplicateEmployeeError",
    "EmployeeNotFoundError",
    "RosterFormatError",
    "EmptyScheduleError",
]
