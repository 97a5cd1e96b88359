"""Validation module for verifying schedule correctness.

This module provides a single source of truth for the grid constraints.
Every generated schedule should pass validation before being output.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Optional

from shiftplanner.domain.models import (
    DAYS,
    Day,
    Employee,
    ScheduleResult,
    Shift,
)
from shiftplanner.domain.policies import DefaultStaffingPolicy, StaffingPolicy


class ValidationErrorType(Enum):
    """Types of validation errors."""

    SHIFT_CAPACITY_EXCEEDED = "shift_capacity_exceeded"
    WEEKLY_DAYS_EXCEEDED = "weekly_days_exceeded"
    DOUBLE_BOOKED = "double_booked"
    DUPLICATE_IN_SHIFT = "duplicate_in_shift"
    UNKNOWN_EMPLOYEE = "unknown_employee"
    WORKDAY_COUNT_MISMATCH = "workday_count_mismatch"
    UNRESOLVED_AT_QUOTA = "unresolved_at_quota"


@dataclass
class ValidationError:
    """A single validation error."""

    error_type: ValidationErrorType
    message: str
    employee: Optional[str] = None
    day: Optional[Day] = None
    shift: Optional[Shift] = None
    details: dict = field(default_factory=dict)

    def __str__(self) -> str:
        parts = [f"[{self.error_type.value}]"]
        if self.employee:
            parts.append(f"Employee {self.employee}:")
        parts.append(self.message)
        if self.day is not None:
            where = self.day.value
            if self.shift is not None:
                where += f" {self.shift.value}"
            parts.append(f"({where})")
        return " ".join(parts)


@dataclass
class ValidationResult:
    """Result of validating a schedule."""

    is_valid: bool
    errors: list[ValidationError] = field(default_factory=list)
    warnings: list[str] = field(default_factory=list)

    def add_error(self, error: ValidationError) -> None:
        """Add an error and mark as invalid."""
        self.errors.append(error)
        self.is_valid = False

    def add_warning(self, warning: str) -> None:
        """Add a warning (doesn't affect validity)."""
        self.warnings.append(warning)


class ScheduleValidator:
    """Validates schedules against all constraints.

    Example:
        >>> validator = ScheduleValidator()
        >>> result = validator.validate(schedule_result, employees)
        >>> if not result.is_valid:
        ...     for error in result.errors:
        ...         print(error)
    """

    def __init__(self, policy: Optional[StaffingPolicy] = None):
        self.policy = policy or DefaultStaffingPolicy()

    def validate(
        self,
        schedule: ScheduleResult,
        employees: list[Employee],
    ) -> ValidationResult:
        """Validate a complete schedule.

        Args:
            schedule: The scheduling run output.
            employees: Employees the schedule was generated for.

        Returns:
            ValidationResult with is_valid flag and any errors.
        """
        result = ValidationResult(is_valid=True)
        known = {e.name for e in employees}

        self._validate_cells(schedule, known, result)
        self._validate_days(schedule, result)
        self._validate_workdays(schedule, employees, result)
        self._validate_unresolved(schedule, result)

        return result

    def _validate_cells(
        self,
        schedule: ScheduleResult,
        known: set[str],
        result: ValidationResult,
    ) -> None:
        """Check capacity, repeats and unknown names cell by cell."""
        cap = self.policy.max_per_shift()
        for day, shift, names in schedule.grid.iter_cells():
            if len(names) > cap:
                result.add_error(
                    ValidationError(
                        error_type=ValidationErrorType.SHIFT_CAPACITY_EXCEEDED,
                        message=f"{len(names)} assigned but capacity is {cap}",
                        day=day,
                        shift=shift,
                        details={"count": len(names), "cap": cap},
                    )
                )

            if len(set(names)) != len(names):
                result.add_error(
                    ValidationError(
                        error_type=ValidationErrorType.DUPLICATE_IN_SHIFT,
                        message="Same employee listed twice in one shift",
                        day=day,
                        shift=shift,
                    )
                )

            for name in names:
                if name not in known:
                    result.add_error(
                        ValidationError(
                            error_type=ValidationErrorType.UNKNOWN_EMPLOYEE,
                            message=f"Unknown employee: {name}",
                            employee=name,
                            day=day,
                            shift=shift,
                        )
                    )

    def _validate_days(
        self,
        schedule: ScheduleResult,
        result: ValidationResult,
    ) -> None:
        """Check that nobody holds two shifts on the same day."""
        for day in DAYS:
            seen: dict[str, Shift] = {}
            for shift, names in schedule.grid.cells[day].items():
                for name in set(names):
                    if name in seen:
                        result.add_error(
                            ValidationError(
                                error_type=ValidationErrorType.DOUBLE_BOOKED,
                                message=(
                                    f"Assigned to both {seen[name].value} "
                                    f"and {shift.value}"
                                ),
                                employee=name,
                                day=day,
                            )
                        )
                    else:
                        seen[name] = shift

    def _validate_workdays(
        self,
        schedule: ScheduleResult,
        employees: list[Employee],
        result: ValidationResult,
    ) -> None:
        """Check weekly day limits and that reported counts match the grid."""
        max_days = self.policy.max_days_per_week()
        for employee in employees:
            name = employee.name
            days = schedule.grid.days_worked(name)

            if days > max_days:
                result.add_error(
                    ValidationError(
                        error_type=ValidationErrorType.WEEKLY_DAYS_EXCEEDED,
                        message=f"Works {days} days, limit is {max_days}",
                        employee=name,
                        details={"days": days, "max_days": max_days},
                    )
                )

            reported = schedule.workdays.get(name)
            if reported is not None and reported != days:
                result.add_error(
                    ValidationError(
                        error_type=ValidationErrorType.WORKDAY_COUNT_MISMATCH,
                        message=f"Counter says {reported} days, grid shows {days}",
                        employee=name,
                        details={"reported": reported, "actual": days},
                    )
                )

            if days < max_days and name not in schedule.unresolved:
                result.add_warning(
                    f"{name} works {days} of {max_days} days but is not "
                    f"reported as unresolved"
                )

    def _validate_unresolved(
        self,
        schedule: ScheduleResult,
        result: ValidationResult,
    ) -> None:
        """Every unresolved employee must actually be short of the limit."""
        max_days = self.policy.max_days_per_week()
        for name in sorted(schedule.unresolved):
            days = schedule.grid.days_worked(name)
            if days >= max_days:
                result.add_error(
                    ValidationError(
                        error_type=ValidationErrorType.UNRESOLVED_AT_QUOTA,
                        message=f"Reported unresolved but works {days} days",
                        employee=name,
                    )
                )
