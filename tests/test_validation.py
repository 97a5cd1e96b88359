"""Tests for schedule validation."""

import random

import pytest

from shiftplanner.domain.models import (
    DAYS,
    Day,
    Employee,
    ScheduleGrid,
    ScheduleResult,
    Shift,
)
from shiftplanner.scheduling.scheduler import ScheduleOrchestrator
from shiftplanner.validation.validator import (
    ScheduleValidator,
    ValidationErrorType,
)


class TestScheduleValidator:
    """Tests for ScheduleValidator."""

    @pytest.fixture
    def validator(self):
        """Create a validator with the default policy."""
        return ScheduleValidator()

    @pytest.fixture
    def employees(self):
        return [
            Employee.with_default_preferences("Alice"),
            Employee.with_default_preferences("Bob"),
            Employee.with_default_preferences("Carol"),
        ]

    def _error_types(self, result):
        return {e.error_type for e in result.errors}

    def test_generated_schedule_is_valid(self, validator, employees):
        schedule = ScheduleOrchestrator(rng=random.Random(1)).run(employees)

        result = validator.validate(schedule, employees)

        assert result.is_valid, [str(e) for e in result.errors]
        assert result.warnings == []

    def test_capacity_exceeded(self, validator, employees):
        grid = ScheduleGrid(max_per_shift=3)
        for employee in employees:
            grid.try_place(Day.MONDAY, Shift.MORNING, employee.name)

        result = validator.validate(ScheduleResult(grid=grid), employees)

        assert not result.is_valid
        assert ValidationErrorType.SHIFT_CAPACITY_EXCEEDED in self._error_types(result)

    def test_double_booked(self, validator, employees):
        grid = ScheduleGrid()
        grid.try_place(Day.MONDAY, Shift.MORNING, "Alice")
        grid.try_place(Day.MONDAY, Shift.EVENING, "Alice")

        result = validator.validate(ScheduleResult(grid=grid), employees)

        errors = [e for e in result.errors if e.error_type == ValidationErrorType.DOUBLE_BOOKED]
        assert len(errors) == 1
        assert errors[0].employee == "Alice"
        assert "Monday" in str(errors[0])

    def test_duplicate_in_shift(self, validator, employees):
        grid = ScheduleGrid()
        grid.try_place(Day.MONDAY, Shift.MORNING, "Alice")
        grid.try_place(Day.MONDAY, Shift.MORNING, "Alice")

        result = validator.validate(ScheduleResult(grid=grid), employees)

        assert ValidationErrorType.DUPLICATE_IN_SHIFT in self._error_types(result)

    def test_weekly_days_exceeded(self, validator, employees):
        grid = ScheduleGrid()
        for day in DAYS[:6]:
            grid.try_place(day, Shift.MORNING, "Alice")

        result = validator.validate(ScheduleResult(grid=grid), employees)

        assert ValidationErrorType.WEEKLY_DAYS_EXCEEDED in self._error_types(result)

    def test_unknown_employee(self, validator, employees):
        grid = ScheduleGrid()
        grid.try_place(Day.TUESDAY, Shift.EVENING, "Mallory")

        result = validator.validate(ScheduleResult(grid=grid), employees)

        assert ValidationErrorType.UNKNOWN_EMPLOYEE in self._error_types(result)

    def test_workday_count_mismatch(self, validator, employees):
        grid = ScheduleGrid()
        grid.try_place(Day.MONDAY, Shift.MORNING, "Alice")

        result = validator.validate(
            ScheduleResult(grid=grid, workdays={"Alice": 2}), employees
        )

        assert ValidationErrorType.WORKDAY_COUNT_MISMATCH in self._error_types(result)

    def test_unresolved_at_quota(self, validator, employees):
        grid = ScheduleGrid()
        for day in DAYS[:5]:
            grid.try_place(day, Shift.MORNING, "Alice")

        result = validator.validate(
            ScheduleResult(grid=grid, unresolved={"Alice"}), employees
        )

        assert ValidationErrorType.UNRESOLVED_AT_QUOTA in self._error_types(result)

    def test_under_quota_without_unresolved_is_warning(self, validator, employees):
        grid = ScheduleGrid()
        grid.try_place(Day.MONDAY, Shift.MORNING, "Alice")

        result = validator.validate(
            ScheduleResult(grid=grid, unresolved={"Bob", "Carol"}), employees
        )

        assert result.is_valid
        assert len(result.warnings) == 1
        assert "Alice" in result.warnings[0]
