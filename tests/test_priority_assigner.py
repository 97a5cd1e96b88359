"""Tests for the preference-driven first pass."""

import pytest

from shiftplanner.domain.models import (
    DAYS,
    SHIFTS,
    Day,
    Employee,
    ScheduleGrid,
    Shift,
    WorkdayCounter,
)
from shiftplanner.scheduling.priority_assigner import PriorityAssigner


def make_employee(name: str, morning: int = 1, afternoon: int = 2, evening: int = 3) -> Employee:
    """Employee with the same shift ranks every day."""
    ranks = {Shift.MORNING: morning, Shift.AFTERNOON: afternoon, Shift.EVENING: evening}
    return Employee(name=name, preferences={day: dict(ranks) for day in DAYS})


class TestPriorityAssigner:
    """Tests for PriorityAssigner."""

    @pytest.fixture
    def assigner(self):
        return PriorityAssigner()

    def _state(self, employees, max_per_shift=2, max_days=5):
        grid = ScheduleGrid(max_per_shift=max_per_shift)
        workdays = WorkdayCounter([e.name for e in employees], max_days=max_days)
        return grid, workdays

    def test_places_in_best_ranked_shift(self, assigner):
        employee = make_employee("Alice", morning=3, afternoon=2, evening=1)
        grid, workdays = self._state([employee])

        assigner.assign_day(Day.MONDAY, [employee], grid, workdays)

        assert grid.cell(Day.MONDAY, Shift.EVENING) == ["Alice"]
        assert workdays.get("Alice") == 1

    def test_capacity_pushes_third_employee_to_next_shift(self, assigner):
        employees = [make_employee(n) for n in ("Alice", "Bob", "Carol")]
        grid, workdays = self._state(employees)

        assigner.assign_day(Day.MONDAY, employees, grid, workdays)

        assert grid.cell(Day.MONDAY, Shift.MORNING) == ["Alice", "Bob"]
        assert grid.cell(Day.MONDAY, Shift.AFTERNOON) == ["Carol"]

    def test_stronger_preference_placed_first(self, assigner):
        """An employee with a better best rank beats an earlier-listed one."""
        late = make_employee("Late", morning=2, afternoon=2, evening=3)
        early = make_employee("Early", morning=3, afternoon=1, evening=2)
        grid, workdays = self._state([late, early], max_per_shift=1)
        # Leave only Monday Morning open
        grid.try_place(Day.MONDAY, Shift.AFTERNOON, "Other1")
        grid.try_place(Day.MONDAY, Shift.EVENING, "Other2")

        assigner.assign_day(Day.MONDAY, [late, early], grid, workdays)

        assert grid.cell(Day.MONDAY, Shift.MORNING) == ["Early"]
        assert workdays.get("Late") == 0

    def test_equal_best_rank_keeps_list_order(self, assigner):
        first = make_employee("First", morning=2, afternoon=3, evening=3)
        second = make_employee("Second", morning=2, afternoon=3, evening=3)
        grid, workdays = self._state([first, second], max_per_shift=1)
        grid.try_place(Day.MONDAY, Shift.AFTERNOON, "Other1")
        grid.try_place(Day.MONDAY, Shift.EVENING, "Other2")

        assigner.assign_day(Day.MONDAY, [first, second], grid, workdays)

        assert grid.cell(Day.MONDAY, Shift.MORNING) == ["First"]

    def test_no_capacity_leaves_employee_unassigned(self, assigner):
        employee = make_employee("Alice")
        grid, workdays = self._state([employee], max_per_shift=1)
        for shift in SHIFTS:
            grid.try_place(Day.MONDAY, shift, f"Other{shift.value}")

        placed = assigner.assign_day(Day.MONDAY, [employee], grid, workdays)

        assert placed == 0
        assert not grid.is_working_day(Day.MONDAY, "Alice")

    def test_skips_employee_at_quota(self, assigner):
        employee = make_employee("Alice")
        grid, workdays = self._state([employee], max_days=1)
        workdays.increment("Alice")

        assigner.assign_day(Day.MONDAY, [employee], grid, workdays)

        assert not grid.is_working_day(Day.MONDAY, "Alice")

    def test_skips_employee_already_working_that_day(self, assigner):
        employee = make_employee("Alice")
        grid, workdays = self._state([employee])
        grid.try_place(Day.MONDAY, Shift.EVENING, "Alice")

        assigner.assign_day(Day.MONDAY, [employee], grid, workdays)

        assert grid.cell(Day.MONDAY, Shift.MORNING) == []
        assert workdays.get("Alice") == 0

    def test_full_week_stops_at_quota(self, assigner):
        employee = make_employee("Alice")
        grid, workdays = self._state([employee])

        placed = assigner.assign([employee], grid, workdays)

        assert placed == 5
        assert workdays.get("Alice") == 5
        worked = [d for d in DAYS if grid.is_working_day(d, "Alice")]
        assert worked == [Day.MONDAY, Day.TUESDAY, Day.WEDNESDAY, Day.THURSDAY, Day.FRIDAY]

    def test_counter_limit_bounds_week(self, assigner):
        employee = make_employee("Alice")
        grid, workdays = self._state([employee], max_days=3)

        assigner.assign([employee], grid, workdays)

        assert grid.days_worked("Alice") == 3

    def test_does_not_reorder_input_or_preferences(self, assigner):
        employees = [
            make_employee("Alice", morning=3, afternoon=3, evening=3),
            make_employee("Bob", morning=1, afternoon=2, evening=3),
        ]
        grid, workdays = self._state(employees)

        assigner.assign(employees, grid, workdays)

        assert [e.name for e in employees] == ["Alice", "Bob"]
        assert employees[0].get_rank(Day.MONDAY, Shift.MORNING) == 3
        assert SHIFTS == (Shift.MORNING, Shift.AFTERNOON, Shift.EVENING)
