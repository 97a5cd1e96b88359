"""Smoke tests for end-to-end scheduling flow."""

import random

import pytest

from shiftplanner.domain.models import DAYS, SHIFTS, Employee
from shiftplanner.domain.roster import EmployeeRoster
from shiftplanner.output.csv_exporter import CSVExporter
from shiftplanner.scheduling.scheduler import ScheduleOrchestrator
from shiftplanner.validation.validator import ScheduleValidator


class TestSmoke:
    """End-to-end smoke tests for the scheduling system."""

    @pytest.fixture
    def validator(self):
        """Create a validator with the default policy."""
        return ScheduleValidator()

    def _create_test_employees(self, count: int) -> list[Employee]:
        """Create test employees with varied preferences."""
        rng = random.Random(count)
        employees = []

        for i in range(count):
            preferences = {}
            for day in DAYS:
                ranks = [1, 2, 3]
                if i % 4 == 0:
                    # Morning people
                    pass
                elif i % 4 == 1:
                    # Evening people
                    ranks.reverse()
                else:
                    rng.shuffle(ranks)
                preferences[day] = dict(zip(SHIFTS, ranks))

            employees.append(Employee(name=f"Employee {i + 1}", preferences=preferences))

        return employees

    @pytest.mark.parametrize("count", [1, 4, 8, 12, 20])
    def test_smoke_schedule_is_valid(self, validator, count):
        """Generate and validate schedules for rosters of varied size."""
        employees = self._create_test_employees(count)

        result = ScheduleOrchestrator(rng=random.Random(count)).run(employees)
        validation = validator.validate(result, employees)

        assert validation.is_valid, f"Validation failed with errors: {[str(e) for e in validation.errors]}"
        assert validation.warnings == []
        assert result.grid.filled_slots > 0

    def test_smoke_greedy_leaves_late_employees_short(self):
        """Eight employees would fit in 42 slots, but the first six take
        Monday to Friday and the last two only get the weekend."""
        employees = self._create_test_employees(8)

        result = ScheduleOrchestrator(rng=random.Random(0)).run(employees)

        assert result.unresolved == {"Employee 7", "Employee 8"}
        assert result.grid.filled_slots == 34
        assert result.grid.days_worked("Employee 7") == 2

    def test_smoke_large_roster_fills_grid(self):
        """With far more demand than slots, every slot should be used."""
        employees = self._create_test_employees(20)

        result = ScheduleOrchestrator(rng=random.Random(0)).run(employees)

        assert result.grid.filled_slots == result.grid.total_slots
        assert result.unresolved

    def test_smoke_roster_round_trip(self, tmp_path):
        """Roster saved to disk produces the same seeded schedule after loading."""
        employees = self._create_test_employees(10)
        path = tmp_path / "employees.json"
        EmployeeRoster(employees).save(path)

        loaded = EmployeeRoster.load(path).snapshot()
        first = ScheduleOrchestrator(rng=random.Random(2)).run(employees)
        second = ScheduleOrchestrator(rng=random.Random(2)).run(loaded)

        exporter = CSVExporter()
        assert exporter.export_to_string(first.grid) == exporter.export_to_string(second.grid)
