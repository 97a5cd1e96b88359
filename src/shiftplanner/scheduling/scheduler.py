"""Main scheduler interface.

This module provides the ScheduleOrchestrator class that runs the priority
pass and the fill pass over a fresh grid and reports who could not be fully
scheduled.
"""

import logging
import random
from typing import Optional

from shiftplanner.domain.errors import DuplicateEmployeeError, EmptyRosterError
from shiftplanner.domain.models import (
    Employee,
    ScheduleGrid,
    ScheduleResult,
    WorkdayCounter,
)
from shiftplanner.domain.policies import DefaultStaffingPolicy, StaffingPolicy
from shiftplanner.scheduling.priority_assigner import PriorityAssigner
from shiftplanner.scheduling.slot_filler import SlotFiller

logger = logging.getLogger(__name__)


class ScheduleOrchestrator:
    """High-level scheduler for generating weekly shift grids.

    Every call to ``run`` builds its own grid and workday counter, so one
    orchestrator can be reused and several can run side by side.

    Example:
        >>> orchestrator = ScheduleOrchestrator(rng=random.Random(42))
        >>> result = orchestrator.run(employees)
        >>> result.grid.cell(Day.MONDAY, Shift.MORNING)
        ['Alice', 'Bob']
    """

    def __init__(
        self,
        policy: Optional[StaffingPolicy] = None,
        rng: Optional[random.Random] = None,
    ):
        """Initialize scheduler with a staffing policy and random source.

        Args:
            policy: Shift capacity and weekly day limits.
            rng: Random source for residual slot fill.
        """
        self.policy = policy or DefaultStaffingPolicy()
        self.rng = rng or random.Random()

        self.priority_assigner = PriorityAssigner()
        self.slot_filler = SlotFiller(rng=self.rng)

    def run(self, employees: list[Employee]) -> ScheduleResult:
        """Generate a weekly schedule.

        Args:
            employees: Employees in roster order, each with all 21 ranks.

        Returns:
            ScheduleResult with the grid and unresolved employees.

        Raises:
            EmptyRosterError: If no employees are supplied.
            DuplicateEmployeeError: If two names match case-insensitively.
            IncompletePreferencesError: If any employee lacks a valid rank.
        """
        snapshot = self._snapshot(employees)

        grid = ScheduleGrid(max_per_shift=self.policy.max_per_shift())
        workdays = WorkdayCounter(
            [e.name for e in snapshot],
            max_days=self.policy.max_days_per_week(),
        )

        self.priority_assigner.assign(snapshot, grid, workdays)
        backfill_unresolved = self.slot_filler.fill(snapshot, grid, workdays)

        # Anyone still under the limit had no eligible cell left in the fill
        unresolved = set(workdays.under_quota())

        if unresolved:
            logger.warning(
                "Partial schedule: %s could not be fully scheduled",
                ", ".join(sorted(unresolved)),
            )
        else:
            logger.info("Scheduled %d employees", len(snapshot))

        return ScheduleResult(
            grid=grid,
            unresolved=unresolved,
            workdays=workdays.as_dict(),
            backfill_unresolved=backfill_unresolved,
        )

    def _snapshot(self, employees: list[Employee]) -> list[Employee]:
        """Check preconditions and copy the input records."""
        if not employees:
            raise EmptyRosterError(
                "Please add employees before generating a schedule."
            )

        seen: set[str] = set()
        for employee in employees:
            if employee.key in seen:
                raise DuplicateEmployeeError(
                    f"Employee '{employee.name}' appears more than once"
                )
            seen.add(employee.key)
            employee.ensure_complete()

        return [e.copy() for e in employees]

    def generate_schedule_with_stats(
        self,
        employees: list[Employee],
    ) -> tuple[ScheduleResult, dict]:
        """Generate schedule and return statistics.

        Args:
            employees: Employees to schedule.

        Returns:
            Tuple of (result, stats_dict).
        """
        result = self.run(employees)

        stats = self._calculate_stats(result, employees)

        return result, stats

    def _calculate_stats(
        self,
        result: ScheduleResult,
        employees: list[Employee],
    ) -> dict:
        """Calculate schedule statistics."""
        grid = result.grid
        days_by_employee = {e.name: grid.days_worked(e.name) for e in employees}
        avg_days = (
            sum(days_by_employee.values()) / len(days_by_employee)
            if days_by_employee
            else 0
        )

        return {
            "total_employees": len(employees),
            "total_slots": grid.total_slots,
            "filled_slots": grid.filled_slots,
            "open_slots": sum(grid.open_slots(day, shift) for day, shift, _ in grid.iter_cells()),
            "days_by_employee": days_by_employee,
            "avg_days_per_employee": avg_days,
            "fully_scheduled": len(employees) - len(result.unresolved),
            "unresolved": sorted(result.unresolved),
        }
