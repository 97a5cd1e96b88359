"""Second pass: backfill toward the weekly day limit, then fill open slots.

Part A walks employees in roster order and keeps placing each one on the
earliest unworked day with room until they reach the weekly limit or no
day fits. Part B fills any cells still below capacity with a uniformly
random choice among the remaining eligible employees.
"""

import logging
import random
from typing import Optional

from shiftplanner.domain.models import (
    DAYS,
    SHIFTS,
    Day,
    Employee,
    ScheduleGrid,
    Shift,
    WorkdayCounter,
)

logger = logging.getLogger(__name__)


class SlotFiller:
    """Constrained backfill with randomized residual fill.

    Limits come from the grid and workday counter passed to each call.

    Args:
        rng: Random source for residual fill choices. Pass a seeded
            ``random.Random`` for reproducible schedules.
    """

    def __init__(self, rng: Optional[random.Random] = None):
        self.rng = rng or random.Random()

    def fill(
        self,
        employees: list[Employee],
        grid: ScheduleGrid,
        workdays: WorkdayCounter,
    ) -> set[str]:
        """Run both parts of the pass.

        Returns:
            Names the backfill could not bring to the weekly limit.
        """
        unresolved = self.backfill(employees, grid, workdays)
        self.fill_residual(employees, grid, workdays, unresolved)
        return unresolved

    def backfill(
        self,
        employees: list[Employee],
        grid: ScheduleGrid,
        workdays: WorkdayCounter,
    ) -> set[str]:
        """Part A: push each employee toward the weekly day limit."""
        unresolved: set[str] = set()

        for employee in employees:
            name = employee.name
            while not workdays.is_at_quota(name):
                if self._place_on_first_open_day(employee, grid, workdays) is None:
                    unresolved.add(name)
                    logger.debug(
                        "%s stuck at %d days", name, workdays.get(name)
                    )
                    break

        logger.info("Backfill left %d employees unresolved", len(unresolved))
        return unresolved

    def _place_on_first_open_day(
        self,
        employee: Employee,
        grid: ScheduleGrid,
        workdays: WorkdayCounter,
    ) -> Optional[tuple[Day, Shift]]:
        """Place an employee on the earliest unworked day with room."""
        name = employee.name
        for day in DAYS:
            if grid.is_working_day(day, name):
                continue
            for shift in employee.shifts_by_preference(day):
                if grid.try_place(day, shift, name):
                    workdays.increment(name)
                    logger.debug("Backfilled %s -> %s %s", name, day.value, shift.value)
                    return day, shift
        return None

    def fill_residual(
        self,
        employees: list[Employee],
        grid: ScheduleGrid,
        workdays: WorkdayCounter,
        unresolved: set[str],
    ) -> int:
        """Part B: fill open cells with random eligible employees.

        Cells that run out of eligible candidates are left partly empty.

        Returns:
            Number of placements made.
        """
        placed = 0
        for day in DAYS:
            for shift in SHIFTS:
                while grid.has_capacity(day, shift):
                    candidates = self.eligible_candidates(
                        day, shift, employees, grid, workdays, unresolved
                    )
                    if not candidates:
                        break
                    chosen = self.rng.choice(candidates)
                    grid.try_place(day, shift, chosen.name)
                    workdays.increment(chosen.name)
                    placed += 1
                    logger.debug(
                        "Randomly filled %s %s with %s",
                        day.value, shift.value, chosen.name,
                    )

        if placed:
            logger.info("Residual fill placed %d assignments", placed)
        return placed

    def eligible_candidates(
        self,
        day: Day,
        shift: Shift,
        employees: list[Employee],
        grid: ScheduleGrid,
        workdays: WorkdayCounter,
        unresolved: set[str],
    ) -> list[Employee]:
        """Employees who may legally take an open slot in a cell."""
        cell = grid.cell(day, shift)
        return [
            e for e in employees
            if not workdays.is_at_quota(e.name)
            and e.name not in cell
            and e.name not in unresolved
            and not any(
                e.name in grid.cell(day, other)
                for other in SHIFTS if other is not shift
            )
        ]
