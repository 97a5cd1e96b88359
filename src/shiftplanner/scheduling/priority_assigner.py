"""First pass: preference-driven greedy assignment.

For each day, employees are visited strongest preference first and placed
into the best-ranked shift that still has room.
"""

import logging

from shiftplanner.domain.models import (
    DAYS,
    Day,
    Employee,
    ScheduleGrid,
    WorkdayCounter,
)

logger = logging.getLogger(__name__)


class PriorityAssigner:
    """Greedy per-day assignment by preference strength.

    Each day is handled independently:
    1. Rank employees by their best rank for the day (stable, so ties keep
       roster order)
    2. Skip anyone at the weekly limit or already working that day
    3. Place each employee in their best-ranked shift with capacity

    Shift capacity comes from the grid and the weekly limit from the
    workday counter.
    """

    def assign(
        self,
        employees: list[Employee],
        grid: ScheduleGrid,
        workdays: WorkdayCounter,
    ) -> int:
        """Run the pass over every day of the week.

        Args:
            employees: Employees in roster order.
            grid: Grid to fill in place.
            workdays: Day counter updated in place.

        Returns:
            Number of placements made.
        """
        placed = 0
        for day in DAYS:
            placed += self.assign_day(day, employees, grid, workdays)

        logger.info("Priority pass placed %d assignments", placed)
        return placed

    def assign_day(
        self,
        day: Day,
        employees: list[Employee],
        grid: ScheduleGrid,
        workdays: WorkdayCounter,
    ) -> int:
        """Assign employees for a single day."""
        placed = 0

        for employee in sorted(employees, key=lambda e: e.best_rank(day)):
            name = employee.name
            if workdays.is_at_quota(name) or grid.is_working_day(day, name):
                continue

            for shift in employee.shifts_by_preference(day):
                if grid.try_place(day, shift, name):
                    workdays.increment(name)
                    placed += 1
                    logger.debug("%s -> %s %s", name, day.value, shift.value)
                    break
            else:
                logger.debug("No open shift for %s on %s", name, day.value)

        return placed
