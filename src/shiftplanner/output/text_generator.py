"""Plain-text output for schedule review.

This module renders a weekly grid as a fixed-width table, one row per day
and one column per shift, followed by a per-employee workday summary.
"""

from pathlib import Path
from typing import Optional, Union

from shiftplanner.domain.models import SHIFTS, ScheduleResult

EMPTY_CELL = "None Assigned"


class TextGenerator:
    """Generates a human-readable text table of a schedule."""

    def __init__(self, column_width: int = 24):
        self.column_width = column_width

    def generate(
        self,
        schedule: ScheduleResult,
        output_path: Union[str, Path],
        employee_order: Optional[list[str]] = None,
    ) -> str:
        """Generate text output and save to file.

        Args:
            schedule: The scheduling run output.
            output_path: Path to save the text file.
            employee_order: Names in the order to list in the summary.

        Returns:
            The generated text content.
        """
        content = self._generate_content(schedule, employee_order)
        Path(output_path).write_text(content)
        return content

    def generate_to_string(
        self,
        schedule: ScheduleResult,
        employee_order: Optional[list[str]] = None,
    ) -> str:
        """Generate text output and return as string."""
        return self._generate_content(schedule, employee_order)

    def _generate_content(
        self,
        schedule: ScheduleResult,
        employee_order: Optional[list[str]],
    ) -> str:
        """Generate the full text content."""
        grid = schedule.grid
        width = self.column_width
        lines = []

        header = f"{'Day':<10}" + "".join(f"{s.value:<{width}}" for s in SHIFTS)
        lines.append("=" * len(header))
        lines.append("WEEKLY SCHEDULE")
        lines.append("=" * len(header))
        lines.append(header)
        lines.append("-" * len(header))

        for day in grid.cells:
            # A cell lists one name per line, so a day row may span several lines
            columns = [grid.cell(day, shift) or [EMPTY_CELL] for shift in SHIFTS]
            height = max(len(c) for c in columns)
            for i in range(height):
                label = day.value if i == 0 else ""
                row = f"{label:<10}"
                for names in columns:
                    text = names[i] if i < len(names) else ""
                    row += f"{text[:width - 1]:<{width}}"
                lines.append(row.rstrip())
            lines.append("-" * len(header))

        lines.append("")
        lines.append(
            f"Filled slots: {grid.filled_slots}/{grid.total_slots}"
        )

        names = employee_order or sorted(schedule.workdays)
        if names:
            lines.append("")
            lines.append("DAYS PER EMPLOYEE")
            for name in names:
                marker = " (unresolved)" if name in schedule.unresolved else ""
                lines.append(f"  {name:<20} {grid.days_worked(name)}{marker}")

        lines.append("")
        lines.append(schedule.status_message())
        lines.append("")
        return "\n".join(lines)
