"""CSV export of a weekly schedule grid.

One row per day and shift in week order, with the assigned names joined
into a single quoted field.
"""

import csv
import io
from pathlib import Path
from typing import Union

from shiftplanner.domain.errors import EmptyScheduleError
from shiftplanner.domain.models import ScheduleGrid

CSV_HEADERS = ["Day", "Shift", "Employees"]
NAME_SEPARATOR = ", "


class CSVExporter:
    """Writes a schedule grid as delimited text.

    The header row is written bare and every data field is quoted, so an
    empty cell comes out as ``""``.

    Example:
        >>> CSVExporter().export(result.grid, "employee_schedule.csv")
    """

    def export(self, grid: ScheduleGrid, output_path: Union[str, Path]) -> Path:
        """Write the grid to a CSV file and return its path.

        Raises:
            EmptyScheduleError: If no one is assigned anywhere in the grid.
        """
        self._check_not_empty(grid)
        path = Path(output_path)
        with path.open("w", encoding="utf-8", newline="") as handle:
            self._write(grid, handle)
        return path

    def export_to_string(self, grid: ScheduleGrid) -> str:
        """Render the grid as CSV text."""
        self._check_not_empty(grid)
        buffer = io.StringIO()
        self._write(grid, buffer)
        return buffer.getvalue()

    @staticmethod
    def _check_not_empty(grid: ScheduleGrid) -> None:
        if grid.is_empty():
            raise EmptyScheduleError(
                "No schedule to export. Please generate a schedule first."
            )

    def _write(self, grid: ScheduleGrid, handle) -> None:
        csv.writer(handle, lineterminator="\n").writerow(CSV_HEADERS)
        writer = csv.writer(handle, lineterminator="\n", quoting=csv.QUOTE_ALL)
        for day, shift, names in grid.iter_cells():
            writer.writerow([day.value, shift.value, NAME_SEPARATOR.join(names)])
