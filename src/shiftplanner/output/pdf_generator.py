"""PDF generation for schedule output.

This module creates a printable weekly schedule showing:
- The day-by-shift grid with assigned names
- A summary of days worked per employee and any unresolved employees
"""

from io import BytesIO
from pathlib import Path
from typing import Optional, Union

from shiftplanner.domain.models import DAYS, SHIFTS, ScheduleResult

# Color definitions (RGB tuples, 0-1 scale)
COLORS = {
    "header": (0.85, 0.88, 0.95),  # Light blue
    "full": (0.85, 0.95, 0.85),  # Light green
    "partial": (1.0, 0.95, 0.75),  # Light yellow
    "empty": (0.97, 0.85, 0.85),  # Light red
}


class PDFGenerator:
    """Generates printable PDF schedules.

    Example:
        >>> generator = PDFGenerator()
        >>> generator.generate(result, "schedule.pdf")
    """

    def __init__(
        self,
        page_width: float = 792,  # Letter landscape width (11")
        page_height: float = 612,  # Letter landscape height (8.5")
        margin: float = 36,  # 0.5 inch margins
    ):
        self.page_width = page_width
        self.page_height = page_height
        self.margin = margin

    def generate(
        self,
        schedule: ScheduleResult,
        output_path: Union[str, Path],
        include_summary: bool = True,
        employee_order: Optional[list[str]] = None,
    ) -> None:
        """Generate PDF schedule and save to file.

        Args:
            schedule: The scheduling run output.
            output_path: Path to save the PDF.
            include_summary: Whether to include the summary page.
            employee_order: Names in the order to list in the summary.
        """
        canvas = self._import_canvas()
        c = canvas.Canvas(str(output_path), pagesize=(self.page_width, self.page_height))
        self._draw(c, schedule, include_summary, employee_order)
        c.save()

    def generate_to_buffer(
        self,
        schedule: ScheduleResult,
        include_summary: bool = True,
        employee_order: Optional[list[str]] = None,
    ) -> BytesIO:
        """Generate PDF and return as bytes buffer."""
        canvas = self._import_canvas()
        buffer = BytesIO()
        c = canvas.Canvas(buffer, pagesize=(self.page_width, self.page_height))
        self._draw(c, schedule, include_summary, employee_order)
        c.save()
        buffer.seek(0)
        return buffer

    @staticmethod
    def _import_canvas():
        try:
            from reportlab.pdfgen import canvas
        except ImportError:
            raise ImportError(
                "reportlab is required for PDF generation. "
                "Install with: pip install reportlab"
            )
        return canvas

    def _draw(
        self,
        c,
        schedule: ScheduleResult,
        include_summary: bool,
        employee_order: Optional[list[str]],
    ) -> None:
        self._draw_grid_page(c, schedule)
        if include_summary:
            self._draw_summary_page(c, schedule, employee_order)

    def _draw_grid_page(self, c, schedule: ScheduleResult) -> None:
        """Draw the weekly grid as a table."""
        grid = schedule.grid

        c.setFont("Helvetica-Bold", 16)
        c.drawString(self.margin, self.page_height - self.margin - 20, "Weekly Schedule")
        c.setFont("Helvetica", 10)
        c.drawString(
            self.margin,
            self.page_height - self.margin - 35,
            f"Filled slots: {grid.filled_slots}/{grid.total_slots}",
        )

        header_height = 60
        table_top = self.page_height - self.margin - header_height
        table_bottom = self.margin + 20
        day_col_width = 100
        shift_col_width = (self.page_width - 2 * self.margin - day_col_width) / len(SHIFTS)
        row_height = (table_top - table_bottom) / (len(DAYS) + 1)

        # Header row
        y = table_top - row_height
        c.setFillColorRGB(*COLORS["header"])
        c.rect(self.margin, y, self.page_width - 2 * self.margin, row_height, fill=1, stroke=1)
        c.setFillColorRGB(0, 0, 0)
        c.setFont("Helvetica-Bold", 11)
        c.drawString(self.margin + 6, y + row_height / 2 - 4, "Day")
        for i, shift in enumerate(SHIFTS):
            x = self.margin + day_col_width + i * shift_col_width
            c.drawString(x + 6, y + row_height / 2 - 4, shift.value)

        for day in DAYS:
            y -= row_height
            c.setFillColorRGB(0, 0, 0)
            c.setFont("Helvetica-Bold", 10)
            c.rect(self.margin, y, day_col_width, row_height, fill=0, stroke=1)
            c.drawString(self.margin + 6, y + row_height / 2 - 4, day.value)

            for i, shift in enumerate(SHIFTS):
                x = self.margin + day_col_width + i * shift_col_width
                names = grid.cell(day, shift)
                if not names:
                    color = COLORS["empty"]
                elif grid.has_capacity(day, shift):
                    color = COLORS["partial"]
                else:
                    color = COLORS["full"]

                c.setFillColorRGB(*color)
                c.rect(x, y, shift_col_width, row_height, fill=1, stroke=1)
                c.setFillColorRGB(0, 0, 0)
                c.setFont("Helvetica", 9)
                lines = names or ["None Assigned"]
                text_y = y + row_height - 14
                for name in lines:
                    c.drawString(x + 6, text_y, name[:40])
                    text_y -= 11

        c.showPage()

    def _draw_summary_page(
        self,
        c,
        schedule: ScheduleResult,
        employee_order: Optional[list[str]],
    ) -> None:
        """Draw summary page with days worked per employee."""
        grid = schedule.grid

        c.setFont("Helvetica-Bold", 16)
        c.drawString(self.margin, self.page_height - self.margin - 20, "Schedule Summary")

        y = self.page_height - self.margin - 55
        c.setFont("Helvetica", 10)
        for line in self._wrap(schedule.status_message(), 110):
            c.drawString(self.margin, y, line)
            y -= 14

        y -= 10
        c.setFont("Helvetica-Bold", 12)
        c.drawString(self.margin, y, "Days per Employee")
        y -= 18

        c.setFont("Helvetica", 10)
        names = employee_order or sorted(schedule.workdays)
        for name in names:
            if y < self.margin:
                c.showPage()
                c.setFont("Helvetica", 10)
                y = self.page_height - self.margin - 20
            suffix = "  (unresolved)" if name in schedule.unresolved else ""
            c.drawString(self.margin + 20, y, f"{name}: {grid.days_worked(name)}{suffix}")
            y -= 14

        c.showPage()

    @staticmethod
    def _wrap(text: str, width: int) -> list[str]:
        """Split text into lines of at most ``width`` characters on spaces."""
        lines: list[str] = []
        current = ""
        for word in text.split():
            if current and len(current) + 1 + len(word) > width:
                lines.append(current)
                current = word
            else:
                current = f"{current} {word}" if current else word
        if current:
            lines.append(current)
        return lines
