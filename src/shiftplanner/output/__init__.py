"""Output generation for schedules (CSV, text, PDF)."""

from shiftplanner.output.csv_exporter import CSVExporter
from shiftplanner.output.pdf_generator import PDFGenerator
from shiftplanner.output.text_generator import TextGenerator

__all__ = [
    "CSVExporter",
    "PDFGenerator",
    "TextGenerator",
]
