from __future__ import annotations

from dataclasses import dataclass

from ..core.enums import ExportFormat
from .formatters.base import ExportFormatter
from .formatters.csv_formatter import CsvExportFormatter
from .formatters.json_formatter import JsonExportFormatter
from .formatters.xml_formatter import XmlExportFormatter


@dataclass
class ExportFormatterFactory:
    """Factory Pattern: choose the formatter for a format token."""

    def for_format(self, token: object) -> ExportFormatter:
        fmt = ExportFormat.parse(token)
        if fmt == ExportFormat.JSON:
            return JsonExportFormatter()
        if fmt == ExportFormat.CSV:
            return CsvExportFormatter()
        return XmlExportFormatter()
