from __future__ import annotations

import csv
import io
from typing import Sequence

from ...users.model import User
from .base import EXPORT_FIELDS, ExportFormatter, export_row


class CsvExportFormatter(ExportFormatter):
    """Header row followed by one row per user."""

    media_type = "text/csv"
    extension = "csv"

    def render(self, users: Sequence[User]) -> str:
        out = io.StringIO()
        writer = csv.DictWriter(out, fieldnames=list(EXPORT_FIELDS), lineterminator="\n")
        writer.writeheader()
        for user in users:
            row = export_row(user)
            row["active"] = "true" if row["active"] else "false"
            row["id"] = "" if row["id"] is None else row["id"]
            writer.writerow(row)
        return out.getvalue()
