from __future__ import annotations

import json
from typing import Sequence

from ...users.model import User
from .base import ExportFormatter, export_row


class JsonExportFormatter(ExportFormatter):
    """JSON array, one object per user."""

    media_type = "application/json"
    extension = "json"

    def render(self, users: Sequence[User]) -> str:
        return json.dumps([export_row(u) for u in users], indent=2, ensure_ascii=False)
