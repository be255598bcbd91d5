from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Callable, Optional

from ..common.datetime_utils import now_local
from ..common.store_guard import store_guard
from ..users.repository import UserRepository
from .factory import ExportFormatterFactory

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ExportDocument:
    content: str
    media_type: str
    filename: str


class UserExportService:
    def __init__(
        self,
        users: UserRepository,
        *,
        factory: Optional[ExportFormatterFactory] = None,
        clock: Callable = now_local,
    ):
        self._users = users
        self._factory = factory or ExportFormatterFactory()
        self._clock = clock

    def export(self, fmt: object) -> ExportDocument:
        formatter = self._factory.for_format(fmt)
        with store_guard(logger, "loading users for export"):
            users = list(self._users.find_all())
        logger.info("Exporting %s users as %s", len(users), formatter.extension)
        filename = f"users_{self._clock().strftime('%Y%m%d_%H%M%S')}.{formatter.extension}"
        return ExportDocument(content=formatter.render(users), media_type=formatter.media_type, filename=filename)
