from __future__ import annotations

import logging

from ..common.store_guard import store_guard
from ..users.model import User
from ..users.repository import UserRepository
from .filters import SearchCriteria, filter_users
from .pagination import Page, paginate

logger = logging.getLogger(__name__)


class UserSearchService:
    def __init__(self, users: UserRepository):
        self._users = users

    def search(self, criteria: SearchCriteria, *, page: int, size: int) -> Page[User]:
        logger.debug("Searching users with filters %s (page=%s, size=%s)", criteria, page, size)
        with store_guard(logger, "searching users"):
            everyone = list(self._users.find_all())
        return paginate(filter_users(everyone, criteria), page, size)
