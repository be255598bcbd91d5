from __future__ import annotations

import logging
from contextlib import contextmanager
from typing import Iterator

from ..core.exceptions import DomainError, StoreError


@contextmanager
def store_guard(logger: logging.Logger, action: str) -> Iterator[None]:
    """Translate unexpected lower-layer failures into ``StoreError``.

    Domain errors pass through untouched. Anything else is logged with its
    traceback and replaced by a sanitized message for the caller.
    """

    try:
        yield
    except DomainError:
        raise
    except Exception as e:
        logger.exception("Store failure while %s", action)
        raise StoreError(f"Error {action}") from e
