from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import Any, Dict, Generic, List, Sequence, TypeVar

from ..core.exceptions import InvalidPageNumberError, InvalidPageSizeError

T = TypeVar("T")


@dataclass(frozen=True)
class Page(Generic[T]):
    items: List[T] = field(default_factory=list)
    page: int = 0
    size: int = 0
    total_elements: int = 0

    @property
    def total_pages(self) -> int:
        return math.ceil(self.total_elements / self.size) if self.size else 0

    @property
    def has_next(self) -> bool:
        return self.page + 1 < self.total_pages

    def to_dict(self, item_to_dict=lambda x: x) -> Dict[str, Any]:
        return {
            "content": [item_to_dict(i) for i in self.items],
            "page": self.page,
            "size": self.size,
            "total_elements": self.total_elements,
            "total_pages": self.total_pages,
            "has_next": self.has_next,
        }


def paginate(items: Sequence[T], page: int, size: int) -> Page[T]:
    """Zero-based page slicing.

    A page past the end is an empty page, not an error; only a non-positive
    size or a negative page number is rejected.
    """

    if size <= 0:
        raise InvalidPageSizeError(f"Page size must be greater than 0, got {size}")
    if page < 0:
        raise InvalidPageNumberError(f"Page number must not be negative, got {page}")

    total = len(items)
    start = page * size
    if start >= total:
        return Page(items=[], page=page, size=size, total_elements=total)

    end = min(start + size, total)
    return Page(items=list(items[start:end]), page=page, size=size, total_elements=total)
