import math
from dataclasses import dataclass

from kmdb.errors import ValidationFailed

MAX_PAGE_SIZE = 100


@dataclass
class Page:
    items: list
    total: int
    page: int
    size: int

    @property
    def total_pages(self):
        return math.ceil(self.total / self.size) if self.size > 0 else 1


def validate_pagination(page, size):
    if page < 0:
        raise ValidationFailed("Invalid page parameters: page number can't be < 0")
    if size > MAX_PAGE_SIZE:
        raise ValidationFailed(
            f"Invalid pagination parameters: page size must be <= {MAX_PAGE_SIZE}"
        )
    if size < 1:
        raise ValidationFailed(
            f"Invalid pagination parameters: Page size must be 1 to {MAX_PAGE_SIZE}"
        )


def paginate(repository, page, size, mapper):
    """Zero-based page of ``repository`` entities, mapped with ``mapper``."""
    validate_pagination(page, size)
    total = repository.count()
    offset = page * size
    # pages past the last row are empty, however large the offset
    entities = repository.find_page(offset=offset, limit=size) if offset < total else []
    return Page(
        items=[mapper(entity) for entity in entities],
        total=total,
        page=page,
        size=size,
    )
