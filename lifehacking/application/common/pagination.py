"""
Pagination types for list queries.

Example:
    query = FavoritesQuery(pagination=Pagination(page=2, page_size=10))
    page = await use_case.search(user_id, query)
    page.unwrap().total_pages
"""

from dataclasses import dataclass
from typing import Generic, TypeVar

T = TypeVar("T")

# Maximum allowed page size
MAX_PAGE_SIZE = 100


@dataclass(frozen=True)
class Pagination:
    """
    Pagination parameters for list queries.

    Attributes:
        page: Current page number (1-indexed)
        page_size: Number of items per page
    """

    page: int = 1
    page_size: int = 10

    def __post_init__(self) -> None:
        if self.page < 1:
            raise ValueError("Page must be at least 1")
        if self.page_size < 1:
            raise ValueError("Page size must be at least 1")
        if self.page_size > MAX_PAGE_SIZE:
            raise ValueError(f"Page size cannot exceed {MAX_PAGE_SIZE}")

    @property
    def offset(self) -> int:
        """Calculate the offset for database queries."""
        return (self.page - 1) * self.page_size

    @property
    def limit(self) -> int:
        return self.page_size


@dataclass(frozen=True)
class PaginatedResult(Generic[T]):
    """
    One page of items plus the total count across all pages.

    Attributes:
        items: Items for the current page
        total: Total number of matching items
        pagination: The pagination parameters used
    """

    items: list[T]
    total: int
    pagination: Pagination

    @property
    def page(self) -> int:
        return self.pagination.page

    @property
    def page_size(self) -> int:
        return self.pagination.page_size

    @property
    def total_pages(self) -> int:
        if self.total == 0:
            return 0
        return (self.total + self.pagination.page_size - 1) // self.pagination.page_size

    @property
    def has_next(self) -> bool:
        return self.pagination.page < self.total_pages

    @property
    def has_previous(self) -> bool:
        return self.pagination.page > 1
