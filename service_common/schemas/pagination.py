import math
from typing import Generic, TypeVar

from pydantic import BaseModel

T = TypeVar("T")


class ApplicationPage(BaseModel, Generic[T]):
    """Generic page of results shared by paginated endpoints."""

    page_number: int
    page_size: int
    total_pages: int
    total_elements: int
    is_last: bool
    is_first: bool
    content: list[T]

    @classmethod
    def build(
        cls, content: list[T], total_elements: int, page_number: int = 1, page_size: int = 100
    ) -> "ApplicationPage[T]":
        """
        Build a page from one slice of results and the overall count.

        Args:
            content: Items on this page
            total_elements: Number of items across all pages
            page_number: Page number (1-indexed)
            page_size: Number of items per page

        Returns:
            ApplicationPage with total_pages, is_first and is_last derived
        """
        total_pages = math.ceil(total_elements / page_size) if page_size > 0 else 0
        return cls(
            page_number=page_number,
            page_size=page_size,
            total_pages=total_pages,
            total_elements=total_elements,
            is_last=page_number >= total_pages,
            is_first=page_number <= 1,
            content=content,
        )
