"""
Column Paginator

Splits a dataset's columns into pages that each fit within the configured
maximum width.
"""

from typing import Iterator, List
import logging

from .models import DataPoint, Page
from .exceptions import ColumnTooWideForConfigError

logger = logging.getLogger(__name__)

# One terminal column is reserved for the y axis bar
AXIS_BAR_WIDTH = 1


class ColumnPaginator:
    """Assigns columns to pages, consuming them from the end of the sequence."""

    def next_page(self, remaining: List[DataPoint], max_width: int) -> Page:
        """
        Take the next page of columns off ``remaining``.

        Columns are popped from the tail while ``len(label) + 1`` fits in the
        width still available, so a page lists its columns in the reverse of
        their dataset order and the head of the dataset is paged last.

        Args:
            remaining: Columns not yet rendered; consumed in place
            max_width: Terminal columns available to one figure

        Returns:
            Page with its columns and the width left unused

        Raises:
            ColumnTooWideForConfigError: If the next column cannot fit on an empty page
        """
        page = Page(available_width=max_width - AXIS_BAR_WIDTH)
        while remaining:
            candidate = remaining[-1]
            needed = len(candidate.label) + 1
            if needed > page.available_width:
                break
            page.columns.append(remaining.pop())
            page.available_width -= needed

        if not page.columns and remaining:
            raise ColumnTooWideForConfigError(remaining[-1].label, max_width)

        logger.debug(f"Paged {len(page)} column(s), {page.available_width} width unused, {len(remaining)} left")
        return page

    def iter_pages(self, columns: List[DataPoint], max_width: int) -> Iterator[Page]:
        """Yield pages until every column is assigned. Does not modify ``columns``."""
        remaining = list(columns)
        while remaining:
            yield self.next_page(remaining, max_width)
