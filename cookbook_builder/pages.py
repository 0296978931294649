"""
Page list ownership for a single layout run.
"""

from __future__ import annotations

from typing import List

from .errors import LayoutError
from .logging_utils import get_logger
from .models import Page

logger = get_logger(__name__)


class PageController:
    """
    Owns the growing list of pages for one run. The last page in the list is
    always the current one; starting a new page closes the previous one.
    """

    def __init__(self):
        self.pages: List[Page] = []

    def start_new_page(self) -> Page:
        if self.pages:
            self.pages[-1].close()
        page = Page()
        self.pages.append(page)
        logger.debug("Started page %d", len(self.pages))
        return page

    def current_page(self) -> Page:
        if not self.pages:
            raise LayoutError("No page has been started yet")
        return self.pages[-1]

    @property
    def current_index(self) -> int:
        return len(self.pages) - 1

    @property
    def page_count(self) -> int:
        return len(self.pages)

    def finalize(self) -> List[Page]:
        """
        Drop the last page if it has no draw commands, then close the list.

        Only ever removes one page, even when several trailing pages are empty.
        """
        if self.pages and self.pages[-1].is_empty:
            self.pages.pop()
            logger.debug("Removed trailing blank page; %d page(s) remain", len(self.pages))
        if self.pages:
            self.pages[-1].close()
        return self.pages


__all__ = ["PageController"]
