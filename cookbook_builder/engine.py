"""
Layout engine for the cookbook PDF.

Walks the document blocks in order and places every line of text on a page,
tracking a vertical cursor and deciding where pages break:

- the cover is drawn at fixed positions on the first page
- each section header opens its own page
- recipes flow down the page; ingredient bullets, wrapped step lines and
  wrapped note lines each trigger a new page once the cursor passes the
  bottom threshold, and every recipe ends with a page break
- legacy recipes draw their title and notes from fixed offsets with no
  bottom-threshold check, then end with a page break

All per-run state (pages + cursor) is created inside ``layout()`` so an
engine instance can be reused for any number of runs.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import Callable, Dict, List, Optional, Sequence

from .errors import GenerationError
from .layout import LayoutConfig
from .logging_utils import get_logger
from .metrics import TextMetrics
from .models import (
    Cover,
    DocumentBlock,
    LegacyRecipeBlock,
    Page,
    RecipeBlock,
    SectionHeader,
    TextLine,
    TextStyle,
)
from .pages import PageController
from .text_wrap import wrap_text

logger = get_logger(__name__)

COVER_TITLE = "The Family Cookbook"
BULLET = "•"


@dataclass
class LayoutCursor:
    page_index: int = 0
    y: float = 0.0


def format_cover_date(value: date) -> str:
    return f"Created on {value.month}/{value.day}/{value.year}"


class LayoutEngine:
    def __init__(
        self,
        metrics: TextMetrics,
        config: LayoutConfig | None = None,
        generated_on: Optional[date] = None,
    ):
        self.metrics = metrics
        self.config = config or LayoutConfig()
        self.generated_on = generated_on
        self._handlers: Dict[type, Callable[[DocumentBlock, PageController, LayoutCursor], None]] = {
            Cover: self._layout_cover,
            SectionHeader: self._layout_section_header,
            RecipeBlock: self._layout_recipe,
            LegacyRecipeBlock: self._layout_legacy_recipe,
        }

    def layout(self, blocks: Sequence[DocumentBlock]) -> List[Page]:
        """Lay out ``blocks`` in order and return the finalized page list."""
        pages = PageController()
        cursor = LayoutCursor()
        pages.start_new_page()
        cursor.y = self.config.content_start

        for block in blocks:
            handler = self._handlers.get(type(block))
            if handler is None:
                raise GenerationError(f"Unsupported document block: {type(block).__name__}")
            handler(block, pages, cursor)

        result = pages.finalize()
        logger.info("Laid out %d blocks onto %d page(s)", len(blocks), len(result))
        return result

    # ---------------- Cursor + page helpers ----------------

    def _new_page(self, pages: PageController, cursor: LayoutCursor, y: float | None = None) -> None:
        pages.start_new_page()
        cursor.page_index = pages.current_index
        cursor.y = self.config.top_margin if y is None else y

    def _check_bottom(self, pages: PageController, cursor: LayoutCursor) -> None:
        if cursor.y > self.config.bottom_threshold:
            self._new_page(pages, cursor)

    def _emit(
        self,
        pages: PageController,
        cursor: LayoutCursor,
        text: str,
        x: float,
        advance: float,
        style: TextStyle = TextStyle.NORMAL,
        size: float | None = None,
    ) -> None:
        size = self.config.body_size if size is None else size
        pages.current_page().add(TextLine(content=text, x=x, y=cursor.y, style=style, size=size))
        cursor.y += advance

    def _place(self, pages, cursor, text, x, advance, style=TextStyle.NORMAL, size=None) -> None:
        # Labels and titles never start below the bottom threshold
        self._check_bottom(pages, cursor)
        self._emit(pages, cursor, text, x, advance, style, size)

    def _place_flowing(self, pages, cursor, text, x, advance) -> None:
        self._place(pages, cursor, text, x, advance)
        self._check_bottom(pages, cursor)

    def _centered(self, text: str, style: TextStyle, size: float) -> float:
        return self.config.center_x - self.metrics.measure_width(text, style, size) / 2

    def _draw_centered(self, page: Page, text: str, y: float, style: TextStyle, size: float) -> None:
        page.add(TextLine(content=text, x=self._centered(text, style, size), y=y, style=style, size=size))

    def _wrap(self, text: str) -> List[str]:
        return wrap_text(text, self.config.wrap_width, self.metrics, TextStyle.NORMAL, self.config.body_size)

    # ---------------- Block handlers ----------------

    def _layout_cover(self, block: Cover, pages: PageController, cursor: LayoutCursor) -> None:
        cfg = self.config
        page = pages.current_page()
        self._draw_centered(page, COVER_TITLE, cfg.cover_title_y, TextStyle.NORMAL, cfg.cover_title_size)
        if block.display_name:
            self._draw_centered(
                page, f"The {block.display_name} Family", cfg.cover_name_y, TextStyle.NORMAL, cfg.cover_name_size
            )
        generated_on = self.generated_on or date.today()
        self._draw_centered(page, format_cover_date(generated_on), cfg.cover_date_y, TextStyle.NORMAL, cfg.cover_date_size)

    def _layout_section_header(self, block: SectionHeader, pages: PageController, cursor: LayoutCursor) -> None:
        cfg = self.config
        # The previous recipe/legacy block already left a blank page behind; reuse it
        if pages.current_page().is_empty:
            cursor.page_index = pages.current_index
        else:
            self._new_page(pages, cursor)
        self._draw_centered(pages.current_page(), block.label, cfg.top_margin, TextStyle.BOLD, cfg.section_size)
        cursor.y = cfg.content_start
        logger.debug("Section %r on page %d", block.label, cursor.page_index + 1)

    def _layout_recipe(self, block: RecipeBlock, pages: PageController, cursor: LayoutCursor) -> None:
        cfg = self.config
        recipe = block.record
        if not recipe.title:
            raise GenerationError(f"Recipe {recipe.id!r} has no title")

        if cursor.y > cfg.recipe_start_threshold:
            self._new_page(pages, cursor)

        self._place(pages, cursor, recipe.title, cfg.margin_left, cfg.title_advance, TextStyle.BOLD, cfg.title_size)
        # An empty version tag still takes up its line
        if recipe.version_tag:
            self._place(pages, cursor, recipe.version_tag, cfg.margin_left, cfg.version_advance, TextStyle.ITALIC)
        else:
            cursor.y += cfg.version_advance

        self._place(pages, cursor, "Ingredients:", cfg.margin_left, cfg.label_advance, TextStyle.BOLD)
        for ingredient in recipe.ingredients:
            self._place_flowing(pages, cursor, f"{BULLET} {ingredient}", cfg.indent, cfg.line_advance)

        cursor.y += cfg.section_gap
        self._place(pages, cursor, "Instructions:", cfg.margin_left, cfg.label_advance, TextStyle.BOLD)
        for number, step in enumerate(recipe.steps, start=1):
            for line in self._wrap(f"{number}. {step}"):
                self._place_flowing(pages, cursor, line, cfg.indent, cfg.line_advance)
            cursor.y += cfg.step_gap

        if recipe.notes and recipe.notes.strip():
            cursor.y += cfg.section_gap
            self._place(pages, cursor, "Notes:", cfg.margin_left, cfg.label_advance, TextStyle.BOLD)
            for line in self._wrap(recipe.notes):
                self._place_flowing(pages, cursor, line, cfg.indent, cfg.line_advance)

        logger.debug("Recipe %r ends on page %d", recipe.title, cursor.page_index + 1)
        self._new_page(pages, cursor)

    def _layout_legacy_recipe(self, block: LegacyRecipeBlock, pages: PageController, cursor: LayoutCursor) -> None:
        cfg = self.config
        recipe = block.record
        if not recipe.title:
            raise GenerationError(f"Legacy recipe {recipe.id!r} has no title")

        self._draw_centered(pages.current_page(), recipe.title, cfg.legacy_title_y, TextStyle.BOLD, cfg.title_size)

        if recipe.notes and recipe.notes.strip():
            cursor.y = cfg.legacy_notes_y
            # No bottom-threshold check here: long legacy notes run past the printable area
            for line in self._wrap(recipe.notes):
                self._emit(pages, cursor, line, cfg.margin_left, cfg.line_advance)
            if cursor.y - cfg.line_advance > cfg.bottom_threshold:
                logger.warning("Legacy recipe %r notes run past the bottom of the page", recipe.title)

        self._new_page(pages, cursor)


__all__ = ["LayoutEngine", "LayoutCursor", "COVER_TITLE", "BULLET", "format_cover_date"]
