"""
PDF renderer for the family cookbook.

Takes the finished page list from the layout engine and draws every text
line onto a reportlab canvas. Everything is rendered into memory first so a
failure part-way through never leaves a half-written file behind. The module
also provides the reportlab-backed text metrics the layout engine measures
with, so line breaks match the fonts that end up in the PDF.
"""

from __future__ import annotations

from io import BytesIO
from typing import Optional, Sequence

from reportlab.lib.units import mm
from reportlab.pdfbase.pdfmetrics import stringWidth
from reportlab.pdfgen import canvas

from ..errors import GenerationError
from ..layout import LayoutConfig, build_styles
from ..logging_utils import get_logger
from ..models import CookbookArtifact, Page, TextStyle

logger = get_logger(__name__)

FILENAME_STEM = "Family_Cookbook"
PDF_EXTENSION = ".pdf"


class ReportLabMetrics:
    """Measures text with reportlab's font metrics, returning millimetres."""

    def __init__(self, config: LayoutConfig | None = None):
        self.fonts = build_styles(config or LayoutConfig())

    def measure_width(self, text: str, style: TextStyle = TextStyle.NORMAL, size: float = 12) -> float:
        return stringWidth(text, self.fonts[style], size) / mm


def cookbook_filename(display_name: Optional[str]) -> str:
    prefix = f"{display_name}_" if display_name else ""
    return f"{prefix}{FILENAME_STEM}{PDF_EXTENSION}"


def render_pdf(pages: Sequence[Page], config: LayoutConfig | None = None, title: str | None = None) -> bytes:
    """
    Render the pages, in order, and return the PDF bytes.
    """
    if not pages:
        raise GenerationError("Nothing to render: the cookbook has no pages")

    cfg = config or LayoutConfig()
    fonts = build_styles(cfg)
    page_height = cfg.page_height

    buffer = BytesIO()
    c = canvas.Canvas(buffer, pagesize=(cfg.page_width * mm, page_height * mm))
    if title:
        c.setTitle(title)

    for page in pages:
        for command in page.commands:
            c.setFont(fonts[command.style], command.size)
            # Layout y runs down from the top edge; PDF y runs up from the bottom
            c.drawString(command.x * mm, (page_height - command.y) * mm, command.content)
        c.showPage()
    c.save()
    return buffer.getvalue()


def assemble_artifact(
    pages: Sequence[Page],
    display_name: Optional[str] = None,
    config: LayoutConfig | None = None,
) -> CookbookArtifact:
    filename = cookbook_filename(display_name)
    title = f"The {display_name} Family Cookbook" if display_name else "The Family Cookbook"
    data = render_pdf(pages, config=config, title=title)
    logger.info("Rendered %s (%d pages, %d bytes)", filename, len(pages), len(data))
    return CookbookArtifact(filename=filename, data=data, page_count=len(pages))


__all__ = ["ReportLabMetrics", "cookbook_filename", "render_pdf", "assemble_artifact"]
