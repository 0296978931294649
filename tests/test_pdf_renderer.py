import pytest

from cookbook_builder.errors import GenerationError
from cookbook_builder.models import Page, TextLine, TextStyle
from cookbook_builder.renderers.pdf_renderer import (
    ReportLabMetrics,
    assemble_artifact,
    cookbook_filename,
    render_pdf,
)


@pytest.mark.parametrize(
    "display_name,expected",
    [
        ("Smith", "Smith_Family_Cookbook.pdf"),
        (None, "Family_Cookbook.pdf"),
        ("", "Family_Cookbook.pdf"),
    ],
)
def test_cookbook_filename(display_name, expected):
    assert cookbook_filename(display_name) == expected


def _pages():
    first = Page([TextLine("The Family Cookbook", 60, 80, TextStyle.NORMAL, 32)])
    second = Page(
        [
            TextLine("Soup", 20, 40, TextStyle.BOLD, 18),
            TextLine("old family version", 20, 50, TextStyle.ITALIC, 12),
            TextLine("• water", 25, 68),
        ]
    )
    return [first, second]


def test_render_pdf_produces_pdf_bytes():
    data = render_pdf(_pages())
    assert data.startswith(b"%PDF")
    assert b"/Count 2" in data


def test_render_pdf_without_pages_fails():
    with pytest.raises(GenerationError):
        render_pdf([])


def test_assemble_artifact_names_and_counts_pages():
    artifact = assemble_artifact(_pages(), display_name="Smith")
    assert artifact.filename == "Smith_Family_Cookbook.pdf"
    assert artifact.page_count == 2
    assert artifact.data.startswith(b"%PDF")


def test_reportlab_metrics_scale_with_size():
    metrics = ReportLabMetrics()
    small = metrics.measure_width("Grandma's soup", TextStyle.NORMAL, 12)
    large = metrics.measure_width("Grandma's soup", TextStyle.NORMAL, 24)
    assert small > 0
    assert large == pytest.approx(small * 2)
    assert metrics.measure_width("", TextStyle.BOLD, 12) == 0
