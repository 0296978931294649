"""
Pipeline entrypoints for building a family cookbook.

`generate_cookbook` is the in-memory run: blocks -> layout -> PDF bytes.
`build_cookbook` is the file-based run used by the CLI: it loads an exported
record file and the layout config, resolves the selections, generates the
cookbook and writes it next to the other exports.
"""

from __future__ import annotations

import os
import tempfile
from datetime import date
from pathlib import Path
from typing import Optional, Sequence

from .content import build_blocks, normalize_display_name
from .data_sources import load_layout_config, load_records
from .engine import LayoutEngine
from .errors import CookbookError, GenerationError
from .layout import LayoutConfig
from .logging_utils import get_logger
from .metrics import TextMetrics
from .models import (
    CookbookArtifact,
    CookbookConfig,
    LegacyRecipeRecord,
    RecipeRecord,
    SelectionSet,
)
from .renderers.pdf_renderer import ReportLabMetrics, assemble_artifact

logger = get_logger(__name__)


def generate_cookbook(
    recipes: Sequence[RecipeRecord],
    legacy_recipes: Sequence[LegacyRecipeRecord],
    recipe_selection: SelectionSet,
    legacy_selection: SelectionSet,
    display_name: Optional[str] = None,
    *,
    metrics: TextMetrics | None = None,
    layout_config: LayoutConfig | None = None,
    generated_on: Optional[date] = None,
) -> CookbookArtifact:
    """
    Run one complete assembly and return the finished artifact.

    Raises EmptySelectionError when nothing is selected and GenerationError
    for any other failure; no artifact exists in either case.
    """
    cfg = layout_config or LayoutConfig()
    display_name = normalize_display_name(display_name)
    try:
        blocks = build_blocks(recipes, legacy_recipes, recipe_selection, legacy_selection, display_name)
        engine = LayoutEngine(metrics or ReportLabMetrics(cfg), cfg, generated_on=generated_on)
        pages = engine.layout(blocks)
        return assemble_artifact(pages, display_name=display_name, config=cfg)
    except CookbookError:
        raise
    except Exception as e:
        raise GenerationError(f"Failed to generate cookbook: {e}") from e


def write_artifact(artifact: CookbookArtifact, output_dir: Path) -> Path:
    """
    Write the artifact into `output_dir`. The file only appears once it has
    been written completely.
    """
    output_dir = Path(output_dir)
    output_dir.mkdir(parents=True, exist_ok=True)
    target = output_dir / artifact.filename

    fd, tmp_name = tempfile.mkstemp(dir=output_dir, prefix=".cookbook-", suffix=".tmp")
    try:
        with os.fdopen(fd, "wb") as f:
            f.write(artifact.data)
        os.replace(tmp_name, target)
    except OSError as e:
        if os.path.exists(tmp_name):
            os.unlink(tmp_name)
        raise GenerationError(f"Failed to write {target}: {e}") from e
    return target


def _resolve_selection(records, ids, select_all: bool) -> SelectionSet:
    selection = SelectionSet()
    if select_all:
        selection.select_all(records)
        return selection
    known = {r.id for r in records}
    for record_id in ids:
        if record_id not in known:
            logger.warning("Selected id %r is not in the record file; skipping", record_id)
            continue
        selection.flags[record_id] = True
    return selection


def build_cookbook(config: CookbookConfig | None = None, generated_on: Optional[date] = None) -> Path:
    """
    Build the cookbook PDF using the supplied configuration and return its path.
    """
    cfg = config or CookbookConfig.default()
    layout_config = load_layout_config(cfg.layout_config_path)
    recipes, legacy = load_records(cfg.records_path)

    recipe_selection = _resolve_selection(recipes, cfg.recipe_ids, cfg.select_all)
    legacy_selection = _resolve_selection(legacy, cfg.legacy_ids, cfg.select_all)

    artifact = generate_cookbook(
        recipes,
        legacy,
        recipe_selection,
        legacy_selection,
        cfg.family_name,
        layout_config=layout_config,
        generated_on=generated_on,
    )
    path = write_artifact(artifact, cfg.output_dir)
    logger.info("Cookbook written to: %s", path)
    return path


__all__ = ["generate_cookbook", "write_artifact", "build_cookbook"]
