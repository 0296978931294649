"""
Content model: turns the record collections and the user's selections into
the ordered list of document blocks the layout engine consumes.
"""

from __future__ import annotations

from typing import List, Optional, Sequence

from .errors import EmptySelectionError
from .logging_utils import get_logger
from .models import (
    Cover,
    DocumentBlock,
    LegacyRecipeBlock,
    LegacyRecipeRecord,
    RecipeBlock,
    RecipeRecord,
    SectionHeader,
    SelectionSet,
)

logger = get_logger(__name__)

RECIPES_LABEL = "Recipes"
LEGACY_RECIPES_LABEL = "Legacy Recipes"


def normalize_display_name(name: Optional[str]) -> Optional[str]:
    if name is None:
        return None
    name = name.strip()
    return name or None


def build_blocks(
    recipes: Sequence[RecipeRecord],
    legacy_recipes: Sequence[LegacyRecipeRecord],
    recipe_selection: SelectionSet,
    legacy_selection: SelectionSet,
    display_name: Optional[str] = None,
) -> List[DocumentBlock]:
    """
    Build the block sequence: cover, then the selected recipes under a
    "Recipes" header, then the selected legacy recipes under a
    "Legacy Recipes" header.

    Records keep the order of their collection, not the order they were
    selected in. Raises EmptySelectionError when nothing is selected.
    """
    if not recipe_selection.any_selected() and not legacy_selection.any_selected():
        raise EmptySelectionError()

    blocks: List[DocumentBlock] = [Cover(display_name=normalize_display_name(display_name))]

    selected_recipes = recipe_selection.filter(recipes)
    if selected_recipes:
        blocks.append(SectionHeader(RECIPES_LABEL))
        blocks.extend(RecipeBlock(r) for r in selected_recipes)

    selected_legacy = legacy_selection.filter(legacy_recipes)
    if selected_legacy:
        blocks.append(SectionHeader(LEGACY_RECIPES_LABEL))
        blocks.extend(LegacyRecipeBlock(r) for r in selected_legacy)

    logger.info(
        "Built %d blocks (%d recipes, %d legacy recipes)",
        len(blocks),
        len(selected_recipes),
        len(selected_legacy),
    )
    return blocks


__all__ = ["build_blocks", "normalize_display_name", "RECIPES_LABEL", "LEGACY_RECIPES_LABEL"]
