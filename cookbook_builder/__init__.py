"""Family cookbook builder: lays out selected recipes into a paginated PDF."""

from .errors import CookbookError, EmptySelectionError, GenerationError
from .models import LegacyRecipeRecord, RecipeRecord, SelectionSet
from .pipelines import build_cookbook, generate_cookbook, write_artifact

__all__ = [
    "CookbookError",
    "EmptySelectionError",
    "GenerationError",
    "LegacyRecipeRecord",
    "RecipeRecord",
    "SelectionSet",
    "build_cookbook",
    "generate_cookbook",
    "write_artifact",
]
