from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Dict, List, Tuple

import yaml
from pydantic import ValidationError

from .errors import ConfigFormatError, RecordFormatError
from .layout import LayoutConfig
from .logging_utils import get_logger
from .models import LegacyRecipeRecord, RecipeRecord
from .schemas import RecordExport

logger = get_logger(__name__)

DEFAULTS_CONFIG_PATH = Path(__file__).resolve().parent / "config" / "cookbook.defaults.yml"


def load_yaml_config(path: Path | None) -> Dict[str, Any]:
    """
    Load a single layout YAML config. Returns empty dict if no path is given
    or the file is missing.
    """
    if path is None or not Path(path).exists():
        return {}
    try:
        with open(path, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except (yaml.YAMLError, UnicodeDecodeError, OSError) as e:
        raise ConfigFormatError(f"Could not read layout config {path}: {e}") from e
    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ConfigFormatError(f"Layout config {path} must be a mapping, got {type(data).__name__}")
    return data


def merge_overrides(target: dict, override: dict):
    """
    Shallow merge of override dict into target; modifies target in place.
    Nested sections are updated key by key.
    """
    if not override:
        return
    for k, v in override.items():
        if isinstance(v, dict) and isinstance(target.get(k), dict):
            target[k].update(v)
        else:
            target[k] = v


def load_layout_config(path: Path | None = None) -> LayoutConfig:
    """
    Load defaults + overrides into a LayoutConfig.
    - Defaults live in cookbook.defaults.yml
    - User overrides live in a custom `path`
    """
    merged_cfg: Dict[str, Any] = {}
    merge_overrides(merged_cfg, load_yaml_config(DEFAULTS_CONFIG_PATH))
    if path is not None:
        if not Path(path).exists():
            logger.warning("Layout config not found: %s (using defaults)", path)
        merge_overrides(merged_cfg, load_yaml_config(path))
    return LayoutConfig.from_dict(merged_cfg)


# ---------------- Record exports ----------------

def _read_document(path: Path) -> Any:
    with open(path, "r", encoding="utf-8") as f:
        if path.suffix.lower() in (".yml", ".yaml"):
            return yaml.safe_load(f)
        return json.load(f)


def load_records(path: Path) -> Tuple[List[RecipeRecord], List[LegacyRecipeRecord]]:
    """
    Load an exported record file (JSON or YAML) with `recipes` and
    `legacyRecipes` lists. Collection order is preserved.
    """
    path = Path(path)
    if not path.exists():
        raise RecordFormatError(f"Record file not found: {path}")
    try:
        data = _read_document(path)
    except (json.JSONDecodeError, yaml.YAMLError, UnicodeDecodeError, OSError) as e:
        raise RecordFormatError(f"Could not parse {path}: {e}") from e

    if not isinstance(data, dict):
        raise RecordFormatError(f"{path} must contain a mapping with 'recipes' and 'legacyRecipes'")

    try:
        export = RecordExport.model_validate(data)
    except ValidationError as e:
        raise RecordFormatError(f"Invalid records in {path}: {e}") from e

    recipes = [doc.to_record() for doc in export.recipes]
    legacy = [doc.to_record() for doc in export.legacy_recipes]
    logger.info("Loaded %d recipes and %d legacy recipes from %s", len(recipes), len(legacy), path)
    return recipes, legacy


__all__ = [
    "load_yaml_config",
    "merge_overrides",
    "load_layout_config",
    "load_records",
    "DEFAULTS_CONFIG_PATH",
]
