from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import Dict, Iterable, List, Optional, Tuple, Union

from .errors import LayoutError


# ---------------- Records ----------------

@dataclass(frozen=True)
class RecipeRecord:
    """A structured recipe as stored by the app."""

    id: str
    title: str
    version_tag: str = ""
    ingredients: Tuple[str, ...] = ()
    steps: Tuple[str, ...] = ()
    notes: Optional[str] = None


@dataclass(frozen=True)
class LegacyRecipeRecord:
    """An uploaded legacy recipe: a title and free-form notes only."""

    id: str
    title: str
    notes: Optional[str] = None


Record = Union[RecipeRecord, LegacyRecipeRecord]


@dataclass
class SelectionSet:
    """
    Record id -> include flag. Ids that are missing from the mapping are
    treated as not selected.
    """

    flags: Dict[str, bool] = field(default_factory=dict)

    @classmethod
    def of(cls, ids: Iterable[str]) -> "SelectionSet":
        return cls({record_id: True for record_id in ids})

    def is_selected(self, record_id: str) -> bool:
        return bool(self.flags.get(record_id, False))

    def any_selected(self) -> bool:
        return any(self.flags.values())

    def toggle(self, record_id: str) -> None:
        self.flags[record_id] = not self.is_selected(record_id)

    def select_all(self, records: Iterable[Record]) -> None:
        self.flags = {r.id: True for r in records}

    def deselect_all(self, records: Iterable[Record]) -> None:
        self.flags = {r.id: False for r in records}

    def filter(self, records: Iterable[Record]) -> List[Record]:
        """Selected records, in collection order."""
        return [r for r in records if self.is_selected(r.id)]


# ---------------- Document blocks ----------------

@dataclass(frozen=True)
class Cover:
    display_name: Optional[str] = None


@dataclass(frozen=True)
class SectionHeader:
    label: str


@dataclass(frozen=True)
class RecipeBlock:
    record: RecipeRecord


@dataclass(frozen=True)
class LegacyRecipeBlock:
    record: LegacyRecipeRecord


DocumentBlock = Union[Cover, SectionHeader, RecipeBlock, LegacyRecipeBlock]


# ---------------- Draw commands + pages ----------------

class TextStyle(str, Enum):
    NORMAL = "normal"
    BOLD = "bold"
    ITALIC = "italic"


@dataclass(frozen=True)
class TextLine:
    """One positioned line of text. x/y are in mm from the top-left corner."""

    content: str
    x: float
    y: float
    style: TextStyle = TextStyle.NORMAL
    size: float = 12


DrawCommand = TextLine


@dataclass
class Page:
    commands: List[DrawCommand] = field(default_factory=list)
    closed: bool = False

    def add(self, command: DrawCommand) -> None:
        if self.closed:
            raise LayoutError(f"Cannot draw {command.content!r} on a closed page")
        self.commands.append(command)

    def close(self) -> None:
        self.closed = True

    @property
    def is_empty(self) -> bool:
        return not self.commands

    def text(self) -> List[str]:
        return [c.content for c in self.commands]


# ---------------- Run configuration ----------------

@dataclass
class CookbookConfig:
    """Paths and options for building a cookbook from an exported record file."""

    records_path: Path
    output_dir: Path
    layout_config_path: Optional[Path] = None
    family_name: Optional[str] = None
    recipe_ids: List[str] = field(default_factory=list)
    legacy_ids: List[str] = field(default_factory=list)
    select_all: bool = False

    @classmethod
    def default(cls, root: Path | None = None) -> "CookbookConfig":
        root = Path(root) if root else Path.cwd()
        return cls(
            records_path=root / "exports" / "records.json",
            output_dir=root / "exports",
        )


@dataclass(frozen=True)
class CookbookArtifact:
    """The finished PDF: file name plus bytes, ready to be written or served."""

    filename: str
    data: bytes
    page_count: int
