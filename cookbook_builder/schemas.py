from __future__ import annotations

from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from .models import LegacyRecipeRecord, RecipeRecord


class RecipeDoc(BaseModel):
    """A recipe document as exported from the app's record store."""

    id: str
    title: str = Field(min_length=1)
    version_tag: str = Field(default="", alias="versionTag")
    ingredients: List[str] = Field(min_length=1)
    steps: List[str] = Field(min_length=1)
    notes: Optional[str] = None

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    @field_validator("id", mode="before")
    @classmethod
    def _coerce_id(cls, value):
        return str(value) if value is not None else value

    @field_validator("version_tag", mode="before")
    @classmethod
    def _blank_version(cls, value):
        return value or ""

    def to_record(self) -> RecipeRecord:
        return RecipeRecord(
            id=self.id,
            title=self.title,
            version_tag=self.version_tag,
            ingredients=tuple(self.ingredients),
            steps=tuple(self.steps),
            notes=self.notes or None,
        )


class LegacyRecipeDoc(BaseModel):
    """An uploaded legacy recipe document."""

    id: str
    title: str = Field(min_length=1)
    notes: Optional[str] = None

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    @field_validator("id", mode="before")
    @classmethod
    def _coerce_id(cls, value):
        return str(value) if value is not None else value

    def to_record(self) -> LegacyRecipeRecord:
        return LegacyRecipeRecord(id=self.id, title=self.title, notes=self.notes or None)


class RecordExport(BaseModel):
    recipes: List[RecipeDoc] = Field(default_factory=list)
    legacy_recipes: List[LegacyRecipeDoc] = Field(default_factory=list, alias="legacyRecipes")

    model_config = ConfigDict(populate_by_name=True, extra="ignore")
