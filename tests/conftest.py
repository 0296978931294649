from datetime import date

import pytest

from cookbook_builder.engine import LayoutEngine
from cookbook_builder.layout import LayoutConfig
from cookbook_builder.metrics import FixedWidthMetrics
from cookbook_builder.models import LegacyRecipeRecord, RecipeRecord


@pytest.fixture
def metrics():
    # One unit per character: a 170-wide budget holds 170 characters
    return FixedWidthMetrics(char_width=1.0)


@pytest.fixture
def layout_config():
    return LayoutConfig()


@pytest.fixture
def engine(metrics, layout_config):
    return LayoutEngine(metrics, layout_config, generated_on=date(2024, 3, 5))


@pytest.fixture
def soup():
    return RecipeRecord(
        id="r-soup",
        title="Soup",
        version_tag="Grandma's version",
        ingredients=("water", "salt", "carrots"),
        steps=("Boil the water.", "Add everything else."),
    )


@pytest.fixture
def bread():
    return RecipeRecord(
        id="r-bread",
        title="Bread",
        ingredients=("flour", "yeast"),
        steps=("Knead.", "Bake."),
        notes="Best eaten warm.",
    )


@pytest.fixture
def pie():
    return LegacyRecipeRecord(id="l-pie", title="Aunt May's Pie", notes="Scanned from the old card box.")
