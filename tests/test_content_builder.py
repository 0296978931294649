import pytest

from cookbook_builder.content import build_blocks
from cookbook_builder.errors import EmptySelectionError
from cookbook_builder.models import (
    Cover,
    LegacyRecipeBlock,
    RecipeBlock,
    RecipeRecord,
    SectionHeader,
    SelectionSet,
)


def _recipe(rid):
    return RecipeRecord(id=rid, title=rid.upper(), ingredients=("x",), steps=("y",))


def test_nothing_selected_raises():
    recipes = [_recipe("a")]
    with pytest.raises(EmptySelectionError):
        build_blocks(recipes, [], SelectionSet({"a": False}), SelectionSet())


def test_full_block_sequence(soup, bread, pie):
    blocks = build_blocks(
        [soup, bread],
        [pie],
        SelectionSet.of(["r-soup", "r-bread"]),
        SelectionSet.of(["l-pie"]),
        "Smith",
    )
    assert blocks == [
        Cover("Smith"),
        SectionHeader("Recipes"),
        RecipeBlock(soup),
        RecipeBlock(bread),
        SectionHeader("Legacy Recipes"),
        LegacyRecipeBlock(pie),
    ]


def test_order_follows_collection_not_selection_clicks():
    recipes = [_recipe("a"), _recipe("b"), _recipe("c")]
    selection = SelectionSet()
    # clicked c first, then a
    selection.toggle("c")
    selection.toggle("a")
    blocks = build_blocks(recipes, [], selection, SelectionSet())
    assert [b.record.id for b in blocks if isinstance(b, RecipeBlock)] == ["a", "c"]


def test_only_legacy_selected_skips_recipe_section(soup, pie):
    blocks = build_blocks([soup], [pie], SelectionSet({"r-soup": False}), SelectionSet.of(["l-pie"]))
    assert blocks == [Cover(None), SectionHeader("Legacy Recipes"), LegacyRecipeBlock(pie)]


def test_blank_display_name_is_dropped(soup):
    blocks = build_blocks([soup], [], SelectionSet.of(["r-soup"]), SelectionSet(), "   ")
    assert blocks[0] == Cover(None)


def test_selection_helpers(soup, bread):
    selection = SelectionSet()
    assert not selection.any_selected()
    selection.select_all([soup, bread])
    assert selection.flags == {"r-soup": True, "r-bread": True}
    selection.toggle("r-soup")
    assert not selection.is_selected("r-soup")
    assert selection.filter([soup, bread]) == [bread]
    selection.deselect_all([soup, bread])
    assert not selection.any_selected()
    assert not selection.is_selected("unknown")
