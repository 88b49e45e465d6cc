import pytest

from potioncalc.ingredients import (
    INGREDIENTS,
    Ingredient,
    IngredientCategory,
    Trait,
    TraitType,
    ingredient_by_name,
)


def test_names_are_unique():
    found = {id(ingredient_by_name(ingredient.name)) for ingredient in INGREDIENTS}
    assert len(found) == len(INGREDIENTS)


def test_every_ingredient_has_five_magimints_and_some_mana():
    for entry in INGREDIENTS:
        ingredient = ingredient_by_name(entry.name)
        assert len(ingredient.magimints) == 5
        assert any(ingredient.magimints)
        assert all(m >= 0 for m in ingredient.magimints)


def test_lookup_returns_catalogue_entry():
    for ingredient in INGREDIENTS:
        assert ingredient_by_name(ingredient.name) is ingredient


def test_pinned_prices_from_catalogue():
    assert ingredient_by_name("Widowmaker Pepper").price == 999999
    assert ingredient_by_name("Dragon Tear").price == 999999
    assert ingredient_by_name("Dragonfire Pearl").price == 9999999


def test_unknown_ingredient_raises():
    with pytest.raises(KeyError):
        ingredient_by_name("Unobtainium")


def test_categories():
    assert ingredient_by_name("Mote of Mana").category is IngredientCategory.PURE_MANA
    assert ingredient_by_name("Sack of Slime").category is IngredientCategory.SLIME
    assert {i.category for i in INGREDIENTS} == set(IngredientCategory)


def test_trait_names():
    names = [
        str(trait.trait)
        for name in ("Djinn Blossom", "Antlered Jelly", "Nightmare Pomme")
        for trait in ingredient_by_name(name).traits
    ]
    assert names == ["Taste", "Aroma", "Sensation", "Visual", "Visual", "Sound"]
    assert [str(t) for t in TraitType] == [
        "Taste",
        "Sensation",
        "Aroma",
        "Visual",
        "Sound",
    ]


def test_trait_vector_matches_trait_list():
    for entry in INGREDIENTS:
        ingredient = ingredient_by_name(entry.name)
        vector = ingredient.trait_vector()
        assert len(vector) == 5
        assert sum(1 for v in vector if v) == len(ingredient.traits)
        for trait in ingredient.traits:
            assert vector[trait.trait] == (1 if trait.is_good else -1)


def test_trait_vector_example():
    jelly = ingredient_by_name("Antlered Jelly")
    assert jelly.traits == (
        Trait(TraitType.SENSATION, False),
        Trait(TraitType.VISUAL, True),
    )
    assert jelly.trait_vector() == (0, -1, 0, 1, 0)


def test_ingredient_without_traits_has_zero_vector():
    ingredient = Ingredient((1, 0, 0, 0, 0), IngredientCategory.GEM, "Test Stone", 1)
    assert ingredient.trait_vector() == (0, 0, 0, 0, 0)