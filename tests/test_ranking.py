from potioncalc.ingredients import Trait, TraitType, ingredient_by_name
from potioncalc.potions import potion_by_name
from potioncalc.ranking import sort_and_filter, total_price, trait_points
from potioncalc.search import IngredientWithQuantity, SearchResult


def _result(potion="Health", ingredients=(("Feyberry", 1), ("Mandrake Root", 1)),
            mags=12, count=2, traits=()):
    return SearchResult(
        potion=potion_by_name(potion),
        ingredients=[
            IngredientWithQuantity(quantity, ingredient_by_name(name))
            for name, quantity in ingredients
        ],
        total_magimints=mags,
        number_ingredients=count,
        traits=tuple(traits),
    )


def test_trait_points_counts_good_minus_bad():
    result = _result(traits=(
        Trait(TraitType.TASTE, True),
        Trait(TraitType.SOUND, False),
        Trait(TraitType.VISUAL, True),
    ))
    assert trait_points(result) == 1


def test_trait_points_without_traits_is_zero():
    assert trait_points(_result()) == 0


def test_total_price_sums_unit_prices():
    result = _result()
    expected = ingredient_by_name("Feyberry").price + ingredient_by_name("Mandrake Root").price
    assert total_price(result) == expected


def test_total_price_ignores_quantity():
    single = _result(ingredients=(("Feyberry", 1),))
    triple = _result(ingredients=(("Feyberry", 3),))
    assert total_price(single) == total_price(triple)


def test_sorts_by_potion_name_first():
    mana = _result(potion="Mana", count=5)
    health = _result(potion="Health", count=1)
    assert sort_and_filter([mana, health], 10) == [health, mana]


def test_more_ingredients_first():
    few = _result(count=2)
    many = _result(count=4)
    assert sort_and_filter([few, many], 10) == [many, few]


def test_better_traits_first():
    plain = _result()
    good = _result(traits=(Trait(TraitType.AROMA, True),))
    bad = _result(traits=(Trait(TraitType.AROMA, False),))
    assert sort_and_filter([bad, plain, good], 10) == [good, plain, bad]


def test_more_magimints_first():
    low = _result(mags=12)
    high = _result(mags=24)
    assert sort_and_filter([low, high], 10) == [high, low]


def test_cheaper_ingredients_first():
    cheap = _result(ingredients=(("Feyberry", 1),))
    pricey = _result(ingredients=(("Bogeyberry", 1),))
    assert sort_and_filter([pricey, cheap], 10) == [cheap, pricey]


def test_truncates_to_top_results():
    results = [_result(count=n) for n in range(1, 6)]
    kept = sort_and_filter(results, 2)
    assert [r.number_ingredients for r in kept] == [5, 4]


def test_top_larger_than_results_keeps_all():
    results = [_result(count=n) for n in range(1, 4)]
    assert len(sort_and_filter(results, 100)) == len(results)