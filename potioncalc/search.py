"""Depth-first search for ingredient combinations that brew a perfect potion."""

from __future__ import annotations

import functools
import logging
from dataclasses import dataclass, field
from enum import IntEnum
from typing import Iterable, Iterator, NamedTuple, Sequence, Union

from .ingredients import INGREDIENTS, Ingredient, Trait, TraitType
from .potions import Potion, potion_by_name

logger = logging.getLogger(__name__)

MAX_SEARCH_RESULTS = 65535
UNLIMITED_QUANTITY = 65535
_MAGIMINT_COUNT = 5
_TRAIT_COUNT = len(TraitType)


class _MagsStatus(IntEnum):
    DEFAULT = 0
    EXCEEDED = 1
    FINISHED = 2
    COMPLETE = 3


@dataclass(frozen=True)
class IngredientWithQuantity:
    """An ingredient and how many of it a recipe uses."""

    quantity: int
    ingredient: Ingredient


@dataclass
class SearchResult:
    """A recipe that brews a potion with exactly the potion's magimint ratio."""

    potion: Potion
    ingredients: list[IngredientWithQuantity]
    total_magimints: int
    number_ingredients: int
    traits: tuple[Trait, ...] = ()


@dataclass
class SearchOptions:
    """Limits of a search.

    ``traits`` holds one mark per trait: -1 accepts anything, 0 excludes
    ingredients bad in that trait, 1 additionally requires the result to be
    good in it.
    """

    min_mags: int
    max_mags: int
    min_ingredients: int
    max_ingredients: int
    top_results: int
    desired_potions: Sequence[Union[str, Potion]] = ()
    traits: tuple[int, int, int, int, int] = (-1, -1, -1, -1, -1)

    def __post_init__(self) -> None:
        if len(self.traits) != _TRAIT_COUNT:
            raise ValueError(f"expected {_TRAIT_COUNT} trait marks, got {len(self.traits)}")
        self.traits = tuple(self.traits)  # type: ignore[assignment]


@dataclass(frozen=True)
class IndexedIngredient:
    """An ingredient prepared for searching."""

    ingredient: Ingredient
    traits: tuple[int, ...]
    mags: tuple[int, ...]
    total_mags: int
    quantity_available: int = UNLIMITED_QUANTITY

    @classmethod
    def from_ingredient(cls, ingredient: Ingredient) -> "IndexedIngredient":
        return cls(
            ingredient=ingredient,
            traits=tuple(ingredient.trait_vector()),
            mags=tuple(ingredient.magimints),
            total_mags=sum(ingredient.magimints),
        )


@dataclass(frozen=True)
class SearchIndex:
    """Ingredients grouped by their first non-zero magimint.

    Bucket ``i`` holds ingredients whose magimints before ``i`` are all zero
    and whose magimint ``i`` is not; each bucket is sorted ascending by that
    magimint.
    """

    buckets: tuple[tuple[IndexedIngredient, ...], ...] = field(
        default_factory=lambda: ((),) * _MAGIMINT_COUNT
    )

    @classmethod
    def from_catalog(cls, ingredients: Iterable[Ingredient] = INGREDIENTS) -> "SearchIndex":
        """Build an index from a collection of ingredients."""
        buckets: list[list[IndexedIngredient]] = [[] for _ in range(_MAGIMINT_COUNT)]
        for ingredient in ingredients:
            first = next((idx for idx, mag in enumerate(ingredient.magimints) if mag), None)
            if first is None:
                raise ValueError(f"ingredient {ingredient.name!r} has no magimints")
            buckets[first].append(IndexedIngredient.from_ingredient(ingredient))
        return cls(
            tuple(
                tuple(sorted(bucket, key=lambda item, idx=idx: item.mags[idx]))
                for idx, bucket in enumerate(buckets)
            )
        )

    def candidates(
        self, potion: Potion, traits: Sequence[int]
    ) -> tuple[tuple[IndexedIngredient, ...], ...]:
        """Ingredients usable for ``potion`` under the given trait marks, by bucket."""
        result = []
        for idx, bucket in enumerate(self.buckets):
            if not potion.magimints[idx]:
                result.append(())
                continue
            result.append(
                tuple(
                    item
                    for item in bucket
                    if not any(
                        item.mags[k] and not potion.magimints[k]
                        for k in range(idx, _MAGIMINT_COUNT)
                    )
                    and not any(
                        mark >= 0 and value == -1 for mark, value in zip(traits, item.traits)
                    )
                )
            )
        return tuple(result)


def mags_status(
    new_mags: Sequence[int], expected_mags: Sequence[int], current: int, last_index: int
) -> int:
    """Classify magimints against the target from ``current`` to ``last_index``.

    0: current magimint unfinished; 1: some magimint exceeds the target;
    2: current finished but a later one is not; 3: all finished.
    """
    if new_mags[current] > expected_mags[current]:
        return _MagsStatus.EXCEEDED
    finished = new_mags[current] == expected_mags[current]
    good = True
    for idx in range(current + 1, last_index + 1):
        if new_mags[idx] > expected_mags[idx]:
            return _MagsStatus.EXCEEDED
        if new_mags[idx] < expected_mags[idx]:
            good = False
    if not finished:
        return _MagsStatus.DEFAULT
    return _MagsStatus.COMPLETE if good else _MagsStatus.FINISHED


def needed_good_traits(traits: Sequence[int]) -> tuple[TraitType, ...]:
    """Traits the result is required to be good in."""
    return tuple(TraitType(idx) for idx, mark in enumerate(traits) if mark == 1)


def combined_traits(indexed_ingredients: Iterable[IndexedIngredient]) -> tuple[int, ...]:
    """Traits of a mix: any bad ingredient makes it bad, otherwise any good one makes it good."""
    result = [0] * _TRAIT_COUNT
    for item in indexed_ingredients:
        for idx, value in enumerate(item.traits):
            if value == -1:
                result[idx] = -1
            elif value == 1 and result[idx] != -1:
                result[idx] = 1
    return tuple(result)


class _Unit(NamedTuple):
    bucket: int
    position: int
    mags: tuple[int, ...]
    used: tuple[tuple[IndexedIngredient, int], ...]
    total_mags: int
    total_ingredients: int


def _perfect_combos(
    buckets: Sequence[Sequence[IndexedIngredient]],
    last: int,
    target: Sequence[int],
    num_mags: int,
    num_ingredients: int,
    needed: Sequence[TraitType],
) -> Iterator[tuple[tuple[tuple[IndexedIngredient, int], ...], tuple[int, ...]]]:
    stack = [_Unit(0, 0, (0,) * _MAGIMINT_COUNT, (), 0, 0)]
    while stack:
        i, j, mags, used, total_mags, total_ingredients = stack.pop()
        while i <= last and j == len(buckets[i]):
            i, j = i + 1, 0
        if i > last:
            continue
        bucket = buckets[i]
        item = bucket[j]
        is_last_j = j == len(bucket) - 1
        is_last_i = i == last

        if mags[i] + item.mags[i] > target[i]:
            continue
        if not is_last_j:
            stack.append(_Unit(i, j + 1, mags, used, total_mags, total_ingredients))

        remaining = num_ingredients - total_ingredients
        for quantity in range(1, remaining + 1):
            if item.quantity_available < quantity:
                break
            new_total = total_mags + quantity * item.total_mags
            if new_total > num_mags or (new_total < num_mags and quantity == remaining):
                break
            if new_total != num_mags and is_last_i and is_last_j:
                continue
            new_mags = tuple(have + quantity * add for have, add in zip(mags, item.mags))
            status = mags_status(new_mags, target, i, last)
            if status == _MagsStatus.EXCEEDED:
                break
            if status == _MagsStatus.DEFAULT and is_last_j:
                continue
            if status == _MagsStatus.COMPLETE:
                if quantity != remaining:
                    break
                chosen = used + ((item, quantity),)
                traits = combined_traits(entry for entry, _ in chosen)
                if all(traits[trait] == 1 for trait in needed):
                    yield chosen, traits
                break
            if status == _MagsStatus.FINISHED:
                next_i, next_j = i + 1, 0
            else:
                next_i, next_j = i, j + 1
            stack.append(
                _Unit(
                    next_i,
                    next_j,
                    new_mags,
                    used + ((item, quantity),),
                    new_total,
                    total_ingredients + quantity,
                )
            )


def _sorted_ingredients(
    chosen: Iterable[tuple[IndexedIngredient, int]]
) -> list[IngredientWithQuantity]:
    ordered = sorted(chosen, key=lambda pair: (pair[0].total_mags, pair[1]), reverse=True)
    return [IngredientWithQuantity(quantity, item.ingredient) for item, quantity in ordered]


@functools.lru_cache(maxsize=1)
def _default_index() -> SearchIndex:
    return SearchIndex.from_catalog(INGREDIENTS)


def search_perfect_combos(
    options: SearchOptions, index: SearchIndex | None = None
) -> list[SearchResult]:
    """Find recipes matching ``options``, most ingredients and magimints first.

    The search stops once a (ingredient count, magimint total) pair finishes
    with at least ``top_results`` results, or when results exceed ten times
    that number.
    """
    if index is None:
        index = _default_index()
    results: list[SearchResult] = []
    if not options.desired_potions:
        return results

    min_ingredients = max(options.min_ingredients, 1)
    top = min(options.top_results, MAX_SEARCH_RESULTS)
    needed = needed_good_traits(options.traits)

    for wanted in options.desired_potions:
        potion = wanted if isinstance(wanted, Potion) else potion_by_name(wanted)
        unit = potion.magimint_unit()
        min_local = max(options.min_mags, unit)
        max_local = options.max_mags // unit * unit
        buckets = index.candidates(potion, options.traits)
        last = potion.last_magimint_index()

        for num_ingredients in range(options.max_ingredients, min_ingredients - 1, -1):
            for num_mags in range(max_local, min_local - 1, -unit):
                scale = num_mags // unit
                target = tuple(ratio * scale for ratio in potion.magimints)
                for chosen, traits in _perfect_combos(
                    buckets, last, target, num_mags, num_ingredients, needed
                ):
                    results.append(
                        SearchResult(
                            potion=potion,
                            ingredients=_sorted_ingredients(chosen),
                            total_magimints=num_mags,
                            number_ingredients=num_ingredients,
                            traits=tuple(
                                Trait(TraitType(idx), value == 1)
                                for idx, value in enumerate(traits)
                                if value
                            ),
                        )
                    )
                    if len(results) % 10 == 0:
                        logger.info("Results found: %d", len(results))
                        if len(results) > 10 * top:
                            logger.info("found 10x similar results, leaving search")
                            return results
                if len(results) >= top:
                    logger.info("found enough best results, leaving search")
                    return results
    logger.info("all combinations checked")
    return results