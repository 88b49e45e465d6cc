"""Ordering and trimming of search results."""

from __future__ import annotations

from typing import Iterable

from .search import SearchResult


def trait_points(result: SearchResult) -> int:
    """Good traits count one point each, bad traits cost one."""
    return sum(1 if trait.is_good else -1 for trait in result.traits)


def total_price(result: SearchResult) -> int:
    """Sum of the unit prices of the distinct ingredients of a recipe."""
    return sum(entry.ingredient.price for entry in result.ingredients)


def _rank_key(result: SearchResult) -> tuple:
    return (
        result.potion.name,
        -result.number_ingredients,
        -trait_points(result),
        -result.total_magimints,
        total_price(result),
    )


def sort_and_filter(results: Iterable[SearchResult], top_results: int) -> list[SearchResult]:
    """Sort results and keep at most ``top_results`` of them.

    Results are ordered by potion name, then most ingredients, best traits,
    most magimints and finally the cheapest ingredient set.
    """
    ordered = sorted(results, key=_rank_key)
    return ordered[: max(top_results, 0)]