"""Interactive command: ask for search limits, search and print the recipes."""

from __future__ import annotations

import argparse
import logging
import sys
import time
from typing import Iterator, TextIO

from .potions import POTIONS, potion_by_name
from .ranking import sort_and_filter
from .search import (
    MAX_SEARCH_RESULTS,
    SearchIndex,
    SearchOptions,
    SearchResult,
    search_perfect_combos,
)

logger = logging.getLogger(__name__)

_SEPARATOR = "----------------------\n"
_UINT16_MAX = 65535


def parse_potion_names(text: str) -> list[str]:
    """Known potion names from an underscore separated list, or all potions if none match."""
    known = []
    for name in text.split("_"):
        try:
            potion_by_name(name)
        except KeyError:
            continue
        known.append(name)
    return known or [potion.name for potion in POTIONS]


def word_wrap(text: str, width: int) -> list[str]:
    """Break ``text`` into lines of at most ``width`` characters, preferring spaces."""
    if width <= 0:
        raise ValueError("width must be positive")
    lines = []
    start = 0
    while start < len(text):
        end = min(start + width, len(text))
        last_space = text.rfind(" ", start, end)
        if end < len(text) and last_space > start:
            lines.append(text[start:last_space])
            start = last_space + 1
        else:
            lines.append(text[start:end])
            start = end
    return lines


def format_result(result: SearchResult) -> str:
    """Render one recipe as a block of text."""
    lines = [
        result.potion.name,
        f"  M: {result.total_magimints}",
        f"  I: {result.number_ingredients}",
    ]
    lines.extend(
        f"    {'+' if trait.is_good else '-'}{trait.trait}" for trait in result.traits
    )
    lines.extend(
        f"  {entry.quantity} x {entry.ingredient.name}" for entry in result.ingredients
    )
    return "\n".join(lines)


def _tokens(stream: TextIO) -> Iterator[str]:
    for line in stream:
        yield from line.split()


def _say(out: TextIO, text: str) -> None:
    out.write(text)
    out.flush()


def _read_ints(tokens: Iterator[str], count: int) -> list[int]:
    values = []
    for _ in range(count):
        token = next(tokens)
        try:
            values.append(int(token))
        except ValueError:
            raise ValueError(f"expected an integer, got {token!r}") from None
    return values


def _to_uint16(value: int) -> int:
    return min(value, _UINT16_MAX) & 0xFFFF


def _print_results(out: TextIO, results: list[SearchResult]) -> None:
    if not results:
        _say(out, "No results found.\n")
        return
    _say(out, "\n\n".join(format_result(result) for result in results) + "\n")


def main(argv: list[str] | None = None) -> int:
    """Run the interactive search loop until input ends."""
    parser = argparse.ArgumentParser(
        prog="potioncalc",
        description="Find ingredient combinations that brew perfect potions.",
    )
    parser.parse_args(argv)

    out = sys.stdout
    tokens = _tokens(sys.stdin)

    _say(out, "Starting program... ")
    index = SearchIndex.from_catalog()
    _say(out, "Initialization complete.\n" + _SEPARATOR)

    while True:
        try:
            _say(out, "Enter {minMags, maxMags}: ")
            min_mags, max_mags = _read_ints(tokens, 2)
            _say(out, "Enter {minIngr, maxIngr}: ")
            min_ingr, max_ingr = _read_ints(tokens, 2)
            _say(
                out,
                "Enter {topResultsToShow} (if bigger than "
                f"{MAX_SEARCH_RESULTS}, will be reduced to it): ",
            )
            (top_results,) = _read_ints(tokens, 1)
            _say(out, "Enter desired potions (type empty to include all). Format: {p1_p2_p3}: ")
            desired = next(tokens)
            _say(
                out,
                "Enter traits (Taste, Sensation, Aroma, Visual, Sound) "
                "1 for good only, 0 excludes bad, -1 for all: ",
            )
            traits = _read_ints(tokens, 5)
        except StopIteration:
            _say(out, "\n")
            return 0
        except ValueError as exc:
            print(f"error: {exc}", file=sys.stderr)
            return 1

        logger.info("Starting search...")
        start = time.perf_counter()
        top = _to_uint16(top_results)
        results = search_perfect_combos(
            SearchOptions(
                min_mags=_to_uint16(min_mags),
                max_mags=_to_uint16(max_mags),
                min_ingredients=_to_uint16(min_ingr),
                max_ingredients=_to_uint16(max_ingr),
                top_results=top,
                desired_potions=parse_potion_names(desired),
                traits=tuple(traits),
            ),
            index,
        )
        results = sort_and_filter(results, top)
        elapsed = time.perf_counter() - start

        _say(out, f"\nSearch took: {elapsed:.6f}s\n")
        _say(out, _SEPARATOR)
        _print_results(out, results)
        _say(out, _SEPARATOR)


if __name__ == "__main__":
    sys.exit(main())