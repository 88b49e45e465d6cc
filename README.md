# potioncalc

A calculator for Potionomics that searches for ingredient combinations
producing *perfect* potions: mixes whose magimints match a potion's recipe
ratio exactly, within the magimint and ingredient limits you choose, and
with the traits you care about.

## Installation

```
pip install .
```

## Usage

Start the interactive calculator:

```
potioncalc
```

It reads whitespace-separated answers from standard input and, for each
search, asks for:

1. `minMags maxMags` – the range of total magimints.
2. `minIngr maxIngr` – the range of the number of ingredients.
3. `topResultsToShow` – how many of the best results to list (at most 65535).
4. The desired potions as one word, joined by underscores (for example
   `Health_Mana_Fire`). Unknown names are ignored; if none are known
   (type `empty`, for instance), every potion is searched.
5. Five trait settings in the order Taste, Sensation, Aroma, Visual, Sound:
   `1` requires a good trait, `0` excludes ingredients with a bad trait, and
   `-1` allows anything.

After each search it prints how long the search took and the results as
text: the potion name, total magimints (`M:`), number of ingredients
(`I:`), the resulting traits marked `+` or `-`, and each ingredient with its
quantity. The loop repeats until input ends; an answer that is not an
integer where one is expected ends the program with status 1.

The search works from the most ingredients and magimints downwards and
stops early once enough results are found. Results are grouped by potion
name and ranked by number of ingredients, trait quality, total magimints
and finally by the summed unit price of the ingredients used.

## Library use

The search can also be driven from Python:

```python
from potioncalc.search import SearchIndex, SearchOptions, search_perfect_combos
from potioncalc.ranking import sort_and_filter
from potioncalc.ingredients import INGREDIENTS
from potioncalc.cli import format_result

index = SearchIndex.from_catalog(INGREDIENTS)
options = SearchOptions(
    min_mags=100,
    max_mags=200,
    min_ingredients=4,
    max_ingredients=8,
    top_results=10,
    desired_potions=["Health"],
    traits=(-1, -1, -1, -1, -1),
)
results = sort_and_filter(search_perfect_combos(options, index), 10)
for result in results:
    print(format_result(result))
```

Modules:

- `potioncalc.ingredients` – the ingredient catalogue (`INGREDIENTS`,
  `ingredient_by_name`, `Ingredient`, `Trait`, `TraitType`,
  `IngredientCategory`).
- `potioncalc.potions` – the potion recipes (`POTIONS`, `potion_by_name`,
  `Potion`, `PotionKind`).
- `potioncalc.search` – `SearchIndex`, `SearchOptions`, `SearchResult` and
  `search_perfect_combos`.
- `potioncalc.ranking` – `sort_and_filter`, `trait_points`, `total_price`.
- `potioncalc.cli` – the interactive command and `format_result`,
  `parse_potion_names`, `word_wrap`.

## Limitations

- Results are printed as plain text only; there is no graphical window
  showing ingredient pictures.
- Ingredient stock is not taken into account: every ingredient is treated
  as available in any quantity up to 65535.

## Running the tests

```
pip install .[test]
pytest
```