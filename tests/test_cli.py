import io

import pytest

from potioncalc.cli import format_result, main, parse_potion_names, word_wrap
from potioncalc.ingredients import Trait, TraitType, ingredient_by_name
from potioncalc.potions import POTIONS, potion_by_name
from potioncalc.search import IngredientWithQuantity, SearchResult


def test_parse_potion_names_keeps_known():
    assert parse_potion_names("Health_Mana") == ["Health", "Mana"]


def test_parse_potion_names_drops_unknown():
    assert parse_potion_names("Health_Bogus") == ["Health"]


def test_parse_potion_names_empty_means_all():
    assert parse_potion_names("empty") == [potion.name for potion in POTIONS]


def test_word_wrap_breaks_at_spaces():
    assert word_wrap("Orchid of the Ice Princess", 13) == ["Orchid of", "the Ice", "Princess"]


def test_word_wrap_short_text_single_line():
    assert word_wrap("Feyberry", 13) == ["Feyberry"]


def test_word_wrap_long_word_is_cut():
    text = "abcdefghij"
    lines = word_wrap(text, 4)
    assert "".join(lines) == text
    assert all(len(line) <= 4 for line in lines)


def test_word_wrap_rejects_non_positive_width():
    with pytest.raises(ValueError):
        word_wrap("text", 0)


def test_format_result_contains_details():
    result = SearchResult(
        potion=potion_by_name("Health"),
        ingredients=[
            IngredientWithQuantity(2, ingredient_by_name("Feyberry")),
            IngredientWithQuantity(1, ingredient_by_name("Mandrake Root")),
        ],
        total_magimints=18,
        number_ingredients=3,
        traits=(Trait(TraitType.TASTE, True), Trait(TraitType.SOUND, False)),
    )
    text = format_result(result)
    lines = text.splitlines()
    assert lines[0] == "Health"
    assert "M: 18" in text
    assert "I: 3" in text
    assert "+Taste" in text
    assert "-Sound" in text
    assert "2 x Feyberry" in text
    assert "1 x Mandrake Root" in text


def test_main_runs_search_until_eof(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("12 12\n2 2\n5\nHealth\n-1 -1 -1 -1 -1\n"))
    assert main([]) == 0
    output = capsys.readouterr().out
    assert "Initialization complete." in output
    assert "Search took:" in output
    assert "Feyberry" in output
    assert "Mandrake Root" in output


def test_main_reports_invalid_number(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("abc 12\n"))
    assert main([]) == 1
    assert "abc" in capsys.readouterr().err


def test_main_empty_input_exits_cleanly(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO(""))
    assert main([]) == 0
    assert "Enter {minMags, maxMags}" in capsys.readouterr().out