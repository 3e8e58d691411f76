# flake8: noqa
import sys
from pathlib import Path

# Ensure project root is on sys.path so `recipebook` can be imported when tests are run
sys.path.insert(0, str(Path(__file__).resolve().parent.parent))  # noqa: E402

import json

from recipebook import main as cli
from recipebook.recipes import DEFAULT_DATA_FILE, find_recipe, load_recipes


def test_load_missing_file(tmp_path):
    assert load_recipes(tmp_path / "nope.json") == []


def test_bundled_data_file():
    recipes = load_recipes(DEFAULT_DATA_FILE)
    assert len(recipes) >= 2
    assert find_recipe(recipes, "Spaghetti Carbonara") is not None
    assert find_recipe(recipes, "Unknown") is None


def test_cli_compares_first_two_recipes(capsys):
    assert cli.main(["--mode", "exact"]) == 0
    out = capsys.readouterr().out
    assert "2 in common" in out
    assert "- cheese 50 g" in out
    assert "- eggs 2" in out


def test_cli_by_title_and_mode(tmp_path, capsys):
    data = [
        {"title": "A", "ingredients": [{"name": "Tomatoes", "amount": 3}]},
        {"title": "B", "ingredients": [{"name": "tomato", "amount": 1}]},
    ]
    p = tmp_path / "recipes.json"
    p.write_text(json.dumps(data), encoding="utf-8")

    assert cli.main(["--file", str(p), "--mode", "canonical", "A", "B"]) == 0
    assert "- Tomatoes 3" in capsys.readouterr().out

    assert cli.main(["--file", str(p), "A", "Missing"]) == 1


def test_cli_prints_non_numeric_amounts(tmp_path, capsys):
    data = [
        {"title": "A", "ingredients": [{"name": "salt", "amount": "2", "unit": "pinch"}, {"name": "oil"}]},
        {"title": "B", "ingredients": [{"name": "salt", "amount": "a little"}, {"name": "oil", "amount": 1}]},
    ]
    p = tmp_path / "recipes.json"
    p.write_text(json.dumps(data), encoding="utf-8")

    assert cli.main(["--file", str(p)]) == 0
    out = capsys.readouterr().out
    assert "2 in common" in out
    assert "- salt 2 pinch" in out
    assert "- oil\n" in out


def test_format_ingredient():
    assert cli.format_ingredient({"name": "flour", "amount": 200.0, "unit": "g"}) == "flour 200 g"
    assert cli.format_ingredient({"name": "eggs", "amount": 1.5}) == "eggs 1.5"
    assert cli.format_ingredient({"name": "salt", "amount": "to taste"}) == "salt to taste"
    assert cli.format_ingredient({"amount": 2}) == "? 2"


def test_cli_mode_is_case_insensitive(tmp_path, capsys):
    data = [
        {"title": "A", "ingredients": [{"name": "Basil", "amount": 1}]},
        {"title": "B", "ingredients": [{"name": "basil", "amount": 2}]},
    ]
    p = tmp_path / "recipes.json"
    p.write_text(json.dumps(data), encoding="utf-8")

    assert cli.main(["--file", str(p), "--mode", "LowerCase"]) == 0
    assert "- Basil 1" in capsys.readouterr().out
