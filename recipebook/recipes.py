import json
from pathlib import Path

DEFAULT_DATA_FILE = Path(__file__).resolve().parent.parent / "data" / "recipes.json"


def load_recipes(path):
    """Load recipes from a JSON file and return a list of dicts.

    Args:
        path (str or Path): Path to the JSON file.

    Returns:
        list: list of recipe dictionaries, empty if the file does not exist.
    """
    p = Path(path)
    if not p.exists():
        return []
    with p.open("r", encoding="utf-8") as f:
        return json.load(f)


def find_recipe(recipes, title):
    """Return the first recipe whose title equals `title`, or None."""
    return next((r for r in recipes if r.get("title") == title), None)
