# flake8: noqa
import sys
from pathlib import Path

# Ensure project root is on sys.path so `recipebook` can be imported when tests are run
sys.path.insert(0, str(Path(__file__).resolve().parent.parent))  # noqa: E402

from recipebook.normalize import canonical_name, normalize_name


def test_normalize_name():
    assert normalize_name("  Tomato ") == "tomato"
    assert normalize_name("") == ""
    assert normalize_name(None) == ""


def test_canonical_plurals():
    assert canonical_name("TOMATOES") == "tomato"
    assert canonical_name("eggs") == "egg"
    assert canonical_name("cherries") == "cherry"
    assert canonical_name("cheeses") == "cheese"
    assert canonical_name("peaches") == "peach"
    # short words and words ending in -ss / -us are left alone
    assert canonical_name("gas") == "gas"
    assert canonical_name("swiss") == "swiss"
    assert canonical_name("hummus") == "hummus"


def test_canonical_synonyms():
    assert canonical_name("Aubergine") == "eggplant"
    assert canonical_name("courgettes") == "zucchini"
    assert canonical_name("spring onions") == "green onion"
    assert canonical_name("Scallions") == "green onion"
    assert canonical_name("garbanzo beans") == "chickpea"


def test_canonical_only_touches_last_word():
    assert canonical_name("olives oil") == "olives oil"
    assert canonical_name("green beans") == "green bean"
