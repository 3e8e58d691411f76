"""
Ingredient Matcher

Finds the ingredients two recipes have in common. The result is drawn from
the first recipe only, in its original order, so `match(a, b)` and
`match(b, a)` can differ in which entries (amounts, units) they return.
"""

import logging
from typing import Any, Callable, Dict, Iterable, List, Optional

from .normalize import canonical_name, normalize_name


logger = logging.getLogger(__name__)

EXACT = "exact"
LOWERCASE = "lowercase"
CANONICAL = "canonical"


def _exact(name: str) -> str:
    return name


# Mode name -> function producing the comparison key for a name
MATCH_MODES: Dict[str, Callable[[str], str]] = {
    EXACT: _exact,
    LOWERCASE: normalize_name,
    CANONICAL: canonical_name,
}


class InvalidInput(ValueError):
    """Raised when a recipe argument is missing entirely."""


def _field(obj: Any, key: str) -> Any:
    # Recipes and ingredients arrive as dicts, pydantic models or ORM rows
    if isinstance(obj, dict):
        return obj.get(key)
    return getattr(obj, key, None)


def _ingredients(recipe: Any) -> Iterable[Any]:
    return _field(recipe, "ingredients") or []


def clean_mode(mode: str) -> str:
    """Mode names are accepted in any case and with surrounding spaces."""
    return mode.strip().lower()


def check_mode(mode: str) -> Callable[[str], str]:
    """Return the key function for `mode`, raising ValueError if unknown."""
    try:
        return MATCH_MODES[mode]
    except KeyError:
        raise ValueError(
            f"Unknown match mode {mode!r}; expected one of {sorted(MATCH_MODES)}"
        ) from None


def _key(name: Any, keyfunc: Callable[[str], str]) -> Optional[str]:
    if not isinstance(name, str):
        return None
    return keyfunc(name) or None


def match_key(name: Any, mode: str = EXACT) -> Optional[str]:
    """Return the comparison key for an ingredient name.

    Returns None for names that can never match: missing, not text, or
    empty once normalized.
    """
    return _key(name, check_mode(mode))


def match(recipe_a: Any, recipe_b: Any, mode: str = EXACT) -> List[Any]:
    """Return the ingredients of `recipe_a` that also appear in `recipe_b`.

    Args:
        recipe_a: recipe whose ingredient entries make up the result
        recipe_b: recipe the names are looked up in
        mode: name comparison, one of "exact", "lowercase", "canonical"

    Returns:
        New list of the matching entries of `recipe_a`, in its order.
        Duplicates in `recipe_a` are kept.

    Raises:
        InvalidInput: if either recipe is None
        ValueError: if `mode` is unknown
    """
    if recipe_a is None or recipe_b is None:
        raise InvalidInput("Both recipes are required for comparison")
    keyfunc = check_mode(mode)

    wanted = set()
    for ing in _ingredients(recipe_b):
        key = _key(_field(ing, "name"), keyfunc)
        if key is not None:
            wanted.add(key)

    common = []
    for ing in _ingredients(recipe_a):
        key = _key(_field(ing, "name"), keyfunc)
        if key is not None and key in wanted:
            common.append(ing)

    logger.debug("Matched %d ingredient(s) using %s names", len(common), mode)
    return common
