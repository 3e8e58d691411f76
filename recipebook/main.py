import argparse
import sys

from .config import configure_logging, settings
from .matcher import MATCH_MODES, clean_mode, match
from .recipes import DEFAULT_DATA_FILE, find_recipe, load_recipes


def format_ingredient(ing):
    parts = [ing.get("name") or "?"]
    amount = ing.get("amount")
    if isinstance(amount, (int, float)) and not isinstance(amount, bool):
        parts.append(f"{amount:g}")
    elif amount is not None:
        parts.append(str(amount))
    if ing.get("unit"):
        parts.append(str(ing["unit"]))
    return " ".join(parts)


def main(argv=None):
    parser = argparse.ArgumentParser(
        description="Print the ingredients two recipes have in common."
    )
    parser.add_argument("titles", nargs="*", help="titles of the two recipes")
    parser.add_argument("--file", default=str(DEFAULT_DATA_FILE))
    parser.add_argument(
        "--mode", type=clean_mode, choices=sorted(MATCH_MODES),
        default=settings.match_mode,
    )
    args = parser.parse_args(argv)
    configure_logging()

    recipes = load_recipes(args.file)
    if args.titles:
        if len(args.titles) != 2:
            parser.error("give exactly two recipe titles")
        chosen = [find_recipe(recipes, t) for t in args.titles]
        for title, r in zip(args.titles, chosen):
            if r is None:
                print(f"Recipe not found: {title}", file=sys.stderr)
                return 1
    else:
        if len(recipes) < 2:
            print(f"Need at least two recipes in {args.file}", file=sys.stderr)
            return 1
        chosen = recipes[:2]

    first, second = chosen
    common = match(first, second, mode=args.mode)
    print(f"{first.get('title')} / {second.get('title')}: {len(common)} in common")
    for ing in common:
        print(f"- {format_ingredient(ing)}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
