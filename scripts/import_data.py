import logging
import sys

from pydantic import ValidationError

from recipebook import crud, schemas
from recipebook.config import configure_logging
from recipebook.db import SessionLocal, init_db
from recipebook.recipes import DEFAULT_DATA_FILE, load_recipes

logger = logging.getLogger("import_data")


def main(path=DEFAULT_DATA_FILE):
    configure_logging()
    init_db()
    data = load_recipes(path)
    if not data:
        logger.warning('%s not found or empty', path)
        return 1
    db = SessionLocal()
    added = 0
    try:
        for r in data:
            try:
                recipe = schemas.RecipeCreate(**r)
            except ValidationError as e:
                logger.warning('Skipping %r: %s', r.get('title'), e)
                continue
            if crud.get_recipe_by_title(db, recipe.title):
                continue
            crud.create_recipe(db, recipe)
            added += 1
    finally:
        db.close()
    logger.info('Imported %d recipes', added)
    return 0


if __name__ == '__main__':
    sys.exit(main(*sys.argv[1:]))
