import json
import logging
from sqlalchemy.orm import Session
from . import models, schemas

logger = logging.getLogger(__name__)

# Columns stored as JSON text, with the value used when a row has none
JSON_FIELDS = {
    "ingredients": [],
    "nutrition": None,
    "diets": [],
    "dish_types": [],
    "cuisines": [],
    "analyzed_instructions": [],
}
SCALAR_FIELDS = (
    "title", "instructions", "summary", "preparation_time", "cooking_time",
    "servings", "image", "source_url",
)


def _loads(raw, default):
    if not raw:
        return default
    try:
        return json.loads(raw)
    except ValueError:
        logger.warning("Could not decode stored JSON value %r", raw[:40])
        return default


def _apply(db_recipe: models.Recipe, recipe: schemas.RecipeCreate):
    data = recipe.model_dump()
    for field in SCALAR_FIELDS:
        setattr(db_recipe, field, data[field])
    for field, default in JSON_FIELDS.items():
        value = data[field]
        setattr(db_recipe, field, json.dumps(value if value is not None else default))


def recipe_to_dict(db_recipe: models.Recipe) -> dict:
    """Decode a stored recipe into the shape of `schemas.Recipe`."""
    out = {"id": db_recipe.id}
    for field in SCALAR_FIELDS:
        out[field] = getattr(db_recipe, field)
    for field, default in JSON_FIELDS.items():
        out[field] = _loads(getattr(db_recipe, field), default)
    return out


def get_recipe(db: Session, recipe_id: int):
    return db.query(models.Recipe).filter(models.Recipe.id == recipe_id).first()


def get_recipe_by_title(db: Session, title: str):
    return db.query(models.Recipe).filter(models.Recipe.title == title).first()


def get_recipes(db: Session, skip: int = 0, limit: int = 100, q: str = None):
    query = db.query(models.Recipe)
    if q:
        query = query.filter(models.Recipe.title.ilike(f"%{q}%"))
    return query.order_by(models.Recipe.id).offset(skip).limit(limit).all()


def create_recipe(db: Session, recipe: schemas.RecipeCreate):
    db_recipe = models.Recipe()
    _apply(db_recipe, recipe)
    db.add(db_recipe)
    db.commit()
    db.refresh(db_recipe)
    logger.info("Created recipe %d (%s)", db_recipe.id, db_recipe.title)
    return db_recipe


def update_recipe(db: Session, recipe_id: int, recipe: schemas.RecipeCreate):
    db_recipe = get_recipe(db, recipe_id)
    if not db_recipe:
        return None
    _apply(db_recipe, recipe)
    db.add(db_recipe)
    db.commit()
    db.refresh(db_recipe)
    logger.info("Updated recipe %d", recipe_id)
    return db_recipe


def delete_recipe(db: Session, recipe_id: int):
    db_recipe = get_recipe(db, recipe_id)
    if not db_recipe:
        return False
    db.delete(db_recipe)
    db.commit()
    logger.info("Deleted recipe %d", recipe_id)
    return True
