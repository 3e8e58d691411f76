import logging
from contextlib import asynccontextmanager
from pathlib import Path
from typing import List, Optional

import uvicorn
from fastapi import Depends, FastAPI, HTTPException, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import HTMLResponse, JSONResponse
from fastapi.templating import Jinja2Templates
from sqlalchemy.orm import Session

from . import crud, schemas
from .config import configure_logging, settings
from .db import SessionLocal, init_db
from .matcher import InvalidInput, check_mode, clean_mode, match

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    # Initialize DB once at startup
    configure_logging()
    init_db()
    yield


app = FastAPI(title="recipebook", lifespan=lifespan)

# Absolute path so the app works from any working directory
templates_dir = Path(__file__).resolve().parent / "templates"
templates = Jinja2Templates(directory=str(templates_dir))

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


def get_db():
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


@app.exception_handler(InvalidInput)
async def invalid_input_handler(request: Request, exc: InvalidInput):
    return JSONResponse(status_code=400, content={"detail": str(exc)})


def _resolve_mode(mode: Optional[str]) -> str:
    mode = clean_mode(mode) if mode else settings.match_mode
    try:
        check_mode(mode)
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))
    return mode


def _load_or_404(db: Session, recipe_id: int) -> dict:
    r = crud.get_recipe(db, recipe_id)
    if not r:
        raise HTTPException(status_code=404, detail=f"Recipe {recipe_id} not found")
    return crud.recipe_to_dict(r)


def _common(first, second, mode: str) -> List[dict]:
    common = match(first, second, mode=mode)
    logger.debug("Comparison found %d common ingredient(s)", len(common))
    return [
        {"name": i.get("name"), "amount": i.get("amount"), "unit": i.get("unit")}
        for i in common
    ]


@app.get("/api/recipes", response_model=List[schemas.Recipe])
def list_recipes(
    skip: int = 0, limit: int = 100, q: Optional[str] = None,
    db: Session = Depends(get_db),
):
    return [crud.recipe_to_dict(r) for r in crud.get_recipes(db, skip=skip, limit=limit, q=q)]


@app.post("/api/recipes", response_model=schemas.Recipe)
def create_recipe(recipe: schemas.RecipeCreate, db: Session = Depends(get_db)):
    return crud.recipe_to_dict(crud.create_recipe(db, recipe))


@app.get("/api/recipes/{recipe_id}", response_model=schemas.Recipe)
def get_recipe(recipe_id: int, db: Session = Depends(get_db)):
    return _load_or_404(db, recipe_id)


@app.put("/api/recipes/{recipe_id}", response_model=schemas.Recipe)
def update_recipe(
    recipe_id: int, recipe: schemas.RecipeCreate, db: Session = Depends(get_db)
):
    r = crud.update_recipe(db, recipe_id, recipe)
    if not r:
        raise HTTPException(status_code=404, detail=f"Recipe {recipe_id} not found")
    return crud.recipe_to_dict(r)


@app.delete("/api/recipes/{recipe_id}")
def delete_recipe(recipe_id: int, db: Session = Depends(get_db)):
    if not crud.delete_recipe(db, recipe_id):
        raise HTTPException(status_code=404, detail=f"Recipe {recipe_id} not found")
    return {"deleted": True}


@app.get(
    "/api/recipes/{recipe_id}/common/{other_id}",
    response_model=List[schemas.LooseIngredient],
)
def common_ingredients(
    recipe_id: int, other_id: int, mode: Optional[str] = None,
    db: Session = Depends(get_db),
):
    mode = _resolve_mode(mode)
    first = _load_or_404(db, recipe_id)
    second = _load_or_404(db, other_id)
    return _common(first, second, mode)


@app.post("/api/compare", response_model=List[schemas.LooseIngredient])
def compare(payload: schemas.CompareRequest):
    mode = _resolve_mode(payload.mode)
    first = payload.first.model_dump()
    second = payload.second.model_dump()
    return _common(first, second, mode)


@app.get("/", response_class=HTMLResponse)
def read_root(request: Request, db: Session = Depends(get_db)):
    recipes = [crud.recipe_to_dict(r) for r in crud.get_recipes(db, skip=0, limit=50)]
    return templates.TemplateResponse(request, "index.html", {"recipes": recipes})


@app.get("/compare", response_class=HTMLResponse)
def compare_page(
    request: Request, first: int, second: int, mode: Optional[str] = None,
    db: Session = Depends(get_db),
):
    mode = _resolve_mode(mode)
    a = _load_or_404(db, first)
    b = _load_or_404(db, second)
    return templates.TemplateResponse(
        request,
        "compare.html",
        {"first": a, "second": b, "mode": mode, "common": _common(a, b, mode)},
    )


def serve():
    """Run the API with uvicorn on the configured host and port."""
    configure_logging()
    uvicorn.run(app, host=settings.host, port=settings.port)


if __name__ == "__main__":
    serve()
