from typing import List, Optional
from pydantic import BaseModel, ConfigDict, Field


class Ingredient(BaseModel):
    name: str = Field(
        ..., min_length=1, json_schema_extra={"example": "spaghetti"}
    )
    amount: float = Field(..., ge=0, json_schema_extra={"example": 200})
    unit: Optional[str] = Field(None, json_schema_extra={"example": "g"})


class Nutrition(BaseModel):
    calories: Optional[float] = None
    fat: Optional[float] = None
    protein: Optional[float] = None
    carbs: Optional[float] = None


class InstructionStep(BaseModel):
    step_number: Optional[int] = None
    step: Optional[str] = None


class RecipeBase(BaseModel):
    title: str = Field(
        ..., min_length=1, max_length=100,
        json_schema_extra={"example": "Spaghetti Carbonara"},
    )
    ingredients: List[Ingredient] = Field(default_factory=list)
    instructions: str = Field(
        ..., json_schema_extra={"example": "Boil pasta, whisk eggs and cheese, combine."}
    )
    summary: Optional[str] = None
    preparation_time: Optional[float] = None
    cooking_time: Optional[float] = None
    servings: Optional[int] = None
    image: Optional[str] = None
    nutrition: Optional[Nutrition] = None
    diets: List[str] = Field(default_factory=list)
    dish_types: List[str] = Field(default_factory=list)
    cuisines: List[str] = Field(default_factory=list)
    source_url: Optional[str] = None
    analyzed_instructions: List[InstructionStep] = Field(default_factory=list)


class RecipeCreate(RecipeBase):
    pass


class Recipe(RecipeBase):
    id: int

    model_config = ConfigDict(from_attributes=True)


class LooseIngredient(BaseModel):
    """Ingredient as sent by clients for comparison; every field optional."""
    name: Optional[str] = None
    amount: Optional[float] = Field(None, ge=0)
    unit: Optional[str] = None


class IngredientList(BaseModel):
    ingredients: Optional[List[LooseIngredient]] = None


class CompareRequest(BaseModel):
    first: IngredientList
    second: IngredientList
    mode: Optional[str] = Field(
        None, json_schema_extra={"example": "lowercase"}
    )
