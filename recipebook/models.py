from sqlalchemy import Column, Float, Integer, String, Text
# relationship not used; ingredients live inside the recipe row
from .db import Base


class Recipe(Base):
    __tablename__ = "recipes"
    id = Column(Integer, primary_key=True, index=True)
    title = Column(String(100), index=True, nullable=False)
    ingredients = Column(Text, nullable=True)  # JSON-encoded list of dicts
    instructions = Column(Text, nullable=False)
    summary = Column(Text, nullable=True)
    preparation_time = Column(Float, nullable=True)
    cooking_time = Column(Float, nullable=True)
    servings = Column(Integer, nullable=True)
    image = Column(String(500), nullable=True)
    nutrition = Column(Text, nullable=True)  # JSON-encoded dict
    diets = Column(Text, nullable=True)  # JSON-encoded list
    dish_types = Column(Text, nullable=True)  # JSON-encoded list
    cuisines = Column(Text, nullable=True)  # JSON-encoded list
    source_url = Column(String(500), nullable=True)
    analyzed_instructions = Column(Text, nullable=True)  # JSON-encoded list
