# backend/schemas/category.py
from pydantic import BaseModel, ConfigDict
from typing import Optional


# Base configuration for ORM compatibility
class ORMBase(BaseModel):
    model_config = ConfigDict(from_attributes=True)


# Category row as returned by GET /categories
class CategoryOut(ORMBase):
    id: int
    name: Optional[str] = None
    image: Optional[str] = None
