# backend/models/category.py
from sqlalchemy import Column, Integer, String
from database import Base


# Shop category shown on the storefront's main page
class Category(Base):
    __tablename__ = "categories"

    id = Column(Integer, primary_key=True, autoincrement=True)
    # Unique, but nullable: a form without "name" still inserts a row
    name = Column(String, unique=True)
    # Public URL of the uploaded image, if any
    image = Column(String, nullable=True)
