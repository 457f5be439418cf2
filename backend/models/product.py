# backend/models/product.py
from sqlalchemy import Column, Integer, String
from database import Base

# Model Product
# Catalog entry. "category" holds a category name as free text,
# it is not a foreign key and may name a category that does not exist.
class Product(Base):
    __tablename__ = "products"

    id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(String)
    description = Column(String)
    price = Column(Integer)
    image = Column(String, nullable=True)
    category = Column(String)
