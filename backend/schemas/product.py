# backend/schemas/product.py
from typing import Any, Optional

from schemas.category import ORMBase


# Product row as returned by GET /products
class ProductOut(ORMBase):
    id: int
    name: Optional[str] = None
    description: Optional[str] = None
    # Usually an integer, but whatever the client sent is kept (e.g. 12.5 or "cheap")
    price: Any = None
    image: Optional[str] = None
    category: Optional[str] = None
