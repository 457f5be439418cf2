# backend/routes/products.py
import logging
from typing import List, Optional

from fastapi import APIRouter, Depends, File, Form, Query, Request, UploadFile
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from database import get_db, db_error_message
from models.product import Product
from schemas.product import ProductOut
from utils.uploads import store_image

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/products", tags=["Products"])


# =========================
# LIST
# =========================
@router.get("", response_model=List[ProductOut])
def list_products(
    category: Optional[str] = Query(None),
    db: Session = Depends(get_db),
):
    """All products, or only those whose category equals `category` exactly."""
    query = db.query(Product)
    if category:
        query = query.filter(Product.category == category)
    return query.all()


# =========================
# CREATE
# =========================
@router.post("")
def add_product(
    request: Request,
    db: Session = Depends(get_db),
    name: Optional[str] = Form(None),
    description: Optional[str] = Form(None),
    # Stored as sent; the INTEGER column converts numeric text
    price: Optional[str] = Form(None),
    category: Optional[str] = Form(None),
    image: Optional[UploadFile] = File(None),
):
    image_url = store_image(request, image)

    product = Product(
        name=name, description=description, price=price,
        image=image_url, category=category,
    )
    db.add(product)
    try:
        db.commit()
    except SQLAlchemyError as e:
        db.rollback()
        logger.warning("Product %r not created: %s", name, db_error_message(e))
        return {"success": False, "error": db_error_message(e)}

    logger.info("Product %r created with id %s in category %r", name, product.id, category)
    return {"success": True, "productId": product.id, "image": image_url}


# =========================
# DELETE
# =========================
@router.delete("/by-name/{name:path}")
def delete_product_by_name(name: str, db: Session = Depends(get_db)):
    deleted = db.query(Product).filter(Product.name == name).delete(synchronize_session=False)
    db.commit()
    logger.info("Deleted %s products named %r", deleted, name)
    return {"success": True}


@router.delete("/{product_id}")
def delete_product(product_id: str, db: Session = Depends(get_db)):
    deleted = db.query(Product).filter(Product.id == product_id).delete(synchronize_session=False)
    db.commit()
    logger.info("Deleted %s products with id %s", deleted, product_id)
    return {"success": True}
