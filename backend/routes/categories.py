# backend/routes/categories.py
import logging
from typing import List, Optional

from fastapi import APIRouter, Depends, File, Form, Request, UploadFile
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from database import get_db, db_error_message
from models.category import Category
from schemas.category import CategoryOut
from utils.uploads import store_image

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/categories", tags=["Categories"])


@router.get("", response_model=List[CategoryOut])
def list_categories(db: Session = Depends(get_db)):
    return db.query(Category).all()


@router.post("")
def add_category(
    request: Request,
    db: Session = Depends(get_db),
    name: Optional[str] = Form(None),
    image: Optional[UploadFile] = File(None),
):
    # The file is written before the insert; a rejected row leaves it orphaned
    image_url = store_image(request, image)

    category = Category(name=name, image=image_url)
    db.add(category)
    try:
        db.commit()
    except SQLAlchemyError as e:
        db.rollback()
        # Reported with HTTP 200 and success=false, unlike other store errors
        logger.warning("Category %r not created: %s", name, db_error_message(e))
        return {"success": False, "error": db_error_message(e)}

    logger.info("Category %r created with id %s", name, category.id)
    return {"success": True, "id": category.id, "image": image_url}


@router.delete("/by-name/{name:path}")
def delete_category_by_name(name: str, db: Session = Depends(get_db)):
    deleted = db.query(Category).filter(Category.name == name).delete(synchronize_session=False)
    db.commit()
    logger.info("Deleted %s categories named %r", deleted, name)
    return {"success": True}


@router.delete("/{category_id}")
def delete_category(category_id: str, db: Session = Depends(get_db)):
    # No existence check: deleting a missing id still reports success
    deleted = db.query(Category).filter(Category.id == category_id).delete(synchronize_session=False)
    db.commit()
    logger.info("Deleted %s categories with id %s", deleted, category_id)
    return {"success": True}
