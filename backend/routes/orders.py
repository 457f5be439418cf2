# backend/routes/orders.py
import json
import logging
from typing import List, Optional

from fastapi import APIRouter, Body, Depends
from sqlalchemy.orm import Session

from database import get_db
from models.order import Order
from schemas.order import OrderCreatePayload, OrderCreated, OrderOut

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/orders", tags=["Orders"])


def _encode(payload: OrderCreatePayload, field: str):
    # A field missing from the body is stored as NULL, an explicit null as "null"
    if field not in payload.model_fields_set:
        return None
    return json.dumps(getattr(payload, field))


# Orders are served oldest first (FIFO); id breaks ties between equal timestamps
@router.get("", response_model=List[OrderOut])
def list_orders(db: Session = Depends(get_db)):
    return db.query(Order).order_by(Order.created_at.asc(), Order.id.asc()).all()


@router.post("", response_model=OrderCreated)
def create_order(
    payload: Optional[OrderCreatePayload] = Body(default=None),
    db: Session = Depends(get_db),
):
    # No body behaves like an empty object: both columns stay NULL
    if payload is None:
        payload = OrderCreatePayload()
    order = Order(items=_encode(payload, "items"), details=_encode(payload, "details"))
    db.add(order)
    db.commit()
    db.refresh(order)

    logger.info("Order %s received", order.id)
    return OrderCreated(orderId=order.id)
