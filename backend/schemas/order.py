from pydantic import BaseModel, ConfigDict
from typing import Any, Optional
from datetime import datetime


# Input schema for a new order; both fields are stored as JSON text
class OrderCreatePayload(BaseModel):
    items: Any = None
    details: Any = None


# Output schema for a stored order, payloads returned as stored
class OrderOut(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    items: Optional[str] = None
    details: Optional[str] = None
    created_at: Optional[datetime] = None


class OrderCreated(BaseModel):
    success: bool = True
    orderId: int
