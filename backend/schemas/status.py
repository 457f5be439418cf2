from pydantic import BaseModel
from typing import Any


class StatusPayload(BaseModel):
    status: Any = None


class StatusOut(BaseModel):
    status: Any = None
