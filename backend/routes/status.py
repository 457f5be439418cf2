# backend/routes/status.py
import logging
from typing import Optional

from fastapi import APIRouter, Body, Depends
from sqlalchemy.dialects import postgresql, sqlite
from sqlalchemy.orm import Session

from database import get_db
from models.status import Status
from schemas.status import StatusOut, StatusPayload

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/status", tags=["Status"])

LEAVE_KEY = "leave"
# Returned when the flag has never been written
NO_STATUS = "none"

_UPSERT_DIALECTS = {
    "sqlite": sqlite.insert,
    "postgresql": postgresql.insert,
}


def upsert_status(db: Session, key: str, value):
    """Set status[key] = value in one INSERT ... ON CONFLICT DO UPDATE statement."""
    dialect = db.get_bind().dialect.name
    insert = _UPSERT_DIALECTS.get(dialect)
    if insert is None:
        raise NotImplementedError(f"No native upsert for dialect {dialect!r}")

    stmt = insert(Status).values(key=key, value=value)
    stmt = stmt.on_conflict_do_update(
        index_elements=[Status.key],
        set_={"value": stmt.excluded.value},
    )
    db.execute(stmt)
    db.commit()


def read_status(db: Session, key: str):
    row = db.query(Status).filter(Status.key == key).first()
    if row is None:
        return NO_STATUS
    return row.value


@router.get("/leave", response_model=StatusOut)
def get_leave_status(db: Session = Depends(get_db)):
    return StatusOut(status=read_status(db, LEAVE_KEY))


@router.post("/leave")
def set_leave_status(
    payload: Optional[StatusPayload] = Body(default=None),
    db: Session = Depends(get_db),
):
    if payload is None:
        payload = StatusPayload()
    upsert_status(db, LEAVE_KEY, payload.status)
    logger.info("Leave status set to %r", payload.status)
    return {"success": True}
