from sqlalchemy import Column, Integer, Text, DateTime, func
from database import Base

class Order(Base):
    __tablename__ = "orders"

    id = Column(Integer, primary_key=True, autoincrement=True)

    # JSON-encoded payloads, stored as opaque text
    items = Column(Text)
    details = Column(Text)

    created_at = Column(DateTime, server_default=func.now())
