from sqlalchemy import Column, String
from database import Base


# Key/value flags for the shop; currently only "leave"
class Status(Base):
    __tablename__ = "status"

    key = Column(String, primary_key=True)
    value = Column(String)
