# backend/database.py
import logging

from fastapi import Request
from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.orm import declarative_base, sessionmaker

logger = logging.getLogger(__name__)

Base = declarative_base()


def normalize_database_url(url: str) -> str:
    # Hosted Postgres providers hand out postgres://, SQLAlchemy requires postgresql://
    if url and url.startswith("postgres://"):
        return url.replace("postgres://", "postgresql://", 1)
    return url


def create_db_engine(url: str) -> Engine:
    url = normalize_database_url(url)
    if "sqlite" in url:
        connect_args = {"check_same_thread": False} # SQLite only: sessions cross the threadpool
    else:
        connect_args = {}
    return create_engine(url, connect_args=connect_args)


def create_session_factory(engine: Engine) -> sessionmaker:
    return sessionmaker(autocommit=False, autoflush=False, bind=engine)


def init_db(engine: Engine):
    # Register all tables on Base.metadata before creating them
    import models.category  # noqa: F401
    import models.product  # noqa: F401
    import models.order  # noqa: F401
    import models.status  # noqa: F401

    Base.metadata.create_all(bind=engine)
    logger.info("Database tables ready (%s)", engine.url.render_as_string(hide_password=True))


def get_db(request: Request):
    """Yield a session from the factory owned by the running application."""
    db = request.app.state.SessionLocal()
    try:
        yield db
    finally:
        db.close()


def db_error_message(exc: Exception) -> str:
    # Prefer the DBAPI message ("UNIQUE constraint failed: ...") over SQLAlchemy's wrapper text
    orig = getattr(exc, "orig", None)
    return str(orig if orig is not None else exc)
