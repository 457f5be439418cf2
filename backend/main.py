# backend/main.py
import logging
from contextlib import asynccontextmanager
from datetime import datetime, timezone
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from fastapi.staticfiles import StaticFiles
from sqlalchemy.exc import SQLAlchemyError

load_dotenv()

from config import Settings, settings as default_settings
from database import create_db_engine, create_session_factory, init_db, db_error_message
from utils.uploads import UPLOADS_PREFIX

# Routers
from routes.categories import router as categories_router
from routes.products import router as products_router
from routes.orders import router as orders_router
from routes.status import router as status_router

logger = logging.getLogger(__name__)


def configure_logging(level: str):
    logging.basicConfig(
        level=level.upper(),
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
    )


@asynccontextmanager
async def lifespan(app: FastAPI):
    settings: Settings = app.state.settings

    # Uploads - make sure the directory exists before serving from it
    Path(settings.UPLOAD_DIR).mkdir(parents=True, exist_ok=True)

    engine = create_db_engine(settings.DATABASE_URL)
    init_db(engine)
    app.state.engine = engine
    app.state.SessionLocal = create_session_factory(engine)
    logger.info("Backend running on http://localhost:%s", settings.PORT)
    try:
        yield
    finally:
        engine.dispose()
        logger.info("Database engine disposed")


async def sqlalchemy_error_handler(request: Request, exc: SQLAlchemyError):
    message = db_error_message(exc)
    logger.error("Store error on %s %s: %s", request.method, request.url.path, message)
    return JSONResponse(status_code=500, content={"error": message})


async def upload_error_handler(request: Request, exc: OSError):
    # Upload directory missing or not writable
    logger.error("File error on %s %s: %s", request.method, request.url.path, exc)
    return JSONResponse(status_code=500, content={"error": str(exc)})


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    settings = settings or default_settings
    configure_logging(settings.LOG_LEVEL)

    app = FastAPI(title="Grocery Shop API", version="1.0.0", lifespan=lifespan)
    app.state.settings = settings

    app.mount(
        UPLOADS_PREFIX,
        StaticFiles(directory=settings.UPLOAD_DIR, check_dir=False),
        name="uploads",
    )

    # CORS: a single frontend origin
    app.add_middleware(
        CORSMiddleware,
        allow_origins=[settings.FRONTEND_URL],
        allow_methods=["GET", "POST", "DELETE", "OPTIONS"],
        allow_headers=["Content-Type"],
    )

    app.add_exception_handler(SQLAlchemyError, sqlalchemy_error_handler)
    app.add_exception_handler(OSError, upload_error_handler)

    # Register routers
    app.include_router(categories_router)
    app.include_router(products_router)
    app.include_router(orders_router)
    app.include_router(status_router)

    @app.get("/", tags=["Health"])
    def health():
        return {
            "ok": True,
            "msg": "Grocery backend is running",
            "time": datetime.now(timezone.utc).isoformat(),
        }

    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(app, host=default_settings.HOST, port=default_settings.PORT)
