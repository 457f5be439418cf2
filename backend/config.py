# backend/config.py
from pydantic_settings import BaseSettings, SettingsConfigDict
from typing import Literal, Optional
from pathlib import Path

# Resolve absolute path to the .env file for reliable loading
env_path = Path(__file__).parent.parent / ".env"

class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=str(env_path), extra="ignore")

    HOST: str = "0.0.0.0"
    PORT: int = 5000
    LOG_LEVEL: str = "INFO"

    DATABASE_URL: str = "sqlite:///./grocery.sqlite"

    # Directory for uploaded images, served under /uploads
    UPLOAD_DIR: str = "uploads"
    # "timestamp" = <ms since epoch><ext>, "uuid" = <uuid4><ext>
    UPLOAD_NAMING: Literal["timestamp", "uuid"] = "timestamp"

    # Public backend URL used as prefix of stored image URLs.
    # When unset, the base URL of the incoming request is used.
    BACKEND_URL: Optional[str] = None

    # The single origin allowed by CORS
    FRONTEND_URL: str = "http://localhost:5173"

settings = Settings()
