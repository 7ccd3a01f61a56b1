# docmanager/shared/config.py
from pathlib import Path
from fastapi import Request
from pydantic import BaseModel
from sqlalchemy.engine import URL
import os

ROOT = Path(__file__).resolve().parents[2]   # project root
STORAGE_DIR = ROOT / "storage"
STORAGE_DIR.mkdir(parents=True, exist_ok=True)


def _database_url() -> str:
    explicit = os.getenv("DATABASE_URL")
    if explicit:
        return explicit
    # MySQL connection assembled from discrete vars (requires the `mysql` extra)
    host = os.getenv("DB_HOST")
    if host:
        return URL.create(
            "mysql+pymysql",
            username=os.getenv("DB_USER", "root"),
            password=os.getenv("DB_PASS", ""),
            host=host,
            database=os.getenv("DB_NAME", "doc_manager"),
            query={"charset": os.getenv("DB_CHARSET", "utf8mb4")},
        ).render_as_string(hide_password=False)
    # Local SQLite DB under ./storage/
    return f"sqlite:///{(STORAGE_DIR / 'docmanager.db').as_posix()}"


class Settings(BaseModel):
    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO")

    # prefix stripped by the front door, e.g. "/api" when served under /api/*
    MOUNT_PATH: str = os.getenv("MOUNT_PATH", "")

    DATABASE_URL: str = _database_url()
    SQL_ECHO: bool = os.getenv("SQL_ECHO", "false").lower() == "true"

    BCRYPT_ROUNDS: int = int(os.getenv("BCRYPT_ROUNDS", "12"))

settings = Settings()


# FastAPI dep: the settings the running app was built with
def get_settings(request: Request) -> Settings:
    return request.app.state.settings
