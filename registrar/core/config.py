# registrar/core/config.py
import os
from dotenv import load_dotenv
from pydantic import BaseModel, Field

load_dotenv()

def _jdbc_database_url() -> str | None:
    raw = os.getenv("PGSQL_DATABASE")
    if not raw or not raw.strip():
        return None
    url = raw.strip()
    if url.startswith("jdbc:"):
        url = url[len("jdbc:"):]
    user = os.getenv("PGSQL_USERNAME")
    password = os.getenv("PGSQL_PASSWORD")
    # jdbc:postgresql://host:5432/db carries credentials separately
    if user and "@" not in url and "://" in url:
        scheme, rest = url.split("://", 1)
        creds = f"{user}:{password}" if password else user
        url = f"{scheme}://{creds}@{rest}"
    return url

def _default_database_url() -> str:
    url = os.getenv("DATABASE_URL")
    if url and url.strip():
        return url.strip()
    jdbc = _jdbc_database_url()
    if jdbc:
        return jdbc
    data_dir = os.path.abspath(os.getenv("DATA_DIR", "./data"))
    os.makedirs(data_dir, exist_ok=True)
    return f"sqlite:///{os.path.join(data_dir, 'registrar.db')}"

class Settings(BaseModel):
    DATABASE_URL: str = Field(default_factory=_default_database_url)
    DB_POOL_SIZE: int = Field(default_factory=lambda: int(os.getenv("DB_POOL_SIZE", "10")))
    DB_POOL_TIMEOUT: int = Field(default_factory=lambda: int(os.getenv("DB_POOL_TIMEOUT", "10")))
    DB_POOL_RECYCLE: int = Field(default_factory=lambda: int(os.getenv("DB_POOL_RECYCLE", "1800")))
    DB_ECHO: bool = Field(default_factory=lambda: os.getenv("DB_ECHO", "false").lower() in {"1", "true", "yes"})
    LOG_LEVEL: str = Field(default_factory=lambda: os.getenv("LOG_LEVEL", "INFO"))

settings = Settings()
