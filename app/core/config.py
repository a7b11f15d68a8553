import os
from dotenv import load_dotenv
from loguru import logger

load_dotenv()

def _get_env(key: str, default: str | None = None) -> str:
    val = os.getenv(key, default)
    if val is None:
        raise RuntimeError(f"Missing required env var: {key}")
    return val

def _get_bool(key: str, default: str = "false") -> bool:
    return _get_env(key, default).lower() in ("1", "true", "yes")

APP_ENV = _get_env("APP_ENV", "local")
DATABASE_URL = _get_env("DATABASE_URL", "sqlite:///./favorites.db")
LOG_LEVEL = _get_env("LOG_LEVEL", "INFO")
LOG_FILE = _get_env("LOG_FILE", "logs/app.log")
SQL_ECHO = _get_bool("SQL_ECHO")

logger.debug(f"Config loaded: APP_ENV={APP_ENV}, DATABASE_URL={DATABASE_URL}, LOG_LEVEL={LOG_LEVEL}")
