import os
from pathlib import Path

from dotenv import load_dotenv

load_dotenv()

RESOURCES_DIR = Path(__file__).resolve().parent.parent / "resources"


def _env_flag(name: str, default: str) -> bool:
    return os.getenv(name, default).strip().lower() in ("1", "true", "yes", "on")


class Config:
    SECRET_KEY = os.getenv("SECRET_KEY", "dev-secret")

    # Model gateway
    OPENAI_API_KEY = os.getenv("OPENAI_API_KEY", "")
    OPENAI_MODEL = os.getenv("OPENAI_MODEL", "gpt-4o-mini")
    OPENAI_TEMPERATURE = float(os.getenv("OPENAI_TEMPERATURE", "0.7"))
    OPENAI_TIMEOUT = float(os.getenv("OPENAI_TIMEOUT", "60"))
    OPENAI_MAX_RETRIES = int(os.getenv("OPENAI_MAX_RETRIES", "1"))

    SHOP_NAME = os.getenv("SHOP_NAME", "MyShop")

    # Read-only inputs
    SCHEMA_PATH = os.getenv("SCHEMA_PATH", str(RESOURCES_DIR / "schema.json"))
    LAYOUT_PATH = os.getenv("LAYOUT_PATH", str(RESOURCES_DIR / "page.html"))
    SEED_PATH = os.getenv("SEED_PATH", str(RESOURCES_DIR / "db.json"))

    # State document + generated fragment templates
    CACHE_DIR = os.getenv("CACHE_DIR", "cache")
    FLUSH_ON_EXIT = _env_flag("FLUSH_ON_EXIT", "true")

    APP_HOST = os.getenv("APP_HOST", "0.0.0.0")
    APP_PORT = int(os.getenv("APP_PORT", "8080"))
