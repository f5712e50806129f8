# catalog_hierarchy/config.py
import os
import logging
from pathlib import Path
from dotenv import load_dotenv

# Load environment variables
load_dotenv()

# Base directory of the project
BASE_DIR = Path(__file__).resolve().parent.parent


def _env_flag(name: str, default: str) -> bool:
    return os.getenv(name, default).strip().lower() in ("1", "true", "yes", "y")


class Config:
    """Configuration settings for the category hierarchy"""

    # Activity window evaluation
    TIMEZONE: str = os.getenv("CATALOG_TIMEZONE", "UTC")

    # URL map hydration
    URL_MAP_CACHE_ENABLED: bool = _env_flag("URL_MAP_CACHE_ENABLED", "true")

    # Logging
    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO")
    LOG_TO_FILE: bool = _env_flag("LOG_TO_FILE", "false")

    # Paths
    LOG_DIR = BASE_DIR / "logs"


def setup_logging():
    """Configure logging settings"""
    log_format = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    handlers = [logging.StreamHandler()]

    if Config.LOG_TO_FILE:
        Config.LOG_DIR.mkdir(exist_ok=True)
        handlers.append(logging.FileHandler(Config.LOG_DIR / "catalog.log"))

    logging.basicConfig(
        level=getattr(logging, Config.LOG_LEVEL.upper(), logging.INFO),
        format=log_format,
        handlers=handlers
    )
