"""Configuration facade: provides `config` object and module-level shortcuts."""

from .config import Config
from .constants import ENV_FILE, SECRET_HEADER

# Build a singleton config instance
config = Config.from_env()

BOT_TOKEN = config.BOT_TOKEN
WEBHOOK_SECRET = config.WEBHOOK_SECRET
PUBLIC_URL = config.PUBLIC_URL
CATALOGUE_PATH = config.CATALOGUE_PATH
ASSETS_DIR = config.ASSETS_DIR
VERSION = config.VERSION

__all__ = [
    "Config",
    "config",
    "ENV_FILE",
    "SECRET_HEADER",
    "BOT_TOKEN",
    "WEBHOOK_SECRET",
    "PUBLIC_URL",
    "CATALOGUE_PATH",
    "ASSETS_DIR",
    "VERSION",
]
