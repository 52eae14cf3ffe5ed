# studybot/config/config.py
from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Optional

from dotenv import load_dotenv
from .constants import ENV_FILE  # ".env"

@dataclass(frozen=True)
class Config:
    # required
    BOT_TOKEN: str

    # optional
    WEBHOOK_SECRET: Optional[str]
    PUBLIC_URL: Optional[str]
    CATALOGUE_PATH: str
    ASSETS_DIR: str
    HOST: str
    PORT: int
    WEBHOOK_PATH: str
    VERSION: str

    @staticmethod
    def _to_int(key: str, *, required: bool = False) -> Optional[int]:
        val = os.getenv(key)
        if val is None or not str(val).strip():
            if required:
                raise RuntimeError(f"{key} is missing in .env")
            return None
        try:
            return int(str(val).strip())
        except ValueError as e:
            raise RuntimeError(f"{key} must be an integer, got: {val!r}") from e

    @staticmethod
    def _to_str(key: str, default: Optional[str] = None) -> Optional[str]:
        val = os.getenv(key, "").strip()
        return val or default

    @classmethod
    def from_env(cls) -> "Config":
        # load .env once
        load_dotenv(ENV_FILE)

        bot_token = os.getenv("BOT_TOKEN")
        if not bot_token:
            raise RuntimeError("BOT_TOKEN is missing in .env")

        public_url = cls._to_str("PUBLIC_URL")
        if public_url:
            public_url = public_url.rstrip("/")

        webhook_path = cls._to_str("WEBHOOK_PATH", "/webhook")
        if not webhook_path.startswith("/"):
            webhook_path = "/" + webhook_path

        return cls(
            BOT_TOKEN=bot_token,
            WEBHOOK_SECRET=cls._to_str("WEBHOOK_SECRET"),
            PUBLIC_URL=public_url,
            CATALOGUE_PATH=cls._to_str("CATALOGUE_PATH", "data/catalogue.json"),
            ASSETS_DIR=cls._to_str("ASSETS_DIR", "public/assets"),
            HOST=cls._to_str("HOST", "0.0.0.0"),
            PORT=cls._to_int("PORT") or 8080,
            WEBHOOK_PATH=webhook_path,
            VERSION=os.getenv("COMMIT_SHA", "dev"),
        )
