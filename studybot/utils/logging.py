import logging
import os


def setup_logging(level: str | None = None) -> None:
    logging.basicConfig(
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        level=(level or os.getenv("LOG_LEVEL") or "INFO").upper(),
    )
    # httpx logs every Bot API request (token included) at INFO
    logging.getLogger("httpx").setLevel(logging.WARNING)

__all__ = ["setup_logging"]
