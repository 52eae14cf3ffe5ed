ENV_FILE = ".env"

SECRET_HEADER = "X-Telegram-Bot-Api-Secret-Token"

__all__ = ["ENV_FILE", "SECRET_HEADER"]
