# main.py
# Entry point: webhook server for the topic catalogue bot.
# No per-user state is kept; every update is handled on its own.

import logging

from aiohttp import web
from telegram import Bot

from studybot.catalogue import load_catalogue
from studybot.config import Config, config
from studybot.utils.logging import setup_logging
from studybot.utils.telegram import Delivery
from studybot.web import create_app

logger = logging.getLogger(__name__)


def build_app(cfg: Config = config) -> web.Application:
    catalogue = load_catalogue(cfg.CATALOGUE_PATH)
    logger.info("catalogue loaded from %s: %s", cfg.CATALOGUE_PATH, catalogue.stats())

    bot = Bot(cfg.BOT_TOKEN)
    app = create_app(
        Delivery(bot),
        catalogue,
        secret=cfg.WEBHOOK_SECRET,
        public_url=cfg.PUBLIC_URL,
        webhook_path=cfg.WEBHOOK_PATH,
        assets_dir=cfg.ASSETS_DIR,
    )

    async def start_bot(_app: web.Application) -> None:
        await bot.initialize()

    async def stop_bot(_app: web.Application) -> None:
        await bot.shutdown()

    app.on_startup.append(start_bot)
    app.on_cleanup.append(stop_bot)
    return app


def main():
    setup_logging()
    if not config.WEBHOOK_SECRET:
        logger.warning("WEBHOOK_SECRET is not set, updates are not authenticated")

    app = build_app()
    print(
        "\n".join(
            [
                "📟 bot wiring:",
                f"  POST {config.WEBHOOK_PATH} -> updates",
                f"  GET  {config.WEBHOOK_PATH}, /healthz -> health",
                "  GET  /assets/... -> images",
                f"  version {config.VERSION}",
            ]
        )
    )
    web.run_app(app, host=config.HOST, port=config.PORT)


if __name__ == "__main__":
    try:
        main()

    except KeyboardInterrupt:
        print("\nBot stopped by user")
