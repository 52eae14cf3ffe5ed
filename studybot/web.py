"""aiohttp application receiving Telegram webhook updates.

Each POST is handled independently: secret header check, JSON parse, typed
event, dispatch.  The only shared state is the read-only catalogue and the
delivery adapter stored on the application.
"""

from __future__ import annotations

import hmac
import logging
from pathlib import Path
from typing import Optional

from aiohttp import web

from .catalogue import Catalogue
from .config.constants import SECRET_HEADER
from .handlers import HandlerContext, dispatch, parse_event
from .handlers.events import MalformedEvent
from .utils.telegram import Delivery

logger = logging.getLogger(__name__)

DELIVERY_KEY = web.AppKey("delivery", Delivery)
CATALOGUE_KEY = web.AppKey("catalogue", Catalogue)
SECRET_KEY = web.AppKey("webhook_secret", str)
PUBLIC_URL_KEY = web.AppKey("public_url", str)


def request_origin(request: web.Request) -> str:
    public_url = request.app[PUBLIC_URL_KEY]
    if public_url:
        return public_url
    return str(request.url.origin())


def secret_matches(received: str, expected: str) -> bool:
    return hmac.compare_digest(received.encode("utf-8"), expected.encode("utf-8"))


async def handle_webhook(request: web.Request) -> web.Response:
    secret = request.app[SECRET_KEY]
    if secret and not secret_matches(request.headers.get(SECRET_HEADER, ""), secret):
        logger.warning("rejected update from %s: bad secret header", request.remote)
        return web.Response(status=403, text="forbidden")

    try:
        payload = await request.json()
    except ValueError as e:
        logger.warning("unparseable update body: %s", e)
        return web.Response(status=400, text="bad request")

    event = parse_event(payload)
    if isinstance(event, MalformedEvent):
        logger.warning("malformed update: %s", event.reason)
        return web.Response(status=400, text="bad request")

    ctx = HandlerContext(
        delivery=request.app[DELIVERY_KEY],
        catalogue=request.app[CATALOGUE_KEY],
        origin=request_origin(request),
    )
    try:
        await dispatch(event, ctx)
    except Exception:
        # Telegram retries updates answered with non-2xx
        logger.exception("handler error")
    return web.Response(text="ok")


async def handle_health(request: web.Request) -> web.Response:
    return web.Response(text="OK")


def create_app(
    delivery: Delivery,
    catalogue: Catalogue,
    *,
    secret: Optional[str] = None,
    public_url: Optional[str] = None,
    webhook_path: str = "/webhook",
    assets_dir: Optional[str] = None,
) -> web.Application:
    """Build the web application.

    Parameters
    ----------
    delivery, catalogue:
        Shared collaborators for every update.
    secret:
        Expected value of the ``X-Telegram-Bot-Api-Secret-Token`` header;
        ``None`` disables the check.
    public_url:
        Origin used in image URLs instead of the request's own origin.
    webhook_path:
        Path Telegram posts updates to.
    assets_dir:
        Directory served under ``/assets`` when it exists.
    """

    app = web.Application()
    app[DELIVERY_KEY] = delivery
    app[CATALOGUE_KEY] = catalogue
    app[SECRET_KEY] = secret or ""
    app[PUBLIC_URL_KEY] = (public_url or "").rstrip("/")

    app.router.add_post(webhook_path, handle_webhook)
    app.router.add_get(webhook_path, handle_health)
    app.router.add_get("/healthz", handle_health)
    if assets_dir and Path(assets_dir).is_dir():
        app.router.add_static("/assets", assets_dir)
    elif assets_dir:
        logger.warning("assets directory %s not found, images must be served elsewhere", assets_dir)
    return app


__all__ = ["create_app", "handle_webhook", "request_origin", "secret_matches"]
