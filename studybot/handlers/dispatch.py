import logging

from .callbacks import handle_callback
from .context import HandlerContext
from .events import CallbackEvent, Event, IgnoredEvent, MalformedEvent, MessageEvent
from .messages import handle_message

logger = logging.getLogger(__name__)


async def dispatch(event: Event, ctx: HandlerContext) -> None:
    """Route a parsed update to its handler."""
    if isinstance(event, CallbackEvent):
        await handle_callback(event, ctx)
    elif isinstance(event, MessageEvent):
        await handle_message(event, ctx)
    elif isinstance(event, IgnoredEvent):
        logger.debug("ignoring %s update", event.kind)
    elif isinstance(event, MalformedEvent):
        logger.warning("malformed update: %s", event.reason)
    else:
        raise TypeError(f"unexpected event type: {type(event).__name__}")


__all__ = ["dispatch"]
