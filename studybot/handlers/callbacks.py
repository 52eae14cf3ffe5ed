"""Handler for inline button presses."""

import logging

from ..navigation.engine import EditKeyboard, EditText, ShowTopic, resolve
from ..navigation.tokens import parse_token
from .context import HandlerContext
from .events import CallbackEvent
from .private import ensure_private_or_guide
from .topics import send_topic

logger = logging.getLogger(__name__)


async def handle_callback(event: CallbackEvent, ctx: HandlerContext) -> None:
    await ctx.delivery.answer_callback(event.query_id)

    if event.chat_id is None or event.message_id is None:
        return

    # never edit a menu shared by a whole group
    if not await ensure_private_or_guide(ctx, event.chat_id, event.chat_type, event.user_id):
        return

    token = parse_token(event.data)
    if token is None:
        logger.debug("ignoring callback data %r", event.data)
        return

    transition = resolve(token, event.markup, ctx.catalogue)
    if transition is None:
        return

    if isinstance(transition, EditText):
        await ctx.delivery.edit_text(
            event.chat_id, event.message_id, transition.text, transition.keyboard
        )
    elif isinstance(transition, EditKeyboard):
        await ctx.delivery.edit_keyboard(event.chat_id, event.message_id, transition.keyboard)
    elif isinstance(transition, ShowTopic):
        await send_topic(ctx, event.chat_id, transition.class_id, transition.topic_num)


__all__ = ["handle_callback"]
