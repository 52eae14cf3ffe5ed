import logging

from ..keyboards.constants import GROUP_NOTICE, PRIVATE_NUDGE, open_bot_keyboard
from .context import HandlerContext

logger = logging.getLogger(__name__)


async def ensure_private_or_guide(
    ctx: HandlerContext,
    chat_id: int,
    chat_type: str | None,
    user_id: int | None,
) -> bool:
    """Return ``True`` for private chats.

    In groups the menu would be shared by everyone, so instead the user is
    nudged towards a private chat and ``False`` is returned.
    """
    if chat_type == "private":
        return True

    username = await ctx.delivery.bot_username()
    url = f"https://t.me/{username}" if username else None

    # only works if the user has already started the bot privately
    if user_id:
        try:
            await ctx.delivery.send_text(user_id, PRIVATE_NUDGE, open_bot_keyboard(url))
        except Exception as e:
            logger.debug("private nudge failed: %s", e)

    await ctx.delivery.send_text(chat_id, GROUP_NOTICE, open_bot_keyboard(url))
    return False


__all__ = ["ensure_private_or_guide"]
