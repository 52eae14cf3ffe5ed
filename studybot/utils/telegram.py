"""Outbound Bot API calls.

:class:`Delivery` wraps :class:`telegram.Bot` so handlers never see a
:class:`~telegram.error.TelegramError`: a failed call is logged and ``None`` is
returned, and the caller moves on to its next step.
"""

import logging
from typing import Awaitable, Callable, List, Optional, Sequence, TypeVar

from telegram import Bot, InlineKeyboardMarkup, InputMediaPhoto
from telegram.error import BadRequest, TelegramError

logger = logging.getLogger(__name__)

# Bot API limit for sendMediaGroup
MEDIA_GROUP_LIMIT = 10

T = TypeVar("T")


def chunk_images(images: Sequence[str], size: int = MEDIA_GROUP_LIMIT) -> List[List[str]]:
    """Split ``images`` into ordered chunks of at most ``size`` items."""
    if size <= 0:
        size = MEDIA_GROUP_LIMIT
    return [list(images[i : i + size]) for i in range(0, len(images), size)]


class Delivery:
    """Thin adapter over :class:`telegram.Bot` used by the handlers."""

    def __init__(self, bot: Bot) -> None:
        self._bot = bot
        self._username: Optional[str] = None

    async def _call(self, method: str, func: Callable[[], Awaitable[T]]) -> Optional[T]:
        try:
            return await func()
        except BadRequest as err:
            if "Message is not modified" in err.message:
                logger.debug("%s: message not modified", method)
                return None
            logger.warning("TG error %s: %s", method, err.message)
        except TelegramError as err:
            logger.warning("TG error %s: %s", method, err)
        return None

    async def bot_username(self) -> Optional[str]:
        """Return the bot's username, fetched once via ``getMe``."""
        if self._username:
            return self._username
        me = await self._call("getMe", self._bot.get_me)
        username = getattr(me, "username", None)
        if isinstance(username, str) and username:
            self._username = username
        return self._username

    async def answer_callback(self, query_id: str):
        return await self._call(
            "answerCallbackQuery",
            lambda: self._bot.answer_callback_query(callback_query_id=query_id),
        )

    async def send_text(
        self,
        chat_id: int,
        text: str,
        reply_markup: Optional[InlineKeyboardMarkup] = None,
    ):
        return await self._call(
            "sendMessage",
            lambda: self._bot.send_message(chat_id=chat_id, text=text, reply_markup=reply_markup),
        )

    async def edit_text(
        self,
        chat_id: int,
        message_id: int,
        text: str,
        reply_markup: Optional[InlineKeyboardMarkup] = None,
    ):
        return await self._call(
            "editMessageText",
            lambda: self._bot.edit_message_text(
                text=text,
                chat_id=chat_id,
                message_id=message_id,
                reply_markup=reply_markup,
            ),
        )

    async def edit_keyboard(self, chat_id: int, message_id: int, reply_markup: InlineKeyboardMarkup):
        return await self._call(
            "editMessageReplyMarkup",
            lambda: self._bot.edit_message_reply_markup(
                chat_id=chat_id, message_id=message_id, reply_markup=reply_markup
            ),
        )

    async def send_photo(self, chat_id: int, url: str):
        return await self._call(
            "sendPhoto", lambda: self._bot.send_photo(chat_id=chat_id, photo=url)
        )

    async def send_media_group(self, chat_id: int, urls: Sequence[str]):
        media = [InputMediaPhoto(media=url) for url in urls]
        return await self._call(
            "sendMediaGroup", lambda: self._bot.send_media_group(chat_id=chat_id, media=media)
        )


__all__ = ["Delivery", "chunk_images", "MEDIA_GROUP_LIMIT"]
