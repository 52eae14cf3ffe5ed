"""Sending a topic: its images in batches, then the navigation message."""

import logging

from ..keyboards.builders import build_topic_detail
from ..keyboards.constants import NO_IMAGES, NO_SUCH_TOPIC, TOPIC_HEADER, home_only_keyboard
from ..utils.formatting import build_asset_url
from ..utils.telegram import chunk_images
from .context import HandlerContext

logger = logging.getLogger(__name__)


async def send_topic(ctx: HandlerContext, chat_id: int, class_id: str, topic_num: int) -> None:
    topic = ctx.catalogue.topic(class_id, topic_num)
    if topic is None:
        logger.info("topic %s/%s not found", class_id, topic_num)
        await ctx.delivery.send_text(chat_id, NO_SUCH_TOPIC, home_only_keyboard())
        return

    keyboard = build_topic_detail(ctx.catalogue, class_id, topic_num)

    if not topic.images:
        await ctx.delivery.send_text(
            chat_id,
            NO_IMAGES.format(class_id=class_id, folder=topic.folder),
            keyboard,
        )
        return

    for chunk in chunk_images(topic.images):
        urls = [build_asset_url(ctx.origin, class_id, topic.folder, name) for name in chunk]
        # sendMediaGroup rejects a single item
        if len(urls) == 1:
            await ctx.delivery.send_photo(chat_id, urls[0])
        else:
            await ctx.delivery.send_media_group(chat_id, urls)

    await ctx.delivery.send_text(
        chat_id,
        TOPIC_HEADER.format(class_id=class_id, label=topic.label),
        keyboard,
    )


__all__ = ["send_topic"]
