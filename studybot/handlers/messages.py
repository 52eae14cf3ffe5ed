from ..keyboards.builders import build_class_picker
from ..keyboards.constants import BUTTONS_ONLY, CHOOSE_CLASS
from .context import HandlerContext
from .events import MessageEvent
from .private import ensure_private_or_guide

MENU_COMMANDS = ("/start", "/menu")


async def handle_message(event: MessageEvent, ctx: HandlerContext) -> None:
    if not await ensure_private_or_guide(ctx, event.chat_id, event.chat_type, event.user_id):
        return

    if event.text.startswith(MENU_COMMANDS):
        await ctx.delivery.send_text(
            event.chat_id, CHOOSE_CLASS, build_class_picker(ctx.catalogue.classes)
        )
        return

    await ctx.delivery.send_text(event.chat_id, BUTTONS_ONLY)


__all__ = ["handle_message", "MENU_COMMANDS"]
