"""Convenience re-exports for handler callables."""

from .callbacks import handle_callback
from .context import HandlerContext
from .dispatch import dispatch
from .events import parse_event
from .messages import handle_message
from .private import ensure_private_or_guide
from .topics import send_topic

__all__ = [
    "HandlerContext",
    "dispatch",
    "parse_event",
    "handle_callback",
    "handle_message",
    "ensure_private_or_guide",
    "send_topic",
]
