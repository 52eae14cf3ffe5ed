"""Parse raw webhook updates into typed events.

:func:`parse_event` is the only place that looks at the update JSON.  The
payload is deserialized with :meth:`telegram.Update.de_json` and narrowed to
exactly one of :class:`CallbackEvent`, :class:`MessageEvent`,
:class:`IgnoredEvent` or :class:`MalformedEvent`.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping, Optional, Union

from telegram import CallbackQuery, InlineKeyboardMarkup, Message, Update

HANDLED_KINDS = ("callback_query", "message")


@dataclass(frozen=True)
class CallbackEvent:
    query_id: str
    data: str
    chat_id: Optional[int]
    chat_type: Optional[str]
    message_id: Optional[int]
    markup: Optional[InlineKeyboardMarkup]
    user_id: Optional[int]


@dataclass(frozen=True)
class MessageEvent:
    chat_id: int
    chat_type: Optional[str]
    user_id: Optional[int]
    text: str


@dataclass(frozen=True)
class IgnoredEvent:
    """A well-formed update of a kind the bot does not handle."""

    kind: str


@dataclass(frozen=True)
class MalformedEvent:
    reason: str


Event = Union[CallbackEvent, MessageEvent, IgnoredEvent, MalformedEvent]


def _as_int(value: Any) -> Optional[int]:
    if isinstance(value, bool) or not isinstance(value, int):
        return None
    return value


def _chat_type(chat: Any) -> Optional[str]:
    kind = getattr(chat, "type", None)
    return str(kind) if kind is not None else None


def _from_callback(query: CallbackQuery) -> Event:
    if not isinstance(query.id, str) or not query.id:
        return MalformedEvent("callback_query without id")
    # inline-mode queries and inaccessible messages carry no keyboard
    message = query.message
    chat = getattr(message, "chat", None)
    markup = getattr(message, "reply_markup", None)
    return CallbackEvent(
        query_id=query.id,
        data=query.data if isinstance(query.data, str) else "",
        chat_id=_as_int(getattr(chat, "id", None)),
        chat_type=_chat_type(chat),
        message_id=_as_int(getattr(message, "message_id", None)),
        markup=markup if isinstance(markup, InlineKeyboardMarkup) else None,
        user_id=_as_int(getattr(query.from_user, "id", None)),
    )


def _from_message(message: Message) -> Event:
    chat_id = _as_int(getattr(message.chat, "id", None))
    if chat_id is None:
        return MalformedEvent("message without chat id")
    return MessageEvent(
        chat_id=chat_id,
        chat_type=_chat_type(message.chat),
        user_id=_as_int(getattr(message.from_user, "id", None)),
        text=message.text if isinstance(message.text, str) else "",
    )


def parse_event(payload: Any) -> Event:
    if not isinstance(payload, Mapping):
        return MalformedEvent("update is not an object")
    kinds = [k for k in payload if k != "update_id"]
    if not any(kind in payload for kind in HANDLED_KINDS):
        return IgnoredEvent(kinds[0] if kinds else "empty")
    for kind in HANDLED_KINDS:
        if kind in payload and not isinstance(payload[kind], Mapping):
            return MalformedEvent(f"{kind} is not an object")

    # objects stay unbound: outbound calls go through Delivery
    try:
        update = Update.de_json(dict(payload), None)
    except (AttributeError, KeyError, TypeError, ValueError) as e:
        return MalformedEvent(f"cannot deserialize update: {e!r}")

    if update is not None and update.callback_query is not None:
        return _from_callback(update.callback_query)
    if update is not None and update.message is not None:
        return _from_message(update.message)
    return MalformedEvent("empty update")


__all__ = [
    "CallbackEvent",
    "MessageEvent",
    "IgnoredEvent",
    "MalformedEvent",
    "Event",
    "parse_event",
]
