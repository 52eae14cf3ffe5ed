"""Callback-data grammar for navigation buttons.

Every inline button carries one of::

    menu
    class:<class>
    back-to-topics:<class>
    topic:<class>:<num>
    tests:<class>:<num>:open|close
    sources:<class>:<num>:open|close

The token is the only state that travels with a button press, so it has to
describe the requested screen completely.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional


class Action(str, Enum):
    MENU = "menu"
    CLASS = "class"
    BACK_TO_TOPICS = "back-to-topics"
    TOPIC = "topic"
    TESTS = "tests"
    SOURCES = "sources"


OPEN = "open"
CLOSE = "close"

# number of ``:``-separated fields per action
_FIELD_COUNT = {
    Action.MENU: 1,
    Action.CLASS: 2,
    Action.BACK_TO_TOPICS: 2,
    Action.TOPIC: 3,
    Action.TESTS: 4,
    Action.SOURCES: 4,
}


@dataclass(frozen=True)
class NavToken:
    action: Action
    class_id: Optional[str] = None
    topic_num: Optional[int] = None
    sub_action: Optional[str] = None

    def encode(self) -> str:
        parts = [self.action.value]
        if self.class_id is not None:
            parts.append(self.class_id)
        if self.topic_num is not None:
            parts.append(str(self.topic_num))
        if self.sub_action is not None:
            parts.append(self.sub_action)
        return ":".join(parts)


def parse_token(data: str | None) -> Optional[NavToken]:
    """Parse callback data into a :class:`NavToken`.

    Returns ``None`` for unknown actions, a wrong number of fields, an empty
    class, a non-numeric topic number or an unknown ``open``/``close`` value.
    """
    if not isinstance(data, str) or not data:
        return None
    parts = data.split(":")
    try:
        action = Action(parts[0])
    except ValueError:
        return None
    if len(parts) != _FIELD_COUNT[action]:
        return None
    if action is Action.MENU:
        return NavToken(action)

    class_id = parts[1]
    if not class_id:
        return None
    if action in (Action.CLASS, Action.BACK_TO_TOPICS):
        return NavToken(action, class_id)

    raw_num = parts[2]
    if not (raw_num.isascii() and raw_num.isdigit()):
        return None
    topic_num = int(raw_num)
    if action is Action.TOPIC:
        return NavToken(action, class_id, topic_num)

    sub_action = parts[3]
    if sub_action not in (OPEN, CLOSE):
        return None
    return NavToken(action, class_id, topic_num, sub_action)


def menu_token() -> str:
    return Action.MENU.value


def class_token(class_id: str) -> str:
    return NavToken(Action.CLASS, class_id).encode()


def back_to_topics_token(class_id: str) -> str:
    return NavToken(Action.BACK_TO_TOPICS, class_id).encode()


def topic_token(class_id: str, topic_num: int) -> str:
    return NavToken(Action.TOPIC, class_id, topic_num).encode()


def toggle_token(action: Action, class_id: str, topic_num: int, sub_action: str) -> str:
    return NavToken(action, class_id, topic_num, sub_action).encode()


__all__ = [
    "Action",
    "NavToken",
    "OPEN",
    "CLOSE",
    "parse_token",
    "menu_token",
    "class_token",
    "back_to_topics_token",
    "topic_token",
    "toggle_token",
]
