from __future__ import annotations

from typing import List, Sequence, Tuple

from telegram import InlineKeyboardButton, InlineKeyboardMarkup

from ...catalogue import Catalogue
from ...navigation.state import DisplayState
from ...navigation.tokens import (
    CLOSE,
    OPEN,
    Action,
    back_to_topics_token,
    toggle_token,
    topic_token,
)
from ...utils.formatting import pad_button
from ..constants import (
    BACK,
    EXTRA_SOURCES,
    NEXT_TOPIC,
    PREV_TOPIC,
    TAKE_TEST,
    home_button,
)

Row = List[InlineKeyboardButton]


def _accordion_rows(
    action: Action,
    class_id: str,
    topic_num: int,
    title: str,
    items: Sequence[Tuple[str, str]],
    expanded: bool,
) -> List[Row]:
    """Rows for one collapsible section given ``(label, url)`` items."""

    if not items:
        return []
    if len(items) == 1:
        return [[InlineKeyboardButton(pad_button(title, 4, 4), url=items[0][1])]]
    if not expanded:
        token = toggle_token(action, class_id, topic_num, OPEN)
        return [[InlineKeyboardButton(pad_button(title, 4, 4), callback_data=token)]]

    rows: List[Row] = [
        [InlineKeyboardButton(pad_button(label, 4, 4), url=url)] for label, url in items
    ]
    token = toggle_token(action, class_id, topic_num, CLOSE)
    rows.append([InlineKeyboardButton(pad_button(BACK, 3, 3), callback_data=token)])
    return rows


def build_topic_detail(
    catalogue: Catalogue,
    class_id: str,
    topic_num: int,
    display: DisplayState | None = None,
) -> InlineKeyboardMarkup:
    """Keyboard shown under a topic: tests, sources, navigation, home."""

    display = display or DisplayState()
    tests = [(t.label, t.url) for t in catalogue.tests_for(class_id, topic_num)]
    sources = [(s.title, s.url) for s in catalogue.sources_for(class_id, topic_num)]

    keyboard: List[Row] = []
    keyboard += _accordion_rows(
        Action.TESTS, class_id, topic_num, TAKE_TEST, tests, display.tests_expanded
    )
    keyboard += _accordion_rows(
        Action.SOURCES, class_id, topic_num, EXTRA_SOURCES, sources, display.sources_expanded
    )

    prev_num, next_num = catalogue.neighbours(class_id, topic_num)
    nav_row: Row = [
        InlineKeyboardButton(pad_button(BACK, 3, 3), callback_data=back_to_topics_token(class_id))
    ]
    if prev_num is not None:
        nav_row.append(
            InlineKeyboardButton(
                pad_button(PREV_TOPIC, 2, 2), callback_data=topic_token(class_id, prev_num)
            )
        )
    if next_num is not None:
        nav_row.append(
            InlineKeyboardButton(
                pad_button(NEXT_TOPIC, 2, 2), callback_data=topic_token(class_id, next_num)
            )
        )
    keyboard.append(nav_row)
    keyboard.append([home_button()])
    return InlineKeyboardMarkup(keyboard)
