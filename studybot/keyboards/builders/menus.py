"""Builders for the class and topic pickers."""

from __future__ import annotations

from typing import Sequence

from telegram import InlineKeyboardButton, InlineKeyboardMarkup

from ...catalogue import Catalogue
from ...navigation.tokens import class_token, menu_token, topic_token
from ...utils.formatting import pad_button
from ..constants import ANOTHER_CLASS, CLASS_LABEL, SELECTED_MARK


def build_class_picker(
    classes: Sequence[str],
    selected: str | None = None,
    row_width: int = 2,
) -> InlineKeyboardMarkup:
    """Return one button per class, ``row_width`` buttons per row.

    Parameters
    ----------
    classes:
        Class identifiers in display order.
    selected:
        Class to mark with a check mark, if any.
    row_width:
        Maximum number of buttons per row; a leftover button gets its own row.
    """

    if row_width <= 0:
        row_width = 1

    keyboard: list[list[InlineKeyboardButton]] = []
    row: list[InlineKeyboardButton] = []
    for class_id in classes:
        mark = SELECTED_MARK if selected == class_id else ""
        label = CLASS_LABEL.format(class_id=class_id) + mark
        row.append(
            InlineKeyboardButton(pad_button(label, 4, 4), callback_data=class_token(class_id))
        )
        if len(row) == row_width:
            keyboard.append(row)
            row = []
    if row:
        keyboard.append(row)
    return InlineKeyboardMarkup(keyboard)


def build_topic_picker(catalogue: Catalogue, class_id: str) -> InlineKeyboardMarkup:
    """One row per topic of ``class_id`` followed by a "change class" row."""

    keyboard = [
        [
            InlineKeyboardButton(
                pad_button(topic.label, 4, 4),
                callback_data=topic_token(class_id, topic.num),
            )
        ]
        for topic in catalogue.topics_of(class_id)
    ]
    keyboard.append(
        [InlineKeyboardButton(pad_button(ANOTHER_CLASS, 3, 3), callback_data=menu_token())]
    )
    return InlineKeyboardMarkup(keyboard)
