"""Navigation state machine.

:func:`resolve` turns a parsed :class:`NavToken` plus the keyboard of the
pressed message into a :class:`Transition`.  It performs no I/O; the callback
handler executes the result.  ``None`` means the press is acknowledged but the
screen stays as it is (unknown class, toggle for a missing topic).
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, replace
from typing import Any, Optional, Union

from telegram import InlineKeyboardMarkup

from ..catalogue import Catalogue
from ..keyboards.builders import build_class_picker, build_topic_detail, build_topic_picker
from ..keyboards.constants import CHOOSE_CLASS, CLASS_SELECTED
from .state import reconstruct_display_state
from .tokens import OPEN, Action, NavToken

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class EditText:
    """Replace the text and keyboard of the pressed message."""

    text: str
    keyboard: InlineKeyboardMarkup


@dataclass(frozen=True)
class EditKeyboard:
    """Replace only the keyboard of the pressed message."""

    keyboard: InlineKeyboardMarkup


@dataclass(frozen=True)
class ShowTopic:
    """Send the topic's images and its navigation message as new messages."""

    class_id: str
    topic_num: int


Transition = Union[EditText, EditKeyboard, ShowTopic]


def home_screen(catalogue: Catalogue) -> EditText:
    return EditText(CHOOSE_CLASS, build_class_picker(catalogue.classes))


def topics_screen(catalogue: Catalogue, class_id: str) -> EditText:
    return EditText(
        CLASS_SELECTED.format(class_id=class_id),
        build_topic_picker(catalogue, class_id),
    )


def _toggle(token: NavToken, markup: Any, catalogue: Catalogue) -> Optional[EditKeyboard]:
    if catalogue.topic(token.class_id, token.topic_num) is None:
        logger.debug("toggle for missing topic %s", token.encode())
        return None
    # read the other section's state from the keyboard before it is replaced
    prior = reconstruct_display_state(markup, token.class_id, token.topic_num)
    expanded = token.sub_action == OPEN
    if token.action is Action.TESTS:
        display = replace(prior, tests_expanded=expanded)
    else:
        display = replace(prior, sources_expanded=expanded)
    return EditKeyboard(build_topic_detail(catalogue, token.class_id, token.topic_num, display))


def resolve(token: NavToken, markup: Any, catalogue: Catalogue) -> Optional[Transition]:
    """Compute the next screen for ``token``.

    Parameters
    ----------
    token:
        Parsed callback data of the pressed button.
    markup:
        Keyboard attached to the pressed message, used to recover the
        accordion state on toggles.
    catalogue:
        The loaded catalogue.
    """

    if token.action is Action.MENU:
        return home_screen(catalogue)

    if not catalogue.has_class(token.class_id):
        logger.debug("unknown class in token %s", token.encode())
        return None

    if token.action in (Action.CLASS, Action.BACK_TO_TOPICS):
        return topics_screen(catalogue, token.class_id)

    if token.action is Action.TOPIC:
        return ShowTopic(token.class_id, token.topic_num)

    return _toggle(token, markup, catalogue)


__all__ = [
    "EditText",
    "EditKeyboard",
    "ShowTopic",
    "Transition",
    "home_screen",
    "topics_screen",
    "resolve",
]
