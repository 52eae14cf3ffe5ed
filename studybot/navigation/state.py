"""Display state recovered from the keyboard of the message being edited.

Nothing about a user's position in the menu is stored on the server.  Which
accordions are open is visible only in the keyboard currently attached to the
message: an expanded section shows a ``…:close`` button.
:func:`reconstruct_display_state` reads that keyboard back before a toggle is
applied so that opening one section keeps the other one as it was.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Iterator

from .tokens import CLOSE, Action, toggle_token


@dataclass(frozen=True)
class DisplayState:
    tests_expanded: bool = False
    sources_expanded: bool = False


def iter_callback_data(markup: Any) -> Iterator[str]:
    """Yield the callback data of every button in ``markup``.

    Accepts an :class:`telegram.InlineKeyboardMarkup` or ``None``; anything
    that does not look like a grid of buttons yields nothing.
    """
    rows = getattr(markup, "inline_keyboard", None)
    if not isinstance(rows, (list, tuple)):
        return
    for row in rows:
        if not isinstance(row, (list, tuple)):
            continue
        for button in row:
            data = getattr(button, "callback_data", None)
            if isinstance(data, str):
                yield data


def has_callback(markup: Any, token: str) -> bool:
    return any(data == token for data in iter_callback_data(markup))


def reconstruct_display_state(markup: Any, class_id: str, topic_num: int) -> DisplayState:
    """Return which sections of topic ``class_id``/``topic_num`` are expanded."""
    return DisplayState(
        tests_expanded=has_callback(
            markup, toggle_token(Action.TESTS, class_id, topic_num, CLOSE)
        ),
        sources_expanded=has_callback(
            markup, toggle_token(Action.SOURCES, class_id, topic_num, CLOSE)
        ),
    )


__all__ = [
    "DisplayState",
    "iter_callback_data",
    "has_callback",
    "reconstruct_display_state",
]
