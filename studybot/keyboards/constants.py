from telegram import InlineKeyboardButton, InlineKeyboardMarkup

from ..utils.formatting import pad_button

CHOOSE_CLASS       = "Выбери класс:"
CLASS_SELECTED     = "Выбранный класс: {class_id}\nВыбери тему:"
TOPIC_HEADER       = "📌 {class_id} класс — {label}"
NO_SUCH_TOPIC      = "Такой темы нет."
NO_IMAGES          = "Картинок не найдено: assets/{class_id}/{folder}/"
BUTTONS_ONLY       = "Я работаю через кнопки. Нажми /menu"
PRIVATE_NUDGE      = "👋 Открой бота в личных сообщениях, чтобы меню было отдельно для тебя."
GROUP_NOTICE       = (
    "⚠️ В группах меню общее на всех. Напиши боту в личку (/start), "
    "чтобы всё работало отдельно для каждого."
)

CLASS_LABEL        = "{class_id} класс"
SELECTED_MARK      = " ✅"
ANOTHER_CLASS      = "⬅️ Другой класс"
TAKE_TEST          = "✅ Пройти тест"
EXTRA_SOURCES      = "📎 Доп. источники"
BACK               = "⬅️ Назад"
PREV_TOPIC         = "⬅️ Предыдущая тема"
NEXT_TOPIC         = "➡️ Следующая тема"
HOME               = "🏠 Меню"
OPEN_BOT           = "Открыть бота"


def home_button() -> InlineKeyboardButton:
    return InlineKeyboardButton(pad_button(HOME, 3, 3), callback_data="menu")


def home_only_keyboard() -> InlineKeyboardMarkup:
    """Fallback keyboard with a single "home" button."""
    return InlineKeyboardMarkup([[home_button()]])


def open_bot_keyboard(url: str | None) -> InlineKeyboardMarkup | None:
    if not url:
        return None
    return InlineKeyboardMarkup([[InlineKeyboardButton(pad_button(OPEN_BOT, 4, 4), url=url)]])


__all__ = [
    "CHOOSE_CLASS",
    "CLASS_SELECTED",
    "TOPIC_HEADER",
    "NO_SUCH_TOPIC",
    "NO_IMAGES",
    "BUTTONS_ONLY",
    "PRIVATE_NUDGE",
    "GROUP_NOTICE",
    "CLASS_LABEL",
    "SELECTED_MARK",
    "ANOTHER_CLASS",
    "TAKE_TEST",
    "EXTRA_SOURCES",
    "BACK",
    "PREV_TOPIC",
    "NEXT_TOPIC",
    "HOME",
    "OPEN_BOT",
    "home_button",
    "home_only_keyboard",
    "open_bot_keyboard",
]
