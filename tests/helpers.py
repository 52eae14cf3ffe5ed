"""Helpers for tests."""

ORIGIN = "https://bot.example.org"

CATALOGUE_DATA = {
    "classes": ["5", "6", "7", "9"],
    "topics": {
        "5": [
            {"num": 14, "title": "Ткани и мышцы", "folder": "14. Ткани и мышцы", "images": ["1.jpg"]},
            {"num": 3, "title": "Клетка", "folder": "3. Клетка", "images": ["1.jpg", "2.jpg"]},
            {"num": 7, "folder": "7", "images": [f"{i}.jpg" for i in range(1, 24)]},
            {"num": 8, "folder": "8", "images": []},
        ],
        "6": [
            {"num": 3, "folder": "3", "images": ["a.png"]},
            {"num": 7, "folder": "7", "images": ["a.png"]},
            {"num": 8, "folder": "8", "images": ["a.png"]},
        ],
        "9": [
            {"num": 1, "title": "Введение", "folder": "1. Введение", "images": ["a.png", "b.png"]},
        ],
    },
    "tests": {
        "5|14": [
            {"label": "🟢 Базовая сложность", "url": "https://forms.example.org/basic"},
            {"label": "🔴 Повышенная сложность", "url": "https://forms.example.org/hard"},
        ],
        "5|3": [{"label": "✅ Пройти тест", "url": "https://forms.example.org/cell"}],
        "5|99": [{"label": "✅ Пройти тест", "url": "https://forms.example.org/dangling"}],
    },
    "sources": {
        "5|14": [
            {"title": "Учебник", "url": "https://books.example.org/14"},
            {"title": "Видео", "url": "https://video.example.org/14"},
        ],
        "5|3": [{"title": "Статья", "url": "https://wiki.example.org/cell"}],
    },
}


def callback_data(markup) -> list:
    return [b.callback_data for row in markup.inline_keyboard for b in row if b.callback_data]


def urls(markup) -> list:
    return [b.url for row in markup.inline_keyboard for b in row if b.url]
