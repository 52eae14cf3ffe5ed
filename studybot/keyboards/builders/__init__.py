"""Keyboard builder helper functions."""

from .menus import build_class_picker, build_topic_picker
from .topic import build_topic_detail

__all__ = [
    "build_class_picker",
    "build_topic_picker",
    "build_topic_detail",
]
