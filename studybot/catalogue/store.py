"""Read-only catalogue of classes, topics, tests and sources.

The catalogue is produced offline by :mod:`studybot.catalogue.generator` and
loaded once at startup.  :class:`Catalogue` wraps every collection in tuples and
:class:`types.MappingProxyType` so request handlers can share one instance
without any locking.
"""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from pathlib import Path
from types import MappingProxyType
from typing import Any, Dict, Mapping, Optional, Tuple

# ``(class_id, topic_num)`` identifies a topic inside the catalogue.
CatalogueKey = Tuple[str, int]

KEY_SEPARATOR = "|"


def catalogue_key(class_id: str, topic_num: int) -> str:
    """Return the serialized form of a :data:`CatalogueKey`."""
    return f"{class_id}{KEY_SEPARATOR}{int(topic_num)}"


def parse_catalogue_key(raw: str) -> Optional[CatalogueKey]:
    """Inverse of :func:`catalogue_key`; ``None`` for malformed keys."""
    class_id, sep, num = str(raw).partition(KEY_SEPARATOR)
    if not sep or not class_id or not (num.isascii() and num.isdigit()):
        return None
    return class_id, int(num)


@dataclass(frozen=True)
class Topic:
    num: int
    folder: str
    title: Optional[str] = None
    images: Tuple[str, ...] = ()

    @property
    def label(self) -> str:
        title = (self.title or "").strip()
        return title or f"Параграф {self.num}"


@dataclass(frozen=True)
class TestLink:
    label: str
    url: str


@dataclass(frozen=True)
class SourceLink:
    title: str
    url: str


@dataclass(frozen=True)
class Catalogue:
    """Immutable in-memory view over the generated catalogue."""

    classes: Tuple[str, ...] = ()
    _topics: Mapping[str, Tuple[Topic, ...]] = field(default_factory=dict)
    _tests: Mapping[CatalogueKey, Tuple[TestLink, ...]] = field(default_factory=dict)
    _sources: Mapping[CatalogueKey, Tuple[SourceLink, ...]] = field(default_factory=dict)

    # ------------------------------------------------------------------
    # Construction
    @classmethod
    def from_dict(cls, payload: Mapping[str, Any]) -> "Catalogue":
        """Build a catalogue from the generator's JSON structure."""

        classes = tuple(str(c) for c in payload.get("classes") or ())

        topics: Dict[str, Tuple[Topic, ...]] = {}
        for class_id, items in (payload.get("topics") or {}).items():
            parsed = [
                Topic(
                    num=int(item["num"]),
                    folder=str(item["folder"]),
                    title=item.get("title") or None,
                    images=tuple(item.get("images") or ()),
                )
                for item in items
            ]
            parsed.sort(key=lambda t: t.num)
            topics[str(class_id)] = tuple(parsed)

        tests: Dict[CatalogueKey, Tuple[TestLink, ...]] = {}
        for raw_key, items in (payload.get("tests") or {}).items():
            key = parse_catalogue_key(raw_key)
            if key is None:
                continue
            tests[key] = tuple(TestLink(i["label"], i["url"]) for i in items)

        sources: Dict[CatalogueKey, Tuple[SourceLink, ...]] = {}
        for raw_key, items in (payload.get("sources") or {}).items():
            key = parse_catalogue_key(raw_key)
            if key is None:
                continue
            sources[key] = tuple(SourceLink(i["title"], i["url"]) for i in items)

        return cls(
            classes=classes,
            _topics=MappingProxyType(topics),
            _tests=MappingProxyType(tests),
            _sources=MappingProxyType(sources),
        )

    # ------------------------------------------------------------------
    # Lookups
    def has_class(self, class_id: Optional[str]) -> bool:
        return class_id in self.classes

    def topics_of(self, class_id: str) -> Tuple[Topic, ...]:
        """Topics of ``class_id`` ordered by ``num``; empty for unknown classes."""
        return self._topics.get(str(class_id), ())

    def topic(self, class_id: str, num: int) -> Optional[Topic]:
        for item in self.topics_of(class_id):
            if item.num == num:
                return item
        return None

    def neighbours(self, class_id: str, num: int) -> Tuple[Optional[int], Optional[int]]:
        """Return ``(previous, next)`` topic numbers by position, not arithmetic."""
        topics = self.topics_of(class_id)
        for idx, item in enumerate(topics):
            if item.num == num:
                prev_num = topics[idx - 1].num if idx > 0 else None
                next_num = topics[idx + 1].num if idx < len(topics) - 1 else None
                return prev_num, next_num
        return None, None

    def tests_for(self, class_id: str, num: int) -> Tuple[TestLink, ...]:
        return self._tests.get((str(class_id), int(num)), ())

    def sources_for(self, class_id: str, num: int) -> Tuple[SourceLink, ...]:
        return self._sources.get((str(class_id), int(num)), ())

    def stats(self) -> Dict[str, int]:
        return {
            "classes": len(self.classes),
            "topics": sum(len(items) for items in self._topics.values()),
            "tests_keys": len(self._tests),
            "sources_keys": len(self._sources),
        }


def load_catalogue(path: str | Path) -> Catalogue:
    """Read the generated JSON file at ``path``."""
    with Path(path).open(encoding="utf-8") as fh:
        return Catalogue.from_dict(json.load(fh))


__all__ = [
    "CatalogueKey",
    "Catalogue",
    "Topic",
    "TestLink",
    "SourceLink",
    "catalogue_key",
    "parse_catalogue_key",
    "load_catalogue",
]
