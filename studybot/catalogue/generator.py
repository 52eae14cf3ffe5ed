"""Offline catalogue generator.

Scans ``assets/<class>/<topic folder>/<images>`` together with the two
pipe-delimited link files and writes the JSON consumed by
:func:`studybot.catalogue.store.load_catalogue`::

    python -m studybot.catalogue.generator --root public --out data/catalogue.json
"""

from __future__ import annotations

import argparse
import json
import logging
import re
from pathlib import Path
from typing import Dict, List, Optional, Tuple
from urllib.parse import urlsplit

from .store import catalogue_key
from ..utils.logging import setup_logging

logger = logging.getLogger(__name__)

IMAGE_EXTS = {".jpg", ".jpeg", ".png", ".webp"}

# "14" or "1. Ткани и мышцы"
_TOPIC_FOLDER_RE = re.compile(r"^\s*([0-9]+)\s*(?:\.\s*(.+?))?\s*$")
_BARE_DOMAIN_RE = re.compile(r"^[\w.-]+\.[a-zA-Z]{2,}(/|$)")
_DIGITS_RE = re.compile(r"([0-9]+)")

_BASIC_LABELS = {"basic", "base", "b", "базовый", "база", "базовая"}
_ADVANCED_LABELS = {"advanced", "hard", "a", "повыш", "повышенная", "сложная", "углубленная"}
_PLAIN_LABELS = {"test", "quiz", "тест"}


def is_number(raw: str) -> bool:
    """``True`` for non-empty ASCII digit strings (``int()`` rejects ``"²"``)."""
    return raw.isascii() and raw.isdigit()


def _letter_key(ch: str) -> Tuple[int, str, bool]:
    # Russian collation: symbols, then Cyrillic (ё next to е), then other letters
    ch = ch.casefold()
    if ch == "ё":
        return 1, "е", True
    if "\u0400" <= ch <= "\u04ff":
        return 1, ch, False
    if ch.isalpha():
        return 2, ch, False
    return 0, ch, False


def natural_key(name: str) -> Tuple[tuple, ...]:
    """Sort key placing ``2.jpg`` before ``10.jpg`` and ``а.jpg`` before ``b.jpg``."""
    parts = []
    for chunk in _DIGITS_RE.split(name):
        if not chunk:
            continue
        if is_number(chunk):
            parts.append((0, int(chunk), ()))
        else:
            parts.append((1, 0, tuple(_letter_key(ch) for ch in chunk)))
    return tuple(parts)


def parse_topic_folder(name: str) -> Optional[Tuple[int, Optional[str]]]:
    m = _TOPIC_FOLDER_RE.match(name)
    if not m:
        return None
    title = m.group(2).strip() if m.group(2) else None
    return int(m.group(1)), title or None


def normalize_url(raw: str) -> str:
    url = (raw or "").strip()
    if not url:
        return url
    if url.startswith(("t.me/", "telegram.me/")):
        return "https://" + url
    if urlsplit(url).scheme in ("http", "https"):
        return url
    if _BARE_DOMAIN_RE.match(url):
        return "https://" + url
    return url


def is_http_url(url: str) -> bool:
    try:
        parts = urlsplit(url)
    except ValueError:
        return False
    return parts.scheme in ("http", "https") and bool(parts.netloc)


def normalize_test_label(label: str) -> str:
    cleaned = (label or "").strip()
    lowered = cleaned.lower()
    if lowered in _BASIC_LABELS:
        return "🟢 Базовая сложность"
    if lowered in _ADVANCED_LABELS:
        return "🔴 Повышенная сложность"
    if lowered in _PLAIN_LABELS:
        return "✅ Пройти тест"
    return cleaned


def read_records(path: Path) -> List[List[str]]:
    """Return pipe-split fields of every meaningful line of ``path``."""
    if not path.exists():
        logger.info("link file %s not found, skipping", path)
        return []
    records = []
    for line in path.read_text(encoding="utf-8").splitlines():
        line = line.strip()
        if not line or line.startswith("#"):
            continue
        records.append([p.strip() for p in line.split("|")])
    return records


def load_tests(path: Path) -> Dict[str, List[Dict[str, str]]]:
    data: Dict[str, List[Dict[str, str]]] = {}
    for parts in read_records(path):
        if len(parts) == 3:
            class_id, topic_raw, url = parts
            label = "test"
        elif len(parts) >= 4:
            class_id, topic_raw, label, url = parts[:4]
        else:
            logger.warning("tests: skipping line with %d fields: %r", len(parts), parts)
            continue
        if not is_number(class_id) or not is_number(topic_raw):
            continue
        url = normalize_url(url)
        if not is_http_url(url):
            logger.warning("tests: skipping invalid url %r", url)
            continue
        key = catalogue_key(class_id, int(topic_raw))
        data.setdefault(key, []).append({"label": normalize_test_label(label), "url": url})
    return data


def load_sources(path: Path) -> Dict[str, List[Dict[str, str]]]:
    data: Dict[str, List[Dict[str, str]]] = {}
    for parts in read_records(path):
        if len(parts) < 4:
            logger.warning("sources: skipping line with %d fields: %r", len(parts), parts)
            continue
        class_id, topic_raw, title, url = parts[:4]
        if not is_number(class_id) or not is_number(topic_raw):
            continue
        url = normalize_url(url)
        if not is_http_url(url):
            logger.warning("sources: skipping invalid url %r", url)
            continue
        key = catalogue_key(class_id, int(topic_raw))
        data.setdefault(key, []).append({"title": title.strip(), "url": url})
    return data


def load_topics(assets_dir: Path) -> Tuple[List[str], Dict[str, List[dict]]]:
    if not assets_dir.is_dir():
        logger.warning("assets directory %s does not exist", assets_dir)
        return [], {}

    classes = sorted(
        (d.name for d in assets_dir.iterdir() if d.is_dir() and is_number(d.name)),
        key=int,
    )

    topics_by_class: Dict[str, List[dict]] = {}
    for class_id in classes:
        topics = []
        for topic_dir in (assets_dir / class_id).iterdir():
            if not topic_dir.is_dir():
                continue
            parsed = parse_topic_folder(topic_dir.name)
            if parsed is None:
                logger.debug("skipping folder %s", topic_dir)
                continue
            num, title = parsed
            images = sorted(
                (
                    f.name
                    for f in topic_dir.iterdir()
                    if f.is_file() and f.suffix.lower() in IMAGE_EXTS
                ),
                key=natural_key,
            )
            item = {"num": num, "folder": topic_dir.name, "images": images}
            if title:
                item["title"] = title
            topics.append(item)
        topics.sort(key=lambda t: t["num"])
        topics_by_class[class_id] = topics

    return classes, topics_by_class


def generate(assets_dir: Path, tests_path: Path, sources_path: Path) -> dict:
    classes, topics = load_topics(assets_dir)
    return {
        "classes": classes,
        "topics": topics,
        "tests": load_tests(tests_path),
        "sources": load_sources(sources_path),
    }


def write_catalogue(payload: dict, out: Path) -> None:
    out.parent.mkdir(parents=True, exist_ok=True)
    with out.open("w", encoding="utf-8") as fh:
        json.dump(payload, fh, ensure_ascii=False, indent=2)
        fh.write("\n")


def main(argv: Optional[List[str]] = None) -> int:
    parser = argparse.ArgumentParser(description="Generate the topic catalogue JSON.")
    parser.add_argument("--root", default="public", help="directory holding assets/ and the link files")
    parser.add_argument("--assets", help="asset tree (default: <root>/assets)")
    parser.add_argument("--tests", help="tests file (default: <root>/tests.txt)")
    parser.add_argument("--sources", help="sources file (default: <root>/sources.txt)")
    parser.add_argument("--out", default="data/catalogue.json")
    args = parser.parse_args(argv)
    setup_logging()

    root = Path(args.root)
    payload = generate(
        Path(args.assets) if args.assets else root / "assets",
        Path(args.tests) if args.tests else root / "tests.txt",
        Path(args.sources) if args.sources else root / "sources.txt",
    )
    out = Path(args.out)
    write_catalogue(payload, out)
    logger.info(
        "generated %s: %d classes, %d topics",
        out,
        len(payload["classes"]),
        sum(len(v) for v in payload["topics"].values()),
    )
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
