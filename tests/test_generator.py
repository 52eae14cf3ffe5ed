import json

import pytest

from studybot.catalogue import Catalogue
from studybot.catalogue.generator import (
    generate,
    is_http_url,
    load_sources,
    load_tests,
    main,
    natural_key,
    normalize_test_label,
    normalize_url,
    parse_topic_folder,
)


@pytest.mark.parametrize(
    "name, expected",
    [
        ("14", (14, None)),
        ("1. Ткани и мышцы", (1, "Ткани и мышцы")),
        (" 3 .  Клетка ", (3, "Клетка")),
        ("notes", None),
        ("14abc", None),
        ("٣. Тема", None),
    ],
)
def test_parse_topic_folder(name, expected):
    assert parse_topic_folder(name) == expected


def test_natural_sort_orders_numbers_numerically():
    names = ["10.jpg", "2.jpg", "1.jpg", "img 11.png", "img 2.png"]
    assert sorted(names, key=natural_key) == ["1.jpg", "2.jpg", "10.jpg", "img 2.png", "img 11.png"]


def test_natural_sort_puts_cyrillic_before_latin():
    names = ["b.jpg", "а.jpg", "ё.jpg", "е 2.jpg", "ж.jpg"]
    assert sorted(names, key=natural_key) == ["а.jpg", "е 2.jpg", "ё.jpg", "ж.jpg", "b.jpg"]


def test_non_ascii_digits_skip_only_their_line(tmp_path):
    tests_path = tmp_path / "tests.txt"
    tests_path.write_text(
        "5|²|https://forms.example.org/sup\n"
        "٥|14|https://forms.example.org/arabic\n"
        "5|14|https://forms.example.org/ok\n",
        encoding="utf-8",
    )
    sources_path = tmp_path / "sources.txt"
    sources_path.write_text(
        "5|²|Учебник|https://books.example.org/sup\n"
        "5|14|Учебник|https://books.example.org/14\n",
        encoding="utf-8",
    )

    assert load_tests(tests_path) == {
        "5|14": [{"label": "✅ Пройти тест", "url": "https://forms.example.org/ok"}],
    }
    assert load_sources(sources_path) == {
        "5|14": [{"title": "Учебник", "url": "https://books.example.org/14"}],
    }


@pytest.mark.parametrize(
    "raw, expected",
    [
        ("t.me/biology_class", "https://t.me/biology_class"),
        ("example.org/test", "https://example.org/test"),
        ("http://example.org", "http://example.org"),
        ("  https://example.org/a  ", "https://example.org/a"),
        ("not a url", "not a url"),
        ("", ""),
    ],
)
def test_normalize_url(raw, expected):
    assert normalize_url(raw) == expected


def test_is_http_url():
    assert is_http_url("https://example.org")
    assert not is_http_url("ftp://example.org")
    assert not is_http_url("https://")
    assert not is_http_url("not a url")


@pytest.mark.parametrize(
    "label, expected",
    [
        ("basic", "🟢 Базовая сложность"),
        ("Базовый", "🟢 Базовая сложность"),
        ("HARD", "🔴 Повышенная сложность"),
        ("test", "✅ Пройти тест"),
        (" Контрольная ", "Контрольная"),
    ],
)
def test_normalize_test_label(label, expected):
    assert normalize_test_label(label) == expected


def test_load_tests_parses_three_and_four_field_lines(tmp_path):
    path = tmp_path / "tests.txt"
    path.write_text(
        "# class | topic | label | url\n"
        "\n"
        "5 | 14 | basic | forms.example.org/a\n"
        "5|14|hard|https://forms.example.org/b\n"
        "5|3|https://forms.example.org/c\n"
        "x|3|https://forms.example.org/bad-class\n"
        "5|3|broken url\n"
        "5|3\n",
        encoding="utf-8",
    )
    assert load_tests(path) == {
        "5|14": [
            {"label": "🟢 Базовая сложность", "url": "https://forms.example.org/a"},
            {"label": "🔴 Повышенная сложность", "url": "https://forms.example.org/b"},
        ],
        "5|3": [{"label": "✅ Пройти тест", "url": "https://forms.example.org/c"}],
    }


def test_load_sources_requires_four_fields(tmp_path):
    path = tmp_path / "sources.txt"
    path.write_text(
        "5|14|Учебник|https://books.example.org/14\n"
        "5|14|https://books.example.org/no-title\n"
        "#5|14|Скрыто|https://books.example.org/hidden\n"
        "05|014|Видео|t.me/videos\n",
        encoding="utf-8",
    )
    assert load_sources(path) == {
        "5|14": [{"title": "Учебник", "url": "https://books.example.org/14"}],
        "05|14": [{"title": "Видео", "url": "https://t.me/videos"}],
    }


def test_missing_link_files_are_empty(tmp_path):
    assert load_tests(tmp_path / "nope.txt") == {}
    assert load_sources(tmp_path / "nope.txt") == {}


@pytest.fixture
def public_dir(tmp_path):
    root = tmp_path / "public"
    assets = root / "assets"
    topic = assets / "5" / "14. Ткани и мышцы"
    topic.mkdir(parents=True)
    for name in ("10.jpg", "2.JPG", "1.png", "notes.txt"):
        (topic / name).write_bytes(b"x")
    (assets / "5" / "3").mkdir()
    (assets / "5" / "misc").mkdir()
    (assets / "10" / "1").mkdir(parents=True)
    (assets / "drafts").mkdir()
    (root / "tests.txt").write_text("5|14|basic|https://forms.example.org/a\n", encoding="utf-8")
    return root


def test_generate_scans_asset_tree(public_dir):
    payload = generate(
        public_dir / "assets", public_dir / "tests.txt", public_dir / "sources.txt"
    )
    assert payload["classes"] == ["5", "10"]
    assert payload["topics"]["5"] == [
        {"num": 3, "folder": "3", "images": []},
        {
            "num": 14,
            "folder": "14. Ткани и мышцы",
            "images": ["1.png", "2.JPG", "10.jpg"],
            "title": "Ткани и мышцы",
        },
    ]
    assert payload["topics"]["10"] == [{"num": 1, "folder": "1", "images": []}]
    assert list(payload["tests"]) == ["5|14"]
    assert payload["sources"] == {}


def test_main_writes_loadable_catalogue(public_dir, tmp_path):
    out = tmp_path / "data" / "catalogue.json"
    assert main(["--root", str(public_dir), "--out", str(out)]) == 0

    payload = json.loads(out.read_text(encoding="utf-8"))
    catalogue = Catalogue.from_dict(payload)
    assert catalogue.classes == ("5", "10")
    assert catalogue.topic("5", 14).images == ("1.png", "2.JPG", "10.jpg")
    assert len(catalogue.tests_for("5", 14)) == 1
    # non-ASCII text is written as-is
    assert "Ткани и мышцы" in out.read_text(encoding="utf-8")
