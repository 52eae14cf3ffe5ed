from studybot.keyboards.builders import (
    build_class_picker,
    build_topic_detail,
    build_topic_picker,
)
from studybot.keyboards.constants import home_only_keyboard, open_bot_keyboard
from studybot.navigation import DisplayState, parse_token
from studybot.utils.formatting import NBSP
from tests.helpers import callback_data, urls


def test_class_picker_pairs_buttons_and_flushes_leftover():
    markup = build_class_picker(["5", "6", "7"])
    rows = markup.inline_keyboard
    assert [len(r) for r in rows] == [2, 1]
    assert callback_data(markup) == ["class:5", "class:6", "class:7"]


def test_class_picker_tokens_round_trip(catalogue):
    markup = build_class_picker(catalogue.classes)
    parsed = [parse_token(data).class_id for data in callback_data(markup)]
    assert parsed == list(catalogue.classes)


def test_class_picker_marks_selected_class():
    markup = build_class_picker(["5", "6"], selected="6")
    first, second = markup.inline_keyboard[0]
    assert "✅" not in first.text
    assert "6 класс ✅" in second.text


def test_topic_picker_lists_topics_and_change_class(catalogue):
    markup = build_topic_picker(catalogue, "5")
    assert callback_data(markup) == [
        "topic:5:3",
        "topic:5:7",
        "topic:5:8",
        "topic:5:14",
        "menu",
    ]
    assert all(len(row) == 1 for row in markup.inline_keyboard)
    assert "Параграф 7" in markup.inline_keyboard[1][0].text


def test_topic_picker_for_class_without_topics(catalogue):
    assert callback_data(build_topic_picker(catalogue, "7")) == ["menu"]


def test_labels_are_padded_with_nbsp(catalogue):
    markup = build_topic_picker(catalogue, "9")
    text = markup.inline_keyboard[0][0].text
    assert text == f"{NBSP * 4}Введение{NBSP * 4}"


def test_detail_collapsed_shows_toggles(catalogue):
    markup = build_topic_detail(catalogue, "5", 14)
    assert callback_data(markup) == [
        "tests:5:14:open",
        "sources:5:14:open",
        "back-to-topics:5",
        "topic:5:8",
        "menu",
    ]
    assert urls(markup) == []


def test_detail_expanded_lists_links_then_collapse(catalogue):
    markup = build_topic_detail(
        catalogue, "5", 14, DisplayState(tests_expanded=True, sources_expanded=True)
    )
    rows = markup.inline_keyboard
    assert rows[0][0].url == "https://forms.example.org/basic"
    assert rows[1][0].url == "https://forms.example.org/hard"
    assert rows[2][0].callback_data == "tests:5:14:close"
    assert rows[3][0].url == "https://books.example.org/14"
    assert rows[4][0].url == "https://video.example.org/14"
    assert rows[5][0].callback_data == "sources:5:14:close"
    assert rows[-1][0].callback_data == "menu"


def test_detail_single_link_is_direct_url(catalogue):
    markup = build_topic_detail(catalogue, "5", 3)
    assert urls(markup) == ["https://forms.example.org/cell", "https://wiki.example.org/cell"]
    assert not any(d.startswith(("tests:", "sources:")) for d in callback_data(markup))


def test_detail_without_links_has_only_navigation(catalogue):
    markup = build_topic_detail(catalogue, "5", 8)
    assert [[b.callback_data for b in row] for row in markup.inline_keyboard] == [
        ["back-to-topics:5", "topic:5:7", "topic:5:14"],
        ["menu"],
    ]


def test_prev_next_follow_sequence_with_gaps(catalogue):
    def nav_row(num):
        rows = build_topic_detail(catalogue, "6", num).inline_keyboard
        return [b.callback_data for b in rows[-2]]

    assert nav_row(7) == ["back-to-topics:6", "topic:6:3", "topic:6:8"]
    assert nav_row(3) == ["back-to-topics:6", "topic:6:7"]
    assert nav_row(8) == ["back-to-topics:6", "topic:6:7"]
    assert "Следующая" in build_topic_detail(catalogue, "6", 3).inline_keyboard[-2][1].text
    assert "Предыдущая" in build_topic_detail(catalogue, "6", 8).inline_keyboard[-2][1].text


def test_home_only_keyboard():
    markup = home_only_keyboard()
    assert callback_data(markup) == ["menu"]
    assert len(markup.inline_keyboard) == 1


def test_open_bot_keyboard():
    assert open_bot_keyboard(None) is None
    assert urls(open_bot_keyboard("https://t.me/study_bot")) == ["https://t.me/study_bot"]
