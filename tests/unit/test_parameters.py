"""Unit tests for placeholder scanning and renumbering."""

import pytest

from sqlchain.parameters import (
    ParameterInfo,
    ParameterStyle,
    PlaceholderRenumberer,
    count_placeholders,
    extract_placeholders,
    render_placeholder,
)


@pytest.mark.parametrize(
    ("style", "index", "expected"),
    [
        (ParameterStyle.NUMERIC, 1, "$1"),
        (ParameterStyle.NUMERIC, 12, "$12"),
        (ParameterStyle.POSITIONAL_COLON, 3, ":3"),
        (ParameterStyle.QMARK, 7, "?"),
    ],
)
def test_render_placeholder(style: ParameterStyle, index: int, expected: str) -> None:
    assert render_placeholder(style, index) == expected


def test_extract_placeholders_positions() -> None:
    assert extract_placeholders("a = ? AND b = ?") == [
        ParameterInfo(position=4, ordinal=0, placeholder_text="?"),
        ParameterInfo(position=14, ordinal=1, placeholder_text="?"),
    ]


@pytest.mark.parametrize(
    ("template", "expected"),
    [
        ("", 0),
        ("id = ?", 1),
        ("id IN (?, ?, ?)", 3),
        ("name = 'who?'", 0),
        ("name = 'it''s?' AND id = ?", 1),
        ('"weird?col" = ?', 1),
        ("body = $$what?$$ AND id = ?", 1),
        ("body = $tag$a ? b$tag$", 0),
        ("id = ? -- really?", 1),
        ("id = ? /* or ? */ AND x = ?", 2),
        ("data ?| array['a'] AND id = ?", 1),
        ("data ?& array['a']", 0),
        ("data ?? 'key'", 0),
        ("price > $1 AND qty = ?", 1),
        ("path = 'C:\\' OR name = ?", 1),
        ("path = E'a\\'?' AND id = ?", 1),
        ("type'x?' = ?", 1),
        ('"a""?" = ?', 1),
    ],
)
def test_count_placeholders_skips_literals_and_comments(template: str, expected: int) -> None:
    assert count_placeholders(template) == expected


def test_renumberer_shares_counter_across_templates() -> None:
    renumberer = PlaceholderRenumberer()

    first = renumberer.renumber("a = ?, b = ?")
    second = renumberer.renumber("id = ?")

    assert first == "a = $1, b = $2"
    assert second == "id = $3"
    assert renumberer.next_index == 4


def test_renumberer_start_and_style() -> None:
    renumberer = PlaceholderRenumberer(ParameterStyle.POSITIONAL_COLON, start=5)

    assert renumberer.renumber("x BETWEEN ? AND ?") == "x BETWEEN :5 AND :6"
    assert renumberer.style is ParameterStyle.POSITIONAL_COLON


def test_renumberer_leaves_template_without_markers_untouched() -> None:
    renumberer = PlaceholderRenumberer()

    assert renumberer.renumber("deleted_at IS NULL") == "deleted_at IS NULL"
    assert renumberer.next_index == 1


def test_renumberer_keeps_literal_question_marks() -> None:
    renumberer = PlaceholderRenumberer()

    assert renumberer.renumber("title = 'why?' AND id = ? AND tags ?| ?") == (
        "title = 'why?' AND id = $1 AND tags ?| $2"
    )


def test_renumberer_handles_many_placeholders() -> None:
    renumberer = PlaceholderRenumberer()
    template = ", ".join("?" for _ in range(11))

    assert renumberer.renumber(template) == ", ".join(f"${i}" for i in range(1, 12))


def test_parameter_style_str() -> None:
    assert str(ParameterStyle.NUMERIC) == "numeric"
