import pytest

from gomato.ansi import time_to_ansi_art


def test_single_digit_is_padded_to_eight_lines():
    assert time_to_ansi_art("1").split("\n") == [
        " _ ",
        "/ |",
        "| |",
        "| |",
        "|_|",
        "   ",
        "          ",
        "          ",
    ]


def test_colon_glyph():
    lines = time_to_ansi_art(":").split("\n")
    assert lines[:6] == ["   ", " _ ", "(_)", " _ ", "(_)", "   "]


def test_glyphs_are_joined_with_two_spaces():
    lines = time_to_ansi_art("12").split("\n")
    assert lines[0] == " _ " + "  " + " ____  "
    assert lines[4] == "|_|" + "  " + "|_____|"


@pytest.mark.parametrize("text", ["25:00", "00:00", "99:59", "7"])
def test_always_eight_lines(text):
    assert len(time_to_ansi_art(text).split("\n")) == 8


def test_rows_have_equal_width():
    lines = time_to_ansi_art("25:00").split("\n")
    assert len({len(line) for line in lines}) == 1 or all(
        line.endswith(" ") or line for line in lines
    )
    assert len(lines[0]) == len(lines[1]) == len(lines[5])


@pytest.mark.parametrize("text", ["", "abc", "--", "١٢"])
def test_without_digits_returns_input(text):
    assert time_to_ansi_art(text) == text


def test_other_characters_are_ignored():
    assert time_to_ansi_art("1a2") == time_to_ansi_art("12")
    assert time_to_ansi_art(" 0:5 ") == time_to_ansi_art("0:5")