import pytest

from gomato.styles import (
    RESET,
    app_frame,
    blurred_style,
    colorize,
    focused_style,
    status_message_style,
    strip_styles,
    title_style,
)


def test_colorize_without_colors_is_identity():
    assert colorize("plain text") == "plain text"


@pytest.mark.parametrize("fg,bg", [("#25A065", None), ("205", None), (None, "#FFFDF5"), ("240", "#04B575")])
def test_colorize_round_trip(fg, bg):
    styled = colorize("hello", fg, bg)
    assert styled.startswith("\x1b[")
    assert styled.endswith(RESET)
    assert strip_styles(styled) == "hello"


def test_colorize_styles_each_line():
    styled = colorize("a\nb", "205")
    parts = styled.split("\n")
    assert len(parts) == 2
    assert all(part.endswith(RESET) for part in parts)
    assert strip_styles(styled) == "a\nb"


@pytest.mark.parametrize("color", ["#12345", "#GGGGGG", "256", "red", ""])
def test_invalid_color_raises(color):
    with pytest.raises(ValueError):
        colorize("x", color)


def test_title_style_pads_text():
    assert strip_styles(title_style("x")) == " x "


def test_named_styles_keep_text():
    for style in (status_message_style, focused_style, blurred_style):
        assert strip_styles(style("番茄钟")) == "番茄钟"
    assert focused_style("a") != blurred_style("a")


def test_app_frame_shape():
    framed = app_frame("ab\ncdef").split("\n")
    assert len(framed) == 4
    assert framed[0].strip() == ""
    assert framed[-1] == framed[0]
    assert len({len(line) for line in framed}) == 1
    assert framed[1].startswith("  ab")


def test_app_frame_counts_wide_characters():
    framed = app_frame("番茄\nab").split("\n")
    assert framed[2] == "  ab    "
    assert framed[0] == " " * len(framed[2])