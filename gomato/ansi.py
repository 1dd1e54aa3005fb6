"""Large ASCII-art rendering of clock strings such as ``25:00``."""

LINES_PER_GLYPH = 8
GLYPH_SPACING = "  "
_FILLER = " " * 10

_GLYPHS: dict[str, tuple[str, ...]] = {
    "0": (
        "  ___  ",
        " / _ \\ ",
        "| | | |",
        "| |_| |",
        " \\___/ ",
        "       ",
    ),
    "1": (
        " _ ",
        "/ |",
        "| |",
        "| |",
        "|_|",
        "   ",
    ),
    "2": (
        " ____  ",
        "|___ \\ ",
        "  __) |",
        " / __/ ",
        "|_____|",
        "       ",
    ),
    "3": (
        " _____ ",
        "|___ / ",
        "  |_ \\ ",
        " ___) |",
        "|____/ ",
        "       ",
    ),
    "4": (
        " _  _   ",
        "| || |  ",
        "| || |_ ",
        "|__   _|",
        "   |_|  ",
        "        ",
    ),
    "5": (
        " ____  ",
        "| ___| ",
        "|___ \\ ",
        " ___) |",
        "|____/ ",
        "       ",
    ),
    "6": (
        "  __   ",
        " / /_  ",
        "| '_ \\ ",
        "| (_) |",
        " \\___/ ",
        "       ",
    ),
    "7": (
        " _____ ",
        "|___  |",
        "   / / ",
        "  / /  ",
        " /_/   ",
        "       ",
    ),
    "8": (
        "  ___  ",
        " ( _ ) ",
        " / _ \\ ",
        "| (_) |",
        " \\___/ ",
        "       ",
    ),
    "9": (
        "  ___  ",
        " / _ \\ ",
        "| (_) |",
        " \\__, |",
        "   /_/ ",
        "       ",
    ),
    ":": (
        "   ",
        " _ ",
        "(_)",
        " _ ",
        "(_)",
        "   ",
    ),
}


def time_to_ansi_art(time_str: str) -> str:
    """Render the digits and colons of ``time_str`` as multi-line ASCII art.

    Characters other than ASCII digits and ``:`` are ignored. If nothing
    renderable remains, the input is returned unchanged.
    """
    glyphs = [_GLYPHS[char] for char in time_str if char in _GLYPHS]
    if not glyphs:
        return time_str
    padded = [glyph + (_FILLER,) * (LINES_PER_GLYPH - len(glyph)) for glyph in glyphs]
    return "\n".join(GLYPH_SPACING.join(row) for row in zip(*padded))