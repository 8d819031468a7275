from termkit.style import BACKGROUND_COLORS, BLUE, BOLD, FOREGROUND_COLORS, style
from termkit.width import pad, strip, vlen, wrap


def test_strip_removes_numeric_and_named_sequences() -> None:
    assert strip("\033[0;34mTest\033[0m") == "Test"
    assert strip("\033[1;34m\033[41m\033[4mTest\033[0m") == "Test"
    assert strip("plain") == "plain"


def test_strip_covers_every_table_code() -> None:
    codes = [*FOREGROUND_COLORS.values(), *BACKGROUND_COLORS.values(), "4", "0"]
    for code in codes:
        assert strip(f"\033[{code}mx") == "x"


def test_vlen_counts_cells() -> None:
    assert vlen("Test") == 4
    assert vlen(style("Test", color=BLUE)) == 4
    assert vlen("日本") == 4
    assert vlen("é") == 1
    assert vlen("") == 0


def test_pad_uses_visible_width() -> None:
    colored = style("ab", color=BLUE)
    assert pad(colored, 4) == colored + "  "
    assert pad("ab", 4, align="right") == "  ab"
    assert pad("ab", 5, align="center") == " ab  "
    assert pad("abcdef", 3) == "abcdef"


def test_wrap_breaks_on_words() -> None:
    assert wrap("This is a test string", 5) == ["This", "is a", "test", "string"]


def test_wrap_keeps_long_words_unless_cut() -> None:
    assert wrap("abcdefgh ij", 3) == ["abcdefgh", "ij"]
    assert wrap("abcdefgh ij", 3, cut=True) == ["abc", "def", "gh", "ij"]


def test_wrap_keeps_paragraphs_and_nonpositive_width() -> None:
    assert wrap("one\n\ntwo", 10) == ["one", "", "two"]
    assert wrap("anything goes", 0) == ["anything goes"]


def test_wrap_reopens_active_style() -> None:
    text = "\033[1;37mbold words here\033[0m after"
    lines = wrap(text, 10)
    assert [strip(line) for line in lines] == ["bold words", "here after"]
    assert lines[0].endswith("\033[0m")
    assert lines[1].startswith("\033[1;37m")


def test_wrap_measures_styled_words_by_visible_width() -> None:
    word = style("abc", style=BOLD)
    assert wrap(f"{word} {word}", 7) == [f"{word} {word}"]
