import pytest

from termkit.config import ConsoleConfig
from termkit.progress import ProgressIndicator, fpercent, locale_percent

BAR_50 = "[\033[0;32m#####.....\033[0m] 50%\n"
REDRAW = "\r\033[1A\r\033[K\r"


def test_progress_draws_bar(console) -> None:
    console.progress(5)
    assert console.output.getvalue() == BAR_50


def test_progress_total_steps(console) -> None:
    console.progress(25, 100)
    assert console.output.getvalue() == "[\033[0;32m###.......\033[0m] 25%\n"


def test_progress_clear_after_draw(console) -> None:
    console.progress(5)
    console.progress()
    assert console.output.getvalue() == BAR_50 + "\033[1A\033[K\007"
    assert console.progress_indicator.last_step is None


def test_progress_redraws_in_place_when_advancing(console) -> None:
    console.progress(5)
    console.progress(5)
    console.progress(6)
    out = console.output.getvalue()
    assert out == BAR_50 + REDRAW + BAR_50 + REDRAW + "[\033[0;32m######....\033[0m] 60%\n"


def test_progress_regression_starts_new_line(console) -> None:
    console.progress(6)
    console.progress(5)
    assert REDRAW not in console.output.getvalue()
    assert console.progress_indicator.last_step == 5


def test_progress_after_clear_does_not_erase(console) -> None:
    console.progress(5)
    console.progress()
    console.progress(6)
    assert REDRAW not in console.output.getvalue()


def test_progress_zero_step_counts_as_first_draw(console) -> None:
    console.progress(0)
    console.progress(1)
    out = console.output.getvalue()
    assert REDRAW not in out
    # step and total are clamped to 1
    assert out.startswith("[\033[0;32m#.........\033[0m] 10%\n")


def test_progress_clamps_and_caps(console) -> None:
    indicator = console.progress_indicator
    assert indicator.bar(20, 10) == "[\033[0;32m##########\033[0m] 200%"
    assert indicator.bar(-3, 0) == "[\033[0;32m##########\033[0m] 100%"


def test_progress_without_colors(plain_console) -> None:
    plain_console.progress(5)
    assert plain_console.output.getvalue() == "[#####.....] 50%\n"


def test_progress_custom_width_and_formatter(make_console) -> None:
    console = make_console(config=ConsoleConfig(color="never", bar_width=4))
    indicator = ProgressIndicator(console, bar_width=4, formatter=lambda p: f"{p:.2f}")
    indicator.advance(1, 4)
    assert console.output.getvalue() == "[#...] 0.25\n"
    assert console.progress_indicator.bar_width == 4


def test_indicators_are_independent(console) -> None:
    other = ProgressIndicator(console)
    console.progress(5)
    other.advance(5)
    assert console.output.getvalue() == BAR_50 + BAR_50


@pytest.mark.parametrize(
    "value, expected",
    [(0.5, "50%"), (0.25, "25%"), (1, "100%"), (12.34, "1,234%"), (0.125, "12%")],
)
def test_fpercent(value, expected) -> None:
    assert fpercent(value) == expected


def test_fpercent_decimals() -> None:
    assert fpercent(0.12345, decimals=1) == "12.3%"


def test_locale_percent_formats_whole_percent() -> None:
    assert locale_percent(0.5) == "50%"
    assert locale_percent(0.255) == "26%"
