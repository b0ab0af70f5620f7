from classicpass.controls import (
    clamp_length, toggle_option, toggle_view, view_titles, strength_style,
    CopyFeedback, HOME, ABOUT, MIN_LENGTH, MAX_LENGTH,
)
from classicpass.generator import GenerationOptions


def test_clamp_length():
    assert clamp_length(12) == 12
    assert clamp_length(1) == MIN_LENGTH
    assert clamp_length(99) == MAX_LENGTH
    assert clamp_length(-5) == 4
    assert clamp_length(10, 8, 9) == 9

def test_toggle_option_flips_flag():
    opts = GenerationOptions()
    opts = toggle_option(opts, "include_symbols")
    assert opts.include_symbols is False
    opts = toggle_option(opts, "include_symbols")
    assert opts.include_symbols is True

def test_last_option_cannot_be_unchecked():
    opts = GenerationOptions(12, False, True, False)
    assert toggle_option(opts, "include_numbers") == opts
    # enabling another class is always allowed
    opts = toggle_option(opts, "include_letters")
    assert opts.include_letters and opts.include_numbers
    # and then the former last option may go
    opts = toggle_option(opts, "include_numbers")
    assert opts == GenerationOptions(12, True, False, False)

def test_toggle_unknown_option_raises():
    try:
        toggle_option(GenerationOptions(), "include_emoji")
        raised = False
    except ValueError:
        raised = True
    assert raised

def test_views():
    assert toggle_view(HOME) == ABOUT
    assert toggle_view(ABOUT) == HOME
    assert view_titles(HOME) == ("Classic Generator", "Secure passwords instantly")
    assert view_titles(ABOUT) == ("About Us", "Developer & Legal Info")

def test_strength_style():
    strong_color, strong_fill = strength_style("Strong")
    medium_color, medium_fill = strength_style("Medium")
    weak_color, weak_fill = strength_style("Weak")
    assert strong_fill == 1.0
    assert abs(medium_fill - 2 / 3) < 1e-9
    assert abs(weak_fill - 1 / 3) < 1e-9
    assert len({strong_color, medium_color, weak_color}) == 3
    assert strength_style("Unknown")[1] == 0.0

def test_copy_feedback():
    fb = CopyFeedback()
    assert fb.duration_ms == 2000
    assert fb.mark_copied("") is False
    assert fb.copied is False
    assert fb.mark_copied("Abc123!@") is True
    assert fb.copied is True
    fb.reset()
    assert fb.copied is False
