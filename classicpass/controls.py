"""
classicpass.controls

UI rules shared by every front end (GUI, CLI):
- length bounds and clamping
- the "last option" guard that keeps at least one character class enabled
- home/about view switching
- strength indicator color and fill
- the transient "Copied!" flag after a clipboard copy
"""

from typing import Optional, Tuple

from .generator import GenerationOptions
from .score import WEAK, MEDIUM, STRONG

MIN_LENGTH = 4
MAX_LENGTH = 32
DEFAULT_LENGTH = 12

OPTION_NAMES = ("include_letters", "include_numbers", "include_symbols")

HOME = "home"
ABOUT = "about"

_TITLES = {
    HOME: ("Classic Generator", "Secure passwords instantly"),
    ABOUT: ("About Us", "Developer & Legal Info"),
}

# label -> (bar color, filled fraction)
_STRENGTH_STYLES = {
    STRONG: ("#22c55e", 1.0),
    MEDIUM: ("#eab308", 2 / 3),
    WEAK: ("#ef4444", 1 / 3),
}
_UNKNOWN_STYLE = ("#e2e8f0", 0.0)


def clamp_length(value: int, minimum: int = MIN_LENGTH, maximum: int = MAX_LENGTH) -> int:
    return max(minimum, min(maximum, int(value)))


def toggle_option(options: GenerationOptions, name: str) -> GenerationOptions:
    """
    Flip one include-flag. Unchecking the last enabled class is refused and the
    options come back unchanged.
    """
    if name not in OPTION_NAMES:
        raise ValueError(f"unknown option: {name}")
    current = getattr(options, name)
    others = [getattr(options, n) for n in OPTION_NAMES if n != name]
    if current and not any(others):
        return options
    return options._replace(**{name: not current})


def toggle_view(view: str) -> str:
    return ABOUT if view == HOME else HOME


def view_titles(view: str) -> Tuple[str, str]:
    return _TITLES.get(view, _TITLES[HOME])


def strength_style(label: str) -> Tuple[str, float]:
    return _STRENGTH_STYLES.get(label, _UNKNOWN_STYLE)


class CopyFeedback:
    """Tracks whether the "Copied!" hint is showing for the current password."""

    def __init__(self, duration_ms: int = 2000):
        self.duration_ms = duration_ms
        self.copied = False

    def mark_copied(self, password: Optional[str]) -> bool:
        # nothing to copy
        if not password:
            return False
        self.copied = True
        return True

    def reset(self) -> None:
        self.copied = False
