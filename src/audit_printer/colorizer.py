"""Score tokens for the pretty report."""

from typing import Any, Optional

from rich.color import ColorSystem
from rich.style import Style


SCORE_STYLES = {
    "pass": Style(color="green"),
    "fail": Style(color="red"),
    "info": Style(color="bright_magenta"),
    "low": Style(color="red"),
    "medium": Style(color="yellow"),
    "high": Style(color="green"),
    "bold": Style(bold=True),
}

PASS_GLYPH = "✓"
FAIL_GLYPH = "✘"


def score_tier(score: float) -> str:
    """Get the color tier for a numeric score."""
    if score > 75:
        return "high"
    elif score > 45:
        return "medium"
    else:
        return "low"


def format_number(score: float) -> str:
    """Integral floats drop the trailing .0 (93.0 -> "93")."""
    if isinstance(score, float) and score.is_integer():
        return str(int(score))
    return str(score)


def paint(text: str, style: str, color_system: Optional[ColorSystem] = ColorSystem.STANDARD) -> str:
    """Wrap text in the escape sequences of a named style."""
    return SCORE_STYLES[style].render(text, color_system=color_system)


def format_score(
    score: Any,
    suffix: str = "",
    color_system: Optional[ColorSystem] = ColorSystem.STANDARD,
) -> str:
    """Format a score as a colored token.

    Booleans become a check or cross, non-numeric values are echoed in
    the info color, numbers get a red/yellow/green tier with the suffix.
    """
    if isinstance(score, bool):
        if score:
            return paint(PASS_GLYPH, "pass", color_system)
        return paint(FAIL_GLYPH, "fail", color_system)
    if not isinstance(score, (int, float)):
        return paint(str(score), "info", color_system)

    return paint(f"{format_number(score)}{suffix}", score_tier(score), color_system)
