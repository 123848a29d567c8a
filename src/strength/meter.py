"""Sign-up form strength meter.

Presents a strength report the way the sign-up form shows it: hidden
for an empty password, a color per strength level, and only the first
few suggestions.
"""

from dataclasses import dataclass

from .evaluator import ColorTag, StrengthReport, evaluate

DEFAULT_MAX_SUGGESTIONS = 3

METER_COLORS: dict[ColorTag, str] = {
    ColorTag.NONE: "transparent",
    ColorTag.WEAK: "red",
    ColorTag.MEDIUM: "yellow",
    ColorTag.STRONG: "green",
}


@dataclass(frozen=True)
class MeterView:
    """What the strength meter displays for the current password."""

    visible: bool
    score: int
    label: str
    color_tag: ColorTag
    color: str
    suggestions: tuple[str, ...]


def meter_view(
    report: StrengthReport, max_suggestions: int = DEFAULT_MAX_SUGGESTIONS
) -> MeterView:
    """Build the meter display for an existing report.

    Args:
        report: Report produced by ``evaluate``.
        max_suggestions: Maximum number of suggestions to show.

    Returns:
        Meter view with truncated suggestions.
    """
    return MeterView(
        visible=report.color_tag is not ColorTag.NONE,
        score=report.score,
        label=report.label,
        color_tag=report.color_tag,
        color=METER_COLORS[report.color_tag],
        suggestions=report.suggestions[: max(0, max_suggestions)],
    )


def build_meter(
    password: str, max_suggestions: int = DEFAULT_MAX_SUGGESTIONS
) -> MeterView:
    """Evaluate a password and build its meter display."""
    return meter_view(evaluate(password), max_suggestions)
