"""Password strength scoring.

Scores a password on an additive 0-100 scale from its length, the ASCII
character classes it uses, and a one-off penalty for common patterns,
then classifies the score as Weak, Medium, or Strong. This is the single
scoring implementation shared by the strength meter, the reference
harness, the API, and the CLI.
"""

import string
from dataclasses import dataclass
from enum import StrEnum

from src.utils.logger import get_logger

from .patterns import first_match

logger = get_logger(__name__)

MIN_LENGTH = 8
LONG_LENGTH = 12
MIN_SCORE = 0
MAX_SCORE = 100
MEDIUM_THRESHOLD = 40
STRONG_THRESHOLD = 70

LENGTH_POINTS = 30
LONG_LENGTH_POINTS = 10
LOWERCASE_POINTS = 10
UPPERCASE_POINTS = 10
DIGIT_POINTS = 10
SPECIAL_POINTS = 15
VARIETY_POINTS = 10
VARIETY_MIN_CLASSES = 3
PATTERN_PENALTY = 15

LOWERCASE = frozenset(string.ascii_lowercase)
UPPERCASE = frozenset(string.ascii_uppercase)
DIGITS = frozenset(string.digits)
SPECIAL_CHARACTERS = frozenset("!@#$%^&*()_+-=[]{};':\"\\|,.<>/?")

SUGGEST_LENGTH = "Use at least 8 characters"
SUGGEST_LOWERCASE = "Add lowercase letters"
SUGGEST_UPPERCASE = "Add uppercase letters"
SUGGEST_DIGITS = "Add numbers"
SUGGEST_SPECIAL = "Add special characters (!@#$%^&*)"
SUGGEST_AVOID_PATTERNS = "Avoid common patterns and words"


class ColorTag(StrEnum):
    """Severity tag paired one-to-one with a strength label."""

    NONE = "none"
    WEAK = "weak"
    MEDIUM = "medium"
    STRONG = "strong"


@dataclass(frozen=True)
class StrengthReport:
    """Outcome of scoring a single password."""

    score: int
    label: str
    color_tag: ColorTag
    suggestions: tuple[str, ...] = ()


EMPTY_REPORT = StrengthReport(score=0, label="", color_tag=ColorTag.NONE)


def _contains_any(password: str, charset: frozenset[str]) -> bool:
    return any(char in charset for char in password)


def classify(score: int) -> tuple[str, ColorTag]:
    """Map a clamped score to its label and tag.

    Args:
        score: Score in the range 0-100.

    Returns:
        Tuple of (label, color_tag).
    """
    if score < MEDIUM_THRESHOLD:
        return "Weak", ColorTag.WEAK
    if score < STRONG_THRESHOLD:
        return "Medium", ColorTag.MEDIUM
    return "Strong", ColorTag.STRONG


def evaluate(password: str) -> StrengthReport:
    """Score a password and suggest how to improve it.

    Never raises: every string, including the empty string, yields a report.
    Suggestions are returned in full; callers decide how many to display.

    Args:
        password: Password to score, treated as a sequence of code points.

    Returns:
        Immutable strength report.
    """
    if not password:
        return EMPTY_REPORT

    score = 0
    suggestions: list[str] = []

    if len(password) >= MIN_LENGTH:
        score += LENGTH_POINTS
    else:
        suggestions.append(SUGGEST_LENGTH)

    if len(password) >= LONG_LENGTH:
        score += LONG_LENGTH_POINTS

    has_lowercase = _contains_any(password, LOWERCASE)
    has_uppercase = _contains_any(password, UPPERCASE)
    has_digits = _contains_any(password, DIGITS)
    has_special = _contains_any(password, SPECIAL_CHARACTERS)

    if has_lowercase:
        score += LOWERCASE_POINTS
    else:
        suggestions.append(SUGGEST_LOWERCASE)

    if has_uppercase:
        score += UPPERCASE_POINTS
    else:
        suggestions.append(SUGGEST_UPPERCASE)

    if has_digits:
        score += DIGIT_POINTS
    else:
        suggestions.append(SUGGEST_DIGITS)

    if has_special:
        score += SPECIAL_POINTS
    else:
        suggestions.append(SUGGEST_SPECIAL)

    variety = sum((has_lowercase, has_uppercase, has_digits, has_special))
    if variety >= VARIETY_MIN_CLASSES:
        score += VARIETY_POINTS

    pattern = first_match(password)
    if pattern is not None:
        score -= PATTERN_PENALTY
        suggestions.append(SUGGEST_AVOID_PATTERNS)

    score = max(MIN_SCORE, min(MAX_SCORE, score))
    label, color_tag = classify(score)

    logger.debug(
        "Scored password: %d (%s), pattern=%s",
        score,
        label,
        pattern.name if pattern else None,
    )

    return StrengthReport(
        score=score,
        label=label,
        color_tag=color_tag,
        suggestions=tuple(suggestions),
    )
