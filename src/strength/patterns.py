"""Common weak-password patterns.

Each pattern is a small predicate over the password. The checks are plain
linear scans over fixed ASCII tables, so crafted input cannot trigger
regex backtracking. Case-insensitive checks fold ASCII letters only.
"""

import string
from dataclasses import dataclass

# Folds A-Z onto a-z and leaves every other code point untouched.
_ASCII_LOWER = str.maketrans(string.ascii_uppercase, string.ascii_lowercase)

DIGIT_RUNS: tuple[str, ...] = (
    "123",
    "234",
    "345",
    "456",
    "567",
    "678",
    "789",
    "890",
)

LETTER_RUNS: tuple[str, ...] = tuple(
    string.ascii_lowercase[i : i + 3] for i in range(len(string.ascii_lowercase) - 2)
)

COMMON_WORDS: tuple[str, ...] = (
    "password",
    "123456",
    "qwerty",
    "admin",
    "login",
    "welcome",
)


def ascii_lower(text: str) -> str:
    """Lowercase ASCII letters only."""
    return text.translate(_ASCII_LOWER)


# Line terminators never form a repeated run.
LINE_TERMINATORS = frozenset("\n\r\u2028\u2029")


@dataclass(frozen=True)
class RepeatedCharacter:
    """Any character other than a line terminator repeated ``min_run`` times."""

    min_run: int = 3
    name: str = "repeated_character"

    def matches(self, password: str) -> bool:
        run = 0
        previous = None
        for char in password:
            if char in LINE_TERMINATORS:
                run = 0
                previous = None
                continue
            run = run + 1 if char == previous else 1
            if run >= self.min_run:
                return True
            previous = char
        return False


@dataclass(frozen=True)
class AscendingDigits:
    """Three ascending digits such as ``123`` or ``890``."""

    runs: tuple[str, ...] = DIGIT_RUNS
    name: str = "ascending_digits"

    def matches(self, password: str) -> bool:
        return any(run in password for run in self.runs)


@dataclass(frozen=True)
class AscendingLetters:
    """Three consecutive alphabet letters, ignoring ASCII case."""

    runs: tuple[str, ...] = LETTER_RUNS
    name: str = "ascending_letters"

    def matches(self, password: str) -> bool:
        folded = ascii_lower(password)
        return any(run in folded for run in self.runs)


@dataclass(frozen=True)
class CommonWord:
    """A well-known weak password word, ignoring ASCII case."""

    words: tuple[str, ...] = COMMON_WORDS
    name: str = "common_word"

    def matches(self, password: str) -> bool:
        folded = ascii_lower(password)
        return any(word in folded for word in self.words)


CommonPattern = RepeatedCharacter | AscendingDigits | AscendingLetters | CommonWord

# Checked in this order; evaluation stops at the first match.
COMMON_PATTERNS: tuple[CommonPattern, ...] = (
    RepeatedCharacter(),
    AscendingDigits(),
    AscendingLetters(),
    CommonWord(),
)


def first_match(
    password: str, patterns: tuple[CommonPattern, ...] = COMMON_PATTERNS
) -> CommonPattern | None:
    """Return the first pattern the password matches.

    Args:
        password: Password to test.
        patterns: Ordered patterns to check.

    Returns:
        The first matching pattern, or ``None`` if nothing matches.
    """
    for pattern in patterns:
        if pattern.matches(password):
            return pattern
    return None
