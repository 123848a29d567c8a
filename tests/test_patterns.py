"""Tests for common weak-password pattern checks."""

from src.strength.patterns import (
    COMMON_PATTERNS,
    LETTER_RUNS,
    AscendingDigits,
    AscendingLetters,
    CommonWord,
    RepeatedCharacter,
    ascii_lower,
    first_match,
)


class TestRepeatedCharacter:
    """Tests for the RepeatedCharacter pattern."""

    def test_three_in_a_row(self) -> None:
        pattern = RepeatedCharacter()
        assert pattern.matches("aaa")
        assert pattern.matches("x111y")
        assert pattern.matches("ab!!!!")

    def test_two_in_a_row(self) -> None:
        assert not RepeatedCharacter().matches("aabbcc")

    def test_non_adjacent_repeats(self) -> None:
        assert not RepeatedCharacter().matches("ababab")

    def test_case_sensitive(self) -> None:
        assert not RepeatedCharacter().matches("aAa")

    def test_any_visible_character(self) -> None:
        pattern = RepeatedCharacter()
        assert pattern.matches("ééé")
        assert pattern.matches("\t\t\t")

    def test_line_terminators_never_repeat(self) -> None:
        pattern = RepeatedCharacter()
        for terminator in ["\n", "\r", "\u2028", "\u2029"]:
            assert not pattern.matches(terminator * 3), f"Matched {terminator!r}"

    def test_line_terminator_breaks_run(self) -> None:
        pattern = RepeatedCharacter()
        assert not pattern.matches("aa\na")
        assert pattern.matches("a\naaa")

    def test_empty(self) -> None:
        assert not RepeatedCharacter().matches("")


class TestAscendingDigits:
    """Tests for the AscendingDigits pattern."""

    def test_all_runs(self) -> None:
        pattern = AscendingDigits()
        for run in ["123", "234", "345", "456", "567", "678", "789", "890"]:
            assert pattern.matches(f"x{run}y"), f"Expected match: {run}"

    def test_non_runs(self) -> None:
        pattern = AscendingDigits()
        assert not pattern.matches("012")
        assert not pattern.matches("901")
        assert not pattern.matches("321")
        assert not pattern.matches("135")

    def test_fullwidth_digits_ignored(self) -> None:
        assert not AscendingDigits().matches("１２３")


class TestAscendingLetters:
    """Tests for the AscendingLetters pattern."""

    def test_runs_cover_alphabet(self) -> None:
        assert LETTER_RUNS[0] == "abc"
        assert LETTER_RUNS[-1] == "xyz"
        assert len(LETTER_RUNS) == 24

    def test_case_insensitive(self) -> None:
        pattern = AscendingLetters()
        assert pattern.matches("ABC")
        assert pattern.matches("JkL")
        assert pattern.matches("1xYz!")

    def test_no_wraparound(self) -> None:
        pattern = AscendingLetters()
        assert not pattern.matches("yza")
        assert not pattern.matches("cba")

    def test_non_ascii_not_folded(self) -> None:
        # KELVIN SIGN lowercases to "k" under full Unicode folding.
        assert not AscendingLetters().matches("j\u212al")


class TestCommonWord:
    """Tests for the CommonWord pattern."""

    def test_words_any_case(self) -> None:
        pattern = CommonWord()
        for word in ["PASSWORD", "123456", "QwErTy", "Admin", "xloginx", "WELCOME1"]:
            assert pattern.matches(word), f"Expected match: {word}"

    def test_unrelated(self) -> None:
        assert not CommonWord().matches("correct horse")


class TestFirstMatch:
    """Tests for ordered first-match lookup."""

    def test_order(self) -> None:
        assert [p.name for p in COMMON_PATTERNS] == [
            "repeated_character",
            "ascending_digits",
            "ascending_letters",
            "common_word",
        ]

    def test_returns_first_in_order(self) -> None:
        assert isinstance(first_match("aaa123"), RepeatedCharacter)
        assert isinstance(first_match("123abc"), AscendingDigits)
        assert isinstance(first_match("abcpassword"), AscendingLetters)
        assert isinstance(first_match("password"), CommonWord)

    def test_no_match(self) -> None:
        assert first_match("Kqmzpwt7") is None
        assert first_match("") is None

    def test_custom_patterns(self) -> None:
        patterns = (CommonWord(words=("hunter",)),)
        assert first_match("Hunter2", patterns) is patterns[0]
        assert first_match("password", patterns) is None


class TestAsciiLower:
    """Tests for ASCII-only lowercasing."""

    def test_folds_ascii(self) -> None:
        assert ascii_lower("AbC") == "abc"

    def test_leaves_non_ascii(self) -> None:
        assert ascii_lower("\u00c9\u0130\u212a") == "\u00c9\u0130\u212a"
