"""Reference cases for manually checking the strength scoring.

Each case pairs a password with the label and approximate score it is
expected to get. A case passes when the label matches exactly and the
score is within a tolerance of the expected value.
"""

from dataclasses import dataclass, field

from src.utils.logger import get_logger

from .evaluator import StrengthReport, evaluate

logger = get_logger(__name__)

DEFAULT_TOLERANCE = 10


@dataclass(frozen=True)
class HarnessCase:
    """A reference password with its expected outcome."""

    description: str
    password: str
    expected_label: str
    expected_score: int


@dataclass
class CaseOutcome:
    """Result of running one reference case."""

    case: HarnessCase
    report: StrengthReport
    passed: bool


@dataclass
class HarnessSummary:
    """Aggregated results of a harness run."""

    outcomes: list[CaseOutcome] = field(default_factory=list)

    @property
    def passed(self) -> int:
        return sum(1 for o in self.outcomes if o.passed)

    @property
    def failed(self) -> int:
        return len(self.outcomes) - self.passed

    @property
    def all_passed(self) -> bool:
        return self.failed == 0


HARNESS_CASES: tuple[HarnessCase, ...] = (
    HarnessCase("empty password", "", "", 0),
    HarnessCase("very short password", "123", "Weak", 0),
    HarnessCase("numbers only, 8 chars", "12345678", "Weak", 25),
    HarnessCase("lowercase only, 8 chars", "abcdefgh", "Weak", 25),
    HarnessCase("mixed case, no numbers", "Password", "Weak", 35),
    HarnessCase("mixed case with numbers", "Password1", "Medium", 55),
    HarnessCase(
        "mixed case with numbers and special chars", "Password1!", "Strong", 70
    ),
    HarnessCase("long complex password", "MyVeryStr0ng!P@ssw0rd", "Strong", 95),
    HarnessCase("common pattern penalty", "password123", "Weak", 35),
    HarnessCase("repeated characters penalty", "aaabbbccc", "Weak", 25),
)


def check_case(case: HarnessCase, tolerance: int = DEFAULT_TOLERANCE) -> CaseOutcome:
    """Evaluate one reference case.

    Args:
        case: Reference case to run.
        tolerance: Allowed absolute score difference.

    Returns:
        Outcome with the produced report and pass/fail flag.
    """
    report = evaluate(case.password)
    passed = (
        report.label == case.expected_label
        and abs(report.score - case.expected_score) <= tolerance
    )
    return CaseOutcome(case=case, report=report, passed=passed)


def run_harness(
    cases: tuple[HarnessCase, ...] = HARNESS_CASES,
    tolerance: int = DEFAULT_TOLERANCE,
) -> HarnessSummary:
    """Run all reference cases.

    Args:
        cases: Cases to evaluate, in display order.
        tolerance: Allowed absolute score difference per case.

    Returns:
        Summary of every case outcome.
    """
    summary = HarnessSummary()
    for case in cases:
        outcome = check_case(case, tolerance)
        if not outcome.passed:
            logger.warning(
                "Case '%s' failed: expected %s (~%d), got %s (%d)",
                case.description,
                case.expected_label,
                case.expected_score,
                outcome.report.label,
                outcome.report.score,
            )
        summary.outcomes.append(outcome)

    logger.info(
        "Harness finished: %d passed, %d failed", summary.passed, summary.failed
    )
    return summary
