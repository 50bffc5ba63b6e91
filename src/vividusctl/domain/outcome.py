"""Interpretation of the stories runner exit code.

Branches are evaluated in strict priority order:

1. Statistics validation scheduled in the same invocation: the exit code is
   informational only.
2. Known issues treated as passed and exit code 1: success with a notice.
3. Otherwise only exit code 0 is a success.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum

KNOWN_ISSUES_EXIT_CODE = 1


class Verdict(StrEnum):
    """How a finished stories run is reported."""

    PASSED = "passed"
    KNOWN_ISSUES_ONLY = "known_issues_only"
    EXIT_IGNORED = "exit_ignored"


class AbnormalExitError(Exception):
    """The runner process finished with a failing exit code."""

    code = "ABNORMAL_EXIT"

    def __init__(self, exit_code: int) -> None:
        self.exit_code = exit_code
        super().__init__(f"Process finished with non-zero exit value {exit_code}")


@dataclass(frozen=True)
class ProcessOutcome:
    exit_code: int
    known_issues_only_as_passed: bool = False
    statistics_validation_requested: bool = False


def interpret(outcome: ProcessOutcome) -> Verdict:
    """Decide whether *outcome* counts as a successful run.

    Raises:
        AbnormalExitError: The exit code is a failure under every leniency rule.
    """
    if outcome.statistics_validation_requested:
        return Verdict.EXIT_IGNORED
    if outcome.known_issues_only_as_passed and outcome.exit_code == KNOWN_ISSUES_EXIT_CODE:
        return Verdict.KNOWN_ISSUES_ONLY
    if outcome.exit_code != 0:
        raise AbnormalExitError(outcome.exit_code)
    return Verdict.PASSED


def notice_for(verdict: Verdict, exit_code: int) -> str | None:
    """Warning text to surface for lenient verdicts, None for a clean pass."""
    if verdict is Verdict.EXIT_IGNORED:
        return f"Exit value {exit_code} is ignored"
    if verdict is Verdict.KNOWN_ISSUES_ONLY:
        return "KNOWN ISSUES ONLY: All test failures are known issues"
    return None
