# src/checkcommit/review/gate.py
import logging
from pathlib import Path
from checkcommit.exceptions import PersistenceError
from checkcommit.models.config import AbsentVerdictPolicy
from checkcommit.models.review import Err, GateOutcome, GateResult, Ok, ReviewVerdict


logger = logging.getLogger(__name__)

DEFAULT_MARKER = "✖"


def decide(
    verdict: ReviewVerdict,
    marker: str = DEFAULT_MARKER,
    policy: AbsentVerdictPolicy = AbsentVerdictPolicy.PASS,
) -> GateResult:
    """Turn the model's verdict into a pass/fail outcome."""
    if isinstance(verdict, Ok) and verdict.text.strip():
        if marker in verdict.text:
            return GateResult(
                outcome=GateOutcome.FAIL,
                exit_code=1,
                reason="Checklist violations found",
                verdict=verdict.text,
            )
        return GateResult(
            outcome=GateOutcome.PASS,
            exit_code=0,
            reason="Checklist satisfied",
            verdict=verdict.text,
        )

    if isinstance(verdict, Err):
        reason = f"No verdict from reviewer ({verdict.error})"
    else:
        reason = "Reviewer returned an empty verdict"

    if policy == AbsentVerdictPolicy.FAIL:
        return GateResult(outcome=GateOutcome.FAIL, exit_code=1, reason=reason)
    return GateResult(outcome=GateOutcome.PASS, exit_code=0, reason=reason)


def write_report(path: Path, verdict: ReviewVerdict) -> None:
    """Overwrite the report with the verdict text, empty when there is none."""
    text = verdict.text if isinstance(verdict, Ok) else ""
    try:
        path.write_text(text, encoding="utf-8")
    except OSError as e:
        raise PersistenceError(f"Could not write report {path}: {e}") from e
    logger.info(f"Report saved: {path}")
