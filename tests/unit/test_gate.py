# tests/unit/test_gate.py
import pytest
from checkcommit.exceptions import MalformedResponseError, PersistenceError
from checkcommit.models.config import AbsentVerdictPolicy
from checkcommit.models.review import Err, GateOutcome, GateResult, Ok
from checkcommit.review.gate import decide, write_report


@pytest.mark.unit
def test_marker_fails_gate():
    result = decide(Ok("##File: foo.cs\n✖ Missing license header\n---"))

    assert result.outcome == GateOutcome.FAIL
    assert result.exit_code == 1


@pytest.mark.unit
def test_verdict_without_marker_passes():
    result = decide(Ok("Spelling is correct."))

    assert result.outcome == GateOutcome.PASS
    assert result.exit_code == 0
    assert result.verdict == "Spelling is correct."


@pytest.mark.unit
def test_custom_marker():
    assert decide(Ok("[X] bad"), marker="[X]").exit_code == 1
    assert decide(Ok("✖ bad"), marker="[X]").exit_code == 0


@pytest.mark.unit
@pytest.mark.parametrize("verdict", [Ok(""), Ok("  \n"), Err(MalformedResponseError("candidates"))])
def test_absent_verdict_passes_by_default(verdict):
    result = decide(verdict)

    assert result.outcome == GateOutcome.PASS
    assert result.exit_code == 0
    assert result.verdict is None


@pytest.mark.unit
def test_absent_verdict_can_fail_closed():
    result = decide(Err(MalformedResponseError("candidates[0]")), policy=AbsentVerdictPolicy.FAIL)

    assert result.outcome == GateOutcome.FAIL
    assert result.exit_code == 1
    assert "candidates[0]" in result.reason


@pytest.mark.unit
def test_no_changes_result():
    result = GateResult.no_changes()

    assert result.outcome == GateOutcome.NO_CHANGES
    assert result.exit_code == 0


@pytest.mark.unit
def test_write_report_overwrites(tmp_path):
    report = tmp_path / "checkcommit_report.md"
    report.write_text("old", encoding="utf-8")

    write_report(report, Ok("✖ nuevo"))
    assert report.read_text(encoding="utf-8") == "✖ nuevo"

    write_report(report, Err(MalformedResponseError("candidates")))
    assert report.read_text(encoding="utf-8") == ""


@pytest.mark.unit
def test_write_report_failure_raises_persistence_error(tmp_path):
    with pytest.raises(PersistenceError):
        write_report(tmp_path / "missing" / "report.md", Ok("text"))
