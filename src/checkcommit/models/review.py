# src/checkcommit/models/review.py
from dataclasses import dataclass
from enum import Enum
from pydantic import BaseModel
from checkcommit.exceptions import MalformedResponseError


@dataclass(frozen=True)
class Ok:
    text: str


@dataclass(frozen=True)
class Err:
    error: MalformedResponseError


# Ok("") is a present but empty answer, Err is no answer at all.
ReviewVerdict = Ok | Err


class GateOutcome(str, Enum):
    PASS = "pass"
    FAIL = "fail"
    NO_CHANGES = "no_changes"


class GateResult(BaseModel):
    outcome: GateOutcome
    exit_code: int
    reason: str
    verdict: str | None = None

    @classmethod
    def no_changes(cls, reason: str = "No staged changes to validate") -> "GateResult":
        return cls(outcome=GateOutcome.NO_CHANGES, exit_code=0, reason=reason)
