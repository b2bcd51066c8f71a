# src/checkcommit/models/__init__.py
from .config import RepoConfig, ProjectType, AbsentVerdictPolicy
from .review import Ok, Err, ReviewVerdict, GateOutcome, GateResult

__all__ = [
    "RepoConfig",
    "ProjectType",
    "AbsentVerdictPolicy",
    "Ok",
    "Err",
    "ReviewVerdict",
    "GateOutcome",
    "GateResult",
]
