# src/checkcommit/review/__init__.py
from .classifier import is_comment_only
from .parser import parse_diff, filter_diff, DiffFile
from .prompts import build_prompt
from .gate import decide, write_report
from .engine import CommitGate, load_checklist, load_config

__all__ = [
    "is_comment_only",
    "parse_diff",
    "filter_diff",
    "DiffFile",
    "build_prompt",
    "decide",
    "write_report",
    "CommitGate",
    "load_checklist",
    "load_config",
]
