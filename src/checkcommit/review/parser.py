# src/checkcommit/review/parser.py
import fnmatch
from dataclasses import dataclass
from unidiff import PatchSet


@dataclass
class DiffFile:
    path: str
    diff: str
    is_new: bool
    is_deleted: bool
    added: int
    removed: int


def parse_diff(diff_text: str) -> list[DiffFile]:
    """Parse unified diff and extract per-file information."""
    patch = PatchSet(diff_text)
    return [
        DiffFile(
            path=patched_file.path,
            diff=str(patched_file),
            is_new=patched_file.is_added_file,
            is_deleted=patched_file.is_removed_file,
            added=patched_file.added,
            removed=patched_file.removed,
        )
        for patched_file in patch
    ]


def is_excluded(file_path: str, patterns: list[str]) -> bool:
    """Check if file matches any exclude pattern."""
    return any(fnmatch.fnmatch(file_path, pattern) for pattern in patterns)


def filter_diff(diff_text: str, exclude: list[str]) -> str:
    """Drop the files matching the exclude patterns from a unified diff."""
    if not exclude:
        return diff_text
    kept = [f.diff for f in parse_diff(diff_text) if not is_excluded(f.path, exclude)]
    return "".join(kept)
