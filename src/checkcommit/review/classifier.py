# src/checkcommit/review/classifier.py
import re
from checkcommit.models.config import ProjectType


COMMENT_OPENERS = {
    ProjectType.DOTNET: ("//", "/*"),
    ProjectType.WEB: ("//", "/*", "<!--"),
}

HUNK_HEADER = re.compile(r"^@@ -\d+(?:,(\d+))? \+\d+(?:,(\d+))? @@")


def _changed_lines(diff: str):
    """Yield added/removed line bodies.

    ---/+++ are file headers only outside a hunk; inside one, the @@ line
    counts decide where it ends, so `+++counter;` is an added `++counter;`.
    """
    old_left = new_left = 0
    for line in diff.splitlines():
        if old_left > 0 or new_left > 0:
            if line.startswith("+"):
                new_left -= 1
                yield line[1:]
            elif line.startswith("-"):
                old_left -= 1
                yield line[1:]
            elif line.startswith("\\"):
                continue
            else:
                old_left -= 1
                new_left -= 1
            continue

        match = HUNK_HEADER.match(line)
        if match:
            old_left = int(match.group(1) or 1)
            new_left = int(match.group(2) or 1)
        elif line.startswith(("+++", "---")):
            continue
        elif line.startswith(("+", "-")):
            yield line[1:]


def is_comment_only(diff: str, project_type: ProjectType) -> bool:
    """Return True when every changed line is blank or starts a comment.

    Works line by line: a changed line sitting inside a block comment that
    was opened outside the hunk still counts as code.
    """
    openers = COMMENT_OPENERS[project_type]
    for body in _changed_lines(diff):
        text = body.strip()
        if text and not text.startswith(openers):
            return False
    return True
