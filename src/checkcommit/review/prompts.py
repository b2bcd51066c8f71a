# src/checkcommit/review/prompts.py
from checkcommit.models.config import RepoConfig


COMMENT_ONLY_PROMPT = """You are a code reviewer.
Only COMMENTS were changed in this commit.
Check exclusively the spelling, the correct use of accents in {language},
and the clarity of the added or modified comments.
Respond in {language}.

Comment changes:
{diff}"""


FULL_REVIEW_PROMPT = """You are a code reviewer.

Task:
- Evaluate the changes in the files strictly against the checklist.
- Group your feedback by file.
- Only mention the points that are NOT met, each prefixed with {marker}.
- If a file meets every point, do not mention it.
- Be deterministic: do not vary the output if the content did not change.
- Use line breaks to separate the files, and the file titles from their explanations.
- Check spelling and correct accents in {language} inside string values.
- Respond in {language}.

Checklist:
{checklist}

Modified code (git diff):
{diff}

Expected output format (markdown):
##File: FILE_NAME
{marker} Failed point 1
{marker} Failed point 2
---
##File: OTHER_FILE
{marker} Failed point 1
---"""


def build_prompt(
    checklist: str,
    diff: str,
    comment_only: bool,
    config: RepoConfig | None = None,
) -> str:
    """Build the review prompt for the staged diff."""
    config = config or RepoConfig()
    if comment_only:
        return COMMENT_ONLY_PROMPT.format(language=config.language, diff=diff)

    return FULL_REVIEW_PROMPT.format(
        checklist=checklist,
        diff=diff,
        marker=config.marker,
        language=config.language,
    )
