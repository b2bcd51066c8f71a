# src/checkcommit/exceptions.py
"""Error types raised by the commit gate.

- CheckCommitError: base for everything below
- ConfigurationError: missing checklist or API key, fatal
- TransportError: git or Gemini call failed, fatal
- MalformedResponseError: Gemini answered without a verdict, non-fatal
- PersistenceError: the report could not be written, logged only
"""


class CheckCommitError(Exception):
    """Base exception for commit gate errors."""


class ConfigurationError(CheckCommitError):
    """Raised when a required input (checklist, API key) is missing."""


class TransportError(CheckCommitError):
    """Raised when an external call (git, Gemini) fails."""

    def __init__(self, message: str, status_code: int | None = None, body: str = ""):
        super().__init__(message)
        self.status_code = status_code
        self.body = body


class MalformedResponseError(CheckCommitError):
    """The Gemini response does not contain the verdict field."""

    def __init__(self, path: str, detail: str = ""):
        message = f"Missing verdict at {path}"
        if detail:
            message = f"{message}: {detail}"
        super().__init__(message)
        self.path = path


class PersistenceError(CheckCommitError):
    """Raised when the report file cannot be written."""
