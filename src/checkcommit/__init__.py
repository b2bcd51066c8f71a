# src/checkcommit/__init__.py
"""Pre-commit gate that reviews staged changes against a checklist with Gemini."""

__version__ = "0.1.0"
