# src/checkcommit/providers/__init__.py
from .base import LLMProvider
from .gemini import GeminiProvider, extract_verdict

__all__ = ["LLMProvider", "GeminiProvider", "extract_verdict"]
