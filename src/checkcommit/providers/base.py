# src/checkcommit/providers/base.py
from abc import ABC, abstractmethod
from checkcommit.models.review import ReviewVerdict


class LLMProvider(ABC):
    @abstractmethod
    async def review(self, prompt: str) -> ReviewVerdict:
        """Send prompt to LLM and return the extracted verdict."""
        pass
