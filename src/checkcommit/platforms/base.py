# src/checkcommit/platforms/base.py
from abc import ABC, abstractmethod


class DiffSource(ABC):
    @abstractmethod
    async def get_staged_diff(self) -> str:
        """Return the unified diff of the staged changes."""
        pass
