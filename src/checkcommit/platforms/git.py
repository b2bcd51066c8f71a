# src/checkcommit/platforms/git.py
import asyncio
import logging
from pathlib import Path
from checkcommit.exceptions import TransportError
from .base import DiffSource


logger = logging.getLogger(__name__)


class GitDiffSource(DiffSource):
    def __init__(self, cwd: str | Path | None = None, executable: str = "git", timeout: float = 30.0):
        self.cwd = cwd
        self.executable = executable
        self.timeout = timeout

    async def run(self, *args: str) -> str:
        """Run a git command and return its stdout."""
        try:
            process = await asyncio.create_subprocess_exec(
                self.executable,
                *args,
                cwd=self.cwd,
                stdout=asyncio.subprocess.PIPE,
                stderr=asyncio.subprocess.PIPE,
            )
        except OSError as e:
            raise TransportError(f"Could not run {self.executable}: {e}") from e

        try:
            stdout, stderr = await asyncio.wait_for(process.communicate(), timeout=self.timeout)
        except asyncio.TimeoutError as e:
            process.kill()
            await process.wait()
            raise TransportError(f"{self.executable} {' '.join(args)} timed out after {self.timeout}s") from e

        if process.returncode != 0:
            body = stderr.decode("utf-8", errors="replace")
            raise TransportError(
                f"{self.executable} {' '.join(args)} exited with {process.returncode}",
                body=body,
            )
        return stdout.decode("utf-8", errors="replace")

    async def get_staged_diff(self) -> str:
        diff = await self.run("diff", "--cached")
        logger.debug(f"Staged diff length: {len(diff)} chars")
        return diff
