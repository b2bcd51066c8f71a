# src/checkcommit/providers/gemini.py
import logging
from typing import Any
import httpx
from .base import LLMProvider
from checkcommit.exceptions import MalformedResponseError, TransportError
from checkcommit.models.review import Err, Ok, ReviewVerdict


logger = logging.getLogger(__name__)

# candidates[0].content.parts[0].text
VERDICT_PATH = ("candidates", 0, "content", "parts", 0, "text")


def _format_path(path: tuple) -> str:
    return "".join(f"[{step}]" if isinstance(step, int) else f".{step}" for step in path).lstrip(".")


def extract_verdict(data: Any) -> ReviewVerdict:
    """Walk VERDICT_PATH through a generateContent response."""
    node = data
    for depth, step in enumerate(VERDICT_PATH):
        if isinstance(step, int):
            ok = isinstance(node, list) and len(node) > step
        else:
            ok = isinstance(node, dict) and step in node
        if not ok:
            return Err(MalformedResponseError(_format_path(VERDICT_PATH[: depth + 1])))
        node = node[step]

    if not isinstance(node, str):
        return Err(MalformedResponseError(_format_path(VERDICT_PATH), f"expected text, got {type(node).__name__}"))
    return Ok(node)


class GeminiProvider(LLMProvider):
    API_URL = "https://generativelanguage.googleapis.com/v1/models"
    MODEL = "gemini-2.5-flash"

    def __init__(
        self,
        api_key: str,
        model: str = MODEL,
        api_url: str = API_URL,
        temperature: float = 0.3,
        timeout: float = 60.0,
        max_retries: int = 0,
    ):
        self.api_key = api_key
        self.model = model
        self.api_url = api_url.rstrip("/")
        self.temperature = temperature
        self.timeout = timeout
        self.max_retries = max(0, max_retries)

    @property
    def endpoint(self) -> str:
        return f"{self.api_url}/{self.model}:generateContent"

    def build_request(self, prompt: str) -> dict[str, Any]:
        return {
            "contents": [{
                "role": "user",
                "parts": [{"text": prompt}]
            }],
            "generationConfig": {
                "temperature": self.temperature,
            },
        }

    async def review(self, prompt: str) -> ReviewVerdict:
        response = await self._post(self.build_request(prompt))

        if not response.is_success:
            raise TransportError(
                f"Gemini returned HTTP {response.status_code}",
                status_code=response.status_code,
                body=response.text,
            )

        try:
            data = response.json()
        except ValueError as e:
            return Err(MalformedResponseError("<body>", f"invalid JSON: {e}"))

        verdict = extract_verdict(data)
        if isinstance(verdict, Err):
            logger.warning(f"Gemini response has no verdict: {verdict.error}")
        else:
            logger.debug(f"Gemini verdict length: {len(verdict.text)} chars")
        return verdict

    async def _post(self, payload: dict[str, Any]) -> httpx.Response:
        """POST once, re-sending up to max_retries times on network errors only."""
        attempts = self.max_retries + 1
        async with httpx.AsyncClient() as client:
            for attempt in range(1, attempts + 1):
                try:
                    return await client.post(
                        self.endpoint,
                        params={"key": self.api_key},
                        json=payload,
                        timeout=self.timeout,
                    )
                except httpx.TransportError as e:
                    if attempt < attempts:
                        logger.warning(f"Gemini request failed (attempt {attempt}/{attempts}): {e}")
                        continue
                    raise TransportError(f"Gemini request failed: {e}") from e
