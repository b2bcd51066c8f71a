# tests/e2e/test_real_providers.py
"""
End-to-end tests for the Gemini provider with real API calls.

These tests require valid API credentials set in environment variables:
- GEMINI_API_KEY: Google Gemini API key

Run with: pytest tests/e2e/ -m e2e -v
"""
import os
import pytest
from checkcommit.models.review import Ok
from checkcommit.providers.gemini import GeminiProvider
from checkcommit.review.gate import decide
from checkcommit.review.prompts import build_prompt


CHECKLIST = "- Every public method must have an XML doc comment"
SIMPLE_DIFF = """--- a/Math.cs
+++ b/Math.cs
@@ -1,2 +1,3 @@
 public static class MathUtil {
+    public static int Add(int a, int b) => a + b;
 }
"""


@pytest.mark.e2e
@pytest.mark.asyncio
async def test_gemini_real_review():
    """Test Gemini provider with real API call."""
    api_key = os.environ.get("GEMINI_API_KEY")
    if not api_key:
        pytest.skip("GEMINI_API_KEY not set")

    provider = GeminiProvider(api_key=api_key)
    prompt = build_prompt(CHECKLIST, SIMPLE_DIFF, comment_only=False)

    verdict = await provider.review(prompt)

    assert isinstance(verdict, Ok)
    result = decide(verdict)
    print(f"\nGemini verdict: {verdict.text}")
    print(f"Gate outcome: {result.outcome.value}")
