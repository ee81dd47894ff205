"""
Client for the optional generative-AI step (Gemini generateContent REST API).

The response is treated as an opaque payload: whatever text the model returns
is passed through untouched, and every failure is reported as an AIResult
instead of an exception.
"""

import httpx
from loguru import logger
from .invoice_types import AIResult


class GeminiClient:
    def __init__(self, api_key: str | None, model: str, base_url: str, timeout: float = 30.0):
        self.api_key = api_key
        self.model = model
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout

    @property
    def configured(self) -> bool:
        return bool(self.api_key)

    @property
    def endpoint(self) -> str:
        return f"{self.base_url}/models/{self.model}:generateContent"

    @staticmethod
    def build_payload(text: str, instruction: str) -> dict:
        prompt = f"{instruction}\n\n{text}" if instruction else text
        return {"contents": [{"parts": [{"text": prompt}]}]}

    @staticmethod
    def parse_response(body) -> str | None:
        """Concatenate the text parts of the first candidate, if any."""
        if not isinstance(body, dict):
            return None
        candidates = body.get("candidates")
        if not isinstance(candidates, list) or not candidates or not isinstance(candidates[0], dict):
            return None
        content = candidates[0].get("content")
        if not isinstance(content, dict):
            return None
        parts = content.get("parts")
        if not isinstance(parts, list):
            return None
        texts = [p["text"] for p in parts if isinstance(p, dict) and isinstance(p.get("text"), str)]
        return "".join(texts) if texts else None

    async def ask(self, text: str, instruction: str) -> AIResult:
        if not self.configured:
            return AIResult(status="skipped", error="LLM_API_KEY not set", model=self.model)

        logger.info("Sending OCR text to LLM", model=self.model, chars=len(text))
        try:
            async with httpx.AsyncClient(timeout=self.timeout) as client:
                r = await client.post(
                    self.endpoint,
                    params={"key": self.api_key},
                    json=self.build_payload(text, instruction),
                )
            r.raise_for_status()
            answer = self.parse_response(r.json())
        except httpx.HTTPStatusError as e:
            logger.warning(f"LLM returned HTTP {e.response.status_code}")
            return AIResult(status="error", error=f"HTTP {e.response.status_code}", model=self.model)
        except httpx.HTTPError as e:
            logger.warning(f"LLM request failed: {e.__class__.__name__}")
            return AIResult(status="error", error=str(e) or e.__class__.__name__, model=self.model)
        except ValueError:
            logger.warning("LLM response is not valid JSON")
            return AIResult(status="error", error="Invalid JSON response", model=self.model)

        if answer is None:
            return AIResult(status="error", error="Response contained no text", model=self.model)

        logger.info("LLM answered", model=self.model, chars=len(answer))
        return AIResult(status="ok", text=answer, model=self.model)


def create_llm_client(settings) -> GeminiClient:
    """Factory that injects configuration; the client never reads global settings."""
    return GeminiClient(
        api_key=settings.llm_api_key,
        model=settings.llm_model,
        base_url=settings.llm_base_url,
        timeout=settings.llm_timeout,
    )
