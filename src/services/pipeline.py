from pydantic import BaseModel
from loguru import logger
from .invoice_types import AIResult, ExtractedRecord
from .extraction import extract_fields, validate_and_clean
from .llm import GeminiClient
from ..models.invoice import ExtractionStrategy


class OCRResult(BaseModel):
    raw: str
    strategy: ExtractionStrategy
    record: ExtractedRecord | None = None
    ai: AIResult | None = None


def run_regex_strategy(raw: str, cleanup: bool = True) -> ExtractedRecord:
    record = extract_fields(raw)
    return validate_and_clean(record) if cleanup else record


async def process_text(
    raw: str,
    strategy: ExtractionStrategy,
    llm: GeminiClient | None = None,
    instruction: str = "",
) -> OCRResult:
    """
    Turn OCR text into the response payload for the chosen strategy.

    regex: heuristic record only. ai: LLM answer passed through as-is.
    both: both results side by side, neither overrides the other.
    """
    result = OCRResult(raw=raw, strategy=strategy)

    if strategy in (ExtractionStrategy.REGEX, ExtractionStrategy.BOTH):
        result.record = run_regex_strategy(raw)

    if strategy in (ExtractionStrategy.AI, ExtractionStrategy.BOTH):
        if llm is None:
            result.ai = AIResult(status="skipped", error="No LLM client available")
        else:
            result.ai = await llm.ask(raw, instruction)

    logger.info(
        "Processed OCR text",
        strategy=strategy.value,
        confidence=result.record.confidence if result.record else None,
        ai_status=result.ai.status if result.ai else None,
    )
    return result
