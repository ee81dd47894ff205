
from pydantic import BaseModel
from ..core.config import settings
from ..services.invoice_types import AIResult, ExtractedRecord
from ..services.llm import GeminiClient, create_llm_client

class OCRResponse(BaseModel):
    raw: str  # Full OCR text as returned by Tesseract
    extraido: ExtractedRecord | None = None  # Regex-based record (regex/both)
    ia: AIResult | None = None  # Pass-through LLM answer (ai/both)
    strategy: str


def get_llm_client() -> GeminiClient:
    return create_llm_client(settings)
