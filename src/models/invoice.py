from enum import Enum
from pydantic import BaseModel, Field


class ExtractionStrategy(str, Enum):
    """How structured data is obtained from the OCR text."""
    REGEX = "regex"  # local heuristic record
    AI = "ai"  # pass-through LLM answer
    BOTH = "both"


class TextExtractionRequest(BaseModel):
    text: str = Field(default="")
    cleanup: bool = Field(default=True)
