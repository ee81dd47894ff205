from typing import Literal
from pydantic import BaseModel

TRACKED_FIELDS = ("date", "amount", "vendor", "concept")


class ExtractedRecord(BaseModel):
    date: str | None = None  # ISO 8601 YYYY-MM-DD
    amount: str | None = None  # decimal string as printed, currency symbol stripped
    vendor: str | None = None
    concept: str | None = None  # first meaningful line, fallback description
    confidence: float = 0.0  # filled tracked fields / 4

    def filled_fields(self) -> int:
        return sum(1 for name in TRACKED_FIELDS if getattr(self, name))


class AIResult(BaseModel):
    """Outcome of the optional LLM call. Never raised, always returned."""
    status: Literal["ok", "error", "skipped"]
    text: str | None = None
    error: str | None = None
    model: str | None = None

    @property
    def ok(self) -> bool:
        return self.status == "ok"
