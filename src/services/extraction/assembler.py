from loguru import logger

from ..invoice_types import TRACKED_FIELDS, ExtractedRecord
from .amounts import extract_amount
from .concept import extract_concept
from .dates import extract_date
from .vendor import extract_vendor


def compute_confidence(record: ExtractedRecord) -> float:
    """Fraction of the four tracked fields that were filled."""
    return record.filled_fields() / len(TRACKED_FIELDS)


def extract_fields(text: str | None) -> ExtractedRecord:
    """
    Run every extractor over the same OCR text and assemble the record.

    Extractors are independent: the date extractor precleans its own input,
    the amount, vendor and concept extractors read the raw text.
    """
    text = text or ""
    record = ExtractedRecord(
        date=extract_date(text),
        amount=extract_amount(text),
        vendor=extract_vendor(text),
        concept=extract_concept(text),
    )
    record.confidence = compute_confidence(record)

    logger.debug(
        "Regex extraction finished",
        chars=len(text),
        found=[name for name in TRACKED_FIELDS if getattr(record, name)],
        confidence=record.confidence,
    )
    return record
