"""
Final cleanup of an assembled record.

Only rewrites the text of fields that are already present. A field that would
be emptied by cleaning keeps its original value, so presence (and therefore
the confidence score) never changes. Running it twice gives the same record.
"""

import re

from ..invoice_types import ExtractedRecord

MAX_VENDOR_LENGTH = 100
MAX_CONCEPT_LENGTH = 200

_ISO_DATE = re.compile(r"\d{4}-\d{2}-\d{2}")
_LOOSE_YMD = re.compile(r"(\d{4})[/.\-](\d{1,2})[/.\-](\d{1,2})")
_AMOUNT_JUNK = re.compile(r"[^\d,.]")
_VENDOR_JUNK = re.compile(r"[^\w\s&.]")


def clean_date(value: str) -> str:
    if _ISO_DATE.fullmatch(value):
        return value
    match = _LOOSE_YMD.search(value.strip())
    if match:
        year, month, day = (int(part) for part in match.groups())
        if 1900 <= year <= 2100 and 1 <= month <= 12 and 1 <= day <= 31:
            return f"{year:04d}-{month:02d}-{day:02d}"
    return value


def clean_amount(value: str) -> str:
    return _AMOUNT_JUNK.sub("", value)


def clean_vendor(value: str) -> str:
    return _VENDOR_JUNK.sub("", value).strip()[:MAX_VENDOR_LENGTH].strip()


def clean_concept(value: str) -> str:
    return value.strip()[:MAX_CONCEPT_LENGTH].strip()


_CLEANERS = {
    "date": clean_date,
    "amount": clean_amount,
    "vendor": clean_vendor,
    "concept": clean_concept,
}


def validate_and_clean(record: ExtractedRecord) -> ExtractedRecord:
    cleaned = record.model_copy()
    for name, cleaner in _CLEANERS.items():
        value = getattr(cleaned, name)
        if not value:
            continue
        new_value = cleaner(value)
        if new_value:
            setattr(cleaned, name, new_value)
    return cleaned
