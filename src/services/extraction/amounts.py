from typing import Optional

from .rules import AMOUNT_RULES, first_match


def extract_amount(text: Optional[str]) -> Optional[str]:
    """
    Return the first monetary amount found in raw OCR text.

    The decimal separator is kept as printed ("45,99" stays "45,99").
    """
    match = first_match(AMOUNT_RULES, text or "")
    return match.value if match else None
