from typing import Optional

from .rules import VENDOR_RULES, first_match


def extract_vendor(text: Optional[str]) -> Optional[str]:
    """Company name from an explicit label or a line ending in S.L. / S.A."""
    match = first_match(VENDOR_RULES, text or "")
    if not match:
        return None
    return match.value.strip() or None
