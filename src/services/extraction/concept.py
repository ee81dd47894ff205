import re
from typing import Optional

from .rules import AMOUNT_RULES, DATE_RULES, first_match

MIN_CONCEPT_LENGTH = 10

# Lines made only of digits, whitespace and separators (phone numbers, ids, bare dates)
_NUMERIC_ONLY = re.compile(r"^[\d\s\-/.]+$")


def is_concept_candidate(line: str) -> bool:
    if len(line) <= MIN_CONCEPT_LENGTH:
        return False
    if _NUMERIC_ONLY.match(line):
        return False
    if first_match(DATE_RULES, line) or first_match(AMOUNT_RULES, line):
        return False
    return True


def extract_concept(text: Optional[str]) -> Optional[str]:
    """First meaningful line that is neither a date nor an amount."""
    if not text:
        return None
    for raw_line in text.splitlines():
        line = raw_line.strip()
        if is_concept_candidate(line):
            return line
    return None
