"""
Date extraction from noisy OCR text.

Supports the Spanish textual form ("12 de mayo de 2024") and numeric forms
(YYYY-MM-DD, DD/MM/YYYY with a month/day swap fallback). Every candidate is
checked against the Gregorian calendar before it is returned as ISO 8601.
"""

import unicodedata
from typing import Optional

from .preclean import preclean
from .rules import DATE_LABEL_RE, DATE_TOKEN_RE, NUMERIC_DATE_RE, TEXTUAL_DATE_RE

MONTHS_ES = {
    "enero": 1,
    "febrero": 2,
    "marzo": 3,
    "abril": 4,
    "mayo": 5,
    "junio": 6,
    "julio": 7,
    "agosto": 8,
    "septiembre": 9,
    "setiembre": 9,
    "octubre": 10,
    "noviembre": 11,
    "diciembre": 12,
}

MIN_YEAR = 1900
MAX_YEAR = 2100

_DAYS_IN_MONTH = (31, 28, 31, 30, 31, 30, 31, 31, 30, 31, 30, 31)


def is_leap_year(year: int) -> bool:
    return year % 4 == 0 and (year % 100 != 0 or year % 400 == 0)


def days_in_month(year: int, month: int) -> int:
    if month == 2 and is_leap_year(year):
        return 29
    return _DAYS_IN_MONTH[month - 1]


def is_valid_ymd(year: int, month: int, day: int) -> bool:
    if not (MIN_YEAR <= year <= MAX_YEAR) or not (1 <= month <= 12) or day < 1:
        return False
    return day <= days_in_month(year, month)


def to_iso(year: int, month: int, day: int) -> str:
    return f"{year:04d}-{month:02d}-{day:02d}"


def expand_year(raw: str) -> int:
    """Two-digit years below 50 belong to the 2000s, the rest to the 1900s."""
    value = int(raw)
    if len(raw) == 2:
        return 2000 + value if value < 50 else 1900 + value
    return value


def _strip_accents(value: str) -> str:
    decomposed = unicodedata.normalize("NFD", value)
    return "".join(ch for ch in decomposed if not unicodedata.combining(ch))


def month_from_name(name: str) -> Optional[int]:
    key = _strip_accents(name.lower())
    month = MONTHS_ES.get(key)
    if month is None and key.endswith("s"):
        month = MONTHS_ES.get(key[:-1])
    return month


def _parse_textual(text: str) -> Optional[str]:
    match = TEXTUAL_DATE_RE.search(text)
    if not match:
        return None
    day = int(match.group(1))
    month = month_from_name(match.group(2))
    year = expand_year(match.group(3))
    if month and is_valid_ymd(year, month, day):
        return to_iso(year, month, day)
    return None


def _parse_numeric(text: str) -> Optional[str]:
    match = NUMERIC_DATE_RE.search(text)
    if not match:
        return None
    first, second, third = match.groups()
    a, b, c = int(first), int(second), int(third)

    if len(first) == 4:
        if is_valid_ymd(a, b, c):
            return to_iso(a, b, c)
    elif len(third) == 4:
        # European order first, then month/day swapped
        if is_valid_ymd(c, b, a):
            return to_iso(c, b, a)
        if a <= 12 and b <= 31 and is_valid_ymd(c, a, b):
            return to_iso(c, a, b)
    return None


def normalize_date(raw: Optional[str]) -> Optional[str]:
    """Parse a date candidate into ``YYYY-MM-DD`` or return None."""
    if not raw:
        return None
    text = preclean(raw).lower()
    return _parse_textual(text) or _parse_numeric(text)


def _clean_lines(text: str) -> list[str]:
    lines = (preclean(line) for line in text.splitlines())
    return [line for line in lines if line]


def extract_date(text: Optional[str]) -> Optional[str]:
    """
    Find the invoice date in OCR text.

    Lines carrying a date label ("Fecha", "Fecha de emisión", "Date", ...) are
    tried first: a date token on the label line itself, otherwise the line
    right after it. Only when no labeled line yields a valid date is the whole
    text scanned, taking the first token that validates.
    """
    if not text:
        return None

    lines = _clean_lines(text)
    for index, line in enumerate(lines):
        if not DATE_LABEL_RE.search(line):
            continue
        token = DATE_TOKEN_RE.search(line)
        if token:
            candidate = token.group(0)
        elif index + 1 < len(lines):
            candidate = lines[index + 1]
        else:
            candidate = None
        iso = normalize_date(candidate)
        if iso:
            return iso

    for token in DATE_TOKEN_RE.finditer(preclean(text)):
        iso = normalize_date(token.group(0))
        if iso:
            return iso
    return None
