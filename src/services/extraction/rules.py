"""
Ordered regex rule tables for the invoice field extractors.

Each table is evaluated top to bottom and the first rule that matches wins,
so the position of a rule in its list is its priority.
"""

import re
from dataclasses import dataclass, field
from typing import Iterable, NamedTuple, Optional

# Uppercase/lowercase letters including Spanish accents, used in vendor names
_UPPER = "A-ZÁÉÍÓÚÜÑ"
_LETTERS = "A-Za-zÁÉÍÓÚÜÑáéíóúüñ"


@dataclass(frozen=True)
class PatternRule:
    """A named regex with the capture group that holds the field value."""
    name: str
    pattern: str
    example: str
    group: int = 1
    flags: int = re.IGNORECASE
    compiled: re.Pattern = field(default=None, init=False, compare=False, repr=False)

    def __post_init__(self):
        object.__setattr__(self, "compiled", re.compile(self.pattern, self.flags))

    def search(self, text: str) -> Optional[str]:
        match = self.compiled.search(text)
        if not match:
            return None
        if self.group and self.compiled.groups >= self.group and match.group(self.group) is not None:
            return match.group(self.group)
        return match.group(0)


class RuleMatch(NamedTuple):
    rule: PatternRule
    value: str


def first_match(rules: Iterable[PatternRule], text: str) -> Optional[RuleMatch]:
    """Return the first rule (in priority order) that matches ``text``."""
    if not text:
        return None
    for rule in rules:
        value = rule.search(text)
        if value is not None:
            return RuleMatch(rule, value)
    return None


# ---------------------------------------------------------------------------
# Dates
# ---------------------------------------------------------------------------

# Keyword that marks a line as carrying the issue date
DATE_LABEL_RE = re.compile(
    r"\bfecha(?:\s+de\s+(?:emisi[oó]n|expedici[oó]n|factura))?|\bdate\b",
    re.IGNORECASE,
)

# "12 de mayo de 2024", optionally preceded by a label
TEXTUAL_DATE_RE = re.compile(
    r"(?:(?:fecha|emisi[oó]n|expedici[oó]n|factura|date)[:\s]*)?"
    r"(\d{1,2})\s+de\s+([a-záéíóúüñ]+)\s+de\s+(\d{2,4})",
    re.IGNORECASE,
)

# Three numeric groups: YYYY-MM-DD or DD/MM/YYYY (separators / . - or space)
NUMERIC_DATE_RE = re.compile(r"(\d{2,4})[/.\s-](\d{1,2})[/.\s-](\d{1,4})")

# Date-shaped tokens, used to pull a candidate out of a line or the whole text
DATE_TOKEN_RE = re.compile(
    r"\d{1,2}[/\-.]\d{1,2}[/\-.]\d{2,4}"
    r"|\d{4}[/\-.]\d{1,2}[/\-.]\d{1,2}"
    r"|\d{1,2}\s+de\s+[a-záéíóúüñ]+\s+de\s+\d{2,4}",
    re.IGNORECASE,
)

DATE_RULES = [
    PatternRule(
        name="labeled_fecha",
        pattern=r"\bfecha(?:\s+de\s+(?:emisi[oó]n|expedici[oó]n|factura))?\b[\s:,-]*([\w\s/.\-]+)?",
        example="Fecha de emisión: 05/08/2023",
    ),
    PatternRule(
        name="labeled_date",
        pattern=r"\bdate\b[\s:,-]*([\w\s/.\-]+)?",
        example="Date: 2023-08-05",
    ),
    PatternRule(
        name="day_month_year",
        pattern=r"(\d{1,2}[/\-.]\d{1,2}[/\-.]\d{2,4})",
        example="05/08/2023",
    ),
    PatternRule(
        name="year_month_day",
        pattern=r"(\d{4}[/\-.]\d{1,2}[/\-.]\d{1,2})",
        example="2023-08-05",
    ),
    PatternRule(
        name="textual_spanish",
        pattern=r"(\d{1,2}\s+de\s+[a-záéíóúüñ]+\s+de\s+\d{2,4})",
        example="12 de mayo de 2024",
    ),
]

# ---------------------------------------------------------------------------
# Amounts
# ---------------------------------------------------------------------------

AMOUNT_RULES = [
    PatternRule(
        name="labeled_with_currency",
        pattern=r"(?:total|importe|precio|amount)[\s:]*(\d+[,.]\d{2})\s*[€$]",
        example="Total: 45,99€",
    ),
    PatternRule(
        name="amount_then_euro",
        pattern=r"(\d+[,.]\d{2})\s*€",
        example="45,99 €",
        flags=0,
    ),
    PatternRule(
        name="euro_then_amount",
        pattern=r"€\s*(\d+[,.]\d{2})",
        example="€ 45.99",
        flags=0,
    ),
    PatternRule(
        name="labeled_total",
        pattern=r"total[\s:]*(\d+[,.]\d{2})",
        example="TOTAL 45.99",
    ),
]

# ---------------------------------------------------------------------------
# Vendor
# ---------------------------------------------------------------------------

VENDOR_RULES = [
    PatternRule(
        name="labeled_company",
        pattern=rf"(?i:empresa|company|raz[oó]n\s+social)[ \t:]*([{_UPPER}][{_LETTERS} \t&.]+)",
        example="Razón social: Talleres Pérez & Hijos",
        flags=0,
    ),
    PatternRule(
        name="line_ending_sl",
        pattern=rf"^([{_UPPER}][{_LETTERS} \t&.]*?S\.?L\.?)(?![{_LETTERS}])",
        example="Distribuciones Norte S.L.",
        flags=re.MULTILINE,
    ),
    PatternRule(
        name="line_ending_sa",
        pattern=rf"^([{_UPPER}][{_LETTERS} \t&.]*?S\.?A\.?)(?![{_LETTERS}])",
        example="Telefónica de España S.A.",
        flags=re.MULTILINE,
    ),
]
