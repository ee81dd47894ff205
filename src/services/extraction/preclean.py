import re

# Common OCR confusions, applied in order
_REPLACEMENTS = [
    (re.compile("\u00a0"), " "),        # non-breaking space
    (re.compile(r"\|"), "/"),           # "|" read instead of a date separator
    (re.compile(r"O(?=\d)"), "0"),      # O before a digit
    (re.compile(r"(?<=\d)O"), "0"),     # O after a digit
    (re.compile(r"I(?=\d)"), "1"),
    (re.compile(r"l(?=\d)"), "1"),
    (re.compile(r"\s{2,}"), " "),
]


def preclean(text: str) -> str:
    """Normalize whitespace and letter/digit look-alikes before pattern matching."""
    if not text:
        return ""
    for pattern, replacement in _REPLACEMENTS:
        text = pattern.sub(replacement, text)
    return text.strip()
