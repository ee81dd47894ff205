from .assembler import compute_confidence, extract_fields
from .cleanup import validate_and_clean
from .dates import extract_date, normalize_date
from .amounts import extract_amount
from .vendor import extract_vendor
from .concept import extract_concept
from .preclean import preclean

__all__ = [
    "compute_confidence",
    "extract_fields",
    "validate_and_clean",
    "extract_date",
    "normalize_date",
    "extract_amount",
    "extract_vendor",
    "extract_concept",
    "preclean",
]
