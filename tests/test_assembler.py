import pytest
from src.services.extraction import compute_confidence, extract_fields
from src.services.invoice_types import ExtractedRecord

FULL_TEXT = """Cambio de aceite y filtros
Talleres Pérez S.L.
Fecha de emisión: 05/08/2023
Total: 45,99€
"""


def test_all_fields_extracted():
    record = extract_fields(FULL_TEXT)
    assert record.date == "2023-08-05"
    assert record.amount == "45,99"
    assert record.vendor == "Talleres Pérez S.L."
    assert record.concept == "Cambio de aceite y filtros"
    assert record.confidence == 1.0


def test_date_and_amount_only_is_half_confidence():
    record = extract_fields("Fecha: 05/08/2023\nTotal: 45,99€")
    assert record.date == "2023-08-05"
    assert record.amount == "45,99"
    assert record.vendor is None
    assert record.concept is None
    assert record.confidence == 0.5


@pytest.mark.parametrize("text", ["", "hola\n123", None])
def test_nothing_recognizable(text):
    record = extract_fields(text)
    assert record.date is None
    assert record.amount is None
    assert record.vendor is None
    assert record.concept is None
    assert record.confidence == 0


@pytest.mark.parametrize(
    "text",
    [
        FULL_TEXT,
        "Total: 45,99€",
        "12 de mayo de 2024\nServicio de mantenimiento anual",
        "Empresa: ACME Iberia\nfactura sin importe ni fecha",
        "texto corto",
    ],
)
def test_confidence_matches_filled_fields(text):
    record = extract_fields(text)
    filled = sum(1 for v in (record.date, record.amount, record.vendor, record.concept) if v)
    assert record.confidence == filled / 4


def test_compute_confidence():
    assert compute_confidence(ExtractedRecord()) == 0
    assert compute_confidence(ExtractedRecord(date="2024-01-01", vendor="ACME S.A.")) == 0.5
    # Empty strings do not count as filled
    assert compute_confidence(ExtractedRecord(amount="", concept="algo largo aqui")) == 0.25
