"""
Pytest configuration.

Registers the integration marker and shared fixtures for the OCR API tests.
"""

import pytest

SAMPLE_INVOICE_TEXT = """Cambio de aceite y filtros
Talleres Pérez S.L.
Pedido 01/01/2020
Fecha de emisión: 05/08/2023
Total: 45,99€
"""


def pytest_addoption(parser):
    """Add custom command-line options"""
    parser.addoption(
        "--run-integration",
        action="store_true",
        default=False,
        help="Run integration tests against a real Tesseract installation"
    )


def pytest_configure(config):
    """Register custom markers"""
    config.addinivalue_line(
        "markers",
        "integration: mark test as integration test requiring the tesseract binary"
    )


def pytest_collection_modifyitems(config, items):
    """Skip integration tests unless --run-integration is specified"""
    if config.getoption("--run-integration"):
        return

    skip_integration = pytest.mark.skip(reason="need --run-integration option to run")
    for item in items:
        if "integration" in item.keywords:
            item.add_marker(skip_integration)


@pytest.fixture
def fake_ocr(monkeypatch):
    """Replace Tesseract in the OCR router with a stub returning fixed text."""
    calls = []

    def install(text=SAMPLE_INVOICE_TEXT, error=None):
        def _extract_text(image_bytes, lang="spa", tesseract_cmd=None):
            calls.append({"size": len(image_bytes), "lang": lang})
            if error is not None:
                raise error
            return text

        monkeypatch.setattr("src.api.routers.ocr.extract_text", _extract_text)
        return calls

    return install
