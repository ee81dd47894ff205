"""
Unit tests for date normalization and the label-first date search.
"""

import itertools
from datetime import date

import pytest
from src.services.extraction.dates import (
    expand_year,
    extract_date,
    is_leap_year,
    is_valid_ymd,
    month_from_name,
    normalize_date,
)


class TestCalendar:
    """Gregorian validity rules"""

    @pytest.mark.parametrize("year,leap", [(2024, True), (2023, False), (1900, False), (2000, True)])
    def test_leap_years(self, year, leap):
        assert is_leap_year(year) is leap

    def test_days_per_month(self):
        assert is_valid_ymd(2024, 2, 29)
        assert not is_valid_ymd(2023, 2, 29)
        assert not is_valid_ymd(2024, 4, 31)
        assert is_valid_ymd(2024, 12, 31)

    def test_year_and_month_bounds(self):
        assert not is_valid_ymd(1899, 1, 1)
        assert not is_valid_ymd(2101, 1, 1)
        assert not is_valid_ymd(2024, 13, 1)
        assert not is_valid_ymd(2024, 0, 1)
        assert not is_valid_ymd(2024, 1, 0)

    def test_two_digit_year_boundary(self):
        assert expand_year("24") == 2024
        assert expand_year("49") == 2049
        assert expand_year("50") == 1950
        assert expand_year("67") == 1967
        assert expand_year("2024") == 2024


class TestMonthNames:

    def test_spanish_months(self):
        assert month_from_name("enero") == 1
        assert month_from_name("Diciembre") == 12

    def test_both_spellings_of_september(self):
        assert month_from_name("septiembre") == 9
        assert month_from_name("setiembre") == 9

    def test_accents_and_trailing_s(self):
        assert month_from_name("ágosto") == 8
        assert month_from_name("marzos") == 3

    def test_unknown_month(self):
        assert month_from_name("brumario") is None


class TestNormalizeDate:

    def test_textual_date(self):
        assert normalize_date("12 de mayo de 2024") == "2024-05-12"

    def test_textual_date_with_label(self):
        assert normalize_date("Fecha de expedición 3 de Setiembre de 2021") == "2021-09-03"

    def test_textual_two_digit_years(self):
        assert normalize_date("5 de marzo de 24") == "2024-03-05"
        assert normalize_date("5 de marzo de 67") == "1967-03-05"

    def test_leap_day(self):
        assert normalize_date("29 de febrero de 2024") == "2024-02-29"
        assert normalize_date("29 de febrero de 2023") is None

    def test_year_first(self):
        assert normalize_date("2023.11.05") == "2023-11-05"
        assert normalize_date("2024-02-30") is None

    def test_european_order(self):
        assert normalize_date("05/08/2023") == "2023-08-05"
        assert normalize_date("05 08 2023") == "2023-08-05"

    def test_month_day_swap_fallback(self):
        assert normalize_date("12/25/2024") == "2024-12-25"
        assert normalize_date("13/25/2024") is None

    def test_garbage(self):
        assert normalize_date("") is None
        assert normalize_date(None) is None
        assert normalize_date("sin fecha") is None


class TestExtractDate:

    def test_labeled_line(self):
        assert extract_date("Fecha de emisión: 05/08/2023") == "2023-08-05"

    def test_bare_textual_date(self):
        assert extract_date("12 de mayo de 2024") == "2024-05-12"

    def test_label_beats_earlier_unlabeled_date(self):
        text = "Vencimiento 01/01/2020\nFecha: 15/03/2024"
        assert extract_date(text) == "2024-03-15"

    def test_label_then_date_on_next_line(self):
        text = "Pedido 01/01/2020\nFecha de factura\n15-03-2024"
        assert extract_date(text) == "2024-03-15"

    def test_english_label(self):
        assert extract_date("Invoice\nDate: 2023.11.05") == "2023-11-05"

    def test_ocr_noise_is_cleaned(self):
        assert extract_date("Fecha: 1O/O3/2O24") == "2024-03-10"

    def test_global_scan_skips_invalid_candidates(self):
        assert extract_date("Ref 31/02/2024 y luego 28/02/2024") == "2024-02-28"

    def test_no_date(self):
        assert extract_date("sin fechas aquí") is None
        assert extract_date("") is None


def test_never_returns_impossible_dates():
    """Whatever the input, a returned date is a real calendar date in range"""
    days = range(0, 33)
    months = range(0, 14)
    years = [1899, 1900, 2000, 2023, 2024, 2100, 2101]
    for d, m, y in itertools.product(days, months, years):
        for text in (f"{d:02d}/{m:02d}/{y}", f"{y}-{m:02d}-{d:02d}"):
            result = extract_date(text)
            if result is None:
                continue
            parsed = date.fromisoformat(result)
            assert 1900 <= parsed.year <= 2100
