from src.services.extraction import preclean


def test_nbsp_and_pipe_separators():
    assert preclean("Fecha:\u00a005|08|2023") == "Fecha: 05/08/2023"
    assert preclean("Total:\u00a045,99") == "Total: 45,99"
    assert preclean("Fecha:\u00a0\u00a005/08/2023") == "Fecha: 05/08/2023"


def test_letter_o_next_to_digits_becomes_zero():
    assert preclean("1O/O3/2O24") == "10/03/2024"


def test_i_and_l_before_digit_become_one():
    assert preclean("Total I5,00 y l0") == "Total 15,00 y 10"


def test_letters_not_next_to_digits_are_untouched():
    assert preclean("OCTUBRE IVA Oficina") == "OCTUBRE IVA Oficina"


def test_whitespace_runs_collapse_and_trim():
    assert preclean("  a \t\n  b  ") == "a b"


def test_single_newline_is_kept():
    assert preclean("linea uno\nlinea dos") == "linea uno\nlinea dos"


def test_empty_input():
    assert preclean("") == ""
    assert preclean(None) == ""
