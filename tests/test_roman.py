import pytest

from algokit.roman import from_roman, main, to_roman


@pytest.mark.parametrize(
    "number,numeral",
    [(1000, "M"), (900, "CM"), (500, "D"), (400, "CD"), (90, "XC"), (4, "IV"), (1, "I")],
)
def test_table_values(number, numeral):
    assert to_roman(number) == numeral
    assert from_roman(numeral) == number


@pytest.mark.parametrize("n", range(1, 4000))
def test_round_trip(n):
    assert from_roman(to_roman(n)) == n


def test_zero_is_empty():
    assert to_roman(0) == ""


def test_negative_rejected():
    with pytest.raises(ValueError):
        to_roman(-1)


@pytest.mark.parametrize("bad", ["", "ABC", "xiv"])
def test_invalid_numerals(bad):
    with pytest.raises(ValueError):
        from_roman(bad)


def test_main_converts_both_ways(capsys):
    assert main(["10", "X"]) == 0
    assert capsys.readouterr().out == "X\n10\n"


def test_main_reports_bad_token(capsys):
    assert main(["Q"]) == 1
    assert "Q" in capsys.readouterr().err