import pytest

from prizepool.normalizers import normalize_separators


@pytest.mark.parametrize(
    "fragment,expected",
    [
        # Both separators: the last one is the decimal point
        ("1,234,567.89", "1234567.89"),
        ("1.234.567,89", "1234567.89"),
        ("2.500.000,50", "2500000.50"),
        # Commas only
        ("1000,50", "1000.50"),
        ("1,5", "1.5"),
        ("1,000,000", "1000000"),
        ("50,00,000", "5000000"),
        ("1,000,50", "1000.50"),
        # Dots only
        ("1.000.000", "1000000"),
        ("1.234.56", "1234.56"),
        ("1.5", "1.5"),
        ("1000", "1000"),
        ("", ""),
    ],
)
def test_normalize_separators(fragment, expected):
    assert normalize_separators(fragment) == expected
