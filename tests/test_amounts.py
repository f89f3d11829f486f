import pytest

from bnbtx.classifiers.amounts import decimal_exp


class TestDecimalExp:
    def test_one_coin(self):
        assert decimal_exp("100000000") == "1"

    def test_smallest_unit(self):
        assert decimal_exp("1") == "0.00000001"

    def test_trailing_zeros_trimmed(self):
        assert decimal_exp("37500") == "0.000375"
        assert decimal_exp("250000000") == "2.5"

    def test_large_amount(self):
        assert decimal_exp("12345678900000000") == "123456789"

    def test_zero_and_blank(self):
        assert decimal_exp("0") == "0"
        assert decimal_exp("") == "0"
        assert decimal_exp(None) == "0"

    def test_custom_exponent(self):
        assert decimal_exp("1500", 3) == "1.5"

    def test_invalid(self):
        with pytest.raises(ValueError):
            decimal_exp("abc")

    def test_not_finite(self):
        with pytest.raises(ValueError):
            decimal_exp("NaN")
