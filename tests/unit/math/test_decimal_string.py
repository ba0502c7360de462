"""Tests for the decimal text <-> scaled integer codec."""

import pytest

from scaled_number.errors import InvalidNumber
from scaled_number.math.decimal_string import parse_decimal, render_decimal, scaled_to_number


class TestParseDecimal:
    """Tests for parse_decimal."""

    @pytest.mark.parametrize(
        ("text", "decimals", "expected"),
        [
            ("1.23", 5, 123000),
            ("0.000000000000000001", 18, 1),
            ("0.00000000000000000001", 20, 1),
            ("123.45", 1, 1234),
            ("28319", 4, 283190000),
            ("-1", 0, -1),
            ("-123.918", 3, -123918),
            ("10000000000000000000000", 4, 10**26),
            ("0", 18, 0),
            ("5.", 2, 500),
            (".5", 2, 50),
        ],
    )
    def test_parses_decimal_text(self, text, decimals, expected):
        """Whole and fractional digits scale into one integer."""
        assert parse_decimal(text, decimals) == expected

    @pytest.mark.parametrize(
        ("text", "decimals", "expected"),
        [
            ("1.2345", 2, 123),
            ("0.001", 2, 0),
            ("1.1", 2, 110),
            ("0.0000000000000000001", 18, 0),
            ("-1.999", 0, -1),
        ],
    )
    def test_truncates_excess_precision(self, text, decimals, expected):
        """Digits beyond decimals are dropped, not rounded."""
        assert parse_decimal(text, decimals) == expected

    @pytest.mark.parametrize(
        ("text", "decimals", "expected"),
        [
            ("3.456e11", 3, 345600000000000),
            ("934e5", 0, 93400000),
            ("12.45e0", 2, 1245),
            ("0.45e1", 4, 45000),
            ("10e2", 18, 1000 * 10**18),
            ("1E+2", 0, 100),
            ("1e-07", 18, 10**11),
            ("12.45e-1", 2, 124),
        ],
    )
    def test_scientific_notation(self, text, decimals, expected):
        """The exponent shifts the effective decimals."""
        assert parse_decimal(text, decimals) == expected

    def test_negative_effective_decimals_divide_whole_part(self):
        """An exponent pushing decimals below zero truncates whole digits."""
        assert parse_decimal("12345e-1", 0) == 1234
        assert parse_decimal("123e-5", 2) == 0
        assert parse_decimal("-98765e-3", 0) == -98

    @pytest.mark.parametrize(
        ("text", "decimals", "expected"),
        [
            ("1,000", 2, 100000),
            ("265,232,123.121", 6, 265232123121000),
            ("-1,000.5", 1, -10005),
        ],
    )
    def test_removes_grouping_commas(self, text, decimals, expected):
        """Grouping separators are ignored."""
        assert parse_decimal(text, decimals) == expected

    def test_leading_zeros(self):
        """Leading zeros in whole and fraction parts are harmless."""
        assert parse_decimal("0000012912309.34100410200000", 9) == 12912309341004102

    @pytest.mark.parametrize("text", ["", "."])
    def test_empty_or_lone_separator_raises(self, text):
        """Empty text and a lone separator are invalid."""
        with pytest.raises(InvalidNumber) as exc_info:
            parse_decimal(text, 2)
        assert "errors.invalidNumber" in str(exc_info.value)

    @pytest.mark.parametrize(
        "text",
        ["1.2.3", "1e2e3", "abc", "12a", "-", "e5", "inf", "nan", "1 000", "--1", "1-"],
    )
    def test_malformed_text_raises(self, text):
        """Anything other than [-]digits[.digits][e[+-]digits] is rejected."""
        with pytest.raises(InvalidNumber):
            parse_decimal(text, 2)

    def test_invalid_number_is_value_error(self):
        """InvalidNumber can be caught as ValueError."""
        with pytest.raises(ValueError):
            parse_decimal("", 2)


class TestRenderDecimal:
    """Tests for render_decimal."""

    @pytest.mark.parametrize(
        ("value", "decimals", "expected"),
        [
            (123 * 10**18, 18, "123"),
            (-123 * 10**18, 18, "-123"),
            (12345 * 10**16, 18, "123.45"),
            (123450000000000000000, 6, "123450000000000"),
            (1, 0, "1"),
            (-1, 0, "-1"),
            (1, 5, "0.00001"),
            (-1, 5, "-0.00001"),
            (13, 1, "1.3"),
            (0, 0, "0"),
            (0, 18, "0"),
            (71819, 4, "7.1819"),
            (19102930, 10, "0.001910293"),
        ],
    )
    def test_renders_exact_text(self, value, decimals, expected):
        """Whole part, separator and stripped fraction."""
        assert render_decimal(value, decimals) == expected

    def test_round_trips_through_parse(self):
        """parse(render(v, d), d) == v for values that need no truncation."""
        for value in (0, 1, -1, 10**30 + 7, -(10**25) - 3, 100, 5000):
            for decimals in (0, 1, 6, 18, 27):
                assert parse_decimal(render_decimal(value, decimals), decimals) == value

    def test_renders_past_str_limit(self):
        assert render_decimal(10**5000 + 5, 1) == "1" + "0" * 4999 + ".5"


class TestLongText:
    """Digit text longer than the int/str conversion limit."""

    def test_parses_long_whole_part(self):
        assert parse_decimal("1" * 5000, 0) == (10**5000 - 1) // 9

    def test_parses_long_fraction(self):
        assert parse_decimal("0." + "0" * 4999 + "1", 5000) == 1

    def test_parses_large_exponent(self):
        assert parse_decimal("-2e5000", 3) == -2 * 10**5003


class TestScaledToNumber:
    """Tests for scaled_to_number."""

    @pytest.mark.parametrize(
        ("value", "decimals", "expected"),
        [(10, 0, 10.0), (0, 18, 0.0), (-10, 0, -10.0), (-123918, 3, -123.918)],
    )
    def test_narrows_exact_text(self, value, decimals, expected):
        assert scaled_to_number(value, decimals) == expected

    def test_out_of_range_is_infinite(self):
        assert scaled_to_number(-(10**5000), 0) == float("-inf")
