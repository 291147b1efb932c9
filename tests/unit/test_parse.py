"""
Tests for parse_rational / Rational.parse.
"""

import logging

import numpy as np
import pytest

from rational import Rational, canonical_form, parse_rational
from rational_errors import InvalidArgument, ParseError


class TestParseValid:
    """Accepted inputs"""

    def test_fraction_reduces_on_comparison(self) -> None:
        r = parse_rational("117/1098")
        assert r == Rational(13, 122)
        assert str(r) == "13/122"

    def test_parsed_value_not_reduced(self) -> None:
        r = parse_rational("2/4")
        assert (r.numerator, r.denominator) == (2, 4)

    def test_integer(self) -> None:
        r = parse_rational("42")
        assert (r.numerator, r.denominator) == (42, 1)

    def test_negative_integer(self) -> None:
        assert parse_rational("-7") == Rational(-7, 1)

    def test_negative_numerator(self) -> None:
        assert parse_rational("-1/2") == Rational(-1, 2)

    def test_negative_denominator(self) -> None:
        assert parse_rational("1/-2") == Rational(-1, 2)
        assert str(parse_rational("-3/-6")) == "1/2"

    def test_large_components(self) -> None:
        r = parse_rational(
            "912016490186296920119201192141970416029/1824032980372593840238402384283940832058"
        )
        assert r == Rational(1, 2)

    def test_static_method(self) -> None:
        assert Rational.parse("3/4") == Rational(3, 4)

    def test_components_past_str_digit_limit(self) -> None:
        r = parse_rational("1" * 5000 + "/3")
        assert r.numerator == (10**5000 - 1) // 9
        assert r.denominator == 3

    def test_long_negative_component(self) -> None:
        r = parse_rational("7/-" + "1" + "0" * 6000)
        assert r == Rational(-7, 10**6000)

    def test_long_leading_zeros(self) -> None:
        assert parse_rational("0" * 5000 + "5") == Rational(5)


class TestParseInvalid:
    """Rejected inputs"""

    @pytest.mark.parametrize(
        "text",
        [
            "",
            "-",
            "/",
            "1/",
            "/2",
            "1/2/3",
            "1//2",
            " 1",
            "1 ",
            "1 / 2",
            "+1",
            "1/+2",
            "--1",
            "1_000",
            "1.5",
            "1e3",
            "a/b",
            "1/x",
            "١",
            "1 1/2",
        ],
    )
    def test_malformed_text(self, text: str) -> None:
        with pytest.raises(ParseError):
            parse_rational(text)

    def test_error_carries_text(self) -> None:
        with pytest.raises(ParseError) as exc_info:
            parse_rational("1/2/3")
        assert exc_info.value.text == "1/2/3"
        assert "two tokens" in exc_info.value.reason

    def test_zero_denominator_is_invalid_argument(self) -> None:
        with pytest.raises(InvalidArgument) as exc_info:
            parse_rational("1/0")
        assert not isinstance(exc_info.value, ParseError)

    def test_non_string_rejected(self) -> None:
        with pytest.raises(TypeError):
            parse_rational(12)

    def test_rejection_logged_at_debug(self, caplog) -> None:
        with caplog.at_level(logging.DEBUG, logger="rational"):
            with pytest.raises(ParseError):
                parse_rational("x")
        assert "rejecting 'x'" in caplog.text


class TestRoundTrip:
    """parse_rational(str(r)) == r"""

    def test_generated_values(self) -> None:
        rng = np.random.default_rng(20240601)
        nums = rng.integers(-10**9, 10**9, size=300)
        dens = rng.integers(-10**9, 10**9, size=300)
        for n, d in zip(nums, dens):
            r = Rational(int(n), int(d) or 1)
            back = parse_rational(r.to_string())
            assert back == r
            assert canonical_form(back) == (back.numerator, back.denominator)

    def test_values_past_str_digit_limit(self) -> None:
        r = Rational(7**9000, -(11**4000))
        back = parse_rational(str(r))
        assert back == r
        assert str(back) == str(r)

    @pytest.mark.parametrize("n, d", [(0, -4), (5, 1), (-5, -1), (10**50 + 1, 3)])
    def test_edge_values(self, n: int, d: int) -> None:
        r = Rational(n, d)
        assert parse_rational(str(r)) == r
