"""
Tests for PowEngine — recursive resolution and batch evaluation
"""

import pytest

from PowCalc import error as E
from PowCalc.config_manager import Settings
from PowCalc.ExpressionParser import Literal, Power
from PowCalc.PowEngine import (
    ResolvedOperand,
    calculate,
    calculate_all,
    resolve_operand,
    split_operations,
)


class TestResolveOperand:
    """Tests for resolve_operand: literal vs nested operand."""

    def test_literal_is_used_as_is(self, settings):
        resolved = resolve_operand(Literal("42"), settings)
        assert resolved == ResolvedOperand("42", "42", False)

    def test_nested_operand_is_evaluated(self, settings):
        resolved = resolve_operand(Power(Literal("3"), Literal("2")), settings)
        assert resolved.literal == "9"
        assert resolved.display.plain == "3 ^ 2 = 9"
        assert resolved.nested is True


class TestCalculate:
    """Tests for calculate: one operation end to end."""

    def test_simple(self, settings):
        result = calculate("2^3", settings)
        assert result.display_string == "2 ^ 3 = 8"
        assert result.result == "8"

    def test_nested_exponent(self, settings):
        result = calculate("2^3^2", settings)
        assert result.display_string == "2 ^ (3 ^ 2 = 9) = 512"
        assert result.result == "512"

    def test_nested_base(self, settings):
        result = calculate("(2^3)^2", settings)
        assert result.display_string == "(2 ^ 3 = 8) ^ 2 = 64"

    def test_deep_chain(self, settings):
        result = calculate("2^2^2^2", settings)
        assert result.display_string == "2 ^ (2 ^ (2 ^ 2 = 4) = 16) = 65536"

    def test_bracketed_literal_is_not_nested(self, settings):
        assert calculate("(2)^(10)", settings).display_string == "2 ^ 10 = 1024"

    def test_whitespace_around_caret(self, settings):
        assert calculate("  5 ^ 2 ", settings).display_string == "5 ^ 2 = 25"

    def test_quiet(self, quiet_settings):
        result = calculate("2^3", quiet_settings)
        assert result.display_string == "8"
        assert result.result == "8"

    def test_quiet_nested(self, quiet_settings):
        assert calculate("2^3^2", quiet_settings).display_string == "512"

    def test_signed_result_feeds_outer_operation(self, settings):
        result = calculate("(-2^3)^2", settings)
        assert result.display_string == "(-2 ^ 3 = -8) ^ 2 = 64"

    def test_float_result_feeds_outer_operation(self, settings):
        assert calculate("(1.5^2)^2", settings).result == "5.0625"

    def test_unsigned_result_exact(self, settings):
        assert calculate("10^19", settings).result == str(10 ** 19)

    def test_idempotent(self, settings):
        first = calculate("3^2^2", settings)
        second = calculate("3^2^2", settings)
        assert first.display_string == second.display_string
        assert first.result == second.result

    def test_default_settings(self):
        assert calculate("4^2").display_string == "4 ^ 2 = 16"

    def test_color_does_not_change_text(self):
        colored = calculate("2^3^2", Settings(color=True))
        plain = calculate("2^3^2", Settings(color=False))
        assert colored.display_string == plain.display_string


class TestCalculateErrors:
    """Errors carry the operation they happened in."""

    def test_missing_base(self, settings):
        with pytest.raises(E.MissingOperand) as info:
            calculate("^5", settings)
        assert info.value.missing == "base"

    def test_malformed(self, settings):
        with pytest.raises(E.MalformedExpression):
            calculate("hello", settings)

    def test_conversion_error_names_literal(self, settings):
        with pytest.raises(E.NumberConversionError) as info:
            calculate("2^1.2.3", settings)
        assert info.value.literal == "1.2.3"
        assert info.value.equation == "2^1.2.3"

    def test_nested_conversion_error_reports_outer_operation(self, settings):
        with pytest.raises(E.NumberConversionError) as info:
            calculate("2^(--3^2)", settings)
        assert info.value.equation == "2^(--3^2)"

    def test_zero_to_negative_power(self, settings):
        with pytest.raises(E.CalculationError):
            calculate("0^-1", settings)

    def test_float_text_is_not_reparsed_as_integer(self, settings):
        # '1e+20' has no decimal point, so the outer operation is unsigned
        with pytest.raises(E.NumberConversionError):
            calculate("(10.0^20)^2", settings)


class TestBatch:
    """Tests for split_operations and calculate_all."""

    def test_split(self):
        assert split_operations("2^3,4^2") == ["2^3", "4^2"]

    def test_batch_in_order(self, quiet_settings):
        outcomes = calculate_all("2^3,4^2", quiet_settings)
        assert [outcome.result.display_string for outcome in outcomes] == ["8", "16"]
        assert all(outcome.ok for outcome in outcomes)

    def test_batch_accepts_list(self, quiet_settings):
        outcomes = calculate_all(["3^3", "2^2"], quiet_settings)
        assert [outcome.result.result for outcome in outcomes] == ["27", "4"]

    def test_batch_stops_on_first_error(self, quiet_settings):
        outcomes = calculate_all("2^3,5^,4^2", quiet_settings)
        assert len(outcomes) == 2
        assert outcomes[0].ok
        assert not outcomes[1].ok
        assert isinstance(outcomes[1].error, E.MissingOperand)

    def test_batch_keep_going(self):
        outcomes = calculate_all("2^3,5^,4^2", Settings(quiet=True, color=False, keep_going=True))
        assert [outcome.ok for outcome in outcomes] == [True, False, True]
        assert outcomes[2].result.result == "16"

    def test_empty_segment_is_an_error(self, quiet_settings):
        outcomes = calculate_all("2^3,", quiet_settings)
        assert outcomes[1].error.code == "1004"
