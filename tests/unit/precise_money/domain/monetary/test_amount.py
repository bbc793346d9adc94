from __future__ import annotations

import copy
import pickle
from decimal import Decimal

import pytest

from precise_money import Amount, AmountError, ParseError, RangeError, coerce_to_amount
from precise_money.utils.math import round_number_to_digits

TEN_CENTS = Amount(0.1)
TWENTY_CENTS = Amount(0.2)
ORIGINAL_AMOUNT = Amount(25.9)
DISCOUNT_AMOUNT = Amount(6.475)
DISCOUNT_PERCENT = 25


# region Construction


def test_numeric_and_string_inputs_yield_equal_values() -> None:
    assert Amount(0.125).value == 0.125
    assert Amount("0.125").value == 0.125
    assert Amount(0.125).amount == Amount("0.125").amount


@pytest.mark.parametrize(
    "raw, expected",
    [
        (Decimal("19.425"), 19.425),
        (42, 42.0),
        ("12.50 USD", 12.5),
        ("  .5", 0.5),
        ("-3.5e2 apples", -350.0),
        ("1e3x", 1000.0),
    ],
)
def test_construction_uses_leading_float_parse(raw, expected) -> None:
    assert Amount(raw).value == expected


@pytest.mark.parametrize(
    "raw",
    ["randomString", "", "   ", "Infinity", "NaN", "1e400", "\u0661\u0662", "\uff11\uff12", "\u0663.5", float("nan"), float("inf"), True, None, [1]],
)
def test_construction_rejects_unparseable_input(raw) -> None:
    with pytest.raises(ParseError, match="amount could not be parsed into a floating point number."):
        Amount(raw)


def test_parse_error_is_a_value_error() -> None:
    with pytest.raises(ValueError):
        Amount("randomString")
    assert issubclass(ParseError, AmountError)


def test_construction_from_amount_copies_full_value() -> None:
    original = Amount(0.1234321)
    assert Amount(original).value == 0.1234321


def test_amount_is_immutable() -> None:
    amount = Amount(1.5)
    with pytest.raises(AttributeError):
        amount.value = 2.0
    with pytest.raises(AttributeError):
        amount._value = 2.0
    assert amount.value == 1.5


def test_coerce_to_amount_returns_same_instance_for_amount() -> None:
    assert coerce_to_amount(TEN_CENTS) is TEN_CENTS
    assert coerce_to_amount("0.1") == TEN_CENTS
    with pytest.raises(ParseError):
        coerce_to_amount("randomString")


# endregion

# region Display


def test_rounded_value_uses_two_digits_by_default() -> None:
    assert Amount(0.125).rounded_value() == 0.13


def test_rounded_value_uses_requested_precision() -> None:
    assert Amount(0.1234321).rounded_value(3) == 0.123


def test_rounded_value_does_not_change_stored_value() -> None:
    amount = Amount(0.1234321)
    assert amount.rounded_value(3) == 0.123
    assert amount.rounded_value() == 0.12
    assert amount.rounded_value(3) == 0.123
    assert amount.value == 0.1234321


def test_format_returns_rounded_string() -> None:
    assert Amount(0.125).format() == "0.13"
    assert Amount(0.1234321).format(3) == "0.123"
    assert Amount(30).format() == "30"
    assert Amount("1e17").format() == "100000000000000000"


def test_float_and_str_use_default_display_precision() -> None:
    assert float(Amount(0.125)) == 0.13
    assert str(Amount(0.125)) == "0.13"
    assert repr(Amount(19.425)) == "Amount(19.425)"


# endregion

# region Arithmetic


def test_add_avoids_float_rounding_noise() -> None:
    # 0.1 + 0.2 = 0.30000000000000004
    assert TEN_CENTS.add(TWENTY_CENTS).rounded_value() == 0.3
    assert TEN_CENTS.add(TWENTY_CENTS).value == 0.3


def test_add_retains_full_value() -> None:
    assert ORIGINAL_AMOUNT.add(DISCOUNT_AMOUNT).value == 32.375
    assert Amount(12.2345).add(Amount(12.2454)).value == 24.4799


def test_add_accepts_numbers_and_strings() -> None:
    assert TEN_CENTS.add(0.2).value == 0.3
    assert TEN_CENTS.add("0.2").value == 0.3


def test_add_refuses_numbers_too_big_to_calculate_safely() -> None:
    with pytest.raises(RangeError, match="numbers are too big to calculate safely."):
        Amount(9007199256).add(1)


def test_add_rejects_unparseable_operand() -> None:
    with pytest.raises(ParseError):
        TEN_CENTS.add("randomString")


def test_subtract_avoids_float_rounding_noise() -> None:
    # 25.9 - 6.475 = 19.424999999999997
    assert ORIGINAL_AMOUNT.subtract(DISCOUNT_AMOUNT).rounded_value() == 19.43
    assert Amount(0.2).subtract(0.1).value == 0.1


def test_subtract_retains_full_value() -> None:
    assert ORIGINAL_AMOUNT.subtract(DISCOUNT_AMOUNT).value == 19.425
    assert Amount(24.4799).subtract(Amount(12.2454)).value == 12.2345
    with pytest.raises(RangeError):
        Amount(9007199258).subtract(1)


def test_multiply_avoids_float_rounding_noise() -> None:
    # 0.1 * 0.2 = 0.020000000000000004
    assert TEN_CENTS.multiply(TWENTY_CENTS).rounded_value() == 0.02
    assert TEN_CENTS.multiply(0.2).value == 0.02


def test_multiply_retains_full_value() -> None:
    assert ORIGINAL_AMOUNT.multiply(DISCOUNT_AMOUNT).value == 167.7025
    assert ORIGINAL_AMOUNT.multiply(0.75).value == 19.425


def test_multiply_refuses_numbers_too_big_to_calculate_safely() -> None:
    assert Amount(90).multiply(100).value == 9000.0
    with pytest.raises(RangeError):
        Amount(100).multiply(100)
    with pytest.raises(RangeError):
        Amount(4503599629).multiply(2)


def test_digits_beyond_six_decimals_are_rounded_during_arithmetic() -> None:
    assert Amount(0.0000004).add(0).value == 0.0
    assert Amount(0.0000005).add(0).value == 0.000001
    assert Amount(-0.0000005).add(0).value == -0.000001


def test_results_at_the_safe_integer_boundary() -> None:
    assert Amount(9007199254).add(0.74099).value == 9007199254.74099
    with pytest.raises(RangeError):
        Amount(9007199255).add(0)
    with pytest.raises(RangeError):
        Amount(-9007199255).subtract(0)


def test_operations_return_new_instances() -> None:
    amount = Amount(10)
    result = amount.add(5)
    assert result is not amount
    assert amount.value == 10.0
    assert result.value == 15.0


def test_range_error_is_an_overflow_error() -> None:
    with pytest.raises(OverflowError):
        Amount(9007199256).add(1)
    assert issubclass(RangeError, AmountError)


# endregion

# region Percentages


def test_add_percent() -> None:
    # 0.2 + 50% [0.1] = 0.30000000000000004
    assert TWENTY_CENTS.add_percent(50).rounded_value() == 0.3
    assert Amount(0.125).add_percent(50).value == 0.1875
    assert Amount(20).add_percent(50).value == 30.0
    assert Amount(20).add_percent("50").value == 30.0


def test_subtract_percent() -> None:
    # 25.9 - 25% [6.475] = 19.424999999999997
    assert ORIGINAL_AMOUNT.subtract_percent(DISCOUNT_PERCENT).rounded_value() == 19.43
    assert ORIGINAL_AMOUNT.subtract_percent(DISCOUNT_PERCENT).value == 19.425


@pytest.mark.parametrize(
    "value, percent",
    [(20, 50), (25.9, 25), (199.99, 7.5), (0.125, 50), (1000, 21)],
)
def test_subtract_percent_reverts_add_percent(value, percent) -> None:
    with_percent = Amount(value).add_percent(percent)
    reverted = with_percent.subtract_percent(percent * 100 / (100 + percent))
    assert reverted.rounded_value() == round_number_to_digits(value, 2)


def test_percent_must_be_a_number() -> None:
    with pytest.raises(ValueError):
        Amount(20).add_percent("fifty")


def test_percent_inherits_range_guard() -> None:
    with pytest.raises(RangeError):
        Amount(9007199254).add_percent(50)


# endregion

# region Operators and comparison


def test_arithmetic_operators_delegate_to_methods() -> None:
    assert (TEN_CENTS + TWENTY_CENTS).value == 0.3
    assert (TEN_CENTS + 0.2).value == 0.3
    assert (0.2 + TEN_CENTS).value == 0.3
    assert (ORIGINAL_AMOUNT - DISCOUNT_AMOUNT).value == 19.425
    assert (1 - TEN_CENTS).value == 0.9
    assert (TEN_CENTS * 0.2).value == 0.02
    assert (3 * TEN_CENTS).value == 0.3


def test_arithmetic_operators_reject_unsupported_types() -> None:
    with pytest.raises(TypeError):
        TEN_CENTS + [1]
    with pytest.raises(TypeError):
        TEN_CENTS * None


def test_negation_and_abs() -> None:
    assert -Amount(1.5) == Amount(-1.5)
    assert abs(Amount(-1.5)) == Amount(1.5)


def test_comparison() -> None:
    assert Amount(1) == Amount("1")
    assert Amount(1) != 1
    assert Amount(1) < Amount(2)
    assert Amount(2) >= Amount(2)
    assert hash(Amount(1)) == hash(Amount("1.0"))
    assert sorted([Amount(3), Amount(1), Amount(2)]) == [Amount(1), Amount(2), Amount(3)]


# endregion

# region Copying


def test_copy_and_deepcopy_keep_value() -> None:
    amount = Amount(1.5)
    assert copy.copy(amount) == amount
    assert copy.deepcopy([amount, {"total": amount}]) == [amount, {"total": amount}]


def test_pickle_round_trip_keeps_full_value() -> None:
    amount = Amount(0.1234321)
    restored = pickle.loads(pickle.dumps(amount))
    assert restored == amount
    assert restored.value == 0.1234321
    with pytest.raises(AttributeError):
        restored._value = 2.0


# endregion
