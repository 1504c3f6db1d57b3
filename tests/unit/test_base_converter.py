"""
Тесты для Base Converter

Проверяет:
1. to_decimal (схема Горнера)
2. from_decimal (повторное деление)
3. convert между основаниями
4. Round trip и radix identity
5. Соглашение "пустое значение / ноль → пустой NumberList"
6. Неизменность исходного числа
7. Логирование операций
"""

import logging

import pytest

from ringnum.conversion import convert, from_decimal, to_decimal
from ringnum.core.config import NumberSystemConfig
from ringnum.core.domain import NumberList
from ringnum.core.errors import BaseRangeError, InvalidDecimalError


# =============================================================================
# TO_DECIMAL
# =============================================================================


class TestToDecimal:
    """Тесты для to_decimal"""

    def test_base3_example(self) -> None:
        """[1, 2, 0] в base 3 = 1·9 + 2·3 + 0 = 15"""
        assert to_decimal(NumberList(3, [1, 2, 0])) == "15"

    def test_empty_number_is_zero(self) -> None:
        assert to_decimal(NumberList(5)) == "0"

    def test_leading_zero_digits_ignored_in_value(self) -> None:
        assert to_decimal(NumberList(2, [0, 0, 1, 1])) == "3"

    def test_base_36_digits(self) -> None:
        assert to_decimal(NumberList(36, [35, 35])) == str(35 * 36 + 35)

    def test_large_value(self) -> None:
        """Значение больше 64 бит"""
        number = NumberList(2, [1] + [0] * 100)
        assert to_decimal(number) == str(2**100)

    def test_does_not_mutate_input(self) -> None:
        number = NumberList(3, [2, 1, 0, 2])
        to_decimal(number)
        assert list(number) == [2, 1, 0, 2]


# =============================================================================
# FROM_DECIMAL
# =============================================================================


class TestFromDecimal:
    """Тесты для from_decimal"""

    def test_base3_example(self) -> None:
        number = from_decimal("15", 3)
        assert list(number) == [1, 2, 0]
        assert number.base == 3

    def test_base2(self) -> None:
        assert list(from_decimal("9", 2)) == [1, 0, 0, 1]

    def test_zero_gives_empty(self) -> None:
        """'0' даёт пустое представление, а не цифру 0"""
        number = from_decimal("0", 3)
        assert len(number) == 0
        assert number.base == 3

    def test_empty_and_none_give_empty(self) -> None:
        assert len(from_decimal("", 8)) == 0
        assert len(from_decimal(None, 8)) == 0

    def test_all_zero_text_gives_empty(self) -> None:
        assert len(from_decimal("000", 4)) == 0

    def test_leading_zeros_accepted(self) -> None:
        assert list(from_decimal("0015", 3)) == [1, 2, 0]

    def test_non_digit_text_rejected(self) -> None:
        """Знак, дробная часть и буквы вызывают InvalidDecimalError"""
        for bad in ("-15", "1.5", "abc", "15 ", "0x1F"):
            with pytest.raises(InvalidDecimalError):
                from_decimal(bad, 3)

    def test_base_below_two_rejected(self) -> None:
        with pytest.raises(BaseRangeError):
            from_decimal("15", 1)
        with pytest.raises(BaseRangeError):
            from_decimal("15", 0)

    def test_large_value(self) -> None:
        value = 7**60
        number = from_decimal(str(value), 7)
        assert list(number) == [1] + [0] * 60

    def test_result_uses_given_config(self) -> None:
        config = NumberSystemConfig(default_base=5, scale_base=2, and_output_base=10)
        assert from_decimal("15", 4, config=config).config is config


# =============================================================================
# CONVERT
# =============================================================================


class TestConvert:
    """Тесты для convert"""

    def test_base3_to_base8(self) -> None:
        """[1, 2, 0]₃ = 15 = [1, 7]₈"""
        result = convert(NumberList(3, [1, 2, 0]), 8)
        assert list(result) == [1, 7]
        assert result.base == 8

    def test_source_not_mutated(self) -> None:
        source = NumberList(3, [1, 2, 0])
        result = convert(source, 8)
        result.append(3)
        assert list(source) == [1, 2, 0]
        assert source.base == 3

    def test_same_base_returns_fresh_copy(self) -> None:
        source = NumberList(10, [4, 2])
        result = convert(source, 10)
        assert result == source
        assert result is not source

    def test_empty_source(self) -> None:
        assert len(convert(NumberList(3), 8)) == 0

    def test_leading_zero_digits_dropped(self) -> None:
        assert list(convert(NumberList(3, [0, 0, 1, 2, 0]), 3)) == [1, 2, 0]

    def test_invalid_target_base(self) -> None:
        with pytest.raises(BaseRangeError):
            convert(NumberList(3, [1]), 1)

    def test_result_inherits_source_config(self) -> None:
        config = NumberSystemConfig(default_base=4)
        source = NumberList(digits=[3, 3], config=config)
        assert convert(source, 2).config is config


# =============================================================================
# СВОЙСТВА
# =============================================================================


class TestProperties:
    """Round trip и radix identity"""

    def test_round_trip(self) -> None:
        """from_decimal(to_decimal(r), b) воспроизводит цифры r"""
        for base in (2, 3, 7, 8, 10, 16, 36):
            for value in (1, 2, 15, 255, 1000, 123456789, 2**70 + 3):
                number = from_decimal(str(value), base)
                assert from_decimal(to_decimal(number), base) == number
                assert to_decimal(number) == str(value)

    def test_radix_conversion_identity(self) -> None:
        """convert(convert(r, b'), b) воспроизводит r"""
        original = NumberList(3, [2, 0, 1, 1, 2, 2, 0, 1])
        for other_base in (2, 4, 5, 8, 10, 16, 27, 100):
            restored = convert(convert(original, other_base), 3)
            assert list(restored) == list(original)
            assert restored.base == 3

    def test_matches_python_int_formatting(self) -> None:
        for value in range(1, 600, 7):
            assert "".join(str(d) for d in from_decimal(str(value), 2)) == format(value, "b")
            assert "".join(str(d) for d in from_decimal(str(value), 8)) == format(value, "o")


# =============================================================================
# ЛОГИРОВАНИЕ
# =============================================================================


class TestLogging:
    """Структурное логирование конвертации"""

    def test_success_logged_at_debug(self, caplog) -> None:
        with caplog.at_level(logging.DEBUG, logger="ringnum.conversion.base_converter"):
            convert(NumberList(3, [1, 2, 0]), 8)

        records = [r for r in caplog.records if r.getMessage() == "convert completed"]
        assert len(records) == 1
        assert records[0].levelno == logging.DEBUG
        assert records[0].source_base == 3
        assert records[0].target_base == 8
        assert records[0].status == "success"

    def test_invalid_input_logged_as_warning(self, caplog) -> None:
        with caplog.at_level(logging.DEBUG, logger="ringnum.conversion.base_converter"):
            with pytest.raises(InvalidDecimalError):
                from_decimal("12x", 3)

        warnings = [r for r in caplog.records if r.levelno == logging.WARNING]
        assert len(warnings) == 1
        assert warnings[0].getMessage() == "from_decimal failed"
        assert warnings[0].status == "error"
        assert warnings[0].exc_info is None
