"""
Base Converter — перевод чисел между системами счисления

Промежуточное представление — DecimalString:
- to_decimal: NumberList → DecimalString (схема Горнера)
- from_decimal: DecimalString → NumberList (повторное деление, сбор остатков)
- convert: NumberList → NumberList в другом основании

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Вход никогда не изменяется, результат всегда в новом кольце
2. None, "" и "0" дают пустой NumberList (а не цифру 0)
3. Нецифровой текст → InvalidDecimalError
4. Основание результата >= 2
"""

import logging
from typing import Optional

from ringnum.core.config import NumberSystemConfig, validate_base
from ringnum.core.domain.number_list import NumberList
from ringnum.core.errors import InvalidDecimalError
from ringnum.core.math.decimal_arithmetic import (
    ZERO,
    add_small,
    divmod_small,
    is_decimal_string,
    multiply_small,
    strip_leading_zeros,
)
from ringnum.logging_utils import log_operation

logger = logging.getLogger(__name__)


def to_decimal(number: NumberList) -> str:
    """
    Десятичное значение числа.

    Схема Горнера от старшей цифры к младшей:
        acc = "0"; acc = add_small(multiply_small(acc, base), digit)

    Args:
        number: Исходное число (не изменяется)

    Returns:
        DecimalString; пустой NumberList → "0"

    Examples:
        >>> to_decimal(NumberList(3, [1, 2, 0]))
        '15'
    """
    with log_operation(logger, "to_decimal", base=number.base, digit_count=len(number)) as ctx:
        accumulator = ZERO
        for digit in number:
            accumulator = add_small(multiply_small(accumulator, number.base), digit)
        ctx["decimal_length"] = len(accumulator)
        return accumulator


def from_decimal(
    value: Optional[str],
    base: int,
    config: Optional[NumberSystemConfig] = None,
) -> NumberList:
    """
    Перевод десятичной записи в NumberList с основанием base.

    Повторное деление на base: каждый остаток — следующая по старшинству
    цифра, поэтому вставляется в начало кольца.

    Args:
        value: DecimalString; None или "" обозначают пустое число
        base: Основание результата (>= 2)
        config: Конфигурация результата

    Returns:
        Новый NumberList; "0" → пустой NumberList

    Raises:
        BaseRangeError: Если base < 2
        InvalidDecimalError: Если value содержит нецифровые символы

    Examples:
        >>> list(from_decimal("15", 3))
        [1, 2, 0]
    """
    validate_base(base)

    with log_operation(logger, "from_decimal", base=base) as ctx:
        result = NumberList(base, config=config)

        if value is None or value == "":
            ctx["digit_count"] = 0
            return result

        if not is_decimal_string(value):
            raise InvalidDecimalError(value)

        current = strip_leading_zeros(value)
        while current != ZERO:
            current, remainder = divmod_small(current, base)
            result.add_first(remainder)

        ctx["digit_count"] = len(result)
        return result


def convert(source: NumberList, new_base: int) -> NumberList:
    """
    Перевод числа в другое основание через DecimalString.

    Args:
        source: Исходное число (не изменяется)
        new_base: Новое основание (>= 2)

    Returns:
        Новый NumberList с тем же значением в основании new_base

    Raises:
        BaseRangeError: Если new_base < 2

    Examples:
        >>> list(convert(NumberList(3, [1, 2, 0]), 8))
        [1, 7]
    """
    validate_base(new_base)

    with log_operation(logger, "convert", source_base=source.base, target_base=new_base):
        return from_decimal(to_decimal(source), new_base, config=source.config)
