"""
Bitwise AND — побитовое AND двух чисел в разных основаниях

1. Оба операнда переводятся в двоичную систему
2. Более короткий дополняется нулями слева до общей ширины
3. Поразрядное AND от старшего бита к младшему
4. Результат переводится в output_base

Операнды не изменяются: дополнение применяется к двоичным копиям.
"""

import logging
from typing import Optional

from ringnum.conversion.base_converter import convert
from ringnum.core.config import BINARY_BASE, DEFAULT_CONFIG
from ringnum.core.domain.number_list import NumberList
from ringnum.logging_utils import log_operation

logger = logging.getLogger(__name__)


def _pad_with_zeros(bits: NumberList, width: int) -> None:
    while len(bits) < width:
        bits.add_first(0)


def bitwise_and(
    left: NumberList,
    right: NumberList,
    output_base: Optional[int] = None,
) -> NumberList:
    """
    Побитовое AND двух чисел.

    Args:
        left: Первый операнд (любое основание)
        right: Второй операнд (любое основание)
        output_base: Основание результата (default: DEFAULT_CONFIG.and_output_base)

    Returns:
        Новый NumberList со значением int(left) & int(right)

    Raises:
        BaseRangeError: Если output_base < 2

    Examples:
        >>> fifteen = NumberList.from_decimal("15", 3)
        >>> nine = NumberList.from_decimal("9", 3)
        >>> list(bitwise_and(fifteen, nine, 3))
        [1, 0, 0]
    """
    if output_base is None:
        output_base = DEFAULT_CONFIG.and_output_base

    with log_operation(
        logger,
        "bitwise_and",
        left_base=left.base,
        right_base=right.base,
        output_base=output_base,
    ) as ctx:
        left_bits = convert(left, BINARY_BASE)
        right_bits = convert(right, BINARY_BASE)

        width = max(len(left_bits), len(right_bits))
        _pad_with_zeros(left_bits, width)
        _pad_with_zeros(right_bits, width)
        ctx["width"] = width

        and_result = NumberList(BINARY_BASE, config=left.config)
        for left_bit, right_bit in zip(left_bits, right_bits):
            and_result.append(left_bit & right_bit)

        return convert(and_result, output_base)
