"""
ringnum — числа в произвольной системе счисления на кольцевом списке

Число хранится как последовательность цифр (от старшей к младшей)
в кольцевом двунаправленном списке. Поддерживаются:
- индексный доступ и изменение цифр
- перевод в десятичную запись и обратно (строковая арифметика)
- перевод между произвольными основаниями
- побитовое AND двух чисел в разных основаниях
"""

from ringnum.conversion import convert, from_decimal, to_decimal
from ringnum.core.config import DEFAULT_CONFIG, NumberSystemConfig
from ringnum.core.domain import NumberList, NumberSnapshot
from ringnum.core.errors import (
    BaseRangeError,
    DigitRangeError,
    InvalidDecimalError,
    NumberStorageError,
    RingIndexError,
    RingNumError,
)
from ringnum.core.ring import CircularDigitRing
from ringnum.operations import bitwise_and

__version__ = "1.0.0"

__all__ = [
    # Containers
    "CircularDigitRing",
    "NumberList",
    "NumberSnapshot",
    # Config
    "NumberSystemConfig",
    "DEFAULT_CONFIG",
    # Conversion
    "to_decimal",
    "from_decimal",
    "convert",
    # Operations
    "bitwise_and",
    # Errors
    "RingNumError",
    "DigitRangeError",
    "BaseRangeError",
    "RingIndexError",
    "InvalidDecimalError",
    "NumberStorageError",
]
