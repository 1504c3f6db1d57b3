"""
Decimal Arithmetic — неограниченная десятичная арифметика на строках

Величина хранится как DecimalString: big-endian последовательность ASCII цифр
без ведущих нулей (кроме литерала "0").

Операции (школьные алгоритмы, без промежуточного целого шире одной цифры,
умноженной на малый множитель):
- add_small: DecimalString + малое неотрицательное целое
- multiply_small: DecimalString × малое неотрицательное целое
- divmod_small: DecimalString ÷ малое положительное целое → (частное, остаток)

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Результат всегда нормализованная DecimalString ("0", а не "00" или "")
2. Пустой вход трактуется как "0"
3. Нецифровые символы → InvalidDecimalError
4. Функции чистые, вход не изменяется
"""

from typing import Final

from ringnum.core.config import DECIMAL_BASE
from ringnum.core.errors import InvalidDecimalError

# Литерал нуля
ZERO: Final[str] = "0"

_DIGITS: Final[frozenset] = frozenset("0123456789")


# =============================================================================
# ВАЛИДАЦИЯ И НОРМАЛИЗАЦИЯ
# =============================================================================


def is_decimal_string(text: object) -> bool:
    """
    Проверка соответствия грамматике ^[0-9]+$ (только ASCII цифры).

    Examples:
        >>> is_decimal_string("015")
        True
        >>> is_decimal_string("-15")
        False
        >>> is_decimal_string("")
        False
    """
    return isinstance(text, str) and len(text) > 0 and all(ch in _DIGITS for ch in text)


def validate_decimal_string(text: object) -> str:
    """
    Проверка десятичной записи.

    Пустая строка допустима и обозначает ноль.

    Returns:
        text без изменений

    Raises:
        InvalidDecimalError: Если text не строка или содержит нецифровые символы
    """
    if not isinstance(text, str):
        raise InvalidDecimalError(text)
    if text and not is_decimal_string(text):
        raise InvalidDecimalError(text)
    return text


def strip_leading_zeros(text: str) -> str:
    """
    Удаление ведущих нулей; пустой результат схлопывается в "0".

    Examples:
        >>> strip_leading_zeros("00120")
        '120'
        >>> strip_leading_zeros("000")
        '0'
    """
    stripped = text.lstrip(ZERO)
    return stripped if stripped else ZERO


# =============================================================================
# ОПЕРАЦИИ
# =============================================================================


def add_small(number: str, addend: int) -> str:
    """
    Сложение DecimalString с малым неотрицательным целым.

    Сложение столбиком от младшего символа к старшему с переносом;
    остаток переноса дописывается в старший разряд.

    Args:
        number: DecimalString (пустая строка = "0")
        addend: Неотрицательное слагаемое

    Returns:
        Нормализованная DecimalString суммы

    Raises:
        InvalidDecimalError: Если number содержит нецифровые символы
        ValueError: Если addend < 0

    Examples:
        >>> add_small("199", 3)
        '202'
        >>> add_small("0", 0)
        '0'
    """
    validate_decimal_string(number)
    if addend < 0:
        raise ValueError(f"addend must be non-negative, got {addend}")

    if not number:
        number = ZERO

    digits = []
    carry = addend
    for ch in reversed(number):
        total = (ord(ch) - ord(ZERO)) + carry
        digits.append(total % DECIMAL_BASE)
        carry = total // DECIMAL_BASE

    while carry > 0:
        digits.append(carry % DECIMAL_BASE)
        carry //= DECIMAL_BASE

    return strip_leading_zeros("".join(str(d) for d in reversed(digits)))


def multiply_small(number: str, multiplier: int) -> str:
    """
    Умножение DecimalString на малое неотрицательное целое.

    Умножение столбиком от младшего символа, оставшийся перенос
    раскладывается на цифры в старших разрядах.

    Examples:
        >>> multiply_small("15", 3)
        '45'
        >>> multiply_small("12", 0)
        '0'
    """
    validate_decimal_string(number)
    if multiplier < 0:
        raise ValueError(f"multiplier must be non-negative, got {multiplier}")

    if not number or multiplier == 0:
        return ZERO

    digits = []
    carry = 0
    for ch in reversed(number):
        product = (ord(ch) - ord(ZERO)) * multiplier + carry
        digits.append(product % DECIMAL_BASE)
        carry = product // DECIMAL_BASE

    while carry > 0:
        digits.append(carry % DECIMAL_BASE)
        carry //= DECIMAL_BASE

    return strip_leading_zeros("".join(str(d) for d in reversed(digits)))


def divmod_small(number: str, divisor: int) -> tuple[str, int]:
    """
    Деление DecimalString на малое положительное целое.

    Деление уголком от старшей цифры: cur = r * 10 + d,
    цифра частного cur // divisor, новый r = cur % divisor.

    Args:
        number: DecimalString делимого (пустая строка = "0")
        divisor: Положительный делитель

    Returns:
        (quotient, remainder): нормализованное частное и остаток в [0, divisor)

    Raises:
        InvalidDecimalError: Если number содержит нецифровые символы
        ValueError: Если divisor <= 0

    Examples:
        >>> divmod_small("15", 3)
        ('5', 0)
        >>> divmod_small("0", 7)
        ('0', 0)
    """
    validate_decimal_string(number)
    if divisor <= 0:
        raise ValueError(f"divisor must be positive, got {divisor}")

    if not number:
        return (ZERO, 0)

    quotient = []
    remainder = 0
    for ch in number:
        current = remainder * DECIMAL_BASE + (ord(ch) - ord(ZERO))
        quotient.append(str(current // divisor))
        remainder = current % divisor

    return (strip_leading_zeros("".join(quotient)), remainder)
