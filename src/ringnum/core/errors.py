"""
Errors — иерархия исключений ringnum

Все ошибки синхронные и локальные: выбрасываются в момент некорректного
вызова и доставляются непосредственному вызывающему коду.

Каждый класс дополнительно наследует стандартное исключение Python
(ValueError / IndexError), чтобы внешний код мог ловить их привычным образом.
"""


class RingNumError(Exception):
    """Базовое исключение всех ошибок ringnum."""

    pass


class DigitRangeError(RingNumError, ValueError):
    """
    Цифра вне диапазона [0, base) для текущей системы счисления.

    Выбрасывается в точке записи (set / insert / append / add_first),
    значение никогда не обрезается молча.
    """

    def __init__(self, digit: object, base: int):
        self.digit = digit
        self.base = base
        super().__init__(f"Digit {digit!r} invalid for base {base}")


class BaseRangeError(RingNumError, ValueError):
    """Основание системы счисления меньше 2."""

    def __init__(self, base: object):
        self.base = base
        super().__init__(f"Base must be an integer >= 2, got {base!r}")


class RingIndexError(RingNumError, IndexError):
    """Индекс вне допустимого диапазона для операции над кольцом."""

    def __init__(self, index: int, size: int, inclusive: bool = False):
        self.index = index
        self.size = size
        upper = "]" if inclusive else ")"
        super().__init__(f"Index {index} out of range [0, {size}{upper}")


class InvalidDecimalError(RingNumError, ValueError):
    """Текст не является десятичной записью (^[0-9]+$)."""

    def __init__(self, value: object):
        self.value = value
        super().__init__(f"Invalid decimal number: {value!r}")


class NumberStorageError(RingNumError):
    """Не удалось сохранить число в файл."""

    pass
