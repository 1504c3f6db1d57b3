"""
NumberList — число как последовательность цифр в системе счисления base

Число хранится в CircularDigitRing, цифры от старшей к младшей.
Класс реализует collections.abc.MutableSequence[int] и отвечает
за проверку диапазона цифр [0, base) перед записью в кольцо.

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. base неизменяем после создания и base >= 2
2. Каждая хранимая цифра < base (DigitRangeError при нарушении)
3. Кольцо принадлежит ровно одному NumberList; clear() заменяет его целиком
4. Конвертация не изменяет исходный NumberList

Индексы:
- Отрицательные индексы нормализуются как в list (-1 → последняя цифра)
- insert() не обрезает индекс, как list.insert: вне [0, len] → RingIndexError
"""

from collections.abc import Iterable, MutableSequence
from typing import Iterator, Optional, Union

from ringnum.core.config import DEFAULT_CONFIG, NumberSystemConfig, validate_base
from ringnum.core.errors import DigitRangeError
from ringnum.core.ring import CircularDigitRing


class NumberList(MutableSequence):
    """
    Число в системе счисления base поверх кольцевого списка цифр.

    Examples:
        >>> number = NumberList(3, [1, 2, 0])
        >>> number.to_decimal_string()
        '15'
        >>> str(number.change_scale())
        '17'
    """

    def __init__(
        self,
        base: Optional[int] = None,
        digits: Iterable[int] = (),
        config: Optional[NumberSystemConfig] = None,
    ):
        """
        Args:
            base: Основание системы счисления (default: config.default_base)
            digits: Начальные цифры, от старшей к младшей
            config: Конфигурация оснований (default: DEFAULT_CONFIG)

        Raises:
            BaseRangeError: Если base < 2
            DigitRangeError: Если какая-либо цифра вне [0, base)
        """
        self._config = config or DEFAULT_CONFIG
        self._base = validate_base(self._config.default_base if base is None else base)
        self._ring = CircularDigitRing()

        for digit in digits:
            self.append(digit)

    # =========================================================================
    # СВОЙСТВА
    # =========================================================================

    @property
    def base(self) -> int:
        """Основание системы счисления."""
        return self._base

    @property
    def config(self) -> NumberSystemConfig:
        return self._config

    # =========================================================================
    # ПРОВЕРКИ
    # =========================================================================

    def _check_digit(self, digit: object) -> int:
        if isinstance(digit, bool) or not isinstance(digit, int):
            raise DigitRangeError(digit, self._base)
        if digit < 0 or digit >= self._base:
            raise DigitRangeError(digit, self._base)
        return digit

    def _normalize_index(self, index: int) -> int:
        if index < 0:
            return index + len(self._ring)
        return index

    # =========================================================================
    # MutableSequence
    # =========================================================================

    def __len__(self) -> int:
        return len(self._ring)

    def __getitem__(self, index: Union[int, slice]):
        if isinstance(index, slice):
            return NumberList(self._base, list(self._ring)[index], config=self._config)
        return self._ring.get(self._normalize_index(index))

    def __setitem__(self, index: int, digit: int) -> None:
        if isinstance(index, slice):
            raise TypeError("NumberList does not support slice assignment")
        self._check_digit(digit)
        self._ring.set(self._normalize_index(index), digit)

    def __delitem__(self, index: int) -> None:
        if isinstance(index, slice):
            raise TypeError("NumberList does not support slice deletion")
        self._ring.remove(self._normalize_index(index))

    def insert(self, index: int, digit: int) -> None:
        """
        Вставка цифры на позицию index.

        Raises:
            DigitRangeError: Если цифра вне [0, base)
            RingIndexError: Если index вне [0, len]
        """
        self._check_digit(digit)
        self._ring.insert(self._normalize_index(index), digit)

    def append(self, digit: int) -> None:
        """Добавление младшей цифры, O(1)."""
        self._check_digit(digit)
        self._ring.append(digit)

    def add_first(self, digit: int) -> None:
        """Добавление старшей цифры, O(1)."""
        self._check_digit(digit)
        self._ring.prepend(digit)

    def pop(self, index: int = -1) -> int:
        return self._ring.remove(self._normalize_index(index))

    def clear(self) -> None:
        """Очистка: кольцо заменяется новым пустым."""
        self._ring = CircularDigitRing()

    def __iter__(self) -> Iterator[int]:
        return iter(self._ring)

    def __reversed__(self) -> Iterator[int]:
        return reversed(self._ring)

    def __contains__(self, value: object) -> bool:
        return any(digit == value for digit in self._ring)

    def index(self, value: object, start: int = 0, stop: Optional[int] = None) -> int:
        digits = list(self._ring)
        return digits.index(value, start, len(digits) if stop is None else stop)

    # =========================================================================
    # СРАВНЕНИЕ И ПРЕДСТАВЛЕНИЕ
    # =========================================================================

    def __eq__(self, other: object) -> bool:
        """
        Равенство по последовательности цифр.

        Основание не сравнивается: [1, 2] в base 3 и [1, 2] в base 8 равны.
        """
        if not isinstance(other, NumberList):
            return NotImplemented
        return len(self) == len(other) and all(a == b for a, b in zip(self, other))

    __hash__ = None

    def __str__(self) -> str:
        return "".join(str(digit) for digit in self._ring)

    def __repr__(self) -> str:
        return f"NumberList(base={self._base}, digits={list(self._ring)})"

    # =========================================================================
    # ДОПОЛНИТЕЛЬНЫЕ ОПЕРАЦИИ НАД ЦИФРАМИ
    # =========================================================================

    def swap(self, index1: int, index2: int) -> None:
        """Обмен цифр на двух позициях."""
        first = self[index1]
        second = self[index2]
        self[index1] = second
        self[index2] = first

    def sort_ascending(self) -> None:
        for position, digit in enumerate(sorted(self._ring)):
            self._ring.set(position, digit)

    def sort_descending(self) -> None:
        for position, digit in enumerate(sorted(self._ring, reverse=True)):
            self._ring.set(position, digit)

    def shift_left(self) -> None:
        """Циклический сдвиг влево: старшая цифра переходит в конец."""
        if len(self._ring) <= 1:
            return
        self._ring.append(self._ring.remove(0))

    def shift_right(self) -> None:
        """Циклический сдвиг вправо: младшая цифра переходит в начало."""
        if len(self._ring) <= 1:
            return
        self._ring.prepend(self._ring.remove(len(self._ring) - 1))

    def contains_all(self, values: Iterable[object]) -> bool:
        digits = list(self._ring)
        return all(value in digits for value in values)

    def remove_all(self, values: Iterable[object]) -> bool:
        """
        Удаление всех вхождений перечисленных цифр.

        Returns:
            True если NumberList изменён
        """
        targets = list(values)
        return self._remove_where(lambda digit: digit in targets)

    def retain_all(self, values: Iterable[object]) -> bool:
        """
        Удаление всех цифр, не входящих в values.

        Returns:
            True если NumberList изменён
        """
        allowed = list(values)
        return self._remove_where(lambda digit: digit not in allowed)

    def last_index(self, value: object) -> int:
        """
        Индекс последнего вхождения цифры.

        Raises:
            ValueError: Если цифра отсутствует
        """
        for offset, digit in enumerate(reversed(self._ring)):
            if digit == value:
                return len(self._ring) - 1 - offset
        raise ValueError(f"{value!r} is not in NumberList")

    def _remove_where(self, predicate) -> bool:
        return self._ring.remove_where(predicate) > 0

    # =========================================================================
    # ОПЕРАЦИИ НАД ЧИСЛОМ
    # =========================================================================

    @classmethod
    def from_decimal(
        cls,
        value: Optional[str],
        base: Optional[int] = None,
        config: Optional[NumberSystemConfig] = None,
    ) -> "NumberList":
        """
        Создание числа из десятичной записи.

        Raises:
            InvalidDecimalError: Если value содержит нецифровые символы
        """
        from ringnum.conversion.base_converter import from_decimal

        config = config or DEFAULT_CONFIG
        return from_decimal(value, config.default_base if base is None else base, config=config)

    def to_decimal_string(self) -> str:
        """Десятичное значение числа как DecimalString."""
        from ringnum.conversion.base_converter import to_decimal

        return to_decimal(self)

    def change_scale(self) -> "NumberList":
        """
        То же число в дополнительной системе счисления (config.scale_base).

        Исходный NumberList не изменяется.
        """
        from ringnum.conversion.base_converter import convert

        return convert(self, self._config.scale_base)

    def additional_operation(self, other: "NumberList") -> "NumberList":
        """
        Побитовое AND с другим числом, результат в config.and_output_base.

        Операнды не изменяются.
        """
        from ringnum.operations.bitwise_and import bitwise_and

        return bitwise_and(self, other, self._config.and_output_base)
