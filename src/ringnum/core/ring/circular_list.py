"""
CircularDigitRing — кольцевой двунаправленный список цифр

Базовый контейнер NumberList. Узлы хранятся в arena из параллельных списков
(_values / _next / _prev), адресуемых целыми слотами; head — индекс слота
или None. Освобождённые слоты переиспользуются через free list.

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. head is None ⇔ size == 0
2. Для каждого узла n: next[prev[n]] == n и prev[next[n]] == n
3. size шагов по next от head возвращают в head
4. Tail всегда prev[head], отдельного поля нет
5. Снаружи доступ только по целочисленному индексу, слоты не раскрываются

Поиск узла по индексу: O(min(index, size - index)), обход в более короткую
сторону от head или от tail.

Диапазон значений цифр кольцо не проверяет, только индексы.
"""

from typing import Callable, Iterator, List, Optional

from ringnum.core.errors import RingIndexError


class CircularDigitRing:
    """
    Кольцевой двунаправленный список цифр.

    Порядок head → tail соответствует порядку цифр числа,
    от старшей к младшей.
    """

    def __init__(self):
        self._values: List[int] = []
        self._next: List[int] = []
        self._prev: List[int] = []
        self._free: List[int] = []
        self._head: Optional[int] = None
        self._size = 0

    # =========================================================================
    # РАЗМЕР
    # =========================================================================

    def size(self) -> int:
        return self._size

    def is_empty(self) -> bool:
        return self._size == 0

    def __len__(self) -> int:
        return self._size

    # =========================================================================
    # ДОСТУП ПО ИНДЕКСУ
    # =========================================================================

    def get(self, index: int) -> int:
        """Цифра по индексу (0 — старшая)."""
        return self._values[self._slot_at(index)]

    def set(self, index: int, value: int) -> None:
        """Замена цифры по индексу."""
        self._values[self._slot_at(index)] = value

    # =========================================================================
    # ВСТАВКА
    # =========================================================================

    def append(self, value: int) -> None:
        """
        Добавление после tail (перед head), новый узел становится tail.

        O(1). В пустом кольце узел становится head и ссылается сам на себя.
        """
        slot = self._allocate(value)
        if self._head is None:
            self._head = slot
        else:
            self._link_before(slot, self._head)
        self._size += 1

    def prepend(self, value: int) -> None:
        """
        Добавление перед head, новый узел становится head.

        O(1): точка вставки известна, обход не нужен.
        """
        self.append(value)
        if self._size > 1:
            # Новый tail стоит прямо перед head: сдвиг head назад делает его head
            self._head = self._prev[self._head]

    def insert(self, index: int, value: int) -> None:
        """
        Вставка цифры так, чтобы она оказалась на позиции index.

        Args:
            index: 0 <= index <= size; index == size эквивалентно append

        Raises:
            RingIndexError: Если index вне [0, size]
        """
        if index < 0 or index > self._size:
            raise RingIndexError(index, self._size, inclusive=True)

        if index == self._size:
            self.append(value)
            return

        target = self._slot_at(index)
        slot = self._allocate(value)
        self._link_before(slot, target)

        if index == 0:
            self._head = slot

        self._size += 1

    # =========================================================================
    # УДАЛЕНИЕ
    # =========================================================================

    def remove(self, index: int) -> int:
        """
        Удаление узла по индексу.

        Если удалён head, head переходит к следующему узлу;
        если удалён последний узел, head становится None.

        Returns:
            Удалённая цифра

        Raises:
            RingIndexError: Если index вне [0, size)
        """
        slot = self._slot_at(index)
        value = self._values[slot]
        self._unlink(slot)
        return value

    def remove_where(self, predicate: Callable[[int], bool]) -> int:
        """
        Удаление всех цифр, для которых predicate истинен, за один обход.

        Returns:
            Количество удалённых цифр
        """
        removed = 0
        slot = self._head
        for _ in range(self._size):
            following = self._next[slot]
            if predicate(self._values[slot]):
                self._unlink(slot)
                removed += 1
            slot = following
        return removed

    # =========================================================================
    # ОБХОД
    # =========================================================================

    def __iter__(self) -> Iterator[int]:
        """Цифры от head к tail, O(n) на весь обход."""
        slot = self._head
        for _ in range(self._size):
            yield self._values[slot]
            slot = self._next[slot]

    def __reversed__(self) -> Iterator[int]:
        """Цифры от tail к head."""
        if self._head is None:
            return
        slot = self._prev[self._head]
        for _ in range(self._size):
            yield self._values[slot]
            slot = self._prev[slot]

    def is_consistent(self) -> bool:
        """
        Проверка инвариантов кольца.

        Обходит кольцо по next и по prev, проверяя взаимность ссылок
        и то, что оба обхода замыкаются на head ровно через size шагов.

        Returns:
            True если структура кольца корректна
        """
        if self._head is None:
            return self._size == 0

        for links, back_links in ((self._next, self._prev), (self._prev, self._next)):
            slot = self._head
            for step in range(self._size):
                following = links[slot]
                if back_links[following] != slot:
                    return False
                slot = following
                if slot == self._head and step != self._size - 1:
                    return False
            if slot != self._head:
                return False

        return True

    def __repr__(self) -> str:
        return f"CircularDigitRing({list(self)})"

    # =========================================================================
    # ВНУТРЕННИЕ ОПЕРАЦИИ
    # =========================================================================

    def _slot_at(self, index: int) -> int:
        """
        Разрешение индекса в слот обходом в более короткую сторону.

        index <= size // 2: index шагов вперёд от head;
        иначе: (size - 1 - index) шагов назад от tail.
        """
        if index < 0 or index >= self._size:
            raise RingIndexError(index, self._size)

        if index <= self._size // 2:
            slot = self._head
            for _ in range(index):
                slot = self._next[slot]
            return slot

        slot = self._prev[self._head]
        for _ in range(self._size - 1 - index):
            slot = self._prev[slot]
        return slot

    def _allocate(self, value: int) -> int:
        """Новый узел, связанный сам с собой."""
        if self._free:
            slot = self._free.pop()
            self._values[slot] = value
            self._next[slot] = slot
            self._prev[slot] = slot
            return slot

        slot = len(self._values)
        self._values.append(value)
        self._next.append(slot)
        self._prev.append(slot)
        return slot

    def _unlink(self, slot: int) -> None:
        """Исключение узла из кольца; head переходит к следующему узлу."""
        if self._size == 1:
            self._head = None
        else:
            prev_slot = self._prev[slot]
            next_slot = self._next[slot]
            self._next[prev_slot] = next_slot
            self._prev[next_slot] = prev_slot

            if slot == self._head:
                self._head = next_slot

        self._release(slot)
        self._size -= 1

    def _release(self, slot: int) -> None:
        self._next[slot] = slot
        self._prev[slot] = slot
        self._free.append(slot)

    def _link_before(self, slot: int, target: int) -> None:
        """Вставка одиночного узла slot непосредственно перед target."""
        prev_slot = self._prev[target]
        self._next[prev_slot] = slot
        self._prev[slot] = prev_slot
        self._next[slot] = target
        self._prev[target] = slot
