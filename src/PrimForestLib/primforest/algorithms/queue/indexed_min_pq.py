"""Индексированная min-очередь с приоритетами"""

import math
from typing import Dict, Generic, Hashable, List, TypeVar

from ...errors import (
    DuplicateKeyError,
    EmptyQueueError,
    InvalidArgumentError,
    NotFoundError,
)

T = TypeVar('T', bound=Hashable)


class _HeapEntry:
    __slots__ = ("value", "priority", "seq")

    def __init__(self, value, priority: float, seq: int):
        self.value = value
        self.priority = priority
        self.seq = seq  # Порядок вставки, разрешает равные приоритеты

    def key(self):
        return (self.priority, self.seq)


class IndexedMinPQ(Generic[T]):
    """
    Двоичная min-куча с индексом "значение -> позиция".

    Меньший приоритет извлекается первым. При равных приоритетах
    элементы извлекаются в порядке вставки.

    Сложность:
    - push, pop_min, decrease_priority: O(log n)
    - contains, peek_min, size: O(1)
    """

    def __init__(self):
        # Куча с индексацией с 1; heap[0] не используется
        self._heap: List[_HeapEntry] = [None]
        self._index: Dict[T, int] = {}
        self._counter = 0

    def push(self, value: T, priority: float):
        """
        Добавить элемент с приоритетом.

        Raises:
            DuplicateKeyError: если элемент уже в очереди
        """
        if value in self._index:
            raise DuplicateKeyError(f"Элемент {value!r} уже находится в очереди")
        priority = _check_priority(priority)

        self._heap.append(_HeapEntry(value, priority, self._counter))
        self._counter += 1
        k = len(self._heap) - 1
        self._index[value] = k
        self._sift_up(k)

    def pop_min(self) -> T:
        """
        Извлечь элемент с наименьшим приоритетом.

        Raises:
            EmptyQueueError: если очередь пуста
        """
        self._require_not_empty()
        top = self._heap[1]
        last = len(self._heap) - 1
        self._swap(1, last)
        self._heap.pop()
        del self._index[top.value]
        if len(self._heap) > 1:
            self._sift_down(1)
        return top.value

    def peek_min(self) -> T:
        """Элемент с наименьшим приоритетом (без извлечения)"""
        self._require_not_empty()
        return self._heap[1].value

    def peek_min_priority(self) -> float:
        """Наименьший приоритет в очереди"""
        self._require_not_empty()
        return self._heap[1].priority

    def contains(self, value: T) -> bool:
        return value in self._index

    def priority_of(self, value: T) -> float:
        """Текущий приоритет элемента"""
        if value not in self._index:
            raise NotFoundError(f"Элемент {value!r} отсутствует в очереди")
        return self._heap[self._index[value]].priority

    def decrease_priority(self, value: T, priority: float):
        """
        Уменьшить приоритет элемента, находящегося в очереди.

        Порядок кучи восстанавливается только подъемом элемента.
        Равный приоритет допустим и ничего не меняет.

        Args:
            value: Элемент очереди
            priority: Новый приоритет (не больше текущего)

        Raises:
            NotFoundError: если элемента нет в очереди
            InvalidArgumentError: если новый приоритет больше текущего
        """
        if value not in self._index:
            raise NotFoundError(f"Элемент {value!r} отсутствует в очереди")
        priority = _check_priority(priority)

        k = self._index[value]
        entry = self._heap[k]
        if priority > entry.priority:
            raise InvalidArgumentError(
                f"Новый приоритет {priority} больше текущего {entry.priority} для {value!r}"
            )
        entry.priority = priority
        self._sift_up(k)

    def size(self) -> int:
        return len(self._heap) - 1

    def is_empty(self) -> bool:
        return len(self._heap) == 1

    def clear(self):
        """Удалить все элементы"""
        self._heap = [None]
        self._index.clear()

    def __len__(self):
        return self.size()

    def __contains__(self, value):
        return self.contains(value)

    def __repr__(self):
        items = ", ".join(
            f"{e.value!r}({e.priority})" for e in self._heap[1:]
        )
        return f"IndexedMinPQ([{items}])"

    def _require_not_empty(self):
        if self.is_empty():
            raise EmptyQueueError("Очередь с приоритетами пуста")

    def _greater(self, i: int, j: int) -> bool:
        return self._heap[i].key() > self._heap[j].key()

    def _swap(self, i: int, j: int):
        heap = self._heap
        heap[i], heap[j] = heap[j], heap[i]
        self._index[heap[i].value] = i
        self._index[heap[j].value] = j

    def _sift_up(self, k: int):
        while k > 1 and self._greater(k // 2, k):
            self._swap(k, k // 2)
            k //= 2

    def _sift_down(self, k: int):
        n = len(self._heap) - 1
        while 2 * k <= n:
            j = 2 * k
            if j < n and self._greater(j, j + 1):
                j += 1
            if not self._greater(k, j):
                break
            self._swap(k, j)
            k = j


def _check_priority(priority: float) -> float:
    priority = float(priority)
    if math.isnan(priority):
        raise InvalidArgumentError("Приоритет не может быть NaN")
    return priority
