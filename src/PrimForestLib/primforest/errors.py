"""Исключения primforest"""


class PrimForestError(Exception):
    """Базовое исключение библиотеки"""


class VertexOutOfRangeError(PrimForestError, IndexError):
    """Индекс вершины вне диапазона [0, V)"""

    def __init__(self, vertex: int, vertex_count: int):
        self.vertex = vertex
        self.vertex_count = vertex_count
        super().__init__(
            f"Неверный индекс вершины: {vertex} (допустимо 0..{vertex_count - 1})"
        )


class InvalidArgumentError(PrimForestError, ValueError):
    """Недопустимый аргумент операции"""


class DuplicateKeyError(PrimForestError, KeyError):
    """Элемент уже находится в очереди"""

    def __str__(self):
        # KeyError по умолчанию оборачивает сообщение в кавычки
        return str(self.args[0]) if self.args else ""


class NotFoundError(PrimForestError, LookupError):
    """Искомый элемент отсутствует"""


class SourceNotFoundError(NotFoundError):
    """Источник данных графа не найден"""

    def __init__(self, source: str):
        self.source = source
        super().__init__(f"Файл графа не найден: {source}")


class SourceReadError(PrimForestError):
    """Источник данных графа существует, но не может быть прочитан"""

    def __init__(self, source: str, reason: str):
        self.source = source
        self.reason = reason
        super().__init__(f"Не удалось прочитать файл графа {source}: {reason}")


class EmptyQueueError(PrimForestError, IndexError):
    """Операция над пустой очередью"""


class GraphParseError(PrimForestError, ValueError):
    """Ошибка разбора входных данных графа"""

    def __init__(self, message: str, position: int = -1):
        self.position = position
        if position >= 0:
            message = f"{message} (токен #{position})"
        super().__init__(message)
