"""
utils/error_handling.py

Иерархия исключений движка.
"""


class EngineError(Exception):
    """Базовое исключение движка."""
    pass


class IllegalMoveError(EngineError):
    """Ход не проходит проверку правил. Доска не меняется."""

    def __init__(self, start, end):
        self.start = start
        self.end = end
        super().__init__(f"Недопустимый ход {start} → {end}")


class OffBoardError(EngineError):
    """Обращение к координате, которой нет на доске."""

    def __init__(self, coord):
        self.coord = coord
        super().__init__(f"Координата {coord} вне доски")


class MalformedLayoutError(EngineError):
    """Ошибка разбора текстового описания доски."""
    pass


class UnknownLayoutError(EngineError):
    """Доска с таким именем отсутствует в каталоге."""

    def __init__(self, name: str):
        self.name = name
        super().__init__(f"Неизвестная доска: {name!r}")
