"""
utils - Логирование и обработка ошибок.
"""

from .logging import EngineLogger, get_logger, setup_file_logging
from .error_handling import (
    EngineError, IllegalMoveError, OffBoardError,
    MalformedLayoutError, UnknownLayoutError
)

__all__ = [
    'EngineLogger', 'get_logger', 'setup_file_logging',
    'EngineError', 'IllegalMoveError', 'OffBoardError',
    'MalformedLayoutError', 'UnknownLayoutError',
]
