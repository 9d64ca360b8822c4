# deptree/core/errors.py
from typing import Optional


class DepTreeError(Exception):
    """Базовое исключение пакета. line - номер строки входного файла (1-based), если известен."""

    def __init__(self, message: str, line: Optional[int] = None):
        self.line = line
        if line is not None:
            message = f"line {line}: {message}"
        super().__init__(message)


class InvalidSchema(DepTreeError):
    """Ошибка конфигурации: дублирующиеся/отрицательные колонки, нет FORM."""


class StreamReadError(DepTreeError):
    """Сбой чтения потока посреди батча. Поток к этому моменту уже закрыт."""


class BatchError(DepTreeError):
    """Ошибки данных одного предложения. Прерывают только текущий батч."""


class MissingRequiredField(BatchError):
    pass


class DuplicateNodeId(BatchError):
    pass


class UnresolvedHeadReference(BatchError):
    pass


class MalformedArcToken(BatchError):
    pass


class MalformedInteger(BatchError):
    pass
