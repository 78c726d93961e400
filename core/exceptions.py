"""存储格式异常"""
from typing import Optional


class StoreError(Exception):
    """Base exception for credit store format failures"""

    pass


class MissingSectionError(StoreError):
    """A section marker is absent or the sections are out of order"""

    def __init__(self, missing: list, message: Optional[str] = None):
        self.missing = list(missing)
        super().__init__(
            message or f"Файл повреждён: отсутствуют секции {', '.join(self.missing)}"
        )


class MalformedValueError(StoreError):
    """A date or amount on a well-shaped line cannot be parsed"""

    def __init__(self, line_number: int, line: str, reason: str):
        self.line_number = line_number
        self.line = line
        self.reason = reason
        super().__init__(f"line {line_number}: {reason}: {line!r}")


class StoreEncodingError(StoreError):
    """The store file is not valid UTF-8 text"""

    def __init__(self, filepath, reason: str):
        self.filepath = filepath
        super().__init__(f"{filepath}: not a UTF-8 text file ({reason})")
