"""Исключения модуля диагностики"""


class InvalidNameError(ValueError):
    """Пустая фамилия или имя при расчете 姓名判断"""

    def __init__(self, field: str):
        self.field = field
        super().__init__(f"{field} must contain at least one character")
