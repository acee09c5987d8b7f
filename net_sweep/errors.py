"""
Исключения сканера доступности
"""


class SweepError(Exception):
    """Базовая ошибка сканера"""


class InvalidInputCombination(SweepError):
    """Не выбран ни один источник целей или выбрано несколько сразу"""

    def __init__(self, message: str = "Нужно указать ровно один источник целей: "
                                      "диапазон FROM TO, --file или --pipe"):
        super().__init__(message)


class AddressParseError(SweepError):
    """Граница диапазона не является корректным IPv4-адресом"""

    def __init__(self, value: str, reason: str = ""):
        self.value = value
        self.reason = reason
        message = f"Некорректный IPv4-адрес '{value}'"
        if reason:
            message += f": {reason}"
        super().__init__(message)


class FileReadError(SweepError):
    """Не удалось прочитать файл с целями"""

    def __init__(self, path: str, reason: str = ""):
        self.path = path
        self.reason = reason
        super().__init__(f"Ошибка чтения файла {path}: {reason}")


class StreamReadError(SweepError):
    """Не удалось прочитать строку из стандартного ввода"""

    def __init__(self, reason: str = ""):
        self.reason = reason
        super().__init__(f"Ошибка чтения стандартного ввода: {reason}")


class ProbeExecutionError(SweepError):
    """Проверку цели не удалось запустить или интерпретировать"""

    def __init__(self, target: str, reason: str = ""):
        self.target = target
        self.reason = reason
        super().__init__(f"Ошибка проверки {target}: {reason}")
