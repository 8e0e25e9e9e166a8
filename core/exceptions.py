from typing import Optional


class PoemGenerationError(Exception):
    """Базовая ошибка генерации стиха."""


class ValidationError(PoemGenerationError):
    """Некорректный ввод пользователя (пустая тема). Внешний вызов не выполняется."""


class UpstreamError(PoemGenerationError):
    """Провайдер модели недоступен, вернул не-2xx или ответ неожиданной формы."""

    def __init__(self, message: str, status_code: Optional[int] = None, details: Optional[str] = None):
        super().__init__(message)
        self.message = message
        self.status_code = status_code
        self.details = details


class UnexpectedError(PoemGenerationError):
    """Любая другая ошибка при обработке запроса."""


class InvalidResponseError(UpstreamError):
    """Ответ провайдера не содержит choices[0].message.content."""

    def __init__(self, status_code: Optional[int] = None):
        super().__init__("invalid response shape", status_code=status_code, details="invalid response shape")
