class InvalidRequestError(ValueError):
    """Raised when an analysis request fails validation before any model call."""

    def __init__(self, code: str, message: str) -> None:
        super().__init__(message)
        self.code = code
        self.message = message


class ModelProviderError(RuntimeError):
    """Raised when the underlying LLM provider fails or returns nothing usable"""


class ModelConfigurationError(RuntimeError):
    """Raised when the model client cannot be built from the current settings"""
