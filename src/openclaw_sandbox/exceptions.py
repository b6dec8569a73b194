from collections.abc import Iterable


class SandboxValidationError(ValueError):
    """A request was rejected before anything was written or spawned."""


class MissingSourceCodeError(SandboxValidationError):
    def __init__(self, message: str = "No code provided"):
        super().__init__(message)


class UnsupportedLanguageError(SandboxValidationError):
    """Raised when a language id does not resolve to a registered strategy.

    Attributes:
        language: The id as the caller supplied it.
        supported: Canonical ids the registry accepts.
    """

    def __init__(self, language: str, supported: Iterable[str]):
        self.language = language
        self.supported = list(supported)
        super().__init__(f"Unsupported language: {language}. Supported: {', '.join(self.supported)}")
