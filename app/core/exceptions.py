# app/core/exceptions.py
from typing import List


class CoordinateValidationError(Exception):
    """
    The request body is missing coordinates or carries unusable ones.
    Mapped to HTTP 400.
    """

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class ConfigurationError(Exception):
    """
    A provider cannot be built from the current settings (e.g. missing API key).
    """


class ProviderError(Exception):
    """
    One provider attempt failed: HTTP error, empty result set, transport
    failure or a payload that does not match the provider's schema.

    Never returned to the caller on its own; the orchestrator records it
    and moves on to the next provider.
    """

    def __init__(self, provider: str, message: str) -> None:
        super().__init__(f"{provider}: {message}")
        self.provider = provider
        self.message = message

    def detail(self) -> str:
        return f"{self.provider}: {self.message}"


class AllProvidersFailedError(Exception):
    """
    Every applicable provider was tried and none produced a route.
    Mapped to HTTP 503.
    """

    ERROR_CODE = "ALL_APIS_FAILED"
    MESSAGE = "No se pudo calcular la ruta con ningún proveedor"

    def __init__(self, errors: List[ProviderError]) -> None:
        super().__init__(self.MESSAGE)
        self.errors = list(errors)

    @property
    def details(self) -> List[str]:
        return [error.detail() for error in self.errors]
