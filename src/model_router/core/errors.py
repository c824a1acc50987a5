"""Exceptions raised by provider platforms and the router."""

from dataclasses import dataclass
from typing import List, Optional


class RouterError(Exception):
    """Base class for every error raised by model_router."""


class ProviderError(RouterError):
    """A provider call failed.

    ``message`` is the provider's own error message when the response body
    could be parsed, otherwise the HTTP status text.
    """

    def __init__(self, provider: str, message: str, status_code: Optional[int] = None):
        self.provider = provider
        self.message = message
        self.status_code = status_code
        prefix = f"{provider}"
        if status_code is not None:
            prefix += f" (HTTP {status_code})"
        super().__init__(f"{prefix}: {message}")


class MissingCredentialsError(ProviderError):
    """No API key is configured for a provider."""

    def __init__(self, provider: str, env_var: str):
        self.env_var = env_var
        super().__init__(provider, f"API key missing, set {env_var}")


class UnknownProviderError(RouterError):
    """A model resolved to a provider that has no registered platform."""

    def __init__(self, provider: str):
        self.provider = provider
        super().__init__(f"No platform registered for provider '{provider}'")


@dataclass
class AttemptFailure:
    """One failed attempt inside a routed call."""
    model: str
    provider: str
    cause: Exception

    def __str__(self) -> str:
        return f"{self.model} ({self.provider}): {self.cause}"


class AllModelsFailedError(RouterError):
    """Every candidate in the attempt order failed."""

    def __init__(self, failures: List[AttemptFailure]):
        self.failures = list(failures)
        details = "; ".join(str(failure) for failure in self.failures) or "no candidates"
        super().__init__(f"All models failed: {details}")
