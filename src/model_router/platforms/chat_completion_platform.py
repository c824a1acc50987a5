# platforms/chat_completion_platform.py
import os
import time
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Iterable, Iterator, List, Optional

from model_router.core.errors import MissingCredentialsError
from model_router.core.pricing.pricing_table import PricingTable
from model_router.core.pricing.token_usage import TokenUsage
from model_router.core.schema import ChatMessage, ModelResponse


@dataclass
class PlatformReply:
    """Provider response reduced to the fields every platform can report."""
    content: str
    usage: TokenUsage
    model: Optional[str] = None
    reasoning: Optional[str] = None
    raw: Optional[dict] = field(default=None, repr=False)


def normalize_messages(messages: Iterable) -> List[ChatMessage]:
    return [
        m if isinstance(m, ChatMessage) else ChatMessage(role=m["role"], content=m["content"])
        for m in messages
    ]


def extract_error_message(body) -> Optional[str]:
    """Pull the provider's own message out of an error body, if it has one."""
    if isinstance(body, str):
        return body.strip() or None
    if not isinstance(body, dict):
        return None
    error = body.get("error")
    if isinstance(error, dict) and error.get("message"):
        return str(error["message"])
    if isinstance(error, str) and error:
        return error
    if body.get("message"):
        return str(body["message"])
    return None


class ChatCompletionPlatform(ABC):
    """
    Abstract base class for chat-completion style APIs.

    Subclasses implement the provider-specific request and response shapes in
    ``_send``/``_stream``; this class handles credentials, latency and cost.
    """

    id: str
    name: str
    api_key_env: str

    def __init__(self, api_key: Optional[str] = None, pricing: Optional[PricingTable] = None):
        self._api_key = api_key
        self.pricing = pricing if pricing is not None else PricingTable()
        self._credentials_valid = None

    @property
    def api_key(self) -> Optional[str]:
        if self._api_key:
            return self._api_key
        return os.environ.get(self.api_key_env) or None

    def has_credentials(self) -> bool:
        return bool(self.api_key)

    def require_api_key(self) -> str:
        api_key = self.api_key
        if not api_key:
            raise MissingCredentialsError(self.id, self.api_key_env)
        return api_key

    def call_api(self, model: str, messages: Iterable, **options) -> ModelResponse:
        """
        Sends messages to the platform and returns a normalized response.
        messages: ChatMessage objects or dicts, e.g. [{"role": "user", "content": "..."}]
        options: temperature, max_tokens, top_p
        """
        api_key = self.require_api_key()
        started = time.perf_counter()
        reply = self._send(api_key, model, normalize_messages(messages), options)
        latency_ms = int(round((time.perf_counter() - started) * 1000))

        return ModelResponse(
            content=reply.content,
            model=reply.model or model,
            provider=self.id,
            tokens=reply.usage,
            cost=self.pricing.cost(model, reply.usage, provider=self.id),
            latency_ms=latency_ms,
            reasoning=reply.reasoning,
            raw=reply.raw,
        )

    def stream_api(self, model: str, messages: Iterable, **options) -> Iterator[str]:
        """Yield text deltas as the provider produces them."""
        api_key = self.require_api_key()
        yield from self._stream(api_key, model, normalize_messages(messages), options)

    @abstractmethod
    def _send(self, api_key: str, model: str, messages: List[ChatMessage], options: dict) -> PlatformReply:
        pass

    @abstractmethod
    def _stream(self, api_key: str, model: str, messages: List[ChatMessage], options: dict) -> Iterator[str]:
        pass

    @abstractmethod
    def validate_credentials(self) -> bool:
        """
        Verify that API keys or auth are set correctly.
        """
        pass

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(id='{self.id}')"
