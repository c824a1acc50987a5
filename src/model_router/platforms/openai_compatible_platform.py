# platforms/openai_compatible_platform.py
from contextlib import contextmanager
from typing import Iterator, List, Optional

import openai
from openai import OpenAI

from model_router.core.errors import ProviderError
from model_router.core.pricing.token_usage import TokenUsage
from model_router.core.schema import ChatMessage

from .chat_completion_platform import ChatCompletionPlatform, PlatformReply, extract_error_message


class OpenAICompatiblePlatform(ChatCompletionPlatform):
    """
    Base for providers that speak the OpenAI chat completions API.
    Messages keep their system turns inline and auth is a Bearer token.
    """

    base_url: Optional[str] = None
    default_headers: Optional[dict] = None

    def __init__(self, api_key: str = None, pricing=None, client=None):
        super().__init__(api_key=api_key, pricing=pricing)
        self._client = client

    @property
    def client(self):
        if self._client is None and self.api_key:
            self._client = OpenAI(
                api_key=self.api_key,
                base_url=self.base_url,
                default_headers=self.default_headers,
            )
        return self._client

    @contextmanager
    def _provider_errors(self):
        try:
            yield
        except openai.APIStatusError as e:
            message = extract_error_message(e.body) or e.response.reason_phrase or f"HTTP {e.status_code}"
            raise ProviderError(self.id, message, e.status_code) from e
        except openai.APIError as e:
            raise ProviderError(self.id, e.message) from e

    def _send(self, api_key: str, model: str, messages: List[ChatMessage], options: dict) -> PlatformReply:
        with self._provider_errors():
            response = self.client.chat.completions.create(
                model=model,
                messages=[m.to_dict() for m in messages],
                **options
            )
        return self._parse_response(response)

    def _parse_response(self, response) -> PlatformReply:
        content = ""
        reasoning = None
        if response.choices:
            message = response.choices[0].message
            content = message.content or ""
            # DeepSeek reasoner and xAI reasoning models return their chain of thought here
            reasoning = getattr(message, "reasoning_content", None) or None

        usage = response.usage
        tokens = TokenUsage(
            input=(usage.prompt_tokens or 0) if usage else 0,
            output=(usage.completion_tokens or 0) if usage else 0,
        )
        raw = response.model_dump() if hasattr(response, "model_dump") else None
        return PlatformReply(
            content=content,
            usage=tokens,
            model=getattr(response, "model", None),
            reasoning=reasoning,
            raw=raw,
        )

    def _stream(self, api_key: str, model: str, messages: List[ChatMessage], options: dict) -> Iterator[str]:
        with self._provider_errors():
            stream = self.client.chat.completions.create(
                model=model,
                messages=[m.to_dict() for m in messages],
                stream=True,
                **options
            )
            for chunk in stream:
                if not chunk.choices:
                    continue
                text = getattr(chunk.choices[0].delta, "content", None)
                if text:
                    yield text

    def validate_credentials(self):
        """
        Verify that API key is set correctly by making a simple test call.
        """
        if self._credentials_valid is not None:
            return self._credentials_valid
        if not self.client:
            self._credentials_valid = False
            return False
        try:
            self.client.models.list()
            self._credentials_valid = True
        except Exception:
            self._credentials_valid = False
        return self._credentials_valid
