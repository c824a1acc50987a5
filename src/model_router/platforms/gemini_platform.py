# platforms/gemini_platform.py
from contextlib import contextmanager
from typing import Iterator, List

from google import genai
from google.genai import errors as genai_errors
from google.genai import types

from model_router.core.errors import ProviderError
from model_router.core.pricing.token_usage import TokenUsage
from model_router.core.schema import ChatMessage

from .chat_completion_platform import ChatCompletionPlatform, PlatformReply


class GeminiPlatform(ChatCompletionPlatform):
    id = "gemini"
    name = "Gemini"
    api_key_env = "GEMINI_API_KEY"

    def __init__(self, api_key: str = None, pricing=None, client=None):
        super().__init__(api_key=api_key, pricing=pricing)
        self._client = client

    @property
    def client(self):
        if self._client is None and self.api_key:
            self._client = genai.Client(api_key=self.api_key)
        return self._client

    @contextmanager
    def _provider_errors(self):
        try:
            yield
        except genai_errors.APIError as e:
            raise ProviderError(self.id, e.message or e.status or str(e), e.code) from e

    def _request(self, messages: List[ChatMessage], options: dict):
        system_parts = [m.content for m in messages if m.role == "system"]
        contents = [
            {"role": "model" if m.role == "assistant" else "user", "parts": [{"text": m.content}]}
            for m in messages if m.role != "system"
        ]
        config = types.GenerateContentConfig(
            system_instruction="\n\n".join(system_parts) if system_parts else None,
            temperature=options.get("temperature"),
            max_output_tokens=options.get("max_tokens"),
            top_p=options.get("top_p"),
        )
        return contents, config

    def _send(self, api_key: str, model: str, messages: List[ChatMessage], options: dict) -> PlatformReply:
        contents, config = self._request(messages, options)
        with self._provider_errors():
            response = self.client.models.generate_content(model=model, contents=contents, config=config)

        meta = response.usage_metadata
        return PlatformReply(
            content=response.text or "",
            usage=TokenUsage(
                input=(meta.prompt_token_count or 0) if meta else 0,
                output=(meta.candidates_token_count or 0) if meta else 0,
            ),
            model=getattr(response, "model_version", None),
        )

    def _stream(self, api_key: str, model: str, messages: List[ChatMessage], options: dict) -> Iterator[str]:
        contents, config = self._request(messages, options)
        with self._provider_errors():
            for chunk in self.client.models.generate_content_stream(model=model, contents=contents, config=config):
                if chunk.text:
                    yield chunk.text

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
