# platforms/anthropic_platform.py
from typing import Iterator, List, Optional

import requests

from model_router.core.errors import ProviderError
from model_router.core.pricing.token_usage import TokenUsage
from model_router.core.schema import DEFAULT_MAX_TOKENS, ChatMessage

from .chat_completion_platform import ChatCompletionPlatform, PlatformReply, extract_error_message
from .sse import iter_sse_events

ANTHROPIC_VERSION = "2023-06-01"


class AnthropicPlatform(ChatCompletionPlatform):
    id = "anthropic"
    name = "Anthropic"
    api_key_env = "ANTHROPIC_API_KEY"
    base_url = "https://api.anthropic.com/v1"

    def __init__(self, api_key: str = None, pricing=None, timeout: Optional[float] = None):
        super().__init__(api_key=api_key, pricing=pricing)
        self.timeout = timeout

    def build_headers(self, api_key: str) -> dict:
        return {
            "x-api-key": api_key,
            "anthropic-version": ANTHROPIC_VERSION,
            "content-type": "application/json",
        }

    def build_payload(self, model: str, messages: List[ChatMessage], options: dict, stream: bool = False) -> dict:
        """
        Anthropic takes system instructions as a top-level field, not as a turn
        in the message list.
        """
        system_parts = [m.content for m in messages if m.role == "system"]
        payload = {
            "model": model,
            "max_tokens": options.get("max_tokens") or DEFAULT_MAX_TOKENS,
            "messages": [m.to_dict() for m in messages if m.role != "system"],
        }
        if system_parts:
            payload["system"] = "\n\n".join(system_parts)
        if options.get("temperature") is not None:
            payload["temperature"] = options["temperature"]
        if options.get("top_p") is not None:
            payload["top_p"] = options["top_p"]
        if stream:
            payload["stream"] = True
        return payload

    def _post(self, api_key: str, payload: dict, stream: bool = False) -> requests.Response:
        try:
            response = requests.post(
                f"{self.base_url}/messages",
                headers=self.build_headers(api_key),
                json=payload,
                stream=stream,
                timeout=self.timeout,
            )
        except requests.RequestException as e:
            raise ProviderError(self.id, str(e)) from e
        try:
            self._raise_for_status(response)
        except ProviderError:
            response.close()
            raise
        return response

    def _raise_for_status(self, response: requests.Response):
        if response.ok:
            return
        try:
            body = response.json()
        except ValueError:
            body = None
        message = extract_error_message(body) or response.reason or f"HTTP {response.status_code}"
        raise ProviderError(self.id, message, response.status_code)

    def _send(self, api_key: str, model: str, messages: List[ChatMessage], options: dict) -> PlatformReply:
        response = self._post(api_key, self.build_payload(model, messages, options))
        data = response.json()

        blocks = data.get("content") or []
        content = "".join(b.get("text", "") for b in blocks if b.get("type") == "text")
        reasoning = "".join(b.get("thinking", "") for b in blocks if b.get("type") == "thinking")

        usage = data.get("usage") or {}
        return PlatformReply(
            content=content,
            usage=TokenUsage(
                input=usage.get("input_tokens") or 0,
                output=usage.get("output_tokens") or 0,
            ),
            model=data.get("model"),
            reasoning=reasoning or None,
            raw=data,
        )

    def _stream(self, api_key: str, model: str, messages: List[ChatMessage], options: dict) -> Iterator[str]:
        response = self._post(api_key, self.build_payload(model, messages, options, stream=True), stream=True)
        with response:
            for event in iter_sse_events(response.iter_lines(decode_unicode=True)):
                event_type = event.get("type")
                if event_type == "content_block_delta":
                    delta = event.get("delta") or {}
                    if delta.get("type") == "text_delta" and delta.get("text"):
                        yield delta["text"]
                elif event_type == "error":
                    raise ProviderError(self.id, extract_error_message(event) or "stream error")
                elif event_type == "message_stop":
                    return

    def validate_credentials(self):
        """Verify API key by listing models."""
        if self._credentials_valid is not None:
            return self._credentials_valid
        if not self.api_key:
            self._credentials_valid = False
            return False
        try:
            response = requests.get(
                f"{self.base_url}/models",
                headers=self.build_headers(self.api_key),
                timeout=self.timeout,
            )
            self._credentials_valid = response.status_code == 200
        except requests.RequestException:
            self._credentials_valid = False
        return self._credentials_valid
