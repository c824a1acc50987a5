# platforms/openrouter_platform.py
from .openai_compatible_platform import OpenAICompatiblePlatform


class OpenRouterPlatform(OpenAICompatiblePlatform):
    id = "openrouter"
    name = "OpenRouter"
    api_key_env = "OPENROUTER_API_KEY"
    base_url = "https://openrouter.ai/api/v1"

    def __init__(self, api_key: str = None, pricing=None, client=None,
                 referer: str = "https://localhost", title: str = "Model Router"):
        super().__init__(api_key=api_key, pricing=pricing, client=client)
        # OpenRouter attributes traffic to the calling app through these
        self.default_headers = {"HTTP-Referer": referer, "X-Title": title}
