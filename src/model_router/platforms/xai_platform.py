# platforms/xai_platform.py
from .openai_compatible_platform import OpenAICompatiblePlatform


class XAIPlatform(OpenAICompatiblePlatform):
    id = "xai"
    name = "xAI"
    api_key_env = "XAI_API_KEY"
    base_url = "https://api.x.ai/v1"
