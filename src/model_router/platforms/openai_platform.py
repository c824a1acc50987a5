# platforms/openai_platform.py
from .openai_compatible_platform import OpenAICompatiblePlatform


class OpenAIPlatform(OpenAICompatiblePlatform):
    id = "openai"
    name = "OpenAI"
    api_key_env = "OPENAI_API_KEY"
