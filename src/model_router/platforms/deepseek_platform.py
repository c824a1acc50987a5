# platforms/deepseek_platform.py
from .openai_compatible_platform import OpenAICompatiblePlatform


class DeepSeekPlatform(OpenAICompatiblePlatform):
    id = "deepseek"
    name = "DeepSeek"
    api_key_env = "DEEPSEEK_API_KEY"
    base_url = "https://api.deepseek.com/v1"
