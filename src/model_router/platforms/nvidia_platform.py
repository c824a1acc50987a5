# platforms/nvidia_platform.py
from .openai_compatible_platform import OpenAICompatiblePlatform


class NvidiaPlatform(OpenAICompatiblePlatform):
    id = "nvidia"
    name = "NVIDIA NIM"
    api_key_env = "NVIDIA_API_KEY"
    base_url = "https://integrate.api.nvidia.com/v1"
