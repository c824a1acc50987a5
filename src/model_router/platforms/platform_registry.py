from typing import Dict, Optional

from model_router.core.errors import UnknownProviderError

from .chat_completion_platform import ChatCompletionPlatform


class PlatformRegistry:

    def __init__(self):
        self._platforms: Dict[str, ChatCompletionPlatform] = {}

    def register(self, platform: ChatCompletionPlatform):
        self._platforms[platform.id] = platform

    def get(self, platform_id: str) -> ChatCompletionPlatform:
        platform = self._platforms.get(platform_id)
        if platform is None:
            raise UnknownProviderError(platform_id)
        return platform

    def find(self, platform_id: str) -> Optional[ChatCompletionPlatform]:
        return self._platforms.get(platform_id)

    def ids(self):
        return list(self._platforms.keys())

    def list(self):
        return self._platforms.values()

    def __contains__(self, platform_id: str) -> bool:
        return platform_id in self._platforms
