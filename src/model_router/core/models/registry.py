from typing import Dict, Iterable, List, Optional

from model_router.core.models.model_target import ModelTarget
from model_router.core.models.modelspec import ModelSpec

OPENROUTER = "openrouter"

# Bare model names are matched against these prefixes when the catalogue has no entry
NAME_PREFIXES = [
    ("claude", "anthropic"),
    ("grok", "xai"),
    ("deepseek", "deepseek"),
    ("gemini", "gemini"),
    ("gpt-", "openai"),
    ("o1", "openai"),
    ("o3", "openai"),
    ("sonar", "perplexity"),
]


class ModelCatalog:
    """Known models plus the rules that map any model id to a provider."""

    def __init__(self, models: Optional[Iterable[ModelSpec]] = None, provider_ids: Optional[Iterable[str]] = None):
        self._models: Dict[str, ModelSpec] = {}
        self._provider_ids = set(provider_ids or [])
        for model in models or []:
            self.register(model)

    def register(self, model: ModelSpec):
        self._models[model.id] = model

    def register_provider(self, provider_id: str):
        self._provider_ids.add(provider_id)

    def get(self, model_id: str) -> ModelSpec:
        return self._models[model_id]

    def find(self, model_id: str) -> Optional[ModelSpec]:
        return self._models.get(model_id)

    def list(self, platform_id: Optional[str] = None) -> List[ModelSpec]:
        return [
            m for m in self._models.values()
            if platform_id is None or m.platform_id == platform_id
        ]

    def resolve(self, model_id: str) -> ModelTarget:
        """Map a model id to the provider that serves it.

        A registered provider prefix always wins: ``anthropic/claude-3-opus``
        goes to anthropic as ``claude-3-opus``. Catalogue entries are sent
        verbatim, and ``meta-llama/llama-3.1-70b-instruct`` has no provider
        prefix, so it is an OpenRouter model sent verbatim.
        """
        model_id = model_id.strip()
        prefix, sep, rest = model_id.partition("/")
        if sep and prefix in self._provider_ids and rest:
            return ModelTarget(prefix, rest)

        spec = self._models.get(model_id)
        if spec is not None:
            return ModelTarget(spec.platform_id, model_id)
        if sep:
            return ModelTarget(OPENROUTER, model_id)

        lowered = model_id.lower()
        for name_prefix, provider in NAME_PREFIXES:
            if lowered.startswith(name_prefix):
                return ModelTarget(provider, model_id)
        return ModelTarget(OPENROUTER, model_id)
