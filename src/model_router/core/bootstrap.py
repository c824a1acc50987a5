from typing import Optional

from model_router.configuration.config_manager import ConfigManager
from model_router.core.models.model_loader import load_models_from_yaml
from model_router.core.models.registry import ModelCatalog
from model_router.core.pricing.pricing_table import PricingTable
from model_router.platforms.anthropic_platform import AnthropicPlatform
from model_router.platforms.deepseek_platform import DeepSeekPlatform
from model_router.platforms.gemini_platform import GeminiPlatform
from model_router.platforms.nvidia_platform import NvidiaPlatform
from model_router.platforms.openai_platform import OpenAIPlatform
from model_router.platforms.openrouter_platform import OpenRouterPlatform
from model_router.platforms.perplexity_platform import PerplexityPlatform
from model_router.platforms.platform_registry import PlatformRegistry
from model_router.platforms.xai_platform import XAIPlatform
from model_router.routing.router import ModelRouter
from model_router.routing.router_config import RouterConfig


def bootstrap_platform_registry(pricing: PricingTable) -> PlatformRegistry:
    registry = PlatformRegistry()
    registry.register(AnthropicPlatform(pricing=pricing))
    registry.register(DeepSeekPlatform(pricing=pricing))
    registry.register(XAIPlatform(pricing=pricing))
    registry.register(OpenRouterPlatform(pricing=pricing))
    registry.register(OpenAIPlatform(pricing=pricing))
    registry.register(NvidiaPlatform(pricing=pricing))
    registry.register(GeminiPlatform(pricing=pricing))
    registry.register(PerplexityPlatform(pricing=pricing))
    return registry


def bootstrap_model_catalog(models_path=None) -> ModelCatalog:
    return ModelCatalog(models=load_models_from_yaml(models_path))


def build_router(config: Optional[RouterConfig] = None, config_path=None, models_path=None) -> ModelRouter:
    """Wire catalogue, pricing, platforms and configuration into one router."""
    catalog = bootstrap_model_catalog(models_path)
    pricing = PricingTable.from_models(catalog.list())
    platforms = bootstrap_platform_registry(pricing)
    for platform_id in platforms.ids():
        catalog.register_provider(platform_id)

    if config is None:
        config = ConfigManager(config_path).get_router_config()

    return ModelRouter(platforms=platforms, catalog=catalog, config=config, pricing=pricing)
