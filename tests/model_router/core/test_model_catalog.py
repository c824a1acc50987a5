#!/usr/bin/env python3
"""
Tests for model id resolution and the bundled model catalogue.
"""
import pytest

from model_router.core.models.model_loader import load_models_from_yaml
from model_router.core.models.model_target import ModelTarget
from model_router.core.models.modelspec import ModelSpec
from model_router.core.models.registry import ModelCatalog

PROVIDERS = ["anthropic", "deepseek", "xai", "openrouter", "openai", "nvidia", "gemini", "perplexity"]


@pytest.fixture
def catalog():
    return ModelCatalog(models=load_models_from_yaml(), provider_ids=PROVIDERS)


def test_bundled_catalogue_loads(catalog):
    ids = [m.id for m in catalog.list()]
    assert "claude-3-5-sonnet-20241022" in ids
    assert "deepseek-reasoner" in ids
    assert catalog.get("deepseek-chat").input_token_cost_per_1m == 0.14
    assert {m.platform_id for m in catalog.list("xai")} == {"xai"}


def test_catalogue_entries_resolve_verbatim(catalog):
    assert catalog.resolve("claude-3-5-sonnet-20241022") == ModelTarget("anthropic", "claude-3-5-sonnet-20241022")
    assert catalog.resolve("meta-llama/llama-3.1-70b-instruct") == ModelTarget("openrouter", "meta-llama/llama-3.1-70b-instruct")
    assert catalog.resolve("meta/llama-3.3-70b-instruct") == ModelTarget("nvidia", "meta/llama-3.3-70b-instruct")
    assert catalog.resolve("llama-3.1-sonar-small-128k-online") == ModelTarget("perplexity", "llama-3.1-sonar-small-128k-online")
    assert catalog.resolve("llama-3.1-sonar-large-128k-online").provider == "perplexity"


def test_provider_prefix_is_stripped(catalog):
    assert catalog.resolve("anthropic/claude-3-opus") == ModelTarget("anthropic", "claude-3-opus")
    assert catalog.resolve("xai/grok-2") == ModelTarget("xai", "grok-2")
    assert catalog.resolve("openrouter/mistralai/mistral-large") == ModelTarget("openrouter", "mistralai/mistral-large")


def test_provider_prefix_wins_over_catalogue_entry():
    catalog = ModelCatalog(
        models=[ModelSpec(id="anthropic/claude-3.5-sonnet", platform_id="openrouter")],
        provider_ids=PROVIDERS,
    )

    assert catalog.resolve("anthropic/claude-3.5-sonnet") == ModelTarget("anthropic", "claude-3.5-sonnet")
    assert catalog.resolve("openai/gpt-4o") == ModelTarget("openai", "gpt-4o")
    assert catalog.resolve("perplexity/sonar-pro") == ModelTarget("perplexity", "sonar-pro")


def test_unknown_vendor_prefix_goes_to_openrouter(catalog):
    assert catalog.resolve("mistralai/mistral-large") == ModelTarget("openrouter", "mistralai/mistral-large")


def test_bare_names_are_inferred_by_prefix(catalog):
    assert catalog.resolve("claude-3-opus").provider == "anthropic"
    assert catalog.resolve("grok-3-mini").provider == "xai"
    assert catalog.resolve("deepseek-coder").provider == "deepseek"
    assert catalog.resolve("gemini-2.5-pro").provider == "gemini"
    assert catalog.resolve("gpt-4.1").provider == "openai"
    assert catalog.resolve("sonar-pro").provider == "perplexity"
    assert catalog.resolve("mystery-model") == ModelTarget("openrouter", "mystery-model")


def test_unregistered_prefix_is_not_treated_as_provider():
    catalog = ModelCatalog(provider_ids=["deepseek"])
    assert catalog.resolve("anthropic/claude-3-opus") == ModelTarget("openrouter", "anthropic/claude-3-opus")


def test_load_models_from_custom_yaml(tmp_path):
    path = tmp_path / "models.yaml"
    path.write_text(
        "models:\n"
        "  - id: local-model\n"
        "    platform_id: openai\n"
        "    input_token_cost_per_1m: 0.5\n"
        "    output_token_cost_per_1m: 1.5\n",
        encoding="utf-8",
    )

    models = load_models_from_yaml(path)

    assert models == [ModelSpec(id="local-model", platform_id="openai",
                                input_token_cost_per_1m=0.5, output_token_cost_per_1m=1.5)]


def test_missing_yaml_raises(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_models_from_yaml(tmp_path / "missing.yaml")


def test_entry_without_platform_raises(tmp_path):
    path = tmp_path / "models.yaml"
    path.write_text("models:\n  - id: orphan-model\n", encoding="utf-8")

    with pytest.raises(ValueError, match="platform_id"):
        load_models_from_yaml(path)
