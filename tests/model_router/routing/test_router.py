#!/usr/bin/env python3
"""
Tests for ModelRouter attempt order, fallback and failure reporting.
Platforms are replaced by scripted fakes; no provider is contacted.
"""
import pytest

from model_router.core.errors import AllModelsFailedError, MissingCredentialsError, ProviderError, UnknownProviderError
from model_router.core.models.model_target import ModelTarget
from model_router.core.models.modelspec import ModelSpec
from model_router.core.models.registry import ModelCatalog
from model_router.core.pricing.token_usage import TokenUsage
from model_router.core.schema import ModelRequest, Task
from model_router.logging import LogLevel
from model_router.platforms.chat_completion_platform import ChatCompletionPlatform, PlatformReply
from model_router.platforms.platform_registry import PlatformRegistry
from model_router.routing.router import ModelRouter
from model_router.routing.router_config import RouterConfig, RoutingStrategy


class FakePlatform(ChatCompletionPlatform):
    """Platform whose behaviour per model is scripted: a string answers, an exception fails."""

    api_key_env = "FAKE_API_KEY"

    def __init__(self, platform_id, script=None, api_key="test-key"):
        super().__init__(api_key=api_key)
        self.id = platform_id
        self.name = platform_id
        self.script = script or {}
        self.calls = []

    def _outcome(self, model):
        self.calls.append(model)
        outcome = self.script.get(model, f"{self.id}:{model}")
        if isinstance(outcome, Exception):
            raise outcome
        return outcome

    def _send(self, api_key, model, messages, options):
        content = self._outcome(model)
        return PlatformReply(content=content, usage=TokenUsage(input=12, output=8), model=model)

    def _stream(self, api_key, model, messages, options):
        content = self._outcome(model)
        for word in content.split():
            yield word

    def validate_credentials(self):
        return True


def make_router(platforms, fallback_chain, models=None, **config):
    registry = PlatformRegistry()
    for platform in platforms:
        registry.register(platform)
    catalog = ModelCatalog(models=models or [], provider_ids=registry.ids())
    router_config = RouterConfig(
        default_model_by_task={
            "chat": "anthropic/chat-model",
            "code": "deepseek/code-model",
            "reasoning": "deepseek/reasoning-model",
            "vision": "gemini/vision-model",
            "rag": "deepseek/code-model",
        },
        fallback_chain=fallback_chain,
        **config
    )
    return ModelRouter(platforms=registry, catalog=catalog, config=router_config)


def test_explicit_model_is_attempted_first():
    anthropic = FakePlatform("anthropic")
    deepseek = FakePlatform("deepseek")
    router = make_router([anthropic, deepseek], ["deepseek/code-model"])

    request = ModelRequest(prompt="hi", model="anthropic/claude-3-opus")
    order = router.attempt_order(request)

    assert order[0] == ModelTarget("anthropic", "claude-3-opus")
    response = router.route(request)
    assert response.model == "claude-3-opus"
    assert response.provider == "anthropic"
    assert anthropic.calls == ["claude-3-opus"]
    assert deepseek.calls == []


def test_task_code_routes_to_code_default():
    deepseek = FakePlatform("deepseek")
    router = make_router([FakePlatform("anthropic"), deepseek], [])

    response = router.route(ModelRequest(prompt="hello", task=Task.CODE))

    assert router.select_model(ModelRequest(prompt="hello", task=Task.CODE)) == "deepseek/code-model"
    assert deepseek.calls == ["code-model"]
    assert response.content == "deepseek:code-model"


def test_python_snippet_routes_to_code_default():
    deepseek = FakePlatform("deepseek")
    router = make_router([FakePlatform("anthropic"), deepseek], [])

    request = ModelRequest(prompt="def add(a,b): return a+b")

    assert router.select_model(request) == router.get_config().default_model_by_task[Task.CODE]
    router.route(request)
    assert deepseek.calls == ["code-model"]


def test_third_candidate_result_is_returned_unmodified():
    anthropic = FakePlatform("anthropic", {"first": ProviderError("anthropic", "overloaded", 529)})
    deepseek = FakePlatform("deepseek", {"second": ProviderError("deepseek", "rate limited", 429)})
    xai = FakePlatform("xai")
    router = make_router([anthropic, deepseek, xai], ["deepseek/second", "xai/third"])

    expected = xai.call_api("third", [{"role": "user", "content": "hi"}])
    xai.calls.clear()

    response = router.route(ModelRequest(prompt="hi", model="anthropic/first"))

    assert response.content == expected.content
    assert response.model == "third"
    assert response.tokens == expected.tokens
    assert response.cost == expected.cost
    assert anthropic.calls == ["first"]
    assert deepseek.calls == ["second"]
    assert xai.calls == ["third"]


def test_all_candidates_failing_raises_with_every_cause():
    anthropic = FakePlatform("anthropic", {"a": ProviderError("anthropic", "invalid x-api-key", 401)})
    deepseek = FakePlatform("deepseek", {"b": ProviderError("deepseek", "Insufficient Balance", 402)})
    router = make_router([anthropic, deepseek], ["deepseek/b"])

    with pytest.raises(AllModelsFailedError) as excinfo:
        router.route(ModelRequest(prompt="hi", model="anthropic/a"))

    failures = excinfo.value.failures
    assert [(f.model, f.provider) for f in failures] == [("a", "anthropic"), ("b", "deepseek")]
    assert failures[0].cause.status_code == 401
    assert "Insufficient Balance" in str(excinfo.value)


def test_failed_model_is_not_retried_when_absent_from_chain():
    anthropic = FakePlatform("anthropic", {"claude-3-opus": ProviderError("anthropic", "not_found_error", 404)})
    deepseek = FakePlatform("deepseek")
    router = make_router([anthropic, deepseek], ["deepseek/code-model"])

    response = router.route(ModelRequest(
        prompt="",
        model="anthropic/claude-3-opus",
        messages=[{"role": "user", "content": "Summarize this"}],
    ))

    assert anthropic.calls == ["claude-3-opus"]
    assert deepseek.calls == ["code-model"]
    assert response.provider == "deepseek"


def test_fallback_chain_skips_already_tried_model():
    anthropic = FakePlatform("anthropic", {"claude-x": ProviderError("anthropic", "boom")})
    deepseek = FakePlatform("deepseek")
    router = make_router([anthropic, deepseek], ["claude-x", "anthropic/claude-x", "deepseek/code-model", "deepseek/code-model"])

    order = router.attempt_order(ModelRequest(prompt="hi", model="anthropic/claude-x"))

    assert order == [ModelTarget("anthropic", "claude-x"), ModelTarget("deepseek", "code-model")]
    router.route(ModelRequest(prompt="hi", model="anthropic/claude-x"))
    assert anthropic.calls == ["claude-x"]


def test_missing_credentials_advance_to_next_model():
    anthropic = FakePlatform("anthropic", api_key=None)
    deepseek = FakePlatform("deepseek")
    router = make_router([anthropic, deepseek], ["deepseek/code-model"])

    response = router.route(ModelRequest(prompt="hi", model="anthropic/chat-model"))

    assert anthropic.calls == []
    assert response.provider == "deepseek"


def test_missing_credentials_are_reported_on_exhaustion():
    router = make_router([FakePlatform("anthropic", api_key=None)], [])

    with pytest.raises(AllModelsFailedError) as excinfo:
        router.route(ModelRequest(prompt="hi", model="anthropic/chat-model"))

    cause = excinfo.value.failures[0].cause
    assert isinstance(cause, MissingCredentialsError)
    assert cause.env_var == "FAKE_API_KEY"


def test_unregistered_provider_counts_as_failed_attempt():
    deepseek = FakePlatform("deepseek")
    router = make_router([deepseek], ["deepseek/code-model"])

    response = router.route(ModelRequest(prompt="hi", model="meta-llama/llama-3.1-70b-instruct"))

    assert response.provider == "deepseek"


def test_unregistered_provider_failure_is_recorded():
    router = make_router([FakePlatform("deepseek")], [])

    with pytest.raises(AllModelsFailedError) as excinfo:
        router.route(ModelRequest(prompt="hi", model="meta-llama/llama-3.1-70b-instruct"))

    failure = excinfo.value.failures[0]
    assert failure.provider == "openrouter"
    assert isinstance(failure.cause, UnknownProviderError)


def test_each_failure_is_logged(log_records):
    anthropic = FakePlatform("anthropic", {"a": ProviderError("anthropic", "overloaded")})
    router = make_router([anthropic, FakePlatform("deepseek")], ["deepseek/code-model"])

    router.route(ModelRequest(prompt="hi", model="anthropic/a"))

    warnings = [r for r in log_records if r[0] == LogLevel.WARNING]
    assert len(warnings) == 1
    assert warnings[0][2]["provider"] == "anthropic"


def test_token_total_is_sum_of_input_and_output():
    router = make_router([FakePlatform("anthropic")], [])

    response = router.route(ModelRequest(prompt="hi", model="anthropic/chat-model"))

    assert response.tokens.total == response.tokens.input + response.tokens.output == 20
    assert response.cost.total == pytest.approx(response.cost.input + response.cost.output)


def test_catalogue_pricing_is_applied():
    spec = ModelSpec(id="priced-model", platform_id="anthropic",
                     input_token_cost_per_1m=3.0, output_token_cost_per_1m=15.0)
    anthropic = FakePlatform("anthropic")
    router = make_router([anthropic], [], models=[spec])
    anthropic.pricing = router.pricing

    response = router.route(ModelRequest(prompt="hi", model="priced-model"))

    assert response.cost.input == pytest.approx(12 * 3.0 / 1_000_000)
    assert response.cost.output == pytest.approx(8 * 15.0 / 1_000_000)


def test_stream_falls_back_before_first_chunk():
    anthropic = FakePlatform("anthropic", {"a": ProviderError("anthropic", "overloaded")})
    deepseek = FakePlatform("deepseek", {"code-model": "hello streaming world"})
    router = make_router([anthropic, deepseek], ["deepseek/code-model"])

    chunks = list(router.stream(ModelRequest(prompt="hi", model="anthropic/a")))

    assert chunks == ["hello", "streaming", "world"]
    assert anthropic.calls == ["a"]


def test_stream_raises_when_every_model_fails():
    anthropic = FakePlatform("anthropic", {"a": ProviderError("anthropic", "overloaded")})
    router = make_router([anthropic], [])

    with pytest.raises(AllModelsFailedError):
        list(router.stream(ModelRequest(prompt="hi", model="anthropic/a")))


def test_update_config_replaces_fields_and_get_config_is_a_copy():
    router = make_router([FakePlatform("anthropic")], ["anthropic/chat-model"])

    updated = router.update_config(
        fallback_chain=["deepseek/code-model"],
        default_model_by_task={"code": "xai/grok-code-fast-1"},
        routing_strategy="cost",
    )

    assert updated.fallback_chain == ["deepseek/code-model"]
    assert updated.default_model_by_task[Task.CODE] == "xai/grok-code-fast-1"
    assert updated.default_model_by_task[Task.CHAT] == "anthropic/chat-model"
    assert updated.routing_strategy is RoutingStrategy.COST

    snapshot = router.get_config()
    snapshot.fallback_chain.append("mutated")
    assert router.get_config().fallback_chain == ["deepseek/code-model"]


def test_routing_strategy_does_not_change_selection():
    router = make_router([FakePlatform("anthropic")], [], routing_strategy="cost")
    request = ModelRequest(prompt="hello")
    cost_order = router.attempt_order(request)

    router.update_config(routing_strategy="quality")

    assert router.attempt_order(request) == cost_order


def test_estimate_cost_uses_max_tokens_as_output_ceiling():
    spec = ModelSpec(id="priced-model", platform_id="anthropic",
                     input_token_cost_per_1m=1.0, output_token_cost_per_1m=10.0)
    router = make_router([FakePlatform("anthropic")], [], models=[spec])

    estimate = router.estimate_cost(ModelRequest(prompt="Hello there", model="priced-model", max_tokens=1000))

    assert estimate.output == pytest.approx(1000 * 10.0 / 1_000_000)
    assert estimate.input > 0


def test_stream_that_ends_empty_does_not_fall_back():
    anthropic = FakePlatform("anthropic", {"a": ""})
    deepseek = FakePlatform("deepseek")
    router = make_router([anthropic, deepseek], ["deepseek/code-model"])

    chunks = list(router.stream(ModelRequest(prompt="hi", model="anthropic/a")))

    assert chunks == []
    assert anthropic.calls == ["a"]
    assert deepseek.calls == []


def test_provider_prefix_beats_catalogue_entry():
    listed = ModelSpec(id="anthropic/claude-3.5-sonnet", platform_id="openrouter")
    router = make_router([FakePlatform("anthropic"), FakePlatform("openrouter")], [], models=[listed])

    order = router.attempt_order(ModelRequest(prompt="hi", model="anthropic/claude-3.5-sonnet"))

    assert order[0] == ModelTarget("anthropic", "claude-3.5-sonnet")
