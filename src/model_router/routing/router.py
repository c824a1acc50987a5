"""Model router: select a model, then walk the fallback chain until one answers."""

from typing import Iterator, List, Optional

from model_router.core.errors import AllModelsFailedError, AttemptFailure
from model_router.core.models.model_target import ModelTarget
from model_router.core.models.registry import ModelCatalog
from model_router.core.pricing.cost_breakdown import CostBreakdown
from model_router.core.pricing.pricing_table import PricingTable
from model_router.core.pricing.token_estimator import DEFAULT_ENCODING, count_message_tokens
from model_router.core.pricing.token_usage import TokenUsage
from model_router.core.schema import ModelRequest, ModelResponse
from model_router.logging import get_logger
from model_router.platforms.platform_registry import PlatformRegistry

from .model_selector import select_model
from .router_config import RouterConfig


class ModelRouter:
    """
    Routes a ModelRequest to one provider, falling back through a fixed chain.

    Each router owns its configuration; build one per application context
    (see ``core.bootstrap.build_router``) and pass it where it is needed.
    """

    def __init__(
        self,
        platforms: PlatformRegistry,
        catalog: Optional[ModelCatalog] = None,
        config: Optional[RouterConfig] = None,
        pricing: Optional[PricingTable] = None,
    ):
        self.platforms = platforms
        self.catalog = catalog if catalog is not None else ModelCatalog(provider_ids=platforms.ids())
        self._config = config if config is not None else RouterConfig()
        self.pricing = pricing if pricing is not None else PricingTable.from_models(self.catalog.list())

    def get_config(self) -> RouterConfig:
        return self._config.with_changes()

    def update_config(self, **changes) -> RouterConfig:
        """Replace config fields; ``default_model_by_task`` may be partial."""
        self._config = self._config.with_changes(**changes)
        get_logger().info("Router configuration updated", **{k: v for k, v in self._config.to_dict().items() if k in changes})
        return self.get_config()

    def select_model(self, request: ModelRequest) -> str:
        return select_model(request, self._config)

    def attempt_order(self, request: ModelRequest) -> List[ModelTarget]:
        """Selected model first, then the fallback chain without repeats."""
        order: List[ModelTarget] = []
        for model_id in [self.select_model(request), *self._config.fallback_chain]:
            target = self.catalog.resolve(model_id)
            if target not in order:
                order.append(target)
        return order

    def route(self, request: ModelRequest) -> ModelResponse:
        """
        Send the request to the first model that answers.

        Raises:
            AllModelsFailedError: every candidate failed; ``failures`` holds
                each attempt's model, provider and exception in order.
        """
        logger = get_logger()
        messages = request.chat_messages()
        options = request.options()
        failures: List[AttemptFailure] = []

        for target in self.attempt_order(request):
            attempt_log = logger.bind(model=target.model, provider=target.provider)
            attempt_log.debug("Attempting model")
            try:
                platform = self.platforms.get(target.provider)
                response = platform.call_api(target.model, messages, **options)
            except Exception as e:
                attempt_log.warning("Attempt failed, trying fallback", error=e)
                failures.append(AttemptFailure(model=target.model, provider=target.provider, cause=e))
                continue

            logger.info(
                "Routed request",
                model=response.model,
                provider=response.provider,
                tokens=response.tokens.total,
                cost=str(response.cost),
                latency_ms=response.latency_ms,
            )
            return response

        logger.error(f"All {len(failures)} models failed")
        raise AllModelsFailedError(failures)

    def stream(self, request: ModelRequest) -> Iterator[str]:
        """
        Stream text deltas from the first model that starts answering.

        Falls back only until the first chunk arrives; later errors propagate.
        A stream that ends without any chunk is an empty answer, as an empty
        ``content`` is for ``route``, and is not retried elsewhere.
        """
        logger = get_logger()
        messages = request.chat_messages()
        options = request.options()
        failures: List[AttemptFailure] = []

        for target in self.attempt_order(request):
            attempt_log = logger.bind(model=target.model, provider=target.provider)
            attempt_log.debug("Attempting streamed model")
            try:
                platform = self.platforms.get(target.provider)
                chunks = platform.stream_api(target.model, messages, **options)
                first = next(chunks, None)
            except Exception as e:
                attempt_log.warning("Attempt failed, trying fallback", error=e)
                failures.append(AttemptFailure(model=target.model, provider=target.provider, cause=e))
                continue

            if first is not None:
                yield first
                yield from chunks
            return

        logger.error(f"All {len(failures)} models failed")
        raise AllModelsFailedError(failures)

    def estimate_cost(self, request: ModelRequest) -> CostBreakdown:
        """
        Pre-flight cost estimate for the first candidate: prompt tokens as
        input and ``max_tokens`` as the output ceiling.
        """
        target = self.attempt_order(request)[0]
        spec = self.catalog.find(target.model)
        encoding = spec.encoding if spec else DEFAULT_ENCODING
        usage = TokenUsage(
            input=count_message_tokens(request.chat_messages(), encoding),
            output=request.options()["max_tokens"],
        )
        return self.pricing.cost(target.model, usage, provider=target.provider)
