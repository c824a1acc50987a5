from .cost_breakdown import CostBreakdown
from .token_usage import TokenUsage


class TokenPricingPolicy:
    """Prices token usage at fixed USD rates per million tokens."""

    def __init__(self, input_cost_per_1m: float, output_cost_per_1m: float):
        self.input_cost_per_1m = input_cost_per_1m
        self.output_cost_per_1m = output_cost_per_1m

    def estimate_cost(self, usage: TokenUsage) -> CostBreakdown:
        return CostBreakdown(
            input=usage.input * self.input_cost_per_1m / 1_000_000,
            output=usage.output * self.output_cost_per_1m / 1_000_000,
        )
