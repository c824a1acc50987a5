"""Static per-model pricing.

Unknown models are priced at ``DEFAULT_PRICING`` instead of failing, so a
model missing from the catalogue is reported as cheap rather than unpriced.
"""

from typing import Dict, Iterable, Optional

from model_router.logging import get_logger

from .cost_breakdown import CostBreakdown
from .pricing_entry import PricingEntry
from .token_pricing_policy import TokenPricingPolicy
from .token_usage import TokenUsage

DEFAULT_PRICING = PricingEntry(key="default", input_per_million=1.0, output_per_million=2.0)


class PricingTable:

    def __init__(self, entries: Optional[Iterable[PricingEntry]] = None):
        self._entries: Dict[str, PricingEntry] = {}
        for entry in entries or []:
            self.add(entry)

    @classmethod
    def from_models(cls, models) -> "PricingTable":
        """Build a table from ModelSpec entries that carry both prices."""
        table = cls()
        for model in models:
            if model.input_token_cost_per_1m is None or model.output_token_cost_per_1m is None:
                continue
            table.add(PricingEntry(
                key=model.id,
                input_per_million=model.input_token_cost_per_1m,
                output_per_million=model.output_token_cost_per_1m,
            ))
        return table

    def add(self, entry: PricingEntry) -> None:
        self._entries[entry.key] = entry

    def lookup(self, model_key: str, provider: Optional[str] = None) -> Optional[PricingEntry]:
        entry = self._entries.get(model_key)
        if entry is None and provider:
            entry = self._entries.get(f"{provider}/{model_key}")
        return entry

    def entry_for(self, model_key: str, provider: Optional[str] = None) -> PricingEntry:
        entry = self.lookup(model_key, provider)
        if entry is None:
            get_logger().debug("No pricing entry, using default rate", model=model_key)
            return DEFAULT_PRICING
        return entry

    def cost(self, model_key: str, usage: TokenUsage, provider: Optional[str] = None) -> CostBreakdown:
        entry = self.entry_for(model_key, provider)
        policy = TokenPricingPolicy(
            input_cost_per_1m=entry.input_per_million,
            output_cost_per_1m=entry.output_per_million,
        )
        return policy.estimate_cost(usage)

    def __contains__(self, model_key: str) -> bool:
        return model_key in self._entries

    def __len__(self) -> int:
        return len(self._entries)
