from dataclasses import dataclass
from typing import Optional, Literal


@dataclass(frozen=True)
class ModelSpec:
    id: str                     # e.g. "deepseek-chat" or "openai/gpt-4o"
    platform_id: str            # e.g. "deepseek", "openrouter"
    quality_tier: Literal["low", "medium", "high"] = "medium"
    name: Optional[str] = None
    encoding: str = "cl100k_base"

    # Cost (USD per 1M tokens)
    input_token_cost_per_1m: Optional[float] = None
    output_token_cost_per_1m: Optional[float] = None

    # Capabilities
    context_tokens: Optional[int] = None
    max_output_tokens: Optional[int] = None
    supports_streaming: bool = True
    supports_vision: bool = False

    # Operational characteristics
    typical_latency_ms: Optional[int] = None
    notes: Optional[str] = None
