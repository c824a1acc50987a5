from dataclasses import dataclass


@dataclass(frozen=True)
class PricingEntry:
    key: str                     # model id, optionally "provider/model"
    input_per_million: float     # USD per 1M input tokens
    output_per_million: float    # USD per 1M output tokens
