"""Loader for model definitions from YAML configuration."""

from pathlib import Path
from typing import List, Optional

import yaml

from .modelspec import ModelSpec


def get_models_config_path() -> Path:
    """Path of the models.yaml bundled with the package."""
    return Path(__file__).parent.parent.parent / "data" / "models.yaml"


def load_models_from_yaml(config_path: Optional[Path] = None) -> List[ModelSpec]:
    """Load all model definitions from models.yaml."""
    config_path = Path(config_path) if config_path else get_models_config_path()

    if not config_path.exists():
        raise FileNotFoundError(f"Models config not found: {config_path}")

    with open(config_path, "r", encoding="utf-8") as f:
        data = yaml.safe_load(f) or {}

    models = []
    for index, entry in enumerate(data.get("models", [])):
        missing = [key for key in ("id", "platform_id") if not entry.get(key)]
        if missing:
            raise ValueError(f"{config_path}: model entry {index} is missing {', '.join(missing)}")

        model = ModelSpec(
            id=entry["id"],
            platform_id=entry["platform_id"],
            quality_tier=entry.get("quality_tier", "medium"),
            name=entry.get("name"),
            encoding=entry.get("encoding", "cl100k_base"),
            input_token_cost_per_1m=entry.get("input_token_cost_per_1m"),
            output_token_cost_per_1m=entry.get("output_token_cost_per_1m"),
            context_tokens=entry.get("context_tokens"),
            max_output_tokens=entry.get("max_output_tokens"),
            supports_streaming=entry.get("supports_streaming", True),
            supports_vision=entry.get("supports_vision", False),
            typical_latency_ms=entry.get("typical_latency_ms"),
            notes=entry.get("notes"),
        )
        models.append(model)

    return models
