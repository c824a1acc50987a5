from dataclasses import dataclass


@dataclass(frozen=True)
class ModelTarget:
    """Where a model id is dispatched: provider id plus the upstream model name."""
    provider: str
    model: str

    def __str__(self) -> str:
        return f"{self.provider}/{self.model}"
