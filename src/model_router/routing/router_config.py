from dataclasses import dataclass, field, replace
from enum import Enum
from typing import Dict, List

from model_router.core.schema import Task


class RoutingStrategy(str, Enum):
    # Stored for callers that inspect the config; selection does not consult it
    COST = "cost"
    SPEED = "speed"
    QUALITY = "quality"
    AUTO = "auto"


DEFAULT_MODEL_BY_TASK = {
    Task.CHAT: "claude-3-5-sonnet-20241022",
    Task.CODE: "deepseek-chat",
    Task.REASONING: "deepseek-reasoner",
    Task.VISION: "gemini-1.5-pro",
    Task.RAG: "deepseek-chat",
}

DEFAULT_FALLBACK_CHAIN = [
    "claude-3-5-sonnet-20241022",
    "deepseek-chat",
    "gemini-1.5-flash",
]


@dataclass(frozen=True)
class RouterConfig:
    default_model_by_task: Dict[Task, str] = field(default_factory=lambda: dict(DEFAULT_MODEL_BY_TASK))
    fallback_chain: List[str] = field(default_factory=lambda: list(DEFAULT_FALLBACK_CHAIN))
    routing_strategy: RoutingStrategy = RoutingStrategy.AUTO

    def __post_init__(self):
        mapping = {Task(task): model for task, model in self.default_model_by_task.items()}
        missing = [task.value for task in Task if task not in mapping]
        if missing:
            raise ValueError(f"No default model configured for tasks: {', '.join(missing)}")
        object.__setattr__(self, "default_model_by_task", mapping)
        object.__setattr__(self, "fallback_chain", list(self.fallback_chain))
        object.__setattr__(self, "routing_strategy", RoutingStrategy(self.routing_strategy))

    def default_model(self, task: Task) -> str:
        return self.default_model_by_task[Task(task)]

    def with_changes(self, **changes) -> "RouterConfig":
        if "default_model_by_task" in changes:
            # Partial task mappings update the existing one
            merged = dict(self.default_model_by_task)
            merged.update({Task(t): m for t, m in changes["default_model_by_task"].items()})
            changes["default_model_by_task"] = merged
        return replace(self, **changes)

    def to_dict(self) -> dict:
        return {
            "default_model_by_task": {task.value: model for task, model in self.default_model_by_task.items()},
            "fallback_chain": list(self.fallback_chain),
            "routing_strategy": self.routing_strategy.value,
        }
