from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional

from model_router.core.pricing.cost_breakdown import CostBreakdown
from model_router.core.pricing.token_usage import TokenUsage


DEFAULT_TEMPERATURE = 0.7
DEFAULT_MAX_TOKENS = 4096


class Task(str, Enum):
    """Task hint used to pick a default model."""
    CHAT = "chat"
    CODE = "code"
    REASONING = "reasoning"
    VISION = "vision"
    RAG = "rag"


@dataclass
class ChatMessage:
    role: str                   # "system", "user" or "assistant"
    content: str

    def to_dict(self) -> dict:
        return {"role": self.role, "content": self.content}


@dataclass
class ModelRequest:
    """A single routed request. Built per call, never persisted."""
    prompt: str
    model: Optional[str] = None
    task: Optional[Task] = None
    temperature: Optional[float] = None
    max_tokens: Optional[int] = None
    top_p: Optional[float] = None
    messages: Optional[List[ChatMessage]] = None

    def __post_init__(self):
        if isinstance(self.task, str) and not isinstance(self.task, Task):
            self.task = Task(self.task)
        if self.messages is not None:
            self.messages = [
                m if isinstance(m, ChatMessage) else ChatMessage(role=m["role"], content=m["content"])
                for m in self.messages
            ]

    def chat_messages(self) -> List[ChatMessage]:
        """Messages to send: the explicit list, or the prompt as one user turn."""
        if self.messages:
            return list(self.messages)
        return [ChatMessage(role="user", content=self.prompt)]

    def options(self) -> dict:
        """Sampling options with defaults applied."""
        options = {
            "temperature": DEFAULT_TEMPERATURE if self.temperature is None else self.temperature,
            "max_tokens": DEFAULT_MAX_TOKENS if self.max_tokens is None else self.max_tokens,
        }
        if self.top_p is not None:
            options["top_p"] = self.top_p
        return options


@dataclass
class ModelResponse:
    content: str
    model: str
    provider: str
    tokens: TokenUsage
    cost: CostBreakdown
    latency_ms: int = 0
    reasoning: Optional[str] = None
    raw: Optional[dict] = field(default=None, repr=False)
