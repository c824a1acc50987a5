"""
Model selection for a routed request.

Explicit model beats task hint, task hint beats prompt heuristics. The
heuristics only look at the raw prompt text and are checked in order, so a long
prompt that contains code still routes to the code model.
"""
import re

from model_router.core.schema import ModelRequest, Task
from model_router.logging import get_logger

from .router_config import RouterConfig

LONG_PROMPT_THRESHOLD = 2000

CODE_FENCE = "```"
CODE_PATTERN = re.compile(r"\b(def|class|import|return)\s|\bfunction\b|\bcode\b")
REASONING_PATTERN = re.compile(r"\bthink|\breason|step by step")


def detect_task(prompt: str) -> Task:
    """Guess the task from the prompt text alone."""
    lowered = prompt.lower()
    if CODE_FENCE in prompt or CODE_PATTERN.search(lowered):
        return Task.CODE
    if REASONING_PATTERN.search(lowered):
        return Task.REASONING
    if len(prompt) > LONG_PROMPT_THRESHOLD:
        return Task.RAG
    return Task.CHAT


def select_model(request: ModelRequest, config: RouterConfig) -> str:
    """
    Pick the model id to try first.

    Args:
        request: The routed request
        config: Router configuration holding the per-task defaults

    Returns:
        Model id as given by the caller or the configuration. Provider
        prefixes are stripped when the id is resolved to a target.
    """
    if request.model:
        get_logger().trace("Using explicit model", model=request.model)
        return request.model.strip()

    if request.task is not None:
        model = config.default_model(request.task)
        get_logger().trace("Using task default", task=request.task.value, model=model)
        return model

    task = detect_task(request.prompt or "")
    model = config.default_model(task)
    get_logger().trace("Detected task from prompt", task=task.value, model=model)
    return model
