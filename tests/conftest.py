import os
import sys

import pytest

# Add the src directory to the Python path
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..', 'src'))

from model_router.logging import CallbackLogger, LoggerRegistry, LogLevel


@pytest.fixture(autouse=True)
def log_records():
    """Route all library logging into a list for the duration of a test."""
    records = []
    LoggerRegistry.set(CallbackLogger(
        level=LogLevel.DEBUG,
        callback=lambda level, message, fields: records.append((level, message, fields)),
    ))
    yield records
    LoggerRegistry.reset()


@pytest.fixture(autouse=True)
def clear_provider_keys(monkeypatch):
    for env_var in (
        "XAI_API_KEY", "DEEPSEEK_API_KEY", "ANTHROPIC_API_KEY", "OPENROUTER_API_KEY",
        "OPENAI_API_KEY", "NVIDIA_API_KEY", "GEMINI_API_KEY", "PERPLEXITY_API_KEY",
        "MODEL_ROUTER_CONFIG", "MODEL_ROUTER_LOG_LEVEL",
    ):
        monkeypatch.delenv(env_var, raising=False)
