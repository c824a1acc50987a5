# Model Router - multi-provider LLM routing

__version__ = "0.1.0"
