import tiktoken

DEFAULT_ENCODING = "cl100k_base"


def count_tokens(text: str, encoding_name: str = DEFAULT_ENCODING) -> int:
    """Count exact tokens using tiktoken when available, fallback to estimation"""
    if not text:
        return 0

    try:
        encoding = tiktoken.get_encoding(encoding_name or DEFAULT_ENCODING)
        return len(encoding.encode(text))
    except Exception:
        # Encoding files may be unavailable offline
        pass

    # Fallback: rough character-to-token ratio
    ratio = 4.0
    return max(1, int(len(text) / ratio))


def count_message_tokens(messages, encoding_name: str = DEFAULT_ENCODING) -> int:
    """Token estimate for a chat message list, including a small per-message overhead."""
    per_message_overhead = 4
    return sum(
        count_tokens(message.content, encoding_name) + per_message_overhead
        for message in messages
    )
