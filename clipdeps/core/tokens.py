# core/tokens.py
import math

# Rough size of one token in characters
CHARS_PER_TOKEN = 4


def estimate_tokens(text: str) -> int:
    """Approximate token count: characters / 4, rounded up."""
    return math.ceil(len(text) / CHARS_PER_TOKEN)
