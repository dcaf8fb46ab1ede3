from math import ceil
from typing import Optional

from promptize.adapters.tokenizer.protocol import TokenizerProtocol
from promptize.errors import TokenizerUnavailable


class FakeTokenizerAdapter(TokenizerProtocol):
    """Counts one token per ``chars_per_token`` characters."""

    def __init__(self, chars_per_token: int = 1, known_models: Optional[set[str]] = None):
        if chars_per_token <= 0:
            raise ValueError("chars_per_token must be positive")
        self.chars_per_token = chars_per_token
        self.known_models = known_models
        self.calls = 0

    def count_tokens(self, model: str, text: str) -> int:
        if self.known_models is not None and model not in self.known_models:
            raise TokenizerUnavailable(f"No tokenizer known for model '{model}'")
        self.calls += 1
        return ceil(len(text) / self.chars_per_token)
