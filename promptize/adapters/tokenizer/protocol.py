from typing import Protocol


class TokenizerProtocol(Protocol):
    """Protocol for tokenizer adapters following hexagonal architecture."""

    def count_tokens(self, model: str, text: str) -> int:
        """
        Count tokens in text as the given model's tokenizer sees them.

        Args:
            model: Model identifier, e.g. "gpt-4"
            text: Text to tokenize

        Returns:
            Number of tokens

        Raises:
            TokenizerUnavailable: If no tokenizer is known for model
        """
        ...
