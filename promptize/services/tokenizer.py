import logging
from dataclasses import dataclass

from promptize.adapters.tokenizer.protocol import TokenizerProtocol
from promptize.errors import InvalidInput, TokenizerUnavailable
from promptize.utils.log_utils import setup_logger

logger = setup_logger(__name__, logging.DEBUG)


@dataclass(frozen=True)
class TokenCount:
    """A token count tagged with the model whose tokenizer produced it."""
    model: str
    tokens: int

    def same_model(self, other: "TokenCount") -> None:
        if self.model != other.model:
            raise InvalidInput(
                f"Cannot combine token counts from different models: '{self.model}' and '{other.model}'")


@dataclass
class TokenizerService:
    adapter: TokenizerProtocol

    def count(self, model: str, text: str) -> TokenCount:
        """Count tokens in text for model."""
        if not model or not model.strip():
            raise TokenizerUnavailable("Model id must be a non-empty string")
        tokens = self.adapter.count_tokens(model, text)
        logger.debug(f"Counted {tokens} tokens over {len(text)} chars for {model}")
        return TokenCount(model, tokens)
