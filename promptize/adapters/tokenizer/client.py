import logging
from functools import lru_cache

import tiktoken

from promptize.errors import TokenizerUnavailable
from promptize.utils.log_utils import setup_logger

logger = setup_logger(__name__, logging.DEBUG)


@lru_cache(maxsize=None)
def _get_encoding(model: str) -> tiktoken.Encoding:
    # Cached per model id. Counts themselves are never cached.
    try:
        encoding = tiktoken.encoding_for_model(model)
    except KeyError as e:
        raise TokenizerUnavailable(f"No tokenizer known for model '{model}'") from e
    logger.info(f"Loaded tokenizer {encoding.name} for model {model}")
    return encoding


class TiktokenAdapter:
    """Byte-pair-encoding token counts from tiktoken."""

    def count_tokens(self, model: str, text: str) -> int:
        encoding = _get_encoding(model)
        return len(encoding.encode(text, allowed_special="all"))
