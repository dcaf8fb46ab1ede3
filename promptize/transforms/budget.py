import logging
from dataclasses import dataclass
from typing import Optional

from promptize.errors import BudgetExceeded, InvalidInput
from promptize.services.tokenizer import TokenCount
from promptize.utils.log_utils import setup_logger

logger = setup_logger(__name__, logging.DEBUG)


@dataclass(frozen=True)
class TokenLimits:
    """Overall prompt limit and the smallest per-chunk room worth splitting for."""
    total_limit: int
    chunk_limit: int

    def __post_init__(self):
        if self.total_limit <= 0 or self.chunk_limit <= 0:
            raise InvalidInput(
                f"Token limits must be positive. Got total={self.total_limit}, chunk={self.chunk_limit}")
        if self.chunk_limit > self.total_limit:
            logger.warning(f"Chunk limit {self.chunk_limit} exceeds total limit {self.total_limit}; "
                           f"every oversized prompt will be rejected.")


@dataclass(frozen=True)
class Budget:
    split_required: bool
    fixed_overhead_tokens: int
    # Tokens each chunk may spend on the chunkable field. None when no split is needed.
    remaining: Optional[int] = None


def compute_budget(total: TokenCount, chunkable: TokenCount, limits: TokenLimits) -> Budget:
    """Decide whether the chunkable field has to be split, and how much room each chunk gets.

    Fixed fields are re-sent with every chunk, so the room per chunk is the total
    limit minus everything that isn't the chunkable field.

    Raises:
        InvalidInput: If the counts come from different tokenizers
        BudgetExceeded: If that room is smaller than ``limits.chunk_limit``
    """
    total.same_model(chunkable)
    fixed_overhead = total.tokens - chunkable.tokens

    if total.tokens <= limits.total_limit:
        return Budget(split_required=False, fixed_overhead_tokens=fixed_overhead)

    remaining = limits.total_limit - fixed_overhead
    # e.g. 8000 - (10000 - 8000) = 6000 but 8000 - (10000 - 1000) = -1000
    if remaining < limits.chunk_limit:
        raise BudgetExceeded(
            f"Fixed fields use {fixed_overhead} of {limits.total_limit} tokens, leaving {remaining} "
            f"per chunk which is less than the chunk limit {limits.chunk_limit}")
    return Budget(split_required=True, fixed_overhead_tokens=fixed_overhead, remaining=remaining)
