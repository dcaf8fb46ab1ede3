from dataclasses import dataclass
from math import ceil

from promptize.errors import InvalidInput


@dataclass(frozen=True)
class ChunkPlan:
    num_chunks: int
    chunk_size_tokens: int
    chunk_size_chars: int

    def slice_count(self, total_chars: int) -> int:
        # Can exceed num_chunks: the character size is only a proxy for the token size
        return ceil(total_chars / self.chunk_size_chars)


def chunk_size_tokens(total: int, limit: int) -> tuple[int, int]:
    """Smallest number of even chunks whose token size stays within limit.

    Returns:
        Tuple of (num_chunks, chunk_size) where chunk_size <= limit
    """
    if total <= 0 or limit <= 0:
        raise InvalidInput(f"Token total and limit must be positive. Got total={total}, limit={limit}")
    num_chunks = ceil(total / limit)
    chunk_size = total // num_chunks
    while chunk_size > limit:
        num_chunks += 1
        chunk_size = total // num_chunks
    return num_chunks, chunk_size


def plan_chunks(chunkable_tokens: int, limit: int, total_chars: int) -> ChunkPlan:
    """Size the chunks in tokens, then convert that size into characters.

    The ratio is taken against the character length of the whole serialized
    prompt, not the chunkable field alone, so slices are character-exact but
    only roughly token-sized.
    """
    if total_chars <= 0:
        raise InvalidInput(f"Chunk sizing needs a non-empty prompt. Got total_chars={total_chars}")
    num_chunks, chunk_tokens = chunk_size_tokens(chunkable_tokens, limit)
    ratio = chunk_tokens / chunkable_tokens
    return ChunkPlan(num_chunks=num_chunks,
                     chunk_size_tokens=chunk_tokens,
                     chunk_size_chars=ceil(ratio * total_chars))


def chunk_string(text: str, chunk_size_chars: int) -> list[str]:
    """Cut text into consecutive slices of chunk_size_chars characters. The last may be shorter."""
    if chunk_size_chars <= 0:
        raise InvalidInput(f"Chunk size must be positive. Got {chunk_size_chars}")
    return [text[i:i + chunk_size_chars] for i in range(0, len(text), chunk_size_chars)]
