from typing import Iterable

from schemas.message.v1 import MessagePair
from schemas.prompt.v1 import PromptRecord


def assemble_single(record: PromptRecord) -> list[MessagePair]:
    """Pair the system prompt with the chunkable field as-is.

    Only those two reach the model. The other fixed fields (user_prompt,
    filename, ...) are sent only when the prompt is split, inside the
    serialized slices.
    """
    return [MessagePair(instructional=record.system_prompt, payload=record.chunkable)]


def assemble_chunks(record: PromptRecord, slices: Iterable[str]) -> list[MessagePair]:
    # Instructions repeat verbatim in every pair; slice order is kept.
    return [MessagePair(instructional=record.system_prompt, payload=s) for s in slices]
