import logging
from dataclasses import dataclass
from typing import Optional

from promptize.services.tokenizer import TokenizerService
from promptize.transforms.assembler import assemble_chunks, assemble_single
from promptize.transforms.budget import TokenLimits, compute_budget
from promptize.transforms.chunker import ChunkPlan, chunk_string, plan_chunks
from promptize.utils.log_utils import setup_logger
from schemas.message.v1 import MessagePair
from schemas.prompt.v1 import PromptRecord

logger = setup_logger(__name__, logging.DEBUG)


@dataclass
class PromptChunker:
    """Splits a PromptRecord into requests that each fit the token limits.

    Pipeline: count tokens -> budget -> chunk size -> character slices -> message pairs.
    Either every chunk is produced or an error is raised; there is no partial output.
    """
    tokenizer: TokenizerService
    limits: TokenLimits

    def plan(self, record: PromptRecord, model: str) -> Optional[ChunkPlan]:
        """Return the chunk plan for record, or None if it fits in one request."""
        return self._plan(record.serialize(), record, model)

    def build_prompt(self, record: PromptRecord, model: str) -> list[MessagePair]:
        prompt_string = record.serialize()
        plan = self._plan(prompt_string, record, model)
        if plan is None:
            return assemble_single(record)

        slices = chunk_string(prompt_string, plan.chunk_size_chars)
        logger.info(f"Split {len(prompt_string)} chars into {len(slices)} chunks of "
                    f"{plan.chunk_size_chars} chars (~{plan.chunk_size_tokens} tokens)")
        return assemble_chunks(record, slices)

    def _plan(self, prompt_string: str, record: PromptRecord, model: str) -> Optional[ChunkPlan]:
        total = self.tokenizer.count(model, prompt_string)
        chunkable = self.tokenizer.count(model, record.chunkable)
        budget = compute_budget(total, chunkable, self.limits)
        if not budget.split_required:
            logger.info(f"Prompt fits: {total.tokens} <= {self.limits.total_limit} tokens")
            return None

        logger.info(f"Prompt has {total.tokens} tokens over limit {self.limits.total_limit}; "
                    f"{budget.remaining} tokens per chunk for '{record.chunkable_name}'")
        plan = plan_chunks(chunkable.tokens, budget.remaining, len(prompt_string))
        logger.debug(f"Optimal split is {plan.num_chunks} chunks of {plan.chunk_size_tokens} tokens")
        return plan
