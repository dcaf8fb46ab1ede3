from typing import Optional

from promptize.adapters.tokenizer.client import TiktokenAdapter
from promptize.errors import InvalidInput, MissingField
from promptize.services.tokenizer import TokenizerService
from promptize.transforms.budget import TokenLimits
from promptize.transforms.prompt_chunker import PromptChunker
from schemas.message.v1 import MessagePair
from schemas.prompt.v1 import SYSTEM_FIELD, PromptRecord

USER_FIELD = "user_prompt"
REQUIRED_FIELDS = (SYSTEM_FIELD, USER_FIELD)


class PromptBuilder:
    """Fluent builder for a PromptRecord.

    Example:
        ```python
        pairs = (PromptBuilder()
                 .system_prompt("Respond only in JSON.")
                 .user_prompt("Review this file.")
                 .field("filename", "huge_file.rs")
                 .chunkable("file_content", contents)
                 .build_prompt("gpt-4", 8192, 4000))
        ```
    """

    def __init__(self):
        self._system_prompt: Optional[str] = None
        # user_prompt is reserved first so it always serializes right after the system prompt
        self._fixed: dict[str, Optional[str]] = {USER_FIELD: None}
        self._chunkable_name: Optional[str] = None
        self._chunkable: Optional[str] = None

    def system_prompt(self, system_prompt: str) -> "PromptBuilder":
        self._system_prompt = system_prompt
        return self

    def user_prompt(self, user_prompt: str) -> "PromptBuilder":
        return self.field(USER_FIELD, user_prompt)

    def field(self, name: str, value: str) -> "PromptBuilder":
        if name == SYSTEM_FIELD:
            return self.system_prompt(value)
        if name == self._chunkable_name:
            raise InvalidInput(f"'{name}' is already the chunkable field")
        self._fixed[name] = value
        return self

    def chunkable(self, name: str, value: str) -> "PromptBuilder":
        if not name:
            raise InvalidInput("Chunkable field name must be non-empty")
        if self._chunkable_name is not None and self._chunkable_name != name:
            raise InvalidInput(
                f"Only one chunkable field is supported; '{self._chunkable_name}' is already set")
        if name in REQUIRED_FIELDS or self._fixed.get(name) is not None:
            raise InvalidInput(f"'{name}' is already a fixed field")
        self._chunkable_name = name
        self._chunkable = value
        return self

    def build(self) -> PromptRecord:
        missing = [name for name in REQUIRED_FIELDS if self._get(name) is None]
        if self._chunkable is None:
            missing.append(self._chunkable_name or "<chunkable>")
        if missing:
            raise MissingField(f"Prompt is missing required fields: {', '.join(missing)}")
        return PromptRecord(
            system_prompt=self._system_prompt,
            fixed={k: v for k, v in self._fixed.items() if v is not None},
            chunkable_name=self._chunkable_name,
            chunkable=self._chunkable,
        )

    def build_prompt(self,
                     model: str,
                     token_limit: int,
                     chunk_token_limit: int,
                     tokenizer: Optional[TokenizerService] = None) -> list[MessagePair]:
        """Build the record and split it into requests that fit token_limit."""
        record = self.build()
        if tokenizer is None:
            tokenizer = TokenizerService(TiktokenAdapter())
        chunker = PromptChunker(tokenizer, TokenLimits(token_limit, chunk_token_limit))
        return chunker.build_prompt(record, model)

    def _get(self, name: str) -> Optional[str]:
        if name == SYSTEM_FIELD:
            return self._system_prompt
        return self._fixed.get(name)
