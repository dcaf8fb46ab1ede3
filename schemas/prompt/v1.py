import json

from pydantic import Field, ValidationError, model_validator

from promptize.errors import InvalidInput
from schemas.base import SchemaBase
from schemas.registry import register

VERSION = "v1"
MODULE = "prompt"
SYSTEM_FIELD = "system_prompt"


@register(MODULE, VERSION)
class PromptRecord(SchemaBase):
    """A prompt made of fixed fields plus exactly one splittable field.

    The instructional text lives in ``system_prompt``. Every other fixed field
    sits in ``fixed`` in the order it should be serialized. The splittable
    field has its own slot so a record can never carry two of them.
    """

    system_prompt: str
    fixed: dict[str, str] = Field(default_factory=dict)
    chunkable_name: str = Field(min_length=1)
    chunkable: str

    def __init__(self, **data):
        try:
            super().__init__(**data)
        except ValidationError as e:
            raise InvalidInput(f"Invalid prompt record: {e}") from e

    @classmethod
    def VERSION(cls) -> str:
        return VERSION

    @model_validator(mode="after")
    def _check_names(self) -> "PromptRecord":
        if self.chunkable_name == SYSTEM_FIELD:
            raise ValueError(f"{SYSTEM_FIELD} cannot be the chunkable field")
        if SYSTEM_FIELD in self.fixed:
            raise ValueError(f"{SYSTEM_FIELD} must not be repeated in fixed fields")
        if self.chunkable_name in self.fixed:
            raise ValueError(f"Chunkable field '{self.chunkable_name}' is also a fixed field")
        return self

    def as_dict(self) -> dict[str, str]:
        return {SYSTEM_FIELD: self.system_prompt, **self.fixed, self.chunkable_name: self.chunkable}

    def serialize(self) -> str:
        """Compact JSON of every field, chunkable field at full size."""
        return json.dumps(self.as_dict(), separators=(",", ":"), ensure_ascii=False)
