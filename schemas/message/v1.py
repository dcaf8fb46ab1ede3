from pydantic import BaseModel

from schemas.base import SchemaBase
from schemas.registry import register

VERSION = "v1"
MODULE = "message"


class Message(BaseModel):
    role: str
    content: str


@register(MODULE, VERSION)
class MessagePair(SchemaBase):
    """One submittable request: instructions plus the whole or one slice of the payload."""

    instructional: str
    payload: str

    @classmethod
    def VERSION(cls) -> str:
        return VERSION

    def to_messages(self, instructional_role: str = "system", payload_role: str = "user") -> list[Message]:
        return [Message(role=instructional_role, content=self.instructional),
                Message(role=payload_role, content=self.payload)]

    def to_wire(self, instructional_role: str = "system", payload_role: str = "user") -> list[dict]:
        return [m.model_dump() for m in self.to_messages(instructional_role, payload_role)]
