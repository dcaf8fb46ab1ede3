from abc import abstractmethod, ABC
from pydantic import BaseModel, ConfigDict


class SchemaBase(BaseModel, ABC):
    """Versioned, immutable model shared between pipeline stages."""
    model_config = ConfigDict(frozen=True)

    @classmethod
    @abstractmethod
    def VERSION(cls) -> str:
        pass
