import os
from dataclasses import dataclass

from dotenv import load_dotenv

from promptize.errors import InvalidInput
from promptize.transforms.budget import TokenLimits

DEFAULT_MODEL = "gpt-4"
TOKEN_LIMIT = 8192
CHUNK_TOKEN_LIMIT = 4000
REAL_ENVS = ("PROD", "STAGE")


@dataclass(frozen=True)
class Settings:
    model: str = DEFAULT_MODEL
    token_limit: int = TOKEN_LIMIT
    chunk_token_limit: int = CHUNK_TOKEN_LIMIT
    target_env: str = "DEV"

    @property
    def limits(self) -> TokenLimits:
        return TokenLimits(self.token_limit, self.chunk_token_limit)

    @property
    def use_real_tokenizer(self) -> bool:
        return self.target_env in REAL_ENVS

    @classmethod
    def from_env(cls, dotenv: bool = True) -> "Settings":
        if dotenv:
            load_dotenv()
        return cls(
            model=os.environ.get("PROMPTIZE_MODEL", DEFAULT_MODEL),
            token_limit=_env_int("PROMPTIZE_TOKEN_LIMIT", TOKEN_LIMIT),
            chunk_token_limit=_env_int("PROMPTIZE_CHUNK_TOKEN_LIMIT", CHUNK_TOKEN_LIMIT),
            target_env=os.environ.get("TARGET_ENV", "DEV"),
        )


def _env_int(name: str, default: int) -> int:
    raw = os.environ.get(name)
    if raw is None or not raw.strip():
        return default
    try:
        return int(raw)
    except ValueError as e:
        raise InvalidInput(f"Environment variable {name} must be an integer. Got '{raw}'") from e
