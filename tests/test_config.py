import pytest

from promptize.config import CHUNK_TOKEN_LIMIT, DEFAULT_MODEL, TOKEN_LIMIT, Settings
from promptize.errors import InvalidInput
from promptize.transforms.budget import TokenLimits

ENV_VARS = ["PROMPTIZE_MODEL", "PROMPTIZE_TOKEN_LIMIT", "PROMPTIZE_CHUNK_TOKEN_LIMIT", "TARGET_ENV"]


@pytest.fixture
def clean_env(monkeypatch):
    for name in ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    return monkeypatch


class TestSettings:

    def test_defaults(self, clean_env):
        settings = Settings.from_env(dotenv=False)
        assert settings == Settings(DEFAULT_MODEL, TOKEN_LIMIT, CHUNK_TOKEN_LIMIT, "DEV")
        assert settings.limits == TokenLimits(8192, 4000)
        assert not settings.use_real_tokenizer

    def test_from_env(self, clean_env):
        clean_env.setenv("PROMPTIZE_MODEL", "gpt-3.5-turbo")
        clean_env.setenv("PROMPTIZE_TOKEN_LIMIT", "4096")
        clean_env.setenv("PROMPTIZE_CHUNK_TOKEN_LIMIT", "1000")
        clean_env.setenv("TARGET_ENV", "PROD")
        settings = Settings.from_env(dotenv=False)
        assert settings.model == "gpt-3.5-turbo"
        assert settings.limits == TokenLimits(4096, 1000)
        assert settings.use_real_tokenizer

    def test_blank_uses_default(self, clean_env):
        clean_env.setenv("PROMPTIZE_TOKEN_LIMIT", " ")
        assert Settings.from_env(dotenv=False).token_limit == TOKEN_LIMIT

    def test_non_integer_limit(self, clean_env):
        clean_env.setenv("PROMPTIZE_TOKEN_LIMIT", "lots")
        with pytest.raises(InvalidInput, match="PROMPTIZE_TOKEN_LIMIT"):
            Settings.from_env(dotenv=False)

    def test_non_positive_limit(self, clean_env):
        clean_env.setenv("PROMPTIZE_CHUNK_TOKEN_LIMIT", "0")
        with pytest.raises(InvalidInput):
            Settings.from_env(dotenv=False).limits
