from promptize.adapters.tokenizer.client import TiktokenAdapter
from promptize.adapters.tokenizer.fake_client import FakeTokenizerAdapter
from promptize.config import Settings
from promptize.container import ServiceContainer
from promptize.transforms.budget import TokenLimits
from schemas.prompt.v1 import PromptRecord


def test_create_fake():
    container = ServiceContainer.create(Settings(target_env="DEV"))
    assert isinstance(container.tokenizer.adapter, FakeTokenizerAdapter)
    assert container.chunker.tokenizer is container.tokenizer


def test_create_real():
    container = ServiceContainer.create(Settings(target_env="STAGE", token_limit=4096, chunk_token_limit=512))
    assert isinstance(container.tokenizer.adapter, TiktokenAdapter)
    assert container.chunker.limits == TokenLimits(4096, 512)


def test_fake_container_chunks():
    container = ServiceContainer.create(Settings(token_limit=8192, chunk_token_limit=4000))
    record = PromptRecord(system_prompt="s", chunkable_name="body", chunkable="hello")
    pairs = container.chunker.build_prompt(record, container.settings.model)
    assert [p.payload for p in pairs] == ["hello"]
