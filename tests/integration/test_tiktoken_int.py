import pytest

from promptize.adapters.tokenizer.client import TiktokenAdapter
from promptize.services.prompt_builder import PromptBuilder
from promptize.services.tokenizer import TokenizerService

pytestmark = pytest.mark.integration


@pytest.fixture(scope='module')
def tokenizer():
    return TokenizerService(TiktokenAdapter())


def test_hello(tokenizer):
    count = tokenizer.count("gpt-4", "hello world")
    assert count.model == "gpt-4"
    assert count.tokens == 2


def test_idempotent(tokenizer):
    text = "fn main() { println!(\"hello\"); }" * 20
    assert tokenizer.count("gpt-4", text) == tokenizer.count("gpt-4", text)


def test_special_tokens_are_encoded(tokenizer):
    assert tokenizer.count("gpt-4", "<|endoftext|>").tokens == 1


def test_chunk_real_file(tokenizer):
    contents = "".join(f"let value_{i} = compute({i}) * {i};" for i in range(3000))
    builder = (PromptBuilder()
               .system_prompt("You are a computer system that responds only in JSON.")
               .user_prompt("Summarize this file.")
               .field("filename", "huge_file.rs")
               .chunkable("file_content", contents))
    pairs = builder.build_prompt("gpt-4", 8192, 4000, tokenizer=tokenizer)

    assert len(pairs) > 1
    assert "".join(p.payload for p in pairs) == builder.build().serialize()
