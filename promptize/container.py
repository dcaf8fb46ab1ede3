from dataclasses import dataclass
from typing import Optional

from promptize.adapters.tokenizer.client import TiktokenAdapter
from promptize.adapters.tokenizer.fake_client import FakeTokenizerAdapter
from promptize.config import Settings
from promptize.services.tokenizer import TokenizerService
from promptize.transforms.prompt_chunker import PromptChunker


@dataclass
class ServiceContainer:
    """Dependency injection container"""

    settings: Settings
    tokenizer: TokenizerService
    chunker: PromptChunker


    @classmethod
    def create(cls, settings: Optional[Settings] = None) -> 'ServiceContainer':
        settings = settings or Settings.from_env()
        if settings.use_real_tokenizer:
            return cls.create_real(settings)
        else:
            return cls.create_fake(settings)


    @classmethod
    def create_real(cls, settings: Settings) -> 'ServiceContainer':
        """Create container with the tiktoken tokenizer"""
        return cls.create_container(settings, TokenizerService(TiktokenAdapter()))


    @classmethod
    def create_fake(cls, settings: Settings) -> 'ServiceContainer':
        """Create container with test doubles"""
        return cls.create_container(settings, TokenizerService(FakeTokenizerAdapter(chars_per_token=4)))


    @classmethod
    def create_container(cls, settings: Settings, tokenizer: TokenizerService) -> 'ServiceContainer':
        return cls(
            settings=settings,
            tokenizer=tokenizer,
            chunker=PromptChunker(tokenizer, settings.limits),
        )
