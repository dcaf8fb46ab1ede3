import argparse
import json
import logging
import sys
from dataclasses import replace
from pathlib import Path

from promptize.config import Settings
from promptize.container import ServiceContainer
from promptize.services.prompt_builder import PromptBuilder
from promptize.utils.app_utils import AppError, pretty_error
from promptize.utils.log_utils import setup_logger

logger = setup_logger(__name__, logging.INFO)

DEFAULT_SYSTEM = "You are a computer system that responds only in JSON format with no other words except for the JSON."


def read_content(path: str, squash: bool) -> str:
    contents = Path(path).read_text()
    if squash:
        # Strip indentation and newlines to save tokens
        contents = "".join(line.strip() for line in contents.splitlines())
    return contents


def _override(value, default):
    # 0 is an explicit (invalid) choice, not "unset"
    return value if value is not None else default


@pretty_error
def chunk_file(args) -> list[list[dict]]:
    settings = Settings.from_env()
    settings = replace(settings,
                       model=args.model or settings.model,
                       token_limit=_override(args.token_limit, settings.token_limit),
                       chunk_token_limit=_override(args.chunk_limit, settings.chunk_token_limit),
                       target_env=args.env or settings.target_env)
    container = ServiceContainer.create(settings)

    record = (PromptBuilder()
              .system_prompt(args.system)
              .user_prompt(args.user or args.system)
              .field("filename", Path(args.path).name)
              .chunkable("file_content", read_content(args.path, args.squash))
              .build())
    pairs = container.chunker.build_prompt(record, settings.model)
    logger.info(f"Built {len(pairs)} prompts for {args.path}")
    return [pair.to_wire() for pair in pairs]


if __name__ == "__main__":
    parser = argparse.ArgumentParser(
                    prog='chunk_file',
                    description='Split a file into prompts that fit a token budget')
    parser.add_argument("path")
    parser.add_argument("--system", default=DEFAULT_SYSTEM)
    parser.add_argument("--user")
    parser.add_argument("--model")
    parser.add_argument("--token-limit", type=int)
    parser.add_argument("--chunk-limit", type=int)
    parser.add_argument("--env", choices=["DEV", "PROD"], help='PROD uses the real tokenizer')
    parser.add_argument("--squash", action='store_true', help='strip and join lines before chunking')
    args = parser.parse_args()

    result = chunk_file(args)
    if isinstance(result, AppError):
        sys.exit(result.exit_code)
    json.dump(result, sys.stdout, indent=2, ensure_ascii=False)
