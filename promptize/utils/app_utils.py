import json
import logging
import os
import traceback
from dataclasses import dataclass, asdict, field
from functools import wraps

from promptize.errors import BudgetExceeded, InvalidInput, MissingField, PromptizeError, TokenizerUnavailable
from promptize.utils.log_utils import setup_logger

logger = setup_logger(__name__, logging.DEBUG)

# Exit status per error kind; 1 is left for crashes outside PromptizeError
EXIT_CODES: dict[type[PromptizeError], int] = {
    MissingField: 2,
    InvalidInput: 2,
    TokenizerUnavailable: 3,
    BudgetExceeded: 4,
}
DEFAULT_EXIT_CODE = 1


@dataclass
class AppError:
    """What a caller needs to know about a rejected prompt, without the stack dump."""
    app: str
    error_type: str
    message: str
    exit_code: int
    traceback: list[str] = field(default_factory=list)

    @classmethod
    def from_exception(cls, app: str, exc: PromptizeError) -> "AppError":
        return cls(
            app=app,
            error_type=type(exc).__name__,
            message=str(exc),
            exit_code=exit_code_for(exc),
            traceback=condensed_tb(exc).splitlines(),
        )

    def __str__(self):
        return json.dumps(asdict(self), indent=2)


def exit_code_for(exc: PromptizeError) -> int:
    for kind in type(exc).__mro__:
        if kind in EXIT_CODES:
            return EXIT_CODES[kind]
    return DEFAULT_EXIT_CODE


def pretty_error(func_arg=None, quiet=False):
    """
    Decorator that turns a PromptizeError into a logged AppError.

    Anything else is a bug, not a rejected prompt, and propagates untouched.
    """
    def decorator(app_func):
        @wraps(app_func)
        def wrapper(*args, **kwargs):
            try:
                return app_func(*args, **kwargs)
            except PromptizeError as e:
                app_error = AppError.from_exception(app_func.__name__, e)
                if not quiet:
                    logger.error(app_error)
                return app_error
        return wrapper
    if func_arg is None:
        return decorator
    else:
        return decorator(func_arg)


def condensed_tb(exc) -> str:
    """One `file:line in func` entry per frame, directories stripped."""
    frames = traceback.extract_tb(exc.__traceback__)
    return "\n".join(f'{os.path.basename(f.filename)}:{f.lineno} in {f.name}' for f in frames)
