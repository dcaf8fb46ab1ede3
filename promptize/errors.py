class PromptizeError(ValueError):
    """Base class for every failure raised while assembling a prompt."""


class MissingField(PromptizeError):
    """A required field was never set on the record builder."""


class TokenizerUnavailable(PromptizeError):
    """No tokenizer is known for the requested model id."""


class BudgetExceeded(PromptizeError):
    """Fixed fields leave too little room to honor the per-chunk limit."""


class InvalidInput(PromptizeError):
    """Non-positive limits or token counts, or counts from different models."""
