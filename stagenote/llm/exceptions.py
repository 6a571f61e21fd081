"""LLM-related exception classes.

Contains all exception classes for text generation:
- LLMError: Base exception for LLM-related errors
- GenerationError: Raised when the endpoint call or its response fails
"""


class LLMError(Exception):
    """Base exception for LLM-related errors."""

    pass


class GenerationError(LLMError):
    """Raised when text generation fails (network, HTTP status, response body)."""

    pass
