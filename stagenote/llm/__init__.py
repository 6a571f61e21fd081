"""Text generation module for stagenote.

Provides the HTTP client for the configured endpoint and the prompt
used to request a commit message.
"""

from stagenote.config import AppConfig
from stagenote.llm.client import TextGenerationClient
from stagenote.llm.exceptions import GenerationError, LLMError
from stagenote.llm.prompts import COMMIT_PROMPT_TEMPLATE, build_prompt


def get_client(config: AppConfig) -> TextGenerationClient:
    """Build a client from resolved configuration.

    Args:
        config: The resolved AppConfig.

    Returns:
        A TextGenerationClient for the configured endpoint and model.
    """
    return TextGenerationClient(
        api_url=config.api_url,
        model=config.model,
        timeout=config.timeout,
    )


__all__ = [
    "COMMIT_PROMPT_TEMPLATE",
    "GenerationError",
    "LLMError",
    "TextGenerationClient",
    "build_prompt",
    "get_client",
]
