"""HTTP client for an Ollama-compatible text generation endpoint."""

import logging

import httpx

from stagenote.llm.exceptions import GenerationError

logger = logging.getLogger(__name__)

# Connect/write/pool limits; the read timeout is configurable
_CONNECT_TIMEOUT = 10.0
_WRITE_TIMEOUT = 30.0
_POOL_TIMEOUT = 10.0


def _build_timeout(timeout: float) -> httpx.Timeout:
    read = None if timeout == 0 else timeout
    return httpx.Timeout(
        connect=_CONNECT_TIMEOUT,
        read=read,
        write=_WRITE_TIMEOUT,
        pool=_POOL_TIMEOUT,
    )


class TextGenerationClient:
    """Single-request, non-streaming client for ``POST {model, prompt, stream}``."""

    def __init__(self, api_url: str, model: str, timeout: float = 120.0):
        """Initialize the client.

        Args:
            api_url: Full URL of the generate endpoint.
            model: Model identifier sent with every request.
            timeout: Read timeout in seconds. 0 waits indefinitely.
        """
        self.api_url = api_url
        self.model = model
        self.timeout = timeout

    def build_payload(self, prompt: str) -> dict:
        return {"model": self.model, "prompt": prompt, "stream": False}

    def generate(self, prompt: str) -> str:
        """Send the prompt and return the generated text.

        Args:
            prompt: The full prompt string.

        Returns:
            The ``response`` field of the JSON reply.

        Raises:
            GenerationError: If the URL is not configured, the request fails,
                the status is not 2xx, or the body lacks a text ``response``.
        """
        if not self.api_url:
            raise GenerationError(
                "Text generation endpoint is not configured. Set OCO_API_URL "
                "or run: stagenote config set api_url <url>"
            )

        logger.debug("POST %s (model=%s, prompt=%d chars)", self.api_url, self.model, len(prompt))
        try:
            response = httpx.post(
                self.api_url,
                json=self.build_payload(prompt),
                timeout=_build_timeout(self.timeout),
            )
            response.raise_for_status()
        except httpx.HTTPStatusError as e:
            raise GenerationError(
                f"Text generation request failed with HTTP {e.response.status_code}: "
                f"{e.response.text.strip()[:500]}"
            )
        except (httpx.HTTPError, httpx.InvalidURL) as e:
            raise GenerationError(f"Text generation request to {self.api_url} failed: {e}")

        try:
            data = response.json()
        except ValueError as e:
            raise GenerationError(f"Text generation response is not valid JSON: {e}")

        text = data.get("response") if isinstance(data, dict) else None
        if not isinstance(text, str):
            raise GenerationError(
                "Text generation response is missing the 'response' text field."
            )

        logger.debug("Received %d chars from %s", len(text), self.model)
        return text
