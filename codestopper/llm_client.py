"""LLM client infrastructure used by the code generator."""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from typing import Any

from . import constants

logger = logging.getLogger(__name__)


class LLMClient(ABC):
    """Abstract base for LLM API clients."""

    @abstractmethod
    def complete(
        self,
        system_prompt: str,
        user_message: str,
        max_tokens: int = 4096,
        temperature: float | None = None,
    ) -> str:
        """Send a prompt to the LLM and return the raw text response.

        A *temperature* of None leaves the provider's default in place.
        """
        ...


def _sampling_kwargs(max_tokens: int, temperature: float | None) -> dict[str, Any]:
    kwargs: dict[str, Any] = {"max_tokens": max_tokens}
    if temperature is not None:
        kwargs["temperature"] = temperature
    return kwargs


class ClaudeLLMClient(LLMClient):
    """Wraps anthropic.Anthropic() with lazy import and DI."""

    _LAZY_IMPORT = object()

    def __init__(
        self, model: str = constants.CLAUDE_DEFAULT_MODEL, client: Any = _LAZY_IMPORT
    ):
        if client is ClaudeLLMClient._LAZY_IMPORT:
            import anthropic

            self._client = anthropic.Anthropic()
        else:
            self._client = client
        self._model = model

    def complete(
        self,
        system_prompt: str,
        user_message: str,
        max_tokens: int = 4096,
        temperature: float | None = None,
    ) -> str:
        logger.debug(
            "ClaudeLLMClient.complete: model=%s, max_tokens=%d, temperature=%s",
            self._model,
            max_tokens,
            temperature,
        )
        response = self._client.messages.create(
            model=self._model,
            system=system_prompt,
            messages=[{"role": "user", "content": user_message}],
            **_sampling_kwargs(max_tokens, temperature),
        )
        # Code comes back as a single text block.
        return "".join(
            block.text for block in response.content if hasattr(block, "text")
        )


class OpenAILLMClient(LLMClient):
    """Wraps openai.OpenAI() chat completions with lazy import and DI."""

    _LAZY_IMPORT = object()

    def __init__(
        self, model: str = constants.OPENAI_DEFAULT_MODEL, client: Any = _LAZY_IMPORT
    ):
        if client is OpenAILLMClient._LAZY_IMPORT:
            import openai

            self._client = openai.OpenAI()
        else:
            self._client = client
        self._model = model

    def complete(
        self,
        system_prompt: str,
        user_message: str,
        max_tokens: int = 4096,
        temperature: float | None = None,
    ) -> str:
        logger.debug(
            "%s.complete: model=%s, max_tokens=%d, temperature=%s",
            type(self).__name__,
            self._model,
            max_tokens,
            temperature,
        )
        response = self._client.chat.completions.create(
            model=self._model,
            messages=[
                {"role": "system", "content": system_prompt},
                {"role": "user", "content": user_message},
            ],
            **_sampling_kwargs(max_tokens, temperature),
        )
        return response.choices[0].message.content or ""


class OllamaLLMClient(OpenAILLMClient):
    """Talks to a local Ollama server through its OpenAI-compatible API."""

    def __init__(
        self,
        model: str = constants.OLLAMA_DEFAULT_MODEL,
        client: Any = OpenAILLMClient._LAZY_IMPORT,
        base_url: str = constants.OLLAMA_BASE_URL,
    ):
        if client is OpenAILLMClient._LAZY_IMPORT:
            import openai

            client = openai.OpenAI(base_url=base_url, api_key=constants.OLLAMA_API_KEY)
        super().__init__(model=model, client=client)


_CLIENT_CLASSES: dict[str, type[LLMClient]] = {
    constants.LLM_PROVIDER_CLAUDE: ClaudeLLMClient,
    constants.LLM_PROVIDER_OPENAI: OpenAILLMClient,
    constants.LLM_PROVIDER_OLLAMA: OllamaLLMClient,
}


def get_llm_client(
    provider: str = constants.LLM_PROVIDER_CLAUDE,
    model: str = "",
    client: Any = None,
) -> LLMClient:
    """Factory for LLM clients.

    Args:
        provider: One of constants.SUPPORTED_LLM_PROVIDERS
        model: Model name override (empty string = use default)
        client: Pre-built API client for DI/testing
    """
    cls = _CLIENT_CLASSES.get(provider)
    if cls is None:
        raise ValueError(f"Unknown LLM provider: {provider}")
    kwargs: dict[str, Any] = {}
    if model:
        kwargs["model"] = model
    if client is not None:
        kwargs["client"] = client
    return cls(**kwargs)
