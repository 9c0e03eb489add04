"""Runtime configuration (pure data, read from the environment)."""

from __future__ import annotations

import os
from collections.abc import Mapping
from dataclasses import dataclass

from . import constants
from .language import Language, parse_language


@dataclass(frozen=True)
class StopperConfig:
    """Groups editor, generation and execution settings."""

    language: Language = Language.PYTHON
    llm_provider: str = constants.LLM_PROVIDER_CLAUDE
    llm_model: str = ""
    execution_url: str = constants.PISTON_EXECUTE_URL
    execution_timeout: float = constants.DEFAULT_EXECUTION_TIMEOUT

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> StopperConfig:
        """Build a config from ``CODESTOPPER_*`` variables, defaulting the rest."""
        env = os.environ if environ is None else environ
        timeout_raw = env.get(constants.ENV_EXECUTION_TIMEOUT, "")
        timeout = constants.DEFAULT_EXECUTION_TIMEOUT
        try:
            if timeout_raw:
                timeout = float(timeout_raw)
        except ValueError as exc:
            raise ValueError(
                f"{constants.ENV_EXECUTION_TIMEOUT} must be a number, got {timeout_raw!r}"
            ) from exc
        return cls(
            language=parse_language(
                env.get(constants.ENV_LANGUAGE, constants.DEFAULT_LANGUAGE)
            ),
            llm_provider=env.get(constants.ENV_LLM_PROVIDER, constants.LLM_PROVIDER_CLAUDE),
            llm_model=env.get(constants.ENV_LLM_MODEL, ""),
            execution_url=env.get(constants.ENV_EXECUTION_URL, constants.PISTON_EXECUTE_URL),
            execution_timeout=timeout,
        )
