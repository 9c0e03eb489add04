"""Natural-language to source code generation through an LLM."""

from __future__ import annotations

import logging
import re

from . import constants
from .language import Language, parse_language
from .llm_client import LLMClient, get_llm_client

logger = logging.getLogger(__name__)

_FENCE_OPEN = re.compile(r"^```[\w+-]*\n?", re.MULTILINE)
_FENCE_CLOSE = re.compile(r"\n?```$", re.MULTILINE)


class CodeGenerationError(Exception):
    """Raised when code cannot be generated for a prompt."""

    pass


class CodeGenerationPrompts:
    """Prompt templates for code generation."""

    LANGUAGE_INSTRUCTIONS: dict[Language, str] = {
        Language.PYTHON: (
            "Write Python code. Use proper indentation, include necessary "
            "imports, and follow PEP 8 style guidelines."
        ),
        Language.JAVA: (
            "Write Java code. Include proper class structure, access modifiers, "
            "and semicolons. Use camelCase for methods and variables."
        ),
        Language.CPP: (
            "Write C++ code. Include necessary headers like <iostream>, use "
            "proper namespace declarations, and include semicolons."
        ),
    }

    SYSTEM_PROMPT_TEMPLATE = """\
You are an expert programmer. Generate clean, working, production-ready code \
based on the user's natural language description.

Language: {language_upper}
{instructions}

Rules:
1. ONLY output the code - no explanations, no markdown code blocks, no comments about what you're doing
2. The code must be syntactically correct and ready to run
3. Include helpful inline comments in the code itself
4. Use best practices for the language
5. If the request is ambiguous, make reasonable assumptions and write functional code"""

    USER_PROMPT_TEMPLATE = "Write {language} code that does the following: {prompt}"

    @classmethod
    def system_prompt(cls, language: Language) -> str:
        return cls.SYSTEM_PROMPT_TEMPLATE.format(
            language_upper=language.value.upper(),
            instructions=cls.LANGUAGE_INSTRUCTIONS[language],
        )

    @classmethod
    def user_message(cls, prompt: str, language: Language) -> str:
        return cls.USER_PROMPT_TEMPLATE.format(language=language.value, prompt=prompt)


def strip_markdown_fences(text: str) -> str:
    """Remove every markdown code fence line from an LLM response."""
    text = _FENCE_OPEN.sub("", text)
    text = _FENCE_CLOSE.sub("", text)
    return text.strip()


class CodeGenerator:
    """Turns a spoken or typed description into source code."""

    def __init__(
        self,
        llm_client: LLMClient,
        max_tokens: int = constants.GENERATION_MAX_TOKENS,
        temperature: float | None = constants.GENERATION_TEMPERATURE,
    ):
        self._llm_client = llm_client
        self._max_tokens = max_tokens
        self._temperature = temperature

    @classmethod
    def for_provider(
        cls, provider: str = constants.LLM_PROVIDER_CLAUDE, model: str = ""
    ) -> CodeGenerator:
        """Build a generator on a provider's SDK client.

        Raises:
            ValueError: Unknown provider name.
            CodeGenerationError: The SDK client could not be created
                (missing package, missing API key).
        """
        if provider not in constants.SUPPORTED_LLM_PROVIDERS:
            raise ValueError(f"Unknown LLM provider: {provider}")
        try:
            client = get_llm_client(provider=provider, model=model)
        except Exception as exc:
            raise CodeGenerationError(
                f"Cannot create {provider} client: {exc}"
            ) from exc
        return cls(client)

    def generate(self, prompt: str, language: Language | str) -> str:
        if not prompt or not prompt.strip():
            raise CodeGenerationError("Missing prompt")
        language = parse_language(language)
        logger.info(
            "Generating %s code for prompt (%d chars)", language.value, len(prompt)
        )
        try:
            raw = self._llm_client.complete(
                CodeGenerationPrompts.system_prompt(language),
                CodeGenerationPrompts.user_message(prompt.strip(), language),
                max_tokens=self._max_tokens,
                temperature=self._temperature,
            )
        except Exception as exc:
            raise CodeGenerationError(f"Code generation failed: {exc}") from exc
        code = strip_markdown_fences(raw or "")
        logger.debug("Generated %d chars of %s", len(code), language.value)
        return code
