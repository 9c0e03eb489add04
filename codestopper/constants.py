"""Named constants — eliminates magic strings across the codebase."""

from __future__ import annotations

QUOTE_CHARS: frozenset[str] = frozenset({'"', "'"})
ESCAPE_CHAR = "\\"

SKIP_PREFIXES: tuple[str, ...] = ("//", "#", "/*")

TERMINATOR_EXEMPT_ENDINGS: tuple[str, ...] = ("{", "}", ":", ";")

MSG_UNCLOSED_STRING = "unclosed string literal"
MSG_MISSING_SEMICOLON = "missing semicolon"
MSG_UNMATCHED_CLOSER_TEMPLATE = "unmatched closing {name} '{closer}'"
MSG_MISSING_CLOSERS_TEMPLATE = "missing {count} closing {name}"

STATUS_READY = "Ready"
STATUS_VALID = "Syntax Valid"
STATUS_ERROR = "Syntax Error"
LINE_PREFIX_TEMPLATE = "Line {line}: {message}"

DEFAULT_LANGUAGE = "python"

PISTON_EXECUTE_URL = "https://emkc.org/api/v2/piston/execute"
DEFAULT_EXECUTION_TIMEOUT = 30.0

LLM_PROVIDER_CLAUDE = "claude"
LLM_PROVIDER_OPENAI = "openai"
LLM_PROVIDER_OLLAMA = "ollama"
SUPPORTED_LLM_PROVIDERS: tuple[str, ...] = (
    LLM_PROVIDER_CLAUDE,
    LLM_PROVIDER_OPENAI,
    LLM_PROVIDER_OLLAMA,
)
GENERATION_MAX_TOKENS = 2000
GENERATION_TEMPERATURE = 0.3

CLAUDE_DEFAULT_MODEL = "claude-sonnet-4-20250514"
OPENAI_DEFAULT_MODEL = "gpt-4o"
OLLAMA_DEFAULT_MODEL = "qwen2.5-coder:7b-instruct"
OLLAMA_BASE_URL = "http://localhost:11434/v1"
OLLAMA_API_KEY = "ollama"

ENV_LANGUAGE = "CODESTOPPER_LANGUAGE"
ENV_LLM_PROVIDER = "CODESTOPPER_LLM_PROVIDER"
ENV_LLM_MODEL = "CODESTOPPER_LLM_MODEL"
ENV_EXECUTION_URL = "CODESTOPPER_EXECUTION_URL"
ENV_EXECUTION_TIMEOUT = "CODESTOPPER_EXECUTION_TIMEOUT"
