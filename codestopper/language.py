"""Supported languages and the per-language rule tables the scanner dispatches on."""

from __future__ import annotations

import re
from dataclasses import dataclass
from enum import Enum
from pathlib import Path

from . import constants


class UnsupportedLanguageError(ValueError):
    """Raised when a language tag is outside the supported enumeration."""

    pass


class Language(str, Enum):
    PYTHON = "python"
    JAVA = "java"
    CPP = "cpp"


@dataclass(frozen=True)
class LanguageRules:
    """Static rule table for one language.

    ``statement_markers`` flag a line as a statement that needs a terminator;
    ``header_patterns`` exempt control-structure headers and declarations.
    Both only apply when ``requires_terminators`` is set.
    """

    display_name: str
    file_extensions: tuple[str, ...]
    skip_prefixes: tuple[str, ...] = constants.SKIP_PREFIXES
    requires_terminators: bool = False
    statement_markers: tuple[re.Pattern[str], ...] = ()
    header_patterns: tuple[re.Pattern[str], ...] = ()


_C_FAMILY_STATEMENT_MARKERS: tuple[re.Pattern[str], ...] = (
    re.compile(r"\bcout\b"),
    re.compile(r"\bcin\b"),
    re.compile(r"System\.out"),
    re.compile(r"\breturn\b"),
    re.compile(r"(?<![=!<>])=(?!=)"),
    re.compile(r"\w\s*\(.*\)"),
)

_C_FAMILY_HEADER_PATTERNS: tuple[re.Pattern[str], ...] = (
    re.compile(r"^(if|for|while)\b.*\)$"),
    re.compile(r"^else\b"),
    re.compile(r"^(public\s+)?class\b"),
    re.compile(r"^#"),
    re.compile(r"^using\s+namespace\b.*;$"),
)

_RULES: dict[Language, LanguageRules] = {
    Language.PYTHON: LanguageRules(
        display_name="Python",
        file_extensions=(".py",),
    ),
    Language.JAVA: LanguageRules(
        display_name="Java",
        file_extensions=(".java",),
        requires_terminators=True,
        statement_markers=_C_FAMILY_STATEMENT_MARKERS,
        header_patterns=_C_FAMILY_HEADER_PATTERNS,
    ),
    Language.CPP: LanguageRules(
        display_name="C++",
        file_extensions=(".cpp", ".cc", ".cxx", ".hpp", ".h"),
        requires_terminators=True,
        statement_markers=_C_FAMILY_STATEMENT_MARKERS,
        header_patterns=_C_FAMILY_HEADER_PATTERNS,
    ),
}

SUPPORTED_LANGUAGES: tuple[str, ...] = tuple(lang.value for lang in Language)


def rules_for(language: Language) -> LanguageRules:
    """Return the rule table for *language*."""
    return _RULES[language]


def parse_language(value: str | Language) -> Language:
    """Coerce a user-supplied tag (``"java"``, ``"CPP"``...) into a :class:`Language`.

    Raises ``UnsupportedLanguageError`` for anything outside the enumeration.
    """
    if isinstance(value, Language):
        return value
    try:
        return Language(value.strip().lower())
    except ValueError as exc:
        raise UnsupportedLanguageError(
            f"Unsupported language: {value!r}. "
            f"Supported: {', '.join(SUPPORTED_LANGUAGES)}"
        ) from exc


def language_for_path(path: str | Path) -> Language:
    """Infer the language of a source file from its extension."""
    suffix = Path(path).suffix.lower()
    for language, rules in _RULES.items():
        if suffix in rules.file_extensions:
            return language
    raise UnsupportedLanguageError(
        f"Cannot infer language from file extension {suffix!r} ({path})"
    )
