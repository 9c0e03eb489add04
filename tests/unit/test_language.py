"""Tests for language tags, rule tables and starting templates."""

from __future__ import annotations

import pytest

from codestopper.language import (
    SUPPORTED_LANGUAGES,
    Language,
    UnsupportedLanguageError,
    language_for_path,
    parse_language,
    rules_for,
)
from codestopper.templates import template_for


class TestParseLanguage:
    def test_enum_passthrough(self):
        assert parse_language(Language.JAVA) is Language.JAVA

    @pytest.mark.parametrize("raw", ["cpp", "CPP", " Cpp "])
    def test_case_and_whitespace_insensitive(self, raw):
        assert parse_language(raw) is Language.CPP

    def test_unknown_language_raises(self):
        with pytest.raises(UnsupportedLanguageError, match="Unsupported language"):
            parse_language("rust")

    def test_error_is_a_value_error(self):
        with pytest.raises(ValueError):
            parse_language("cobol")

    def test_supported_languages(self):
        assert SUPPORTED_LANGUAGES == ("python", "java", "cpp")


class TestLanguageForPath:
    @pytest.mark.parametrize(
        "path,expected",
        [
            ("main.py", Language.PYTHON),
            ("src/Main.java", Language.JAVA),
            ("main.cpp", Language.CPP),
            ("lib/util.HPP", Language.CPP),
            ("a.cc", Language.CPP),
        ],
    )
    def test_known_extensions(self, path, expected):
        assert language_for_path(path) is expected

    def test_unknown_extension_raises(self):
        with pytest.raises(UnsupportedLanguageError, match="Cannot infer language"):
            language_for_path("notes.txt")


class TestRules:
    def test_only_c_family_requires_terminators(self):
        assert not rules_for(Language.PYTHON).requires_terminators
        assert rules_for(Language.JAVA).requires_terminators
        assert rules_for(Language.CPP).requires_terminators

    def test_every_language_skips_comment_lines(self):
        for language in Language:
            assert rules_for(language).skip_prefixes == ("//", "#", "/*")


class TestTemplates:
    def test_each_language_has_a_template(self):
        for language in Language:
            assert template_for(language)

    def test_template_headers(self):
        assert template_for(Language.PYTHON).startswith("# Python Code")
        assert "public class Main" in template_for(Language.JAVA)
        assert "#include <iostream>" in template_for(Language.CPP)
