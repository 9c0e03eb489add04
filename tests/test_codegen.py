"""Tests for CodeGenerator — prompt construction and response cleanup."""

from __future__ import annotations

import pytest

from codestopper import codegen
from codestopper.codegen import (
    CodeGenerationError,
    CodeGenerationPrompts,
    CodeGenerator,
    strip_markdown_fences,
)
from codestopper.language import Language, UnsupportedLanguageError
from codestopper.llm_client import LLMClient


class FakeLLMClient(LLMClient):
    def __init__(self, response: str = "print('hi')"):
        self.response = response
        self.calls: list[dict] = []

    def complete(
        self, system_prompt, user_message, max_tokens=4096, temperature=None
    ):
        self.calls.append(
            {
                "system_prompt": system_prompt,
                "user_message": user_message,
                "max_tokens": max_tokens,
                "temperature": temperature,
            }
        )
        return self.response


class FailingLLMClient(LLMClient):
    def complete(
        self, system_prompt, user_message, max_tokens=4096, temperature=None
    ):
        raise ConnectionError("gateway unreachable")


class TestPrompts:
    def test_system_prompt_names_language(self):
        prompt = CodeGenerationPrompts.system_prompt(Language.CPP)
        assert "Language: CPP" in prompt
        assert "<iostream>" in prompt
        assert "ONLY output the code" in prompt

    def test_user_message(self):
        message = CodeGenerationPrompts.user_message("add two numbers", Language.JAVA)
        assert message == "Write java code that does the following: add two numbers"

    def test_every_language_has_instructions(self):
        for language in Language:
            assert CodeGenerationPrompts.LANGUAGE_INSTRUCTIONS[language]


class TestStripMarkdownFences:
    def test_plain_code_untouched(self):
        assert strip_markdown_fences("x = 1\n") == "x = 1"

    def test_fenced_block(self):
        assert strip_markdown_fences("```python\nx = 1\n```") == "x = 1"

    def test_fence_with_cpp_tag(self):
        assert strip_markdown_fences("```c++\nint x;\n```\n") == "int x;"

    def test_multiple_blocks(self):
        text = "```java\nint a;\n```\n```java\nint b;\n```"
        assert strip_markdown_fences(text) == "int a;\nint b;"


class TestCodeGenerator:
    def test_generate_sends_prompts(self):
        fake = FakeLLMClient()
        code = CodeGenerator(fake).generate("  say hi  ", "python")
        assert code == "print('hi')"
        call = fake.calls[0]
        assert "Language: PYTHON" in call["system_prompt"]
        assert call["user_message"].endswith("following: say hi")
        assert call["max_tokens"] == 2000
        assert call["temperature"] == 0.3

    def test_custom_max_tokens(self):
        fake = FakeLLMClient()
        CodeGenerator(fake, max_tokens=100).generate("x", Language.JAVA)
        assert fake.calls[0]["max_tokens"] == 100

    def test_temperature_can_be_left_to_provider(self):
        fake = FakeLLMClient()
        CodeGenerator(fake, temperature=None).generate("x", Language.JAVA)
        assert fake.calls[0]["temperature"] is None

    def test_strips_fences_from_response(self):
        fake = FakeLLMClient("```cpp\nint main() {\n    return 0;\n}\n```")
        code = CodeGenerator(fake).generate("empty main", Language.CPP)
        assert code == "int main() {\n    return 0;\n}"

    @pytest.mark.parametrize("prompt", ["", "   "])
    def test_missing_prompt(self, prompt):
        fake = FakeLLMClient()
        with pytest.raises(CodeGenerationError, match="Missing prompt"):
            CodeGenerator(fake).generate(prompt, Language.PYTHON)
        assert fake.calls == []

    def test_unsupported_language(self):
        with pytest.raises(UnsupportedLanguageError):
            CodeGenerator(FakeLLMClient()).generate("x", "rust")

    def test_client_failure_is_wrapped(self):
        with pytest.raises(CodeGenerationError, match="gateway unreachable") as info:
            CodeGenerator(FailingLLMClient()).generate("x", Language.PYTHON)
        assert isinstance(info.value.__cause__, ConnectionError)


class TestForProvider:
    def test_builds_on_factory_client(self, monkeypatch):
        fake = FakeLLMClient("int x;")
        seen = {}

        def factory(**kwargs):
            seen.update(kwargs)
            return fake

        monkeypatch.setattr(codegen, "get_llm_client", factory)
        generator = CodeGenerator.for_provider("ollama", model="llama3")
        assert generator.generate("x", Language.CPP) == "int x;"
        assert seen == {"provider": "ollama", "model": "llama3"}

    def test_unknown_provider(self):
        with pytest.raises(ValueError, match="Unknown LLM provider"):
            CodeGenerator.for_provider("gemini")

    def test_sdk_construction_failure_is_wrapped(self, monkeypatch):
        def factory(**kwargs):
            raise RuntimeError("no API key")

        monkeypatch.setattr(codegen, "get_llm_client", factory)
        with pytest.raises(
            CodeGenerationError, match="Cannot create claude client"
        ) as info:
            CodeGenerator.for_provider("claude")
        assert isinstance(info.value.__cause__, RuntimeError)
