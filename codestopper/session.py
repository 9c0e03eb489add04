"""EditorSession — wires a buffer, a gate and the optional collaborators."""

from __future__ import annotations

import logging
from dataclasses import dataclass

from .buffer import TextBuffer
from .codegen import CodeGenerator
from .diagnostics import ValidationVerdict
from .execution import ExecutionResult, Executor
from .gate import Gate
from .language import Language, parse_language
from .presentation import GateStatus, Presenter, format_status
from .templates import template_for

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class RunOutcome:
    result: ExecutionResult
    safe_to_run: bool


class EditorSession:
    """One editing session: every edit goes through the gate.

    Execution and generation are optional; calling them without the
    collaborator configured raises ``RuntimeError``.
    """

    def __init__(
        self,
        language: Language | str = Language.PYTHON,
        presenter: Presenter | None = None,
        executor: Executor | None = None,
        generator: CodeGenerator | None = None,
    ):
        language = parse_language(language)
        self.buffer = TextBuffer(template_for(language))
        self.gate = Gate(self.buffer, language, presenter)
        self._executor = executor
        self._generator = generator

    @property
    def language(self) -> Language:
        return self.gate.language

    @property
    def status_text(self) -> str:
        return format_status(self.gate.status, self.gate.diagnostic)

    def type_text(self, chars: str) -> ValidationVerdict:
        """Insert *chars* at the cursor; embedded newlines are typed via Enter.

        A refused Enter is dropped and the following characters continue on
        the current line, as keystrokes would in the editor.
        """
        for index, chunk in enumerate(chars.split("\n")):
            if index > 0:
                self.press_enter()
            if chunk:
                self.buffer.insert(chunk)
                self.gate.on_change(self.buffer.text)
        if self.gate.verdict is None:
            return self.gate.on_change(self.buffer.text)
        return self.gate.verdict

    def backspace(self, count: int = 1) -> ValidationVerdict:
        self.buffer.delete_backward(count)
        return self.gate.on_change(self.buffer.text)

    def set_text(self, text: str) -> ValidationVerdict:
        self.buffer.replace(text)
        return self.gate.on_change(self.buffer.text)

    def press_enter(self) -> bool:
        """Attempt a newline; an accepted one is rescanned like any other edit."""
        inserted = self.gate.on_enter()
        if inserted:
            self.gate.on_change(self.buffer.text)
        return inserted

    def set_language(self, language: Language | str) -> None:
        self.gate.set_language(language)

    def clear(self) -> None:
        self.gate.clear()

    def run(self) -> RunOutcome:
        """Execute the buffer. The verdict is reported, never enforced."""
        if self._executor is None:
            raise RuntimeError("No executor configured for this session")
        safe = self.gate.is_safe_to_run
        if not safe:
            logger.warning("Running code with a pending syntax error: %s", self.status_text)
        result = self._executor.execute(self.buffer.text, self.language)
        return RunOutcome(result=result, safe_to_run=safe)

    def generate(self, prompt: str) -> ValidationVerdict:
        """Replace the buffer with generated code and rescan it."""
        if self._generator is None:
            raise RuntimeError("No code generator configured for this session")
        code = self._generator.generate(prompt, self.language)
        return self.set_text(code)

    @property
    def is_idle(self) -> bool:
        return self.gate.status == GateStatus.IDLE
