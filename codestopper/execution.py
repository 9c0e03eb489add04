"""Remote execution through the Piston code-execution API."""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any

import requests

from . import constants
from .language import Language, parse_language

logger = logging.getLogger(__name__)


class ExecutionError(Exception):
    """Raised when the execution service cannot run the code."""

    pass


@dataclass(frozen=True)
class PistonRuntime:
    language: str
    version: str
    file_name: str


PISTON_RUNTIMES: dict[Language, PistonRuntime] = {
    Language.PYTHON: PistonRuntime("python", "3.10.0", "main.py"),
    Language.JAVA: PistonRuntime("java", "15.0.2", "Main.java"),
    Language.CPP: PistonRuntime("cpp", "10.2.0", "main.cpp"),
}


@dataclass(frozen=True)
class ExecutionResult:
    """Outcome of one remote run."""

    stdout: str = ""
    stderr: str = ""
    compile_error: str = ""
    exit_code: int = 0

    @property
    def succeeded(self) -> bool:
        return not self.compile_error and self.exit_code == 0

    def render(self) -> str:
        """Format the result the way the output panel shows it."""
        if self.compile_error:
            text = f"Compilation Error:\n{self.compile_error}"
        elif self.stderr:
            text = f"Runtime Error:\n{self.stderr}"
            if self.stdout:
                text = f"Output:\n{self.stdout}\n\n{text}"
        elif self.stdout:
            text = f"Output:\n{self.stdout}"
        else:
            text = "Program executed successfully (no output)"
        return f"{text}\n\n[Exit code: {self.exit_code}]"


class Executor(ABC):
    @abstractmethod
    def execute(self, source: str, language: Language | str) -> ExecutionResult: ...


class PistonExecutor(Executor):
    """Posts source to a Piston ``/execute`` endpoint. The session is injectable."""

    def __init__(
        self,
        url: str = constants.PISTON_EXECUTE_URL,
        timeout: float = constants.DEFAULT_EXECUTION_TIMEOUT,
        session: Any = None,
    ):
        self._url = url
        self._timeout = timeout
        self._session = session if session is not None else requests.Session()

    def _payload(self, source: str, runtime: PistonRuntime) -> dict[str, Any]:
        return {
            "language": runtime.language,
            "version": runtime.version,
            "files": [{"name": runtime.file_name, "content": source}],
        }

    def execute(self, source: str, language: Language | str) -> ExecutionResult:
        language = parse_language(language)
        runtime = PISTON_RUNTIMES.get(language)
        if runtime is None:
            raise ExecutionError(f"Unsupported language '{language.value}'")

        logger.info(
            "Executing %s (%s %s) via %s",
            runtime.file_name,
            runtime.language,
            runtime.version,
            self._url,
        )
        try:
            response = self._session.post(
                self._url, json=self._payload(source, runtime), timeout=self._timeout
            )
        except requests.RequestException as exc:
            raise ExecutionError(f"Execution request failed: {exc}") from exc

        if response.status_code == 429:
            raise ExecutionError("Rate limit exceeded, please try again later.")
        if not response.ok:
            raise ExecutionError(f"API error: {response.status_code}")

        try:
            data = response.json()
        except ValueError as exc:
            raise ExecutionError("Execution service returned invalid JSON") from exc

        run = data.get("run") or {}
        compile_stage = data.get("compile") or {}
        exit_code = run.get("code")
        result = ExecutionResult(
            stdout=run.get("stdout") or "",
            stderr=run.get("stderr") or "",
            compile_error=compile_stage.get("stderr") or "",
            exit_code=exit_code if exit_code is not None else 0,
        )
        logger.info("Execution finished with exit code %d", result.exit_code)
        return result
