"""Tests for the Piston execution collaborator."""

from __future__ import annotations

import pytest
import requests

from codestopper import constants
from codestopper.execution import (
    ExecutionError,
    ExecutionResult,
    PistonExecutor,
)
from codestopper.language import Language


class FakeResponse:
    """Mimics the parts of requests.Response the executor reads."""

    def __init__(self, payload=None, status_code: int = 200, bad_json: bool = False):
        self._payload = payload or {}
        self.status_code = status_code
        self.ok = status_code < 400
        self._bad_json = bad_json

    def json(self):
        if self._bad_json:
            raise ValueError("not json")
        return self._payload


class FakeSession:
    """Fake requests.Session() recording the last POST."""

    def __init__(self, response: FakeResponse | None = None, error: Exception | None = None):
        self.response = response or FakeResponse()
        self.error = error
        self.last_call: dict = {}

    def post(self, url, json=None, timeout=None):
        self.last_call = {"url": url, "json": json, "timeout": timeout}
        if self.error is not None:
            raise self.error
        return self.response


class TestExecutionResult:
    def test_render_output(self):
        result = ExecutionResult(stdout="hi\n")
        assert result.render() == "Output:\nhi\n\n\n[Exit code: 0]"
        assert result.succeeded

    def test_render_compile_error_wins(self):
        result = ExecutionResult(stdout="x", stderr="y", compile_error="bad", exit_code=1)
        assert result.render().startswith("Compilation Error:\nbad")
        assert not result.succeeded

    def test_render_runtime_error_with_output(self):
        result = ExecutionResult(stdout="partial", stderr="boom", exit_code=1)
        assert result.render() == (
            "Output:\npartial\n\nRuntime Error:\nboom\n\n[Exit code: 1]"
        )

    def test_render_runtime_error_without_output(self):
        result = ExecutionResult(stderr="boom", exit_code=1)
        assert result.render() == "Runtime Error:\nboom\n\n[Exit code: 1]"

    def test_render_no_output(self):
        assert ExecutionResult().render() == (
            "Program executed successfully (no output)\n\n[Exit code: 0]"
        )


class TestPistonExecutor:
    def test_posts_expected_payload(self):
        session = FakeSession()
        PistonExecutor(session=session, timeout=7.5).execute("class Main {}", "java")

        assert session.last_call["url"] == constants.PISTON_EXECUTE_URL
        assert session.last_call["timeout"] == 7.5
        assert session.last_call["json"] == {
            "language": "java",
            "version": "15.0.2",
            "files": [{"name": "Main.java", "content": "class Main {}"}],
        }

    @pytest.mark.parametrize(
        "language,file_name,version",
        [
            (Language.PYTHON, "main.py", "3.10.0"),
            (Language.CPP, "main.cpp", "10.2.0"),
        ],
    )
    def test_runtime_per_language(self, language, file_name, version):
        session = FakeSession()
        PistonExecutor(session=session).execute("", language)
        assert session.last_call["json"]["files"][0]["name"] == file_name
        assert session.last_call["json"]["version"] == version

    def test_custom_url(self):
        session = FakeSession()
        PistonExecutor(url="http://piston.local/execute", session=session).execute("", "python")
        assert session.last_call["url"] == "http://piston.local/execute"

    def test_parses_result(self):
        payload = {
            "compile": {"stderr": ""},
            "run": {"stdout": "42\n", "stderr": "", "code": 0},
        }
        result = PistonExecutor(session=FakeSession(FakeResponse(payload))).execute(
            "print(42)", "python"
        )
        assert result == ExecutionResult(stdout="42\n", exit_code=0)

    def test_compile_error(self):
        payload = {
            "compile": {"stderr": "main.cpp:1: error"},
            "run": {"stdout": "", "stderr": "", "code": 1},
        }
        result = PistonExecutor(session=FakeSession(FakeResponse(payload))).execute(
            "int x", "cpp"
        )
        assert result.compile_error == "main.cpp:1: error"
        assert result.exit_code == 1

    def test_missing_run_section_defaults(self):
        result = PistonExecutor(session=FakeSession(FakeResponse({}))).execute("", "python")
        assert result == ExecutionResult()

    def test_null_exit_code_defaults_to_zero(self):
        payload = {"run": {"stdout": "", "stderr": "", "code": None}}
        result = PistonExecutor(session=FakeSession(FakeResponse(payload))).execute("", "python")
        assert result.exit_code == 0

    def test_rate_limited(self):
        session = FakeSession(FakeResponse(status_code=429))
        with pytest.raises(ExecutionError, match="Rate limit"):
            PistonExecutor(session=session).execute("", "python")

    def test_http_error(self):
        session = FakeSession(FakeResponse(status_code=500))
        with pytest.raises(ExecutionError, match="API error: 500"):
            PistonExecutor(session=session).execute("", "python")

    def test_network_error(self):
        session = FakeSession(error=requests.ConnectionError("no route"))
        with pytest.raises(ExecutionError, match="no route"):
            PistonExecutor(session=session).execute("", "python")

    def test_invalid_json(self):
        session = FakeSession(FakeResponse(bad_json=True))
        with pytest.raises(ExecutionError, match="invalid JSON"):
            PistonExecutor(session=session).execute("", "python")
