"""Tests for the format_result dispatcher, OutputSettings and renderers."""

import json

from vividusctl.output.formatters import OutputSettings, format_result
from vividusctl.services.result import ServiceError, ServiceResult


def _ok(op: str = "test", **data: object) -> ServiceResult:
    return ServiceResult(ok=True, op=op, data=dict(data))


def _err(op: str = "test", msg: str = "fail", **detail: object) -> ServiceResult:
    return ServiceResult(
        ok=False,
        op=op,
        error=ServiceError(code="ERR", message=msg, detail=dict(detail)),
    )


class TestOutputSettings:
    def test_defaults(self) -> None:
        s = OutputSettings()
        assert s.json_output is False
        assert s.quiet is False
        assert s.verbose is False


class TestJsonMode:
    def test_returns_valid_json(self) -> None:
        output = format_result(
            _ok("run_stories", exit_code=0), settings=OutputSettings(json_output=True)
        )
        data = json.loads(output)
        assert data["ok"] is True
        assert data["data"]["exit_code"] == 0

    def test_json_beats_quiet(self) -> None:
        output = format_result(
            _err("run_stories", "Bad"), settings=OutputSettings(json_output=True, quiet=True)
        )
        assert json.loads(output)["error"]["message"] == "Bad"


class TestQuietMode:
    def test_ok(self) -> None:
        assert format_result(_ok("count_steps"), settings=OutputSettings(quiet=True)) == (
            "OK: count_steps"
        )

    def test_error(self) -> None:
        output = format_result(_err("count_steps", "boom"), settings=OutputSettings(quiet=True))
        assert output == "ERROR: count_steps — boom"


class TestHumanMode:
    def test_stories_renderer(self) -> None:
        output = format_result(
            _ok("run_stories", exit_code=1, verdict="known_issues_only", exit_code_file="/b/e.txt")
        )
        assert output.splitlines()[0] == "OK  run_stories"
        assert "verdict: known_issues_only" in output
        assert "exit_code: 1" in output
        assert "exit_code_file: /b/e.txt" in output

    def test_dependencies_renderer_unspecified_version(self) -> None:
        output = format_result(_ok("check_dependencies", version=None, count=1))
        assert "version: unspecified" in output

    def test_generic_renderer(self) -> None:
        output = format_result(_ok("count_steps", exit_code=0, main_class="Main"))
        assert "main_class: Main" in output

    def test_error_shows_offending_names(self) -> None:
        output = format_result(_err("check_dependencies", "mismatch", names=["a", "b"]))
        assert output.splitlines()[0] == "ERROR  check_dependencies — mismatch"
        assert "names: ['a', 'b']" in output

    def test_error_hides_detail_unless_verbose(self) -> None:
        result = _err("run_stories", "exit", exit_code=2)
        assert "exit_code" not in format_result(result)
        assert "exit_code: 2" in format_result(result, settings=OutputSettings(verbose=True))
