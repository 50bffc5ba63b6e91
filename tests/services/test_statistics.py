"""Tests for StatisticsService — expected vs actual run statistics."""

from __future__ import annotations

import json
import logging
from collections.abc import Callable
from pathlib import Path

import pytest

from vividusctl.infrastructure.project import Project
from vividusctl.services.statistics import StatisticsService

STATS = {"stories": {"passed": 2, "failed": 0}, "scenarios": {"passed": 5}}


def _write(path: Path, payload: object) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(json.dumps(payload), encoding="utf-8")


@pytest.fixture
def build_dir(project_root: Path) -> Path:
    return project_root / "build"


class TestPrecheck:
    def test_missing_property(self, make_project: Callable[..., Project]) -> None:
        result = StatisticsService(make_project()).precheck()
        assert result is not None
        assert result.error is not None
        assert result.error.code == "MISSING_PROPERTY"
        assert result.error.message == 'project property "expectedRunStatistics" should be set'

    def test_property_set(self, make_project: Callable[..., Project]) -> None:
        project = make_project(properties={"expectedRunStatistics": "expected.json"})
        assert StatisticsService(project).precheck() is None

    def test_config_fallback(self, make_project: Callable[..., Project]) -> None:
        project = make_project(toml='[statistics]\nexpected = "cfg.json"\n')
        svc = StatisticsService(project)
        assert svc.precheck() is None
        assert svc.expected() == "cfg.json"


class TestValidate:
    def test_equal_documents(
        self,
        make_project: Callable[..., Project],
        build_dir: Path,
        caplog: pytest.LogCaptureFixture,
    ) -> None:
        _write(build_dir / "statistics" / "statistics.json", STATS)
        _write(build_dir / "expected.json", STATS)
        project = make_project(properties={"expectedRunStatistics": "expected.json"})
        with caplog.at_level(logging.WARNING, logger="vividusctl"):
            result = StatisticsService(project).validate()
        assert result.ok is True
        assert result.op == "validate_run_statistics"
        assert "Expected execution statistics" in caplog.text

    def test_key_order_does_not_matter(
        self, make_project: Callable[..., Project], build_dir: Path
    ) -> None:
        _write(build_dir / "statistics" / "statistics.json", STATS)
        (build_dir / "expected.json").write_text(
            '{"scenarios": {"passed": 5}, "stories": {"failed": 0, "passed": 2}}',
            encoding="utf-8",
        )
        project = make_project(properties={"expectedRunStatistics": "expected.json"})
        assert StatisticsService(project).validate().ok is True

    def test_mismatch_reports_keys(
        self, make_project: Callable[..., Project], build_dir: Path
    ) -> None:
        _write(build_dir / "statistics" / "statistics.json", STATS)
        _write(build_dir / "expected.json", {**STATS, "stories": {"passed": 1, "failed": 1}})
        project = make_project(properties={"expectedRunStatistics": "expected.json"})
        result = StatisticsService(project).validate()
        assert result.ok is False
        assert result.error is not None
        assert result.error.code == "STATISTICS_MISMATCH"
        assert result.error.detail["keys"] == ["stories"]

    def test_missing_actual(self, make_project: Callable[..., Project], build_dir: Path) -> None:
        _write(build_dir / "expected.json", STATS)
        project = make_project(properties={"expectedRunStatistics": "expected.json"})
        result = StatisticsService(project).validate()
        assert result.error is not None
        assert result.error.code == "FILE_NOT_FOUND"

    def test_invalid_json(self, make_project: Callable[..., Project], build_dir: Path) -> None:
        _write(build_dir / "statistics" / "statistics.json", STATS)
        (build_dir / "expected.json").write_text("{not json", encoding="utf-8")
        project = make_project(properties={"expectedRunStatistics": "expected.json"})
        result = StatisticsService(project).validate()
        assert result.error is not None
        assert result.error.code == "INVALID_JSON"

    def test_undecodable_file(
        self, make_project: Callable[..., Project], build_dir: Path
    ) -> None:
        _write(build_dir / "statistics" / "statistics.json", STATS)
        (build_dir / "expected.json").write_bytes(b'{"a": "\xff"}')
        project = make_project(properties={"expectedRunStatistics": "expected.json"})
        result = StatisticsService(project).validate()
        assert result.ok is False
        assert result.error is not None
        assert result.error.code == "INVALID_JSON"
        assert result.error.detail["path"] == str(build_dir.resolve() / "expected.json")

    def test_unreadable_file(
        self,
        make_project: Callable[..., Project],
        build_dir: Path,
        monkeypatch: pytest.MonkeyPatch,
    ) -> None:
        _write(build_dir / "statistics" / "statistics.json", STATS)
        _write(build_dir / "expected.json", STATS)
        project = make_project(properties={"expectedRunStatistics": "expected.json"})

        def _denied(path: Path) -> object:
            raise PermissionError(13, "Permission denied", str(path))

        monkeypatch.setattr("vividusctl.services.statistics.read_json", _denied)
        result = StatisticsService(project).validate()
        assert result.error is not None
        assert result.error.code == "READ_FAILED"
        assert "Permission denied" in result.error.message

    def test_missing_property(self, make_project: Callable[..., Project]) -> None:
        result = StatisticsService(make_project()).validate()
        assert result.error is not None
        assert result.error.code == "MISSING_PROPERTY"
