"""Shared pytest fixtures and test helpers for vividusctl tests."""

from __future__ import annotations

import logging
from collections.abc import Callable, Generator
from pathlib import Path

import pytest
from click.testing import CliRunner

from vividusctl.config.settings import VividusSettings
from vividusctl.infrastructure.java import JavaCommand
from vividusctl.infrastructure.project import Project

DEFAULT_TOML = """\
[project]
classpath = ["lib/*"]
jvm_args = ["-Xmx1g"]
dependencies = [
    "org.vividus:vividus:0.6.10",
    "org.vividus:vividus-plugin-web-app:0.6.10",
    "org.slf4j:slf4j-api:2.0.9",
]
"""


class FakeLauncher:
    """Records launched commands and answers with scripted exit codes.

    The last exit code repeats once the script runs out.
    """

    def __init__(self, *exit_codes: int) -> None:
        self.exit_codes = list(exit_codes or (0,))
        self.commands: list[JavaCommand] = []

    def launch(self, command: JavaCommand) -> int:
        self.commands.append(command)
        if len(self.exit_codes) > 1:
            return self.exit_codes.pop(0)
        return self.exit_codes[0]


@pytest.fixture(autouse=True)
def _restore_logging() -> Generator[None]:
    """CLI invocations reconfigure the root logger; undo that per test."""
    root = logging.getLogger()
    original_handlers = root.handlers[:]
    original_level = root.level
    app = logging.getLogger("vividusctl")
    app_level = app.level
    yield
    root.handlers = original_handlers
    root.setLevel(original_level)
    app.setLevel(app_level)


@pytest.fixture(autouse=True)
def _no_config_env(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("VIVIDUSCTL_CONFIG", raising=False)


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a Click CLI test runner."""
    return CliRunner()


@pytest.fixture
def project_root(tmp_path: Path) -> Path:
    """Temporary project directory with a default vividusctl.toml."""
    (tmp_path / "vividusctl.toml").write_text(DEFAULT_TOML, encoding="utf-8")
    (tmp_path / "src" / "main" / "resources").mkdir(parents=True)
    return tmp_path


@pytest.fixture
def make_project(project_root: Path) -> Callable[..., Project]:
    """Factory building a Project on *project_root* with a FakeLauncher.

    Keyword ``toml`` replaces the config file; ``properties`` are ``-P`` values.
    """

    def _make(
        launcher: FakeLauncher | None = None,
        *,
        toml: str | None = None,
        properties: dict[str, str] | None = None,
    ) -> Project:
        if toml is not None:
            (project_root / "vividusctl.toml").write_text(toml, encoding="utf-8")
        settings = VividusSettings.from_cli(
            project_root=project_root, cli_properties=properties or {}
        )
        return Project(settings, launcher=launcher or FakeLauncher())

    return _make


@pytest.fixture
def _isolated_project(project_root: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    """Change CWD to the temp project so the CLI discovers its config.

    Use via ``@pytest.mark.usefixtures("_isolated_project")`` on command test
    classes.
    """
    monkeypatch.chdir(project_root)
