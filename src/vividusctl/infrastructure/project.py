"""Project — the single dependency injected into every service.

Resolves the configured layout (build directory, resources, classpath)
against the project root once, and owns the Java launcher used to start
VIVIDUS entry points.
"""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

from vividusctl.infrastructure.java import JavaLauncher

if TYPE_CHECKING:
    from vividusctl.config.models import StatisticsConfig, StoriesOptions
    from vividusctl.config.settings import VividusSettings


class Project:
    """A VIVIDUS test project on disk."""

    def __init__(self, settings: VividusSettings, launcher: JavaLauncher | None = None) -> None:
        self.settings = settings
        self.root = settings.project_root.resolve()
        self.launcher = launcher or JavaLauncher(settings.java.executable, self.root)

    def _resolve(self, raw: str) -> Path:
        path = Path(raw).expanduser()
        return path if path.is_absolute() else self.root / path

    @property
    def build_dir(self) -> Path:
        return self._resolve(self.settings.project.build_dir)

    @property
    def resources_dir(self) -> Path:
        return self._resolve(self.settings.project.resources_dir)

    @property
    def classpath(self) -> list[str]:
        return [str(self._resolve(entry)) for entry in self.settings.project.classpath]

    @property
    def jvm_args(self) -> list[str]:
        return list(self.settings.project.jvm_args)

    @property
    def dependencies(self) -> list[str]:
        return list(self.settings.project.dependencies)

    @property
    def properties(self) -> dict[str, str]:
        return self.settings.project_properties

    @property
    def stories(self) -> StoriesOptions:
        return self.settings.stories

    @property
    def statistics(self) -> StatisticsConfig:
        return self.settings.statistics
