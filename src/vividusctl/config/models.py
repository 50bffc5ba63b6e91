"""Pydantic configuration models with code-baked defaults.

Sparse TOML contract: defaults baked here, vividusctl.toml only contains
overrides. A minimal project needs only ``[project] dependencies``.
"""

from __future__ import annotations

from pydantic import BaseModel, Field

# --- vividusctl.toml sections ---


class ProjectConfig(BaseModel):
    """[project] section."""

    model_config = {"frozen": True}

    build_dir: str = "build"
    resources_dir: str = "src/main/resources"
    classpath: list[str] = Field(default_factory=list)
    jvm_args: list[str] = Field(default_factory=list)
    dependencies: list[str] = Field(default_factory=list)


class JavaConfig(BaseModel):
    """[java] section."""

    model_config = {"frozen": True}

    executable: str = "java"


class StoriesOptions(BaseModel):
    """[stories] section — how a stories run result is treated and persisted."""

    model_config = {"frozen": True, "populate_by_name": True}

    treat_known_issues_only_as_passed: bool = Field(
        default=False, alias="treatKnownIssuesOnlyAsPassed"
    )
    file_to_save_exit_code: str | None = Field(default=None, alias="fileToSaveExitCode")
    resolve_path_against_project_build_dir: bool = Field(
        default=False, alias="resolvePathAgainstProjectBuildDir"
    )


class StatisticsConfig(BaseModel):
    """[statistics] section."""

    model_config = {"frozen": True}

    expected: str | None = None
    actual: str = "statistics/statistics.json"

