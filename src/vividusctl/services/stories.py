"""StoriesService — run stories and interpret the runner's exit code.

Order of a run:

1. Launch ``org.vividus.runner.StoriesRunner`` and wait for it.
2. Persist the raw exit code when a file is configured, whatever it is.
3. Interpret the exit code (see :mod:`vividusctl.domain.outcome`).
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from pydantic import ValidationError

from vividusctl.config.models import StoriesOptions
from vividusctl.domain.outcome import (
    AbnormalExitError,
    ProcessOutcome,
    interpret,
    notice_for,
)
from vividusctl.domain.tasks import STORIES_RUNNER, vividus_properties
from vividusctl.infrastructure.filesystem import resolve_exit_code_path, write_exit_code
from vividusctl.infrastructure.java import JavaCommand, LaunchError
from vividusctl.services.base import BaseService
from vividusctl.services.result import ServiceResult

if TYPE_CHECKING:
    from vividusctl.infrastructure.project import Project

logger = logging.getLogger(__name__)

OP = "run_stories"
OUTPUT_DIRECTORY_PROPERTY = "vividus.output.directory"

# Project properties that override the [stories] section.
_PROPERTY_FIELDS = {
    "fileToSaveExitCode": "file_to_save_exit_code",
    "resolvePathAgainstProjectBuildDir": "resolve_path_against_project_build_dir",
}


def resolve_options(
    project: Project,
    *,
    treat_known_issues_only_as_passed: bool | None = None,
    file_to_save_exit_code: str | None = None,
    resolve_path_against_project_build_dir: bool | None = None,
) -> StoriesOptions:
    """Layer stories options: config < project properties < explicit arguments.

    Explicit arguments left as None fall through to the lower layers.
    """
    merged: dict[str, Any] = project.stories.model_dump()
    props = project.properties
    for prop, field_name in _PROPERTY_FIELDS.items():
        if props.get(prop):
            merged[field_name] = props[prop]

    explicit = {
        "treat_known_issues_only_as_passed": treat_known_issues_only_as_passed,
        "file_to_save_exit_code": file_to_save_exit_code,
        "resolve_path_against_project_build_dir": resolve_path_against_project_build_dir,
    }
    merged.update({k: v for k, v in explicit.items() if v is not None})
    return StoriesOptions.model_validate(merged)


class StoriesService(BaseService):
    """Runs stories through the VIVIDUS stories runner."""

    def build_command(self) -> JavaCommand:
        system_properties = {
            OUTPUT_DIRECTORY_PROPERTY: str(self._project.build_dir),
            **vividus_properties(self._project.properties),
        }
        return JavaCommand(
            main_class=STORIES_RUNNER,
            jvm_args=self._project.jvm_args,
            system_properties=system_properties,
            classpath=self._project.classpath,
        )

    def run_with_overrides(
        self,
        *,
        treat_known_issues_only_as_passed: bool | None = None,
        file_to_save_exit_code: str | None = None,
        resolve_path_against_project_build_dir: bool | None = None,
        statistics_validation_requested: bool = False,
    ) -> ServiceResult:
        """Resolve options via :func:`resolve_options`, then :meth:`run`."""
        try:
            options = resolve_options(
                self._project,
                treat_known_issues_only_as_passed=treat_known_issues_only_as_passed,
                file_to_save_exit_code=file_to_save_exit_code,
                resolve_path_against_project_build_dir=resolve_path_against_project_build_dir,
            )
        except ValidationError as exc:
            errors = exc.errors()
            return self._failure(
                OP,
                "INVALID_OPTION",
                f"Invalid stories options: {errors[0]['msg']}",
                {"errors": [str(e["loc"][0]) for e in errors]},
            )
        return self.run(options, statistics_validation_requested=statistics_validation_requested)

    def run(
        self,
        options: StoriesOptions,
        *,
        statistics_validation_requested: bool = False,
    ) -> ServiceResult:
        """Run stories and report the interpreted result.

        Args:
            options: Exit-code handling for this run.
            statistics_validation_requested: Statistics are validated in the
                same invocation, so the exit code is informational only.
        """
        try:
            exit_code = self._launch(self.build_command())
        except LaunchError as exc:
            return self._failure(OP, exc.code, str(exc))

        exit_code_file: str | None = None
        if options.file_to_save_exit_code:
            path = resolve_exit_code_path(
                options.file_to_save_exit_code,
                project_root=self._project.root,
                build_dir=self._project.build_dir,
                resolve_against_build_dir=options.resolve_path_against_project_build_dir,
            )
            try:
                write_exit_code(path, exit_code)
            except OSError as exc:
                return self._failure(
                    OP,
                    "EXIT_CODE_WRITE_FAILED",
                    f"Unable to save exit code {exit_code} to {path}: {exc}",
                    {"exit_code": exit_code, "path": str(path)},
                )
            logger.info("Exit code is saved to the file: %s", path)
            exit_code_file = str(path)

        outcome = ProcessOutcome(
            exit_code=exit_code,
            known_issues_only_as_passed=options.treat_known_issues_only_as_passed,
            statistics_validation_requested=statistics_validation_requested,
        )
        try:
            verdict = interpret(outcome)
        except AbnormalExitError as exc:
            return self._failure(
                OP,
                exc.code,
                str(exc),
                {"exit_code": exc.exit_code, "exit_code_file": exit_code_file},
            )

        warnings: list[str] = []
        notice = notice_for(verdict, exit_code)
        if notice:
            logger.warning(notice)
            warnings.append(notice)

        return ServiceResult(
            ok=True,
            op=OP,
            data={
                "exit_code": exit_code,
                "verdict": str(verdict),
                "exit_code_file": exit_code_file,
            },
            warnings=warnings,
        )
