"""Commands: run and debug stories, validate run statistics."""

from __future__ import annotations

from collections.abc import Callable
from typing import TYPE_CHECKING, Any

import click

from vividusctl.commands._base import VividusCommand
from vividusctl.domain.tasks import STORIES_RUNNER

if TYPE_CHECKING:
    from vividusctl.commands._context import AppContext
    from vividusctl.services.result import ServiceResult


def _stories_options(func: Callable[..., Any]) -> Callable[..., Any]:
    """Options shared by run-stories and debug-stories."""
    options = [
        click.option(
            "--treat-known-issues-only-as-passed",
            "treat_known_issues",
            is_flag=True,
            help="Treat a run failing only on known issues as passed.",
        ),
        click.option(
            "--exit-code-file",
            default=None,
            metavar="PATH",
            help="Save the runner exit code to this file.",
        ),
        click.option(
            "--resolve-against-build-dir/--no-resolve-against-build-dir",
            "resolve_against_build_dir",
            default=None,
            help="Resolve --exit-code-file against the build directory.",
        ),
        click.option(
            "--validate-statistics",
            is_flag=True,
            help="Validate run statistics afterwards; the exit code becomes informational.",
        ),
    ]
    for option in reversed(options):
        func = option(func)
    return func


def _run(
    app: AppContext,
    *,
    treat_known_issues: bool,
    exit_code_file: str | None,
    resolve_against_build_dir: bool | None,
    validate_statistics: bool,
) -> ServiceResult:
    from vividusctl.services.statistics import StatisticsService
    from vividusctl.services.stories import StoriesService

    statistics = StatisticsService(app.project)
    if validate_statistics:
        missing = statistics.precheck()
        if missing is not None:
            return missing

    stories = StoriesService(app.project).run_with_overrides(
        treat_known_issues_only_as_passed=True if treat_known_issues else None,
        file_to_save_exit_code=exit_code_file,
        resolve_path_against_project_build_dir=resolve_against_build_dir,
        statistics_validation_requested=validate_statistics,
    )
    if not stories.ok or not validate_statistics:
        return stories

    return statistics.validate().with_warnings(stories.warnings)


@click.command(
    "run-stories",
    cls=VividusCommand,
    main_class=STORIES_RUNNER,
    examples="""\
  vividusctl run-stories
  vividusctl run-stories --treat-known-issues-only-as-passed
  vividusctl run-stories --exit-code-file exit-code.txt --resolve-against-build-dir
  vividusctl -P expectedRunStatistics=expected.json run-stories --validate-statistics""",
)
@_stories_options
@click.pass_obj
def run_stories(
    app: AppContext,
    treat_known_issues: bool,
    exit_code_file: str | None,
    resolve_against_build_dir: bool | None,
    validate_statistics: bool,
) -> None:
    """Run stories after checking VIVIDUS dependencies."""
    from vividusctl.services.dependencies import DependencyService

    deps = DependencyService(app.project).check()
    if not deps.ok:
        app.emit(deps)
        return

    app.emit(
        _run(
            app,
            treat_known_issues=treat_known_issues,
            exit_code_file=exit_code_file,
            resolve_against_build_dir=resolve_against_build_dir,
            validate_statistics=validate_statistics,
        )
    )


@click.command(
    "debug-stories",
    cls=VividusCommand,
    main_class=STORIES_RUNNER,
    examples="""\
  vividusctl debug-stories
  vividusctl -P vividus.batch-1.resource-location=story/debug debug-stories""",
)
@_stories_options
@click.pass_obj
def debug_stories(
    app: AppContext,
    treat_known_issues: bool,
    exit_code_file: str | None,
    resolve_against_build_dir: bool | None,
    validate_statistics: bool,
) -> None:
    """Debug stories (all build checks are ignored)."""
    app.emit(
        _run(
            app,
            treat_known_issues=treat_known_issues,
            exit_code_file=exit_code_file,
            resolve_against_build_dir=resolve_against_build_dir,
            validate_statistics=validate_statistics,
        )
    )


@click.command(
    "validate-run-statistics",
    cls=VividusCommand,
    examples="""\
  vividusctl -P expectedRunStatistics=expected/statistics.json validate-run-statistics""",
)
@click.option(
    "--skip-run",
    is_flag=True,
    help="Compare statistics of the previous run without running stories.",
)
@click.pass_obj
def validate_run_statistics(app: AppContext, skip_run: bool) -> None:
    """Run stories after checking VIVIDUS dependencies, then compare run statistics."""
    if skip_run:
        from vividusctl.services.statistics import StatisticsService

        app.emit(StatisticsService(app.project).validate())
        return

    from vividusctl.services.dependencies import DependencyService

    deps = DependencyService(app.project).check()
    if not deps.ok:
        app.emit(deps)
        return

    app.emit(
        _run(
            app,
            treat_known_issues=False,
            exit_code_file=None,
            resolve_against_build_dir=None,
            validate_statistics=True,
        )
    )
