"""Commands: dependency consistency and full project check."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from vividusctl.commands._base import VividusCommand

if TYPE_CHECKING:
    from vividusctl.commands._context import AppContext


@click.command(
    "check-dependencies",
    cls=VividusCommand,
    examples="""\
  vividusctl check-dependencies
  vividusctl --json check-dependencies""",
)
@click.pass_obj
def check_dependencies(app: AppContext) -> None:
    """Ensure consistency of VIVIDUS dependencies in the project."""
    from vividusctl.services.dependencies import DependencyService

    app.emit(DependencyService(app.project).check())


@click.command(
    cls=VividusCommand,
    examples="""\
  vividusctl check
  vividusctl -P ignoreBeans=someBean check""",
)
@click.pass_obj
def check(app: AppContext) -> None:
    """Check dependency consistency, then test VIVIDUS initialization."""
    from vividusctl.services.tasks import TaskService

    app.emit(TaskService(app.project).check())
