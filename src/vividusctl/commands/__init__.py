"""Subcommand modules for vividusctl.

Provides register_commands() which uses deferred imports to keep
``vividusctl --help`` fast.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import click


def register_commands(cli: click.Group) -> None:
    """Register all commands on the root CLI group.

    Project checks and stories commands are hand-written; the thin Java
    runner tasks are generated from the task registry.
    """
    from vividusctl.commands.check import check, check_dependencies
    from vividusctl.commands.stories import debug_stories, run_stories, validate_run_statistics
    from vividusctl.commands.tasks import task_commands

    cli.add_command(check_dependencies)
    cli.add_command(check)
    cli.add_command(run_stories)
    cli.add_command(debug_stories)
    cli.add_command(validate_run_statistics)

    for command in task_commands():
        cli.add_command(command)
