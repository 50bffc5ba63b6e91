"""Commands generated from the runner task registry.

Each registered :class:`RunnerTask` becomes a command of the same name.
Declared task arguments are read from project properties, e.g.
``vividusctl -P file=steps.txt print-steps``.
"""

from __future__ import annotations

import click

from vividusctl.commands._base import VividusCommand
from vividusctl.commands._context import AppContext
from vividusctl.domain.tasks import RUNNER_TASKS, RunnerTask


def _examples(task: RunnerTask) -> str:
    lines = [f"  vividusctl {task.name}"]
    for name in task.arguments:
        lines.append(f"  vividusctl -P {name}=<value> {task.name}")
    return "\n".join(lines)


def make_task_command(task: RunnerTask) -> click.Command:
    """Build the Click command that runs *task*."""

    @click.pass_obj
    def callback(app: AppContext) -> None:
        from vividusctl.services.tasks import TaskService

        app.emit(TaskService(app.project).run(task))

    return VividusCommand(
        name=task.name,
        callback=callback,
        help=task.description,
        examples=_examples(task),
        main_class=task.main_class,
    )


def task_commands() -> list[click.Command]:
    return [make_task_command(task) for task in RUNNER_TASKS.values()]
