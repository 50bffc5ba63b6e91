"""Custom Click base classes.

``VividusCommand`` adds an ``--examples`` flag (print usage examples and
exit) and, for commands that wrap a Java entry point, names that entry point
at the end of ``--help``. ``VividusGroup`` makes it the default command class.
"""

from __future__ import annotations

from typing import Any

import click


def _examples_option(examples: str) -> click.Option:
    def show_examples(ctx: click.Context, _param: click.Parameter, value: bool) -> None:
        if not value:
            return
        click.echo(f"Examples for '{ctx.command_path}':\n")
        click.echo(examples)
        ctx.exit(0)

    return click.Option(
        ["--examples"],
        is_flag=True,
        expose_value=False,
        is_eager=True,
        callback=show_examples,
        help="Show usage examples.",
    )


class VividusCommand(click.Command):
    """Command with optional ``examples`` text and wrapped ``main_class``."""

    def __init__(
        self,
        *args: Any,
        examples: str | None = None,
        main_class: str | None = None,
        **kwargs: Any,
    ) -> None:
        if main_class and not kwargs.get("epilog"):
            kwargs["epilog"] = f"Java entry point: {main_class}"
        super().__init__(*args, **kwargs)
        self.examples = examples
        self.main_class = main_class
        if examples:
            self.params.append(_examples_option(examples))


class VividusGroup(click.Group):
    """Root group; subcommands default to :class:`VividusCommand`."""

    command_class = VividusCommand

    def __init__(self, *args: Any, examples: str | None = None, **kwargs: Any) -> None:
        super().__init__(*args, **kwargs)
        self.examples = examples
        if examples:
            self.params.append(_examples_option(examples))
