"""Launching VIVIDUS Java entry points as blocking child processes.

The classpath travels through the ``CLASSPATH`` environment variable rather
than ``-cp``.
"""

from __future__ import annotations

import logging
import os
import subprocess
from dataclasses import dataclass, field
from pathlib import Path

logger = logging.getLogger(__name__)


class LaunchError(Exception):
    """The Java executable could not be started."""

    code = "LAUNCH_FAILED"


@dataclass(frozen=True)
class JavaCommand:
    """Everything needed to start one Java main class."""

    main_class: str
    args: list[str] = field(default_factory=list)
    jvm_args: list[str] = field(default_factory=list)
    system_properties: dict[str, str] = field(default_factory=dict)
    classpath: list[str] = field(default_factory=list)
    interactive: bool = False


class JavaLauncher:
    """Builds argv/env for a :class:`JavaCommand` and runs it to completion."""

    def __init__(self, executable: str, working_dir: Path) -> None:
        self._executable = executable
        self._working_dir = working_dir

    def build_argv(self, command: JavaCommand) -> list[str]:
        props = [f"-D{k}={v}" for k, v in sorted(command.system_properties.items())]
        return [
            self._executable,
            *command.jvm_args,
            *props,
            command.main_class,
            *command.args,
        ]

    def build_env(self, command: JavaCommand) -> dict[str, str]:
        env = dict(os.environ)
        if command.classpath:
            env["CLASSPATH"] = os.pathsep.join(command.classpath)
        return env

    def launch(self, command: JavaCommand) -> int:
        """Run *command* and block until it exits. Returns the exit code.

        A non-zero exit code is returned, never raised; interpreting it is
        the caller's job.

        Raises:
            LaunchError: The Java executable is missing or not runnable.
        """
        argv = self.build_argv(command)
        logger.debug("Launching %s", " ".join(argv))
        try:
            completed = subprocess.run(
                argv,
                cwd=self._working_dir,
                env=self.build_env(command),
                stdin=None if command.interactive else subprocess.DEVNULL,
                check=False,
            )
        except OSError as exc:
            msg = f"Unable to start '{self._executable}': {exc}"
            raise LaunchError(msg) from exc
        logger.debug("%s exited with %d", command.main_class, completed.returncode)
        return completed.returncode
