"""TaskService — thin wrappers around VIVIDUS Java runner classes.

Unlike stories runs, these tasks have no exit-code leniency: anything but
zero is a failure.
"""

from __future__ import annotations

from vividusctl.domain.outcome import AbnormalExitError
from vividusctl.domain.tasks import (
    TEST_INITIALIZATION,
    RunnerTask,
    forwarded_arguments,
    vividus_properties,
)
from vividusctl.infrastructure.java import JavaCommand, LaunchError
from vividusctl.services.base import BaseService
from vividusctl.services.dependencies import DependencyService
from vividusctl.services.result import ServiceResult


class TaskService(BaseService):
    """Runs registered :class:`RunnerTask` entries."""

    def build_command(self, task: RunnerTask) -> JavaCommand:
        properties = self._project.properties
        args: list[str] = []
        for flag, relative in task.fixed_args:
            args.extend([flag, str(self._project.resources_dir / relative)])
        args.extend(forwarded_arguments(task, properties))
        return JavaCommand(
            main_class=task.main_class,
            args=args,
            jvm_args=self._project.jvm_args,
            system_properties=vividus_properties(properties),
            classpath=self._project.classpath,
            interactive=task.interactive,
        )

    def run(self, task: RunnerTask) -> ServiceResult:
        try:
            exit_code = self._launch(self.build_command(task))
        except LaunchError as exc:
            return self._failure(task.op, exc.code, str(exc))

        if exit_code != 0:
            abnormal = AbnormalExitError(exit_code)
            return self._failure(
                task.op,
                abnormal.code,
                str(abnormal),
                {"exit_code": exit_code, "main_class": task.main_class},
            )
        return ServiceResult(
            ok=True,
            op=task.op,
            data={"exit_code": exit_code, "main_class": task.main_class},
        )

    def check(self) -> ServiceResult:
        """Project checks: dependency consistency, then VIVIDUS initialization."""
        deps = DependencyService(self._project).check()
        if not deps.ok:
            return deps.with_op("check")

        init = self.run(TEST_INITIALIZATION)
        if not init.ok:
            return init.with_op("check")

        return ServiceResult(
            ok=True,
            op="check",
            data={"version": deps.data["version"], "initialization": "ok"},
        )
