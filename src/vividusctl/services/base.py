"""BaseService — abstract foundation for all vividusctl services.

Every service receives a :class:`Project` at construction time. The Project
provides the resolved layout, project properties, and the Java launcher.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from vividusctl.config.logging import bound_runner
from vividusctl.services.result import ServiceError, ServiceResult

if TYPE_CHECKING:
    from vividusctl.infrastructure.java import JavaCommand
    from vividusctl.infrastructure.project import Project

logger = logging.getLogger(__name__)


class BaseService:
    """Abstract base for all service-layer classes.

    Usage::

        class StoriesService(BaseService):
            def run(self, options: StoriesOptions) -> ServiceResult:
                exit_code = self._launch(command)
                ...
    """

    def __init__(self, project: Project) -> None:
        self._project = project

    def _launch(self, command: JavaCommand) -> int:
        """Start *command* through the project's launcher. Blocks until exit."""
        with bound_runner(command.main_class):
            logger.info("Running %s", command.main_class)
            return self._project.launcher.launch(command)

    @staticmethod
    def _failure(
        op: str,
        code: str,
        message: str,
        detail: dict[str, Any] | None = None,
        warnings: list[str] | None = None,
    ) -> ServiceResult:
        return ServiceResult(
            ok=False,
            op=op,
            error=ServiceError(code=code, message=message, detail=detail or {}),
            warnings=warnings or [],
        )
