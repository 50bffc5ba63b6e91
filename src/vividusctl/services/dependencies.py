"""DependencyService — VIVIDUS dependency version consistency."""

from __future__ import annotations

import logging

from vividusctl.domain.dependencies import (
    DependencyConsistencyError,
    DependencyDeclaration,
    check_consistency,
    in_group,
)
from vividusctl.services.base import BaseService
from vividusctl.services.result import ServiceResult

logger = logging.getLogger(__name__)

OP = "check_dependencies"


class DependencyService(BaseService):
    """Ensures consistency of VIVIDUS dependencies in the project."""

    def check(self) -> ServiceResult:
        declarations: list[DependencyDeclaration] = []
        for notation in self._project.dependencies:
            try:
                declarations.append(DependencyDeclaration.parse(notation))
            except ValueError as exc:
                return self._failure(
                    OP, "INVALID_DEPENDENCY", str(exc), {"notation": notation}
                )

        try:
            version = check_consistency(declarations)
        except DependencyConsistencyError as exc:
            return self._failure(OP, exc.code, str(exc), exc.detail)

        logger.debug("VIVIDUS dependencies resolved to version %s", version)
        return ServiceResult(
            ok=True,
            op=OP,
            data={
                "version": version,
                "count": sum(1 for d in declarations if in_group(d)),
            },
        )
