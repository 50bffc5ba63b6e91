"""StatisticsService — compare run statistics against an expected snapshot.

The stories runner writes ``<build dir>/statistics/statistics.json``. The
expected snapshot is named by the ``expectedRunStatistics`` project property
(or ``[statistics] expected``) and resolves against the build directory.
"""

from __future__ import annotations

import json
import logging
from typing import Any

from vividusctl.infrastructure.filesystem import read_json
from vividusctl.services.base import BaseService
from vividusctl.services.result import ServiceResult

logger = logging.getLogger(__name__)

OP = "validate_run_statistics"
EXPECTED_PROPERTY = "expectedRunStatistics"


def _differing_keys(expected: Any, actual: Any) -> list[str]:
    if not (isinstance(expected, dict) and isinstance(actual, dict)):
        return []
    keys = expected.keys() | actual.keys()
    return sorted(k for k in keys if expected.get(k) != actual.get(k))


class StatisticsService(BaseService):
    """Validates execution statistics of the last stories run."""

    def expected(self) -> str | None:
        """The expected-statistics location, project property first."""
        return self._project.properties.get(EXPECTED_PROPERTY) or self._project.statistics.expected

    def precheck(self) -> ServiceResult | None:
        """Fail fast before any stories run when nothing to compare against."""
        if self.expected():
            return None
        return self._failure(
            OP,
            "MISSING_PROPERTY",
            f'project property "{EXPECTED_PROPERTY}" should be set',
            {"property": EXPECTED_PROPERTY},
        )

    def validate(self) -> ServiceResult:
        missing = self.precheck()
        if missing is not None:
            return missing

        build_dir = self._project.build_dir
        actual_path = build_dir / self._project.statistics.actual
        expected_path = build_dir / str(self.expected())

        documents: dict[str, Any] = {}
        for label, path in (("expected", expected_path), ("actual", actual_path)):
            if not path.is_file():
                return self._failure(
                    OP, "FILE_NOT_FOUND", f"Statistics file not found: {path}", {"path": str(path)}
                )
            try:
                documents[label] = read_json(path)
            except (json.JSONDecodeError, UnicodeDecodeError) as exc:
                return self._failure(
                    OP, "INVALID_JSON", f"Invalid JSON in {path}: {exc}", {"path": str(path)}
                )
            except OSError as exc:
                return self._failure(
                    OP, "READ_FAILED", f"Cannot read {path}: {exc}", {"path": str(path)}
                )

        logger.warning(
            "Expected execution statistics:\n %s actual execution statistics:\n %s",
            json.dumps(documents["expected"], indent=2),
            json.dumps(documents["actual"], indent=2),
        )

        if documents["expected"] != documents["actual"]:
            return self._failure(
                OP,
                "STATISTICS_MISMATCH",
                "Actual execution statistics differ from the expected ones",
                {
                    "keys": _differing_keys(documents["expected"], documents["actual"]),
                    "expected_file": str(expected_path),
                    "actual_file": str(actual_path),
                },
            )

        return ServiceResult(
            ok=True,
            op=OP,
            data={"expected_file": str(expected_path), "actual_file": str(actual_path)},
        )
