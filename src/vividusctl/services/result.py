"""ServiceResult and ServiceError — what every service hands back to the CLI.

Services catch domain and launch errors themselves; a failed Java run, a
version mismatch or an unreadable statistics file all arrive here as
``ok=False`` with a stable error ``code``.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field


class ServiceError(BaseModel):
    """Why an operation failed.

    ``detail`` carries machine-readable context such as offending dependency
    names or the runner exit code.
    """

    model_config = {"frozen": True}

    code: str
    message: str
    detail: dict[str, Any] = Field(default_factory=dict)


class ServiceResult(BaseModel):
    """Outcome of one vividusctl operation.

    Attributes:
        ok: Whether the operation succeeded.
        op: Operation name, e.g. ``"run_stories"`` or ``"count_steps"``.
        data: Operation-specific payload on success.
        warnings: Notices such as ignored exit values; never fatal.
        error: Set when ``ok`` is False.
    """

    model_config = {"frozen": True}

    ok: bool
    op: str
    data: dict[str, Any] = Field(default_factory=dict)
    warnings: list[str] = Field(default_factory=list)
    error: ServiceError | None = None

    def with_op(self, op: str) -> ServiceResult:
        """Report this result under a composite operation's name."""
        return self.model_copy(update={"op": op})

    def with_warnings(self, warnings: list[str]) -> ServiceResult:
        """Prepend warnings from an earlier step of the same invocation."""
        if not warnings:
            return self
        return self.model_copy(update={"warnings": [*warnings, *self.warnings]})
