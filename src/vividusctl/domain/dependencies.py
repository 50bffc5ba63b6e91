"""VIVIDUS dependency declarations and the version consistency rule.

Every ``org.vividus`` dependency of a test project must resolve to one
VIVIDUS version. Two layouts are accepted:

- BOM: ``org.vividus:vividus-bom:<version>`` pins the version and no other
  ``org.vividus`` declaration carries its own version.
- Pinned: no BOM, and every ``org.vividus`` declaration repeats the version
  of the mandatory ``org.vividus:vividus`` declaration.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from typing import Any

VIVIDUS_GROUP = "org.vividus"
VIVIDUS_LIB = "vividus"
VIVIDUS_BOM = "vividus-bom"


@dataclass(frozen=True)
class DependencyDeclaration:
    """One declared library dependency in ``group:name[:version]`` form."""

    group: str
    name: str
    version: str | None = None

    @classmethod
    def parse(cls, notation: str) -> DependencyDeclaration:
        """Parse Gradle/Maven coordinate notation.

        An empty version segment (``org.vividus:vividus:``) means no version.

        Raises:
            ValueError: If the notation is not ``group:name`` or
                ``group:name:version``.
        """
        parts = [part.strip() for part in notation.strip().split(":")]
        if len(parts) not in (2, 3):
            msg = f"Invalid dependency notation {notation!r}: expected 'group:name[:version]'"
            raise ValueError(msg)
        group, name = parts[0], parts[1]
        if not group or not name:
            msg = f"Invalid dependency notation {notation!r}: group and name are required"
            raise ValueError(msg)
        version = parts[2] if len(parts) == 3 and parts[2] else None
        return cls(group=group, name=name, version=version)

    @property
    def notation(self) -> str:
        if self.version is None:
            return f"{self.group}:{self.name}"
        return f"{self.group}:{self.name}:{self.version}"


# --- Errors ---


class DependencyConsistencyError(Exception):
    """Base class for dependency consistency violations."""

    code = "DEPENDENCY_CONSISTENCY"

    @property
    def detail(self) -> dict[str, Any]:
        return {}


class MissingMandatoryDependencyError(DependencyConsistencyError):
    code = "MISSING_MANDATORY_DEPENDENCY"

    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(
            f"The mandatory '{name}' dependency is missing in project dependencies configuration."
        )

    @property
    def detail(self) -> dict[str, Any]:
        return {"name": self.name}


class MissingBomVersionError(DependencyConsistencyError):
    code = "MISSING_BOM_VERSION"

    def __init__(self) -> None:
        super().__init__(
            f"Please specify version for '{VIVIDUS_BOM}' dependency in project "
            "dependencies configuration."
        )


class RedundantVersionsWithBomError(DependencyConsistencyError):
    code = "REDUNDANT_VERSIONS_WITH_BOM"

    def __init__(self, names: list[str]) -> None:
        self.names = names
        super().__init__(
            "Versions for the following dependencies should be removed as you use "
            f"'{VIVIDUS_BOM}' dependency in project dependencies configuration: "
            + ", ".join(names)
        )

    @property
    def detail(self) -> dict[str, Any]:
        return {"names": self.names}


class VersionMismatchError(DependencyConsistencyError):
    code = "VERSION_MISMATCH"

    def __init__(self, names: list[str], expected: str | None) -> None:
        self.names = names
        self.expected = expected
        shown = expected if expected is not None else "unspecified"
        super().__init__(
            f"The following dependencies must be of {shown} version: " + ", ".join(names)
        )

    @property
    def detail(self) -> dict[str, Any]:
        return {"names": self.names, "expected": self.expected}


# --- Filter predicates ---


def in_group(declaration: DependencyDeclaration, group: str = VIVIDUS_GROUP) -> bool:
    return declaration.group == group


def is_named(
    declaration: DependencyDeclaration, name: str, group: str = VIVIDUS_GROUP
) -> bool:
    return in_group(declaration, group) and declaration.name == name


def find_declaration(
    declarations: Iterable[DependencyDeclaration], name: str
) -> DependencyDeclaration | None:
    """Return the first ``org.vividus`` declaration called *name*, if any."""
    return next((d for d in declarations if is_named(d, name)), None)


# --- Rule ---


def check_consistency(declarations: Iterable[DependencyDeclaration]) -> str | None:
    """Verify VIVIDUS dependencies agree on one version and return it.

    Declarations outside the ``org.vividus`` group are ignored.

    Raises:
        MissingMandatoryDependencyError: No ``org.vividus:vividus`` declaration.
        MissingBomVersionError: The BOM declaration has no version.
        RedundantVersionsWithBomError: A BOM is used and siblings still pin versions.
        VersionMismatchError: No BOM and siblings disagree with ``vividus``.
    """
    group = [d for d in declarations if in_group(d)]

    vividus_lib = find_declaration(group, VIVIDUS_LIB)
    if vividus_lib is None:
        raise MissingMandatoryDependencyError(VIVIDUS_LIB)

    bom = find_declaration(group, VIVIDUS_BOM)
    if bom is not None:
        if not bom.version:
            raise MissingBomVersionError()
        redundant = [d.name for d in group if d.version is not None and d.name != VIVIDUS_BOM]
        if redundant:
            raise RedundantVersionsWithBomError(redundant)
        return bom.version

    expected = vividus_lib.version
    mismatched = [d.name for d in group if d.version != expected]
    if mismatched:
        raise VersionMismatchError(mismatched, expected)
    return expected
