"""Registry of thin runner tasks backed by VIVIDUS Java entry points."""

from __future__ import annotations

from dataclasses import dataclass

STORIES_RUNNER = "org.vividus.runner.StoriesRunner"
VIVIDUS_PROPERTY_PREFIX = "vividus."


@dataclass(frozen=True)
class RunnerTask:
    """A named command mapped onto one Java main class.

    Attributes:
        arguments: Project property names forwarded as ``--<name> <value>``
            when the property is set.
        fixed_args: Extra arguments derived from the project layout. Each
            value is a path relative to the resources directory.
        interactive: Inherit stdin so the process can talk over stdio.
    """

    name: str
    main_class: str
    description: str
    arguments: tuple[str, ...] = ()
    fixed_args: tuple[tuple[str, str], ...] = ()
    interactive: bool = False

    @property
    def op(self) -> str:
        return self.name.replace("-", "_")


PRINT_STEPS = RunnerTask(
    name="print-steps",
    main_class="org.vividus.runner.StepsPrinter",
    description="Prints available steps in alphabetical order.",
    arguments=("file",),
)
COUNT_SCENARIOS = RunnerTask(
    name="count-scenarios",
    main_class="org.vividus.runner.ScenariosCounter",
    description="Counts scenarios in project.",
)
COUNT_STEPS = RunnerTask(
    name="count-steps",
    main_class="org.vividus.runner.StepsCounter",
    description="Counts steps in project.",
)
VALIDATE_KNOWN_ISSUES = RunnerTask(
    name="validate-known-issues",
    main_class="org.vividus.runner.KnownIssueValidator",
    description="Validates configuration of known issues.",
)
TEST_INITIALIZATION = RunnerTask(
    name="test-initialization",
    main_class="org.vividus.runner.VividusInitializationChecker",
    description="Tests VIVIDUS initialization.",
    arguments=("ignoreBeans",),
)
REPLACE_DEPRECATED_STEPS = RunnerTask(
    name="replace-deprecated-steps",
    main_class="org.vividus.runner.DeprecatedStepsReplacer",
    description="Replace deprecated steps in stories and composite steps.",
    fixed_args=(("--resourceLocation", "."),),
)
REPLACE_DEPRECATED_PROPERTIES = RunnerTask(
    name="replace-deprecated-properties",
    main_class="org.vividus.runner.DeprecatedPropertiesReplacer",
    description="Replace deprecated properties.",
    fixed_args=(("--propertiesRootDirectory", "properties"),),
)
START_MCP_SERVER = RunnerTask(
    name="start-mcp-server",
    main_class="org.vividus.mcp.McpServer",
    description="Start VIVIDUS MCP server.",
    interactive=True,
)

RUNNER_TASKS: dict[str, RunnerTask] = {
    task.name: task
    for task in (
        PRINT_STEPS,
        COUNT_SCENARIOS,
        COUNT_STEPS,
        VALIDATE_KNOWN_ISSUES,
        TEST_INITIALIZATION,
        REPLACE_DEPRECATED_STEPS,
        REPLACE_DEPRECATED_PROPERTIES,
        START_MCP_SERVER,
    )
}


def vividus_properties(properties: dict[str, str]) -> dict[str, str]:
    """Project properties forwarded to the JVM as system properties."""
    return {k: v for k, v in properties.items() if k.startswith(VIVIDUS_PROPERTY_PREFIX)}


def forwarded_arguments(task: RunnerTask, properties: dict[str, str]) -> list[str]:
    """Turn the task's declared argument names into ``--name value`` pairs."""
    args: list[str] = []
    for name in task.arguments:
        if name in properties:
            args.extend([f"--{name}", properties[name]])
    return args
