"""Tests for the runner task registry and argument forwarding."""

from vividusctl.domain.tasks import (
    PRINT_STEPS,
    RUNNER_TASKS,
    START_MCP_SERVER,
    TEST_INITIALIZATION,
    forwarded_arguments,
    vividus_properties,
)


class TestRegistry:
    def test_all_tasks_registered(self) -> None:
        assert set(RUNNER_TASKS) == {
            "print-steps",
            "count-scenarios",
            "count-steps",
            "validate-known-issues",
            "test-initialization",
            "replace-deprecated-steps",
            "replace-deprecated-properties",
            "start-mcp-server",
        }

    def test_op_name(self) -> None:
        assert PRINT_STEPS.op == "print_steps"

    def test_only_mcp_server_is_interactive(self) -> None:
        interactive = [t.name for t in RUNNER_TASKS.values() if t.interactive]
        assert interactive == [START_MCP_SERVER.name]


class TestVividusProperties:
    def test_filters_prefix(self) -> None:
        props = {
            "vividus.variables.env": "qa",
            "fileToSaveExitCode": "exit.txt",
            "vividusx": "no",
        }
        assert vividus_properties(props) == {"vividus.variables.env": "qa"}


class TestForwardedArguments:
    def test_forwards_present_property(self) -> None:
        assert forwarded_arguments(PRINT_STEPS, {"file": "steps.txt"}) == ["--file", "steps.txt"]

    def test_skips_absent_property(self) -> None:
        assert forwarded_arguments(PRINT_STEPS, {"other": "x"}) == []

    def test_ignore_beans(self) -> None:
        args = forwarded_arguments(TEST_INITIALIZATION, {"ignoreBeans": "a,b"})
        assert args == ["--ignoreBeans", "a,b"]
