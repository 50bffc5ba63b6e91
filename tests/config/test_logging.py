"""Tests for structlog configuration."""

from __future__ import annotations

import json
import logging
import re

import pytest
import structlog

from vividusctl.config.logging import bound_runner, configure_logging


class TestConfigureLogging:
    def test_verbose_enables_debug(self) -> None:
        configure_logging(verbose=True, log_json=False)
        assert logging.getLogger("vividusctl").level == logging.DEBUG
        assert logging.getLogger().level == logging.WARNING

    def test_default_level_is_info(self) -> None:
        configure_logging(verbose=False, log_json=False)
        assert logging.getLogger("vividusctl").level == logging.INFO

    def test_json_mode_output(self, capfd: pytest.CaptureFixture[str]) -> None:
        configure_logging(verbose=False, log_json=True)
        log = structlog.get_logger("vividusctl.test")
        log.warning("json test", exit_code=1)
        captured = capfd.readouterr()
        parsed = json.loads(captured.err.strip())
        assert parsed["event"] == "json test"
        assert parsed["exit_code"] == 1
        assert parsed["level"] == "warning"
        assert parsed["logger"] == "vividusctl.test"
        assert "timestamp" in parsed

    def test_stdlib_logger_info_is_emitted(self, capfd: pytest.CaptureFixture[str]) -> None:
        configure_logging(verbose=False, log_json=True)
        logging.getLogger("vividusctl.services.stories").info(
            "Exit code is saved to the file: %s", "/tmp/exit.txt"
        )
        captured = capfd.readouterr()
        parsed = json.loads(captured.err.strip())
        assert parsed["event"] == "Exit code is saved to the file: /tmp/exit.txt"
        assert parsed["level"] == "info"

    def test_debug_suppressed_without_verbose(self, capfd: pytest.CaptureFixture[str]) -> None:
        configure_logging(verbose=False, log_json=True)
        logging.getLogger("vividusctl.infrastructure.java").debug("hidden")
        assert capfd.readouterr().err == ""

    def test_human_mode_has_no_timestamp(self, capfd: pytest.CaptureFixture[str]) -> None:
        configure_logging(verbose=False, log_json=False)
        logging.getLogger("vividusctl.services.stories").warning("Exit value 3 is ignored")
        err = capfd.readouterr().err
        assert "Exit value 3 is ignored" in err
        assert not re.search(r"\d{4}-\d{2}-\d{2}T", err)

    def test_bound_runner_tags_records(self, capfd: pytest.CaptureFixture[str]) -> None:
        configure_logging(verbose=False, log_json=True)
        log = logging.getLogger("vividusctl.services.base")
        with bound_runner("org.vividus.runner.StepsCounter"):
            log.info("inside")
        log.info("outside")
        inside, outside = (json.loads(line) for line in capfd.readouterr().err.splitlines())
        assert inside["main_class"] == "org.vividus.runner.StepsCounter"
        assert "main_class" not in outside
