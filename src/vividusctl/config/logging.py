"""structlog configuration for vividusctl.

vividusctl logs around a child Java process that writes its own output to
the same terminal, so the two modes differ in what they add:

- Human (default): level, logger and message on stderr; no timestamps, the
  VIVIDUS runner already prints them.
- JSON (``--log-json``): one object per line on stderr with an ISO
  timestamp and whatever context is bound, e.g. ``main_class`` while a
  runner is in flight (see :func:`bound_runner`).

The ``vividusctl`` logger sits at INFO (exit-code file notices, ignored exit
values) or DEBUG with ``-v``. Everything else stays at WARNING.
"""

from __future__ import annotations

import logging
import sys
from collections.abc import Iterator
from contextlib import contextmanager

import structlog

APP_LOGGER = "vividusctl"


def _shared_processors(log_json: bool) -> list[structlog.types.Processor]:
    processors: list[structlog.types.Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
    ]
    if log_json:
        processors.append(structlog.processors.TimeStamper(fmt="iso"))
    processors.extend(
        [
            structlog.processors.StackInfoRenderer(),
            structlog.processors.UnicodeDecoder(),
        ]
    )
    return processors


def configure_logging(
    *,
    verbose: bool = False,
    log_json: bool = False,
) -> None:
    """Route stdlib and structlog records through one stderr handler.

    Args:
        verbose: DEBUG for the ``vividusctl`` logger instead of INFO.
        log_json: JSON lines instead of the console renderer.
    """
    shared = _shared_processors(log_json)

    if log_json:
        renderer: structlog.types.Processor = structlog.processors.JSONRenderer()
        final = [structlog.processors.format_exc_info, renderer]
    else:
        final = [structlog.dev.ConsoleRenderer(colors=sys.stderr.isatty())]

    structlog.configure(
        processors=[*shared, structlog.stdlib.ProcessorFormatter.wrap_for_formatter],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=False,
    )

    formatter = structlog.stdlib.ProcessorFormatter(
        foreign_pre_chain=shared,
        processors=[structlog.stdlib.ProcessorFormatter.remove_processors_meta, *final],
    )

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(formatter)

    root_logger = logging.getLogger()
    root_logger.handlers.clear()
    root_logger.addHandler(handler)
    root_logger.setLevel(logging.WARNING)

    logging.getLogger(APP_LOGGER).setLevel(logging.DEBUG if verbose else logging.INFO)


@contextmanager
def bound_runner(main_class: str) -> Iterator[None]:
    """Tag every record logged inside the block with *main_class*."""
    with structlog.contextvars.bound_contextvars(main_class=main_class):
        yield
