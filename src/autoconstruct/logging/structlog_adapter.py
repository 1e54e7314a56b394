# Copyright 2026 Firefly Software Solutions Inc.
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.
"""StructlogAdapter — default LoggingPort implementation using structlog."""

from __future__ import annotations

import logging
import sys
from typing import Any

import structlog

from autoconstruct.core.config import Config
from autoconstruct.core.properties import LoggingProperties

LIBRARY_LOGGER = "autoconstruct"


def get_logger(name: str) -> Any:
    """Get a structured logger wrapping the stdlib logger *name*.

    Events go through the stdlib level check, so until the application or
    :class:`StructlogAdapter` lowers it, debug events are dropped silently.
    """
    return structlog.wrap_logger(logging.getLogger(name), wrapper_class=structlog.stdlib.BoundLogger)


class StructlogAdapter:
    """Default logging adapter backed by structlog.

    Only the ``autoconstruct`` logger hierarchy is touched: it gets its own
    stderr handler and stops propagating, so the test runner's root logging
    setup is left alone. Library modules only emit debug events.
    """

    def __init__(self) -> None:
        self._library_level: str = "WARNING"
        self._format: str = "console"
        self._module_levels: dict[str, str] = {}

    def configure(self, config: Config) -> None:
        """Configure structlog from the ``autoconstruct.logging`` section."""
        properties = config.bind(LoggingProperties)
        levels = {name: level.upper() for name, level in properties.level.items()}
        self._library_level = levels.pop(LIBRARY_LOGGER, self._library_level)
        self._module_levels = levels
        self._format = properties.format

        self._setup_structlog()
        self._apply_levels()

    def get_logger(self, name: str) -> Any:
        """Get a structlog BoundLogger by name."""
        return get_logger(name)

    def set_level(self, name: str, level: str) -> None:
        """Set the log level for a specific stdlib logger."""
        log_level = getattr(logging, level.upper(), logging.INFO)
        logging.getLogger(name).setLevel(log_level)

    def _setup_structlog(self) -> None:
        """Configure structlog processors and the library's stdlib logger."""
        processors: list[structlog.types.Processor] = [
            structlog.stdlib.filter_by_level,
            structlog.contextvars.merge_contextvars,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.StackInfoRenderer(),
        ]

        if self._format == "json":
            processors.append(structlog.processors.JSONRenderer())
        else:
            processors.append(structlog.dev.ConsoleRenderer(colors=False))

        structlog.configure(
            processors=processors,
            logger_factory=structlog.stdlib.LoggerFactory(),
            wrapper_class=structlog.stdlib.BoundLogger,
            cache_logger_on_first_use=True,
        )

        library = logging.getLogger(LIBRARY_LOGGER)
        for handler in list(library.handlers):
            library.removeHandler(handler)
        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(logging.Formatter("%(message)s"))
        library.addHandler(handler)
        library.propagate = False
        self.set_level(LIBRARY_LOGGER, self._library_level)

    def _apply_levels(self) -> None:
        """Apply per-module log levels below the library logger."""
        for module, level in self._module_levels.items():
            self.set_level(module, level)
