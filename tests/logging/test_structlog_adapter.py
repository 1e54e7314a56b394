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
"""Tests for StructlogAdapter, the default LoggingPort implementation."""

import logging
from typing import Protocol

import pytest
import structlog

from autoconstruct.construction.context import ConstructorContext
from autoconstruct.core.config import Config
from autoconstruct.core.properties import LoggingProperties
from autoconstruct.logging.port import LoggingPort
from autoconstruct.logging.structlog_adapter import StructlogAdapter, get_logger


@pytest.fixture(autouse=True)
def _restore_library_logger():
    library = logging.getLogger("autoconstruct")
    handlers, level, propagate = list(library.handlers), library.level, library.propagate
    yield
    library.handlers[:] = handlers
    library.setLevel(level)
    library.propagate = propagate
    for name in list(logging.root.manager.loggerDict):
        if name.startswith("autoconstruct."):
            logging.getLogger(name).setLevel(logging.NOTSET)
    structlog.reset_defaults()


class TestStructlogAdapterConformance:
    def test_implements_logging_port(self):
        adapter = StructlogAdapter()
        assert isinstance(adapter, LoggingPort)


class TestStructlogAdapterConfigure:
    def test_configure_with_defaults(self):
        adapter = StructlogAdapter()
        adapter.configure(Config({}))
        assert adapter._library_level == "WARNING"
        assert adapter._format == "console"

    def test_configure_reads_library_level(self):
        adapter = StructlogAdapter()
        adapter.configure(Config({"autoconstruct": {"logging": {"level": {"autoconstruct": "debug"}}}}))
        assert adapter._library_level == "DEBUG"
        assert logging.getLogger("autoconstruct").level == logging.DEBUG

    def test_configure_reads_format(self):
        adapter = StructlogAdapter()
        adapter.configure(Config({"autoconstruct": {"logging": {"format": "JSON"}}}))
        assert adapter._format == "json"

    def test_configure_rejects_unknown_format(self):
        adapter = StructlogAdapter()
        with pytest.raises(ValueError, match="LoggingProperties"):
            adapter.configure(Config({"autoconstruct": {"logging": {"format": "xml"}}}))

    def test_configure_reads_per_module_levels(self):
        adapter = StructlogAdapter()
        config = Config({"autoconstruct": {"logging": {"level": {"autoconstruct.construction": "DEBUG"}}}})
        adapter.configure(config)
        assert adapter._module_levels == {"autoconstruct.construction": "DEBUG"}
        assert logging.getLogger("autoconstruct.construction").level == logging.DEBUG

    def test_library_logger_does_not_propagate_to_root(self):
        StructlogAdapter().configure(Config({}))

        library = logging.getLogger("autoconstruct")
        assert library.propagate is False
        assert len(library.handlers) == 1

    def test_reconfigure_replaces_handler(self):
        adapter = StructlogAdapter()
        adapter.configure(Config({}))
        adapter.configure(Config({}))

        assert len(logging.getLogger("autoconstruct").handlers) == 1


class TestLoggingProperties:
    def test_defaults(self):
        properties = Config({}).bind(LoggingProperties)
        assert properties.level == {}
        assert properties.format == "console"


class TestStructlogAdapterLoggers:
    def test_get_logger_returns_bound_logger(self):
        adapter = StructlogAdapter()
        adapter.configure(Config({}))
        logger = adapter.get_logger("autoconstruct.test")
        assert callable(getattr(logger, "info", None))
        assert callable(getattr(logger, "debug", None))

    def test_module_level_get_logger(self):
        logger = get_logger("autoconstruct.test")
        assert callable(getattr(logger, "debug", None))

    def test_set_level(self):
        adapter = StructlogAdapter()
        adapter.set_level("autoconstruct.registry", "WARNING")
        assert logging.getLogger("autoconstruct.registry").level == logging.WARNING


class Dependency(Protocol):
    def run(self) -> None: ...


class Service:
    def __init__(self, dependency: Dependency, name: str) -> None:
        self.dependency = dependency
        self.name = name


class TestUnconfiguredLibraryLogging:
    def test_build_writes_nothing_to_stdout(self, capsys):
        context = ConstructorContext(Service)
        context.inject("svc")

        context.build()

        captured = capsys.readouterr()
        assert captured.out == ""
        assert "construction.completed" not in captured.err

    def test_library_loggers_are_stdlib_backed(self):
        logger = get_logger("autoconstruct.construction.context")
        assert isinstance(logger.bind(), structlog.stdlib.BoundLogger)

    def test_debug_events_reach_stdlib_when_enabled(self, caplog):
        caplog.set_level(logging.DEBUG, logger="autoconstruct")

        get_logger("autoconstruct.construction.context").debug("construction.completed", target="Service")

        assert any("construction.completed" in record.getMessage() for record in caplog.records)
