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
"""Mock fallback — strict autospec substitutes for capability types."""

from __future__ import annotations

import inspect
from typing import Any, Protocol, runtime_checkable
from unittest.mock import DEFAULT, create_autospec

from autoconstruct.construction.metadata import is_protocol
from autoconstruct.kernel.exceptions import UnconfiguredMemberError, UnmockableTypeError
from autoconstruct.logging import get_logger

logger = get_logger("autoconstruct.construction.mock")


@runtime_checkable
class MockProvider(Protocol):
    """Port producing a fallback substitute for an uninjected parameter type."""

    def substitute_for(self, declared_type: Any) -> Any: ...


def is_capability_type(tp: Any) -> bool:
    """True for contracts a substitute may stand in for.

    Only protocols and abstract classes qualify. Concrete classes, builtins,
    unions and Any never do, even when technically patchable.
    """
    return inspect.isclass(tp) and (is_protocol(tp) or inspect.isabstract(tp))


class StrictMockProvider:
    """Default MockProvider backed by ``unittest.mock.create_autospec``.

    Substitutes are instance autospecs with no configured behaviour.
    Coroutine methods become AsyncMock children. Calling a contract method
    the test has not configured raises :class:`UnconfiguredMemberError`;
    setting its ``return_value`` or ``side_effect`` lifts that. With
    *spec_set* any attribute outside the contract is rejected as well.
    """

    def __init__(self, spec_set: bool = True) -> None:
        self._spec_set = spec_set

    def substitute_for(self, declared_type: Any) -> Any:
        if not is_capability_type(declared_type):
            raise UnmockableTypeError(declared_type)

        substitute = create_autospec(declared_type, instance=True, spec_set=self._spec_set)
        for name in _contract_methods(declared_type):
            _require_configuration(getattr(substitute, name), declared_type, name)
        logger.debug("mock.generated", mocked_type=declared_type.__qualname__)
        return substitute


def _contract_methods(tp: type) -> list[str]:
    # create_autospec skips dunders too
    return [
        name
        for name in dir(tp)
        if not (name.startswith("__") and name.endswith("__")) and inspect.isfunction(getattr(tp, name, None))
    ]


def _require_configuration(method: Any, declared_type: type, name: str) -> None:
    placeholder = method.return_value

    def unconfigured(*args: Any, **kwargs: Any) -> Any:
        if method.return_value is placeholder:
            raise UnconfiguredMemberError(declared_type, name)
        return DEFAULT

    method.side_effect = unconfigured
