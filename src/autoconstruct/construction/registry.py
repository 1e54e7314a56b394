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
"""Injection registry — caller-supplied actual parameters for one signature."""

from __future__ import annotations

from typing import Any, TypeVar

from autoconstruct.construction.types import (
    MISSING,
    ConstructorSignature,
    FormalParameter,
    InjectionEntry,
    InjectionKind,
)
from autoconstruct.kernel.exceptions import (
    DuplicateNamedInjectionError,
    DuplicateUnnamedInjectionError,
    ParameterTypeMismatchError,
    UnknownParameterNameError,
    UnusedParameterTypeError,
)
from autoconstruct.logging import get_logger

V = TypeVar("V")

logger = get_logger("autoconstruct.construction.registry")


class InjectionRegistry:
    """Named and unnamed injections validated against a bound signature.

    At most one named entry per parameter name and at most one unnamed entry
    per declared type. Calls are expected to be sequential; the conflict
    checks are not guarded against concurrent use.
    """

    def __init__(self, signature: ConstructorSignature) -> None:
        self._signature = signature
        self._named: dict[str, InjectionEntry] = {}
        self._unnamed: dict[Any, InjectionEntry] = {}

    @property
    def entries(self) -> list[InjectionEntry]:
        """All recorded entries, named first, each group in injection order."""
        return [*self._named.values(), *self._unnamed.values()]

    def record(self, declared_type: Any, value: V, parameter_name: str | None = None) -> V:
        """Validate and store one injection, returning *value* unchanged.

        Raises:
            UnusedParameterTypeError: unnamed, and no parameter has *declared_type*.
            DuplicateUnnamedInjectionError: unnamed, and *declared_type* was injected before.
            UnknownParameterNameError: named, and the constructor has no such parameter.
            ParameterTypeMismatchError: named, and the parameter has a different type.
            DuplicateNamedInjectionError: named, and the name was injected before.
        """
        if parameter_name is None:
            if not self._signature.declares_type(declared_type):
                raise UnusedParameterTypeError(self._signature.target, declared_type)
            if declared_type in self._unnamed:
                raise DuplicateUnnamedInjectionError(declared_type)
            self._unnamed[declared_type] = InjectionEntry(declared_type, value, InjectionKind.UNNAMED)
        else:
            parameter = self._signature.parameter(parameter_name)
            if parameter is None:
                raise UnknownParameterNameError(self._signature.target, parameter_name)
            if parameter.declared_type != declared_type:
                raise ParameterTypeMismatchError(parameter_name, parameter.declared_type, declared_type)
            if parameter_name in self._named:
                raise DuplicateNamedInjectionError(parameter_name)
            self._named[parameter_name] = InjectionEntry(parameter_name, value, InjectionKind.NAMED)

        logger.debug(
            "injection.recorded",
            target=self._signature.target.__qualname__,
            parameter=parameter_name,
            declared_type=getattr(declared_type, "__qualname__", repr(declared_type)),
        )
        return value

    def lookup(self, parameter: FormalParameter) -> Any:
        """Return the injected value for *parameter*, or MISSING.

        A named entry wins over an unnamed entry for the same declared type.
        """
        entry = self._named.get(parameter.name)
        if entry is None:
            entry = self._unnamed.get(parameter.declared_type)
        return MISSING if entry is None else entry.value
