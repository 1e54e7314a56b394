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
"""Constructor signatures and injection entries."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass, field
from enum import Enum
from typing import Any

INIT_SELECTOR = "__init__"


class _Missing:
    """Marker for an absent default or an unanswered registry lookup."""

    __slots__ = ()

    def __repr__(self) -> str:
        return "MISSING"


MISSING: Any = _Missing()


class ParameterKind(Enum):
    """How the instantiator passes a formal parameter."""

    POSITIONAL = "positional"
    KEYWORD_ONLY = "keyword_only"


class InjectionKind(Enum):
    """Whether an injection was matched by parameter name or by type."""

    NAMED = "named"
    UNNAMED = "unnamed"


@dataclass(frozen=True)
class FormalParameter:
    """One parameter of the selected constructor."""

    name: str
    declared_type: Any
    position: int
    kind: ParameterKind = ParameterKind.POSITIONAL
    default: Any = MISSING

    @property
    def has_default(self) -> bool:
        return self.default is not MISSING


@dataclass(frozen=True)
class ConstructorSignature:
    """Ordered formal parameters of exactly one public constructor of *target*.

    selector names the callable the instantiator invokes: "__init__"
    means calling the class itself, anything else is a factory classmethod.
    """

    target: type
    parameters: tuple[FormalParameter, ...] = ()
    selector: str = INIT_SELECTOR
    _by_name: dict[str, FormalParameter] = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "_by_name", {p.name: p for p in self.parameters})

    def __iter__(self) -> Iterator[FormalParameter]:
        return iter(self.parameters)

    def __len__(self) -> int:
        return len(self.parameters)

    @property
    def parameter_types(self) -> tuple[Any, ...]:
        return tuple(p.declared_type for p in self.parameters)

    def parameter(self, name: str) -> FormalParameter | None:
        """Return the formal parameter called *name*, if declared."""
        return self._by_name.get(name)

    def declares_type(self, declared_type: Any) -> bool:
        """True if at least one parameter is declared with exactly this type."""
        return any(p.declared_type == declared_type for p in self.parameters)

    def matches(self, parameter_types: tuple[Any, ...]) -> bool:
        """Same arity and position-by-position equal declared types."""
        return len(parameter_types) == len(self.parameters) and all(
            p.declared_type == tp for p, tp in zip(self.parameters, parameter_types)
        )


@dataclass(frozen=True)
class InjectionEntry:
    """A caller-supplied actual parameter, keyed by name or by type."""

    key: Any
    value: Any
    kind: InjectionKind
