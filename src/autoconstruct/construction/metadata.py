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
"""Type metadata: discovering the public constructors of a class."""

from __future__ import annotations

import inspect
import typing
from typing import Any, Protocol, runtime_checkable

from autoconstruct.construction.markers import is_constructor, is_nonpublic
from autoconstruct.construction.types import (
    INIT_SELECTOR,
    MISSING,
    ConstructorSignature,
    FormalParameter,
    ParameterKind,
)
from autoconstruct.kernel.exceptions import UnresolvableAnnotationError

_SKIPPED_KINDS = (inspect.Parameter.VAR_POSITIONAL, inspect.Parameter.VAR_KEYWORD)
_BOUND_KINDS = (inspect.Parameter.POSITIONAL_ONLY, inspect.Parameter.POSITIONAL_OR_KEYWORD)


@runtime_checkable
class TypeMetadataProvider(Protocol):
    """Port listing the public constructors of a class, in discovery order."""

    def public_constructors_of(self, target: type) -> list[ConstructorSignature]: ...


def is_protocol(tp: Any) -> bool:
    """True for typing.Protocol subclasses (not concrete implementations)."""
    return inspect.isclass(tp) and bool(getattr(tp, "_is_protocol", False))


class IntrospectingMetadataProvider:
    """Default TypeMetadataProvider built on ``inspect`` and ``typing``.

    Public constructors of a class, in order:

    1. each typing.overload of __init__, or __init__ itself when
       it has no overloads (__new__ for classes such as NamedTuple
       that only customise construction there);
    2. each classmethod marked with @constructor, base classes first.

    Anything marked @nonpublic is skipped. Abstract classes and
    protocols cannot be instantiated and so have no public constructors.
    """

    def public_constructors_of(self, target: type) -> list[ConstructorSignature]:
        if not inspect.isclass(target):
            raise TypeError(f"Expected a class, got {target!r}")
        if inspect.isabstract(target) or is_protocol(target):
            return []

        signatures = self._init_constructors(target)
        signatures.extend(self._factory_constructors(target))
        return signatures

    def _init_constructors(self, target: type) -> list[ConstructorSignature]:
        init = target.__init__  # type: ignore[misc]
        if init is object.__init__:
            new = target.__new__
            if new is object.__new__:
                return [ConstructorSignature(target=target)]
            candidates = [new]
        else:
            overloads = typing.get_overloads(init) if inspect.isfunction(init) else []
            candidates = list(overloads) or [init]

        signatures = []
        for func in candidates:
            if is_nonpublic(func):
                continue
            signature = self._signature_of(target, func, INIT_SELECTOR, skip_first=True)
            if signature is not None:
                signatures.append(signature)
        return signatures

    def _factory_constructors(self, target: type) -> list[ConstructorSignature]:
        factories: dict[str, classmethod] = {}
        for klass in reversed(target.__mro__):
            for name, attr in vars(klass).items():
                if isinstance(attr, classmethod) and is_constructor(attr.__func__):
                    factories[name] = attr
                else:
                    # Overridden by something that is not a factory.
                    factories.pop(name, None)

        signatures = []
        for name, attr in factories.items():
            if is_nonpublic(attr.__func__):
                continue
            signature = self._signature_of(target, getattr(target, name), name, skip_first=False)
            if signature is not None:
                signatures.append(signature)
        return signatures

    def _signature_of(
        self,
        target: type,
        func: Any,
        selector: str,
        *,
        skip_first: bool,
    ) -> ConstructorSignature | None:
        try:
            sig = inspect.signature(func)
        except (TypeError, ValueError):
            # Builtins implemented in C expose no signature.
            return None

        hints = self._type_hints(target, func)
        params = list(sig.parameters.values())
        if skip_first and params and params[0].kind in _BOUND_KINDS:
            params = params[1:]

        formal: list[FormalParameter] = []
        for param in params:
            if param.kind in _SKIPPED_KINDS:
                continue
            formal.append(
                FormalParameter(
                    name=param.name,
                    declared_type=hints.get(param.name, Any),
                    position=len(formal),
                    kind=(
                        ParameterKind.KEYWORD_ONLY
                        if param.kind is inspect.Parameter.KEYWORD_ONLY
                        else ParameterKind.POSITIONAL
                    ),
                    default=MISSING if param.default is inspect.Parameter.empty else param.default,
                )
            )
        return ConstructorSignature(target=target, parameters=tuple(formal), selector=selector)

    @staticmethod
    def _type_hints(target: type, func: Any) -> dict[str, Any]:
        func = getattr(func, "__func__", func)
        if not getattr(func, "__annotations__", None):
            return {}
        try:
            hints = typing.get_type_hints(func, localns={target.__name__: target})
        except (NameError, TypeError) as exc:
            raise UnresolvableAnnotationError(target, str(exc)) from exc
        hints.pop("return", None)
        return hints
