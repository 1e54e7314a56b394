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
"""ConstructorContext — build one object under test with injected or mocked dependencies."""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any, Generic, TypeVar

from autoconstruct.construction.instantiator import DefaultInstantiator, Instantiator
from autoconstruct.construction.metadata import TypeMetadataProvider
from autoconstruct.construction.mock import MockProvider, StrictMockProvider
from autoconstruct.construction.registry import InjectionRegistry
from autoconstruct.construction.resolver import SignatureResolver
from autoconstruct.construction.types import (
    MISSING,
    ConstructorSignature,
    FormalParameter,
    ParameterKind,
)
from autoconstruct.core.config import Config
from autoconstruct.core.properties import ConstructionProperties, MockProperties
from autoconstruct.kernel.exceptions import AlreadyConstructedError, UnmockableTypeError
from autoconstruct.kernel.types import describe_type
from autoconstruct.logging import get_logger

T = TypeVar("T")
V = TypeVar("V")

logger = get_logger("autoconstruct.construction.context")


class ConstructorContext(Generic[T]):
    """Builds one instance of *target* for a test.

    Dependencies the test cares about are injected explicitly; every other
    constructor parameter whose type is a protocol or abstract class gets a
    strict autospec substitute. Tests therefore keep working when the class
    under test grows a new dependency they do not exercise.

    Usage::

        context = ConstructorContext(OrderService)
        repo = context.inject(create_autospec(OrderRepository, instance=True))
        repo.find.return_value = order

        service = context.build()

    Pass the parameter types of one constructor to choose among several::

        ConstructorContext(OrderService, OrderRepository, Clock)

    A context builds exactly once. It is meant for a single thread; concurrent
    ``inject()`` calls on the same context are the caller's responsibility.
    """

    def __init__(
        self,
        target: type[T],
        *parameter_types: Any,
        config: Config | None = None,
        metadata_provider: TypeMetadataProvider | None = None,
        mock_provider: MockProvider | None = None,
        instantiator: Instantiator | None = None,
    ) -> None:
        resolver = SignatureResolver(metadata_provider)
        if parameter_types:
            signature = resolver.resolve_by_parameter_types(target, parameter_types)
        else:
            signature = resolver.resolve_single(target)
        self._setup(target, signature, config, mock_provider, instantiator)

    @classmethod
    def for_constructor(
        cls,
        target: type[T],
        parameter_types: Sequence[Any],
        *,
        config: Config | None = None,
        metadata_provider: TypeMetadataProvider | None = None,
        mock_provider: MockProvider | None = None,
        instantiator: Instantiator | None = None,
    ) -> ConstructorContext[T]:
        """Bind the constructor with exactly *parameter_types*, even an empty list."""
        signature = SignatureResolver(metadata_provider).resolve_by_parameter_types(target, parameter_types)
        context = cls.__new__(cls)
        context._setup(target, signature, config, mock_provider, instantiator)
        return context

    def _setup(
        self,
        target: type[T],
        signature: ConstructorSignature,
        config: Config | None,
        mock_provider: MockProvider | None,
        instantiator: Instantiator | None,
    ) -> None:
        config = config or Config()
        self._target = target
        self._signature = signature
        self._registry = InjectionRegistry(signature)
        self._properties = config.bind(ConstructionProperties)
        self._mocks = mock_provider or StrictMockProvider(spec_set=config.bind(MockProperties).spec_set)
        self._instantiator = instantiator or DefaultInstantiator()
        self._attempted = False
        self._consumed = False

    @property
    def target(self) -> type[T]:
        return self._target

    @property
    def signature(self) -> ConstructorSignature:
        return self._signature

    @property
    def consumed(self) -> bool:
        """True once ``build()`` has returned an instance."""
        return self._consumed

    def inject(self, value: V, parameter_name: str | None = None, *, as_type: Any = MISSING) -> V:
        """Supply *value* for a constructor parameter and return it unchanged.

        Without *parameter_name* the value is matched by type to every
        parameter declared with exactly that type. With it, only that
        parameter receives the value, and its declared type must match.

        The type is *as_type* when given, else ``value.__class__``. A spec'd
        mock (``create_autospec(Repo, instance=True)``) reports its spec class
        there, so it matches parameters declared as ``Repo``. Pass *as_type*
        for values whose class differs from the declared type, such as a
        concrete implementation of a protocol. ``as_type=None`` stands for
        ``NoneType``, as it does in annotations.
        """
        if as_type is MISSING:
            declared_type = value.__class__
        elif as_type is None:
            declared_type = type(None)
        else:
            declared_type = as_type
        return self._registry.record(declared_type, value, parameter_name)

    def build(self) -> T:
        """Construct the target, filling each parameter in declared order.

        Each parameter takes the named injection for its name, else the
        unnamed injection for its type, else a generated substitute.

        Raises:
            AlreadyConstructedError: ``build()`` was already called, whatever
                the outcome of that call.
            UnmockableTypeError: a parameter was left unfilled and its type
                is not a protocol or abstract class.
        """
        if self._attempted:
            raise AlreadyConstructedError(self._target)
        self._attempted = True

        args: list[Any] = []
        kwargs: dict[str, Any] = {}
        for parameter in self._signature:
            value = self._actual_value(parameter)
            if parameter.kind is ParameterKind.KEYWORD_ONLY:
                kwargs[parameter.name] = value
            else:
                args.append(value)

        instance = self._instantiator.construct(self._signature, args, kwargs)
        self._consumed = True
        logger.debug(
            "construction.completed",
            target=self._target.__qualname__,
            selector=self._signature.selector,
        )
        return instance

    def _actual_value(self, parameter: FormalParameter) -> Any:
        value = self._registry.lookup(parameter)
        if value is not MISSING:
            return value

        try:
            return self._mocks.substitute_for(parameter.declared_type)
        except UnmockableTypeError as exc:
            if self._properties.honor_defaults and parameter.has_default:
                return parameter.default
            exc.add_note(
                f"while filling parameter '{parameter.name}' of {describe_type(self._target)}; "
                "inject a value for it"
            )
            raise
