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
"""Tests for SignatureResolver — single and type-list constructor selection."""

import pytest

from autoconstruct.construction.resolver import SignatureResolver
from autoconstruct.construction.types import ConstructorSignature, FormalParameter
from autoconstruct.kernel.exceptions import (
    AmbiguousConstructorError,
    NoMatchingConstructorError,
    NoPublicConstructorError,
)


class Target:
    pass


class Clock:
    pass


class Sink:
    pass


def signature(*types, selector="__init__"):
    params = tuple(FormalParameter(name=f"p{i}", declared_type=tp, position=i) for i, tp in enumerate(types))
    return ConstructorSignature(target=Target, parameters=params, selector=selector)


class FakeMetadataProvider:
    def __init__(self, *signatures: ConstructorSignature) -> None:
        self.signatures = list(signatures)

    def public_constructors_of(self, target):
        return self.signatures


class TestResolveSingle:
    def test_single_constructor_is_resolved(self):
        only = signature(Clock, Sink)
        resolver = SignatureResolver(FakeMetadataProvider(only))

        resolved = resolver.resolve_single(Target)

        assert resolved is only
        assert len(resolved) == 2

    def test_zero_arity_constructor_is_resolved(self):
        resolver = SignatureResolver(FakeMetadataProvider(signature()))
        assert len(resolver.resolve_single(Target)) == 0

    def test_no_constructors_is_rejected(self):
        resolver = SignatureResolver(FakeMetadataProvider())
        with pytest.raises(NoPublicConstructorError) as exc_info:
            resolver.resolve_single(Target)
        assert exc_info.value.target is Target

    def test_several_constructors_are_ambiguous(self):
        resolver = SignatureResolver(FakeMetadataProvider(signature(Clock), signature(Sink)))
        with pytest.raises(AmbiguousConstructorError) as exc_info:
            resolver.resolve_single(Target)
        assert exc_info.value.count == 2
        assert "Target" in str(exc_info.value)


class TestResolveByParameterTypes:
    def test_matching_constructor_is_selected(self):
        wanted = signature(Clock, Sink)
        resolver = SignatureResolver(FakeMetadataProvider(signature(Clock), wanted))

        assert resolver.resolve_by_parameter_types(Target, [Clock, Sink]) is wanted

    def test_order_matters(self):
        resolver = SignatureResolver(FakeMetadataProvider(signature(Clock, Sink)))
        with pytest.raises(NoMatchingConstructorError):
            resolver.resolve_by_parameter_types(Target, [Sink, Clock])

    def test_arity_must_match(self):
        resolver = SignatureResolver(FakeMetadataProvider(signature(Clock, Sink)))
        with pytest.raises(NoMatchingConstructorError):
            resolver.resolve_by_parameter_types(Target, [Clock])

    def test_subclass_does_not_match(self):
        class SystemClock(Clock):
            pass

        resolver = SignatureResolver(FakeMetadataProvider(signature(Clock)))
        with pytest.raises(NoMatchingConstructorError):
            resolver.resolve_by_parameter_types(Target, [SystemClock])

    def test_empty_type_list_selects_parameterless_constructor(self):
        empty = signature()
        resolver = SignatureResolver(FakeMetadataProvider(signature(Clock), empty))

        assert resolver.resolve_by_parameter_types(Target, []) is empty

    def test_first_discovered_match_wins(self):
        first = signature(Clock, selector="__init__")
        second = signature(Clock, selector="from_clock")
        resolver = SignatureResolver(FakeMetadataProvider(first, second))

        assert resolver.resolve_by_parameter_types(Target, (Clock,)) is first

    def test_no_match_names_type_and_requested_types(self):
        resolver = SignatureResolver(FakeMetadataProvider(signature(Clock)))
        with pytest.raises(NoMatchingConstructorError) as exc_info:
            resolver.resolve_by_parameter_types(Target, [str, int])
        assert str(exc_info.value) == "No constructor of Target matches (str, int)"
        assert exc_info.value.parameter_types == (str, int)

    def test_default_provider_introspects_classes(self):
        class Service:
            def __init__(self, clock: Clock, sink: Sink) -> None:
                pass

        resolved = SignatureResolver().resolve_by_parameter_types(Service, [Clock, Sink])
        assert [p.name for p in resolved] == ["clock", "sink"]
