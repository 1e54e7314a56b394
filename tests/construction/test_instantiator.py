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
"""Tests for DefaultInstantiator."""

import pytest

from autoconstruct.construction.instantiator import DefaultInstantiator, Instantiator
from autoconstruct.construction.types import ConstructorSignature, FormalParameter
from autoconstruct.kernel.exceptions import InstantiationError


class Widget:
    def __init__(self, size: int, *, label: str = "") -> None:
        self.size = size
        self.label = label

    @classmethod
    def large(cls, label: str) -> "Widget":
        return cls(100, label=label)


class Exploding:
    def __init__(self, size: int) -> None:
        raise ValueError("boom")


def signature_of(target, *names, selector="__init__"):
    params = tuple(FormalParameter(name=n, declared_type=int, position=i) for i, n in enumerate(names))
    return ConstructorSignature(target=target, parameters=params, selector=selector)


class TestDefaultInstantiator:
    def test_implements_port(self):
        assert isinstance(DefaultInstantiator(), Instantiator)

    def test_calls_class_for_init(self):
        widget = DefaultInstantiator().construct(signature_of(Widget, "size"), [3], {"label": "a"})

        assert isinstance(widget, Widget)
        assert (widget.size, widget.label) == (3, "a")

    def test_calls_factory_for_named_selector(self):
        widget = DefaultInstantiator().construct(signature_of(Widget, "label", selector="large"), ["big"], {})

        assert (widget.size, widget.label) == (100, "big")

    def test_arity_mismatch_is_instantiation_error(self):
        with pytest.raises(InstantiationError) as exc_info:
            DefaultInstantiator().construct(signature_of(Widget), [1, 2, 3], {})
        assert exc_info.value.selector == "__init__"
        assert "Widget" in str(exc_info.value)

    def test_constructor_errors_propagate_unchanged(self):
        with pytest.raises(ValueError, match="boom"):
            DefaultInstantiator().construct(signature_of(Exploding, "size"), [1], {})
