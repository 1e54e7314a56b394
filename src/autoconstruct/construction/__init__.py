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
"""AutoConstruct construction — signature resolution, injection and mock fallback."""

from autoconstruct.construction.context import ConstructorContext
from autoconstruct.construction.instantiator import DefaultInstantiator, Instantiator
from autoconstruct.construction.markers import constructor, nonpublic
from autoconstruct.construction.metadata import IntrospectingMetadataProvider, TypeMetadataProvider
from autoconstruct.construction.mock import MockProvider, StrictMockProvider, is_capability_type
from autoconstruct.construction.registry import InjectionRegistry
from autoconstruct.construction.resolver import SignatureResolver
from autoconstruct.construction.types import (
    MISSING,
    ConstructorSignature,
    FormalParameter,
    InjectionEntry,
    InjectionKind,
    ParameterKind,
)

__all__ = [
    "MISSING",
    "ConstructorContext",
    "ConstructorSignature",
    "DefaultInstantiator",
    "FormalParameter",
    "InjectionEntry",
    "InjectionKind",
    "InjectionRegistry",
    "Instantiator",
    "IntrospectingMetadataProvider",
    "MockProvider",
    "ParameterKind",
    "SignatureResolver",
    "StrictMockProvider",
    "TypeMetadataProvider",
    "constructor",
    "is_capability_type",
    "nonpublic",
]
