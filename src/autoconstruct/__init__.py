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
"""AutoConstruct — build objects under test with injected values and automatic mocks."""

from autoconstruct.construction import (
    ConstructorContext,
    ConstructorSignature,
    FormalParameter,
    IntrospectingMetadataProvider,
    SignatureResolver,
    StrictMockProvider,
    constructor,
    is_capability_type,
    nonpublic,
)
from autoconstruct.core import Config, ConstructionProperties, MockProperties
from autoconstruct.kernel import (
    AlreadyConstructedError,
    AmbiguousConstructorError,
    AutoConstructException,
    ConstructionException,
    DuplicateNamedInjectionError,
    DuplicateUnnamedInjectionError,
    InjectionException,
    InstantiationError,
    NoMatchingConstructorError,
    NoPublicConstructorError,
    ParameterTypeMismatchError,
    SignatureResolutionException,
    UnconfiguredMemberError,
    UnknownParameterNameError,
    UnmockableTypeError,
    UnresolvableAnnotationError,
    UnusedParameterTypeError,
)

__version__ = "1.0.0"

__all__ = [
    "AlreadyConstructedError",
    "AmbiguousConstructorError",
    "AutoConstructException",
    "Config",
    "ConstructionException",
    "ConstructionProperties",
    "ConstructorContext",
    "ConstructorSignature",
    "DuplicateNamedInjectionError",
    "DuplicateUnnamedInjectionError",
    "FormalParameter",
    "InjectionException",
    "InstantiationError",
    "IntrospectingMetadataProvider",
    "MockProperties",
    "NoMatchingConstructorError",
    "NoPublicConstructorError",
    "ParameterTypeMismatchError",
    "SignatureResolutionException",
    "SignatureResolver",
    "StrictMockProvider",
    "UnconfiguredMemberError",
    "UnknownParameterNameError",
    "UnmockableTypeError",
    "UnresolvableAnnotationError",
    "UnusedParameterTypeError",
    "constructor",
    "is_capability_type",
    "nonpublic",
]
