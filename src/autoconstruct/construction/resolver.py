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
"""Signature resolution — picking the constructor a context builds with."""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any

from autoconstruct.construction.metadata import IntrospectingMetadataProvider, TypeMetadataProvider
from autoconstruct.construction.types import ConstructorSignature
from autoconstruct.kernel.exceptions import (
    AmbiguousConstructorError,
    NoMatchingConstructorError,
    NoPublicConstructorError,
)
from autoconstruct.logging import get_logger

logger = get_logger("autoconstruct.construction.resolver")


class SignatureResolver:
    """Discovers and disambiguates the target constructor of a class."""

    def __init__(self, metadata_provider: TypeMetadataProvider | None = None) -> None:
        self._metadata = metadata_provider or IntrospectingMetadataProvider()

    def resolve_single(self, target: type) -> ConstructorSignature:
        """Return the only public constructor of *target*.

        Raises:
            NoPublicConstructorError: *target* has no public constructor.
            AmbiguousConstructorError: *target* has more than one.
        """
        constructors = self._metadata.public_constructors_of(target)
        if not constructors:
            raise NoPublicConstructorError(target)
        if len(constructors) > 1:
            raise AmbiguousConstructorError(target, len(constructors))

        signature = constructors[0]
        logger.debug(
            "signature.resolved",
            target=target.__qualname__,
            selector=signature.selector,
            arity=len(signature),
        )
        return signature

    def resolve_by_parameter_types(
        self,
        target: type,
        parameter_types: Sequence[Any],
    ) -> ConstructorSignature:
        """Return the first public constructor whose declared types equal *parameter_types*.

        Matching is by exact type, position by position; assignability is
        not considered.

        Raises:
            NoMatchingConstructorError: no constructor has that type list.
        """
        wanted = tuple(parameter_types)
        for signature in self._metadata.public_constructors_of(target):
            if signature.matches(wanted):
                logger.debug(
                    "signature.resolved",
                    target=target.__qualname__,
                    selector=signature.selector,
                    arity=len(signature),
                )
                return signature
        raise NoMatchingConstructorError(target, wanted)
