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
"""Instantiation of the target through the selected constructor."""

from __future__ import annotations

import inspect
from collections.abc import Mapping, Sequence
from typing import Any, Protocol, runtime_checkable

from autoconstruct.construction.types import INIT_SELECTOR, ConstructorSignature
from autoconstruct.kernel.exceptions import InstantiationError


@runtime_checkable
class Instantiator(Protocol):
    """Port creating the target instance from resolved arguments."""

    def construct(
        self,
        signature: ConstructorSignature,
        args: Sequence[Any],
        kwargs: Mapping[str, Any],
    ) -> Any: ...


class DefaultInstantiator:
    """Calls the class (``__init__`` constructors) or the factory classmethod.

    Arguments are bound against the callable before invoking it so that an
    arity or name mismatch surfaces as :class:`InstantiationError`, while
    exceptions raised inside the constructor propagate unchanged.
    """

    def construct(
        self,
        signature: ConstructorSignature,
        args: Sequence[Any],
        kwargs: Mapping[str, Any],
    ) -> Any:
        target = signature.target
        factory = target if signature.selector == INIT_SELECTOR else getattr(target, signature.selector)

        try:
            inspect.signature(factory).bind(*args, **kwargs)
        except TypeError as exc:
            raise InstantiationError(target, signature.selector, str(exc)) from exc
        except ValueError:
            # No introspectable signature; let the call itself decide.
            pass

        return factory(*args, **kwargs)
