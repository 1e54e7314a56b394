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
"""@constructor factory marker and @nonpublic constructor marker."""

from __future__ import annotations

from collections.abc import Callable
from typing import Any, TypeVar

F = TypeVar("F", bound=Callable[..., Any])

CONSTRUCTOR_ATTR = "__autoconstruct_constructor__"
NONPUBLIC_ATTR = "__autoconstruct_nonpublic__"


def constructor(method: Any) -> Any:
    """Mark a classmethod as an additional public constructor.

    Apply it above @classmethod; the factory's parameters become the
    formal parameters of that constructor::

        class Connection:
            def __init__(self, transport: Transport) -> None: ...

            @constructor
            @classmethod
            def over(cls, transport: Transport, clock: Clock) -> Connection: ...
    """
    if not isinstance(method, classmethod):
        raise TypeError("@constructor must decorate a classmethod (place it above @classmethod)")
    setattr(method.__func__, CONSTRUCTOR_ATTR, True)
    return method


def nonpublic(func: F) -> F:
    """Hide __init__, one of its overloads, or a factory from discovery."""
    target = func.__func__ if isinstance(func, classmethod) else func
    setattr(target, NONPUBLIC_ATTR, True)
    return func


def is_constructor(func: Any) -> bool:
    return getattr(func, CONSTRUCTOR_ATTR, False) is True


def is_nonpublic(func: Any) -> bool:
    return getattr(func, NONPUBLIC_ATTR, False) is True
