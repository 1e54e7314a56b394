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
"""Deterministic, human-readable names for types used in error messages.

All types use only the Python standard library.
"""

from __future__ import annotations

from collections.abc import Iterable
from typing import Any, get_origin


def describe_type(tp: Any) -> str:
    """Return a short, stable name for a class or typing construct.

    Plain classes render as their ``__name__`` (``int``, ``OrderRepository``).
    Parameterised generics, unions and other typing constructs render as their
    ``repr`` with the ``typing.`` prefix removed (``list[int]``,
    ``Optional[Clock]``).
    """
    if get_origin(tp) is None and isinstance(tp, type):
        return tp.__name__
    return repr(tp).replace("typing.", "")


def describe_types(types: Iterable[Any]) -> str:
    """Comma-separated :func:`describe_type` names, in the given order."""
    return ", ".join(describe_type(tp) for tp in types)
