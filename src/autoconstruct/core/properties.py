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
"""Typed configuration sections bound from :class:`Config`."""

from __future__ import annotations

from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field, field_validator

from autoconstruct.core.config import config_properties


@config_properties(prefix="autoconstruct.construction")
class ConstructionProperties(BaseModel):
    """Settings for ``ConstructorContext.build()``.

    Attributes:
        honor_defaults: Pass a parameter's declared default instead of
            failing when it is neither injected nor mockable.
    """

    model_config = ConfigDict(frozen=True, extra="ignore")

    honor_defaults: bool = False


@config_properties(prefix="autoconstruct.mock")
class MockProperties(BaseModel):
    """Settings for generated fallback substitutes.

    Attributes:
        spec_set: Reject reads and writes of attributes outside the mocked
            contract.
    """

    model_config = ConfigDict(frozen=True, extra="ignore")

    spec_set: bool = True


@config_properties(prefix="autoconstruct.logging")
class LoggingProperties(BaseModel):
    """Settings for the structlog adapter.

    Attributes:
        level: Logger name to level, e.g. ``{"autoconstruct": "DEBUG"}``.
        format: ``console`` or ``json`` rendering.
    """

    model_config = ConfigDict(frozen=True, extra="ignore")

    level: dict[str, str] = Field(default_factory=dict)
    format: Literal["console", "json"] = "console"

    @field_validator("format", mode="before")
    @classmethod
    def _lowercase_format(cls, value: Any) -> Any:
        return value.lower() if isinstance(value, str) else value
