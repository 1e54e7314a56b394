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
"""Configuration from YAML/TOML files, pyproject.toml, env vars, and model binding."""

from __future__ import annotations

import os
import tomllib
from collections.abc import Callable, Mapping
from pathlib import Path
from typing import Any, TypeVar

import yaml  # type: ignore[import-untyped]
from pydantic import BaseModel, ValidationError

T = TypeVar("T")
M = TypeVar("M", bound=BaseModel)

_CONFIG_PROPERTIES_ATTR = "__autoconstruct_config_prefix__"
_ENV_PREFIX = "AUTOCONSTRUCT_"


def config_properties(prefix: str) -> Callable[[type[T]], type[T]]:
    """Mark a Pydantic model as bindable to a configuration prefix.

    Usage:
        @config_properties(prefix="autoconstruct.construction")
        class ConstructionProperties(BaseModel):
            honor_defaults: bool = False
    """

    def decorator(cls: type[T]) -> type[T]:
        setattr(cls, _CONFIG_PROPERTIES_ATTR, prefix)
        return cls

    return decorator


class Config:
    """Hierarchical configuration with dot-notation access.

    Priority (highest wins):
    1. Environment variables (AUTOCONSTRUCT_SECTION_KEY format), only for a
       config returned by :meth:`with_environment`
    2. Configuration dict / file values
    3. Model defaults
    """

    def __init__(self, data: dict[str, Any] | None = None, *, environ: Mapping[str, str] | None = None) -> None:
        self._data: dict[str, Any] = data or {}
        self._environ = environ
        self._loaded_sources: list[str] = []

    def with_environment(self, environ: Mapping[str, str] | None = None) -> Config:
        """Return a copy whose lookups are overridden by ``AUTOCONSTRUCT_*`` variables.

        *environ* defaults to ``os.environ``, read at lookup time.
        """
        instance = Config(self._data, environ=os.environ if environ is None else environ)
        instance._loaded_sources = list(self._loaded_sources)
        return instance

    @property
    def loaded_sources(self) -> list[str]:
        """List of config file paths that were loaded, in merge order."""
        return list(self._loaded_sources)

    def to_dict(self) -> dict[str, Any]:
        """Return a shallow copy of the raw configuration data."""
        return dict(self._data)

    @classmethod
    def from_file(cls, path: str | Path) -> Config:
        """Load configuration from a YAML or TOML file.

        A missing file yields an empty configuration.
        """
        path = Path(path)
        instance = cls()
        if path.is_file():
            instance = cls(cls._load_config_data(path))
            instance._loaded_sources = [str(path)]
        return instance

    @classmethod
    def from_pyproject(cls, path: str | Path) -> Config:
        """Load the ``[tool.autoconstruct]`` table of a ``pyproject.toml``.

        The table is mounted under the ``autoconstruct`` root key, so
        ``[tool.autoconstruct.construction]`` is read as
        ``autoconstruct.construction.*``.
        """
        path = Path(path)
        if not path.is_file():
            return cls()
        with open(path, "rb") as f:
            table = tomllib.load(f).get("tool", {}).get("autoconstruct", {})
        instance = cls({"autoconstruct": table})
        instance._loaded_sources = [f"{path} [tool.autoconstruct]"]
        return instance

    @staticmethod
    def _load_config_data(path: Path) -> dict[str, Any]:
        """Load config data from a YAML or TOML file."""
        if path.suffix == ".toml":
            with open(path, "rb") as f:
                return tomllib.load(f) or {}
        with open(path) as f:
            return yaml.safe_load(f) or {}

    @staticmethod
    def _deep_merge(base: dict[str, Any], override: dict[str, Any]) -> dict[str, Any]:
        """Recursively merge override into base, with override values winning."""
        merged = dict(base)
        for key, value in override.items():
            if key in merged and isinstance(merged[key], dict) and isinstance(value, dict):
                merged[key] = Config._deep_merge(merged[key], value)
            else:
                merged[key] = value
        return merged

    def merged_with(self, other: Config) -> Config:
        """Return a new Config where *other*'s values win over this one's.

        Environment overrides apply if either side opted in.
        """
        environ = other._environ if other._environ is not None else self._environ
        instance = Config(self._deep_merge(self._data, other._data), environ=environ)
        instance._loaded_sources = self._loaded_sources + other._loaded_sources
        return instance

    def get(self, key: str, default: Any = None) -> Any:
        """Get a value by dot-notation key, checking env vars first when enabled."""
        if self._environ is not None:
            # autoconstruct.construction.honor_defaults -> AUTOCONSTRUCT_CONSTRUCTION_HONOR_DEFAULTS
            env_base = key.removeprefix("autoconstruct.")
            env_key = _ENV_PREFIX + env_base.upper().replace(".", "_").replace("-", "_")
            env_val = self._environ.get(env_key)
            if env_val is not None:
                return env_val

        current: Any = self._data
        for part in key.split("."):
            if isinstance(current, dict):
                current = current.get(part)
                if current is None:
                    return default
            else:
                return default
        return current

    def get_section(self, prefix: str) -> dict[str, Any]:
        """Get all values under a prefix as a dict."""
        current: Any = self._data
        for part in prefix.split("."):
            if isinstance(current, dict):
                current = current.get(part, {})
            else:
                return {}
        return current if isinstance(current, dict) else {}

    def bind(self, model_cls: type[M]) -> M:
        """Bind configuration to a @config_properties Pydantic model.

        Each field is looked up with :meth:`get`, so environment overrides
        apply per field. Pydantic coerces env strings (``"true"``, ``"1"``).
        """
        prefix = getattr(model_cls, _CONFIG_PROPERTIES_ATTR, None)
        if prefix is None:
            raise ValueError(f"{model_cls.__name__} is not decorated with @config_properties")

        section = dict(self.get_section(prefix))
        for name in model_cls.model_fields:
            value = self.get(f"{prefix}.{name}")
            if value is not None:
                section[name] = value

        try:
            return model_cls.model_validate(section)
        except ValidationError as exc:
            raise ValueError(
                f"Configuration validation failed for '{model_cls.__name__}' (prefix='{prefix}'):\n{exc}"
            ) from exc
