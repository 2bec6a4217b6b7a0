"""extools.toml configuration.

Example:

    [platform]
    os_name = "Windows 10"   # classify this name instead of the live one

    [env]
    MSYSTEM = "MINGW64"      # overlaid on os.environ for shell detection
"""

from __future__ import annotations

import os
import tomllib
from dataclasses import dataclass, field
from pathlib import Path
from typing import Literal

from extools.core.result import Err, Ok, Result

__all__ = ["CONFIG_FILENAME", "Config", "ConfigError", "load_config"]

CONFIG_FILENAME = "extools.toml"


@dataclass(frozen=True, slots=True)
class ConfigError:
    kind: Literal["not_found", "invalid"]
    message: str
    path: Path | None = None


@dataclass(frozen=True, slots=True)
class Config:
    os_name: str | None = None
    env: dict[str, str] = field(default_factory=dict)

    def getenv(self, name: str) -> str | None:
        """Environment lookup: configured overrides first, then os.environ."""
        if name in self.env:
            return self.env[name]
        return os.environ.get(name)


def load_config(path: Path | None = None, *, cwd: Path | None = None) -> Result[Config, ConfigError]:
    """Load configuration.

    With an explicit path the file must exist. Without one, extools.toml in
    cwd is used when present; otherwise an empty Config is returned.
    """
    if path is None:
        default = (cwd or Path.cwd()) / CONFIG_FILENAME
        if not default.is_file():
            return Ok(Config())
        path = default
    elif not path.is_file():
        return Err(ConfigError("not_found", f"config file not found: {path}", path))

    try:
        data = tomllib.loads(path.read_text(encoding="utf-8"))
    except (OSError, UnicodeDecodeError) as e:
        return Err(ConfigError("invalid", f"cannot read {path}: {e}", path))
    except tomllib.TOMLDecodeError as e:
        return Err(ConfigError("invalid", f"invalid TOML in {path}: {e}", path))

    return _parse(data, path)


def _parse(data: dict[str, object], path: Path) -> Result[Config, ConfigError]:
    platform_section = data.get("platform", {})
    if not isinstance(platform_section, dict):
        return Err(ConfigError("invalid", "[platform] must be a table", path))

    os_name = platform_section.get("os_name")
    if os_name is not None and not isinstance(os_name, str):
        return Err(ConfigError("invalid", "platform.os_name must be a string", path))

    env_section = data.get("env", {})
    if not isinstance(env_section, dict):
        return Err(ConfigError("invalid", "[env] must be a table", path))

    env: dict[str, str] = {}
    for key, value in env_section.items():
        if not isinstance(value, str):
            return Err(ConfigError("invalid", f"env.{key} must be a string", path))
        env[str(key)] = value

    return Ok(Config(os_name=os_name, env=env))
