"""
Configuration for the restargs.arguments module.

Defines ArgumentsSettings, a frozen dataclass carrying runtime policy for the argument
parser. Defaults are sourced from restargs.core.constants.

Precedence
- environment (RESTARGS_*) > TOML (restargs.toml or [tool.restargs] in pyproject.toml)
  > defaults.
- ``load(env_file=...)`` reads a dotenv file into the environment first; variables
  already set in the process environment win over the file.

Notes
- ignore_extra_positional=True keeps positional arguments beyond the required list out
  of the parser's concern; False makes them an ArityError.
- always_permitted keys survive ``sift`` regardless of the requested key set.
"""

from __future__ import annotations

import os
import tomllib
from dataclasses import dataclass, replace
from pathlib import Path
from typing import Any

from dotenv import load_dotenv

from restargs.core.constants import CONFIG_FILENAME, CONFIG_TABLE, DEFAULT_LOG_LEVEL, ENV_PREFIX

_LOG_LEVELS = {"CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG"}


def _bool(v: Any) -> bool:
    if isinstance(v, bool):
        return v
    if isinstance(v, (int, float)):
        return bool(v)
    if isinstance(v, str):
        return v.strip().lower() in {"1", "true", "t", "yes", "y", "on"}
    return False


def _names(v: Any) -> tuple[str, ...] | None:
    if isinstance(v, str):
        return tuple(part.strip() for part in v.split(",") if part.strip())
    if isinstance(v, (list, tuple)):
        return tuple(str(part) for part in v)
    return None


@dataclass(frozen=True)
class ArgumentsSettings:
    """
    Runtime settings for ArgumentParser.

    Attributes:
        ignore_extra_positional (bool): Accept positional arguments beyond the required
            list without error.
        always_permitted (tuple[str, ...]): Keys ``sift`` never removes.
        recursive_sift (bool): Apply ``sift`` to nested mappings as well.
        log_level (str): Level used by restargs.arguments.log.configure_logging.

    Examples:
        >>> from restargs.arguments.config import ArgumentsSettings
        >>> ArgumentsSettings(recursive_sift=True)  # doctest: +ELLIPSIS
        ArgumentsSettings(...)
    """

    ignore_extra_positional: bool = True
    always_permitted: tuple[str, ...] = ()
    recursive_sift: bool = False
    log_level: str = DEFAULT_LOG_LEVEL

    @classmethod
    def _apply_mapping(cls, base: ArgumentsSettings, cfg: dict[str, Any] | None) -> ArgumentsSettings:
        """Apply a loose config mapping onto ArgumentsSettings, returning a new instance."""
        if not isinstance(cfg, dict):
            return base

        s = base

        if "ignore_extra_positional" in cfg:
            s = replace(s, ignore_extra_positional=_bool(cfg["ignore_extra_positional"]))

        if "always_permitted" in cfg:
            names = _names(cfg["always_permitted"])
            if names is not None:
                s = replace(s, always_permitted=names)

        if "recursive_sift" in cfg:
            s = replace(s, recursive_sift=_bool(cfg["recursive_sift"]))

        if "log_level" in cfg and isinstance(cfg["log_level"], str):
            level = cfg["log_level"].strip().upper()
            if level in _LOG_LEVELS:
                s = replace(s, log_level=level)

        return s

    @classmethod
    def from_env(cls, base: ArgumentsSettings | None = None, prefix: str = ENV_PREFIX) -> ArgumentsSettings:
        """
        Build ArgumentsSettings from environment variables. Precedence is env > base > defaults.

        Recognized variables:
            - RESTARGS_IGNORE_EXTRA_POSITIONAL (1/0/true/false/yes/no/on/off)
            - RESTARGS_ALWAYS_PERMITTED (comma separated names)
            - RESTARGS_RECURSIVE_SIFT
            - RESTARGS_LOG_LEVEL
        """
        s = base or cls()
        mapping: dict[str, Any] = {}
        for key in ("ignore_extra_positional", "always_permitted", "recursive_sift", "log_level"):
            v = os.getenv(prefix + key.upper())
            if v:
                mapping[key] = v
        return cls._apply_mapping(s, mapping)

    @classmethod
    def from_toml(cls, path: str | os.PathLike[str] | None = None) -> ArgumentsSettings:
        """
        Build ArgumentsSettings from a TOML file.

        Search order when `path` is None:
            1) ./restargs.toml (with either an [arguments] table or top-level keys)
            2) ./pyproject.toml under [tool.restargs]

        Returns defaults if no file is present or readable.
        """
        s = cls()

        def _load_toml(p: Path) -> dict[str, Any] | None:
            try:
                with p.open("rb") as fh:
                    return tomllib.load(fh)
            except (OSError, tomllib.TOMLDecodeError):
                return None

        cand: list[Path] = []
        if path is not None:
            cand.append(Path(path))
        else:
            cand.append(Path.cwd() / CONFIG_FILENAME)
            cand.append(Path.cwd() / "pyproject.toml")

        cfg: dict[str, Any] | None = None
        for p in cand:
            if not p.exists():
                continue
            data = _load_toml(p)
            if not isinstance(data, dict):
                continue
            if p.name == "pyproject.toml":
                tool = data.get("tool", {})
                cfg = tool.get("restargs") if isinstance(tool, dict) else None
            elif isinstance(data.get(CONFIG_TABLE), dict):
                cfg = data[CONFIG_TABLE]
            else:
                cfg = data
            if cfg:
                break

        return cls._apply_mapping(s, cfg)

    @classmethod
    def load(
        cls,
        path: str | os.PathLike[str] | None = None,
        env_file: str | os.PathLike[str] | None = None,
    ) -> ArgumentsSettings:
        """
        Load ArgumentsSettings applying precedence: environment > TOML > defaults.

        Args:
            path: Optional explicit TOML path. If None, search defaults.
            env_file: Optional dotenv file merged into the environment beforehand.

        Returns:
            ArgumentsSettings
        """
        if env_file is not None:
            load_dotenv(env_file, override=False)
        s = cls.from_toml(path)
        return cls.from_env(base=s)
