from __future__ import annotations
import importlib
import pathlib
from dataclasses import dataclass
from typing import Any, Dict

import tomli

from .errors import ConfigError

FLAVORS = ("typed", "untyped")
LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


def parse_config_section(text: str) -> Dict[str, Any]:
    try:
        data = tomli.loads(text)
    except tomli.TOMLDecodeError as error:
        raise ConfigError(f"Invalid TOML: {error}") from error
    section = data.get("shapekit")
    if not isinstance(section, dict):
        raise ConfigError("Missing [shapekit] table")
    return section


def load_object(reference: str) -> Any:
    """Import ``package.module:attribute`` and return the attribute."""
    module_name, sep, attribute = reference.partition(":")
    if not sep or not module_name or not attribute:
        raise ConfigError(f"Expected a 'module:attribute' reference, got {reference!r}", reference)
    try:
        module = importlib.import_module(module_name)
    except ImportError as error:
        raise ConfigError(f"Cannot import {module_name!r}: {error}", reference) from error
    target: Any = module
    for name in attribute.split("."):
        try:
            target = getattr(target, name)
        except AttributeError as error:
            raise ConfigError(f"{module_name!r} has no attribute {attribute!r}", reference) from error
    return target


def load_endpoints(reference: str) -> list:
    from .endpoint import Endpoint

    endpoints = load_object(reference)
    if not isinstance(endpoints, (list, tuple)) or not all(isinstance(e, Endpoint) for e in endpoints):
        raise ConfigError(f"{reference!r} must be a list of Endpoint", reference)
    return list(endpoints)


@dataclass(frozen=True)
class ExportConfig:
    endpoints: str
    output: pathlib.Path
    flavor: str = "typed"
    log_level: str = "WARNING"

    @classmethod
    def from_file(cls, path: str | pathlib.Path) -> "ExportConfig":
        path = pathlib.Path(path)
        try:
            text = path.read_text(encoding="utf-8")
        except OSError as error:
            raise ConfigError(f"Cannot read config file {path}: {error}", str(path)) from error
        return cls.from_dict(parse_config_section(text), base_dir=path.parent)

    @classmethod
    def from_dict(cls, section: Dict[str, Any], base_dir: pathlib.Path | None = None) -> "ExportConfig":
        for key in ("endpoints", "output"):
            if not isinstance(section.get(key), str) or not section[key]:
                raise ConfigError(f"Missing or invalid '{key}' in [shapekit]", key)
        flavor = section.get("flavor", "typed")
        if flavor not in FLAVORS:
            raise ConfigError(f"Unknown flavor {flavor!r}, expected one of {', '.join(FLAVORS)}", "flavor")
        log_level = str(section.get("log_level", "WARNING")).upper()
        if log_level not in LOG_LEVELS:
            raise ConfigError(f"Unknown log level {log_level!r}", "log_level")
        output = pathlib.Path(section["output"])
        if base_dir is not None and not output.is_absolute():
            output = base_dir / output
        return cls(endpoints=section["endpoints"], output=output, flavor=flavor, log_level=log_level)

    def load_endpoints(self) -> list:
        return load_endpoints(self.endpoints)
