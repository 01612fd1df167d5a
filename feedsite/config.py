from __future__ import annotations

import json
from dataclasses import dataclass
from pathlib import Path

import yaml

try:
    import tomllib as toml
except ImportError:
    import tomli as toml

from .errors import ConfigError

REQUIRED_KEYS = {
    "name": "name",
    "home_page": "home_page_url",
    "icon": "icon_url",
}


@dataclass(frozen=True)
class SiteConfig:
    name: str
    home_page_url: str
    icon_url: str

    @property
    def blog_title(self) -> str:
        return f"{self.name}'s Blog"


def read_config_data(path: Path) -> dict:
    if not path.exists():
        raise ConfigError(f"Config file not found: {path}", path)
    try:
        text = path.read_text(encoding="utf-8")
    except OSError as exc:
        raise ConfigError(f"could not read file {path}: {exc}", path) from exc
    suffix = path.suffix.lower()
    if suffix == ".toml":
        try:
            data = toml.loads(text)
        except toml.TOMLDecodeError as exc:
            raise ConfigError(f"Invalid TOML in config file {path}: {exc}", path) from exc
    elif suffix in {".yml", ".yaml"}:
        try:
            data = yaml.safe_load(text)
        except yaml.YAMLError as exc:
            raise ConfigError(f"Invalid YAML in config file {path}: {exc}", path) from exc
        if data is None:
            data = {}
    else:
        try:
            data = json.loads(text)
        except json.JSONDecodeError as exc:
            raise ConfigError(f"Invalid JSON in config file {path}: {exc}", path) from exc
    if not isinstance(data, dict):
        raise ConfigError(f"Config must be a mapping: {path}", path)
    return data


def load_config(path: Path) -> SiteConfig:
    data = read_config_data(path)
    values = {}
    problems = []
    for key, field in REQUIRED_KEYS.items():
        value = data.get(key)
        if value is None:
            problems.append(f"missing '{key}'")
        elif not isinstance(value, str):
            problems.append(f"'{key}' must be a string")
        else:
            values[field] = value
    if problems:
        raise ConfigError(f"Cant use config file {path}: {', '.join(problems)}", path)
    return SiteConfig(**values)
