from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Any, cast

import yaml

from .rest import REST_API_PATH

CONFIG_DEFAULT = "jirarest.config.yaml"


class ConfigError(RuntimeError):
    pass


@dataclass
class ClientConfig:
    server_url: str
    api_path: str
    username: str | None
    password: str | None
    # Transport configuration
    max_workers: int
    timeout: float | None
    verify_ssl: bool
    # Logging configuration
    logging_json_enabled: bool
    logging_level: str
    # Environment authentication configuration
    env_auth_load_dotenv: bool
    env_auth_dotenv_path: str | None
    source_file: Path | None = None

    @property
    def has_credentials(self) -> bool:
        return bool(self.username) and self.password is not None


def _resolve_env_var(value: Any) -> Any:
    """Resolve environment variable if value starts with $."""
    if isinstance(value, str) and value.startswith('$'):
        return os.getenv(value[1:], None)
    return value


def _optional_float(value: Any) -> float | None:
    if value is None or value == '':
        return None
    try:
        return float(value)
    except (TypeError, ValueError) as exc:
        raise ConfigError(f'transport.timeout must be a number, got {value!r}') from exc


def config_from_mapping(raw: dict[str, Any], source_file: Path | None = None) -> ClientConfig:
    server = cast(dict[str, Any], raw.get('server', {}) or {})
    auth = cast(dict[str, Any], raw.get('auth', {}) or {})
    transport = cast(dict[str, Any], raw.get('transport', {}) or {})
    logging_config = cast(dict[str, Any], raw.get('logging', {}) or {})
    env_auth = cast(dict[str, Any], raw.get('environment', {}) or {})

    server_url = _resolve_env_var(server.get('url'))
    if not server_url:
        raise ConfigError('server.url is required')

    try:
        max_workers = int(transport.get('max_workers', 4))
    except (TypeError, ValueError) as exc:
        raise ConfigError('transport.max_workers must be an integer') from exc
    if max_workers < 1:
        raise ConfigError('transport.max_workers must be at least 1')

    return ClientConfig(
        server_url=str(server_url).rstrip('/'),
        api_path=str(server.get('api_path', REST_API_PATH)).strip('/'),
        username=_resolve_env_var(auth.get('username')),
        password=_resolve_env_var(auth.get('password')),
        max_workers=max_workers,
        timeout=_optional_float(transport.get('timeout')),
        verify_ssl=bool(transport.get('verify_ssl', True)),
        logging_json_enabled=bool(logging_config.get('json_enabled', False)),
        logging_level=str(logging_config.get('level', 'INFO')),
        env_auth_load_dotenv=bool(env_auth.get('load_dotenv', True)),
        env_auth_dotenv_path=env_auth.get('dotenv_path'),
        source_file=source_file,
    )


def load_config(path: str | Path) -> ClientConfig:
    p = Path(path)
    if not p.exists():
        raise ConfigError(f'Configuration file not found: {p}')
    try:
        raw = yaml.safe_load(p.read_text()) or {}
    except yaml.YAMLError as exc:
        raise ConfigError(f'Invalid YAML in {p}: {exc}') from exc
    if not isinstance(raw, dict):
        raise ConfigError(f'Configuration root must be a mapping: {p}')
    return config_from_mapping(cast(dict[str, Any], raw), source_file=p)


__all__ = ["CONFIG_DEFAULT", "ClientConfig", "ConfigError", "config_from_mapping", "load_config"]
