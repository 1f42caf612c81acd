"""Environment-based credentials for jirarest.

Reads the server URL and credentials from environment variables, optionally
after loading a ``.env`` file, and fills in whatever a :class:`ClientConfig`
left empty.
"""

from __future__ import annotations

import os
from dataclasses import dataclass, replace
from pathlib import Path

from dotenv import load_dotenv

from .config import ClientConfig
from .logging import get_logger

_DOTENV_CANDIDATES = ('.env', '.env.local')


@dataclass
class EnvAuthConfig:
    """Configuration for environment-based authentication."""

    load_dotenv: bool = True
    dotenv_path: str | None = None
    url_var: str = "JIRA_URL"
    username_var: str = "JIRA_USERNAME"
    password_var: str = "JIRA_PASSWORD"
    api_token_var: str = "JIRA_API_TOKEN"


class EnvironmentAuthManager:
    """Resolves server and credentials through environment variables and .env files."""

    def __init__(self, config: EnvAuthConfig):
        self.config = config
        self.logger = get_logger()
        self._dotenv_loaded = False
        if config.load_dotenv:
            self._load_dotenv()

    @property
    def dotenv_loaded(self) -> bool:
        return self._dotenv_loaded

    def _load_dotenv(self) -> None:
        """Load the configured .env file, or the first default location that exists."""
        candidates = [self.config.dotenv_path] if self.config.dotenv_path else list(_DOTENV_CANDIDATES)
        for location in candidates:
            env_path = Path(location)
            if env_path.exists():
                load_dotenv(str(env_path))
                self._dotenv_loaded = True
                self.logger.debug(f"Loaded environment variables from {env_path}")
                return

    def get_server_url(self) -> str | None:
        return os.getenv(self.config.url_var) or None

    def get_username(self) -> str | None:
        return os.getenv(self.config.username_var) or None

    def get_password(self) -> str | None:
        """Password, falling back to an API token (cloud instances accept either)."""
        password = os.getenv(self.config.password_var)
        if password:
            return password
        token = os.getenv(self.config.api_token_var)
        if token:
            self.logger.debug(f"Using API token from {self.config.api_token_var}")
            return token
        return None

    def get_credentials(self) -> tuple[str, str] | None:
        username = self.get_username()
        password = self.get_password()
        if username and password:
            return username, password
        return None

    def apply_to(self, cfg: ClientConfig) -> ClientConfig:
        """Return ``cfg`` with missing credentials taken from the environment."""
        username = cfg.username or self.get_username()
        password = cfg.password if cfg.password is not None else self.get_password()
        if username != cfg.username or password != cfg.password:
            self.logger.debug("Filled client credentials from environment")
        return replace(cfg, username=username, password=password)


def create_env_auth_manager(config: EnvAuthConfig | None = None) -> EnvironmentAuthManager:
    """Factory function to create environment authentication manager."""
    if config is None:
        config = EnvAuthConfig()
    return EnvironmentAuthManager(config)


__all__ = ["EnvAuthConfig", "EnvironmentAuthManager", "create_env_auth_manager"]
