from __future__ import annotations

import textwrap

import pytest

from jirarest.config import ConfigError, config_from_mapping, load_config

FULL_CONFIG = textwrap.dedent(
    """\
    server:
      url: https://jira.example.com/
      api_path: /rest/api/2/
    auth:
      username: admin
      password: $JIRA_TEST_PASSWORD
    transport:
      max_workers: 8
      timeout: 12.5
      verify_ssl: false
    logging:
      json_enabled: true
      level: DEBUG
    environment:
      load_dotenv: false
    """
)


def test_load_full_config(tmp_path, monkeypatch):
    monkeypatch.setenv("JIRA_TEST_PASSWORD", "from-env")
    path = tmp_path / "jirarest.config.yaml"
    path.write_text(FULL_CONFIG)

    cfg = load_config(path)

    assert cfg.server_url == "https://jira.example.com"
    assert cfg.api_path == "rest/api/2"
    assert cfg.username == "admin"
    assert cfg.password == "from-env"
    assert cfg.max_workers == 8
    assert cfg.timeout == 12.5
    assert cfg.verify_ssl is False
    assert cfg.logging_json_enabled is True
    assert cfg.logging_level == "DEBUG"
    assert cfg.env_auth_load_dotenv is False
    assert cfg.source_file == path


def test_defaults():
    cfg = config_from_mapping({"server": {"url": "http://jira"}})
    assert cfg.api_path == "rest/api/latest"
    assert cfg.timeout is None
    assert cfg.max_workers == 4
    assert cfg.verify_ssl is True
    assert cfg.has_credentials is False


def test_unset_env_reference_resolves_to_none(monkeypatch):
    monkeypatch.delenv("JIRA_TEST_MISSING", raising=False)
    cfg = config_from_mapping({"server": {"url": "http://jira"}, "auth": {"password": "$JIRA_TEST_MISSING"}})
    assert cfg.password is None


@pytest.mark.parametrize(
    "raw",
    [
        {},
        {"server": {"url": "http://jira"}, "transport": {"max_workers": 0}},
        {"server": {"url": "http://jira"}, "transport": {"max_workers": "many"}},
        {"server": {"url": "http://jira"}, "transport": {"timeout": "soon"}},
    ],
)
def test_invalid_mappings(raw):
    with pytest.raises(ConfigError):
        config_from_mapping(raw)


def test_load_config_errors(tmp_path):
    with pytest.raises(ConfigError, match="not found"):
        load_config(tmp_path / "missing.yaml")

    bad = tmp_path / "bad.yaml"
    bad.write_text("server: [unclosed")
    with pytest.raises(ConfigError, match="Invalid YAML"):
        load_config(bad)

    scalar = tmp_path / "scalar.yaml"
    scalar.write_text("just a string")
    with pytest.raises(ConfigError, match="mapping"):
        load_config(scalar)
