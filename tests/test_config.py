import logging

import pytest
from redmine_client.client import RedmineClient, create_client_from_env
from redmine_client.core.config import (
    DEFAULT_MAX_UPLOAD_SIZE,
    ClientConfig,
    load_env_config,
)

ENV_VARS = (
    "REDMINE_BASE_URL",
    "REDMINE_API_KEY",
    "REDMINE_USERNAME",
    "REDMINE_PASSWORD",
    "REDMINE_IMPERSONATE_USER",
    "REDMINE_MAX_UPLOAD_SIZE",
)


@pytest.fixture
def clean_env(monkeypatch):
    # Prevent load_dotenv from repopulating values from .env
    monkeypatch.setattr("redmine_client.core.config.load_dotenv", lambda *a, **k: None)
    for name in ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    return monkeypatch


@pytest.mark.parametrize("base_url", ["", "   ", None])
def test_empty_base_url_fails_at_construction(base_url):
    with pytest.raises(ValueError):
        ClientConfig(base_url=base_url)


def test_client_without_base_url_fails_immediately():
    with pytest.raises(ValueError):
        RedmineClient(api_key="K")


def test_trailing_slash_is_stripped_and_default_limit_applies():
    cfg = ClientConfig(base_url="https://redmine.example.com/")

    assert cfg.base_url == "https://redmine.example.com"
    assert cfg.body_size_limit == DEFAULT_MAX_UPLOAD_SIZE == 5242880


def test_custom_upload_limit():
    cfg = ClientConfig(base_url="https://r.example", max_upload_size=1024)

    assert cfg.body_size_limit == 1024


def test_non_positive_upload_limit_rejected():
    with pytest.raises(ValueError):
        ClientConfig(base_url="https://r.example", max_upload_size=0)


def test_config_is_immutable():
    cfg = ClientConfig(base_url="https://r.example")

    with pytest.raises(AttributeError):
        cfg.api_key = "changed"


def test_load_env_config_reads_all_settings(clean_env):
    clean_env.setenv("REDMINE_BASE_URL", "https://r.example")
    clean_env.setenv("REDMINE_API_KEY", " K ")
    clean_env.setenv("REDMINE_IMPERSONATE_USER", "bob")
    clean_env.setenv("REDMINE_MAX_UPLOAD_SIZE", "2048")

    settings = load_env_config()

    assert settings["base_url"] == "https://r.example"
    assert settings["api_key"] == "K"
    assert settings["username"] is None
    assert settings["impersonate_user"] == "bob"
    assert settings["max_upload_size"] == 2048


def test_load_env_config_rejects_bad_upload_size(clean_env):
    clean_env.setenv("REDMINE_MAX_UPLOAD_SIZE", "five megs")

    with pytest.raises(ValueError) as exc:
        load_env_config()

    assert "REDMINE_MAX_UPLOAD_SIZE" in str(exc.value)


def test_create_client_from_env_missing_base_url(clean_env):
    with pytest.raises(ValueError) as exc:
        create_client_from_env()

    assert "Missing REDMINE_BASE_URL" in str(exc.value)


def test_create_client_from_env(clean_env):
    clean_env.setenv("REDMINE_BASE_URL", "https://r.example/")
    clean_env.setenv("REDMINE_USERNAME", "u")
    clean_env.setenv("REDMINE_PASSWORD", "p")

    client = create_client_from_env()

    assert client.base_url == "https://r.example"
    assert client.config.username == "u"
    assert client.config.api_key is None


def test_from_env_applies_keyword_overrides(clean_env):
    clean_env.setenv("REDMINE_BASE_URL", "https://r.example")
    clean_env.setenv("REDMINE_API_KEY", "from-env")

    client = RedmineClient.from_env(timeout_seconds=42.0, api_key="override")

    assert client.config.timeout_seconds == 42.0
    assert client.config.api_key == "override"
    assert client.base_url == "https://r.example"


def test_create_client_from_env_forwards_logger_and_overrides(clean_env):
    clean_env.setenv("REDMINE_BASE_URL", "https://r.example")
    logger = logging.getLogger("tests.redmine")

    client = create_client_from_env(impersonate_user="jsmith", logger=logger)

    assert client.config.impersonate_user == "jsmith"
    assert client.log is logger


@pytest.mark.parametrize(
    "settings",
    [
        {"base_url": "https://other.example"},
        {"api_key": "K"},
        {"max_upload_size": 1024},
        {"timeout_seconds": 5.0},
    ],
)
def test_config_and_connection_settings_are_exclusive(settings):
    cfg = ClientConfig(base_url="https://r.example")

    with pytest.raises(ValueError) as exc:
        RedmineClient(cfg, **settings)

    assert next(iter(settings)) in str(exc.value)


def test_timeout_defaults_when_not_given():
    client = RedmineClient(base_url="https://r.example")

    assert client.config.timeout_seconds == 10.0
