import logging

import pytest

from newsline.core.config import (
    ApplicationConfig,
    ConfigManager,
    READ_TIMEOUT_SECONDS,
    configure_logging,
    validate_config,
)
from newsline.core.container import Container, build_container
from newsline.core.env_loader import get_env_var, load_env_file
from newsline.core.exceptions import ConfigurationError
from newsline.core.repository import NewsRepository
from newsline.core.sources.newsapi import NewsApiDataSource
from newsline.integrations.newsapi_client import NewsApiClient


@pytest.fixture
def clean_env(monkeypatch):
    # setenv first so keys written directly by load_env_file are undone too
    for key in ("NEWS_API_KEY", "LOG_LEVEL", "VERBOSE_LOGGING"):
        monkeypatch.setenv(key, "")
        monkeypatch.delenv(key)
    return monkeypatch


def test_config_reads_key_from_environment(clean_env):
    clean_env.setenv("NEWS_API_KEY", " abc123 ")

    config = ConfigManager(env_file_path=None).get_config()

    assert config.api_key == "abc123"
    assert config.has_api_key()
    assert config.base_url == "https://newsapi.org"
    assert config.read_timeout_seconds == READ_TIMEOUT_SECONDS == 60


def test_missing_key_is_reported_not_fatal(clean_env, caplog):
    caplog.set_level(logging.WARNING, logger="newsline.core.config")

    manager = ConfigManager(env_file_path=None)
    config = manager.get_config()

    assert not config.has_api_key()
    assert manager.get_integration_status() == {"news_api_key": False}
    assert "NEWS_API_KEY is not set" in caplog.text


def test_invalid_log_level_is_rejected(clean_env):
    clean_env.setenv("LOG_LEVEL", "chatty")

    with pytest.raises(ConfigurationError) as exc_info:
        ConfigManager(env_file_path=None).get_config()

    assert exc_info.value.context["config_key"] == "LOG_LEVEL"


def test_validate_rejects_bad_base_url():
    with pytest.raises(ConfigurationError):
        validate_config(ApplicationConfig(base_url="newsapi.org"))


def test_env_file_does_not_override_environment(tmp_path, clean_env):
    env_file = tmp_path / ".env"
    env_file.write_text(
        "# comment\n"
        "NEWS_API_KEY='from-file'\n"
        "LOG_LEVEL=DEBUG\n"
        "not a pair\n",
        encoding="utf-8",
    )
    clean_env.setenv("LOG_LEVEL", "WARNING")

    loaded = load_env_file(env_file)

    assert loaded == 1
    assert get_env_var("NEWS_API_KEY") == "from-file"
    assert get_env_var("LOG_LEVEL") == "WARNING"


def test_missing_env_file_loads_nothing(tmp_path):
    assert load_env_file(tmp_path / "absent.env") == 0


def test_configure_logging_verbose_sets_debug():
    root = logging.getLogger()
    previous = root.level
    try:
        configure_logging(ApplicationConfig(log_level="WARNING"), verbose=True)
        assert root.level == logging.DEBUG
        configure_logging(ApplicationConfig(log_level="WARNING"))
        assert root.level == logging.WARNING
    finally:
        root.setLevel(previous)


def test_container_factories_and_instances():
    container = Container()
    created = []

    def make():
        created.append(object())
        return created[-1]

    shared = object()
    container.register_instance("shared", shared)
    container.register_factory("fresh", make)

    assert container.get("shared") is shared
    assert container.get("fresh") is not container.get("fresh")
    assert len(created) == 2

    container.register_factory("shared", make)
    assert container.get("shared") is not shared

    with pytest.raises(KeyError):
        container.get("missing")


def test_config_reads_environment_through_env_loader(clean_env):
    clean_env.setenv("LOG_LEVEL", " debug ")
    clean_env.setenv("VERBOSE_LOGGING", "True")

    config = ConfigManager(env_file_path=None).get_config()

    assert config.log_level == "DEBUG"
    assert config.verbose_logging


def test_build_container_wires_pipeline():
    config = ApplicationConfig(api_key="key", read_timeout_seconds=5)
    container = build_container(config)

    client = container.get("api_client")
    data_source = container.get("data_source_factory")(client)
    repository = container.get("repository_factory")(data_source)

    assert container.get("config") is config
    assert isinstance(client, NewsApiClient)
    assert client.api_key == "key"
    assert client.read_timeout == 5
    assert container.get("api_client") is not client
    assert isinstance(data_source, NewsApiDataSource)
    assert isinstance(repository, NewsRepository)
    assert repository.data_source is data_source


def test_separate_containers_share_nothing():
    first = build_container(ApplicationConfig(api_key="a"))
    second = build_container(ApplicationConfig(api_key="b"))

    assert first.get("config").api_key == "a"
    assert second.get("config").api_key == "b"
