"""Tests for bbcloud.config (YAML + env loading, secret resolution)."""

import shutil
from pathlib import Path

import pytest

from bbcloud.adapters import BitbucketCloudAdapter, ConfigurationError
from bbcloud.config import AppConfig, BitbucketConfig, load_config

EXAMPLE_CONFIG = Path(__file__).resolve().parent.parent / "config.example.yaml"

ENV_KEYS = [
    "BITBUCKET_USERNAME",
    "BITBUCKET_APP_PASSWORD",
    "BITBUCKET_APP_PASSWORD_FILE",
    "BITBUCKET_WORKSPACE",
    "BITBUCKET_REPOSITORY",
    "BITBUCKET_API_URL",
    "BITBUCKET_TIMEOUT",
    "LOGGING_LEVEL",
    "LOGGING_FORMAT",
]


@pytest.fixture(autouse=True)
def clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    for key in ENV_KEYS:
        monkeypatch.delenv(key, raising=False)


def test_missing_file_returns_defaults(tmp_path: Path) -> None:
    config = load_config(tmp_path / "missing.yaml")
    assert isinstance(config, AppConfig)
    assert config.bitbucket.username is None
    assert config.bitbucket.repository is None
    assert config.bitbucket.api_url == "https://api.bitbucket.org/2.0"
    assert config.bitbucket.timeout == 30.0
    assert config.logging.level == "INFO"


def test_yaml_values_loaded(tmp_path: Path) -> None:
    path = tmp_path / "config.yaml"
    path.write_text(
        "bitbucket:\n"
        "  username: jane\n"
        "  app_password: s3cret\n"
        "  workspace: acme\n"
        "  repository: widgets\n"
        "  timeout: 10\n"
        "logging:\n"
        "  level: DEBUG\n"
    )
    config = load_config(path)
    assert config.bitbucket.username == "jane"
    assert config.bitbucket.workspace == "acme"
    assert config.bitbucket.repository == "widgets"
    assert config.bitbucket.timeout == 10.0
    assert config.logging.level == "DEBUG"
    assert config.app_password_resolved == "s3cret"


def test_env_overrides_yaml(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    path = tmp_path / "config.yaml"
    path.write_text("bitbucket:\n  workspace: acme\n  repository: widgets\n")
    monkeypatch.setenv("BITBUCKET_REPOSITORY", "gadgets")
    monkeypatch.setenv("BITBUCKET_USERNAME", "bob")
    config = load_config(path)
    assert config.bitbucket.workspace == "acme"
    assert config.bitbucket.repository == "gadgets"
    assert config.bitbucket.username == "bob"


def test_env_substitution_in_yaml(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    path = tmp_path / "config.yaml"
    path.write_text("bitbucket:\n  workspace: ${MY_WORKSPACE}\n")
    monkeypatch.setenv("MY_WORKSPACE", "acme")
    config = load_config(path)
    assert config.bitbucket.workspace == "acme"


def test_app_password_from_secret_file(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    secret = tmp_path / "app_password"
    secret.write_text("from-file\n")
    path = tmp_path / "config.yaml"
    path.write_text("bitbucket:\n  app_password: ${UNSET_PASSWORD_VAR}\n")
    monkeypatch.setenv("BITBUCKET_APP_PASSWORD_FILE", str(secret))
    config = load_config(path)
    assert config.app_password_resolved == "from-file"
    assert config.bitbucket_resolved().app_password == "from-file"


def test_env_app_password_wins(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("BITBUCKET_APP_PASSWORD", "from-env")
    config = load_config(tmp_path / "missing.yaml")
    assert config.app_password_resolved == "from-env"


def test_bitbucket_config_rejects_non_positive_timeout() -> None:
    with pytest.raises(ValueError):
        BitbucketConfig(timeout=0)


def test_example_config_without_env_fails_fast(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    """Placeholders that stay unsubstituted count as unset."""
    path = tmp_path / "config.yaml"
    shutil.copy(EXAMPLE_CONFIG, path)
    monkeypatch.setenv("BITBUCKET_APP_PASSWORD", "from-env")
    config = load_config(path)
    resolved = config.bitbucket_resolved()
    assert resolved.username is None
    assert resolved.workspace is None
    assert resolved.app_password == "from-env"
    with pytest.raises(ConfigurationError):
        BitbucketCloudAdapter.from_config(resolved)


def test_example_config_with_env(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    path = tmp_path / "config.yaml"
    shutil.copy(EXAMPLE_CONFIG, path)
    monkeypatch.setenv("BITBUCKET_USERNAME", "jane")
    monkeypatch.setenv("BITBUCKET_APP_PASSWORD", "secret")
    monkeypatch.setenv("BITBUCKET_WORKSPACE", "acme")
    client = BitbucketCloudAdapter.from_config(load_config(path).bitbucket_resolved())
    assert client.workspace == "acme"
    assert client.repository is None
