from __future__ import annotations

import pytest

from aicp_cli import config
from aicp_client import ConfigError
from aicp_client.settings import DEFAULT_API_BASE_URL, ENV_API_BASE_URL


def _use_tmp_config_dir(tmp_path, monkeypatch) -> None:
    def _config_dir(_: str) -> str:
        return str(tmp_path)

    monkeypatch.setattr(config, "user_config_dir", _config_dir)


def test_load_config_defaults_when_missing(tmp_path, monkeypatch) -> None:
    _use_tmp_config_dir(tmp_path, monkeypatch)
    cfg = config.load_config()
    assert cfg.base_url == ""
    assert cfg.timeout_s == config.DEFAULT_TIMEOUT_S


def test_save_and_load_round_trip_omits_empty_base_url(tmp_path, monkeypatch) -> None:
    _use_tmp_config_dir(tmp_path, monkeypatch)
    path = config.save_config(config.AppConfig(base_url="", timeout_s=5.0))
    contents = tmp_path.joinpath("config.toml").read_text(encoding="utf-8")

    assert path.endswith("config.toml")
    assert "base_url" not in contents
    assert config.load_config().timeout_s == 5.0


def test_from_toml_rejects_bad_timeout() -> None:
    assert config.from_toml({"timeout_s": "soon"}).timeout_s == config.DEFAULT_TIMEOUT_S
    assert config.from_toml({"timeout_s": -1}).timeout_s == config.DEFAULT_TIMEOUT_S


def test_resolve_base_url_prefers_override(monkeypatch) -> None:
    monkeypatch.setenv(ENV_API_BASE_URL, "http://env.test/api/v1")
    cfg = config.AppConfig(base_url="http://file.test/api/v1")
    assert config.resolve_base_url(cfg, "cli.test/api/v1/") == "https://cli.test/api/v1"


def test_resolve_base_url_env_beats_config_file(monkeypatch) -> None:
    monkeypatch.setenv(ENV_API_BASE_URL, "http://env.test/api/v1/")
    cfg = config.AppConfig(base_url="http://file.test/api/v1")
    assert config.resolve_base_url(cfg) == "http://env.test/api/v1/"


def test_resolve_base_url_from_config_then_default(monkeypatch) -> None:
    monkeypatch.delenv(ENV_API_BASE_URL, raising=False)
    assert config.resolve_base_url(config.AppConfig(base_url="http://file.test")) == "http://file.test"
    assert config.resolve_base_url(config.default_config()) == DEFAULT_API_BASE_URL


def test_normalize_base_url_defaults_to_https() -> None:
    assert config.normalize_base_url("example.com") == "https://example.com"


def test_normalize_base_url_defaults_to_http_for_localhost() -> None:
    assert config.normalize_base_url("localhost:8080/api/v1") == "http://localhost:8080/api/v1"


def test_normalize_base_url_strips_trailing_slash() -> None:
    assert config.normalize_base_url("https://example.com/") == "https://example.com"


def test_resolve_base_url_empty_env_falls_through_to_config(monkeypatch) -> None:
    monkeypatch.setenv(ENV_API_BASE_URL, "")
    assert config.resolve_base_url(config.AppConfig(base_url="http://file.test")) == "http://file.test"


def test_load_config_wraps_malformed_file(tmp_path, monkeypatch) -> None:
    _use_tmp_config_dir(tmp_path, monkeypatch)
    tmp_path.joinpath("config.toml").write_text("base_url = \n", encoding="utf-8")

    with pytest.raises(ConfigError, match="cannot read"):
        config.load_config()


def test_normalize_base_url_keeps_existing_scheme_and_blank_input() -> None:
    assert config.normalize_base_url("HTTP://Example.com/api/") == "HTTP://Example.com/api"
    assert config.normalize_base_url("   /") == ""
    assert config.normalize_base_url(None) == ""
