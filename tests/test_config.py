from pathlib import Path

import pytest

from gita.config import GITHUB_BASE_URL, GitaConfig, default_config, load_config


def test_load_config_defaults(tmp_path):
    path = tmp_path / "config.yml"
    path.write_text("log_level: debug", encoding="utf-8")

    cfg = load_config(path)

    assert isinstance(cfg, GitaConfig)
    assert cfg.log_level == "DEBUG"
    assert cfg.base_url == GITHUB_BASE_URL
    assert cfg.cache_ttl_sec == 86400
    assert cfg.cache_namespace == "bhagavad_gita_"
    assert cfg.chapter_field == "BhagavadGitaChapter"


def test_nested_cache_section(tmp_path):
    path = tmp_path / "config.yml"
    path.write_text(
        "cache:\n  db_path: /tmp/gita-test.db\n  ttl_sec: 60\n",
        encoding="utf-8",
    )

    cfg = load_config(path)

    assert cfg.cache_db_path == Path("/tmp/gita-test.db")
    assert cfg.cache_ttl_sec == 60


def test_env_overrides(monkeypatch, tmp_path):
    source = tmp_path / "config.yml"
    source.write_text("base_url: https://mirror.example.com/gita/", encoding="utf-8")

    monkeypatch.setenv("GITA_CACHE_TTL_SEC", "3600")
    monkeypatch.setenv("GITA_REQUEST_TIMEOUT_SEC", "7")

    cfg = load_config(source)

    assert cfg.cache_ttl_sec == 3600
    assert cfg.request_timeout_sec == 7
    assert cfg.base_url == "https://mirror.example.com/gita"


def test_missing_file_raises(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_config(tmp_path / "nope.yml")


def test_default_config_reads_env(monkeypatch):
    monkeypatch.setenv("GITA_BASE_URL", "https://env.example.com")

    cfg = default_config()

    assert cfg.base_url == "https://env.example.com"
    assert cfg.request_timeout_sec == 30


def test_shipped_defaults_file():
    path = Path(__file__).parent.parent / "config" / "gita.defaults.yml"

    cfg = load_config(path)

    assert cfg.base_url == GITHUB_BASE_URL
    assert cfg.cache_ttl_sec == 86400
