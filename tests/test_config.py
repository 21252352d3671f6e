import dataclasses
from pathlib import Path

import pytest

from greetings.config import DEFAULT_STATIC_DIR, DEFAULT_TEMPLATES_DIR, load_settings


def test_defaults_when_unset():
    settings = load_settings({})
    assert settings.env == "local"
    assert settings.port == "8080"
    assert settings.templates_dir == DEFAULT_TEMPLATES_DIR
    assert settings.static_dir == DEFAULT_STATIC_DIR
    assert settings.is_local


def test_empty_values_fall_back_to_defaults():
    settings = load_settings({"ENV": "", "PORT": "", "TEMPLATES_DIR": ""})
    assert settings.env == "local"
    assert settings.port == "8080"
    assert settings.templates_dir == DEFAULT_TEMPLATES_DIR


def test_overrides():
    settings = load_settings(
        {"ENV": "production", "PORT": "9000", "TEMPLATES_DIR": "/srv/templates", "STATIC_DIR": "/srv/static"}
    )
    assert settings.env == "production"
    assert settings.port == "9000"
    assert settings.templates_dir == Path("/srv/templates")
    assert settings.static_dir == Path("/srv/static")
    assert not settings.is_local


def test_port_is_not_validated():
    assert load_settings({"PORT": "not-a-port"}).port == "not-a-port"


def test_reads_process_environment(monkeypatch):
    monkeypatch.setenv("ENV", "staging")
    monkeypatch.delenv("PORT", raising=False)
    settings = load_settings()
    assert settings.env == "staging"
    assert settings.port == "8080"


def test_settings_are_immutable():
    settings = load_settings({})
    with pytest.raises(dataclasses.FrozenInstanceError):
        settings.port = "1234"


def test_bundled_assets_exist():
    assert (DEFAULT_TEMPLATES_DIR / "index.html").is_file()
    assert (DEFAULT_TEMPLATES_DIR / "partials" / "greeting.html").is_file()
    assert (DEFAULT_STATIC_DIR / "css" / "style.css").is_file()
