"""Tests for configuration loading."""

import json

import pytest

from academia.config import DEFAULT_CONFIG, default_contact, load_config, validate_config
from academia.core import DEFAULT_CONTACT, ConfigurationError


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    monkeypatch.delenv("ACADEMIA_UNIVERSITY_NAME", raising=False)
    monkeypatch.delenv("ACADEMIA_LOG_LEVEL", raising=False)


@pytest.fixture
def write_config(tmp_path):
    def _write(payload):
        path = tmp_path / "config.json"
        path.write_text(payload if isinstance(payload, str) else json.dumps(payload))
        return str(path)
    return _write


def test_defaults():
    config = load_config()

    assert config == DEFAULT_CONFIG
    assert default_contact(config) == DEFAULT_CONTACT


def test_file_overrides_defaults(write_config):
    config = load_config(write_config({'university_name': "Tech U", 'id_start': 10, 'log_level': "debug"}))

    assert config['university_name'] == "Tech U"
    assert config['id_start'] == 10
    assert config['log_level'] == "DEBUG"


def test_environment_overrides_file(write_config, monkeypatch):
    monkeypatch.setenv("ACADEMIA_UNIVERSITY_NAME", "Env U")
    monkeypatch.setenv("ACADEMIA_LOG_LEVEL", "warning")

    config = load_config(write_config({'university_name': "File U"}))

    assert config['university_name'] == "Env U"
    assert config['log_level'] == "WARNING"


def test_custom_default_contact(write_config):
    config = load_config(write_config({'default_contact': {'email': "x@y.z", 'phone': "42"}}))

    assert default_contact(config).email == "x@y.z"


@pytest.mark.parametrize("payload", [
    {'unknown_key': 1},
    {'id_start': 0},
    {'id_start': "1"},
    {'id_start': True},
    {'log_level': "LOUD"},
    {'default_contact': {'email': "x@y.z"}},
    {'default_contact': {'email': 5, 'phone': None}},
    {'default_contact': "info@university.com"},
    {'university_name': 42},
    "[1, 2, 3]",
    "{not json",
])
def test_invalid_config(write_config, payload):
    with pytest.raises(ConfigurationError) as exc_info:
        load_config(write_config(payload))

    assert exc_info.value.error_code == "INVALID_CONFIG"


def test_missing_file(tmp_path):
    with pytest.raises(ConfigurationError):
        load_config(str(tmp_path / "missing.json"))


def test_loaded_config_does_not_share_defaults():
    config = load_config()

    config['default_contact']['email'] = "changed@university.com"

    assert DEFAULT_CONFIG['default_contact']['email'] == DEFAULT_CONTACT.email
    assert load_config()['default_contact']['email'] == DEFAULT_CONTACT.email


def test_validate_config_after_override():
    config = load_config()
    config['log_level'] = "debug"

    validate_config(config)
    assert config['log_level'] == "DEBUG"

    config['default_contact'] = {'email': None, 'phone': "1"}
    with pytest.raises(ConfigurationError) as exc_info:
        validate_config(config)
    assert "default_contact.email" in exc_info.value.details['fields']
