"""Tests for ambient configuration"""
import pytest

from record_deduper.common.config import Config, get_config, init_config
from record_deduper.common.exceptions import ConfigurationError


def test_defaults(config):
    assert config.get('output.unique_suffix') == '_uniqs'
    assert config.get('output.duplicate_suffix') == '_dupes'
    assert config.get('io.encoding') == 'utf-8'
    assert config.get('no.such.key', 'fallback') == 'fallback'


def test_yaml_overrides_defaults(tmp_path):
    config_file = tmp_path / "config.yaml"
    config_file.write_text("io:\n  encoding: latin-1\nlogging:\n  level: DEBUG\n")

    config = Config(str(config_file))

    assert config.get('io.encoding') == 'latin-1'
    assert config.get('logging.level') == 'DEBUG'
    assert config.get('output.unique_suffix') == '_uniqs'


def test_environment_overrides_yaml(tmp_path, monkeypatch):
    config_file = tmp_path / "config.yaml"
    config_file.write_text("output:\n  unique_suffix: _yaml\n")
    monkeypatch.setenv('OUTPUT_UNIQUE_SUFFIX', '_env')

    assert Config(str(config_file)).get('output.unique_suffix') == '_env'


def test_get_bool(config, monkeypatch):
    monkeypatch.setenv('RUN_STRICT', 'yes')
    monkeypatch.setenv('RUN_QUIET', 'off')

    assert config.get_bool('run.strict') is True
    assert config.get_bool('run.quiet', True) is False
    assert config.get_bool('run.missing', True) is True
    assert config.get_bool('output.atomic') is True


def test_atomic_output_can_be_disabled_in_yaml(tmp_path):
    config_file = tmp_path / "config.yaml"
    config_file.write_text("output:\n  atomic: false\n")

    assert Config(str(config_file)).get_bool('output.atomic', True) is False


def test_missing_config_file(tmp_path):
    with pytest.raises(ConfigurationError, match="not found"):
        Config(str(tmp_path / "missing.yaml"))


def test_invalid_yaml(tmp_path):
    config_file = tmp_path / "config.yaml"
    config_file.write_text("output: [unclosed\n")

    with pytest.raises(ConfigurationError, match="YAML"):
        Config(str(config_file))


def test_yaml_must_be_a_mapping(tmp_path):
    config_file = tmp_path / "config.yaml"
    config_file.write_text("- a\n- b\n")

    with pytest.raises(ConfigurationError, match="mapping"):
        Config(str(config_file))


def test_global_config_is_initialized_on_demand():
    config = get_config()

    assert get_config() is config
    assert init_config() is not config
