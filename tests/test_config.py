"""
Tests for configuration loading — autolinking.json and autolinkgen.yml.
"""

import textwrap
from pathlib import Path

import pytest

from autolinkgen.core.config.loader import (
    ConfigError,
    find_settings_file,
    load_autolinking_config,
    load_settings,
)


class TestLoadAutolinkingConfig:
    def test_valid(self, config_file: Path):
        config = load_autolinking_config(config_file)
        assert config.react_native_version == "1000.0.0"
        assert list(config.dependencies) == ["a-dependency", "ios-only", "another-dependency"]
        android = config.dependencies["another-dependency"].platforms.android
        assert android.cxx_module_header_name == "AnotherCxxModule"

    def test_missing_file(self, tmp_path: Path):
        with pytest.raises(ConfigError, match="not found"):
            load_autolinking_config(tmp_path / "nope.json")

    def test_invalid_json(self, tmp_path: Path):
        path = tmp_path / "autolinking.json"
        path.write_text("{not json")
        with pytest.raises(ConfigError, match="Invalid JSON"):
            load_autolinking_config(path)

    def test_not_an_object(self, tmp_path: Path):
        path = tmp_path / "autolinking.json"
        path.write_text("[1, 2]")
        with pytest.raises(ConfigError, match="Expected a JSON object"):
            load_autolinking_config(path)

    def test_schema_error(self, tmp_path: Path):
        path = tmp_path / "autolinking.json"
        path.write_text('{"dependencies": {"x": {"platforms": {"android": {}}}}}')
        with pytest.raises(ConfigError, match="Invalid autolinking configuration"):
            load_autolinking_config(path)

    def test_null_dependencies(self, tmp_path: Path):
        path = tmp_path / "autolinking.json"
        path.write_text('{"reactNativeVersion": "1000.0.0", "dependencies": null}')
        assert load_autolinking_config(path).dependencies is None


class TestLoadSettings:
    def test_defaults_when_absent(self, tmp_path: Path, monkeypatch):
        monkeypatch.chdir(tmp_path)
        settings = load_settings()
        assert settings.input == "autolinking.json"
        assert settings.strict is True

    def test_paths_relative_to_file(self, tmp_path: Path):
        path = tmp_path / "autolinkgen.yml"
        path.write_text(
            textwrap.dedent("""\
                input: config/autolinking.json
                output_dir: out/jni
                strict: false
            """)
        )
        settings = load_settings(path)
        assert Path(settings.input) == tmp_path / "config" / "autolinking.json"
        assert Path(settings.output_dir) == tmp_path / "out" / "jni"
        assert settings.strict is False

    def test_empty_file(self, tmp_path: Path):
        path = tmp_path / "autolinkgen.yml"
        path.write_text("")
        settings = load_settings(path)
        assert settings.cpp_filename == "autolinking.cpp"

    def test_explicit_missing(self, tmp_path: Path):
        with pytest.raises(ConfigError, match="not found"):
            load_settings(tmp_path / "autolinkgen.yml")

    def test_invalid_yaml(self, tmp_path: Path):
        path = tmp_path / "autolinkgen.yml"
        path.write_text("input: [unclosed")
        with pytest.raises(ConfigError, match="Invalid YAML"):
            load_settings(path)

    def test_not_a_mapping(self, tmp_path: Path):
        path = tmp_path / "autolinkgen.yml"
        path.write_text("- a\n- b\n")
        with pytest.raises(ConfigError, match="Expected a YAML mapping"):
            load_settings(path)

    def test_bad_value(self, tmp_path: Path):
        path = tmp_path / "autolinkgen.yml"
        path.write_text("strict: [1, 2]\n")
        with pytest.raises(ConfigError, match="Invalid settings"):
            load_settings(path)


class TestFindSettingsFile:
    def test_walks_up(self, tmp_path: Path):
        (tmp_path / "autolinkgen.yml").write_text("strict: true\n")
        nested = tmp_path / "android" / "app"
        nested.mkdir(parents=True)
        assert find_settings_file(nested) == (tmp_path / "autolinkgen.yml").resolve()
