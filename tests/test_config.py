"""Tests for config.py - sources, environment variables and overrides."""

import pytest

from manuscript_insight.config import DEFAULT_CONFIG, EngineConfig, load_config
from manuscript_insight.exceptions import ConfigurationError, InvalidConfigError


@pytest.fixture(autouse=True)
def isolated(tmp_path, monkeypatch):
    """No user or project config files and no MANUSCRIPT_* variables."""
    monkeypatch.setenv("HOME", str(tmp_path / "home"))
    monkeypatch.chdir(tmp_path)
    for field_name in EngineConfig.__dataclass_fields__:
        monkeypatch.delenv(f"MANUSCRIPT_{field_name.upper()}", raising=False)
    return tmp_path


class TestEngineConfig:
    def test_defaults(self):
        assert load_config() == DEFAULT_CONFIG
        assert DEFAULT_CONFIG.default_genre == "general"
        assert DEFAULT_CONFIG.words_per_minute == 250

    @pytest.mark.parametrize(
        "kwargs",
        [
            {"default_genre": " "},
            {"words_per_minute": 0},
            {"output_format": "xml"},
            {"max_suggestions": -1},
            {"verbosity": "loud"},
        ],
    )
    def test_validation(self, kwargs):
        with pytest.raises(ValueError):
            EngineConfig(**kwargs)


class TestFileSources:
    def test_project_config(self, isolated):
        (isolated / "manuscript-insight.toml").write_text(
            'default_genre = "fantasy"\nwords_per_minute = 200\n'
        )
        config = load_config()
        assert config.default_genre == "fantasy"
        assert config.words_per_minute == 200

    def test_explicit_file_overrides_project(self, isolated):
        (isolated / "manuscript-insight.toml").write_text('default_genre = "fantasy"\n')
        explicit = isolated / "custom.toml"
        explicit.write_text('default_genre = "horror"\n')

        assert load_config(config_file=explicit).default_genre == "horror"

    def test_missing_explicit_file(self, isolated):
        with pytest.raises(ConfigurationError, match="Config file not found"):
            load_config(config_file=isolated / "nope.toml")

    def test_malformed_toml(self, isolated):
        bad = isolated / "bad.toml"
        bad.write_text("default_genre = \n")
        with pytest.raises(ConfigurationError, match="Invalid config file"):
            load_config(config_file=bad)

    def test_unknown_key(self, isolated):
        path = isolated / "extra.toml"
        path.write_text("pacing_weight = 2.0\n")
        with pytest.raises(ConfigurationError, match="Invalid configuration"):
            load_config(config_file=path)


class TestEnvironment:
    def test_typed_values(self, monkeypatch):
        monkeypatch.setenv("MANUSCRIPT_WORDS_PER_MINUTE", "300")
        monkeypatch.setenv("MANUSCRIPT_SHOW_DETAILS", "off")
        monkeypatch.setenv("MANUSCRIPT_OUTPUT_FORMAT", "json")

        config = load_config()
        assert config.words_per_minute == 300
        assert config.show_details is False
        assert config.output_format == "json"

    @pytest.mark.parametrize(
        "key, value",
        [("MANUSCRIPT_WORDS_PER_MINUTE", "fast"), ("MANUSCRIPT_SHOW_DETAILS", "maybe")],
    )
    def test_unparseable_value(self, monkeypatch, key, value):
        monkeypatch.setenv(key, value)
        with pytest.raises(InvalidConfigError) as exc_info:
            load_config()
        assert exc_info.value.key == key

    def test_invalid_choice(self, monkeypatch):
        monkeypatch.setenv("MANUSCRIPT_OUTPUT_FORMAT", "xml")
        with pytest.raises(ConfigurationError):
            load_config()

    def test_overrides_beat_environment(self, monkeypatch):
        monkeypatch.setenv("MANUSCRIPT_DEFAULT_GENRE", "mystery")
        assert load_config().default_genre == "mystery"
        assert load_config(default_genre="scifi").default_genre == "scifi"


class TestOverrides:
    def test_verbose_flag(self):
        assert load_config(verbose=True).verbosity == "verbose"

    def test_quiet_wins_over_verbose(self):
        assert load_config(verbose=True, quiet=True).verbosity == "quiet"

    def test_false_flags_keep_default(self):
        assert load_config(verbose=False, quiet=False).verbosity == "normal"

    def test_none_values_ignored(self):
        assert load_config(output_format=None).output_format == "rich"
