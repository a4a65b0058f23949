"""Tests for the analyze command."""

import json

import pytest
from typer.testing import CliRunner

from manuscript_insight import __version__
from manuscript_insight.cli import app

from conftest import SAMPLE_CHAPTER

runner = CliRunner()


@pytest.fixture
def chapter_file(tmp_path, monkeypatch):
    monkeypatch.setenv("HOME", str(tmp_path / "home"))
    monkeypatch.chdir(tmp_path)
    path = tmp_path / "chapter1.md"
    path.write_text(SAMPLE_CHAPTER, encoding="utf-8")
    return path


class TestAnalyzeCommand:
    def test_json_output(self, chapter_file):
        result = runner.invoke(app, ["analyze", str(chapter_file), "--json", "--quiet"])

        assert result.exit_code == 0
        data = json.loads(result.stdout)
        assert data["chapter_id"] == "chapter1"
        assert data["genre"] == "general"
        assert 0 <= data["overall_score"] <= 100

    def test_genre_option(self, chapter_file):
        result = runner.invoke(
            app, ["analyze", str(chapter_file), "--json", "-q", "--genre", "thriller"]
        )
        assert result.exit_code == 0
        assert json.loads(result.stdout)["genre"] == "thriller"

    def test_sections_detected_from_headings(self, chapter_file):
        result = runner.invoke(app, ["analyze", str(chapter_file), "--json", "-q"])

        metrics = json.loads(result.stdout)["metrics"]
        assert metrics["average_section_length"] == pytest.approx(metrics["total_words"] / 2)

    def test_rich_output(self, chapter_file):
        result = runner.invoke(app, ["analyze", str(chapter_file)])

        assert result.exit_code == 0
        assert "Principle Scores" in result.output

    def test_config_file(self, chapter_file, tmp_path):
        config = tmp_path / "settings.toml"
        config.write_text('output_format = "json"\ndefault_genre = "mystery"\n')

        result = runner.invoke(app, ["analyze", str(chapter_file), "-q", "-c", str(config)])
        assert result.exit_code == 0
        assert json.loads(result.stdout)["genre"] == "mystery"

    def test_missing_file(self, tmp_path):
        result = runner.invoke(app, ["analyze", str(tmp_path / "missing.txt")])
        assert result.exit_code == 2

    def test_invalid_utf8(self, chapter_file):
        chapter_file.write_bytes(b"\xff\xfe\xfa broken")

        result = runner.invoke(app, ["analyze", str(chapter_file), "--json"])
        assert result.exit_code == 1
        assert "not UTF-8" in result.output

    def test_bad_config_value(self, chapter_file, monkeypatch):
        monkeypatch.setenv("MANUSCRIPT_WORDS_PER_MINUTE", "fast")

        result = runner.invoke(app, ["analyze", str(chapter_file), "--json"])
        assert result.exit_code == 1
        assert "Error:" in result.output

    def test_error_text_stays_off_stdout(self, chapter_file, monkeypatch):
        monkeypatch.setenv("MANUSCRIPT_WORDS_PER_MINUTE", "fast")

        result = runner.invoke(app, ["analyze", str(chapter_file), "--json"])
        assert result.exit_code == 1
        assert "Error:" not in result.stdout
        assert "Error:" in result.stderr


class TestVersion:
    def test_version_flag(self):
        result = runner.invoke(app, ["--version"])

        assert result.exit_code == 0
        assert f"version {__version__}" in result.output

    def test_version_on_command(self, chapter_file):
        result = runner.invoke(app, ["analyze", str(chapter_file), "--version"])
        assert result.exit_code == 0
        assert __version__ in result.output
