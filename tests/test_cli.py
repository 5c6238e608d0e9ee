"""Tests for CLI module."""

import json

import pytest

from colors_api.cli import cmd_formats, cmd_version, main


class TestCmdVersion:
    def test_prints_version(self, capsys):
        result = cmd_version(None)

        assert result == 0
        assert "Colors API v1.0.0" in capsys.readouterr().out


class TestMain:
    def test_no_command_prints_help(self, capsys):
        result = main([])

        assert result == 0
        assert "usage: colors-api" in capsys.readouterr().out

    def test_version_command(self, capsys):
        assert main(["version"]) == 0
        assert "v1.0.0" in capsys.readouterr().out

    def test_unknown_format_is_rejected_by_parser(self):
        with pytest.raises(SystemExit) as exc_info:
            main(["generate", "#3b82f6", "#10b981", "--format", "pdf"])

        assert exc_info.value.code == 2


class TestSuggest:
    def test_prints_suggestions(self, capsys):
        result = main(["suggest", "#ff0000"])
        output = capsys.readouterr().out

        assert result == 0
        assert "Suggestions for #ff0000:" in output
        assert "#00ffff" in output
        assert "Split-Complementary" in output

    def test_invalid_color_returns_error(self, capsys):
        result = main(["suggest", "red"])

        assert result == 1
        assert "Error: Invalid primaryColor" in capsys.readouterr().err


class TestGenerate:
    def test_writes_json_file(self, tmp_path, capsys):
        output = tmp_path / "out" / "colors.json"

        result = main(
            [
                "generate",
                "#3b82f6",
                "#10b981",
                "--format",
                "json",
                "--mode",
                "light",
                "--case-style",
                "camelCase",
                "--output",
                str(output),
            ]
        )

        assert result == 0
        data = json.loads(output.read_text(encoding="utf-8"))
        assert data["primary"]["--primary-05"]["value"] == "#3b82f6"
        assert "interfaceBg" in data
        assert "Wrote 292 colors in 26 sections" in capsys.readouterr().out

    def test_default_output_is_palette_json(self, tmp_path):
        output = tmp_path / "palette.json"

        assert main(["generate", "#3b82f6", "#10b981", "-o", str(output)]) == 0

        data = json.loads(output.read_text(encoding="utf-8"))
        assert data["metadata"]["primaryColor"] == "#3b82f6"
        assert len(data["sidebarButton"]) == 22

    def test_prints_to_stdout(self, capsys):
        result = main(["generate", "#3b82f6", "#10b981", "--format", "scss"])

        assert result == 0
        assert "$primary-05: #3b82f6;" in capsys.readouterr().out

    def test_theme_options(self, tmp_path):
        output = tmp_path / "colors.css"

        result = main(
            [
                "generate",
                "#3b82f6",
                "#10b981",
                "--gray-theme",
                "neutral",
                "--format",
                "css",
                "--mode",
                "light",
                "-o",
                str(output),
            ]
        )

        assert result == 0
        assert "  --gray-01: #f2f2f2;" in output.read_text(encoding="utf-8")

    def test_invalid_seed_returns_error(self, capsys):
        result = main(["generate", "#3b82f6", "green"])

        assert result == 1
        assert "secondaryColor" in capsys.readouterr().err


class TestListings:
    def test_formats(self, capsys):
        result = cmd_formats(None)
        output = capsys.readouterr().out

        assert result == 0
        for format_id in ["css", "scss", "json", "figma", "tailwind", "csv"]:
            assert format_id in output

    def test_themes_json(self, capsys):
        result = main(["themes", "--json"])

        assert result == 0
        data = json.loads(capsys.readouterr().out)
        assert len(data["grayThemes"]) == 5
        assert data["backgroundThemes"][1]["id"] == "blue"

    def test_themes_text(self, capsys):
        assert main(["themes"]) == 0
        output = capsys.readouterr().out

        assert "Gray themes:" in output
        assert "green-brown" in output
