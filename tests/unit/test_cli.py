"""Tests for CLI commands."""

import json
from pathlib import Path

import pytest
from typer.testing import CliRunner

from tonal.cli import app


@pytest.fixture
def cli_runner():
    """Return a CLI test runner."""
    return CliRunner()


class TestVersion:
    def test_version(self, cli_runner: CliRunner):
        result = cli_runner.invoke(app, ["--version"])
        assert result.exit_code == 0
        assert "tonal version" in result.output

    def test_version_matches_pyproject(self):
        import tomllib

        import tonal

        pyproject = Path(__file__).resolve().parents[2] / "pyproject.toml"
        with pyproject.open("rb") as f:
            expected = tomllib.load(f)["project"]["version"]
        assert tonal.__version__ == expected

    def test_no_args_shows_help(self, cli_runner: CliRunner):
        result = cli_runner.invoke(app, [])
        assert "generate" in result.output


class TestGenerate:
    def test_css(self, cli_runner: CliRunner):
        result = cli_runner.invoke(app, ["generate", "#ed0707"])
        assert result.exit_code == 0
        assert "--clr-primary-a0: rgba(237,7,7,1);" in result.output
        assert "--clr-primary-a90: rgba(255,255,255,1);" in result.output
        assert "--clr-on-primary-a0:" in result.output

    def test_surface_and_semantics(self, cli_runner: CliRunner):
        result = cli_runner.invoke(
            app, ["generate", "#ed0707", "--surface", "#121212", "--success", "#22946E"]
        )
        assert result.exit_code == 0
        assert "--clr-surface-a0: rgba(18,18,18,1);" in result.output
        assert "--clr-success-a30:" in result.output
        assert "--clr-danger-" not in result.output

    def test_no_prefix_no_text(self, cli_runner: CliRunner):
        result = cli_runner.invoke(app, ["generate", "#ed0707", "--no-prefix", "--no-text"])
        assert result.exit_code == 0
        lines = result.output.strip().splitlines()
        assert len(lines) == 10
        assert lines[0] == "--primary-a0: rgba(237,7,7,1);"

    def test_light_mode(self, cli_runner: CliRunner):
        result = cli_runner.invoke(app, ["generate", "#ed0707", "--light"])
        assert "--clr-primary-a90: rgba(0,0,0,1);" in result.output

    def test_json(self, cli_runner: CliRunner):
        result = cli_runner.invoke(app, ["generate", "#ed0707", "--format", "json"])
        assert result.exit_code == 0
        data = json.loads(result.output)
        assert data["primary"][0] == {
            "label": "a0",
            "color": "rgba(237,7,7,1)",
            "text_color": data["primary"][0]["text_color"],
        }
        assert "surface" not in data

    def test_dtcg(self, cli_runner: CliRunner):
        result = cli_runner.invoke(app, ["generate", "#ed0707", "-f", "dtcg"])
        assert result.exit_code == 0
        data = json.loads(result.output)
        assert data["color"]["primary"]["a0"]["$value"] == "rgba(237,7,7,1)"

    def test_table(self, cli_runner: CliRunner):
        result = cli_runner.invoke(app, ["generate", "#ed0707", "--format", "table"])
        assert result.exit_code == 0
        assert "Palette" in result.output
        assert "a90" in result.output

    def test_output_file(self, cli_runner: CliRunner, tmp_path: Path):
        out = tmp_path / "palette.css"
        result = cli_runner.invoke(app, ["generate", "#ed0707", "-o", str(out)])
        assert result.exit_code == 0
        assert out.read_text().startswith("--clr-primary-a0: rgba(237,7,7,1);")

    def test_bad_color(self, cli_runner: CliRunner):
        result = cli_runner.invoke(app, ["generate", "not-a-color"])
        assert result.exit_code == 1
        assert "Unparsable color" in result.output

    def test_bad_surface(self, cli_runner: CliRunner):
        result = cli_runner.invoke(app, ["generate", "#ed0707", "--surface", "#12"])
        assert result.exit_code == 1

    def test_mix_out_of_range(self, cli_runner: CliRunner):
        result = cli_runner.invoke(app, ["generate", "#ed0707", "--mix", "2"])
        assert result.exit_code != 0


class TestContrast:
    def test_pair(self, cli_runner: CliRunner):
        result = cli_runner.invoke(app, ["contrast", "#000000", "#ffffff"])
        assert result.exit_code == 0
        assert "21.00:1" in result.output
        assert "AAA" in result.output

    def test_failing_pair(self, cli_runner: CliRunner):
        result = cli_runner.invoke(app, ["contrast", "#777777", "#888888"])
        assert result.exit_code == 0
        assert "fail" in result.output

    def test_choose(self, cli_runner: CliRunner):
        result = cli_runner.invoke(app, ["contrast", "#000000"])
        assert result.exit_code == 0
        assert "Text color: rgba(255,255,255,1)" in result.output

    def test_bad_color(self, cli_runner: CliRunner):
        result = cli_runner.invoke(app, ["contrast", "nope"])
        assert result.exit_code == 1


class TestProjectCommands:
    def test_init(self, cli_runner: CliRunner, tmp_path: Path):
        result = cli_runner.invoke(
            app, ["init", "--project", str(tmp_path), "--primary", "#ed0707"]
        )
        assert result.exit_code == 0
        assert "Created" in result.output
        assert "#ed0707" in (tmp_path / "palettespec.yaml").read_text()

    def test_init_refuses_overwrite(self, cli_runner: CliRunner, tmp_path: Path):
        cli_runner.invoke(app, ["init", "--project", str(tmp_path)])
        result = cli_runner.invoke(app, ["init", "--project", str(tmp_path)])
        assert result.exit_code == 1
        assert "already exists" in result.output

    def test_init_force(self, cli_runner: CliRunner, tmp_path: Path):
        cli_runner.invoke(app, ["init", "--project", str(tmp_path)])
        result = cli_runner.invoke(app, ["init", "--project", str(tmp_path), "--force"])
        assert result.exit_code == 0

    def test_init_bad_color(self, cli_runner: CliRunner, tmp_path: Path):
        result = cli_runner.invoke(app, ["init", "--project", str(tmp_path), "--primary", "red"])
        assert result.exit_code == 1
        assert not (tmp_path / "palettespec.yaml").exists()

    def test_build(self, cli_runner: CliRunner, tmp_path: Path):
        cli_runner.invoke(app, ["init", "--project", str(tmp_path)])
        result = cli_runner.invoke(app, ["build", "--project", str(tmp_path)])
        assert result.exit_code == 0
        css = (tmp_path / "theme.css").read_text()
        assert css.startswith(":root {")
        assert "--clr-success-a0: rgba(34,148,110,1);" in css

    def test_build_output_override(self, cli_runner: CliRunner, tmp_path: Path):
        cli_runner.invoke(app, ["init", "--project", str(tmp_path)])
        out = tmp_path / "dist" / "vars.css"
        result = cli_runner.invoke(app, ["build", "--project", str(tmp_path), "-o", str(out)])
        assert result.exit_code == 0
        assert out.exists()

    def test_build_without_spec(self, cli_runner: CliRunner, tmp_path: Path):
        result = cli_runner.invoke(app, ["build", "--project", str(tmp_path)])
        assert result.exit_code == 1
        assert "not found" in result.output

    def test_build_invalid_spec(self, cli_runner: CliRunner, tmp_path: Path):
        (tmp_path / "palettespec.yaml").write_text("palette: [oops\n")
        result = cli_runner.invoke(app, ["build", "--project", str(tmp_path)])
        assert result.exit_code == 1
        assert "Invalid YAML" in result.output

    def test_build_rejects_unparsable_color(self, cli_runner: CliRunner, tmp_path: Path):
        (tmp_path / "palettespec.yaml").write_text("palette:\n  primary: 'nope'\n")
        result = cli_runner.invoke(app, ["build", "--project", str(tmp_path)])
        assert result.exit_code == 1
        assert "Unparsable color" in result.output
        assert not (tmp_path / "theme.css").exists()
