"""Unit tests for the config commands."""

from pathlib import Path

from markscrub.cli.main import app
from markscrub.core.config import ScrubConfig, load_config
from typer.testing import CliRunner

runner = CliRunner()


class TestConfigCommands:
    """Tests for markscrub config."""

    def test_init_writes_defaults(self, tmp_path: Path) -> None:
        """init writes a default config file."""
        target = tmp_path / "config.toml"

        result = runner.invoke(app, ["--config", str(target), "config", "init"])

        assert result.exit_code == 0
        assert load_config(target) == ScrubConfig()

    def test_init_refuses_overwrite(self, tmp_path: Path) -> None:
        """init without --force keeps an existing file."""
        target = tmp_path / "config.toml"
        target.write_text('report_name = "mine.txt"\n')

        result = runner.invoke(app, ["--config", str(target), "config", "init"])

        assert result.exit_code == 1
        assert "already exists" in result.output
        assert "mine.txt" in target.read_text()

    def test_init_force(self, tmp_path: Path) -> None:
        """init --force overwrites an existing file."""
        target = tmp_path / "config.toml"
        target.write_text('report_name = "mine.txt"\n')

        result = runner.invoke(app, ["--config", str(target), "config", "init", "--force"])

        assert result.exit_code == 0
        assert load_config(target).report_name == "loos.txt"

    def test_show(self, tmp_path: Path) -> None:
        """show prints the effective configuration."""
        target = tmp_path / "config.toml"
        target.write_text('[remote]\naccount = "me@example.org"\n')

        result = runner.invoke(app, ["--config", str(target), "config", "show"])

        assert result.exit_code == 0
        assert "me@example.org" in result.stdout
        assert "heuristic_loos.txt" in result.stdout

    def test_show_defaults(self, tmp_path: Path) -> None:
        """show works without a config file."""
        result = runner.invoke(app, ["--config", str(tmp_path / "none.toml"), "config", "show"])

        assert result.exit_code == 0
        assert "defaults" in result.stdout

    def test_path(self, tmp_path: Path) -> None:
        """path prints the selected config path."""
        target = tmp_path / "c.toml"
        result = runner.invoke(app, ["--config", str(target), "config", "path"])

        assert result.exit_code == 0
        assert "c.toml" in result.stdout

    def test_bracketed_path(self, tmp_path: Path) -> None:
        """Rich markup in the config path is printed literally."""
        target = tmp_path / "[/cfg]" / "config.toml"

        init_result = runner.invoke(app, ["--config", str(target), "config", "init"])
        path_result = runner.invoke(app, ["--config", str(target), "config", "path"])

        assert init_result.exit_code == 0
        assert "[/cfg]" in init_result.stdout.replace("\n", "")
        assert path_result.exit_code == 0
        assert "[/cfg]" in path_result.stdout
