"""
Tests for the CLI — global options and the interactive generate command.
"""

import json
import subprocess
import textwrap
from pathlib import Path
from unittest.mock import patch

from click.testing import CliRunner

from node_template.main import cli


class TestCLIGlobal:
    def test_help(self):
        result = CliRunner().invoke(cli, ["--help"])
        assert result.exit_code == 0
        assert "full-stack Node.js project templates" in result.output
        assert "generate" in result.output

    def test_generate_help(self):
        result = CliRunner().invoke(cli, ["generate", "--help"])
        assert result.exit_code == 0
        assert "--typescript" in result.output
        assert "-t" in result.output


class TestGenerateCommand:
    def test_missing_node_exits_1(self, workspace: Path, node_missing):
        result = CliRunner().invoke(cli, ["generate"], input="1\n2\n1\n")
        assert result.exit_code == 1
        assert "Node.js is not installed." in result.output
        assert "Please install Node.js from https://nodejs.org/en/download/" in result.output
        assert "Select project extension:" not in result.output
        assert "not found on PATH" not in result.output

    def test_backend_javascript(self, workspace: Path, node_installed):
        result = CliRunner().invoke(cli, ["generate"], input="2\n2\n1\n")
        assert result.exit_code == 0, result.output

        backend = workspace / "backend"
        for sub in ("controllers", "routes", "models"):
            assert (backend / "src" / sub).is_dir()
        assert (backend / "src" / "index.js").is_file()
        assert not (backend / "src" / "index.ts").exists()
        manifest = json.loads((backend / "package.json").read_text())
        assert manifest["dependencies"]["express"] == "^4.17.1"

    def test_backend_typescript(self, workspace: Path, node_installed):
        result = CliRunner().invoke(cli, ["generate"], input="1\n2\n1\n")
        assert result.exit_code == 0, result.output
        assert (workspace / "backend" / "src" / "index.ts").is_file()

    def test_prompt_overrides_typescript_flag(self, workspace: Path, node_installed):
        result = CliRunner().invoke(cli, ["generate", "-t"], input="2\n2\n1\n")
        assert result.exit_code == 0, result.output
        assert (workspace / "backend" / "src" / "index.js").is_file()

    def test_invalid_input_reprompts(self, workspace: Path, node_installed):
        result = CliRunner().invoke(cli, ["generate"], input="5\nfoo\n2\n0\n2\n1\n")
        assert result.exit_code == 0, result.output
        assert result.output.count("Invalid option. Please select a valid number.") == 3
        assert result.output.count("Select project extension:") == 3
        assert result.output.count("Select project type:") == 2
        assert (workspace / "backend" / "src" / "index.js").is_file()

    def test_end_of_input_aborts(self, workspace: Path, node_installed):
        result = CliRunner().invoke(cli, ["generate"], input="9\n")
        assert result.exit_code == 1
        assert not (workspace / "backend").exists()

    def test_frontend_delegates_to_npx(self, workspace: Path, node_installed):
        completed = subprocess.CompletedProcess(args=[], returncode=0)
        with patch(
            "node_template.adapters.shell.command.subprocess.run", return_value=completed,
        ) as run:
            result = CliRunner().invoke(cli, ["generate"], input="2\n1\n2\n")

        assert result.exit_code == 0, result.output
        assert run.call_args[0][0] == ["npx", "create-next-app", "frontend"]
        assert "Frontend project created at: frontend" in result.output
        assert list(workspace.iterdir()) == []

    def test_frontend_generator_failure_exits_1(self, workspace: Path, node_installed):
        completed = subprocess.CompletedProcess(args=[], returncode=1)
        with patch(
            "node_template.adapters.shell.command.subprocess.run", return_value=completed,
        ):
            result = CliRunner().invoke(cli, ["generate"], input="2\n3\n1\n1\n")

        assert result.exit_code == 1
        assert "Error creating React app" in result.output
        assert "Select a backend framework:" not in result.output
        assert not (workspace / "backend").exists()

    def test_non_empty_frontend_dir_exits_1(self, workspace: Path, node_installed):
        (workspace / "frontend").mkdir()
        (workspace / "frontend" / "old.txt").write_text("keep me")

        with patch("node_template.adapters.shell.command.subprocess.run") as run:
            result = CliRunner().invoke(cli, ["generate"], input="2\n1\n1\n")

        assert result.exit_code == 1
        assert "Directory frontend contains files that could conflict" in result.output
        run.assert_not_called()
        assert [p.name for p in (workspace / "frontend").iterdir()] == ["old.txt"]

    def test_fullstack(self, workspace: Path, node_installed):
        completed = subprocess.CompletedProcess(args=[], returncode=0)
        with patch(
            "node_template.adapters.shell.command.subprocess.run", return_value=completed,
        ):
            result = CliRunner().invoke(cli, ["generate"], input="1\n3\n1\n1\n")

        assert result.exit_code == 0, result.output
        out = result.output
        assert out.index("Frontend project created at") < out.index("Select a backend framework:")
        assert (workspace / "backend" / "src" / "index.ts").is_file()

    def test_backend_failure_keeps_frontend(self, workspace: Path, node_installed):
        def fake_run(command, cwd, check):
            app = Path(cwd) / command[2]
            app.mkdir()
            (app / "App.js").write_text("export default App;\n")
            return subprocess.CompletedProcess(args=command, returncode=0)

        (workspace / "backend").write_text("not a directory")
        with patch("node_template.adapters.shell.command.subprocess.run", side_effect=fake_run):
            result = CliRunner().invoke(cli, ["generate"], input="2\n3\n1\n1\n")

        assert result.exit_code == 1
        assert (workspace / "frontend" / "App.js").is_file()
        assert "Frontend project created at: frontend" in result.output
        assert "Error creating directory" in result.output
        assert result.output.count("Error creating directory") == 1
        assert (workspace / "backend").read_text() == "not a directory"

    def test_dry_run(self, workspace: Path, node_installed):
        result = CliRunner().invoke(cli, ["generate", "--dry-run"], input="2\n3\n1\n1\n")
        assert result.exit_code == 0, result.output
        assert "[dry-run]" in result.output
        assert "Dry run complete" in result.output
        assert list(workspace.iterdir()) == []

    def test_mock(self, workspace: Path, node_installed):
        result = CliRunner().invoke(cli, ["generate", "--mock"], input="2\n3\n2\n1\n")
        assert result.exit_code == 0, result.output
        assert "[mock] next:frontend scaffolded" in result.output
        assert "[mock] express:backend scaffolded" in result.output
        assert list(workspace.iterdir()) == []


class TestConfigOption:
    def test_custom_backend_dir(self, workspace: Path, node_installed):
        config = workspace / "node-template.yml"
        config.write_text(textwrap.dedent("""\
            backend_dir: server
        """))
        result = CliRunner().invoke(cli, ["generate"], input="2\n2\n1\n")
        assert result.exit_code == 0, result.output
        assert (workspace / "server" / "package.json").is_file()

    def test_typescript_setting_seeds_flag_only(self, workspace: Path, node_installed):
        config = workspace / "node-template.yml"
        config.write_text("typescript: true\n")
        result = CliRunner().invoke(
            cli, ["--config", str(config), "generate"], input="2\n2\n1\n",
        )
        assert result.exit_code == 0, result.output
        assert (workspace / "backend" / "src" / "index.js").is_file()

    def test_invalid_config_exits_1(self, workspace: Path, node_installed):
        config = workspace / "bad.yml"
        config.write_text("runner: [\n")
        result = CliRunner().invoke(cli, ["--config", str(config), "generate"])
        assert result.exit_code == 1
        assert "Invalid YAML" in result.output
        assert result.output.count("Invalid YAML") == 1

    def test_missing_config_exits_1(self, workspace: Path):
        result = CliRunner().invoke(cli, ["--config", "nope.yml", "generate"])
        assert result.exit_code == 1
        assert "Config file not found" in result.output
