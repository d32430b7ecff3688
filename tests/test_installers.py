"""
Tests for installers — apt, script, and manual.
"""

import pytest

from devenv.adapters.shell.command import ShellCommandExecutor
from devenv.core.models.tool import InstallMethod
from devenv.core.services.tool_install.errors import (
    CommandExecutionError,
    MissingParameterError,
    MissingScriptPathError,
)
from devenv.core.services.tool_install.installers import (
    AptInstaller,
    ManualInstaller,
    ScriptInstaller,
)

# ── APT ──────────────────────────────────────────────────────────────


class TestAptInstaller:
    def test_method(self, executor):
        assert AptInstaller(executor).method is InstallMethod.APT

    def test_update_then_install(self, executor, make_tool):
        AptInstaller(executor).install(make_tool("git", package_name="git"))
        assert executor.call_log == ["sudo apt update", "sudo apt install -y git"]

    def test_uses_package_name_not_id(self, executor, make_tool):
        AptInstaller(executor).install(make_tool("neovim", package_name="neovim-qt"))
        assert executor.call_log[-1] == "sudo apt install -y neovim-qt"

    def test_update_failure_stops_before_install(self, executor, make_tool):
        executor.set_failure("apt update", "exit status 100")
        with pytest.raises(CommandExecutionError) as exc_info:
            AptInstaller(executor).install(make_tool("git"))
        assert "failed to update package list" in str(exc_info.value)
        assert "exit status 100" in str(exc_info.value)
        assert executor.call_log == ["sudo apt update"]

    def test_install_failure(self, executor, make_tool):
        executor.set_failure("apt install", "E: Unable to locate package")
        with pytest.raises(CommandExecutionError) as exc_info:
            AptInstaller(executor).install(make_tool("nonexistent-pkg"))
        message = str(exc_info.value)
        assert "failed to install package nonexistent-pkg" in message
        assert "Unable to locate package" in message
        assert exc_info.value.command == "sudo apt install -y nonexistent-pkg"
        assert isinstance(exc_info.value.__cause__, CommandExecutionError)

    def test_several_packages(self, executor, make_tool):
        AptInstaller(executor).install(make_tool("build", package_name="build-essential cmake"))
        assert executor.call_log[-1] == "sudo apt install -y build-essential cmake"

    def test_whitespace_only_package_name(self, executor, make_tool):
        with pytest.raises(MissingParameterError):
            AptInstaller(executor).install(make_tool("git", package_name="   "))
        assert executor.call_count == 0

    def test_empty_package_name(self, executor, make_tool):
        with pytest.raises(MissingParameterError):
            AptInstaller(executor).install(make_tool("git", package_name=""))
        assert executor.call_count == 0


# ── Script ───────────────────────────────────────────────────────────


class TestScriptInstaller:
    def test_method(self, executor):
        assert ScriptInstaller(executor).method is InstallMethod.SCRIPT

    def test_runs_script_with_bash(self, executor, make_tool):
        tool = make_tool("docker", "script", install_script="install_scripts/docker.sh")
        ScriptInstaller(executor).install(tool)
        assert executor.call_log == ["bash install_scripts/docker.sh"]

    def test_path_with_spaces_quoted(self, executor, make_tool):
        tool = make_tool("docker", "script", install_script="my scripts/docker.sh")
        ScriptInstaller(executor).install(tool)
        assert executor.call_log == ["bash 'my scripts/docker.sh'"]

    def test_home_relative_script_expanded(self, executor, make_tool, monkeypatch, tmp_path):
        monkeypatch.setenv("HOME", str(tmp_path))
        tool = make_tool("hello", "script", install_script="~/hello.sh")
        ScriptInstaller(executor).install(tool)
        assert executor.call_log == [f"bash {tmp_path}/hello.sh"]

    def test_home_relative_script_runs(self, make_tool, monkeypatch, tmp_path):
        monkeypatch.setenv("HOME", str(tmp_path))
        marker = tmp_path / "ran"
        (tmp_path / "hello.sh").write_text(f"touch {marker}\n")
        tool = make_tool("hello", "script", install_script="~/hello.sh")
        ScriptInstaller(ShellCommandExecutor(capture_output=True)).install(tool)
        assert marker.exists()

    def test_empty_script_path(self, executor, make_tool):
        tool = make_tool("docker", "script", install_script="")
        with pytest.raises(MissingScriptPathError, match="install script path is required"):
            ScriptInstaller(executor).install(tool)
        assert executor.call_count == 0

    def test_script_failure_names_script(self, executor, make_tool):
        executor.set_failure("docker.sh", "exit status 1")
        tool = make_tool("docker", "script", install_script="install_scripts/docker.sh")
        with pytest.raises(CommandExecutionError) as exc_info:
            ScriptInstaller(executor).install(tool)
        assert "failed to execute install script install_scripts/docker.sh" in str(exc_info.value)
        assert "exit status 1" in str(exc_info.value)


# ── Manual ───────────────────────────────────────────────────────────


class TestManualInstaller:
    def test_method(self):
        assert ManualInstaller().method is InstallMethod.MANUAL

    def test_prints_notes(self, make_tool):
        lines: list[str] = []
        tool = make_tool(
            "alacritty", "manual",
            display_name="Alacritty Terminal",
            notes="Install via winget on Windows.",
        )
        ManualInstaller(echo=lines.append).install(tool)
        assert lines[0] == "Manual installation required for Alacritty Terminal (alacritty)"
        assert lines[1] == "Installation instructions:\nInstall via winget on Windows."
        assert "devenv status" in lines[-1]

    def test_fallback_without_notes(self, make_tool):
        lines: list[str] = []
        ManualInstaller(echo=lines.append).install(
            make_tool("alacritty", "manual", display_name="Alacritty Terminal")
        )
        assert (
            "No specific installation instructions provided. "
            "Please install Alacritty Terminal manually."
        ) in lines
        assert "verify" in lines[-1]

    def test_defaults_to_click_echo(self, make_tool, capsys):
        ManualInstaller().install(make_tool("alacritty", "manual", notes="see docs"))
        out = capsys.readouterr().out
        assert "Manual installation required" in out
        assert "see docs" in out

