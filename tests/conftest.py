"""
Shared test fixtures and configuration.
"""

import logging
import textwrap
from pathlib import Path

import pytest

from devenv.adapters.mock import RecordingCommandExecutor
from devenv.core.models.tool import ToolDescriptor


@pytest.fixture
def repo_root() -> Path:
    """Return the repository root directory."""
    return Path(__file__).parent.parent


@pytest.fixture
def executor() -> RecordingCommandExecutor:
    """Command executor that records instead of running."""
    return RecordingCommandExecutor()


@pytest.fixture
def make_tool():
    """Factory for ToolDescriptor with sensible defaults."""

    def _make(
        tool_id: str,
        install_method: str = "apt",
        dependencies: list[str] | None = None,
        **kwargs,
    ) -> ToolDescriptor:
        if install_method == "apt":
            kwargs.setdefault("package_name", tool_id)
        elif install_method == "script":
            kwargs.setdefault("install_script", f"install_scripts/{tool_id}.sh")
        kwargs.setdefault("display_name", tool_id.title())
        kwargs.setdefault("binary_name", tool_id)
        return ToolDescriptor(
            id=tool_id,
            install_method=install_method,
            dependencies=dependencies or [],
            **kwargs,
        )

    return _make


@pytest.fixture
def config_file(tmp_path: Path) -> Path:
    """A small valid config.yaml whose binaries are never on PATH."""
    content = textwrap.dedent("""\
        categories:
          development:
            git:
              display_name: Git
              binary_name: devenv-test-missing-git
              install_method: apt
              package_name: git
            lazydocker:
              display_name: Lazydocker Terminal UI
              binary_name: devenv-test-missing-lazydocker
              install_method: script
              install_script: install_scripts/lazydocker.sh
              dependencies: [docker]
            docker:
              display_name: Docker Engine
              binary_name: devenv-test-missing-docker
              install_method: script
              install_script: install_scripts/docker.sh
          terminals:
            alacritty:
              display_name: Alacritty Terminal
              binary_name: devenv-test-missing-alacritty
              install_method: manual
              wsl_notes: Install it on the Windows side.
    """)
    path = tmp_path / "config.yaml"
    path.write_text(content)
    return path


@pytest.fixture
def restore_logging():
    """Snapshot and restore root logger state around setup_logging calls."""
    root = logging.getLogger()
    handlers = list(root.handlers)
    level = root.level
    yield root
    for handler in root.handlers:
        if handler not in handlers:
            handler.close()
    root.handlers[:] = handlers
    root.setLevel(level)
