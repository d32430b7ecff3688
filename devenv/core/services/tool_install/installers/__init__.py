"""Installers — one module per install method."""

from devenv.core.services.tool_install.installers.apt import AptInstaller
from devenv.core.services.tool_install.installers.base import Installer
from devenv.core.services.tool_install.installers.manual import ManualInstaller
from devenv.core.services.tool_install.installers.script import ScriptInstaller

__all__ = [
    "AptInstaller",
    "Installer",
    "ManualInstaller",
    "ScriptInstaller",
]
