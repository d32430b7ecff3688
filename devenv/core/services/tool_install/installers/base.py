"""
Installer base — one installation mechanism behind a uniform contract.

To add an install method:
    1. Add a member to ``InstallMethod``
    2. Subclass ``Installer`` and implement ``method`` and ``install``
    3. Register it on the ``InstallationOrchestrator``
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from devenv.core.models.tool import InstallMethod, ToolDescriptor


class Installer(ABC):
    """Installs tools declared with one ``InstallMethod``."""

    @property
    @abstractmethod
    def method(self) -> InstallMethod:
        """The install method this installer handles."""

    @abstractmethod
    def install(self, tool: ToolDescriptor) -> None:
        """Install ``tool``.

        Raises:
            InstallError: On any failure. Returning means success.
        """

    def __repr__(self) -> str:
        return f"<{self.__class__.__name__} method={self.method.value!r}>"
