"""
Domain models — types shared by the installer core and the CLI.

All models are re-exported here for convenient access:

    from devenv.core.models import ToolDescriptor, Selection, InstallationResult
"""

from devenv.core.models.result import InstallationResult, InstallReport
from devenv.core.models.selection import CategorySelection, Selection
from devenv.core.models.status import ToolStatus
from devenv.core.models.tool import InstallMethod, ToolCatalog, ToolDescriptor

__all__ = [
    # result.py
    "InstallReport",
    "InstallationResult",
    # selection.py
    "CategorySelection",
    "Selection",
    # status.py
    "ToolStatus",
    # tool.py
    "InstallMethod",
    "ToolCatalog",
    "ToolDescriptor",
]
