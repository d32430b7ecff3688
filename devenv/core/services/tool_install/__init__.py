"""
Tool installation service — package re-exports.

    from devenv.core.services.tool_install import create_orchestrator

Layers, leaves first: errors → resolver → installers → orchestration.
"""

from devenv.core.services.tool_install.errors import (  # noqa: F401
    CommandExecutionError,
    DependencyCycleError,
    InstallError,
    MissingParameterError,
    MissingScriptPathError,
    ResolutionError,
    UnknownInstallMethodError,
    UnknownToolError,
)
from devenv.core.services.tool_install.installers import (  # noqa: F401
    AptInstaller,
    Installer,
    ManualInstaller,
    ScriptInstaller,
)
from devenv.core.services.tool_install.orchestration import (  # noqa: F401
    InstallationOrchestrator,
    create_orchestrator,
)
from devenv.core.services.tool_install.resolver import (  # noqa: F401
    find_cycles,
    resolve_install_order,
    validate_catalog,
)
