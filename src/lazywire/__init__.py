from lazywire.discovery import discover_modules, discover_modules_async
from lazywire.exceptions import (
    LazyWireCircularDependencyError,
    LazyWireDiscoveryError,
    LazyWireDuplicateNameError,
    LazyWireError,
    LazyWireInvalidTargetError,
    LazyWireMissingDependencyError,
    LazyWireWarning,
    ModuleLoadWarning,
    NonCallableExportWarning,
    UnnamedExportWarning,
)
from lazywire.injector import Injector
from lazywire.policies import DuplicateNamePolicy
from lazywire.registry import Registry
from lazywire.resolution import (
    DependencyView,
    ResolutionPath,
    Resolver,
    WiredCallable,
    view_owner,
    view_path,
)

__all__ = [
    "DependencyView",
    "DuplicateNamePolicy",
    "Injector",
    "LazyWireCircularDependencyError",
    "LazyWireDiscoveryError",
    "LazyWireDuplicateNameError",
    "LazyWireError",
    "LazyWireInvalidTargetError",
    "LazyWireMissingDependencyError",
    "LazyWireWarning",
    "ModuleLoadWarning",
    "NonCallableExportWarning",
    "Registry",
    "ResolutionPath",
    "Resolver",
    "UnnamedExportWarning",
    "WiredCallable",
    "discover_modules",
    "discover_modules_async",
    "view_owner",
    "view_path",
]
