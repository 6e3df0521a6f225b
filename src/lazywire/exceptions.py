from __future__ import annotations

from collections.abc import Sequence


class LazyWireError(Exception):
    """Represent a base class for all lazywire-specific failures.

    Catch this type when you want to handle any lazywire error path without
    matching each concrete exception class individually.
    """


class LazyWireMissingDependencyError(LazyWireError):
    """Signal that a dependency name has no registered callable.

    Raised when a name is read from a dependency view (for example
    ``ServiceB.dependencies.ServiceA``) and the registry has no entry for it.
    The error is raised at the read site, which may happen long after the
    target was wired.

    Typical fixes include adding the module that exports the callable to the
    descriptors passed to ``Injector.init`` or fixing a typo in the name.
    """

    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(f"Dependency {name} not tracked.")


class LazyWireCircularDependencyError(LazyWireError):
    """Signal that a name was re-entered on the active resolution path.

    The message enumerates the whole chain in traversal order, for example
    ``"Circular dependency detected: F -> G -> F"``. Detection is dynamic: a
    cycle is reported only once the reads that form it are actually executed.
    """

    def __init__(self, chain: Sequence[str]) -> None:
        self.chain = tuple(chain)
        super().__init__(f"Circular dependency detected: {' -> '.join(self.chain)}")


class LazyWireDuplicateNameError(LazyWireError):
    """Signal that two descriptors export a callable under the same name.

    Raised by ``Registry.build`` only when ``DuplicateNamePolicy.ERROR`` is
    selected. The default policy replaces the earlier registration silently.
    """

    def __init__(self, name: str, descriptor: object) -> None:
        self.name = name
        self.descriptor = descriptor
        super().__init__(f"Callable name '{name}' from {descriptor!r} is already registered.")


class LazyWireInvalidTargetError(LazyWireError):
    """Signal that a callable cannot be wired.

    Raised by ``Resolver.wire`` when the target has no usable name or does not
    accept the ``dependencies`` attribute (builtins, slotted callables).
    """


class LazyWireDiscoveryError(LazyWireError):
    """Signal that module discovery cannot start.

    Raised by ``discover_modules`` when the root directory does not exist.
    Failures of individual files are reported as ``ModuleLoadWarning`` instead.
    """


class LazyWireWarning(UserWarning):
    """Base class for non-fatal lazywire warnings."""


class UnnamedExportWarning(LazyWireWarning):
    """A descriptor's default export has no name and was skipped."""


class ModuleLoadWarning(LazyWireWarning):
    """A discovered module failed to import and was skipped."""


class NonCallableExportWarning(LazyWireWarning):
    """A descriptor's default export is not callable and was skipped."""
