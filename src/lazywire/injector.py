from __future__ import annotations

import logging
from collections.abc import AsyncIterable, Iterable, Mapping

from typing_extensions import Self

from lazywire.descriptors import ModuleDescriptor, TrackedCallable
from lazywire.policies import DuplicateNamePolicy
from lazywire.registry import Registry
from lazywire.resolution import ResolutionPath, Resolver, WiredCallable

logger = logging.getLogger(__name__)


class Injector:
    """Track named callables and wire their dependencies lazily.

    Build an injector with ``await Injector.init(descriptors)`` once module
    discovery has finished. The registry is fixed from then on; each call to
    ``inject_dependencies`` attaches a fresh dependency view to its target.

    Examples:
        .. code-block:: python

            modules = discover_modules("services")
            injector = await Injector.init(modules)

            def handler() -> str:
                return handler.dependencies.Greeter("world")

            injector.inject_dependencies(handler)()

    """

    def __init__(self, registry: Registry) -> None:
        self._registry = registry
        self._resolver = Resolver(registry)

    @classmethod
    async def init(
        cls,
        descriptors: Iterable[ModuleDescriptor] | AsyncIterable[ModuleDescriptor],
        *,
        duplicate_policy: DuplicateNamePolicy = DuplicateNamePolicy.REPLACE,
    ) -> Self:
        """Build an injector from a finished sequence of module descriptors.

        Asynchronous iterables are drained before the registry is built, so a
        streaming discovery step completes before any wiring happens. Registry
        warnings point at the coroutine awaiting ``init``.

        Args:
            descriptors: Ordered descriptors, usually imported modules.
            duplicate_policy: Handling of names exported more than once.

        """
        if isinstance(descriptors, AsyncIterable):
            descriptors = [descriptor async for descriptor in descriptors]
        registry = Registry.build(descriptors, duplicate_policy=duplicate_policy, stacklevel=2)
        return cls(registry)

    @classmethod
    def from_descriptors(
        cls,
        descriptors: Iterable[ModuleDescriptor],
        *,
        duplicate_policy: DuplicateNamePolicy = DuplicateNamePolicy.REPLACE,
    ) -> Self:
        """Synchronous counterpart of ``init``."""
        registry = Registry.build(descriptors, duplicate_policy=duplicate_policy, stacklevel=2)
        return cls(registry)

    @property
    def registry(self) -> Registry:
        return self._registry

    @property
    def tracked_functions(self) -> Mapping[str, TrackedCallable]:
        """Read-only view of the name to callable mapping."""
        return self._registry.tracked_functions

    def inject_dependencies(
        self,
        target: TrackedCallable,
        visited: Iterable[str] | ResolutionPath | None = None,
    ) -> WiredCallable:
        """Wire ``target`` and return it bound to its dependency view.

        Args:
            target: Function or class whose body reads ``dependencies``.
            visited: Names already on the resolution path.

        Raises:
            LazyWireCircularDependencyError: If the target's name is in
                ``visited``.
            LazyWireInvalidTargetError: If the target cannot carry a view.

        """
        return self._resolver.wire(target, visited)

    def inject(self, target: TrackedCallable) -> WiredCallable:
        """Decorator form of ``inject_dependencies``.

        .. code-block:: python

            @injector.inject
            def handler() -> int:
                return handler.dependencies.Counter()

        """
        return self.inject_dependencies(target)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(tracked={sorted(self._registry)!r})"
