"""Lazy, name-based resolution of dependencies against a ``Registry``.

Wiring a target attaches a ``DependencyView`` to it and returns a
``WiredCallable``. Nothing is looked up at wiring time: each read from the view
looks the name up, re-wires the dependency with the extended resolution path
and hands back the dependency callable. Cycles are therefore reported on the
first read that closes them.

Example:
    .. code-block:: python

        def ServiceB() -> int:
            return ServiceB.dependencies.ServiceA()

        wired = resolver.wire(ServiceB)
        wired()

"""

from __future__ import annotations

import functools
import logging
from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from typing import Any

from lazywire.descriptors import TrackedCallable, callable_name
from lazywire.exceptions import (
    LazyWireCircularDependencyError,
    LazyWireInvalidTargetError,
    LazyWireMissingDependencyError,
)
from lazywire.registry import Registry

DEPENDENCIES_ATTR = "dependencies"

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class ResolutionPath:
    """Ordered set of names being resolved in one recursive descent."""

    names: tuple[str, ...] = ()

    @classmethod
    def of(cls, names: Iterable[str] | ResolutionPath | None) -> ResolutionPath:
        """Normalize user input into a path, dropping repeated names."""
        if names is None:
            return cls()
        if isinstance(names, ResolutionPath):
            return names
        return cls(tuple(dict.fromkeys(names)))

    def extend(self, name: str) -> ResolutionPath:
        """Return a new path with ``name`` appended; this path is left intact."""
        if name in self.names:
            return self
        return ResolutionPath((*self.names, name))

    def chain(self, name: str) -> tuple[str, ...]:
        """Return the traversal chain that re-enters ``name``."""
        return (*self.names, name)

    def __contains__(self, name: object) -> bool:
        return name in self.names

    def __iter__(self) -> Iterator[str]:
        return iter(self.names)

    def __len__(self) -> int:
        return len(self.names)


class DependencyView:
    """Per-target capability for reading registered callables by name.

    Reads are lazy. ``view.ServiceA`` and ``view["ServiceA"]`` are equivalent;
    each one validates the dependency's own chain by wiring it with this view's
    path extended by the owner name. Every attribute name that is not a dunder
    is a dependency read, so the view has no public members of its own; use
    ``view_owner`` and ``view_path`` to inspect it.
    """

    __slots__ = ("__lazywire_owner__", "__lazywire_path__", "__lazywire_resolver__")

    def __init__(self, resolver: Resolver, *, owner: str, path: ResolutionPath) -> None:
        self.__lazywire_resolver__ = resolver
        self.__lazywire_owner__ = owner
        self.__lazywire_path__ = path

    def __getattribute__(self, name: str) -> Any:
        if name.startswith("__") and name.endswith("__"):
            return object.__getattribute__(self, name)
        return self[name]

    def __getitem__(self, name: str) -> TrackedCallable:
        """Resolve ``name`` and return the registered callable itself.

        Raises:
            LazyWireMissingDependencyError: If ``name`` is not registered.
            LazyWireCircularDependencyError: If resolving ``name`` re-enters a
                name already on the path.

        """
        path = self.__lazywire_path__.extend(self.__lazywire_owner__)
        return self.__lazywire_resolver__.resolve(name, path=path)

    def __contains__(self, name: object) -> bool:
        return name in self.__lazywire_resolver__.registry

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(owner={self.__lazywire_owner__!r}, "
            f"path={list(self.__lazywire_path__)!r})"
        )


def view_owner(view: DependencyView) -> str:
    """Return the name of the target ``view`` is attached to."""
    return view.__lazywire_owner__


def view_path(view: DependencyView) -> ResolutionPath:
    """Return the resolution path ``view`` was created under."""
    return view.__lazywire_path__


class WiredCallable:
    """Callable wrapper holding a wired target and its dependency view.

    Calling the wrapper calls the target unchanged, whether the target is a
    function or a class. The wrapper does not implement ``__get__``, so
    storing it on a class and calling it through an instance never passes the
    instance along as a receiver.
    """

    def __init__(self, target: TrackedCallable, dependencies: DependencyView) -> None:
        functools.update_wrapper(self, target, updated=())
        self._target = target
        self.dependencies = dependencies

    def __call__(self, *args: Any, **kwargs: Any) -> Any:
        return self._target(*args, **kwargs)

    def unwrap(self) -> TrackedCallable:
        """Return the original target."""
        return self._target

    def __repr__(self) -> str:
        return f"<{type(self).__name__} {view_owner(self.dependencies)}>"


class Resolver:
    """Wire targets against a registry and resolve their named dependencies."""

    def __init__(self, registry: Registry) -> None:
        self._registry = registry

    @property
    def registry(self) -> Registry:
        return self._registry

    def wire(
        self,
        target: TrackedCallable,
        path: Iterable[str] | ResolutionPath | None = None,
    ) -> WiredCallable:
        """Attach a lazy dependency view to ``target`` and return it wrapped.

        The view is stored on the target as ``dependencies``. For a class this
        makes it visible to instances through ``self.dependencies`` as well.
        Wiring the same target again, or wiring a ``WiredCallable``, replaces
        the view with one that behaves identically.

        Args:
            target: Function or class to wire.
            path: Names already being resolved. Callers normally omit it.

        Returns:
            The wired wrapper; ``wrapper.dependencies`` is the attached view.

        Raises:
            LazyWireCircularDependencyError: If the target's name is already on
                ``path``.
            LazyWireInvalidTargetError: If the target has no usable name or
                rejects attribute assignment.

        """
        if isinstance(target, WiredCallable):
            target = target.unwrap()

        name = callable_name(target)
        if name is None:
            msg = f"Cannot wire {target!r}: it does not have a 'name' property."
            raise LazyWireInvalidTargetError(msg)

        resolution_path = ResolutionPath.of(path)
        if name in resolution_path:
            raise LazyWireCircularDependencyError(resolution_path.chain(name))

        view = DependencyView(self, owner=name, path=resolution_path)
        try:
            setattr(target, DEPENDENCIES_ATTR, view)
        except (AttributeError, TypeError) as error:
            msg = f"Cannot attach '{DEPENDENCIES_ATTR}' to '{name}'."
            raise LazyWireInvalidTargetError(msg) from error

        logger.debug("Wired '%s' with path %s", name, list(resolution_path))
        return WiredCallable(target, view)

    def resolve(self, name: str, *, path: ResolutionPath) -> TrackedCallable:
        """Look ``name`` up and re-wire it under ``path``.

        Raises:
            LazyWireMissingDependencyError: If ``name`` is not registered.
            LazyWireCircularDependencyError: If ``name`` is already on ``path``.

        """
        dependency = self._registry.lookup(name)
        if dependency is None:
            raise LazyWireMissingDependencyError(name)

        self.wire(dependency, path)
        return dependency


__all__ = [
    "DEPENDENCIES_ATTR",
    "DependencyView",
    "ResolutionPath",
    "Resolver",
    "WiredCallable",
    "view_owner",
    "view_path",
]
