from __future__ import annotations

import logging
import warnings
from collections.abc import Iterable, Iterator, Mapping
from types import MappingProxyType

from typing_extensions import Self

from lazywire.descriptors import (
    ModuleDescriptor,
    TrackedCallable,
    callable_name,
    describe_descriptor,
    get_default_export,
)
from lazywire.exceptions import (
    LazyWireDuplicateNameError,
    NonCallableExportWarning,
    UnnamedExportWarning,
)
from lazywire.policies import DuplicateNamePolicy

logger = logging.getLogger(__name__)


class Registry:
    """Own the mapping from callable name to callable implementation.

    A registry is populated once from an ordered sequence of module descriptors
    and is read-only afterwards. Lookups never mutate it, so any number of
    resolutions can share one registry.
    """

    def __init__(self, entries: Mapping[str, TrackedCallable] | None = None) -> None:
        self._entries: dict[str, TrackedCallable] = dict(entries or {})
        self._view: Mapping[str, TrackedCallable] = MappingProxyType(self._entries)

    @classmethod
    def build(
        cls,
        descriptors: Iterable[ModuleDescriptor],
        *,
        duplicate_policy: DuplicateNamePolicy = DuplicateNamePolicy.REPLACE,
        stacklevel: int = 1,
    ) -> Self:
        """Build a registry from module descriptors.

        Descriptors are consumed in order. A descriptor without a default
        export is ignored. A default export without a usable name triggers an
        ``UnnamedExportWarning`` and a default export that is not callable
        triggers a ``NonCallableExportWarning``; both are skipped and the
        remaining descriptors are still processed.

        Args:
            descriptors: Ordered descriptors, usually imported modules.
            duplicate_policy: What to do when a name is exported twice. The
                default keeps the last registration.
            stacklevel: Frame of the warnings to report, counted like
                ``warnings.warn``'s ``stacklevel`` from the caller of ``build``.
                Wrappers around ``build`` pass 2 so warnings point at their caller.

        Returns:
            The populated registry.

        Raises:
            LazyWireDuplicateNameError: If ``duplicate_policy`` is
                ``DuplicateNamePolicy.ERROR`` and a name repeats.

        """
        registry = cls()
        for descriptor in descriptors:
            registry._track(
                descriptor,
                duplicate_policy=duplicate_policy,
                stacklevel=stacklevel + 1,
            )

        logger.info("Registry built: tracked_count=%d", len(registry))
        return registry

    def _track(
        self,
        descriptor: ModuleDescriptor,
        *,
        duplicate_policy: DuplicateNamePolicy,
        stacklevel: int,
    ) -> None:
        export = get_default_export(descriptor)
        if export is None:
            return

        label = describe_descriptor(descriptor)
        if not callable(export):
            msg = (
                f"Default export in {label} is not callable, "
                "and so will be skipped in dependencies."
            )
            self._warn(msg, NonCallableExportWarning, stacklevel=stacklevel + 1)
            return

        name = callable_name(export)
        if name is None:
            msg = (
                f"Default export in {label} does not have a 'name' property, "
                "and so will be skipped in dependencies."
            )
            self._warn(msg, UnnamedExportWarning, stacklevel=stacklevel + 1)
            return

        if name in self._entries:
            if duplicate_policy is DuplicateNamePolicy.ERROR:
                raise LazyWireDuplicateNameError(name, descriptor)
            logger.debug("Replacing tracked callable '%s'", name)

        self._entries[name] = export
        logger.debug("Tracked callable '%s' from %s", name, label)

    def _warn(self, msg: str, category: type[Warning], *, stacklevel: int) -> None:
        logger.warning(msg)
        warnings.warn(msg, category, stacklevel=stacklevel + 1)

    def lookup(self, name: str) -> TrackedCallable | None:
        """Return the callable tracked under ``name``, or ``None``."""
        return self._entries.get(name)

    @property
    def tracked_functions(self) -> Mapping[str, TrackedCallable]:
        """Read-only view of the name to callable mapping."""
        return self._view

    def __contains__(self, name: object) -> bool:
        return name in self._entries

    def __iter__(self) -> Iterator[str]:
        return iter(self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({sorted(self._entries)!r})"
