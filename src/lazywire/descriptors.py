"""Contract between module discovery and the registry.

A module descriptor is any object. Its default export is its ``default``
attribute; imported modules returned by ``discover_modules`` qualify, and so
does ``types.SimpleNamespace(default=func)``.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

from typing_extensions import TypeAlias

DEFAULT_EXPORT_ATTR = "default"
_ANONYMOUS_NAMES = frozenset({"", "<lambda>"})

ModuleDescriptor: TypeAlias = object
TrackedCallable: TypeAlias = Callable[..., Any]


def get_default_export(descriptor: ModuleDescriptor) -> Any | None:
    """Return the descriptor's default export, or ``None`` when it has none."""
    return getattr(descriptor, DEFAULT_EXPORT_ATTR, None)


def callable_name(obj: object) -> str | None:
    """Return the name a callable is tracked under.

    Args:
        obj: Default export or wiring target.

    Returns:
        The ``__name__`` of ``obj``, or ``None`` when it is missing, not a
        string, empty, or the anonymous ``<lambda>`` name.

    """
    name = getattr(obj, "__name__", None)
    if not isinstance(name, str) or name in _ANONYMOUS_NAMES:
        return None
    return name


def describe_descriptor(descriptor: ModuleDescriptor) -> str:
    location = getattr(descriptor, "__file__", None)
    if isinstance(location, str):
        return location
    module_name = getattr(descriptor, "__name__", None)
    if isinstance(module_name, str):
        return module_name
    return repr(descriptor)


__all__ = [
    "DEFAULT_EXPORT_ATTR",
    "ModuleDescriptor",
    "TrackedCallable",
    "callable_name",
    "describe_descriptor",
    "get_default_export",
]
