"""Filesystem discovery of module descriptors.

Discovery is a thin collaborator of the registry: it imports every ``*.py``
file below a root directory and returns the modules in traversal order. It
must finish before ``Injector.init`` builds the registry.
"""

from __future__ import annotations

import asyncio
import hashlib
import importlib.util
import logging
import sys
import warnings
from pathlib import Path
from types import ModuleType

from lazywire.exceptions import LazyWireDiscoveryError, ModuleLoadWarning

MODULE_SUFFIX = ".py"
SYNTHETIC_PACKAGE = "lazywire_discovered"
_SKIPPED_DIRECTORIES = frozenset({"__pycache__"})

logger = logging.getLogger(__name__)


def discover_modules(root: str | Path) -> list[ModuleType]:
    """Import every Python file below ``root`` and return the modules.

    Directories are walked depth-first with entries sorted by name, so the
    result order is stable across runs. Hidden entries and ``__pycache__`` are
    skipped. A file that fails to import is reported with a
    ``ModuleLoadWarning`` and left out; the walk continues.

    Args:
        root: Directory to walk.

    Returns:
        Imported modules in traversal order.

    Raises:
        LazyWireDiscoveryError: If ``root`` is not a directory.

    """
    root_path = Path(root).resolve()
    if not root_path.is_dir():
        msg = f"Discovery root '{root_path}' is not a directory."
        raise LazyWireDiscoveryError(msg)

    modules: list[ModuleType] = []
    for file_path in _iter_module_files(root_path):
        module = _load_module(file_path, root=root_path)
        if module is not None:
            modules.append(module)

    logger.info("Discovered %d modules under %s", len(modules), root_path)
    return modules


async def discover_modules_async(root: str | Path) -> list[ModuleType]:
    """Run ``discover_modules`` in a worker thread."""
    return await asyncio.to_thread(discover_modules, root)


def _iter_module_files(directory: Path) -> list[Path]:
    files: list[Path] = []
    for entry in sorted(directory.iterdir(), key=lambda path: path.name):
        if entry.name.startswith(".") or entry.name in _SKIPPED_DIRECTORIES:
            continue
        if entry.is_dir():
            files.extend(_iter_module_files(entry))
        elif entry.is_file() and entry.suffix == MODULE_SUFFIX:
            files.append(entry)
    return files


def _synthetic_module_name(file_path: Path, *, root: Path) -> str:
    relative = file_path.relative_to(root).with_suffix("")
    root_digest = hashlib.sha1(str(root).encode(), usedforsecurity=False).hexdigest()[:8]
    parts = [part.replace("-", "_").replace(".", "_") for part in relative.parts]
    return ".".join((SYNTHETIC_PACKAGE, f"root_{root_digest}", *parts))


def _load_module(file_path: Path, *, root: Path) -> ModuleType | None:
    module_name = _synthetic_module_name(file_path, root=root)
    spec = importlib.util.spec_from_file_location(module_name, file_path)
    if spec is None or spec.loader is None:
        _warn_load_failure(file_path, "no import loader available")
        return None

    module = importlib.util.module_from_spec(spec)
    sys.modules[module_name] = module
    try:
        spec.loader.exec_module(module)
    except Exception as error:  # noqa: BLE001
        sys.modules.pop(module_name, None)
        _warn_load_failure(file_path, f"{type(error).__name__}: {error}")
        return None

    logger.debug("Imported %s as %s", file_path, module_name)
    return module


def _warn_load_failure(file_path: Path, reason: str) -> None:
    msg = f"Failed to load module {file_path}: {reason}"
    logger.warning(msg)
    warnings.warn(msg, ModuleLoadWarning, stacklevel=4)


__all__ = ["discover_modules", "discover_modules_async"]
