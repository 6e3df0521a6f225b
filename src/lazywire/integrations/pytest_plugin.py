from __future__ import annotations

from collections.abc import Iterable

import pytest

from lazywire.injector import Injector


@pytest.fixture()
def lazywire_descriptors() -> Iterable[object]:
    """Fixture hook for the module descriptors tracked in tests.

    Users must override this fixture in their own test suite, for example by
    returning ``discover_modules(...)`` or a list of namespaces with a
    ``default`` attribute.

    """
    msg = (
        "The lazywire pytest plugin requires overriding the 'lazywire_descriptors' fixture in "
        "your test suite. Define @pytest.fixture() def lazywire_descriptors() -> list[object]: "
        "... and return the descriptors to track."
    )
    raise RuntimeError(msg)


@pytest.fixture()
def lazywire_injector(lazywire_descriptors: Iterable[object]) -> Injector:
    """Injector built from ``lazywire_descriptors``."""
    return Injector.from_descriptors(lazywire_descriptors)


__all__ = ["lazywire_descriptors", "lazywire_injector"]
