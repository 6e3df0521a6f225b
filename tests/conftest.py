"""Shared pytest fixtures for lazywire tests."""

from __future__ import annotations

from types import SimpleNamespace

import pytest

from lazywire.injector import Injector
from lazywire.registry import Registry
from lazywire.resolution import Resolver


def ServiceA() -> int:
    return 42


def ServiceB() -> int:
    return ServiceB.dependencies.ServiceA()


def F() -> str:
    return F.dependencies.G()


def G() -> str:
    return G.dependencies.F()


@pytest.fixture()
def service_descriptors() -> list[SimpleNamespace]:
    """Descriptors exporting ServiceA and ServiceB."""
    return [SimpleNamespace(default=ServiceA), SimpleNamespace(default=ServiceB)]


@pytest.fixture()
def cyclic_descriptors() -> list[SimpleNamespace]:
    """Descriptors exporting F and G, which read each other."""
    return [SimpleNamespace(default=F), SimpleNamespace(default=G)]


@pytest.fixture()
def registry(service_descriptors: list[SimpleNamespace]) -> Registry:
    return Registry.build(service_descriptors)


@pytest.fixture()
def resolver(registry: Registry) -> Resolver:
    return Resolver(registry)


@pytest.fixture()
def injector(registry: Registry) -> Injector:
    return Injector(registry)
