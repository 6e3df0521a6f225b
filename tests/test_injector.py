from __future__ import annotations

import asyncio
from collections.abc import AsyncIterator
from types import SimpleNamespace

import pytest

from lazywire import (
    DuplicateNamePolicy,
    Injector,
    LazyWireCircularDependencyError,
    LazyWireDuplicateNameError,
    LazyWireMissingDependencyError,
    UnnamedExportWarning,
)
from lazywire.resolution import ResolutionPath, view_path
from tests.conftest import F, ServiceA, ServiceB


class TestInjectorInit:
    def test_init_builds_registry_from_descriptors(
        self,
        service_descriptors: list[SimpleNamespace],
    ) -> None:
        injector = asyncio.run(Injector.init(service_descriptors))

        assert dict(injector.tracked_functions) == {"ServiceA": ServiceA, "ServiceB": ServiceB}

    def test_init_drains_async_iterables(self, service_descriptors: list[SimpleNamespace]) -> None:
        async def stream() -> AsyncIterator[SimpleNamespace]:
            for descriptor in service_descriptors:
                await asyncio.sleep(0)
                yield descriptor

        injector = asyncio.run(Injector.init(stream()))

        assert set(injector.tracked_functions) == {"ServiceA", "ServiceB"}

    def test_init_skips_unnamed_exports(self) -> None:
        with pytest.warns(UnnamedExportWarning):
            injector = asyncio.run(Injector.init([SimpleNamespace(default=lambda: 1)]))

        assert len(injector.tracked_functions) == 0

    def test_init_warnings_point_at_awaiting_code(self) -> None:
        async def build() -> Injector:
            return await Injector.init([SimpleNamespace(default=lambda: 1)])

        with pytest.warns(UnnamedExportWarning) as record:
            asyncio.run(build())

        assert record[0].filename == __file__

    def test_from_descriptors_warnings_point_at_caller(self) -> None:
        with pytest.warns(UnnamedExportWarning) as record:
            Injector.from_descriptors([SimpleNamespace(default=lambda: 1)])

        assert record[0].filename == __file__

    def test_init_forwards_duplicate_policy(self) -> None:
        descriptors = [SimpleNamespace(default=ServiceA), SimpleNamespace(default=ServiceA)]

        with pytest.raises(LazyWireDuplicateNameError):
            asyncio.run(Injector.init(descriptors, duplicate_policy=DuplicateNamePolicy.ERROR))

    def test_tracked_functions_cannot_be_mutated(self, injector: Injector) -> None:
        with pytest.raises(TypeError):
            del injector.tracked_functions["ServiceA"]  # type: ignore[attr-defined]


class TestInjectDependencies:
    def test_service_b_returns_service_a_value(self, injector: Injector) -> None:
        wired = injector.inject_dependencies(ServiceB)

        assert wired() == 42

    def test_missing_service_a_is_reported_on_call(self) -> None:
        injector = Injector.from_descriptors([SimpleNamespace(default=ServiceB)])

        wired = injector.inject_dependencies(ServiceB)

        with pytest.raises(LazyWireMissingDependencyError) as exc_info:
            wired()
        assert exc_info.value.name == "ServiceA"

    def test_mutual_dependencies_fail_on_call_only(
        self,
        cyclic_descriptors: list[SimpleNamespace],
    ) -> None:
        injector = Injector.from_descriptors(cyclic_descriptors)

        wired = injector.inject_dependencies(F)

        with pytest.raises(LazyWireCircularDependencyError, match="F -> G -> F"):
            wired()

    def test_visited_path_is_respected(self, injector: Injector) -> None:
        with pytest.raises(LazyWireCircularDependencyError, match="ServiceB -> ServiceB"):
            injector.inject_dependencies(ServiceB, ResolutionPath(("ServiceB",)))

    def test_visited_path_extends_dependency_paths(self, injector: Injector) -> None:
        wired = injector.inject_dependencies(ServiceB, {"Caller"})

        _ = wired.dependencies.ServiceA

        assert list(view_path(ServiceA.dependencies)) == ["Caller", "ServiceB"]

    def test_inject_decorator(self, injector: Injector) -> None:
        @injector.inject
        def Consumer() -> int:
            return Consumer.dependencies.ServiceB() + 1

        assert Consumer() == 43
        assert Consumer.__name__ == "Consumer"

    def test_method_style_invocation_matches_direct_call(self, injector: Injector) -> None:
        wired = injector.inject_dependencies(ServiceB)
        holder = SimpleNamespace(call=wired)

        assert holder.call() == wired() == 42
