"""Quickstart: track named callables and read them lazily by name.

Each descriptor exports one callable as ``default``. ``ServiceB`` never
imports ``ServiceA``; it reads it from its dependency view when it runs.
"""

from __future__ import annotations

import asyncio
from types import SimpleNamespace

from lazywire import Injector


def ServiceA() -> int:
    return 42


def ServiceB() -> int:
    service_a = ServiceB.dependencies.ServiceA
    return service_a()


async def main() -> None:
    injector = await Injector.init(
        [SimpleNamespace(default=ServiceA), SimpleNamespace(default=ServiceB)],
    )
    print(f"tracked={sorted(injector.tracked_functions)}")  # => tracked=['ServiceA', 'ServiceB']

    service_b = injector.inject_dependencies(ServiceB)
    print(f"result={service_b()}")  # => result=42


if __name__ == "__main__":
    asyncio.run(main())
