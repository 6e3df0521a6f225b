"""Discover ``default`` exports from a directory of modules.

Every ``*.py`` file below ``services/`` is imported. Modules without a
``default`` (``settings.py``) are ignored.
"""

from __future__ import annotations

import asyncio
from pathlib import Path

from lazywire import Injector, discover_modules_async

SERVICES_DIR = Path(__file__).resolve().parent / "services"


async def main() -> None:
    modules = await discover_modules_async(SERVICES_DIR)
    injector = await Injector.init(modules)
    print(f"tracked={sorted(injector.tracked_functions)}")  # => tracked=['Clock', 'Greeter']

    greet = injector.inject_dependencies(injector.tracked_functions["Greeter"])
    print(greet("world"))  # => [12:00] hello world


if __name__ == "__main__":
    asyncio.run(main())
