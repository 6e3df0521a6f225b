"""Circular and missing dependencies are reported when they are read.

Wiring never looks anything up, so both failures below surface only when the
wired callable runs.
"""

from __future__ import annotations

from types import SimpleNamespace

from lazywire import Injector, LazyWireCircularDependencyError, LazyWireMissingDependencyError


def F() -> object:
    return F.dependencies.G()


def G() -> object:
    return G.dependencies.F()


def Orphan() -> object:
    return Orphan.dependencies.Parent()


def main() -> None:
    injector = Injector.from_descriptors([SimpleNamespace(default=F), SimpleNamespace(default=G)])

    wired_f = injector.inject_dependencies(F)
    print("wired=F")  # => wired=F

    try:
        wired_f()
    except LazyWireCircularDependencyError as error:
        print(f"cycle={' -> '.join(error.chain)}")  # => cycle=F -> G -> F

    try:
        injector.inject_dependencies(Orphan)()
    except LazyWireMissingDependencyError as error:
        print(f"missing={error.name}")  # => missing=Parent


if __name__ == "__main__":
    main()
