def Greeter(name: str) -> str:
    clock = Greeter.dependencies.Clock()
    return f"[{clock.now()}] hello {name}"


default = Greeter
