class Clock:
    def now(self) -> str:
        return "12:00"


default = Clock
