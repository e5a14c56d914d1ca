import time


class Clock:
    """Wall-clock source for the `clock` native."""
    def __init__(self, source=time.time):
        self.source = source

    def now(self) -> float:
        return float(self.source())
