"""Test doubles for the store's injected collaborators."""
import asyncio
from datetime import datetime, timedelta
from typing import List

SUCCESS_DRAW = 0.5
FAILURE_DRAW = 0.05


class FakeClock:
    """Clock that advances one second per reading."""

    def __init__(self, start: datetime, step: timedelta = timedelta(seconds=1)):
        self.now = start
        self.step = step

    def __call__(self) -> datetime:
        self.now = self.now + self.step
        return self.now


class FixedDraw:
    """Random source returning preset values; repeats the last one."""

    def __init__(self, *values: float):
        self.values: List[float] = list(values) or [SUCCESS_DRAW]
        self.calls = 0

    def __call__(self) -> float:
        index = min(self.calls, len(self.values) - 1)
        self.calls += 1
        return self.values[index]

    def set(self, *values: float) -> None:
        self.values = list(values)
        self.calls = 0


class RecordingSleep:
    """Async delay that records its argument and returns after one loop turn."""

    def __init__(self):
        self.delays: List[float] = []

    async def __call__(self, delay: float) -> None:
        self.delays.append(delay)
        await asyncio.sleep(0)


class GatedSleep(RecordingSleep):
    """Async delay that holds every confirmation until the gate opens."""

    def __init__(self):
        super().__init__()
        self.gate = asyncio.Event()

    async def __call__(self, delay: float) -> None:
        self.delays.append(delay)
        await self.gate.wait()

    def release(self) -> None:
        self.gate.set()
