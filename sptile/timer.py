"""Wall-clock timers grouped by verbosity level."""

from __future__ import annotations

import sys
import time
from collections.abc import Callable
from dataclasses import dataclass, field
from enum import IntEnum
from typing import TextIO


def monotonic_seconds() -> float:
    """Return seconds from a high-resolution monotonic clock."""
    return time.perf_counter()


class TimerId(IntEnum):
    """Index of each timer; the LVL entries mark verbosity boundaries."""

    LVL0 = 0
    ALL = 1
    CPD = 2
    REORDER = 3
    CONVERT = 4
    LVL1 = 5
    MTTKRP = 6
    INV = 7
    FIT = 8
    MATMUL = 9
    ATA = 10
    MATNORM = 11
    IO = 12
    PART = 13
    LVL2 = 14
    SPLATT = 15
    GIGA = 16
    DFACTO = 17
    TTBOX = 18
    SORT = 19
    TILE = 20
    MISC = 21
    NTIMERS = 22


TIMER_NAMES: dict[TimerId, str] = {
    TimerId.ALL: "TOTAL",
    TimerId.CPD: "CPD",
    TimerId.IO: "IO",
    TimerId.MTTKRP: "MTTKRP",
    TimerId.INV: "INVERSE",
    TimerId.SPLATT: "SPLATT",
    TimerId.GIGA: "GIGA",
    TimerId.TTBOX: "TTBOX",
    TimerId.DFACTO: "DFACTO",
    TimerId.REORDER: "REORDER",
    TimerId.SORT: "SORT",
    TimerId.TILE: "TILE",
    TimerId.CONVERT: "CONVERT",
    TimerId.FIT: "CPD FIT",
    TimerId.MATMUL: "MAT MULT",
    TimerId.ATA: "MAT A^TA",
    TimerId.MATNORM: "MAT NORM",
    TimerId.PART: "PART1D",
    TimerId.MISC: "MISC",
}


@dataclass
class Timer:
    """An accumulating wall-clock timer."""

    running: bool = False
    seconds: float = 0.0
    started_at: float = 0.0
    stopped_at: float = 0.0
    clock: Callable[[], float] = field(
        default=monotonic_seconds, repr=False, compare=False
    )

    def reset(self) -> None:
        """Clear all accumulated state."""
        self.running = False
        self.seconds = 0.0
        self.started_at = 0.0
        self.stopped_at = 0.0

    def start(self) -> None:
        """Start timing; does nothing if already running."""
        if not self.running:
            self.running = True
            self.started_at = self.clock()

    def stop(self) -> None:
        """Stop timing and add the elapsed time to ``seconds``."""
        self.running = False
        self.stopped_at = self.clock()
        self.seconds += self.stopped_at - self.started_at

    def fstart(self) -> None:
        """Reset, then start."""
        self.reset()
        self.start()

    def __enter__(self) -> Timer:
        self.start()
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.stop()


_NEXT_LEVEL = {
    TimerId.LVL0: TimerId.LVL1,
    TimerId.LVL1: TimerId.LVL2,
    TimerId.LVL2: TimerId.NTIMERS,
}


class TimerSet:
    """One timer per :class:`TimerId`, plus a verbosity level for reports."""

    def __init__(self, clock: Callable[[], float] = monotonic_seconds) -> None:
        self._timers = [Timer(clock=clock) for _ in range(TimerId.NTIMERS)]
        self.level = TimerId.LVL1

    def __getitem__(self, timer_id: TimerId) -> Timer:
        return self._timers[timer_id]

    def reset(self) -> None:
        """Reset every timer and the verbosity level."""
        self.level = TimerId.LVL1
        for timer in self._timers:
            timer.reset()

    def inc_verbose(self) -> None:
        """Raise the reporting verbosity by one level."""
        self.level = _NEXT_LEVEL.get(self.level, self.level)

    def report(self, out: TextIO | None = None) -> None:
        """Write a summary of every used timer below the current level."""
        stream = out if out is not None else sys.stdout
        stream.write("\n")
        stream.write("Timing information " + "-" * 45 + "\n")
        for timer_id in TimerId:
            if timer_id >= self.level:
                break
            name = TIMER_NAMES.get(timer_id)
            seconds = self._timers[timer_id].seconds
            if name is not None and seconds > 0:
                stream.write(f"  {name:<20}{seconds:0.3f}s\n")


timers = TimerSet()