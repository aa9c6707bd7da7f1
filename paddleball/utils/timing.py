# paddleball/utils/timing.py
from __future__ import annotations
import time
from contextlib import contextmanager
from typing import Callable, Iterator

# --------------------------------------------------------------------------- #
# Wall-clock timing for a run of simulation ticks.  Usage:
#
#     with timing("pong", ticks=1000):
#         ...
#
# prints e.g. "pong: 1000 ticks in 0.052s (19230 ticks/s, 320.5× real time)"
# --------------------------------------------------------------------------- #
@contextmanager
def timing(section: str, ticks: int = 0, fps: int = 60,
           log: Callable[[str], None] = print) -> Iterator[None]:
    start = time.perf_counter()
    try:
        yield
    finally:
        elapsed = time.perf_counter() - start
        if ticks and elapsed > 0:
            rate = ticks / elapsed
            log(f"{section}: {ticks} ticks in {elapsed:.3f}s "
                f"({rate:.0f} ticks/s, {rate / fps:.1f}× real time)")
        else:
            log(f"{section} took {elapsed:.3f}s")
