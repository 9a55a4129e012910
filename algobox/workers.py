"""Two background workers printing alongside a main loop."""

from __future__ import annotations

import sys
import threading
import time
from typing import TextIO


def run_demo(
    rounds: int = 3,
    main_interval: float = 2.0,
    foo_interval: float = 1.0,
    bar_interval: float = 0.5,
    out: TextIO | None = None,
) -> None:
    """Run two repeating workers while the main thread reports ``rounds`` times.

    The workers stop once the main loop is over, before the final line.
    """
    if rounds < 0:
        raise ValueError("rounds must be non-negative")
    if min(main_interval, foo_interval, bar_interval) < 0:
        raise ValueError("intervals must be non-negative")
    stream = sys.stdout if out is None else out
    lock = threading.Lock()
    stop = threading.Event()

    def say(line: str) -> None:
        with lock:
            stream.write(line + "\n")
            stream.flush()

    def worker(line: str, interval: float) -> None:
        while not stop.is_set():
            say(line)
            stop.wait(interval)

    threads = [
        threading.Thread(target=worker, args=("I'm in foo", foo_interval), daemon=True),
        threading.Thread(target=worker, args=("I'm in Bar", bar_interval), daemon=True),
    ]
    for thread in threads:
        thread.start()

    say("main, foo and bar now executing concurrently ...")
    try:
        for _ in range(rounds):
            say("main is running...")
            time.sleep(main_interval)
    finally:
        stop.set()
        for thread in threads:
            thread.join()
    say("main is completed")