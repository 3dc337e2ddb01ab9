"""A gallery whose exhibits visitors read while a staff member swaps them."""

from __future__ import annotations

import argparse
import sys
import threading
import time
from contextlib import contextmanager
from typing import Iterator, Mapping, Optional, Sequence

INITIAL_EXHIBITS = {
    "Katsushika Hokusai": "Thirty-six Views of Mount Fuji: The Great Wave off Kanagawa",
    "Alphonse Mucha": "The Zodiac",
}
ROTATED_EXHIBITS = {
    "Vincent van Gogh": "The Starry Night",
    "M. C. Escher": "Waterfall",
}


class _RWLock:
    """Many readers or one writer; waiting writers keep new readers out."""

    def __init__(self) -> None:
        self._cond = threading.Condition()
        self._readers = 0
        self._writer = False
        self._waiting_writers = 0

    @contextmanager
    def read(self) -> Iterator[None]:
        with self._cond:
            while self._writer or self._waiting_writers:
                self._cond.wait()
            self._readers += 1
        try:
            yield
        finally:
            with self._cond:
                self._readers -= 1
                if not self._readers:
                    self._cond.notify_all()

    @contextmanager
    def write(self) -> Iterator[None]:
        with self._cond:
            self._waiting_writers += 1
            while self._writer or self._readers:
                self._cond.wait()
            self._waiting_writers -= 1
            self._writer = True
        try:
            yield
        finally:
            with self._cond:
                self._writer = False
                self._cond.notify_all()


class Gallery:
    """Exhibits keyed by artist, kept in key order and guarded by a read-write lock."""

    def __init__(self, exhibits: Optional[Mapping[str, str]] = None) -> None:
        self._lock = _RWLock()
        self._exhibits = dict(sorted((exhibits or {}).items()))

    def snapshot(self) -> list:
        """Return the current ``(artist, work)`` pairs in artist order."""
        with self._lock.read():
            return list(self._exhibits.items())

    def replace(self, exhibits: Mapping[str, str]) -> None:
        """Take down every exhibit and hang ``exhibits`` instead."""
        with self._lock.write():
            self._exhibits = dict(sorted(exhibits.items()))


def _format(pairs: list) -> str:
    return "".join(f"{artist}:{work}, " for artist, work in pairs)


def run(visitors: int = 3, rounds: int = 8, changes: int = 4, interval: float = 1.0) -> list:
    """Simulate the gallery and return the lines the first visitor saw.

    Each visitor looks ``rounds`` times, pausing ``interval`` seconds between
    looks; the staff swaps the exhibits ``changes`` times, pausing twice as long.
    """
    if visitors < 0 or rounds < 0 or changes < 0 or interval < 0:
        raise ValueError("arguments must be non-negative")

    gallery = Gallery(INITIAL_EXHIBITS)
    seen: list = []

    def visitor(index: int) -> None:
        for _ in range(rounds):
            pairs = gallery.snapshot()
            if index == 0:
                seen.append(_format(pairs))
            time.sleep(interval)

    def staff() -> None:
        for n in range(changes):
            gallery.replace(ROTATED_EXHIBITS if n % 2 == 0 else INITIAL_EXHIBITS)
            time.sleep(2 * interval)

    threads = [threading.Thread(target=visitor, args=(n,)) for n in range(visitors)]
    threads.append(threading.Thread(target=staff))
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()
    return seen


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = argparse.ArgumentParser(prog="zerokit-gallery")
    parser.add_argument("--interval", type=float, default=1.0, help="seconds between looks")
    args = parser.parse_args(argv)
    try:
        lines = run(interval=args.interval)
    except ValueError as exc:
        print(f"zerokit-gallery: {exc}", file=sys.stderr)
        return 1
    for line in lines:
        print(line)
    return 0


if __name__ == "__main__":
    sys.exit(main())