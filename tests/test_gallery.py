import threading

import pytest

from zerokit.gallery import INITIAL_EXHIBITS, ROTATED_EXHIBITS, Gallery, main, run


def _line(exhibits):
    return "".join(f"{a}:{w}, " for a, w in sorted(exhibits.items()))


def test_snapshot_is_in_key_order():
    gallery = Gallery({"b": "two", "a": "one"})
    assert gallery.snapshot() == [("a", "one"), ("b", "two")]


def test_empty_gallery():
    assert Gallery().snapshot() == []


def test_replace_swaps_everything():
    gallery = Gallery(INITIAL_EXHIBITS)
    gallery.replace(ROTATED_EXHIBITS)
    assert gallery.snapshot() == sorted(ROTATED_EXHIBITS.items())


def test_concurrent_readers_never_see_mixed_exhibits():
    gallery = Gallery(INITIAL_EXHIBITS)
    allowed = {tuple(sorted(INITIAL_EXHIBITS.items())), tuple(sorted(ROTATED_EXHIBITS.items()))}
    seen = []
    lock = threading.Lock()

    def reader():
        for _ in range(200):
            snap = tuple(gallery.snapshot())
            with lock:
                seen.append(snap)

    def writer():
        for n in range(200):
            gallery.replace(ROTATED_EXHIBITS if n % 2 == 0 else INITIAL_EXHIBITS)

    threads = [threading.Thread(target=reader) for _ in range(4)]
    threads.append(threading.Thread(target=writer))
    for t in threads:
        t.start()
    for t in threads:
        t.join()
    assert len(seen) == 800
    assert set(seen) <= allowed


def test_run_first_visitor_sees_each_round():
    lines = run(3, 8, 4, 0.0)
    assert len(lines) == 8
    assert set(lines) <= {_line(INITIAL_EXHIBITS), _line(ROTATED_EXHIBITS)}


def test_run_without_changes_shows_initial():
    assert run(2, 3, 0, 0.0) == [_line(INITIAL_EXHIBITS)] * 3


def test_run_rejects_negative():
    with pytest.raises(ValueError):
        run(1, 1, 1, -1.0)


def test_main_prints_lines(capsys):
    assert main(["--interval", "0"]) == 0
    out = capsys.readouterr().out.splitlines()
    assert len(out) == 8
    assert all(line.endswith(", ") for line in out)