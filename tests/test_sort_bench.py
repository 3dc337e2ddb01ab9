import re
from itertools import islice

import pytest

from zerokit.sort_bench import (
    SEED,
    XorShift64,
    main,
    multi_threaded,
    randomized_lists,
    single_threaded,
)


def test_generator_is_deterministic():
    a = XorShift64(1234)
    b = XorShift64(1234)
    assert [a.next() for _ in range(20)] == [b.next() for _ in range(20)]


def test_generator_values_fit_in_64_bits():
    values = list(islice(XorShift64(7), 500))
    assert all(0 <= v < 2**64 for v in values)
    assert len(set(values)) == len(values)


def test_different_seeds_differ():
    assert list(islice(XorShift64(1), 5)) != list(islice(XorShift64(2), 5))


def test_randomized_lists_alternate_draws():
    v1, v2 = randomized_lists(10)
    stream = list(islice(XorShift64(SEED), 20))
    assert v1 == stream[0::2]
    assert v2 == stream[1::2]


def test_randomized_lists_reject_negative():
    with pytest.raises(ValueError):
        randomized_lists(-1)


def test_single_threaded_sorts():
    elapsed, v1, v2 = single_threaded(1000)
    r1, r2 = randomized_lists(1000)
    assert elapsed >= 0
    assert v1 == sorted(r1)
    assert v2 == sorted(r2)


def test_multi_threaded_matches_single():
    _, s1, s2 = single_threaded(500)
    elapsed, m1, m2 = multi_threaded(500)
    assert elapsed >= 0
    assert (m1, m2) == (s1, s2)


def test_main_reports_both_timings(capsys):
    assert main(["200"]) == 0
    lines = capsys.readouterr().out.splitlines()
    assert re.fullmatch(r"single_threaded: \d+\.\d{3} s", lines[0])
    assert re.fullmatch(r"multi_threaded: \d+\.\d{3} s", lines[1])


def test_main_rejects_bad_count(capsys):
    assert main(["many"]) == 1
    assert "usage" in capsys.readouterr().err