#!/usr/bin/env python3
"""
Tests for size sources.
"""

import pytest

from tagcloud_core import Size, fixed_sizes, random_sizes


def test_fixed_sizes():
    assert fixed_sizes(Size(30, 20), 3) == [Size(30, 20)] * 3
    assert fixed_sizes(Size(30, 20), 0) == []


def test_random_sizes_respect_bounds():
    sizes = random_sizes(500, 20, 60, 15, 40, seed=1)

    assert len(sizes) == 500
    assert all(20 <= s.width < 60 and 15 <= s.height < 40 for s in sizes)


def test_random_sizes_are_reproducible():
    assert random_sizes(50, 1, 100, 1, 100, seed=42) == random_sizes(50, 1, 100, 1, 100, seed=42)


@pytest.mark.parametrize("args", [
    (-1, 1, 10, 1, 10),
    (5, 0, 10, 1, 10),
    (5, 10, 10, 1, 10),
    (5, 1, 10, 8, 4),
])
def test_random_sizes_reject_bad_ranges(args):
    with pytest.raises(ValueError):
        random_sizes(*args)
