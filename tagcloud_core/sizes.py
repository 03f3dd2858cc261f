"""
Rectangle size sources for TagCloud Layout.
"""

import random
from typing import List, Optional

from .geometry import Size


def fixed_sizes(size: Size, count: int) -> List[Size]:
    """Return count copies of the same size."""
    if count < 0:
        raise ValueError(f"count must be >= 0, got {count}")
    return [size] * count


def random_sizes(count: int, min_width: int, max_width: int,
                 min_height: int, max_height: int,
                 seed: Optional[int] = None) -> List[Size]:
    """
    Generate random rectangle sizes.

    Upper bounds are exclusive. A private generator is used so the same
    seed always reproduces the same sequence.

    Args:
        count: Number of sizes
        min_width: Smallest width
        max_width: Exclusive upper width bound
        min_height: Smallest height
        max_height: Exclusive upper height bound
        seed: Optional seed

    Returns:
        List of sizes
    """
    if count < 0:
        raise ValueError(f"count must be >= 0, got {count}")
    if min_width <= 0 or min_height <= 0:
        raise ValueError("Minimum width and height must be positive")
    if max_width <= min_width or max_height <= min_height:
        raise ValueError(
            f"Empty size range {min_width}..{max_width} x {min_height}..{max_height}")

    rng = random.Random(seed)
    return [Size(rng.randrange(min_width, max_width), rng.randrange(min_height, max_height))
            for _ in range(count)]
