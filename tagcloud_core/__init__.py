"""
TagCloud Core Package
Core functionality for laying out rectangles into a circular tag cloud.
"""

from .geometry import Point, Size, Rectangle, bounding_rectangle, cloud_density
from .spiral import ArchimedeanSpiral
from .packer import (CircularCloudLayouter, LayoutConfig, LayoutError, InvalidSize,
                     PlacementExhausted, layout_rectangles)
from .sizes import fixed_sizes, random_sizes
from .renderer import CloudRenderer

__all__ = [
    'Point',
    'Size',
    'Rectangle',
    'bounding_rectangle',
    'cloud_density',
    'ArchimedeanSpiral',
    'CircularCloudLayouter',
    'LayoutConfig',
    'LayoutError',
    'InvalidSize',
    'PlacementExhausted',
    'layout_rectangles',
    'fixed_sizes',
    'random_sizes',
    'CloudRenderer'
]
