"""
Rendering engine for TagCloud Layout.
Draws a finished cloud of rectangles to a raster image.
"""

import logging
import math
from pathlib import Path
from typing import Sequence, Union

from PIL import Image, ImageDraw

from .geometry import Rectangle, bounding_rectangle


class CloudRenderer:
    """Handles image rendering of placed rectangles."""

    def __init__(self, background='white', fill='orange', outline='black', outline_width: int = 1):
        """
        Initialize the renderer.

        Args:
            background: Canvas color
            fill: Rectangle fill color
            outline: Rectangle border color
            outline_width: Border thickness in pixels
        """
        self.background = background
        self.fill = fill
        self.outline = outline
        self.outline_width = outline_width
        self.logger = logging.getLogger(__name__)

    def render(self, rectangles: Sequence[Rectangle], scale: float = 1.0, padding: int = 0) -> Image.Image:
        """
        Render rectangles onto a new RGB canvas.

        The canvas covers the bounding box of all rectangles multiplied by
        scale, plus padding on every side.

        Args:
            rectangles: Placed rectangles in drawing order
            scale: Pixels per layout unit
            padding: Margin around the cloud in pixels

        Returns:
            Rendered image
        """
        if not rectangles:
            raise ValueError("Nothing to render: no rectangles")
        if scale <= 0:
            raise ValueError(f"scale must be positive, got {scale}")
        if padding < 0:
            raise ValueError(f"padding must be >= 0, got {padding}")

        bounds = bounding_rectangle(rectangles)
        canvas_width = math.ceil(bounds.width * scale + 2 * padding)
        canvas_height = math.ceil(bounds.height * scale + 2 * padding)

        self.logger.info(f"Canvas dimensions: {canvas_width}x{canvas_height} (scale {scale}, padding {padding})")

        canvas = Image.new('RGB', (canvas_width, canvas_height), color=self.background)
        draw = ImageDraw.Draw(canvas)

        for rect in rectangles:
            x0 = (rect.left - bounds.left) * scale + padding
            y0 = (rect.top - bounds.top) * scale + padding
            x1 = x0 + rect.width * scale
            y1 = y0 + rect.height * scale

            # PIL boxes are inclusive
            draw.rectangle(
                [x0, y0, max(x0, x1 - 1), max(y0, y1 - 1)],
                fill=self.fill,
                outline=self.outline,
                width=self.outline_width
            )

        return canvas

    def save(self, rectangles: Sequence[Rectangle], output_path: Union[str, Path],
             scale: float = 1.0, padding: int = 0) -> Path:
        """
        Render rectangles and write the image.

        Args:
            rectangles: Placed rectangles
            output_path: Target file, format taken from the suffix
            scale: Pixels per layout unit
            padding: Margin in pixels

        Returns:
            Path of the written image
        """
        output_path = Path(output_path)
        if not output_path.suffix:
            output_path = output_path.with_suffix('.png')
        output_path.parent.mkdir(parents=True, exist_ok=True)

        canvas = self.render(rectangles, scale, padding)
        canvas.save(output_path)
        self.logger.info(f"Cloud image saved: {output_path} ({len(rectangles)} rectangles)")
        return output_path
