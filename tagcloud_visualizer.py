#!/usr/bin/env python3
"""
TagCloud Layout - command line visualizer
Lays out a cloud of rectangles around a center point and renders it.
"""

import argparse
import logging
import sys
import time
from datetime import datetime
from pathlib import Path

# Add current directory to Python path for imports
sys.path.insert(0, str(Path(__file__).parent))

from tagcloud_core import (CircularCloudLayouter, CloudRenderer, LayoutConfig, LayoutError,
                           Point, Size, bounding_rectangle, cloud_density, fixed_sizes, random_sizes)
from tagcloud_core.logger import setup_logging, log_session, generate_log_filename, generate_image_filename


def _parse_size(s: str) -> Size:
    try:
        w, h = s.lower().split("x")
        return Size(int(w), int(h))
    except ValueError:
        raise argparse.ArgumentTypeError(f"Size must be like 30x20, got {s!r}")


def _parse_size_range(s: str):
    try:
        low, high = s.split(":")
    except ValueError:
        raise argparse.ArgumentTypeError(f"Size range must be like 20x15:60x40, got {s!r}")
    return _parse_size(low), _parse_size(high)


def _parse_point(s: str) -> Point:
    try:
        x, y = s.split(",")
        return Point(int(x), int(y))
    except ValueError:
        raise argparse.ArgumentTypeError(f"Center must be like 0,0, got {s!r}")


def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(description="Circular tag cloud layout → PNG")
    ap.add_argument("--count", type=int, default=50,
                    help="Number of rectangles to place")
    ap.add_argument("--size", type=_parse_size, default=Size(30, 20),
                    help="Fixed rectangle size, e.g. 30x20")
    ap.add_argument("--random", type=_parse_size_range, default=None, metavar="MINWxMINH:MAXWxMAXH",
                    help="Random sizes in a range (upper bounds exclusive), e.g. 20x15:60x40. Overrides --size")
    ap.add_argument("--seed", type=int, default=None,
                    help="Seed for --random (omit for fresh randomness each run)")
    ap.add_argument("--center", type=_parse_point, default=Point(0, 0),
                    help="Cloud center, e.g. 0,0")
    ap.add_argument("--scale", type=float, default=10.0,
                    help="Pixels per layout unit in the rendered image")
    ap.add_argument("--padding", type=int, default=5,
                    help="Margin (pixels) around the rendered cloud")
    ap.add_argument("--output", type=str, default=None,
                    help="Output image path (default: timestamped PNG in the current folder)")
    ap.add_argument("--log-dir", type=str, default=None,
                    help="Optional folder for the session log")
    ap.add_argument("--name", type=str, default="tagcloud",
                    help="Session name used in generated file names")
    ap.add_argument("--expansion-rate", type=float, default=LayoutConfig.expansion_rate,
                    help="Spiral radius growth per radian")
    ap.add_argument("--max-angle-step", type=float, default=LayoutConfig.max_angle_step,
                    help="Largest spiral angle increment (radians)")
    ap.add_argument("--min-angle-step", type=float, default=LayoutConfig.min_angle_step,
                    help="Smallest spiral angle increment (radians)")
    ap.add_argument("--max-attempts", type=int, default=LayoutConfig.max_search_attempts,
                    help="Spiral candidates tried per rectangle before giving up")
    ap.add_argument("--verbose", action="store_true",
                    help="Log every placement")
    return ap


def main(argv=None) -> int:
    """Main entry point for the TagCloud visualizer."""
    args = build_parser().parse_args(argv)
    setup_logging(logging.DEBUG if args.verbose else logging.INFO)
    logger = logging.getLogger("tagcloud_visualizer")

    start_time = datetime.now()
    started = time.perf_counter()
    output_path = Path(args.output) if args.output else Path(generate_image_filename(args.name))
    layouter = None
    error = None

    try:
        config = LayoutConfig(
            expansion_rate=args.expansion_rate,
            max_angle_step=args.max_angle_step,
            min_angle_step=args.min_angle_step,
            max_search_attempts=args.max_attempts,
        )
        if args.random:
            low, high = args.random
            sizes = random_sizes(args.count, low.width, high.width, low.height, high.height, seed=args.seed)
        else:
            sizes = fixed_sizes(args.size, args.count)

        layouter = CircularCloudLayouter(args.center, config)
        for size in sizes:
            layouter.put_next_rectangle(size)

        rectangles = layouter.rectangles
        output_path = CloudRenderer().save(rectangles, output_path, args.scale, args.padding)

        bounds = bounding_rectangle(rectangles)
        print(f"Placed {len(rectangles)} rectangles")
        print(f"   Bounding box: {bounds.width}x{bounds.height}")
        print(f"   Density: {cloud_density(rectangles):.3f}")
        print(f"   Aspect ratio: {bounds.width / bounds.height:.3f}")
        print(f"   Image: {output_path}")
    except (LayoutError, ValueError) as e:
        logger.error(f"Layout failed: {e}")
        error = str(e)

    if args.log_dir:
        log_dir = Path(args.log_dir)
        log_dir.mkdir(parents=True, exist_ok=True)
        log_session(
            log_path=log_dir / generate_log_filename(args.name),
            session_name=args.name,
            timestamp=start_time,
            center=args.center,
            requested=args.count,
            rectangles=layouter.rectangles if layouter else (),
            output_path=None if error else output_path,
            process_time=time.perf_counter() - started,
            error=error
        )

    return 1 if error else 0


if __name__ == "__main__":
    sys.exit(main())
