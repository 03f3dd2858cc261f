"""
Logging system for TagCloud Layout.
Handles console logging setup and plain-text session reports.
"""

import logging
from datetime import datetime
from pathlib import Path
from typing import Optional, Sequence

from .geometry import Point, Rectangle, bounding_rectangle, cloud_density


def setup_logging(log_level: int = logging.INFO) -> None:
    """Setup basic logging configuration."""
    logging.basicConfig(
        level=log_level,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        datefmt='%H:%M:%S'
    )


def log_session(log_path: Path, session_name: str, timestamp: datetime,
                center: Point, requested: int, rectangles: Sequence[Rectangle],
                output_path: Optional[Path], process_time: float,
                error: Optional[str] = None) -> None:
    """
    Write a layout session report to file.

    Args:
        log_path: Path to log file
        session_name: Name of the session
        timestamp: Start timestamp
        center: Cloud center
        requested: Number of rectangles requested
        rectangles: Rectangles actually placed
        output_path: Rendered image, if any
        process_time: Layout and rendering time in seconds
        error: Error message if any
    """
    log_content = f"""TagCloud Layout - Session Log
{'=' * 50}

Session Information:
    Session Name: {session_name}
    Timestamp: {timestamp.strftime('%Y-%m-%d %H:%M:%S')}
    Center: ({center.x}, {center.y})
    Rectangles Requested: {requested}
    Rectangles Placed: {len(rectangles)}

"""

    if rectangles:
        bounds = bounding_rectangle(rectangles)
        log_content += f"""Cloud Metrics:
    Bounding Box: {bounds.width} x {bounds.height} at ({bounds.x}, {bounds.y})
    Density: {cloud_density(rectangles):.3f}
    Aspect Ratio: {bounds.width / bounds.height:.3f}

"""

    log_content += f"""Output Information:
    Output Image: {output_path.name if output_path else 'none'}
    Processing Time: {process_time:.2f} seconds
    Completion Time: {datetime.now().strftime('%Y-%m-%d %H:%M:%S')}

"""

    if error:
        log_content += f"""Error Information:
    Error: {error}
    Status: FAILED

"""
    else:
        log_content += """Status: SUCCESS

"""

    try:
        with open(log_path, 'w', encoding='utf-8') as f:
            f.write(log_content)
    except OSError as e:
        logger = logging.getLogger(__name__)
        logger.error(f"Failed to write log file {log_path}: {e}")


def generate_log_filename(session_name: str) -> str:
    """Timestamped log filename for a session."""
    timestamp = datetime.now().strftime('%Y%m%d_%H%M%S')
    return f"{session_name}_{timestamp}.log"


def generate_image_filename(session_name: str, extension: str = 'png') -> str:
    """Timestamped image filename for a session."""
    timestamp = datetime.now().strftime('%Y%m%d_%H%M%S')
    return f"{session_name}_{timestamp}.{extension}"
