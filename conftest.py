"""
Shared pytest fixtures for TagCloud Layout tests.

When a test using the ``layouter`` fixture fails, the cloud built so far is
rendered into TagCloudFailures/ so the layout can be inspected.
"""

import uuid
from datetime import datetime

import pytest

from tagcloud_core import CircularCloudLayouter, CloudRenderer, Point


FAILURE_IMAGES_DIR = "TagCloudFailures"
VISUALIZATION_SCALE = 5
VISUALIZATION_PADDING = 10


@pytest.fixture
def center():
    return Point(0, 0)


@pytest.fixture
def layouter(center):
    return CircularCloudLayouter(center)


@pytest.hookimpl(hookwrapper=True)
def pytest_runtest_makereport(item, call):
    outcome = yield
    report = outcome.get_result()
    if report.when != "call" or not report.failed:
        return

    layouter = item.funcargs.get("layouter")
    if layouter is None:
        return
    if len(layouter) == 0:
        report.sections.append(("Cloud visualization", "Test failed before any rectangle was placed"))
        return

    out_dir = item.config.rootpath / FAILURE_IMAGES_DIR
    file_name = f"{datetime.now().strftime('%Y%m%d_%H%M%S%f')}_{uuid.uuid4().hex}.png"
    try:
        path = CloudRenderer().save(layouter.rectangles, out_dir / file_name,
                                    VISUALIZATION_SCALE, VISUALIZATION_PADDING)
        report.sections.append(("Cloud visualization", f"Saved to {path} (test: {item.name})"))
    except (OSError, ValueError) as e:
        report.sections.append(("Cloud visualization", f"Could not save cloud image: {e}"))
