"""Pytest configuration for spritemesh tests."""
import logging
import sys
from pathlib import Path

import matplotlib
import pytest

matplotlib.use("Agg")

# Allow running the suite from a plain checkout (src/ layout)
src_root = Path(__file__).parent.parent / "src"
if str(src_root) not in sys.path:
    sys.path.insert(0, str(src_root))


@pytest.fixture(autouse=True)
def _reset_package_logger():
    """setup_logging() attaches stdout handlers; drop them between tests."""
    yield
    logger = logging.getLogger("spritemesh")
    logger.handlers.clear()
    logger.setLevel(logging.NOTSET)
    logging.getLogger("spritemesh.builders").setLevel(logging.NOTSET)
