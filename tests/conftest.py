import sys
from pathlib import Path

# Ensure the src directory and project root are on sys.path for test imports
PROJECT_ROOT = Path(__file__).resolve().parents[1]
SRC_PATH = PROJECT_ROOT / "src"
for path in (SRC_PATH, PROJECT_ROOT):
    if str(path) not in sys.path:
        sys.path.insert(0, str(path))


import pytest

from tests.fixtures.capture_factory import CaptureFactory


@pytest.fixture
def i2c_csv() -> str:
    """Return a two-channel capture with one clock-like and one data-like line."""
    return CaptureFactory.i2c_capture()


@pytest.fixture
def spi_csv() -> str:
    """Return a four-channel capture with one clock and two data lines."""
    return CaptureFactory.spi_capture()


@pytest.fixture
def example_csv_file(tmp_path, i2c_csv) -> Path:
    path = tmp_path / "capture.csv"
    path.write_text(i2c_csv)
    return path
