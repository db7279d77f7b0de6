"""
Shared pytest fixtures and configuration.
"""

import base64
import json
import shutil
import tempfile
from io import BytesIO
from pathlib import Path

import pytest
from PIL import Image

from lottiepress.core.config import OptimizerConfig
from lottiepress.utils.logger import get_logger


@pytest.fixture(autouse=True)
def reset_logger():
    """Detach logger handlers after each test so no handler outlives its stream."""
    yield
    get_logger().configure(enable_console=False, enable_file=False)


@pytest.fixture
def temp_dir():
    """Create a temporary directory for test files."""
    temp_path = Path(tempfile.mkdtemp())
    yield temp_path
    if temp_path.exists():
        shutil.rmtree(temp_path)


@pytest.fixture
def mock_config(temp_dir):
    """Create a sample OptimizerConfig pointing into the temp directory."""
    return OptimizerConfig(
        input_dir=temp_dir / "inputs",
        output_dir=temp_dir / "outputs",
        max_workers=2,
    )


@pytest.fixture
def make_image_bytes():
    """Factory for in-memory images of a given format, size and mode."""

    def _make(fmt="PNG", size=(10, 10), mode="RGB", color=(200, 30, 30), **save_kwargs):
        image = Image.new(mode, size, color)
        buffer = BytesIO()
        image.save(buffer, format=fmt, **save_kwargs)
        return buffer.getvalue()

    return _make


@pytest.fixture
def gradient_png_bytes():
    """A 64x64 smooth gradient stored as an uncompressed PNG, which WebP shrinks easily."""
    image = Image.new("RGB", (64, 64))
    image.putdata([(x * 4, y * 4, (x + y) * 2) for y in range(64) for x in range(64)])
    buffer = BytesIO()
    image.save(buffer, format="PNG", compress_level=0)
    return buffer.getvalue()


@pytest.fixture
def make_data_uri():
    """Factory turning raw bytes into a base64 image data URI."""

    def _make(data: bytes, fmt: str = "png") -> str:
        return f"data:image/{fmt};base64,{base64.b64encode(data).decode('ascii')}"

    return _make


@pytest.fixture
def write_document():
    """Factory writing a document as JSON into a folder."""

    def _write(folder: Path, name: str, document) -> Path:
        folder.mkdir(parents=True, exist_ok=True)
        path = folder / name
        path.write_text(json.dumps(document, indent=2), encoding="utf-8")
        return path

    return _write
