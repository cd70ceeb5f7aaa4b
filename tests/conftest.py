"""
Shared fixtures for fancywalks tests.
"""

import logging
import zipfile
from pathlib import Path
from typing import Callable, Dict, Union

import pytest

FIXTURES_DIR = Path(__file__).parent / "fixtures"
WALKS_KML = FIXTURES_DIR / "walks.kml"


def _placemark_kml(
    name: str = "Test Walk",
    description: str = "A 5 mile walk",
    coordinates: str = "-0.243409,51.097848,0",
) -> str:
    return f"""<?xml version="1.0" encoding="UTF-8"?>
<kml xmlns="http://www.opengis.net/kml/2.2">
    <Document>
        <Placemark>
            <name>{name}</name>
            <description>{description}</description>
            <Point>
                <coordinates>{coordinates}</coordinates>
            </Point>
        </Placemark>
    </Document>
</kml>
"""


@pytest.fixture
def placemark_kml() -> Callable[..., str]:
    """Factory building a KML document holding one point placemark."""
    return _placemark_kml


@pytest.fixture
def walks_kml_bytes() -> bytes:
    """Raw content of the sample walks document."""
    return WALKS_KML.read_bytes()


@pytest.fixture
def make_kmz(tmp_path: Path) -> Callable[..., Path]:
    """Factory writing a KMZ archive from a mapping of entry name to content."""

    def _make_kmz(
        entries: Dict[str, Union[str, bytes]], filename: str = "walks.kmz"
    ) -> Path:
        kmz_path = tmp_path / filename
        with zipfile.ZipFile(kmz_path, "w", zipfile.ZIP_DEFLATED) as zf:
            for name, content in entries.items():
                zf.writestr(name, content)
        return kmz_path

    return _make_kmz


@pytest.fixture
def walks_kmz(make_kmz: Callable[..., Path], walks_kml_bytes: bytes) -> Path:
    """KMZ archive wrapping the sample walks document as doc.kml."""
    return make_kmz({"doc.kml": walks_kml_bytes})


@pytest.fixture(autouse=True)
def restore_root_logging():
    """Undo handler changes made by setup_logging."""
    root_logger = logging.getLogger()
    handlers = root_logger.handlers[:]
    level = root_logger.level
    yield
    for handler in root_logger.handlers:
        if handler not in handlers:
            handler.close()
    root_logger.handlers[:] = handlers
    root_logger.setLevel(level)
