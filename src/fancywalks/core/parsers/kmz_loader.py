"""
KMZ loading module.

Opens a KMZ (zipped KML) archive, selects the main KML document and parses
it into a KML node tree.
"""

import logging
import zipfile
from pathlib import Path
from typing import Union

from fancywalks.core.errors import ArchiveError
from fancywalks.utils.logging import timed_phase

from .kml_tree import KmlRoot, parse_kml_bytes

logger = logging.getLogger(__name__)


def _open_archive(kmz_path: Path) -> zipfile.ZipFile:
    if not kmz_path.exists():
        raise ArchiveError(f"KMZ file not found: {kmz_path}", path=str(kmz_path))

    try:
        return zipfile.ZipFile(kmz_path, "r")
    except zipfile.BadZipFile as e:
        raise ArchiveError(f"Invalid KMZ file: {e}", path=str(kmz_path)) from e
    except OSError as e:
        raise ArchiveError(f"Cannot read KMZ file: {e}", path=str(kmz_path)) from e


def extract_main_kml(kmz_path: Union[str, Path]) -> bytes:
    """
    Extract the main KML document from a KMZ archive.

    Priority:
    1. doc.kml (KML convention), in any directory
    2. First .kml file in archive order

    An archive listing ``a.kml`` ahead of ``doc.kml`` therefore yields
    ``doc.kml``, not the first entry. Google Earth reads the same file.

    Args:
        kmz_path: Path to KMZ file

    Returns:
        KML content as bytes

    Raises:
        ArchiveError: If the archive is missing, not a ZIP file, or holds no KML
    """
    kmz_path = Path(kmz_path)

    with _open_archive(kmz_path) as zf:
        names = zf.namelist()
        logger.debug(f"{kmz_path.name} holds {len(names)} entries: {names}")

        kml_files = [name for name in names if name.lower().endswith(".kml")]
        if not kml_files:
            raise ArchiveError("KMZ contains no KML files", path=str(kmz_path))

        main_kml = next(
            (name for name in kml_files if Path(name).name.lower() == "doc.kml"),
            None,
        )
        if main_kml is None:
            main_kml = kml_files[0]
            logger.info(f"No doc.kml found, using first KML file: {main_kml}")

        logger.debug(f"Extracting KML file: {main_kml}")
        try:
            return zf.read(main_kml)
        except (zipfile.BadZipFile, OSError) as e:
            raise ArchiveError(
                f"Failed to extract {main_kml} from KMZ: {e}", path=str(kmz_path)
            ) from e


@timed_phase("load_kmz")
def load_kmz(kmz_path: Union[str, Path]) -> KmlRoot:
    """
    Load a KMZ file into a KML node tree.

    Args:
        kmz_path: Path to KMZ file

    Returns:
        KmlRoot of the main KML document

    Raises:
        ArchiveError: If the archive cannot be read or holds no KML
        ParseError: If the KML document is malformed
    """
    kml_content = extract_main_kml(kmz_path)
    return parse_kml_bytes(kml_content)
