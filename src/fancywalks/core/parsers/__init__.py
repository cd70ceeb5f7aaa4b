"""
KMZ/KML parsing module for fancywalks.

Loads KMZ archives and parses the KML inside into a tree of typed nodes.
"""

from .geometry import GeometryType, parse_point_coordinates, point_from_kml
from .kml_tree import (
    KmlContainer,
    KmlDocument,
    KmlElement,
    KmlFolder,
    KmlNode,
    KmlPlacemark,
    KmlRoot,
    KmlStyle,
    KmlStyleMap,
    load_kml,
    parse_kml_bytes,
)
from .kmz_loader import extract_main_kml, load_kmz

__all__ = [
    # Geometry
    "GeometryType",
    "parse_point_coordinates",
    "point_from_kml",
    # KML tree
    "KmlContainer",
    "KmlDocument",
    "KmlElement",
    "KmlFolder",
    "KmlNode",
    "KmlPlacemark",
    "KmlRoot",
    "KmlStyle",
    "KmlStyleMap",
    "load_kml",
    "parse_kml_bytes",
    # KMZ
    "extract_main_kml",
    "load_kmz",
]
