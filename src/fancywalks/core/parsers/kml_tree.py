"""
KML document tree.

Parses KML markup into a tree of typed nodes: containers (the kml root,
Document, Folder) holding child nodes, Placemark leaves carrying name,
description and start point, and decorative nodes (Style, StyleMap, and any
other element) that carry nothing the walk extractor needs.
"""

import logging
import xml.etree.ElementTree as ET
from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, List, Optional, Union

from shapely.geometry import Point

from fancywalks.core.errors import ParseError

from .geometry import GeometryType, point_from_kml

logger = logging.getLogger(__name__)

# KML namespace
KML_NS = "{http://www.opengis.net/kml/2.2}"

GEOMETRY_TAGS = {geometry_type.value for geometry_type in GeometryType}


@dataclass
class KmlNode:
    """
    Base class for every node in a parsed KML tree.

    Attributes:
        attrs: XML attributes of the element
    """

    attrs: Dict[str, str] = field(default_factory=dict)


@dataclass
class KmlContainer(KmlNode):
    """Node that groups child nodes."""

    children: List[KmlNode] = field(default_factory=list)


@dataclass
class KmlRoot(KmlContainer):
    """The <kml> root element."""


@dataclass
class KmlDocument(KmlContainer):
    """A <Document> grouping."""


@dataclass
class KmlFolder(KmlContainer):
    """A <Folder> grouping."""


@dataclass
class KmlPlacemark(KmlNode):
    """
    A <Placemark> leaf.

    Attributes:
        name: Text of <name>, None if absent or empty
        description: Text of <description>, None if absent or empty
        point: Start point, set only for a valid <Point> geometry
        geometry_type: Kind of the first geometry element, None if there is none
    """

    name: Optional[str] = None
    description: Optional[str] = None
    point: Optional[Point] = None
    geometry_type: Optional[GeometryType] = None


@dataclass
class KmlStyle(KmlNode):
    """A <Style> definition."""


@dataclass
class KmlStyleMap(KmlNode):
    """A <StyleMap> definition."""


@dataclass
class KmlElement(KmlNode):
    """
    Any other element, kept opaque.

    Attributes:
        tag: Local tag name of the element
    """

    tag: str = ""


def local_name(tag: str) -> str:
    """Strip the namespace from an ElementTree tag."""
    return tag.split("}", 1)[1] if tag.startswith("{") else tag


def _child(element: ET.Element, name: str) -> Optional[ET.Element]:
    for child in element:
        if local_name(child.tag) == name:
            return child
    return None


def _child_text(element: ET.Element, name: str) -> Optional[str]:
    child = _child(element, name)
    if child is not None and child.text:
        return child.text
    return None


def build_placemark(element: ET.Element) -> KmlPlacemark:
    """
    Build a placemark node from a <Placemark> element.

    The first geometry child sets ``geometry_type``. Only a <Point> yields a
    ``point``; if its coordinates are malformed a warning is logged and the
    placemark keeps ``point=None`` so it still yields a record.

    Args:
        element: Placemark XML element

    Returns:
        KmlPlacemark
    """
    placemark = KmlPlacemark(
        attrs=dict(element.attrib),
        name=_child_text(element, "name"),
        description=_child_text(element, "description"),
    )

    geometry = next((child for child in element if local_name(child.tag) in GEOMETRY_TAGS), None)
    if geometry is None:
        return placemark

    placemark.geometry_type = GeometryType(local_name(geometry.tag))
    if placemark.geometry_type is GeometryType.POINT:
        try:
            placemark.point = point_from_kml(_child_text(geometry, "coordinates") or "")
        except ValueError as e:
            logger.warning(f"Ignoring invalid point on placemark {placemark.name!r}: {e}")

    return placemark


def build_node(element: ET.Element) -> KmlNode:
    """
    Recursively convert an XML element into a typed KML node.

    Args:
        element: XML element

    Returns:
        KmlNode subclass matching the element kind
    """
    tag = local_name(element.tag)
    attrs = dict(element.attrib)

    if tag == "kml":
        return KmlRoot(attrs=attrs, children=[build_node(child) for child in element])
    if tag == "Document":
        return KmlDocument(attrs=attrs, children=[build_node(child) for child in element])
    if tag == "Folder":
        return KmlFolder(attrs=attrs, children=[build_node(child) for child in element])
    if tag == "Placemark":
        return build_placemark(element)
    if tag == "Style":
        return KmlStyle(attrs=attrs)
    if tag == "StyleMap":
        return KmlStyleMap(attrs=attrs)

    return KmlElement(attrs=attrs, tag=tag)


def parse_kml_bytes(kml_content: Union[str, bytes]) -> KmlRoot:
    """
    Parse KML markup into a node tree.

    Args:
        kml_content: KML document as string or bytes

    Returns:
        KmlRoot of the parsed tree

    Raises:
        ParseError: If the markup is not well-formed or the root is not <kml>
    """
    if isinstance(kml_content, str):
        kml_content = kml_content.encode("utf-8")

    if not kml_content.strip():
        raise ParseError("Empty KML content")

    try:
        root = ET.fromstring(kml_content.strip())
    except ET.ParseError as e:
        line = e.position[0] if e.position else None
        raise ParseError(f"Invalid XML structure: {e}", details={"line": line}) from e

    if local_name(root.tag) != "kml":
        raise ParseError(
            f"Invalid root element: expected 'kml', got '{local_name(root.tag)}'"
        )

    namespace = root.tag[: root.tag.find("}") + 1]
    if namespace and namespace != KML_NS:
        logger.info(f"Non-standard KML namespace: {namespace}")

    return KmlRoot(
        attrs=dict(root.attrib), children=[build_node(child) for child in root]
    )


def load_kml(file_path: Union[str, Path]) -> KmlRoot:
    """
    Parse an uncompressed KML file.

    Args:
        file_path: Path to KML file

    Returns:
        KmlRoot

    Raises:
        ParseError: If the file is missing or not valid KML
    """
    file_path = Path(file_path)
    try:
        kml_bytes = file_path.read_bytes()
    except OSError as e:
        raise ParseError(
            f"Cannot read KML file: {file_path}", details={"path": str(file_path), "error": str(e)}
        ) from e

    return parse_kml_bytes(kml_bytes)
