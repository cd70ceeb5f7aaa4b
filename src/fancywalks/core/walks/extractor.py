"""
Walk extraction from a KML node tree.

Walks the tree depth-first, decoding every placemark found under the
document and folder containers into a WalkRecord.
"""

import logging
from dataclasses import dataclass, field
from typing import List

from fancywalks.core.errors import MissingNameError
from fancywalks.core.parsers.kml_tree import (
    KmlContainer,
    KmlElement,
    KmlNode,
    KmlPlacemark,
    KmlStyle,
    KmlStyleMap,
)
from fancywalks.models.walk import DEFAULT_HOME, HomeLocation, WalkRecord

from .description import extract_length
from .distance import distance_from_home_miles

logger = logging.getLogger(__name__)


def decode_placemark(placemark: KmlPlacemark, home: HomeLocation = DEFAULT_HOME) -> WalkRecord:
    """
    Decode one placemark into a walk record.

    Missing description or non-point geometry leave the matching fields at
    their defaults.

    Args:
        placemark: Placemark node
        home: Point distances are measured from

    Returns:
        WalkRecord

    Raises:
        MissingNameError: If the placemark has no name
        LengthParseError: If the description holds an unreadable length
    """
    if not placemark.name:
        raise MissingNameError(details={"attrs": placemark.attrs})

    name = placemark.name
    description = placemark.description or ""
    length = extract_length(description, placemark_name=name)

    latitude = 0.0
    longitude = 0.0
    distance = 0.0
    if placemark.point is not None:
        latitude = placemark.point.y
        longitude = placemark.point.x
        distance = distance_from_home_miles(home, latitude, longitude)

    return WalkRecord(
        name=name,
        description=description,
        length=length,
        latitude=latitude,
        longitude=longitude,
        distance=distance,
    )


@dataclass
class ExtractionResult:
    """
    Walks decoded from a KML tree.

    Attributes:
        walks: Walk records in document order
        skipped: Reasons for placemarks that were skipped
    """

    walks: List[WalkRecord] = field(default_factory=list)
    skipped: List[str] = field(default_factory=list)

    @property
    def walk_count(self) -> int:
        """Get number of decoded walks."""
        return len(self.walks)

    @property
    def skipped_count(self) -> int:
        """Get number of skipped placemarks."""
        return len(self.skipped)


class WalkExtractor:
    """
    Collect walk records from a KML node tree.

    Containers are recursed into in child order, placemarks are decoded,
    styles and other elements are skipped, and any node kind not listed
    here is ignored.
    """

    def __init__(self, home: HomeLocation = DEFAULT_HOME, skip_unnamed: bool = False) -> None:
        """
        Initialize walk extractor.

        Args:
            home: Point distances are measured from
            skip_unnamed: Skip placemarks without a name instead of failing
        """
        self.home = home
        self.skip_unnamed = skip_unnamed
        self._skipped: List[str] = []
        self._placemark_index = 0

    def extract(self, root: KmlNode) -> ExtractionResult:
        """
        Extract walks from a tree.

        Args:
            root: Root node, usually from load_kmz

        Returns:
            ExtractionResult with walks in document order

        Raises:
            MissingNameError: If a placemark has no name and skip_unnamed is off
            LengthParseError: If a description holds an unreadable length
        """
        self._skipped = []
        self._placemark_index = 0
        walks = self._walk(root)
        logger.info(f"Extracted {len(walks)} walks, skipped {len(self._skipped)} placemarks")
        return ExtractionResult(walks=walks, skipped=self._skipped)

    def _walk(self, node: KmlNode) -> List[WalkRecord]:
        walks: List[WalkRecord] = []

        if isinstance(node, KmlContainer):
            for child in node.children:
                walks.extend(self._walk(child))

        elif isinstance(node, KmlPlacemark):
            self._placemark_index += 1
            try:
                walks.append(decode_placemark(node, self.home))
            except MissingNameError:
                if not self.skip_unnamed:
                    raise
                reason = f"placemark #{self._placemark_index} has no name"
                if node.attrs.get("id"):
                    reason += f" (id={node.attrs['id']})"
                logger.warning(f"Skipping {reason}")
                self._skipped.append(reason)

        elif isinstance(node, (KmlStyle, KmlStyleMap, KmlElement)):
            pass

        else:
            logger.debug(f"Ignoring unrecognised node {type(node).__name__}")

        return walks


def extract_walks(root: KmlNode, home: HomeLocation = DEFAULT_HOME) -> List[WalkRecord]:
    """
    Convenience function to extract walks from a tree.

    Args:
        root: Root node
        home: Point distances are measured from

    Returns:
        Walk records in document order
    """
    return WalkExtractor(home=home).extract(root).walks
