"""
Walk export pipeline: load, extract, sort, dump, export.
"""

import logging
import sys
from pprint import pprint
from typing import List, Optional, TextIO

from fancywalks.core.config import Settings
from fancywalks.core.export.csv_export import export_walks_csv
from fancywalks.core.parsers.kmz_loader import load_kmz
from fancywalks.core.walks.extractor import WalkExtractor
from fancywalks.core.walks.ranking import sort_walks
from fancywalks.models.walk import WalkRecord
from fancywalks.utils.logging import PhaseTimer

logger = logging.getLogger(__name__)


def dump_walks(walks: List[WalkRecord], stream: Optional[TextIO] = None) -> None:
    """Print walk records for inspection."""
    pprint([walk.model_dump() for walk in walks], stream=stream or sys.stdout, sort_dicts=False)


def run_pipeline(settings: Settings) -> List[WalkRecord]:
    """
    Run the full export.

    Nothing is written unless every placemark decodes.

    Args:
        settings: Input/output paths, home coordinate and decode options

    Returns:
        Walk records in the order written

    Raises:
        FancyWalksException: If any phase fails
    """
    logger.info(f"Reading walks from {settings.input_path}")

    root = load_kmz(settings.input_path)

    with PhaseTimer("extract_walks"):
        extractor = WalkExtractor(home=settings.home, skip_unnamed=settings.skip_unnamed)
        result = extractor.extract(root)

    if result.skipped:
        logger.warning(f"Skipped {result.skipped_count} placemarks:")
        for reason in result.skipped:
            logger.warning(f"  {reason}")

    walks = result.walks
    sort_walks(walks)

    if settings.dump_records:
        dump_walks(walks)

    export_walks_csv(walks, settings.output_path)
    return walks
