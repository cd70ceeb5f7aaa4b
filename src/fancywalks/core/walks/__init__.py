"""
Walk decoding, distance, and ranking.
"""

from .description import FRACTION_GLYPHS, LENGTH_PATTERN, extract_length, parse_length_token
from .distance import (
    METERS_TO_MILES,
    distance_from_home_miles,
    geodesic_distance_m,
    meters_to_miles,
    round_to_tenth,
)
from .extractor import ExtractionResult, WalkExtractor, decode_placemark, extract_walks
from .ranking import rank_walks, sort_walks

__all__ = [
    # Description
    "FRACTION_GLYPHS",
    "LENGTH_PATTERN",
    "extract_length",
    "parse_length_token",
    # Distance
    "METERS_TO_MILES",
    "distance_from_home_miles",
    "geodesic_distance_m",
    "meters_to_miles",
    "round_to_tenth",
    # Extraction
    "ExtractionResult",
    "WalkExtractor",
    "decode_placemark",
    "extract_walks",
    # Ranking
    "rank_walks",
    "sort_walks",
]
