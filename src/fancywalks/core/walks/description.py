"""
Walk length parsing from placemark descriptions.

Descriptions are free text written for people, e.g. "A lovely 4½ mile walk,
or 6 if you add the pub detour". Every number in the text is a candidate
length and the largest one wins. Numbers may carry a vulgar-fraction glyph.
"""

import logging
import re
from typing import Optional

from fancywalks.core.errors import LengthParseError

logger = logging.getLogger(__name__)

# Decimal suffix for each supported vulgar-fraction glyph
FRACTION_GLYPHS = {
    "¼": ".25",
    "½": ".50",
    "¾": ".75",
}

# ASCII digits followed by any run of fraction glyphs
LENGTH_PATTERN = re.compile(
    r"(?P<whole>\d+)(?P<fraction>[" + "".join(FRACTION_GLYPHS) + r"]*)", re.ASCII
)


def parse_length_token(token: str, placemark_name: Optional[str] = None) -> float:
    """
    Convert one length token to miles.

    Args:
        token: Digits optionally followed by one fraction glyph, e.g. "4¼"
        placemark_name: Placemark the token came from, for error reporting

    Returns:
        Length in miles

    Raises:
        LengthParseError: If the token is not digits plus at most one glyph

    Examples:
        >>> parse_length_token("4")
        4.0
        >>> parse_length_token("3¼")
        3.25
    """
    match = LENGTH_PATTERN.fullmatch(token)
    if match is None:
        raise LengthParseError(
            f"Not a walk length: {token!r}", token=token, placemark_name=placemark_name
        )

    fraction = match.group("fraction")
    if len(fraction) > 1:
        # "1¼¾" would read as "1.25.75"
        raise LengthParseError(
            f"Length {token!r} has more than one fraction",
            token=token,
            placemark_name=placemark_name,
        )

    return float(match.group("whole") + FRACTION_GLYPHS.get(fraction, ""))


def extract_length(description: Optional[str], placemark_name: Optional[str] = None) -> float:
    """
    Find the walk length in a description.

    Args:
        description: Placemark description text
        placemark_name: Placemark name, for error reporting

    Returns:
        Largest length found in the text, 0.0 if there is none

    Raises:
        LengthParseError: If a length token cannot be read as a number
    """
    length = 0.0
    if not description:
        return length

    for match in LENGTH_PATTERN.finditer(description):
        value = parse_length_token(match.group(0), placemark_name)
        if value > length:
            length = value

    return length
