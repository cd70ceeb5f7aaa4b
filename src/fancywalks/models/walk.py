"""
Pydantic models for walk records.

This module defines the walk record exported to CSV and the home location
that walk distances are measured from.
"""

from typing import Any, Dict, List

from pydantic import BaseModel, ConfigDict, Field


class HomeLocation(BaseModel):
    """
    Fixed point that walk distances are measured from.

    Attributes:
        latitude: Latitude in decimal degrees
        longitude: Longitude in decimal degrees
    """

    latitude: float = Field(..., description="Latitude", ge=-90, le=90)
    longitude: float = Field(..., description="Longitude", ge=-180, le=180)

    model_config = ConfigDict(frozen=True)


# rather close to home, anyway
DEFAULT_HOME = HomeLocation(latitude=51.097848, longitude=-0.243409)


class WalkRecord(BaseModel):
    """
    A walk decoded from one placemark.

    Field declaration order is the CSV column order.

    Attributes:
        name: Placemark name
        description: Placemark description, verbatim
        length: Walk length in miles parsed from the description
        latitude: Start point latitude
        longitude: Start point longitude
        distance: Miles from home to the start point, to 0.1 mile
    """

    name: str = Field(..., description="Walk name", min_length=1)
    description: str = Field(default="", description="Walk description")
    length: float = Field(default=0.0, description="Length in miles", ge=0)
    latitude: float = Field(default=0.0, description="Start latitude")
    longitude: float = Field(default=0.0, description="Start longitude")
    distance: float = Field(default=0.0, description="Miles from home", ge=0)

    model_config = ConfigDict(
        frozen=True,
        json_schema_extra={
            "example": {
                "name": "Leith Hill and Friday Street",
                "description": "A 7½ mile walk through the Surrey Hills",
                "length": 7.5,
                "latitude": 51.175,
                "longitude": -0.372,
                "distance": 8.6,
            }
        },
    )

    @classmethod
    def csv_fields(cls) -> List[str]:
        """Get field names in declaration order."""
        return list(cls.model_fields.keys())

    def to_row(self) -> Dict[str, Any]:
        """Convert record to a CSV row keyed by field name."""
        return self.model_dump()
