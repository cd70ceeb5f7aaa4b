"""
Configuration settings for fancywalks.
"""

from pathlib import Path
from typing import Literal, Optional

from pydantic import Field, ValidationError
from pydantic_settings import BaseSettings, SettingsConfigDict

from fancywalks.core.errors import ConfigurationError
from fancywalks.models.walk import DEFAULT_HOME, HomeLocation


class Settings(BaseSettings):
    """
    Application settings with environment variable support.

    Attributes:
        input_path: KMZ map of walks to read
        output_path: CSV file to write
        home_latitude: Latitude distances are measured from
        home_longitude: Longitude distances are measured from
        skip_unnamed: Skip unnamed placemarks instead of failing the run
        dump_records: Print the sorted records to stdout before export
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        env_prefix="FANCYWALKS_",
    )

    # Input/output
    input_path: Path = Path("FancyFreeWalks Summary South East.kmz")
    output_path: Path = Path("out.csv")

    # Home coordinate
    home_latitude: float = Field(default=DEFAULT_HOME.latitude, ge=-90, le=90)
    home_longitude: float = Field(default=DEFAULT_HOME.longitude, ge=-180, le=180)

    # Decoding
    skip_unnamed: bool = False

    # Console output
    dump_records: bool = True

    # Logging
    log_level: Optional[str] = None
    log_file: Optional[Path] = None
    json_logs: bool = False

    # Environment
    environment: Literal["development", "production"] = "development"

    @property
    def home(self) -> HomeLocation:
        """Get the home coordinate as a HomeLocation."""
        return HomeLocation(latitude=self.home_latitude, longitude=self.home_longitude)


def get_settings() -> Settings:
    """
    Build a fresh Settings instance from the current environment.

    Raises:
        ConfigurationError: If a setting has an invalid value
    """
    try:
        return Settings()
    except ValidationError as e:
        first = e.errors()[0]
        key = ".".join(str(part) for part in first.get("loc", ()))
        raise ConfigurationError(
            f"Invalid setting {key}: {first.get('msg')}",
            config_key=key,
            details={"errors": [err.get("msg") for err in e.errors()]},
        ) from e
