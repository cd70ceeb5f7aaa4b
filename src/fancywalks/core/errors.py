"""
Exceptions raised by fancywalks.

Nothing is recovered locally: every error raised while loading, decoding or
exporting reaches ``fancywalks.cli.main``, which logs the code, details and
hints and exits with ``exit_code``.
"""

from typing import Any, Dict, List, Optional


class FancyWalksException(Exception):
    """
    Base exception for all fancywalks errors.

    Subclasses set ``code`` and ``hints``; instances may override both.

    Attributes:
        message: Human readable description
        error_code: Stable identifier, e.g. ``MISSING_NAME``
        exit_code: Process exit status when this error ends the run
        details: Structured context for the log
        suggestions: What the user can do about it
    """

    code = "FANCYWALKS_ERROR"
    hints: List[str] = []

    def __init__(
        self,
        message: str,
        error_code: Optional[str] = None,
        exit_code: int = 1,
        details: Optional[Dict[str, Any]] = None,
        suggestions: Optional[List[str]] = None,
    ):
        super().__init__(message)
        self.message = message
        self.error_code = error_code or self.code
        self.exit_code = exit_code
        self.details = dict(details or {})
        self.suggestions = list(suggestions or self.hints)

    def to_dict(self) -> Dict[str, Any]:
        """Error as a dict for structured logs."""
        return {
            "error_code": self.error_code,
            "message": self.message,
            "details": self.details,
            "suggestions": self.suggestions,
        }

    def __str__(self) -> str:
        return f"{self.error_code}: {self.message}"


class ParseError(FancyWalksException):
    """The KML document is empty, malformed, or not KML at all."""

    code = "PARSE_ERROR"
    hints = [
        "Check the map was exported as KML/KMZ",
        "Open the file in Google Earth to see whether it loads",
    ]


class ArchiveError(ParseError):
    """The KMZ archive is missing, not a ZIP file, or holds no KML entry."""

    code = "ARCHIVE_ERROR"
    hints = [
        "Check the input path points at an existing .kmz file",
        "Re-export the map from Google My Maps or Google Earth",
    ]

    def __init__(self, message: str, path: Optional[str] = None):
        super().__init__(message, details={"path": path} if path else None)


class DecodeError(FancyWalksException):
    """A placemark cannot be turned into a walk record."""

    code = "DECODE_ERROR"
    hints = ["Fix the placemark in the source map"]


class MissingNameError(DecodeError):
    """A placemark has no name."""

    code = "MISSING_NAME"
    hints = [
        "Give every placemark in the map a name",
        "Set FANCYWALKS_SKIP_UNNAMED=true to skip unnamed placemarks",
    ]

    def __init__(self, message: str = "Placemark has no name", details: Optional[Dict[str, Any]] = None):
        super().__init__(message, details=details)


class LengthParseError(DecodeError):
    """
    A length token in a description is not a valid number.

    A token carrying more than one fraction glyph (e.g. "1¼¾") has no single
    decimal reading and is rejected with this error.
    """

    code = "LENGTH_PARSE_ERROR"
    hints = ["Correct the walk length in the placemark description"]

    def __init__(self, message: str, token: str, placemark_name: Optional[str] = None):
        details: Dict[str, Any] = {"token": token}
        if placemark_name:
            details["placemark_name"] = placemark_name
        super().__init__(message, details=details)


class ExportError(FancyWalksException):
    """The CSV file cannot be written, or read back."""

    code = "EXPORT_ERROR"
    hints = [
        "Check the output directory exists and is writable",
        "Close the file if it is open in another program",
    ]

    def __init__(self, message: str, path: str, details: Optional[Dict[str, Any]] = None):
        super().__init__(message, details={"path": path, **(details or {})})


class ConfigurationError(FancyWalksException):
    """A FANCYWALKS_* setting has an invalid value."""

    code = "CONFIGURATION_ERROR"
    hints = [
        "Check FANCYWALKS_* environment variables are set correctly",
        "Verify .env file syntax",
    ]

    def __init__(self, message: str, config_key: str, details: Optional[Dict[str, Any]] = None):
        super().__init__(message, details={"config_key": config_key, **(details or {})})
