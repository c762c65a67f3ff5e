"""Exception types raised by trailcode.

Every failure is fatal to the current run. Entry points (the CLI and the
HTTP service) catch ``TrailcodeError`` in one place, report it and stop.
"""

from __future__ import annotations


class TrailcodeError(Exception):
    """Base class for all trailcode failures."""


class InputFileError(TrailcodeError):
    """A data file could not be read or written."""

    def __init__(self, path: str, reason: str):
        self.path = path
        self.reason = reason
        super().__init__(f"{path}: {reason}")


class GeoJSONFormatError(TrailcodeError, ValueError):
    """A GeoJSON document does not describe an encoded path."""


class InvalidBearingError(TrailcodeError, ValueError):
    """A bearing is not one of the eight compass octants."""
