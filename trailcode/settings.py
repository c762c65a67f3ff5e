"""Runtime settings.

Both ends of a transfer must agree on the start point, so it defaults to the
shared origin and is only overridden by callers that control both sides.
"""

from __future__ import annotations

import os

from pydantic import BaseModel, Field

from .path import START_LAT, START_LON, GeoPoint

DATA_DIR_ENV = "TRAILCODE_DATA_DIR"


class Settings(BaseModel):
    """Settings shared by the CLI and the HTTP service."""

    data_dir: str = Field(
        default="data",
        description="Directory prefix applied to every input and output file name",
    )
    start_lon: float = Field(default=START_LON, ge=-180.0, le=180.0)
    start_lat: float = Field(default=START_LAT, ge=-90.0, le=90.0)

    @property
    def start_point(self) -> GeoPoint:
        return GeoPoint(lon=self.start_lon, lat=self.start_lat)

    @classmethod
    def from_env(cls) -> Settings:
        """Build settings, taking the data directory from the environment if set."""
        data_dir = os.environ.get(DATA_DIR_ENV)
        if data_dir:
            return cls(data_dir=data_dir)
        return cls()
