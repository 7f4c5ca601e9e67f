"""Centralized settings for route-model."""
from __future__ import annotations

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    model_config = {"env_prefix": "ROUTE_MODEL_"}

    # Encoded polyline precision: 5 => 1e-5 degrees (Google), 6 => 1e-6 (OSRM/Valhalla)
    polyline_precision: int = 5

    # Dotted path of the encoded points string inside a step object
    polyline_points_path: str = "polyline.points"

    # True: a malformed step polyline aborts the build.
    # False: the step keeps an empty path and a warning is logged.
    strict_polylines: bool = True

    log_level: str = "INFO"


settings = Settings()
