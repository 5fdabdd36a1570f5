"""Validation and normalization of raw ``lat``/``lon`` query values."""
from __future__ import annotations

import re
from decimal import ROUND_HALF_UP, Decimal
from typing import Optional

from backend.core.abstractions import Coordinate, NormalizedCoordinate

INVALID_COORDINATES_MESSAGE = "Invalid or missing coordinates"
COORDINATE_PRECISION = 3

LATITUDE_RANGE = (-90.0, 90.0)
LONGITUDE_RANGE = (-180.0, 180.0)

_NUMBER_RE = re.compile(r"^[+-]?(?:\d+(?:\.\d*)?|\.\d+)(?:[eE][+-]?\d+)?$", re.ASCII)


class InvalidCoordinateError(ValueError):
    """Raised when ``lat``/``lon`` are missing, non-numeric or out of range."""

    def __init__(self, message: str = INVALID_COORDINATES_MESSAGE) -> None:
        super().__init__(message)


def is_present(value: Optional[str]) -> bool:
    """Return True for a non-blank string; ``"0"`` counts as present."""
    return value is not None and value.strip() != ""


def parse_number(value: Optional[str]) -> float:
    if not is_present(value):
        raise InvalidCoordinateError()
    text = value.strip()
    if not _NUMBER_RE.match(text):
        raise InvalidCoordinateError()
    return float(text)


def parse_coordinate(raw_lat: Optional[str], raw_lon: Optional[str]) -> Coordinate:
    """Validate raw query strings and return a :class:`Coordinate`."""
    latitude = parse_number(raw_lat)
    longitude = parse_number(raw_lon)
    if not LATITUDE_RANGE[0] <= latitude <= LATITUDE_RANGE[1]:
        raise InvalidCoordinateError()
    if not LONGITUDE_RANGE[0] <= longitude <= LONGITUDE_RANGE[1]:
        raise InvalidCoordinateError()
    return Coordinate(latitude=latitude, longitude=longitude)


def format_fixed(value: float, precision: int = COORDINATE_PRECISION) -> str:
    """Round half away from zero and keep trailing zeros (``52.5`` -> ``"52.500"``)."""
    quantum = Decimal(1).scaleb(-precision)
    rounded = Decimal(value).quantize(quantum, rounding=ROUND_HALF_UP)
    # "-0.000" and "0.000" must build the same upstream URL.
    if rounded.is_zero():
        rounded = rounded.copy_abs()
    return format(rounded, "f")


def normalize(coordinate: Coordinate, precision: int = COORDINATE_PRECISION) -> NormalizedCoordinate:
    latitude_param = format_fixed(coordinate.latitude, precision)
    longitude_param = format_fixed(coordinate.longitude, precision)
    return NormalizedCoordinate(
        latitude=float(latitude_param),
        longitude=float(longitude_param),
        latitude_param=latitude_param,
        longitude_param=longitude_param,
    )


def normalize_query(
    raw_lat: Optional[str],
    raw_lon: Optional[str],
    precision: int = COORDINATE_PRECISION,
) -> NormalizedCoordinate:
    """Validate and normalize in one step."""
    return normalize(parse_coordinate(raw_lat, raw_lon), precision)


__all__ = [
    "COORDINATE_PRECISION",
    "INVALID_COORDINATES_MESSAGE",
    "InvalidCoordinateError",
    "format_fixed",
    "is_present",
    "normalize",
    "normalize_query",
    "parse_coordinate",
    "parse_number",
]
