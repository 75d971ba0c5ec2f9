"""Point-of-interest sources (e.g., Wikipedia geosearch)."""

from .json_file import JsonFilePointSource
from .point_source import PointSource, PointSourceError
from .wikipedia import WikipediaGeoSearchSource, parse_geosearch_pages

__all__ = [
    "JsonFilePointSource",
    "PointSource",
    "PointSourceError",
    "WikipediaGeoSearchSource",
    "parse_geosearch_pages",
]
