"""Client for the Geonorge address lookup service."""

from .adresse import search, search_box, search_query, search_radius
from .errors import InvalidArgumentError, ServiceError
from .schemas import BoundingBoxQuery, RadiusQuery, TextQuery

__all__ = [
    "search",
    "search_radius",
    "search_box",
    "search_query",
    "TextQuery",
    "RadiusQuery",
    "BoundingBoxQuery",
    "InvalidArgumentError",
    "ServiceError",
]
