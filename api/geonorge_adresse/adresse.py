"""Client for the Geonorge address web service (AdresseWS).

Every search is a single GET against ``BASE_URL`` followed by a check of the
``sokStatus`` envelope the service wraps its results in.
"""

import logging
import os
from typing import Any, Iterator, Optional

import httpx
from pydantic import ValidationError

from .errors import InvalidArgumentError, ServiceError
from .schemas import BoundingBoxQuery, Query, RadiusQuery, ResponseEnvelope, TextQuery

logger = logging.getLogger(__name__)

BASE_URL = os.getenv("ADRESSE_BASE_URL", "http://ws.geonorge.no/AdresseWS/adresse/")
TIMEOUT = float(os.getenv("ADRESSE_TIMEOUT", "10.0"))
USER_AGENT = os.getenv("ADRESSE_USER_AGENT", "geonorge-adresse/0.5")
DEBUG = os.getenv("ADRESSE_DEBUG", "").lower() in {"1", "true", "yes"}


def _log_request(request: httpx.Request) -> None:
    logger.debug("GET %s", request.url)


def _log_response(response: httpx.Response) -> None:
    logger.debug("%s %s", response.status_code, response.request.url)


def _client(
    debug: bool = DEBUG, transport: Optional[httpx.BaseTransport] = None
) -> httpx.Client:
    event_hooks = {}
    if debug:
        event_hooks = {"request": [_log_request], "response": [_log_response]}
    return httpx.Client(
        base_url=BASE_URL,
        headers={"User-Agent": USER_AGENT, "Accept": "application/json"},
        timeout=TIMEOUT,
        event_hooks=event_hooks,
        transport=transport,
    )


def get_client() -> Iterator[httpx.Client]:
    with _client() as client:
        yield client


def _get(client: httpx.Client, endpoint: str, params: dict[str, Any]) -> httpx.Response:
    try:
        response = client.get(endpoint, params=params)
        response.raise_for_status()
    except httpx.HTTPError as exc:
        raise ServiceError(str(exc), origin="transport") from exc
    return response


def _parse(response: httpx.Response) -> list[Any]:
    try:
        data = response.json()
    except ValueError as exc:
        # Covers undecodable bytes as well as malformed JSON
        raise ServiceError(f"Invalid JSON: {exc}", origin="response") from exc
    if not data or not isinstance(data, dict):
        raise ServiceError(f"Invalid JSON: {response.text}", origin="response")

    try:
        envelope = ResponseEnvelope.model_validate(data)
    except ValidationError as exc:
        raise ServiceError(f"Malformed response: {exc}", origin="response") from exc

    if not envelope.status.ok:
        raise ServiceError(envelope.status.message or "Address search failed")
    if envelope.total_hits is None:
        raise ServiceError(
            "Malformed response: totaltAntallTreff is missing", origin="response"
        )
    if envelope.total_hits > 0:
        return envelope.addresses or []
    return []


def _request(
    endpoint: str,
    params: dict[str, Any],
    client: Optional[httpx.Client] = None,
    debug: bool = DEBUG,
) -> list[Any]:
    try:
        if client is not None:
            return _parse(_get(client, endpoint, params))
        with _client(debug) as owned:
            return _parse(_get(owned, endpoint, params))
    except ServiceError as exc:
        logger.warning("Address search on %s failed: %s", endpoint, exc)
        raise


def _build(model: type, **fields: Any):
    try:
        return model(**fields)
    except ValidationError as exc:
        raise InvalidArgumentError(str(exc)) from exc


def search_query(
    query: Query,
    client: Optional[httpx.Client] = None,
    debug: bool = DEBUG,
) -> list[Any]:
    return _request(query.endpoint, query.params(), client=client, debug=debug)


def search(
    query: str,
    page: int = 0,
    per_page: int = 10,
    client: Optional[httpx.Client] = None,
    debug: bool = DEBUG,
) -> list[Any]:
    """Free-text search, e.g. ``search("Storgata 1, Oslo")``."""
    if not isinstance(query, str):
        raise InvalidArgumentError("Search text must be a string.")
    query = query.strip()
    if not query:
        raise InvalidArgumentError("Requires something to search for.")
    text_query = _build(TextQuery, text=query, page=page, per_page=per_page)
    return search_query(text_query, client=client, debug=debug)


def search_radius(
    north: float,
    east: float,
    radius: float = 1.0,
    page: int = 0,
    per_page: int = 10,
    client: Optional[httpx.Client] = None,
    debug: bool = DEBUG,
) -> list[Any]:
    """Addresses within ``radius`` of a point. The service validates the values."""
    radius_query = _build(
        RadiusQuery,
        north=north,
        east=east,
        radius=radius,
        page=page,
        per_page=per_page,
    )
    return search_query(radius_query, client=client, debug=debug)


def search_box(
    north_lower: float,
    east_lower: float,
    north_upper: float,
    east_upper: float,
    page: int = 0,
    per_page: int = 10,
    client: Optional[httpx.Client] = None,
    debug: bool = DEBUG,
) -> list[Any]:
    box_query = _build(
        BoundingBoxQuery,
        north_lower=north_lower,
        east_lower=east_lower,
        north_upper=north_upper,
        east_upper=east_upper,
        page=page,
        per_page=per_page,
    )
    return search_query(box_query, client=client, debug=debug)
