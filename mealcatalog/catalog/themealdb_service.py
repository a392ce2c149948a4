"""
TheMealDB integration for the catalog.

This module is the only place that talks to the remote meal listing.
It exposes one primary function:

* ``fetch_catalog_items()``: GET the listing URL, decode the JSON
  body and map the wrapped array of records into ``CatalogItem``
  objects.

Unlike a best-effort lookup, every failure is raised as one of the
``CatalogFetchError`` subclasses so that ``CatalogStore`` can record
it. Only the Python standard library is used for HTTP requests. No
timeout is applied unless the caller passes one, in which case the
transport default is left alone.
"""

from __future__ import annotations

import http.client
import json
import logging
import urllib.error
import urllib.request
from typing import Any, List, Optional

from pydantic import ValidationError

from ..config import DEFAULT_API_URL, DEFAULT_ITEMS_KEY
from .errors import HttpStatusError, MalformedResponseError, TransportError
from .schemas import CatalogItem


logger = logging.getLogger(__name__)


def _http_get_json(url: str, timeout: Optional[float] = None) -> Any:
    """Perform an HTTP GET and return the parsed JSON body.

    A custom User-Agent and Accept header are provided so the request
    is not rejected by CDNs in front of the API. Raises
    ``HttpStatusError`` for non-success statuses, ``TransportError``
    when no response could be read and ``MalformedResponseError`` when
    the body is not JSON.
    """
    try:
        request = urllib.request.Request(
            url,
            headers={
                'User-Agent': 'mealcatalog/1.0 (+https://www.themealdb.com)',
                'Accept': 'application/json',
            },
        )
    except ValueError as exc:
        raise TransportError(f"Invalid catalog URL {url!r}: {exc}", cause=exc) from exc
    kwargs = {} if timeout is None else {'timeout': timeout}
    try:
        with urllib.request.urlopen(request, **kwargs) as response:
            status = response.status
            if not 200 <= status < 300:
                logger.warning("Catalog request to %s returned status %s", url, status)
                raise HttpStatusError(status, url)
            raw = response.read()
    except urllib.error.HTTPError as exc:
        # urlopen raises for 4xx/5xx before we get to look at the status
        logger.warning("Catalog request to %s returned status %s", url, exc.code)
        raise HttpStatusError(exc.code, url) from exc
    except urllib.error.URLError as exc:
        raise TransportError(f"Could not reach {url}: {exc.reason}", cause=exc) from exc
    except (OSError, http.client.HTTPException) as exc:
        raise TransportError(f"Error reading {url}: {exc}", cause=exc) from exc

    try:
        return json.loads(raw.decode('utf-8'))
    except (ValueError, RecursionError) as exc:
        # UnicodeDecodeError is a ValueError; deep nesting overflows the decoder
        raise MalformedResponseError(f"Body of {url} is not valid JSON", cause=exc) from exc


def parse_catalog_payload(data: Any, items_key: str = DEFAULT_ITEMS_KEY) -> List[CatalogItem]:
    """Map a decoded response body into catalog items.

    The API wraps the array under ``items_key``. A missing key or a
    ``null`` value means an empty catalog, not an error. Anything else
    that is not a list of records with the three expected keys is
    reported as ``MalformedResponseError``.
    """
    if not isinstance(data, dict):
        raise MalformedResponseError(
            f"Expected a JSON object, got {type(data).__name__}"
        )
    records = data.get(items_key)
    if records is None:
        return []
    if not isinstance(records, list):
        raise MalformedResponseError(
            f"Field {items_key!r} should be a list, got {type(records).__name__}"
        )
    items: List[CatalogItem] = []
    for index, record in enumerate(records):
        try:
            items.append(CatalogItem.model_validate(record))
        except ValidationError as exc:
            raise MalformedResponseError(
                f"Record {index} under {items_key!r} is missing required fields",
                cause=exc,
            ) from exc
    return items


def fetch_catalog_items(
    url: str = DEFAULT_API_URL,
    items_key: str = DEFAULT_ITEMS_KEY,
    timeout: Optional[float] = None,
) -> List[CatalogItem]:
    """Fetch the remote listing and return its items in server order."""
    data = _http_get_json(url, timeout=timeout)
    items = parse_catalog_payload(data, items_key=items_key)
    logger.debug("Fetched %d catalog items from %s", len(items), url)
    return items
