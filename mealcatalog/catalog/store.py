"""
State holder for the meal catalogue.

``CatalogStore`` owns one fetch lifecycle, the list of items from the
last successful fetch and the current search query. The state is an
immutable ``CatalogState`` snapshot; ``fetch_catalog()`` and
``set_query()`` are the only methods that publish a new one. Readers
always get a complete snapshot, even while a fetch is running in
another thread.
"""

from __future__ import annotations

import functools
import logging
import threading
from typing import Callable, Iterable, Optional, Sequence, Tuple

from ..config import DEFAULT_API_URL, DEFAULT_ERROR_MESSAGE, DEFAULT_ITEMS_KEY
from .errors import CatalogFetchError
from .schemas import CatalogItem, CatalogState
from .themealdb_service import fetch_catalog_items


logger = logging.getLogger(__name__)

Fetcher = Callable[[], Iterable[CatalogItem]]


def filter_items(items: Sequence[CatalogItem], query: str) -> Tuple[CatalogItem, ...]:
    """Return the items whose display name contains ``query``.

    Matching is a case-insensitive substring test (``str.casefold``) and
    the original order is kept. The query is not stripped, so an empty
    query matches everything while ``" "`` only matches names with a
    space in them.
    """
    needle = query.casefold()
    return tuple(item for item in items if needle in item.display_name.casefold())


class CatalogStore:
    """Fetch lifecycle, items and query for one catalogue screen.

    Parameters
    ----------
    url : str
        Listing endpoint. Ignored when ``fetch`` is given.
    items_key : str
        Name of the field wrapping the array of records.
    timeout : Optional[float]
        Transport timeout in seconds; ``None`` keeps the urllib default.
    error_message : str
        User-facing message stored in ``state.error`` after a failure.
    fetch : Optional[Callable]
        Zero-argument callable returning the items. Defaults to
        ``fetch_catalog_items`` bound to ``url``, ``items_key`` and
        ``timeout``. It should raise ``CatalogFetchError`` on failure.
    autoload : bool
        Run ``fetch_catalog()`` once from the constructor, the way the
        screen loads on mount.
    """

    def __init__(
        self,
        url: str = DEFAULT_API_URL,
        items_key: str = DEFAULT_ITEMS_KEY,
        timeout: Optional[float] = None,
        error_message: str = DEFAULT_ERROR_MESSAGE,
        fetch: Optional[Fetcher] = None,
        autoload: bool = True,
    ) -> None:
        if fetch is None:
            fetch = functools.partial(
                fetch_catalog_items, url=url, items_key=items_key, timeout=timeout
            )
        self._fetch = fetch
        self._error_message = error_message
        self._lock = threading.Lock()
        self._state = CatalogState()
        # Last failure with its cause, for diagnostics only.
        self.last_failure: Optional[CatalogFetchError] = None
        if autoload:
            self.fetch_catalog()

    @property
    def state(self) -> CatalogState:
        return self._state

    def _publish(self, **changes) -> CatalogState:
        with self._lock:
            self._state = self._state.model_copy(update=changes)
            return self._state

    def fetch_catalog(self) -> CatalogState:
        """Load the catalogue and return the settled state.

        Used both for the initial load and for refresh/retry. Failures
        never propagate: they are recorded in ``state.error`` and
        ``state.error_kind`` and the previous items are kept.
        ``is_loading`` is reset in a ``finally`` block so it cannot stay
        set, even if a custom fetcher raises something unexpected.
        Overlapping calls are not serialised; the last one to settle
        wins.
        """
        self._publish(is_loading=True, error=None, error_kind=None)
        logger.info("Fetching catalogue")
        items: Optional[Tuple[CatalogItem, ...]] = None
        failure: Optional[CatalogFetchError] = None
        try:
            items = tuple(self._fetch())
        except CatalogFetchError as exc:
            failure = exc
            self.last_failure = exc
            logger.error("Catalogue fetch failed (%s): %s", exc.kind, exc)
        finally:
            if failure is not None:
                settled = self._publish(
                    is_loading=False, error=self._error_message, error_kind=failure.kind
                )
            elif items is not None:
                settled = self._publish(is_loading=False, items=items)
            else:
                settled = self._publish(is_loading=False)
        if items is not None:
            logger.info("Catalogue loaded with %d items", len(items))
        return settled

    def set_query(self, q: str) -> CatalogState:
        """Replace the search query. Never triggers a fetch."""
        return self._publish(query=q)

    def filtered_items(self) -> Tuple[CatalogItem, ...]:
        snapshot = self._state
        return filter_items(snapshot.items, snapshot.query)
