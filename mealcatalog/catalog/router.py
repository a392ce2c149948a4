"""
Route definitions for the catalogue API.

Endpoints under /api/catalog:
- GET  /meals    : what to render now (loading, error or filtered list)
- PUT  /query    : change the search text, no network call
- POST /refresh  : pull-to-refresh / retry, refetches the listing
- GET  /state    : raw store snapshot for debugging
"""

from __future__ import annotations

from typing import Sequence

from fastapi import APIRouter, Body, Depends, HTTPException, Request

from ..config import Settings, get_settings
from .schemas import CatalogItem, CatalogState, CatalogView, QueryUpdate
from .store import CatalogStore, filter_items


LOADING_MESSAGE = "Carregando receitas de frutos do mar..."
RETRY_LABEL = "Tentar Novamente"
EMPTY_MESSAGE = 'Nenhum resultado encontrado para "{query}".'


def build_view(
    state: CatalogState,
    filtered: Sequence[CatalogItem],
    category: str = "Seafood",
) -> CatalogView:
    """Decide what the screen shows for ``state``.

    The spinner only replaces the list on the first load; once items
    exist a refresh is reported through ``refreshing`` instead. Errors
    are shown only when there is nothing else to show.
    """
    if state.is_loading and not state.items:
        return CatalogView(mode="loading", message=LOADING_MESSAGE, refreshing=True, query=state.query)

    if state.error_visible:
        return CatalogView(
            mode="error",
            message=state.error,
            retry_label=RETRY_LABEL,
            query=state.query,
        )

    return CatalogView(
        mode="list",
        refreshing=state.is_loading,
        query=state.query,
        category=category,
        items=list(filtered),
        empty_message=None if filtered else EMPTY_MESSAGE.format(query=state.query),
    )


def get_store(request: Request) -> CatalogStore:
    store = getattr(request.app.state, "catalog_store", None)
    if store is None:
        raise HTTPException(status_code=503, detail="Catalog not mounted yet")
    return store


router = APIRouter(prefix="/api/catalog", tags=["catalog"])


def _current_view(store: CatalogStore, settings: Settings) -> CatalogView:
    # one snapshot for both the flags and the filter
    state = store.state
    return build_view(state, filter_items(state.items, state.query), category=settings.category)


@router.get("/meals", response_model=CatalogView)
def list_meals(
    store: CatalogStore = Depends(get_store),
    settings: Settings = Depends(get_settings),
) -> CatalogView:
    return _current_view(store, settings)


@router.put("/query", response_model=CatalogView)
def update_query(
    body: QueryUpdate = Body(...),
    store: CatalogStore = Depends(get_store),
    settings: Settings = Depends(get_settings),
) -> CatalogView:
    store.set_query(body.q)
    return _current_view(store, settings)


@router.post("/refresh", response_model=CatalogView)
def refresh(
    store: CatalogStore = Depends(get_store),
    settings: Settings = Depends(get_settings),
) -> CatalogView:
    """Refetch the listing and return the settled view.

    Always answers 200: a failed refresh shows up in the view (or not,
    when older items are still available) rather than as an HTTP error.
    """
    store.fetch_catalog()
    return _current_view(store, settings)


@router.get("/state", response_model=CatalogState)
def debug_state(store: CatalogStore = Depends(get_store)) -> CatalogState:
    return store.state
