"""
Pydantic schema definitions for the catalog module.

The ``CatalogItem`` model captures the three fields the remote meal
listing exposes for each record and that a list row needs: an
identifier, a display name and a thumbnail URL. ``CatalogState`` is
the immutable snapshot held by ``CatalogStore``; every mutation of the
store publishes a new snapshot instead of editing the current one.
``CatalogView`` is what the presentation routes return once the state
has been turned into "show a spinner", "show an error" or "show a list".
"""

from typing import List, Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field, computed_field
from typing_extensions import Literal


class CatalogItem(BaseModel):
    """A single catalog record.

    The wire format uses TheMealDB key names (``idMeal``, ``strMeal``,
    ``strMealThumb``); they are accepted on input only, so serialised
    items use the Python field names. Values are passed through as-is.
    Numbers are accepted in their string form, anything missing or
    ``null`` fails validation.
    """

    model_config = ConfigDict(
        frozen=True,
        populate_by_name=True,
        coerce_numbers_to_str=True,
    )

    id: str = Field(validation_alias="idMeal")
    display_name: str = Field(validation_alias="strMeal")
    image_url: str = Field(validation_alias="strMealThumb")


class CatalogState(BaseModel):
    """Observable state of a ``CatalogStore``.

    ``error`` and ``error_kind`` describe the most recent failed fetch
    and are cleared whenever a new fetch starts. A failed refresh keeps
    the previous ``items``; ``error_visible`` tells the presentation
    layer whether the failure should replace the list on screen.
    """

    model_config = ConfigDict(frozen=True)

    items: Tuple[CatalogItem, ...] = ()
    is_loading: bool = False
    error: Optional[str] = None
    error_kind: Optional[str] = None
    query: str = ""

    @computed_field  # type: ignore[misc]
    @property
    def error_visible(self) -> bool:
        return self.error is not None and not self.items


ViewMode = Literal["loading", "error", "list"]


class CatalogView(BaseModel):
    """What the presentation layer should render for the current state."""

    mode: ViewMode
    message: Optional[str] = None
    retry_label: Optional[str] = None
    refreshing: bool = False
    query: str = ""
    category: str = ""
    items: List[CatalogItem] = Field(default_factory=list)
    # Only set in "list" mode when the filter matched nothing.
    empty_message: Optional[str] = None


class QueryUpdate(BaseModel):
    """Request body for ``PUT /query``."""

    q: str = ""
