"""
Catalog package for the seafood meal catalogue.

This package holds the state store that loads the meal listing from
TheMealDB, the HTTP client it uses and the routes that let a front-end
read the current view, change the search text and trigger a refresh.
The store keeps everything in memory for the life of the process;
nothing is persisted.
"""

from .router import router as catalog_router  # noqa: F401
