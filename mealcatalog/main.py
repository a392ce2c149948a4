# mealcatalog/main.py
import asyncio
import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI

from .catalog import catalog_router
from .catalog.store import CatalogStore
from .config import Settings, get_settings


logger = logging.getLogger(__name__)


def build_store(settings: Settings) -> CatalogStore:
    # The constructor runs the first fetch.
    return CatalogStore(
        url=settings.api_url,
        items_key=settings.items_key,
        timeout=settings.timeout_seconds,
        error_message=settings.error_message,
    )


@asynccontextmanager
async def lifespan(app: FastAPI):
    settings = get_settings()
    logging.basicConfig(level=settings.log_level)
    # urllib blocks, keep it off the event loop
    app.state.catalog_store = await asyncio.to_thread(build_store, settings)
    logger.info("Catalogue mounted from %s", settings.api_url)
    yield
    app.state.catalog_store = None


app = FastAPI(
    title="Catálogo de Frutos do Mar",
    description=(
        "Service qui charge la liste des recettes de fruits de mer de "
        "TheMealDB et expose un filtre par nom, un rafraîchissement "
        "manuel et l'état de chargement."
    ),
    version="1.0.0",
    lifespan=lifespan,
)

app.include_router(catalog_router)


# 🔹 Route de base pour tester rapidement
@app.get("/")
def health_check():
    return {"status": "ok", "message": "FastAPI + TheMealDB live 🚀"}
