"""HTTP server with a single greeting route."""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI

from listing_crud.config.settings import Settings

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)

GREETING = {"message": "Hello Crud Node Express"}


@asynccontextmanager
async def lifespan(app: FastAPI):
    """FastAPI lifespan handler."""
    settings = Settings.load()
    logger.info(f"Server is listening on port {settings.port}")
    yield


app = FastAPI(title="Listing CRUD", lifespan=lifespan)


@app.get("/")
async def index():
    """Return the fixed greeting."""
    return GREETING


def main():
    """Entry point for running the server."""
    import uvicorn

    settings = Settings.load()
    uvicorn.run(
        "listing_crud.server:app",
        host=settings.host,
        port=settings.port,
        reload=False,
    )


if __name__ == "__main__":
    main()
