import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI

from app.db.couchdb import ensure_database
from app.routers import posts
from app.settings import settings

# Configure logging
logging.basicConfig(
    level=getattr(logging, settings.LOG_LEVEL.upper()),
    format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)

app = FastAPI(title="Blog Posts API", description="CRUD API for blog posts")


@asynccontextmanager
async def lifespan(app: FastAPI):
    ensure_database(settings.COUCHDB_DATABASE)
    logger.info(f"Using CouchDB database {settings.COUCHDB_DATABASE}")

    try:
        yield
    finally:
        logger.info("Blog Posts API shutting down")


app.router.lifespan_context = lifespan

app.include_router(posts.router)


@app.get("/")
async def root():
    return {"message": "Blog Posts API is running"}
