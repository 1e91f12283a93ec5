import logging
from typing import Optional

import pycouchdb

from app.settings import settings

logger = logging.getLogger(__name__)


def get_server() -> pycouchdb.Server:
    return pycouchdb.Server(settings.couchdb_url)


def get_couch():
    """
    Open the blog posts database handle.
    Called at runtime to avoid import-time connections.
    """
    return get_server().database(settings.COUCHDB_DATABASE)


def ensure_database(name: Optional[str] = None):
    """Return the named database, creating it first if it does not exist."""
    name = name or settings.COUCHDB_DATABASE
    server = get_server()
    try:
        return server.database(name)
    except pycouchdb.exceptions.NotFound:
        logger.info(f"Creating CouchDB database {name}")
        return server.create(name)


def drop_database(name: str) -> None:
    logger.warning(f"Deleting CouchDB database {name}")
    try:
        get_server().delete(name)
    except pycouchdb.exceptions.NotFound:
        logger.info(f"CouchDB database {name} did not exist")
