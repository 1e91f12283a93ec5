import logging
import sys

from app.db.couchdb import ensure_database
from app.repos.posts_repo import CouchPostsRepo
from app.seed import seed_posts
from app.settings import settings

logging.basicConfig(
    level=getattr(logging, settings.LOG_LEVEL.upper()),
    format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)

if __name__ == "__main__":
    count = int(sys.argv[1]) if len(sys.argv) > 1 else 10
    try:
        repo = CouchPostsRepo(ensure_database(settings.COUCHDB_DATABASE))
        docs = seed_posts(repo, count)
        logger.info(f"Seeded {len(docs)} posts into {settings.COUCHDB_DATABASE}.")
    except Exception as e:
        logger.error(f"Seeding failed: {e}", exc_info=True)
        sys.exit(1)
