import datetime
import logging
from typing import List

from app.schemas.blog import PostCreate, PostOut, PostUpdate

logger = logging.getLogger(__name__)


class PostNotFoundError(Exception):
    def __init__(self, post_id: str):
        super().__init__(f"Post {post_id} not found")
        self.post_id = post_id


class PostsService:
    def __init__(self, repo):
        self.repo = repo

    def list_posts(self) -> List[PostOut]:
        posts = [serialize_post(doc) for doc in self.repo.list_post_docs()]
        posts.sort(key=_created_sort_key, reverse=True)
        return posts

    def get_post(self, post_id: str) -> PostOut:
        doc = self.repo.get_post_doc(post_id)
        if not doc:
            raise PostNotFoundError(post_id)
        return serialize_post(doc)

    def create_post(self, payload: PostCreate) -> PostOut:
        created = payload.created or datetime.datetime.now(datetime.timezone.utc)
        doc = {
            "author": payload.author.model_dump(),
            "title": payload.title,
            "content": payload.content,
            "created": _convert_date(created),
        }
        saved = self.repo.save_post_doc(doc)
        logger.info(f"Created post {saved['_id']}")
        return serialize_post(saved)

    def update_post(self, post_id: str, payload: PostUpdate) -> PostOut:
        doc = self.repo.get_post_doc(post_id)
        if not doc:
            raise PostNotFoundError(post_id)

        changes = payload.model_dump(exclude_unset=True, exclude={"id"})
        # explicit nulls would drop required fields from the stored doc
        changes = {
            field: value for field, value in changes.items() if value is not None
        }
        if "created" in changes:
            changes["created"] = _convert_date(changes["created"])

        saved = self.repo.save_post_doc({**doc, **changes})
        logger.info(f"Updated post {post_id} fields: {sorted(changes)}")
        return serialize_post(saved)

    def delete_post(self, post_id: str) -> None:
        if self.repo.delete_post_doc(post_id):
            logger.info(f"Deleted post {post_id}")
        else:
            logger.info(f"Delete requested for missing post {post_id}")


def serialize_post(doc: dict) -> PostOut:
    """Render a stored post document in its wire form."""
    return PostOut(
        id=doc["_id"],
        title=doc["title"],
        content=doc["content"],
        author=format_author(doc["author"]),
        created=doc["created"],
    )


def _created_sort_key(post: PostOut) -> datetime.datetime:
    created = post.created
    if created.tzinfo is None:
        return created.replace(tzinfo=datetime.timezone.utc)
    return created


def format_author(author: dict) -> str:
    return f"{author['firstName']} {author['lastName']}"


def _convert_date(value):
    if isinstance(value, datetime.datetime):
        # naive timestamps are stored as UTC
        if value.tzinfo is None:
            value = value.replace(tzinfo=datetime.timezone.utc)
        return value.isoformat()
    if isinstance(value, datetime.date):
        return value.isoformat()
    return value
