import copy
import uuid

import pycouchdb
import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient

from app import dependencies as deps
from app.repos.posts_repo import CouchPostsRepo
from app.routers import posts
from app.seed import seed_posts


class FakeCouchDB:
    """
    Minimal in-memory CouchDB stand-in.
    Set track_calls=True to record the order of calls.
    """

    def __init__(self, docs: dict | None = None, track_calls: bool = False):
        self.docs = docs if docs is not None else {}
        self.track_calls = track_calls
        self.calls = []
        self._revs = 0

    def _record(self, call: str):
        if self.track_calls:
            self.calls.append(call)

    def get(self, doc_id: str) -> dict:
        self._record(f"get({doc_id})")
        if doc_id not in self.docs:
            raise pycouchdb.exceptions.NotFound(doc_id)
        return copy.deepcopy(self.docs[doc_id])

    def all(self, include_docs: bool = True):
        self._record(f"all(include_docs={include_docs})")
        for doc_id in sorted(self.docs):
            row = {"id": doc_id, "key": doc_id, "value": {}}
            if include_docs:
                row["doc"] = copy.deepcopy(self.docs[doc_id])
            yield row

    def save(self, doc: dict) -> dict:
        self._record("save")
        saved = copy.deepcopy(doc)
        saved.setdefault("_id", uuid.uuid4().hex)
        current = self.docs.get(saved["_id"])
        if current is not None and current.get("_rev") != saved.get("_rev"):
            raise pycouchdb.exceptions.Conflict(saved["_id"])
        self._revs += 1
        saved["_rev"] = f"{self._revs}-{uuid.uuid4().hex}"
        self.docs[saved["_id"]] = saved
        return copy.deepcopy(saved)

    def delete(self, doc_or_id):
        doc_id = doc_or_id["_id"] if isinstance(doc_or_id, dict) else doc_or_id
        self._record(f"delete({doc_id})")
        if doc_id not in self.docs:
            raise pycouchdb.exceptions.NotFound(doc_id)
        del self.docs[doc_id]


class FakeRepo:
    """
    Minimal repo stand-in used in service tests.
    """

    def __init__(self, docs=None):
        self.docs = {doc["_id"]: doc for doc in docs or []}
        self.saved = []
        self.deleted = []

    def list_post_docs(self):
        return list(self.docs.values())

    def count_post_docs(self):
        return len(self.docs)

    def get_post_doc(self, post_id):
        return self.docs.get(post_id)

    def save_post_doc(self, doc):
        saved = {"type": "blog_post", **doc}
        saved.setdefault("_id", f"post-{len(self.docs) + 1}")
        self.docs[saved["_id"]] = saved
        self.saved.append(saved)
        return saved

    def delete_post_doc(self, post_id):
        self.deleted.append(post_id)
        return self.docs.pop(post_id, None) is not None


class FakePostsService:
    """
    Minimal posts service stand-in for router tests.
    """

    def __init__(self, list_posts_return=None, get_post_return=None):
        self._list_posts_return = list_posts_return or []
        self._get_post_return = get_post_return
        self.calls = []

    def list_posts(self):
        return self._list_posts_return

    def get_post(self, post_id: str):
        self.calls.append(("get", post_id))
        return self._get_post_return

    def create_post(self, payload):
        self.calls.append(("create", payload))
        return self._get_post_return

    def update_post(self, post_id, payload):
        self.calls.append(("update", post_id, payload))
        return self._get_post_return

    def delete_post(self, post_id):
        self.calls.append(("delete", post_id))


def make_post_doc(post_id="post-1", **overrides):
    doc = {
        "_id": post_id,
        "_rev": "1-abc",
        "type": "blog_post",
        "author": {"firstName": "Ira", "lastName": "Glass"},
        "title": "Good Coffee, Good Morning",
        "content": "Lorem ipsum",
        "created": "2024-03-01T08:30:00+00:00",
    }
    doc.update(overrides)
    return doc


@pytest.fixture
def couch_db():
    return FakeCouchDB()


@pytest.fixture
def seeded_couch(couch_db):
    seed_posts(CouchPostsRepo(couch_db), 10)
    return couch_db


@pytest.fixture
def client(seeded_couch):
    """Posts router wired to the real service and repo over a fake CouchDB."""
    app = FastAPI()
    app.dependency_overrides[deps.get_couch] = lambda: seeded_couch
    app.include_router(posts.router)
    return TestClient(app)
