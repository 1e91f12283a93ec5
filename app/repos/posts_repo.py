from typing import List, Optional

import pycouchdb

POST_DOC_TYPE = "blog_post"


class CouchPostsRepo:
    def __init__(self, couch_db):
        self.db = couch_db

    def list_post_docs(self) -> List[dict]:
        all_docs = [row.get("doc", row) for row in self.db.all(include_docs=True)]
        return [doc for doc in all_docs if self._is_post(doc)]

    def count_post_docs(self) -> int:
        return len(self.list_post_docs())

    def get_post_doc(self, post_id: str) -> Optional[dict]:
        # underscore ids are reserved for CouchDB endpoints and design docs
        if not post_id or post_id.startswith("_"):
            return None
        try:
            doc = self.db.get(post_id)
        except pycouchdb.exceptions.NotFound:
            return None
        return doc if self._is_post(doc) else None

    def save_post_doc(self, doc: dict) -> dict:
        return self.db.save({**doc, "type": POST_DOC_TYPE})

    def delete_post_doc(self, post_id: str) -> bool:
        doc = self.get_post_doc(post_id)
        if doc is None:
            return False
        try:
            self.db.delete(doc)
        except pycouchdb.exceptions.NotFound:
            return False
        return True

    @staticmethod
    def _is_post(doc: dict | None) -> bool:
        if not doc:
            return False
        return doc.get("type") == POST_DOC_TYPE and not doc.get(
            "_id", ""
        ).startswith("_design/")
