from fastapi import Depends

from app.db.couchdb import get_couch
from app.repos.posts_repo import CouchPostsRepo
from app.services.posts_service import PostsService


def get_posts_repo(couch_db=Depends(get_couch)):
    return CouchPostsRepo(couch_db)


def get_posts_service(repo=Depends(get_posts_repo)):
    return PostsService(repo=repo)
