"""Generators for sample blog posts, used to seed a database for demos and tests."""

import datetime
import logging
from typing import List

from faker import Faker

logger = logging.getLogger(__name__)

fake = Faker()

TITLES = [
    "Good Coffee, Good Morning",
    "Great Coffee, Great Morning",
    "Bad Coffee, Bad Morning",
    "Worst Coffee, Worst Morning",
    "Perfect Morning, Perfect Coffee",
]

AUTHORS = [
    {"firstName": "Ira", "lastName": "Glass"},
    {"firstName": "Chuck", "lastName": "Norris"},
    {"firstName": "George", "lastName": "Lucas"},
]

CONTENT = (
    "Lorem ipsum dolor sit amet, consectetur adipiscing elit, sed do eiusmod "
    "tempor incididunt ut labore et dolore magna aliqua. Ut enim ad minim veniam, "
    "quis nostrud exercitation ullamco laboris nisi ut aliquip ex ea commodo "
    "consequat. Duis aute irure dolor in reprehenderit in voluptate velit esse "
    "cillum dolore eu fugiat nulla pariatur. Excepteur sint occaecat cupidatat non "
    "proident, sunt in culpa qui officia deserunt mollit anim id est laborum."
)


def generate_title() -> str:
    return fake.random_element(TITLES)


def generate_author() -> dict:
    return dict(fake.random_element(AUTHORS))


def generate_created() -> datetime.datetime:
    """A random moment within the past year."""
    return fake.past_datetime(start_date="-365d", tzinfo=datetime.timezone.utc)


def generate_post_data() -> dict:
    """Post payload shaped like a create request body."""
    return {
        "author": generate_author(),
        "title": generate_title(),
        "content": CONTENT,
        "created": generate_created().isoformat(),
    }


def seed_posts(repo, count: int = 10) -> List[dict]:
    logger.info(f"Seeding {count} blog posts")
    return [repo.save_post_doc(generate_post_data()) for _ in range(count)]
