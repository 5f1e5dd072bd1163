import logging
from enum import Enum
from typing import Dict, FrozenSet, List, Set

logger = logging.getLogger(__name__)


class Status(str, Enum):
    """Outcome of a catalog mutation or lookup."""

    OK = "ok"
    DUPLICATE = "duplicate"
    NOT_FOUND = "not_found"


class Catalog:
    """
    Stores books, users and the "has read" relation between them.

    Internally:
        _books[title] = set of user names who read it
        _users[name]  = set of book titles the user read

    Both mappings describe the same relation, so
    ``title in _users[name]`` holds exactly when ``name in _books[title]``.
    Registration adds empty entries; only ``record_read`` changes the
    relation, and it always writes both sides.
    """

    def __init__(self) -> None:
        self._books: Dict[str, Set[str]] = {}
        self._users: Dict[str, Set[str]] = {}

    # ----- Registration -----

    def register_book(self, title: str) -> Status:
        if title in self._books:
            logger.warning("Book already exists: %s", title)
            return Status.DUPLICATE

        self._books[title] = set()
        return Status.OK

    def register_user(self, name: str) -> Status:
        if name in self._users:
            logger.warning("User already exists: %s", name)
            return Status.DUPLICATE

        self._users[name] = set()
        logger.info("User added: %s", name)
        return Status.OK

    def has_book(self, title: str) -> bool:
        return title in self._books

    def has_user(self, name: str) -> bool:
        return name in self._users

    @property
    def book_count(self) -> int:
        return len(self._books)

    @property
    def user_count(self) -> int:
        return len(self._users)

    def books(self) -> List[str]:
        return sorted(self._books)

    def users(self) -> List[str]:
        return sorted(self._users)

    # ----- Reading relation -----

    def record_read(self, user_name: str, title: str) -> Status:
        """
        Record that ``user_name`` has read ``title``.

        Both entities must already be registered. If either is missing
        nothing is written and NOT_FOUND is returned.
        """
        if user_name not in self._users or title not in self._books:
            logger.warning(
                "User or book not found: user=%r book=%r", user_name, title
            )
            return Status.NOT_FOUND

        self._users[user_name].add(title)
        self._books[title].add(user_name)
        return Status.OK

    def books_read(self, user_name: str) -> FrozenSet[str]:
        return frozenset(self._users.get(user_name, ()))

    def readers_of(self, title: str) -> FrozenSet[str]:
        return frozenset(self._books.get(title, ()))

    def reader_count(self, title: str) -> int:
        return len(self._books.get(title, ()))

    def read_sets(self) -> Dict[str, FrozenSet[str]]:
        """Snapshot of every user's read-set, keyed by user name."""
        return {name: frozenset(books) for name, books in self._users.items()}
