import logging
from typing import Set

from readgraph.data.catalog import Catalog

logger = logging.getLogger(__name__)


def find_repeated_readers(catalog: Catalog) -> Set[str]:
    """
    Users who share at least one book with another reader.

    A book's reader count is the size of its reader-set, which the catalog
    keeps in step with every user's read-set. A user qualifies on the first
    book found with more than one reader.
    """
    repeated: Set[str] = set()

    for user_id in catalog.users():
        if any(catalog.reader_count(book) > 1 for book in catalog.books_read(user_id)):
            repeated.add(user_id)

    logger.debug("Found %d repeated readers", len(repeated))
    return repeated
