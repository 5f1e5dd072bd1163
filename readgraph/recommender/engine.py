import logging
from dataclasses import dataclass, field
from typing import Dict, List, Optional, Set, Tuple

from readgraph.data.catalog import Catalog, Status
from readgraph.recommender.repeated_readers import find_repeated_readers
from readgraph.recommender.similarity import rank_similar_users

logger = logging.getLogger(__name__)


@dataclass
class RecommendationResult:
    status: Status
    books: List[str] = field(default_factory=list)
    neighbours: List[Tuple[str, float]] = field(default_factory=list)


class RecommenderEngine:
    """
    User-based collaborative filtering over reading histories.

    - Jaccard similarity between users' read-sets.
    - Restricts to the top-k most similar users (kNN style).
    - Candidate books are ranked by how many neighbours read them.

    Ties are broken by name ascending, both for neighbours and for books,
    so results are reproducible.
    """

    def __init__(self, catalog: Catalog) -> None:
        self.catalog = catalog

    def _select_neighbours(
        self,
        similarities: Dict[str, float],
        k_neighbours: Optional[int],
    ) -> List[Tuple[str, float]]:
        neighbours = sorted(similarities.items(), key=lambda x: (-x[1], x[0]))

        if k_neighbours is not None:
            neighbours = neighbours[:k_neighbours]

        return neighbours

    def recommend_for_user(
        self,
        target_user: str,
        k_neighbours: Optional[int] = None,
    ) -> RecommendationResult:
        """
        Recommend books for target_user.

        :param target_user: user name to recommend for.
        :param k_neighbours: size of the neighbour pool; None uses every
            other user. Only the pool is bounded, the returned list is not.
        """
        if k_neighbours is not None and k_neighbours < 0:
            raise ValueError(f"k_neighbours must be >= 0, got {k_neighbours}")

        if not self.catalog.has_user(target_user):
            logger.warning("User not found: %s", target_user)
            return RecommendationResult(status=Status.NOT_FOUND)

        read_sets = self.catalog.read_sets()

        # 1) Similarity to all other users, 2) top-k of them
        similarities = rank_similar_users(read_sets, target_user)
        neighbours = self._select_neighbours(similarities, k_neighbours)
        logger.debug("Neighbours for %s: %s", target_user, neighbours)

        # 3) Count neighbour votes for books the target hasn't read
        target_books = read_sets[target_user]
        votes: Dict[str, int] = {}

        for neighbour_id, _ in neighbours:
            for book in read_sets[neighbour_id]:
                if book not in target_books:
                    votes[book] = votes.get(book, 0) + 1

        # 4) Most votes first
        ranked = sorted(votes.items(), key=lambda x: (-x[1], x[0]))

        return RecommendationResult(
            status=Status.OK,
            books=[book for book, _ in ranked],
            neighbours=neighbours,
        )

    def find_repeated_readers(self) -> Set[str]:
        return find_repeated_readers(self.catalog)
