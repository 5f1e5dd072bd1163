from typing import AbstractSet, Dict, Mapping

# read_sets[user_name] = set of book titles the user has read
ReadSets = Mapping[str, AbstractSet[str]]


def jaccard_similarity(read_sets: ReadSets, user1: str, user2: str) -> float:
    """
    Jaccard similarity between two users based on the books they read.

      J(A, B) = |A ∩ B| / |A ∪ B|

    Two empty read-sets have an empty union and score 0.0.
    """
    set1 = read_sets.get(user1, frozenset())
    set2 = read_sets.get(user2, frozenset())

    common = len(set1 & set2)
    union = len(set1) + len(set2) - common

    if union == 0:
        return 0.0

    return common / union


def rank_similar_users(read_sets: ReadSets, target_user: str) -> Dict[str, float]:
    """
    Similarity between target_user and every other user.

    Users with a score of 0 are kept, the target itself is not.
    """
    similarities: Dict[str, float] = {}

    for user_id in read_sets:
        if user_id == target_user:
            continue

        similarities[user_id] = jaccard_similarity(read_sets, target_user, user_id)

    return similarities
