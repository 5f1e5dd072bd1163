"""Tests for RecommenderEngine: neighbour selection, vote ranking, not-found handling."""

import pytest

from readgraph.data.catalog import Status
from readgraph.data.sample_data import build_catalog, build_demo_catalog_medium
from readgraph.recommender.engine import RecommenderEngine


def test_recommend_picks_most_similar_neighbour(engine):
    result = engine.recommend_for_user("X", k_neighbours=1)
    assert result.status is Status.OK
    assert [name for name, _ in result.neighbours] == ["Y"]
    assert result.neighbours[0][1] == pytest.approx(2 / 3)
    assert result.books == ["C"]


def test_recommend_counts_votes_across_neighbours(engine):
    result = engine.recommend_for_user("X", k_neighbours=2)
    assert [name for name, _ in result.neighbours] == ["Y", "Z"]
    # both Y and Z read C
    assert result.books == ["C"]


def test_k_larger_than_pool_uses_everyone(engine):
    result = engine.recommend_for_user("X", k_neighbours=50)
    assert len(result.neighbours) == 2


def test_k_none_uses_everyone(engine):
    result = engine.recommend_for_user("Z", k_neighbours=None)
    assert [name for name, _ in result.neighbours] == ["Y", "X"]
    assert result.books == ["A", "B"]


def test_k_zero_gives_no_recommendations(engine):
    result = engine.recommend_for_user("X", k_neighbours=0)
    assert result.status is Status.OK
    assert result.neighbours == []
    assert result.books == []


def test_negative_k_is_rejected(engine):
    with pytest.raises(ValueError):
        engine.recommend_for_user("X", k_neighbours=-1)


def test_unknown_user_is_not_found(engine, caplog):
    result = engine.recommend_for_user("Nobody", k_neighbours=3)
    assert result.status is Status.NOT_FOUND
    assert result.books == []
    assert result.neighbours == []
    assert "User not found" in caplog.text


def test_nothing_new_to_recommend(engine):
    # Y has read every book
    result = engine.recommend_for_user("Y", k_neighbours=2)
    assert result.status is Status.OK
    assert result.books == []


def test_ties_broken_by_name():
    catalog = build_catalog(
        books=["A", "B", "C", "D"],
        reads=[("T", "A"), ("Mia", "A"), ("Mia", "D"), ("Bea", "A"), ("Bea", "C"), ("Ned", "B")],
    )
    engine = RecommenderEngine(catalog)

    result = engine.recommend_for_user("T", k_neighbours=1)
    assert [name for name, _ in result.neighbours] == ["Bea"]
    assert result.books == ["C"]

    result = engine.recommend_for_user("T", k_neighbours=2)
    assert [name for name, _ in result.neighbours] == ["Bea", "Mia"]
    assert result.books == ["C", "D"]


def test_books_ranked_by_votes_then_title():
    catalog = build_catalog(
        books=["A", "B", "C", "D"],
        reads=[
            ("T", "A"),
            ("U1", "A"), ("U1", "D"), ("U1", "C"),
            ("U2", "A"), ("U2", "D"),
            ("U3", "A"), ("U3", "B"),
        ],
    )
    result = RecommenderEngine(catalog).recommend_for_user("T", k_neighbours=3)
    assert result.books == ["D", "B", "C"]


def test_never_recommends_read_books_or_self():
    catalog = build_demo_catalog_medium()
    engine = RecommenderEngine(catalog)

    for user_id in catalog.users():
        result = engine.recommend_for_user(user_id, k_neighbours=3)
        assert user_id not in [name for name, _ in result.neighbours]
        assert not set(result.books) & catalog.books_read(user_id)


def test_larger_k_grows_pool_and_keeps_books():
    catalog = build_demo_catalog_medium()
    engine = RecommenderEngine(catalog)

    for user_id in catalog.users():
        previous = engine.recommend_for_user(user_id, k_neighbours=0)
        for k in range(1, 6):
            current = engine.recommend_for_user(user_id, k_neighbours=k)
            assert current.neighbours[: len(previous.neighbours)] == previous.neighbours
            assert set(previous.books) <= set(current.books)
            previous = current


def test_results_are_reproducible():
    first = RecommenderEngine(build_demo_catalog_medium()).recommend_for_user("Shreya Bastia", 2)
    second = RecommenderEngine(build_demo_catalog_medium()).recommend_for_user("Shreya Bastia", 2)
    assert first == second


def test_idle_user_gets_zero_scores():
    catalog = build_demo_catalog_medium()
    result = RecommenderEngine(catalog).recommend_for_user("Shreyash Satyananda Kar", 2)
    assert result.status is Status.OK
    assert all(score == 0.0 for _, score in result.neighbours)
