import pytest

from readgraph.data.catalog import Catalog
from readgraph.data.sample_data import build_demo_catalog_small
from readgraph.recommender.engine import RecommenderEngine


@pytest.fixture
def catalog() -> Catalog:
    """X:{A,B}, Y:{A,B,C}, Z:{C}."""
    return build_demo_catalog_small()


@pytest.fixture
def engine(catalog) -> RecommenderEngine:
    return RecommenderEngine(catalog)


def assert_relation_consistent(catalog: Catalog) -> None:
    for user_id in catalog.users():
        for title in catalog.books_read(user_id):
            assert user_id in catalog.readers_of(title)
    for title in catalog.books():
        for user_id in catalog.readers_of(title):
            assert title in catalog.books_read(user_id)
