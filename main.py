from readgraph.config import get_settings
from readgraph.data.catalog import Status
from readgraph.data.sample_data import build_demo_catalog_medium
from readgraph.evaluation.profiler import PerformanceProfiler
from readgraph.observability import setup_logging
from readgraph.recommender.engine import RecommenderEngine


def run_demo(user_name: str, k_neighbours: int) -> None:
    catalog = build_demo_catalog_medium()
    engine = RecommenderEngine(catalog)
    profiler = PerformanceProfiler()

    profile = profiler.time_function(
        engine.recommend_for_user,
        target_user=user_name,
        k_neighbours=k_neighbours,
    )
    recommendation = profile.result

    print(
        f"\nRecommendations using kNN algorithm "
        f"(k = {k_neighbours}, time = {profile.elapsed_ms:.4f} ms):"
    )
    if recommendation.status is Status.NOT_FOUND:
        print("  User not found.")
    elif not recommendation.books:
        print("  (no recommendations)")
    else:
        for title in recommendation.books:
            print(f"  {title}")

    profile = profiler.time_function(engine.find_repeated_readers)
    print(
        f"\nUsers who share a book with another reader "
        f"(time = {profile.elapsed_ms:.4f} ms):"
    )
    for reader in sorted(profile.result):
        print(f"  {reader}")


def main() -> None:
    settings = get_settings()
    setup_logging(settings.log_level, settings.log_format)

    user_name = input("Enter your username: ").strip()
    run_demo(user_name, settings.default_k_neighbours)


if __name__ == "__main__":
    main()
