import argparse
import sys
from typing import List, Optional

from movie_recommender.domain.exceptions import DomainError, NotFoundError
from movie_recommender.infrastructure.config.dependencies import (
    available_strategies,
    get_recommendation_engine,
    get_settings,
)
from movie_recommender.infrastructure.logging.logger import setup_logging


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="movie-recommender", description="Recommend movies similar to a title")
    parser.add_argument("title", nargs="?", help="seed movie title")
    parser.add_argument("--strategy", type=str, default=None, help="filter strategy (default from settings)")
    parser.add_argument("--top-k", dest="top_k", type=int, default=None)
    parser.add_argument("--list-strategies", action="store_true")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.list_strategies:
        for name in available_strategies():
            print(name)
        return 0
    if args.title is None:
        parser.error("title is required")

    try:
        settings = get_settings()
        setup_logging(settings.log_level)
        engine = get_recommendation_engine(strategy=args.strategy, settings=settings, top_k=args.top_k)
        recommendations = engine.recommend(args.title)
    except NotFoundError as e:
        print(f"error: {e}", file=sys.stderr)
        return 1
    except DomainError as e:
        print(f"error: {e}", file=sys.stderr)
        return 2

    for title in recommendations:
        print(title)
    return 0


if __name__ == "__main__":
    sys.exit(main())
